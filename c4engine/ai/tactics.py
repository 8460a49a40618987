"""
tactics.py - One-ply tactical shortcuts run before the full search

Catches the two most common blunders regardless of depth or time budget:
taking an immediate win, and blocking an immediate opponent win.

Blocking picks a single column. If the opponent has two or more immediate
winning columns, blocking one of them cannot stop the other; the shortcut
still answers with the threat closest to the center and leaves it there.
"""

from dataclasses import dataclass
from typing import List, Optional

from c4engine.debug import debug
from c4engine.game.board import Board
from c4engine.game.rules import opponent
from c4engine.utils import center_order

WIN = "win"
BLOCK = "block"


@dataclass(frozen=True)
class TacticalMove:
    """A column chosen by the shortcut layer and why."""
    column: int
    kind: str  # WIN or BLOCK


def winning_columns(board: Board, player: int) -> List[int]:
    """
    Columns where dropping a piece wins on the spot for player.

    Each probe runs on a throw-away copy of the board.

    Args:
        board: Current position
        player: Player to test (1 or 2)

    Returns:
        Winning columns in increasing order
    """
    return [col for col in board.legal_moves()
            if board.with_move(col, player).winner() == player]


def find_immediate_win(board: Board, mover: int) -> Optional[int]:
    """Lowest-indexed column that wins immediately for mover, or None."""
    for col in board.legal_moves():
        if board.with_move(col, mover).winner() == mover:
            return col
    return None


def find_forced_block(board: Board, mover: int) -> Optional[int]:
    """
    Column that blocks an immediate opponent win, or None.

    Among several opponent winning columns the one nearest the center is
    chosen; equally distant columns resolve to the lower index.
    """
    threats = winning_columns(board, opponent(mover))
    if not threats:
        return None
    if len(threats) > 1:
        debug.debug(f"Opponent has {len(threats)} immediate wins {threats}; only one can be blocked",
                    "tactics")
    return center_order(threats, board.cols)[0]


def tactical_move(board: Board, mover: int) -> Optional[TacticalMove]:
    """
    Immediate win if one exists, else a forced block, else None.

    Args:
        board: Current position
        mover: Player to move

    Returns:
        TacticalMove, or None when the full search should decide
    """
    column = find_immediate_win(board, mover)
    if column is not None:
        debug.debug(f"Immediate win for player {mover} in column {column}", "tactics")
        return TacticalMove(column, WIN)

    column = find_forced_block(board, mover)
    if column is not None:
        debug.debug(f"Player {mover} blocks column {column}", "tactics")
        return TacticalMove(column, BLOCK)

    return None
