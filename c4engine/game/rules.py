"""
rules.py - Position classification and search-request validation

The engine is called with a raw board snapshot and a mover; this module turns
that input into a Board and rejects anything that breaks the calling contract
before any search work starts.
"""

import numbers
from typing import Iterable

from c4engine.debug import debug
from c4engine.utils import (ROWS, COLS, Player, GameResult, BoardFullError,
                            InvalidPlayerError, InvalidSearchParameterError, is_player)
from c4engine.game.board import Board


def opponent(mover: int) -> int:
    """The other player of a 1/2 mover."""
    return 3 - mover


def game_result(board: Board) -> GameResult:
    """
    Classify a position.

    Args:
        board: The board to inspect

    Returns:
        PLAYER_ONE_WIN / PLAYER_TWO_WIN if a four exists, DRAW for a full
        board without one, IN_PROGRESS otherwise
    """
    winner = board.winner()
    if winner == Player.ONE:
        return GameResult.PLAYER_ONE_WIN
    if winner == Player.TWO:
        return GameResult.PLAYER_TWO_WIN
    if board.is_full():
        return GameResult.DRAW
    return GameResult.IN_PROGRESS


def check_positive_int(name: str, value) -> int:
    """Reject anything that is not a strictly positive integer (bools included)."""
    if isinstance(value, bool) or not isinstance(value, numbers.Integral) or value <= 0:
        raise InvalidSearchParameterError(f"{name} must be a positive integer, got {value!r}")
    return int(value)


def validate_request(cells: Iterable[int], mover: int, max_depth: int, time_limit_ms: int,
                     rows: int = ROWS, cols: int = COLS) -> Board:
    """
    Validate a search request and build the board to search.

    Args:
        cells: Flat row-major board snapshot (0/1/2)
        mover: Player to move (1 or 2)
        max_depth: Maximum search depth
        time_limit_ms: Wall-clock budget in milliseconds
        rows: Board height
        cols: Board width

    Returns:
        A private Board built from the snapshot

    Raises:
        InvalidBoardError: malformed snapshot
        InvalidPlayerError: mover not in {1, 2}
        InvalidSearchParameterError: non-positive depth or time limit
        BoardFullError: no legal move exists
    """
    try:
        if not is_player(mover):
            raise InvalidPlayerError(f"Mover must be 1 or 2, got {mover!r}")
        check_positive_int("max_depth", max_depth)
        check_positive_int("time_limit_ms", time_limit_ms)

        board = cells.copy() if isinstance(cells, Board) else Board.from_cells(cells, rows, cols)
        if board.is_full():
            raise BoardFullError("No legal moves: a move was requested on a full board")
    except ValueError as e:
        debug.warning(f"Rejected search request: {e}", "rules")
        raise

    if board.winner() is not None:
        debug.warning(f"Search requested on a finished game (winner: {board.winner()})", "rules")

    return board
