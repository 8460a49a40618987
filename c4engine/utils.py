"""
utils.py - Constants, enumerations, exceptions and geometry helpers

This module provides the board constants, player encoding and the exception
types shared by the board model, the tactical layer and the search engine.
"""

from enum import Enum, IntEnum, auto
from functools import lru_cache
from typing import List, Tuple

import numpy as np

# Game constants
ROWS = 6
COLS = 7
CONNECT_N = 4  # Number of pieces in a row to win


class Player(IntEnum):
    """Players and cell states, using the flat board encoding 0/1/2."""
    EMPTY = 0
    ONE = 1    # PlayerA
    TWO = 2    # PlayerB


class GameResult(Enum):
    """Enumeration representing the state of a position."""
    IN_PROGRESS = auto()
    PLAYER_ONE_WIN = auto()
    PLAYER_TWO_WIN = auto()
    DRAW = auto()

    def is_game_over(self) -> bool:
        """Check if the game is over."""
        return self != GameResult.IN_PROGRESS


class Direction(Enum):
    """Enumeration representing window orientations."""
    HORIZONTAL = auto()
    VERTICAL = auto()
    DIAGONAL_DOWN = auto()  # top-left to bottom-right
    DIAGONAL_UP = auto()  # top-right to bottom-left


# Direction vectors (row, col); row 0 is the top of the board
DIRECTION_VECTORS = {
    Direction.HORIZONTAL: (0, 1),
    Direction.VERTICAL: (1, 0),
    Direction.DIAGONAL_DOWN: (1, 1),
    Direction.DIAGONAL_UP: (1, -1),
}


class ContractViolation(ValueError):
    """The caller broke the engine's input contract."""


class InvalidBoardError(ContractViolation):
    """Board snapshot has the wrong length or an unknown cell value."""


class InvalidPlayerError(ContractViolation):
    """Mover is not 1 or 2."""


class IllegalMoveError(ContractViolation):
    """Column out of range, or full when dropping (empty when lifting)."""


class InvalidSearchParameterError(ContractViolation):
    """Depth or time limit is not a positive integer."""


class BoardFullError(ContractViolation):
    """A move was requested on a board with no legal moves."""


def is_player(value) -> bool:
    """True for the two real players (1 and 2), False for EMPTY or anything else."""
    return isinstance(value, (int, np.integer)) and not isinstance(value, bool) \
        and value in (Player.ONE, Player.TWO)


def is_valid_position(row: int, col: int, rows: int = ROWS, cols: int = COLS) -> bool:
    """
    Check if a position is within the board boundaries.

    Args:
        row: Row index
        col: Column index
        rows: Board height
        cols: Board width

    Returns:
        True if position is valid, False otherwise
    """
    return 0 <= row < rows and 0 <= col < cols


def center_order(columns, cols: int = COLS) -> List[int]:
    """
    Sort columns by distance from the center column (center first).

    sorted() is stable, so equally distant columns keep their incoming order;
    for an increasing input the lower column wins the tie.
    """
    center = cols // 2
    return sorted(columns, key=lambda c: abs(c - center))


@lru_cache(maxsize=None)
def window_index(rows: int = ROWS, cols: int = COLS) -> np.ndarray:
    """
    Flat cell indices of every CONNECT_N window on a rows x cols board.

    Windows are listed in row-major order of their first cell, and for each
    cell in the order horizontal, vertical, diagonal down-right, diagonal
    down-left. The result has shape (n_windows, CONNECT_N) and is shared, so
    callers must not modify it.

    Args:
        rows: Board height
        cols: Board width

    Returns:
        Read-only integer array of flat indices
    """
    windows: List[Tuple[int, ...]] = []
    for row in range(rows):
        for col in range(cols):
            for dr, dc in DIRECTION_VECTORS.values():
                end_row = row + (CONNECT_N - 1) * dr
                end_col = col + (CONNECT_N - 1) * dc
                if not is_valid_position(end_row, end_col, rows, cols):
                    continue
                windows.append(tuple((row + i * dr) * cols + (col + i * dc)
                                     for i in range(CONNECT_N)))

    index = np.array(windows, dtype=np.intp).reshape(-1, CONNECT_N)
    index.setflags(write=False)
    return index


@lru_cache(maxsize=None)
def window_lines(rows: int = ROWS, cols: int = COLS) -> Tuple[Tuple[int, ...], ...]:
    """window_index() as plain int tuples, for scans that stay out of numpy."""
    return tuple(tuple(line) for line in window_index(rows, cols).tolist())


@lru_cache(maxsize=None)
def center_columns(cols: int = COLS) -> Tuple[int, ...]:
    """Every column of a cols-wide board, center first (see center_order)."""
    return tuple(center_order(range(cols), cols))
