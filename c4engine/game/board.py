"""
board.py - Flat board representation and column-drop mechanics

This module implements the Board class: a fixed-size, row-major grid stored as
a flat numpy array (row 0 is the top). It provides column drops with gravity,
undo of the top piece, legal-move generation and full-board win detection.
"""

import numbers
from typing import Iterable, List, Optional

import numpy as np

from c4engine.debug import debug
from c4engine.utils import (ROWS, COLS, Player, IllegalMoveError, InvalidBoardError,
                            InvalidPlayerError, center_columns, is_player, window_index,
                            window_lines)


class Board:
    """
    Represents a Connect Four style board.

    Cells hold 0 (empty), 1 (PlayerA) or 2 (PlayerB). Pieces only enter the
    grid through drop(), so a column never has an empty cell below a filled one.
    """

    def __init__(self, rows: int = ROWS, cols: int = COLS):
        """Initialize an empty board."""
        if rows < 1 or cols < 1:
            raise InvalidBoardError(f"Board dimensions must be positive, got {rows}x{cols}")
        self.rows = rows
        self.cols = cols
        self.cells = np.zeros(rows * cols, dtype=np.int8)
        self._windows = window_index(rows, cols)
        self._lines = window_lines(rows, cols)

    @classmethod
    def from_cells(cls, cells: Iterable[int], rows: int = ROWS, cols: int = COLS) -> 'Board':
        """
        Build a board from a flat row-major snapshot.

        The snapshot is copied, never referenced.

        Args:
            cells: Sequence of rows * cols values in {0, 1, 2}
            rows: Board height
            cols: Board width

        Returns:
            A new Board

        Raises:
            InvalidBoardError: wrong length or unknown cell values
        """
        board = cls(rows, cols)
        try:
            values = list(cells)
        except TypeError as e:
            raise InvalidBoardError(f"Board cells must be a flat sequence: {e}") from e

        if len(values) != rows * cols:
            raise InvalidBoardError(
                f"Board must have {rows * cols} cells for {rows}x{cols}, got {len(values)}")

        # No coercion: 1.7, "0" or True are rejected, not rounded into a piece
        for index, value in enumerate(values):
            if isinstance(value, (bool, np.bool_)) or not isinstance(value, numbers.Integral) \
                    or not Player.EMPTY <= value <= Player.TWO:
                raise InvalidBoardError(
                    f"Board cell {index} must be 0 (empty), 1 or 2, got {value!r}")

        board.cells[:] = values
        return board

    def copy(self) -> 'Board':
        """
        Create an independent copy of the board.

        Returns:
            A new Board instance with the same cells
        """
        new_board = Board.__new__(Board)
        new_board.rows = self.rows
        new_board.cols = self.cols
        new_board.cells = self.cells.copy()
        new_board._windows = self._windows
        new_board._lines = self._lines
        return new_board

    @property
    def center(self) -> int:
        """Index of the center column."""
        return self.cols // 2

    def to_list(self) -> List[int]:
        """Flat snapshot as a list of plain ints."""
        return self.cells.tolist()

    def get(self, row: int, col: int) -> int:
        """Value of the cell at (row, col)."""
        return int(self.cells[row * self.cols + col])

    def is_legal(self, column: int) -> bool:
        """
        Check if a piece can be dropped in a column.

        Args:
            column: The column to check (0-indexed)

        Returns:
            True if the column is on the board and its top cell is empty
        """
        return 0 <= column < self.cols and not self.cells[column]

    def legal_moves(self) -> List[int]:
        """
        Columns whose top cell is empty, in increasing order.

        Returns:
            List of legal column indices
        """
        return [col for col, value in enumerate(self.cells[:self.cols].tolist()) if not value]

    def legal_moves_center_first(self) -> List[int]:
        """Legal columns ordered by distance from the center (ties: lower column first)."""
        top = self.cells[:self.cols].tolist()
        return [col for col in center_columns(self.cols) if not top[col]]

    def is_full(self) -> bool:
        """True when no column accepts another piece."""
        return all(self.cells[:self.cols].tolist())

    def column_height(self, column: int) -> int:
        """Number of pieces stacked in a column."""
        return int(np.count_nonzero(self.cells[column::self.cols]))

    def drop(self, column: int, mover: int) -> int:
        """
        Place a piece in the lowest empty cell of a column.

        Args:
            column: The column to play (0-indexed)
            mover: Player placing the piece (1 or 2)

        Returns:
            The row the piece landed in

        Raises:
            IllegalMoveError: column out of range or already full
            InvalidPlayerError: mover is not 1 or 2
        """
        if not is_player(mover):
            raise InvalidPlayerError(f"Mover must be 1 or 2, got {mover!r}")
        if not 0 <= column < self.cols:
            raise IllegalMoveError(f"Column {column} out of bounds (0..{self.cols - 1})")

        # Find the lowest empty row in the column
        column_cells = self.cells[column::self.cols].tolist()
        for row in range(self.rows - 1, -1, -1):
            if not column_cells[row]:
                self.cells[row * self.cols + column] = mover
                return row

        raise IllegalMoveError(f"Column {column} is full")

    def lift(self, column: int) -> int:
        """
        Remove the top piece of a column, undoing the last drop there.

        Args:
            column: The column to undo (0-indexed)

        Returns:
            The row that was cleared

        Raises:
            IllegalMoveError: column out of range or empty
        """
        if not 0 <= column < self.cols:
            raise IllegalMoveError(f"Column {column} out of bounds (0..{self.cols - 1})")

        column_cells = self.cells[column::self.cols].tolist()
        for row in range(self.rows):
            if column_cells[row]:
                self.cells[row * self.cols + column] = Player.EMPTY
                return row

        raise IllegalMoveError(f"Column {column} is empty, nothing to undo")

    def with_move(self, column: int, mover: int) -> 'Board':
        """Return a copy of the board with mover's piece dropped in column."""
        new_board = self.copy()
        new_board.drop(column, mover)
        return new_board

    def windows(self) -> np.ndarray:
        """
        Cell values of every four-cell window.

        Returns:
            Array of shape (n_windows, 4)
        """
        return self.cells[self._windows]

    def winner(self) -> Optional[int]:
        """
        Scan every window on the board for four pieces of one player.

        Runs on plain ints: it is called at every search node, where a
        short Python loop with an empty-cell early exit beats the fixed
        cost of several numpy calls on 69 windows.

        Returns:
            The owner of the first fully occupied window in scan order
            (row-major, then horizontal/vertical/diagonals), or None
        """
        cells = self.cells.tolist()
        for a, b, c, d in self._lines:
            player = cells[a]
            if player and player == cells[b] == cells[c] == cells[d]:
                return player
        return None

    def __repr__(self) -> str:
        return f"Board(rows={self.rows}, cols={self.cols}, cells={self.to_list()})"


def drop(board: Board, column: int, mover: int) -> Board:
    """Functional drop: the input board is left untouched."""
    debug.trace(f"Simulating drop of player {mover} in column {column}", "board")
    return board.with_move(column, mover)


def legal_moves(board: Board) -> List[int]:
    """Legal columns of a board, increasing order."""
    return board.legal_moves()


def winner(board: Board) -> Optional[int]:
    """Winner of a board, or None."""
    return board.winner()
