"""
Unit tests for the flat board model.

Tests verify:
1. Drops obey gravity and fail loudly on illegal columns
2. Legal moves, full-board detection and undo
3. Win detection in every orientation, anywhere on the board
4. Snapshots are copied, never aliased
"""

import random

import numpy as np
import pytest

from c4engine.game.board import Board, drop, legal_moves, winner
from c4engine.utils import (IllegalMoveError, InvalidBoardError, InvalidPlayerError, Player,
                            center_order, window_index)
from tests.helpers import DRAWN_ROWS, cells_from_rows, play


class TestDrop:
    """Column drops and undo."""

    def test_pieces_stack_from_the_bottom(self):
        board = Board()
        assert board.drop(3, 1) == 5
        assert board.drop(3, 2) == 4
        assert board.get(5, 3) == 1
        assert board.get(4, 3) == 2
        assert board.column_height(3) == 2

    def test_exactly_one_cell_changes(self):
        board = play(Board(), (0, 1), (1, 2))
        before = board.to_list()
        board.drop(1, 1)
        changed = [i for i, (a, b) in enumerate(zip(before, board.to_list())) if a != b]
        assert changed == [4 * 7 + 1]

    def test_full_column_raises(self):
        board = Board()
        for i in range(6):
            board.drop(0, 1 + i % 2)
        with pytest.raises(IllegalMoveError):
            board.drop(0, 1)

    @pytest.mark.parametrize("column", [-1, 7, 100])
    def test_out_of_range_column_raises(self, column):
        with pytest.raises(IllegalMoveError):
            Board().drop(column, 1)

    @pytest.mark.parametrize("mover", [0, 3, -1, True])
    def test_invalid_mover_raises(self, mover):
        with pytest.raises(InvalidPlayerError):
            Board().drop(3, mover)

    def test_lift_undoes_last_drop(self):
        board = play(Board(), (2, 1), (2, 2))
        assert board.lift(2) == 4
        assert board.to_list() == play(Board(), (2, 1)).to_list()

    def test_lift_empty_column_raises(self):
        with pytest.raises(IllegalMoveError):
            Board().lift(4)

    def test_with_move_leaves_original_untouched(self):
        board = play(Board(), (3, 1))
        before = board.to_list()
        after = board.with_move(3, 2)
        assert board.to_list() == before
        assert after.get(4, 3) == 2

    def test_functional_drop(self):
        board = Board()
        result = drop(board, 6, 2)
        assert result is not board
        assert result.get(5, 6) == 2
        assert board.to_list() == [0] * 42


class TestLegalMoves:
    """Legal-move generation."""

    def test_empty_board(self):
        board = Board()
        assert board.legal_moves() == list(range(7))
        assert legal_moves(board) == list(range(7))
        assert not board.is_full()

    def test_full_columns_are_excluded(self):
        board = Board()
        for column in (1, 5):
            for i in range(6):
                board.drop(column, 1 + (i + column) % 2)
        assert board.legal_moves() == [0, 2, 3, 4, 6]
        assert not board.is_legal(1)
        assert board.is_legal(0)
        assert not board.is_legal(7)

    def test_full_board(self):
        board = Board.from_cells(cells_from_rows(*DRAWN_ROWS))
        assert board.legal_moves() == []
        assert board.is_full()

    def test_center_first_ordering(self):
        board = Board()
        assert board.legal_moves_center_first() == [3, 2, 4, 1, 5, 0, 6]
        for column in (1, 3):
            for i in range(6):
                board.drop(column, 1 + (i + column) % 2)
        assert board.legal_moves_center_first() == [2, 4, 5, 0, 6]
        assert board.legal_moves_center_first() == center_order(board.legal_moves())

    def test_center_first_on_even_width(self):
        assert Board(rows=4, cols=6).legal_moves_center_first() == [3, 2, 4, 1, 5, 0]


class TestWinner:
    """Full-board win detection."""

    def test_no_winner_on_empty_board(self):
        assert Board().winner() is None

    def test_horizontal(self):
        board = Board.from_cells(cells_from_rows("OOO....", "XXXX..."))
        assert board.winner() == 1

    def test_vertical_in_top_corner(self):
        board = Board.from_cells(cells_from_rows(
            "......O",
            "......O",
            "......O",
            "......O",
            "......X",
            "......X",
        ))
        assert winner(board) == 2

    def test_diagonal_down_right(self):
        board = Board.from_cells(cells_from_rows(
            "X......",
            ".X.....",
            "..X....",
            "...X...",
        ))
        assert board.winner() == 1

    def test_diagonal_down_left(self):
        board = Board.from_cells(cells_from_rows(
            "......O",
            ".....O.",
            "....O..",
            "...O...",
        ))
        assert board.winner() == 2

    def test_three_is_not_a_win(self):
        board = Board.from_cells(cells_from_rows("XXX.OOO"))
        assert board.winner() is None

    def test_first_window_in_scan_order_wins(self):
        board = Board.from_cells(cells_from_rows("XXXX...", "OOOO..."))
        assert board.winner() == 1

    def test_drawn_board_has_no_winner(self):
        board = Board.from_cells(cells_from_rows(*DRAWN_ROWS))
        assert board.winner() is None

    def test_drop_only_creates_wins_for_the_mover(self):
        rng = random.Random(1234)
        for _ in range(40):
            board = Board()
            for _ in range(rng.randrange(0, 30)):
                moves = board.legal_moves()
                if not moves or board.winner() is not None:
                    break
                board.drop(rng.choice(moves), rng.choice((1, 2)))
            if board.winner() is not None:
                continue
            for column in board.legal_moves():
                for player in (1, 2):
                    assert board.with_move(column, player).winner() in (None, player)

    def test_matches_window_table_on_random_grids(self):
        # Arbitrary grids, pieces allowed to float: the scan must agree with a
        # direct reading of the window table, including which window comes first
        rng = random.Random(7)
        for _ in range(200):
            cells = [rng.choice((0, 0, 1, 2)) for _ in range(42)]
            board = Board.from_cells(cells)
            expected = None
            for line in window_index(6, 7).tolist():
                values = {cells[i] for i in line}
                if len(values) == 1 and 0 not in values:
                    expected = cells[line[0]]
                    break
            assert board.winner() == expected

    def test_winner_is_a_plain_int(self):
        board = Board.from_cells(cells_from_rows("XXXX..."))
        assert type(board.winner()) is int


class TestSnapshots:
    """Construction from flat snapshots."""

    def test_from_cells_copies_input(self):
        cells = cells_from_rows("...X...")
        board = Board.from_cells(cells)
        cells[38] = 2
        assert board.get(5, 3) == 1

    def test_from_numpy_array(self):
        cells = np.zeros(42, dtype=np.int32)
        cells[41] = 2
        assert Board.from_cells(cells).get(5, 6) == 2

    def test_wrong_length_raises(self):
        with pytest.raises(InvalidBoardError):
            Board.from_cells([0] * 41)

    @pytest.mark.parametrize("value", [3, -1])
    def test_unknown_cell_value_raises(self, value):
        cells = [0] * 42
        cells[40] = value
        with pytest.raises(InvalidBoardError):
            Board.from_cells(cells)

    def test_non_integer_cells_raise(self):
        with pytest.raises(InvalidBoardError):
            Board.from_cells(["x"] * 42)

    def test_float_cell_raises(self):
        cells = [0] * 42
        cells[38] = 1.7
        with pytest.raises(InvalidBoardError):
            Board.from_cells(cells)

    def test_integral_float_cell_raises(self):
        cells = [0] * 42
        cells[38] = 1.0
        with pytest.raises(InvalidBoardError):
            Board.from_cells(cells)

    def test_numeric_string_cells_raise(self):
        with pytest.raises(InvalidBoardError):
            Board.from_cells(["0"] * 42)

    @pytest.mark.parametrize("value", [True, False, np.bool_(True)])
    def test_bool_cell_raises(self, value):
        cells = [0] * 42
        cells[41] = value
        with pytest.raises(InvalidBoardError):
            Board.from_cells(cells)

    def test_float_array_raises(self):
        with pytest.raises(InvalidBoardError):
            Board.from_cells(np.zeros(42))

    def test_player_members_are_cell_values(self):
        cells = [Player.EMPTY] * 42
        cells[41] = Player.TWO
        board = Board.from_cells(cells)
        assert board.get(5, 6) == Player.TWO == 2
        assert board.legal_moves() == list(range(7))

    def test_copy_is_independent(self):
        board = play(Board(), (0, 1))
        clone = board.copy()
        clone.drop(0, 2)
        assert board.column_height(0) == 1
        assert clone.column_height(0) == 2

    def test_custom_geometry(self):
        board = Board(rows=5, cols=5)
        assert board.center == 2
        assert board.legal_moves() == [0, 1, 2, 3, 4]
        assert board.drop(4, 2) == 4


class TestWindowIndex:
    """Window geometry tables."""

    def test_standard_board_has_69_windows(self):
        assert window_index(6, 7).shape == (69, 4)

    def test_small_board_has_no_windows(self):
        assert window_index(3, 3).shape == (0, 4)
        assert Board(rows=3, cols=3).winner() is None
