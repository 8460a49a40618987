"""Board-building helpers shared by the test modules."""

SYMBOLS = {'.': 0, 'X': 1, 'O': 2}

# A full 6x7 board with no four anywhere
DRAWN_ROWS = (
    "XOXOXOX",
    "XOXOXOX",
    "OXOXOXO",
    "OXOXOXO",
    "XOXOXOX",
    "XOXOXOX",
)


def cells_from_rows(*rows, height=6):
    """
    Flat cell list from row strings, top row first.

    '.' is empty, 'X' is player 1, 'O' is player 2. Missing top rows are
    filled with empty cells, so a position can be given by its bottom rows.
    """
    width = len(rows[0])
    padded = ["." * width] * (height - len(rows)) + list(rows)
    return [SYMBOLS[ch] for row in padded for ch in row]


def play(board, *moves):
    """Drop (column, player) pairs onto a board and return it."""
    for column, player in moves:
        board.drop(column, player)
    return board
