"""
evaluation.py - Static evaluation of non-terminal positions

Used only at depth-zero leaves (and on full boards) of the search. The score
is from the mover's point of view and combines:
1. A bonus for each of the mover's pieces in the center column
2. A sliding four-cell window scan over all orientations, scored by how many
   mover / opponent / empty cells each window holds

Window table (mover, opponent, empty):
    (4, 0, 0) -> weights.four           (terminal check normally catches this)
    (3, 0, 1) -> weights.three
    (2, 0, 2) -> weights.two
    (0, 3, 1) -> weights.opponent_three
    anything else -> 0
"""

from typing import Sequence

import numpy as np

from c4engine.config import EvaluationWeights, DEFAULT_WEIGHTS
from c4engine.game.board import Board
from c4engine.game.rules import opponent
from c4engine.utils import Player


def score_window(window: Sequence[int], mover: int,
                 weights: EvaluationWeights = DEFAULT_WEIGHTS) -> int:
    """
    Score a single window of four cells.

    Args:
        window: Four cell values
        mover: Player we're evaluating for
        weights: Evaluation weights

    Returns:
        The window's contribution to the evaluation
    """
    window = list(window)
    other = opponent(mover)
    my_count = window.count(mover)
    opp_count = window.count(other)
    empty_count = window.count(Player.EMPTY)

    if my_count == 4:
        return weights.four
    if my_count == 3 and empty_count == 1:
        return weights.three
    if my_count == 2 and empty_count == 2:
        return weights.two
    if opp_count == 3 and empty_count == 1:
        return weights.opponent_three
    return 0


def evaluate(board: Board, mover: int, weights: EvaluationWeights = DEFAULT_WEIGHTS) -> int:
    """
    Heuristic evaluation of a board position.

    Args:
        board: The board to evaluate
        mover: The player we're evaluating for
        weights: Evaluation weights

    Returns:
        A score representing how good the position is for the mover
    """
    other = opponent(mover)

    center_cells = board.cells[board.center::board.cols]
    score = weights.center * int(np.count_nonzero(center_cells == mover))

    lines = board.windows()
    if not lines.size:
        return score

    mine = np.count_nonzero(lines == mover, axis=1)
    theirs = np.count_nonzero(lines == other, axis=1)
    empty = lines.shape[1] - mine - theirs

    score += weights.four * int(np.count_nonzero(mine == 4))
    score += weights.three * int(np.count_nonzero((mine == 3) & (empty == 1)))
    score += weights.two * int(np.count_nonzero((mine == 2) & (empty == 2)))
    score += weights.opponent_three * int(np.count_nonzero((theirs == 3) & (empty == 1)))
    return score
