"""
c4engine - Bounded-time move search for Connect Four style games

This package provides a flat board model with column-drop semantics, one-ply
tactical shortcuts and an iterative-deepening negamax search that returns a
legal column within a wall-clock budget.
"""

# Version number
__version__ = '0.1.0'

from c4engine.utils import (Player, ContractViolation, InvalidBoardError, InvalidPlayerError,
                            IllegalMoveError, InvalidSearchParameterError, BoardFullError)
from c4engine.config import SearchConfig, EvaluationWeights
from c4engine.game.board import Board
from c4engine.ai.search import SearchEngine, SearchResult, search, analyze, get_best_move
from c4engine.ai.player import ComputerPlayer

__all__ = [
    'Player', 'Board', 'SearchConfig', 'EvaluationWeights',
    'SearchEngine', 'SearchResult', 'search', 'analyze', 'get_best_move', 'ComputerPlayer',
    'ContractViolation', 'InvalidBoardError', 'InvalidPlayerError', 'IllegalMoveError',
    'InvalidSearchParameterError', 'BoardFullError',
]
