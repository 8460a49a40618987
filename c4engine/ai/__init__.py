"""
c4engine/ai/__init__.py - Move selection for the computer-controlled side

This module provides the static evaluator, the one-ply tactical shortcuts,
the iterative-deepening search engine and the ComputerPlayer adapter.
"""

from c4engine.ai.evaluation import evaluate, score_window
from c4engine.ai.tactics import TacticalMove, tactical_move, winning_columns
from c4engine.ai.search import (SearchEngine, SearchResult, DepthIteration, search, analyze,
                                get_best_move, FORCED_WIN, FORCED_LOSS, FORCED_WIN_THRESHOLD)
from c4engine.ai.player import ComputerPlayer

__all__ = ['evaluate', 'score_window', 'TacticalMove', 'tactical_move', 'winning_columns',
           'SearchEngine', 'SearchResult', 'DepthIteration', 'search', 'analyze',
           'get_best_move', 'FORCED_WIN', 'FORCED_LOSS', 'FORCED_WIN_THRESHOLD',
           'ComputerPlayer']
