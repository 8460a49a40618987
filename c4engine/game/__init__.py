"""
c4engine.game - Board model and position rules

This package contains the flat board representation, win detection and the
validation applied to every search request.
"""

from c4engine.game.board import Board
from c4engine.game.rules import game_result, validate_request, opponent

__all__ = ['Board', 'game_result', 'validate_request', 'opponent']
