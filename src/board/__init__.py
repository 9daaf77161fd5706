"""
Board snapshot module.

Provides the immutable board model the solver reasons over.
"""
from .cell import Cell, Mine, HIDDEN, FLAGGED
from .board import Board, GameStatus, is_game_over
from .action import Action, ActionKind

__all__ = [
    "Cell",
    "Mine",
    "HIDDEN",
    "FLAGGED",
    "Board",
    "GameStatus",
    "is_game_over",
    "Action",
    "ActionKind",
]
