"""
Local Minesweeper game module.

Provides a playable game used in place of the web page: minefield
management, square state, and a Gymnasium environment.
"""
from .square import Square, CellState
from .minefield import (
    Minefield,
    BoardConfig,
    GameState,
    BEGINNER,
    INTERMEDIATE,
    EXPERT,
)
from .environment import MinesweeperEnv

__all__ = [
    "Square",
    "CellState",
    "Minefield",
    "BoardConfig",
    "GameState",
    "BEGINNER",
    "INTERMEDIATE",
    "EXPERT",
    "MinesweeperEnv",
]
