"""
Runner module.

Drives games through the collaborator contracts: step orchestration,
the game loop, local game collaborators and batch evaluation.
"""
from .errors import SolverError, SnapshotError, BoardDimensionError
from .collaborators import (
    SnapshotProvider,
    MoveExecutor,
    GameStatusProvider,
    RetryPolicy,
    classify_status,
)
from .orchestrator import StepOrchestrator, MoveCounts
from .game_loop import GameLoop, GameResult, LoopConfig
from .local import LocalGame
from .evaluator import Evaluator

__all__ = [
    "SolverError",
    "SnapshotError",
    "BoardDimensionError",
    "SnapshotProvider",
    "MoveExecutor",
    "GameStatusProvider",
    "RetryPolicy",
    "classify_status",
    "StepOrchestrator",
    "MoveCounts",
    "GameLoop",
    "GameResult",
    "LoopConfig",
    "LocalGame",
    "Evaluator",
]
