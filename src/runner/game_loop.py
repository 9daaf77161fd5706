"""
Game loop.

Opens the game with a click on the centre cell, then repeats solving
steps until no move is taken or the iteration cap is reached.
"""
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional
import time

from agents import LogicAgent, RandomAgent
from board import Action, ActionKind, Board, GameStatus

from .collaborators import GameStatusProvider, MoveExecutor, SnapshotProvider
from .orchestrator import MoveCounts, StepOrchestrator


# ============================================================================
# Loop Configuration
# ============================================================================

@dataclass
class LoopConfig:
    """
    Configuration for one solving run.

    Attributes:
        max_iterations: Hard cap on solving steps.
        step_delay: Seconds to wait after each productive step.
        verbose: Print boards and decisions while solving.
    """

    max_iterations: int = 100
    step_delay: float = 0.0
    verbose: bool = False

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if self.max_iterations < 0:
            raise ValueError("max_iterations cannot be negative")
        if self.step_delay < 0:
            raise ValueError("step_delay cannot be negative")


# ============================================================================
# Game Result
# ============================================================================

@dataclass
class GameResult:
    """Outcome of one solving run."""

    status: GameStatus
    steps: int = 0
    lost_on_opening: bool = False
    moves: MoveCounts = field(default_factory=MoveCounts)

    @property
    def won(self) -> bool:
        return self.status is GameStatus.WON

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "status": self.status.name,
            "steps": self.steps,
            "lost_on_opening": self.lost_on_opening,
            "reveals": self.moves.reveals,
            "flags": self.moves.flags,
            "random_reveals": self.moves.random_reveals,
            "skipped": self.moves.skipped,
        }


# ============================================================================
# Game Loop
# ============================================================================

class GameLoop:
    """
    Drives a whole game through the collaborators.

    Status is queried right after the opening click when it hits a mine,
    and otherwise once the loop has stopped.
    """

    def __init__(
        self,
        snapshots: SnapshotProvider,
        executor: MoveExecutor,
        status_provider: GameStatusProvider,
        config: Optional[LoopConfig] = None,
        logic_agent: Optional[LogicAgent] = None,
        random_agent: Optional[RandomAgent] = None,
        sleep: Callable[[float], None] = time.sleep,
        on_step: Optional[Callable[[int, Board], None]] = None,
    ) -> None:
        """
        Initialize the game loop.

        Args:
            snapshots: Source of board snapshots.
            executor: Performs clicks.
            status_provider: Reports the final game status.
            config: Loop configuration.
            logic_agent: Certain-move source.
            random_agent: Fallback guesser.
            sleep: Function used for step_delay pauses.
            on_step: Called with the step number and the latest snapshot
                after every productive step.
        """
        self.config = config or LoopConfig()
        self.status_provider = status_provider
        self.sleep = sleep
        self.on_step = on_step
        self.orchestrator = StepOrchestrator(
            snapshots,
            executor,
            logic_agent=logic_agent,
            random_agent=random_agent,
            verbose=self.config.verbose,
        )

    def _log(self, message: str) -> None:
        if self.config.verbose:
            print(message)

    def run(self) -> GameResult:
        """
        Play one game to a terminal condition or the iteration cap.

        Returns:
            GameResult with the final status and move counts.

        Raises:
            SolverError: If the board cannot be read or changes size.
        """
        self.orchestrator.reset()

        board = self.orchestrator.fetch_snapshot()
        opening = Action(board.height // 2, board.width // 2, ActionKind.REVEAL)
        self._log(f"Starting game by clicking centre cell {opening.position}")
        board = self.orchestrator.apply(opening)

        if board.game_over:
            self._log("Game over: mine hit on initial click.")
            return self._finish(steps=0, lost_on_opening=True)

        steps = 0
        while steps < self.config.max_iterations:
            steps += 1
            if not self.orchestrator.run_step():
                self._log("No more moves, stopping.")
                break
            if self.on_step is not None:
                self.on_step(steps, self.orchestrator.last_board)
            if self.config.step_delay:
                self.sleep(self.config.step_delay)

        return self._finish(steps=steps)

    def _finish(self, steps: int, lost_on_opening: bool = False) -> GameResult:
        """Query the final status and package the result."""
        status = self.status_provider.get_game_status()
        self._log(f"Game status: {status.name.lower()}")
        return GameResult(
            status=status,
            steps=steps,
            lost_on_opening=lost_on_opening,
            moves=self.orchestrator.counts,
        )
