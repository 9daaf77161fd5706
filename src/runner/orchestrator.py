"""
Step orchestrator.

Runs one solving step: read the board, ask the logic agent for certain
moves (or the random agent for a guess), and apply the moves one at a
time, re-reading the board after each click.
"""
from dataclasses import dataclass
from typing import Optional

from agents import LogicAgent, RandomAgent
from board import Action, ActionKind, Board

from .collaborators import MoveExecutor, SnapshotProvider
from .errors import BoardDimensionError


# ============================================================================
# Move Statistics
# ============================================================================

@dataclass
class MoveCounts:
    """Moves applied during one game."""

    reveals: int = 0
    flags: int = 0
    random_reveals: int = 0
    skipped: int = 0

    @property
    def total(self) -> int:
        """All applied moves, guesses included."""
        return self.reveals + self.flags + self.random_reveals


# ============================================================================
# Step Orchestrator
# ============================================================================

class StepOrchestrator:
    """
    Applies agent proposals to the page, one click at a time.

    The first snapshot fixes the board dimensions for the game; any later
    snapshot with different dimensions raises BoardDimensionError.
    """

    def __init__(
        self,
        snapshots: SnapshotProvider,
        executor: MoveExecutor,
        logic_agent: Optional[LogicAgent] = None,
        random_agent: Optional[RandomAgent] = None,
        verbose: bool = False,
    ) -> None:
        """
        Initialize the orchestrator.

        Args:
            snapshots: Source of board snapshots.
            executor: Performs clicks.
            logic_agent: Certain-move source (default: LogicAgent()).
            random_agent: Fallback guesser (default: unseeded RandomAgent()).
            verbose: Print boards and decisions.
        """
        self.snapshots = snapshots
        self.executor = executor
        self.logic_agent = logic_agent or LogicAgent()
        self.random_agent = random_agent or RandomAgent()
        self.verbose = verbose
        self.counts = MoveCounts()
        self.last_board: Optional[Board] = None
        self._dimensions = None

    def reset(self) -> None:
        """Forget dimensions and counters before a new game."""
        self._dimensions = None
        self.last_board = None
        self.counts = MoveCounts()
        self.logic_agent.reset()
        self.random_agent.reset()

    def _log(self, message: str) -> None:
        if self.verbose:
            print(message)

    # ========================================================================
    # Collaborator Access
    # ========================================================================

    def fetch_snapshot(self) -> Board:
        """
        Read a snapshot and check it against the game's dimensions.

        Raises:
            BoardDimensionError: If the board changed size mid-game.
        """
        board = self.snapshots.get_board_state()
        if self._dimensions is None:
            self._dimensions = board.shape
        elif board.shape != self._dimensions:
            raise BoardDimensionError(self._dimensions, board.shape)
        self.last_board = board

        self._log(
            f"Board {board.height}x{board.width}, "
            f"game over: {board.game_over}\n{board.render()}"
        )
        return board

    def apply(self, action: Action) -> Board:
        """Click once and return the board as it looks afterwards."""
        self._log(f"Applying {action}")
        self.executor.click_cell(action.row, action.col, action.kind)
        return self.fetch_snapshot()

    # ========================================================================
    # Solving Step
    # ========================================================================

    def run_step(self) -> bool:
        """
        Run one solving step.

        Returns:
            True if at least one move was applied without ending the game,
            False on a visible mine, a mine hit, or when no move exists.
        """
        board = self.fetch_snapshot()
        if board.game_over:
            self._log("Game over: mine visible.")
            return False

        actions = self.logic_agent.propose_actions(board)
        guessing = not actions
        if guessing:
            guess = self.random_agent.select_action(board)
            if guess is None:
                self._log("No safe random moves available.")
                return False
            self._log(f"No deterministic moves, guessing {guess}")
            actions = [guess]

        action_taken = False
        latest = board
        for action in actions:
            if (
                action.kind is ActionKind.FLAG
                and latest.get_cell(action.row, action.col).flagged
            ):
                self._log(f"Skipping already flagged cell {action.position}")
                self.counts.skipped += 1
                continue

            latest = self.apply(action)
            if latest.game_over:
                self._log(f"Game over after {action}.")
                return False

            action_taken = True
            self._count(action, guessing)

        self._log(f"Step complete. Action taken: {action_taken}")
        return action_taken

    def _count(self, action: Action, guessing: bool) -> None:
        """Record an applied move."""
        if guessing:
            self.counts.random_reveals += 1
        elif action.kind is ActionKind.FLAG:
            self.counts.flags += 1
        else:
            self.counts.reveals += 1
