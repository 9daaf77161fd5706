"""
Collaborator interfaces for the solver.

The solver never touches the page itself. It reads snapshots, issues
clicks and asks for the final status through the contracts below.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass

from board import ActionKind, Board, GameStatus


# ============================================================================
# Configuration
# ============================================================================

@dataclass
class RetryPolicy:
    """
    Confirmation polling policy for move executors.

    Attributes:
        max_retries: How many times to check for the page to reflect a click.
        backoff_seconds: Pause between checks.
    """

    max_retries: int = 3
    backoff_seconds: float = 1.0

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if self.max_retries < 1:
            raise ValueError("max_retries must be at least 1")
        if self.backoff_seconds < 0:
            raise ValueError("backoff_seconds cannot be negative")


# ============================================================================
# Collaborator Contracts
# ============================================================================

class SnapshotProvider(ABC):
    """Supplies board snapshots."""

    @abstractmethod
    def get_board_state(self) -> Board:
        """
        Read the current board.

        Returns:
            Fully populated snapshot.

        Raises:
            SnapshotError: If no valid cells can be found.
        """
        pass


class MoveExecutor(ABC):
    """Performs clicks on the page."""

    @abstractmethod
    def click_cell(self, row: int, col: int, kind: ActionKind) -> None:
        """
        Reveal or flag a cell.

        Implementations are best-effort: they attempt the interaction, poll
        for the page to confirm it according to their RetryPolicy, and return
        regardless of the outcome. Callers re-read the board afterwards.
        """
        pass


class GameStatusProvider(ABC):
    """Reports whether the game is won, lost or still running."""

    @abstractmethod
    def get_game_status(self) -> GameStatus:
        pass


def classify_status(
    lose_indicator: bool,
    game_over_indicator: bool,
    win_indicator: bool,
) -> GameStatus:
    """
    Combine the page's terminal signals into a status.

    Args:
        lose_indicator: The status indicator shows a loss.
        game_over_indicator: The game container is marked as over.
        win_indicator: The status indicator shows a win.

    Returns:
        LOST if either loss signal is present (even alongside a win
        signal), WON if only the win signal is present, else ONGOING.
    """
    if lose_indicator or game_over_indicator:
        return GameStatus.LOST
    if win_indicator:
        return GameStatus.WON
    return GameStatus.ONGOING
