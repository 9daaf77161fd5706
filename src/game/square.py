"""
Square module for the local Minesweeper game.

Represents individual squares of the playable minefield with their state
(hidden/revealed/flagged) and content (mine/number).
"""
from enum import Enum, auto
from dataclasses import dataclass


# ============================================================================
# Constants
# ============================================================================

class CellState(Enum):
    """Possible visual states of a square."""

    HIDDEN = auto()
    REVEALED = auto()
    FLAGGED = auto()


# ============================================================================
# Square Data Class
# ============================================================================

@dataclass
class Square:
    """
    Represents a single square in the playable grid.

    Attributes:
        is_mine: Whether this square contains a mine.
        adjacent_mines: Count of mines in neighboring squares (0-8).
        state: Current visual state (hidden, revealed, or flagged).
        exploded: Whether this is the mine that was clicked.
    """

    is_mine: bool = False
    adjacent_mines: int = 0
    state: CellState = CellState.HIDDEN
    exploded: bool = False

    def reveal(self) -> bool:
        """
        Reveal this square.

        Returns:
            True if square was successfully revealed, False if already
            revealed or flagged.
        """
        if self.state != CellState.HIDDEN:
            return False
        self.state = CellState.REVEALED
        return True

    def toggle_flag(self) -> bool:
        """
        Toggle flag on this square.

        Returns:
            True if flag was toggled, False if square is revealed.
        """
        if self.state == CellState.REVEALED:
            return False
        if self.state == CellState.HIDDEN:
            self.state = CellState.FLAGGED
        else:
            self.state = CellState.HIDDEN
        return True

    @property
    def is_hidden(self) -> bool:
        """Check if square is hidden."""
        return self.state == CellState.HIDDEN

    @property
    def is_revealed(self) -> bool:
        """Check if square is revealed."""
        return self.state == CellState.REVEALED

    @property
    def is_flagged(self) -> bool:
        """Check if square is flagged."""
        return self.state == CellState.FLAGGED

    def to_observation(self) -> int:
        """
        Convert square to the observation code shown to the player.

        Returns:
            -1: Hidden square
            -2: Flagged square
            0-8: Revealed square with adjacent mine count
            10: Revealed mine
            11: Revealed mine that was clicked
        """
        if self.state == CellState.HIDDEN:
            return -1
        if self.state == CellState.FLAGGED:
            return -2
        if self.is_mine:
            return 11 if self.exploded else 10
        return self.adjacent_mines
