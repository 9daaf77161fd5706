"""
Cell module for board snapshots.

A snapshot cell is an immutable record of what the player can see at one
grid position: hidden, flagged, or revealed with a number or a mine.
"""
from enum import Enum, auto
from dataclasses import dataclass
from typing import Optional, Union


# ============================================================================
# Constants
# ============================================================================

class Mine(Enum):
    """Mine sentinels a revealed cell can carry after a loss."""

    UNEXPLODED = auto()
    EXPLODED = auto()


CellValue = Union[int, Mine]

# Observation codes shared with the local game environment
OBS_HIDDEN = -1
OBS_FLAGGED = -2
OBS_MINE = 10
OBS_EXPLODED_MINE = 11


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass(frozen=True)
class Cell:
    """
    Represents a single cell in a board snapshot.

    Attributes:
        revealed: Whether the cell has been opened.
        flagged: Whether the cell carries a flag.
        value: Adjacent mine count (0-8) or a Mine sentinel. Set if and
            only if the cell is revealed.
    """

    revealed: bool = False
    flagged: bool = False
    value: Optional[CellValue] = None

    def __post_init__(self) -> None:
        """Validate cell invariants after initialization."""
        if self.revealed and self.flagged:
            raise ValueError("A cell cannot be both revealed and flagged")
        if self.revealed != (self.value is not None):
            raise ValueError("Cell value must be set if and only if revealed")
        if isinstance(self.value, bool):
            raise ValueError("Cell value must be an integer or a Mine")
        if isinstance(self.value, int) and not 0 <= self.value <= 8:
            raise ValueError(f"Adjacent mine count out of range: {self.value}")

    @classmethod
    def opened(cls, value: CellValue) -> "Cell":
        """Create a revealed cell holding the given value."""
        return cls(revealed=True, value=value)

    @property
    def is_unopened(self) -> bool:
        """Check if cell is neither revealed nor flagged."""
        return not self.revealed and not self.flagged

    @property
    def is_mine(self) -> bool:
        """Check if cell shows a mine sentinel."""
        return isinstance(self.value, Mine)

    @property
    def number(self) -> Optional[int]:
        """Adjacent mine count, or None for hidden cells and mines."""
        if self.revealed and not self.is_mine:
            return self.value
        return None

    def to_observation(self) -> int:
        """
        Convert cell to its observation code.

        Returns:
            -1: Hidden cell
            -2: Flagged cell
            0-8: Revealed cell with adjacent mine count
            10: Unexploded mine
            11: Exploded mine
        """
        if self.flagged:
            return OBS_FLAGGED
        if not self.revealed:
            return OBS_HIDDEN
        if self.value is Mine.UNEXPLODED:
            return OBS_MINE
        if self.value is Mine.EXPLODED:
            return OBS_EXPLODED_MINE
        return self.value

    @classmethod
    def from_observation(cls, code: int) -> "Cell":
        """Build a cell from an observation code."""
        code = int(code)
        if code == OBS_HIDDEN:
            return HIDDEN
        if code == OBS_FLAGGED:
            return FLAGGED
        if code == OBS_MINE:
            return cls.opened(Mine.UNEXPLODED)
        if code == OBS_EXPLODED_MINE:
            return cls.opened(Mine.EXPLODED)
        return cls.opened(code)

    def symbol(self) -> str:
        """Text symbol used when printing a board."""
        if self.flagged:
            return "F"
        if not self.revealed:
            return "."
        if self.value is Mine.EXPLODED:
            return "[M]"
        if self.value is Mine.UNEXPLODED:
            return "M"
        return str(self.value)


HIDDEN = Cell()
FLAGGED = Cell(flagged=True)
