"""
Board module for snapshots.

A Board is an immutable view of the game grid as read from the page.
It is produced fresh on every query and only ever read by the solver.
"""
from dataclasses import dataclass
from enum import Enum, auto
from typing import List, Sequence, Tuple

import numpy as np

from .cell import Cell, Mine, HIDDEN, FLAGGED


# ============================================================================
# Constants
# ============================================================================

class GameStatus(Enum):
    """Terminal classification of a game."""

    WON = auto()
    LOST = auto()
    ONGOING = auto()


_SYMBOLS = {
    ".": HIDDEN,
    "F": FLAGGED,
    "M": Cell.opened(Mine.UNEXPLODED),
    "[M]": Cell.opened(Mine.EXPLODED),
}


# ============================================================================
# Board Class
# ============================================================================

@dataclass(frozen=True)
class Board:
    """
    Snapshot of a Minesweeper grid.

    Attributes:
        grid: Rows of cells, indexed as grid[row][col].
    """

    grid: Tuple[Tuple[Cell, ...], ...]

    def __post_init__(self) -> None:
        """Normalize rows to tuples and validate the shape."""
        grid = tuple(tuple(row) for row in self.grid)
        if not grid or not grid[0]:
            raise ValueError("Board must contain at least one cell")
        if any(len(row) != len(grid[0]) for row in grid):
            raise ValueError("Board rows must all have the same length")
        object.__setattr__(self, "grid", grid)

    # ========================================================================
    # Construction
    # ========================================================================

    @classmethod
    def from_observation(cls, observation: np.ndarray) -> "Board":
        """
        Build a snapshot from a 2D observation array.

        Args:
            observation: Array of observation codes (see Cell.to_observation).

        Returns:
            Board with one cell per array entry.
        """
        obs = np.asarray(observation)
        if obs.ndim != 2:
            raise ValueError("Observation must be a 2D array")
        return cls(tuple(
            tuple(Cell.from_observation(code) for code in row) for row in obs
        ))

    @classmethod
    def from_rows(cls, rows: Sequence[str]) -> "Board":
        """
        Parse a board from its printed form.

        Each row is a whitespace separated list of symbols: '.' hidden,
        'F' flagged, '0'-'8' numbers, 'M' unexploded mine, '[M]' exploded mine.
        """
        grid = []
        for line in rows:
            cells = []
            for token in line.split():
                if token in _SYMBOLS:
                    cells.append(_SYMBOLS[token])
                elif token.isdigit():
                    cells.append(Cell.opened(int(token)))
                else:
                    raise ValueError(f"Unknown cell symbol: {token!r}")
            grid.append(tuple(cells))
        return cls(tuple(grid))

    # ========================================================================
    # Dimensions
    # ========================================================================

    @property
    def height(self) -> int:
        """Number of rows."""
        return len(self.grid)

    @property
    def width(self) -> int:
        """Number of columns."""
        return len(self.grid[0])

    @property
    def shape(self) -> Tuple[int, int]:
        return self.height, self.width

    def is_valid_position(self, row: int, col: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= row < self.height and 0 <= col < self.width

    # ========================================================================
    # Queries
    # ========================================================================

    def get_cell(self, row: int, col: int) -> Cell:
        """Get cell at position."""
        return self.grid[row][col]

    def neighbors_of(self, row: int, col: int) -> List[Tuple[int, int]]:
        """
        Get valid neighboring cell positions.

        Neighbors are listed row-major within the 3x3 neighborhood,
        skipping the center, so iteration order is reproducible.

        Args:
            row: Row index of center cell.
            col: Column index of center cell.

        Returns:
            List of (row, col) tuples for in-bounds neighbors.
        """
        neighbors = []
        for delta_row in (-1, 0, 1):
            for delta_col in (-1, 0, 1):
                if delta_row == 0 and delta_col == 0:
                    continue
                new_row = row + delta_row
                new_col = col + delta_col
                if self.is_valid_position(new_row, new_col):
                    neighbors.append((new_row, new_col))
        return neighbors

    def positions(self):
        """Iterate over every (row, col) in scan order."""
        for row in range(self.height):
            for col in range(self.width):
                yield row, col

    @property
    def game_over(self) -> bool:
        """True when any revealed cell shows a mine."""
        return is_game_over(self)

    def to_observation(self) -> np.ndarray:
        """Get board state as an int8 observation array."""
        obs = np.zeros((self.height, self.width), dtype=np.int8)
        for row, col in self.positions():
            obs[row, col] = self.grid[row][col].to_observation()
        return obs

    def render(self) -> str:
        """Render board as text, one line per row."""
        return "\n".join(
            " ".join(cell.symbol() for cell in row) for row in self.grid
        )


def is_game_over(board: Board) -> bool:
    """Check whether a snapshot shows any mine sentinel."""
    return any(cell.is_mine for row in board.grid for cell in row)
