"""
Minefield module for the local Minesweeper game.

Implements a playable board with mine placement, cell revealing,
flagging and game state management. It stands in for the web page
when the solver runs offline.
"""
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Iterable, List, Optional, Tuple

import numpy as np

from .square import Square, CellState


# ============================================================================
# Constants
# ============================================================================

class GameState(Enum):
    """Possible states of the game."""

    PLAYING = auto()
    WON = auto()
    LOST = auto()


@dataclass
class BoardConfig:
    """
    Configuration for a Minesweeper board.

    Attributes:
        width: Number of columns.
        height: Number of rows.
        num_mines: Total mines to place.
    """

    width: int = 9
    height: int = 9
    num_mines: int = 10

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.width < 1 or self.height < 1:
            raise ValueError("Board dimensions must be positive")
        if self.num_mines < 0:
            raise ValueError("Number of mines cannot be negative")
        max_mines = self.width * self.height - 1
        if self.num_mines > max_mines:
            raise ValueError(f"Too many mines (max {max_mines})")


# Preset difficulty levels
BEGINNER = BoardConfig(9, 9, 10)
INTERMEDIATE = BoardConfig(16, 16, 40)
EXPERT = BoardConfig(30, 16, 99)


# ============================================================================
# Minefield Class
# ============================================================================

@dataclass
class Minefield:
    """
    Playable Minesweeper grid.

    Manages the grid of squares, mine placement, revealing logic,
    and win/lose conditions. Mines are placed on the first reveal so
    the first click is always safe, unless a layout was fixed with
    place_mines().
    """

    config: BoardConfig = field(default_factory=lambda: BoardConfig())
    rng: np.random.Generator = field(
        default_factory=np.random.default_rng, repr=False
    )
    _grid: List[List[Square]] = field(default_factory=list, repr=False)
    _game_state: GameState = GameState.PLAYING
    _first_click: bool = True
    _cells_revealed: int = 0

    def __post_init__(self) -> None:
        """Initialize the grid after dataclass creation."""
        self._init_grid()

    # ========================================================================
    # Grid Initialization (Low-level)
    # ========================================================================

    def _init_grid(self) -> None:
        """Create empty grid of squares."""
        self._grid = [
            [Square() for _ in range(self.config.width)]
            for _ in range(self.config.height)
        ]

    def _place_random_mines(self, exclude: Tuple[int, int]) -> None:
        """
        Place mines randomly, excluding a specific square.

        Args:
            exclude: (row, col) position to keep mine-free.
        """
        positions = self._get_valid_mine_positions(exclude)
        chosen = self.rng.choice(
            len(positions), size=self.config.num_mines, replace=False
        )
        self._set_mines(positions[i] for i in chosen)

    def _get_valid_mine_positions(
        self, exclude: Tuple[int, int]
    ) -> List[Tuple[int, int]]:
        """Get all valid positions for mine placement."""
        positions = []
        for row in range(self.config.height):
            for col in range(self.config.width):
                if (row, col) != exclude:
                    positions.append((row, col))
        return positions

    def _set_mines(self, positions: Iterable[Tuple[int, int]]) -> None:
        """Mark mines and compute adjacent counts."""
        for row, col in positions:
            self._grid[row][col].is_mine = True
        self._calculate_adjacent_mines()
        self._first_click = False

    def place_mines(self, positions: Iterable[Tuple[int, int]]) -> None:
        """
        Fix the mine layout before the first reveal.

        Args:
            positions: (row, col) positions of every mine.

        Raises:
            ValueError: If the count does not match the configuration,
                a position is out of bounds, or mines are already placed.
        """
        if not self._first_click:
            raise ValueError("Mines are already placed")
        positions = set(positions)
        if len(positions) != self.config.num_mines:
            raise ValueError(
                f"Expected {self.config.num_mines} mines, got {len(positions)}"
            )
        for row, col in positions:
            if not self._is_valid_position(row, col):
                raise ValueError(f"Mine position out of bounds: {(row, col)}")
        self._set_mines(sorted(positions))

    def _calculate_adjacent_mines(self) -> None:
        """Calculate adjacent mine counts for all squares."""
        for row in range(self.config.height):
            for col in range(self.config.width):
                if not self._grid[row][col].is_mine:
                    count = self._count_adjacent_mines(row, col)
                    self._grid[row][col].adjacent_mines = count

    def _count_adjacent_mines(self, row: int, col: int) -> int:
        """Count mines adjacent to a specific square."""
        count = 0
        for neighbor_row, neighbor_col in self._get_neighbors(row, col):
            if self._grid[neighbor_row][neighbor_col].is_mine:
                count += 1
        return count

    # ========================================================================
    # Neighbor Utilities (Low-level)
    # ========================================================================

    def _get_neighbors(
        self, row: int, col: int
    ) -> List[Tuple[int, int]]:
        """Get valid neighboring square positions."""
        neighbors = []
        for delta_row in (-1, 0, 1):
            for delta_col in (-1, 0, 1):
                if delta_row == 0 and delta_col == 0:
                    continue
                new_row = row + delta_row
                new_col = col + delta_col
                if self._is_valid_position(new_row, new_col):
                    neighbors.append((new_row, new_col))
        return neighbors

    def _is_valid_position(self, row: int, col: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= row < self.config.height and 0 <= col < self.config.width

    # ========================================================================
    # Game Actions (Mid-level)
    # ========================================================================

    def reveal(self, row: int, col: int) -> bool:
        """
        Reveal a square at the given position.

        On first click, places mines avoiding this square.
        If square is empty (0 adjacent mines), reveals neighbors recursively.
        If square is a mine, game is lost and every mine is shown.

        Args:
            row: Row index to reveal.
            col: Column index to reveal.

        Returns:
            True if reveal was successful, False otherwise.
        """
        if not self._can_reveal(row, col):
            return False

        if self._first_click:
            self._place_random_mines((row, col))

        return self._reveal_cell(row, col)

    def _can_reveal(self, row: int, col: int) -> bool:
        """Check if a square can be revealed."""
        if self._game_state != GameState.PLAYING:
            return False
        if not self._is_valid_position(row, col):
            return False
        return self._grid[row][col].state == CellState.HIDDEN

    def _reveal_cell(self, row: int, col: int) -> bool:
        """Reveal a single square and handle consequences."""
        cell = self._grid[row][col]
        if not cell.reveal():
            return False

        if cell.is_mine:
            cell.exploded = True
            self._game_state = GameState.LOST
            self._show_mines()
            return True

        self._cells_revealed += 1

        if cell.adjacent_mines == 0:
            self._reveal_neighbors(row, col)

        self._check_win_condition()
        return True

    def _reveal_neighbors(self, row: int, col: int) -> None:
        """Recursively reveal neighbors of an empty square."""
        for neighbor_row, neighbor_col in self._get_neighbors(row, col):
            neighbor = self._grid[neighbor_row][neighbor_col]
            if neighbor.state == CellState.HIDDEN:
                self._reveal_cell(neighbor_row, neighbor_col)

    def _show_mines(self) -> None:
        """Uncover every hidden mine after a loss; flags stay in place."""
        for row in self._grid:
            for cell in row:
                if cell.is_mine and cell.is_hidden:
                    cell.reveal()

    def _check_win_condition(self) -> None:
        """Check if all non-mine squares are revealed."""
        total_cells = self.config.width * self.config.height
        non_mine_cells = total_cells - self.config.num_mines
        if self._cells_revealed >= non_mine_cells:
            self._game_state = GameState.WON
            self._flag_mines()

    def _flag_mines(self) -> None:
        """Flag every remaining mine after a win."""
        for row in self._grid:
            for cell in row:
                if cell.is_mine and cell.is_hidden:
                    cell.toggle_flag()

    def flag(self, row: int, col: int) -> bool:
        """
        Toggle flag on a square.

        Args:
            row: Row index.
            col: Column index.

        Returns:
            True if flag was toggled, False otherwise.
        """
        if self._game_state != GameState.PLAYING:
            return False
        if not self._is_valid_position(row, col):
            return False
        return self._grid[row][col].toggle_flag()

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    @property
    def game_state(self) -> GameState:
        """Get current game state."""
        return self._game_state

    @property
    def is_playing(self) -> bool:
        """Check if game is still in progress."""
        return self._game_state == GameState.PLAYING

    @property
    def is_won(self) -> bool:
        """Check if game was won."""
        return self._game_state == GameState.WON

    @property
    def is_lost(self) -> bool:
        """Check if game was lost."""
        return self._game_state == GameState.LOST

    @property
    def cells_revealed(self) -> int:
        """Number of safe squares revealed so far."""
        return self._cells_revealed

    def get_cell(self, row: int, col: int) -> Optional[Square]:
        """Get square at position, or None if invalid."""
        if not self._is_valid_position(row, col):
            return None
        return self._grid[row][col]

    def get_observation(self) -> np.ndarray:
        """
        Get board state as numpy array, as the player sees it.

        Returns:
            2D numpy array where:
                -1 = hidden
                -2 = flagged
                0-8 = revealed with adjacent count
                10 = revealed mine
                11 = revealed mine that was clicked
        """
        obs = np.zeros((self.config.height, self.config.width), dtype=np.int8)
        for row in range(self.config.height):
            for col in range(self.config.width):
                obs[row, col] = self._grid[row][col].to_observation()
        return obs

    def get_valid_actions(self) -> List[Tuple[int, int]]:
        """
        Get list of squares that can still be clicked.

        Returns:
            List of (row, col) positions that are hidden or flagged.
        """
        actions = []
        if self._game_state != GameState.PLAYING:
            return actions
        for row in range(self.config.height):
            for col in range(self.config.width):
                if not self._grid[row][col].is_revealed:
                    actions.append((row, col))
        return actions

    def reset(self, rng: Optional[np.random.Generator] = None) -> None:
        """
        Reset board to initial state for new game.

        Args:
            rng: Optional generator to use for the next mine placement.
        """
        if rng is not None:
            self.rng = rng
        self._init_grid()
        self._game_state = GameState.PLAYING
        self._first_click = True
        self._cells_revealed = 0
