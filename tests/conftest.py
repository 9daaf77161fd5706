"""
Pytest configuration and shared fixtures.
"""
import pytest
import sys
from pathlib import Path
from typing import List

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from board import ActionKind, Board, GameStatus
from game import BoardConfig, Minefield, MinesweeperEnv
from runner import (
    GameStatusProvider,
    LocalGame,
    MoveExecutor,
    RetryPolicy,
    SnapshotProvider,
)


# ============================================================================
# Scripted Collaborators
# ============================================================================

class ScriptedPage(SnapshotProvider, MoveExecutor, GameStatusProvider):
    """
    Fake page that replays a fixed sequence of snapshots.

    Each call to get_board_state returns the next snapshot; the last one
    repeats. Clicks are recorded.
    """

    def __init__(self, boards: List[Board], status: GameStatus = GameStatus.ONGOING):
        self.boards = list(boards)
        self.status = status
        self.clicks = []
        self.snapshot_calls = 0

    def get_board_state(self) -> Board:
        index = min(self.snapshot_calls, len(self.boards) - 1)
        self.snapshot_calls += 1
        return self.boards[index]

    def click_cell(self, row: int, col: int, kind: ActionKind) -> None:
        self.clicks.append((row, col, kind))

    def get_game_status(self) -> GameStatus:
        return self.status


@pytest.fixture
def scripted_page():
    """Factory for scripted pages."""
    return ScriptedPage


# ============================================================================
# Snapshot Fixtures
# ============================================================================

@pytest.fixture
def hidden_board() -> Board:
    """A 3x3 board with nothing revealed."""
    return Board.from_rows([". . .", ". . .", ". . ."])


@pytest.fixture
def open_center_board() -> Board:
    """A 3x3 board with a revealed zero in the centre."""
    return Board.from_rows([". . .", ". 0 .", ". . ."])


@pytest.fixture
def lost_board() -> Board:
    """A board showing an exploded and an unexploded mine."""
    return Board.from_rows(["1 [M] .", "1 2 .", "0 1 M"])


# ============================================================================
# Local Game Fixtures
# ============================================================================

@pytest.fixture
def default_minefield() -> Minefield:
    """Create a default 9x9 minefield with 10 mines."""
    return Minefield()


@pytest.fixture
def small_minefield() -> Minefield:
    """Create a small 3x3 minefield with 1 mine for testing."""
    return Minefield(BoardConfig(3, 3, 1))


@pytest.fixture
def empty_minefield() -> Minefield:
    """Create a minefield with no mines for cascade testing."""
    return Minefield(BoardConfig(5, 5, 0))


@pytest.fixture
def env() -> MinesweeperEnv:
    """Environment on a 4x4 board with 2 mines."""
    return MinesweeperEnv(config=BoardConfig(4, 4, 2))


@pytest.fixture
def no_wait() -> RetryPolicy:
    """Retry policy without backoff."""
    return RetryPolicy(max_retries=3, backoff_seconds=0.0)


@pytest.fixture
def local_game(no_wait: RetryPolicy) -> LocalGame:
    """Local 5x5 game with a single mine in the corner."""
    game = LocalGame(config=BoardConfig(5, 5, 1), retry_policy=no_wait)
    game.new_game(mines=[(0, 0)])
    return game


@pytest.fixture
def valid_config() -> BoardConfig:
    """Create a valid board configuration."""
    return BoardConfig(9, 9, 10)
