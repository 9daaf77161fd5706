"""
Local game collaborators.

Implements the snapshot, click and status contracts on top of the
in-process MinesweeperEnv, so the solver can play without a browser.
"""
from typing import Callable, Iterable, Optional, Tuple
import time

import numpy as np

from board import HIDDEN, ActionKind, Board, Cell, GameStatus
from game import BoardConfig, MinesweeperEnv

from .collaborators import (
    GameStatusProvider,
    MoveExecutor,
    RetryPolicy,
    SnapshotProvider,
    classify_status,
)


# ============================================================================
# Local Game
# ============================================================================

class LocalGame(SnapshotProvider, MoveExecutor, GameStatusProvider):
    """
    Plays the role of the web page for a local game.

    Clicks are sent to the environment, then the cell is polled until it
    shows as opened or flagged, following the retry policy. A click that
    is never confirmed is reported and otherwise ignored.
    """

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        retry_policy: Optional[RetryPolicy] = None,
        settle_delay: float = 0.0,
        sleep: Callable[[float], None] = time.sleep,
        env: Optional[MinesweeperEnv] = None,
    ) -> None:
        """
        Initialize the local game.

        Args:
            config: Board configuration (ignored when env is given).
            retry_policy: Confirmation polling policy.
            settle_delay: Seconds to wait before each snapshot.
            sleep: Function used for delays and backoff.
            env: Environment to drive; created from config if omitted.
        """
        self.env = env or MinesweeperEnv(config=config)
        self.retry_policy = retry_policy or RetryPolicy()
        self.settle_delay = settle_delay
        self.sleep = sleep
        self.unconfirmed_clicks = 0

    def new_game(
        self,
        seed: Optional[int] = None,
        mines: Optional[Iterable[Tuple[int, int]]] = None,
    ) -> None:
        """
        Start a fresh game.

        Args:
            seed: Seed for mine placement.
            mines: Fixed mine positions; random placement if omitted.
        """
        self.env.reset(seed=seed, options={"mines": mines})
        self.unconfirmed_clicks = 0

    # ========================================================================
    # SnapshotProvider
    # ========================================================================

    def get_board_state(self) -> Board:
        if self.settle_delay:
            self.sleep(self.settle_delay)
        return Board.from_observation(self.env.board.get_observation())

    # ========================================================================
    # MoveExecutor
    # ========================================================================

    def click_cell(self, row: int, col: int, kind: ActionKind) -> None:
        if self.env.board.get_cell(row, col) is None:
            print(f"Failed to find cell at row {row}, col {col}")
            return

        flag = kind is ActionKind.FLAG
        observation, *_ = self.env.step(self.env.encode_action(row, col, flag=flag))

        if not self._await_confirmation(row, col, observation):
            self.unconfirmed_clicks += 1
            print(
                f"Click on row {row}, col {col} not confirmed after "
                f"{self.retry_policy.max_retries} checks, proceeding..."
            )

    def _await_confirmation(
        self, row: int, col: int, observation: np.ndarray
    ) -> bool:
        """
        Poll the cell until it shows as opened or flagged.

        The first check uses the observation returned by the click; each
        retry reads the board again after the backoff.
        """
        policy = self.retry_policy
        for attempt in range(1, policy.max_retries + 1):
            if Cell.from_observation(observation[row, col]) != HIDDEN:
                return True
            print(
                f"Update timeout for row {row}, col {col} "
                f"(retry {attempt}/{policy.max_retries}), retrying..."
            )
            self.sleep(policy.backoff_seconds)
            observation = self.env.board.get_observation()
        return False

    # ========================================================================
    # GameStatusProvider
    # ========================================================================

    def get_game_status(self) -> GameStatus:
        minefield = self.env.board
        mines_shown = bool((minefield.get_observation() >= 10).any())
        return classify_status(
            lose_indicator=minefield.is_lost,
            game_over_indicator=mines_shown,
            win_indicator=minefield.is_won,
        )
