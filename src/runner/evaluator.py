"""
Evaluation of the solver on local games.

Plays a batch of seeded games and aggregates the outcomes.
"""
from pathlib import Path
from typing import Any, Dict, List, Optional
import json

import numpy as np

from agents import RandomAgent
from board import GameStatus
from game import BoardConfig

from .collaborators import RetryPolicy
from .game_loop import GameLoop, GameResult, LoopConfig
from .local import LocalGame


# ============================================================================
# Solver Evaluator
# ============================================================================

class Evaluator:
    """
    Evaluate the solver over many local games.

    Games are played without delays and with a single confirmation check
    per click, since the local game updates synchronously.
    """

    def __init__(
        self,
        board_config: Optional[BoardConfig] = None,
        num_games: int = 100,
        loop_config: Optional[LoopConfig] = None,
        seed: Optional[int] = None,
    ) -> None:
        """
        Initialize the evaluator.

        Args:
            board_config: Board configuration for evaluation.
            num_games: Number of games to play.
            loop_config: Loop configuration for each game.
            seed: Seed for mine layouts and guesses.
        """
        if num_games < 1:
            raise ValueError("num_games must be positive")
        self.board_config = board_config or BoardConfig()
        self.num_games = num_games
        self.loop_config = loop_config or LoopConfig()
        self.seed = seed
        self.results: List[GameResult] = []

    def evaluate(self) -> Dict[str, float]:
        """
        Play all games.

        Returns:
            Dictionary with evaluation metrics.
        """
        rng = np.random.default_rng(self.seed)
        game = LocalGame(
            config=self.board_config,
            retry_policy=RetryPolicy(max_retries=1, backoff_seconds=0.0),
        )
        loop = GameLoop(
            game,
            game,
            game,
            config=self.loop_config,
            random_agent=RandomAgent(rng=rng),
        )

        self.results = []
        total_revealed = 0
        for _ in range(self.num_games):
            game.new_game(seed=int(rng.integers(2**31)))
            self.results.append(loop.run())
            total_revealed += game.env.board.cells_revealed

        return self._summarize(total_revealed)

    def _summarize(self, total_revealed: int) -> Dict[str, float]:
        """Aggregate per-game results."""
        n = len(self.results)
        wins = sum(1 for r in self.results if r.won)
        losses = sum(1 for r in self.results if r.status is GameStatus.LOST)
        return {
            "games": n,
            "win_rate": wins / n,
            "loss_rate": losses / n,
            "avg_steps": sum(r.steps for r in self.results) / n,
            "avg_revealed": total_revealed / n,
            "avg_random_moves": sum(
                r.moves.random_reveals for r in self.results
            ) / n,
        }

    def save(self, path: str) -> None:
        """Save summary and per-game results to JSON."""
        output = Path(path)
        output.parent.mkdir(parents=True, exist_ok=True)
        payload: Dict[str, Any] = {
            "summary": self._summarize_saved(),
            "games": [r.to_dict() for r in self.results],
        }
        with open(output, "w") as f:
            json.dump(payload, f, indent=2)

    def _summarize_saved(self) -> Dict[str, Any]:
        wins = sum(1 for r in self.results if r.won)
        return {
            "games": len(self.results),
            "wins": wins,
            "board": {
                "width": self.board_config.width,
                "height": self.board_config.height,
                "num_mines": self.board_config.num_mines,
            },
            "seed": self.seed,
        }
