"""
Random agent for the solver.

Fallback used when no certain move exists: reveals a uniformly random
cell on the frontier of the revealed region.
"""
from typing import List, Optional, Tuple

import numpy as np

from board import Action, ActionKind, Board

from .base_agent import BaseAgent


# ============================================================================
# Random Agent
# ============================================================================

class RandomAgent(BaseAgent):
    """
    Agent that reveals a random frontier cell.

    Candidates are cells that are neither revealed nor flagged and touch at
    least one revealed cell. Isolated hidden regions are never picked.
    """

    def __init__(
        self,
        seed: Optional[int] = None,
        rng: Optional[np.random.Generator] = None,
    ) -> None:
        """
        Initialize the random agent.

        Args:
            seed: Random seed for reproducibility.
            rng: Generator to draw from; takes precedence over seed.
        """
        self.rng = rng if rng is not None else np.random.default_rng(seed)

    def candidates(self, board: Board) -> List[Tuple[int, int]]:
        """
        Get frontier cells in scan order.

        Args:
            board: Current board snapshot.

        Returns:
            List of (row, col) positions eligible for a random reveal.
        """
        result = []
        for row, col in board.positions():
            if not board.get_cell(row, col).is_unopened:
                continue
            if any(
                board.get_cell(*position).revealed
                for position in board.neighbors_of(row, col)
            ):
                result.append((row, col))
        return result

    def select_action(self, board: Board) -> Optional[Action]:
        """
        Pick one frontier cell uniformly at random.

        Returns:
            Reveal action, or None when no candidate exists.
        """
        candidates = self.candidates(board)
        if not candidates:
            return None
        row, col = candidates[self.rng.integers(len(candidates))]
        return Action(row, col, ActionKind.REVEAL)

    def propose_actions(self, board: Board) -> List[Action]:
        action = self.select_action(board)
        return [action] if action is not None else []
