"""
Base agent interface for the solver.

Defines the abstract interface every move source implements.
"""
from abc import ABC, abstractmethod
from typing import List

from board import Action, Board


# ============================================================================
# Base Agent Interface
# ============================================================================

class BaseAgent(ABC):
    """
    Abstract base class for move sources.

    Agents read a board snapshot and propose actions. They never mutate
    the snapshot and never talk to the page directly.
    """

    @abstractmethod
    def propose_actions(self, board: Board) -> List[Action]:
        """
        Propose actions for the given snapshot.

        Args:
            board: Current board snapshot.

        Returns:
            Ordered list of actions, empty if the agent has nothing to offer.
        """
        pass

    def reset(self) -> None:
        """Reset agent state for a new game."""
        pass
