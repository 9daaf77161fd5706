"""
Logic-based agent for the solver.

Applies two local single-cell rules to every revealed number from 1
to 8. Zeros and mines are skipped.

    Rule 1 (flag): if the unopened neighbors exactly account for the
    mines still missing around the number, all of them are mines.

    Rule 2 (reveal): if the flags around the number already match it,
    every unopened neighbor is safe.
"""
from dataclasses import dataclass
from typing import List, Set, Tuple

from board import Action, ActionKind, Board

from .base_agent import BaseAgent


# ============================================================================
# Constraint Types
# ============================================================================

@dataclass
class CellInfo:
    """Information about a revealed number for rule evaluation."""

    row: int
    col: int
    value: int
    unopened_neighbors: List[Tuple[int, int]]
    flagged_count: int

    @property
    def remaining_mines(self) -> int:
        """Mines still to be found among unopened neighbors."""
        return self.value - self.flagged_count

    @property
    def all_mines(self) -> bool:
        """Rule 1: every unopened neighbor must be a mine."""
        unopened = len(self.unopened_neighbors)
        return unopened > 0 and unopened == self.remaining_mines

    @property
    def all_safe(self) -> bool:
        """Rule 2: every unopened neighbor must be safe."""
        return len(self.unopened_neighbors) > 0 and self.value == self.flagged_count


# ============================================================================
# Logic Agent
# ============================================================================

class LogicAgent(BaseAgent):
    """
    Agent that proposes moves which are certain under local constraints.

    Cells are scanned row by row. For each revealed number both rules are
    checked independently and their actions appended in neighbor order.
    The result is deterministic for a given snapshot.
    """

    def propose_actions(self, board: Board) -> List[Action]:
        """
        Run one pass of both rules over the snapshot.

        Args:
            board: Current board snapshot.

        Returns:
            Flag and reveal actions in scan order.
        """
        actions: List[Action] = []
        flagged_this_pass: Set[Tuple[int, int]] = set()

        for row, col in board.positions():
            info = self.get_cell_info(board, row, col)
            if info is None:
                continue

            if info.all_mines:
                for position in info.unopened_neighbors:
                    # Already covered by an earlier flag in this pass
                    if position in flagged_this_pass:
                        continue
                    flagged_this_pass.add(position)
                    actions.append(Action(*position, ActionKind.FLAG))

            if info.all_safe:
                for position in info.unopened_neighbors:
                    actions.append(Action(*position, ActionKind.REVEAL))

        return actions

    def get_cell_info(self, board: Board, row: int, col: int):
        """
        Get rule inputs for a revealed number.

        Returns:
            CellInfo, or None if the cell carries no constraint (hidden,
            flagged, a mine, or a zero).
        """
        number = board.get_cell(row, col).number
        if not number:
            return None

        unopened: List[Tuple[int, int]] = []
        flagged = 0
        for position in board.neighbors_of(row, col):
            neighbor = board.get_cell(*position)
            if neighbor.flagged:
                flagged += 1
            elif not neighbor.revealed:
                unopened.append(position)

        return CellInfo(
            row=row,
            col=col,
            value=number,
            unopened_neighbors=unopened,
            flagged_count=flagged,
        )
