"""Actions issued to the move executor."""
from enum import Enum
from dataclasses import dataclass


class ActionKind(Enum):
    """What a click on a cell should do."""

    REVEAL = "reveal"
    FLAG = "flag"


@dataclass(frozen=True)
class Action:
    """A single reveal or flag instruction at (row, col)."""

    row: int
    col: int
    kind: ActionKind

    @property
    def position(self):
        return self.row, self.col

    def __str__(self) -> str:
        return f"{self.kind.value} ({self.row}, {self.col})"
