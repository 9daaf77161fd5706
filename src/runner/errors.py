"""Exceptions raised while driving a game."""


class SolverError(Exception):
    """Base class for unrecoverable solver failures."""


class SnapshotError(SolverError):
    """The board could not be read from the page."""


class BoardDimensionError(SolverError):
    """Board dimensions changed between snapshots of the same game."""

    def __init__(self, expected, actual) -> None:
        super().__init__(
            f"Board dimensions changed from {expected[0]}x{expected[1]} "
            f"to {actual[0]}x{actual[1]}"
        )
        self.expected = expected
        self.actual = actual
