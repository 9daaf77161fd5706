"""
Unit tests for the LogicAgent.

Tests both local rules, their boundaries, scan order and purity.
"""
import pytest
from agents import LogicAgent
from board import Action, ActionKind, Board

FLAG = ActionKind.FLAG
REVEAL = ActionKind.REVEAL


@pytest.fixture
def agent() -> LogicAgent:
    return LogicAgent()


def kinds(actions, kind):
    return [a.position for a in actions if a.kind is kind]


# ============================================================================
# Rule 1 (Flag) Tests
# ============================================================================

class TestFlagRule:
    """Unopened neighbors that exactly fill the missing mines are flagged."""

    def test_flags_single_remaining_neighbor(self, agent: LogicAgent) -> None:
        """Value 2, one flag, one unopened neighbor: flag that neighbor."""
        board = Board.from_rows([
            "F 1 1",
            "1 2 1",
            "1 1 .",
        ])
        actions = agent.propose_actions(board)
        assert Action(2, 2, FLAG) in actions
        assert kinds(actions, FLAG) == [(2, 2)]

    def test_flags_all_unopened_when_count_matches(self, agent: LogicAgent) -> None:
        """A 3 with exactly three unopened neighbors flags all three."""
        board = Board.from_rows([
            ". . .",
            "2 3 2",
        ])
        actions = agent.propose_actions(board)
        assert kinds(actions, FLAG) == [(0, 0), (0, 1), (0, 2)]
        assert kinds(actions, REVEAL) == []

    def test_no_flag_when_more_unopened_than_mines(self, agent: LogicAgent) -> None:
        """Two unopened neighbors and one missing mine is undecided."""
        board = Board.from_rows([". .", "1 1"])
        # Each 1 sees both hidden cells: 1 mine among 2 cells
        assert agent.propose_actions(board) == []

    def test_duplicate_flags_in_one_pass_are_skipped(self, agent: LogicAgent) -> None:
        """A mine implied by two numbers is flagged once."""
        board = Board.from_rows([
            "1 .",
            "1 1",
        ])
        actions = agent.propose_actions(board)
        assert actions == [Action(0, 1, FLAG)]

    def test_too_many_flags_matches_nothing(self, agent: LogicAgent) -> None:
        """value - flagged negative: neither rule fires for that cell."""
        board = Board.from_rows([
            "F F .",
            "F 1 0",
        ])
        actions = agent.propose_actions(board)
        assert actions == []

    def test_missing_mines_exceeding_unopened_matches_nothing(
        self, agent: LogicAgent
    ) -> None:
        """value - flagged larger than unopened count fires no rule."""
        board = Board.from_rows([
            ". 2",
            "3 2",
        ])
        # (1, 0) needs 3 mines but only has one unopened neighbor
        assert agent.propose_actions(board) == []


# ============================================================================
# Rule 2 (Reveal) Tests
# ============================================================================

class TestRevealRule:
    """Unopened neighbors of a satisfied number are revealed."""

    def test_reveals_around_satisfied_number(self, agent: LogicAgent) -> None:
        """A 1 touching one flag reveals its other unopened neighbors."""
        board = Board.from_rows([
            "F . .",
            "1 1 .",
        ])
        actions = agent.propose_actions(board)
        assert kinds(actions, REVEAL) == [(0, 1), (0, 1), (0, 2), (1, 2)]
        assert kinds(actions, FLAG) == []

    def test_zero_with_unopened_neighbors_proposes_nothing(
        self, agent: LogicAgent, open_center_board: Board
    ) -> None:
        """A revealed 0 carries no constraint, even with hidden neighbors."""
        assert agent.get_cell_info(open_center_board, 1, 1) is None
        assert agent.propose_actions(open_center_board) == []

    def test_zeros_do_not_reveal_a_forced_mine(self, agent: LogicAgent) -> None:
        """Only the 2 acts when zeros also touch its last unopened neighbor."""
        board = Board.from_rows([
            "F 0 0",
            "0 2 0",
            "0 0 .",
        ])
        assert agent.propose_actions(board) == [Action(2, 2, FLAG)]

    def test_no_reveal_without_unopened(self, agent: LogicAgent) -> None:
        """A satisfied number with no unopened neighbors adds nothing."""
        board = Board.from_rows(["F 1", "1 1"])
        assert agent.propose_actions(board) == []


# ============================================================================
# Scan Tests
# ============================================================================

class TestScan:
    """Test skipping, ordering and purity of the pass."""

    def test_hidden_board_has_no_moves(
        self, agent: LogicAgent, hidden_board: Board
    ) -> None:
        """Nothing revealed means nothing certain."""
        assert agent.propose_actions(hidden_board) == []

    def test_mines_are_skipped(self, agent: LogicAgent, lost_board: Board) -> None:
        """Mine sentinels carry no constraint."""
        assert agent.get_cell_info(lost_board, 0, 1) is None
        assert agent.get_cell_info(lost_board, 2, 2) is None

    def test_actions_follow_scan_order(self, agent: LogicAgent) -> None:
        """Actions of earlier cells come first."""
        board = Board.from_rows([
            ". 1 0 0 1 .",
            ". 1 0 0 1 .",
            "F 1 0 0 1 F",
        ])
        actions = agent.propose_actions(board)
        assert actions == [
            Action(0, 0, REVEAL),
            Action(1, 0, REVEAL),
            Action(0, 5, REVEAL),
            Action(1, 5, REVEAL),
            Action(1, 0, REVEAL),
            Action(1, 5, REVEAL),
        ]

    def test_undecidable_board_returns_empty(self, agent: LogicAgent) -> None:
        """No cell satisfying either rule yields no actions."""
        board = Board.from_rows([
            ". . . .",
            "1 1 1 1",
            "0 0 0 0",
        ])
        assert agent.propose_actions(board) == []

    def test_same_board_same_actions(self, agent: LogicAgent) -> None:
        """Running twice on an unchanged board gives identical lists."""
        board = Board.from_rows([
            ". . . .",
            "1 2 F 1",
            "0 1 1 1",
        ])
        first = agent.propose_actions(board)
        second = agent.propose_actions(board)
        assert first == second
        assert first

    def test_board_is_not_modified(self, agent: LogicAgent) -> None:
        """The snapshot is left untouched."""
        board = Board.from_rows(["F . .", "1 1 ."])
        before = board.render()
        agent.propose_actions(board)
        assert board.render() == before

    def test_cell_info_partitions_neighbors(self, agent: LogicAgent) -> None:
        """Flagged and unopened neighbors are counted separately."""
        board = Board.from_rows(["F . 1", "2 3 ."])
        info = agent.get_cell_info(board, 1, 1)
        assert info.value == 3
        assert info.flagged_count == 1
        assert info.unopened_neighbors == [(0, 1), (1, 2)]
        assert info.remaining_mines == 2
        assert info.all_mines is True
        assert info.all_safe is False

    def test_cell_info_none_for_hidden(self, agent: LogicAgent, hidden_board: Board) -> None:
        """Hidden cells carry no constraint."""
        assert agent.get_cell_info(hidden_board, 0, 0) is None
