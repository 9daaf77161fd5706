"""
Unit tests for the RandomAgent.

Tests frontier candidate selection and reproducible picks.
"""
import numpy as np
import pytest
from agents import RandomAgent
from board import ActionKind, Board


# ============================================================================
# Candidate Tests
# ============================================================================

class TestCandidates:
    """Test which cells are eligible for a random reveal."""

    def test_frontier_of_open_centre(self, open_center_board: Board) -> None:
        """Every neighbor of a revealed cell is a candidate."""
        agent = RandomAgent(seed=0)
        assert agent.candidates(open_center_board) == open_center_board.neighbors_of(1, 1)

    def test_hidden_board_has_no_candidates(self, hidden_board: Board) -> None:
        """Without revealed cells there is no frontier."""
        agent = RandomAgent(seed=0)
        assert agent.candidates(hidden_board) == []
        assert agent.select_action(hidden_board) is None
        assert agent.propose_actions(hidden_board) == []

    def test_isolated_cells_are_excluded(self) -> None:
        """Hidden cells away from revealed ones are never candidates."""
        board = Board.from_rows([
            "1 . . .",
            ". . . .",
        ])
        agent = RandomAgent(seed=0)
        assert agent.candidates(board) == [(0, 1), (1, 0), (1, 1)]

    def test_flagged_cells_are_excluded(self) -> None:
        """Flagged frontier cells are not candidates."""
        board = Board.from_rows(["1 F", ". ."])
        agent = RandomAgent(seed=0)
        assert agent.candidates(board) == [(1, 0), (1, 1)]

    def test_candidates_are_unopened_with_revealed_neighbor(self) -> None:
        """Every candidate is unrevealed, unflagged and on the frontier."""
        board = Board.from_rows([
            ". . F . .",
            ". 1 2 . .",
            ". 1 . . .",
            ". . . . 0",
        ])
        agent = RandomAgent(seed=0)
        candidates = agent.candidates(board)
        assert candidates
        for row, col in candidates:
            cell = board.get_cell(row, col)
            assert cell.revealed is False
            assert cell.flagged is False
            assert any(
                board.get_cell(*n).revealed for n in board.neighbors_of(row, col)
            )

    def test_fully_revealed_board_has_no_candidates(self) -> None:
        """A solved board offers nothing to guess."""
        board = Board.from_rows(["1 F", "1 1"])
        assert RandomAgent(seed=0).select_action(board) is None


# ============================================================================
# Selection Tests
# ============================================================================

class TestSelection:
    """Test random selection."""

    def test_selection_is_a_reveal_of_a_candidate(
        self, open_center_board: Board
    ) -> None:
        """Selected action reveals one of the candidates."""
        agent = RandomAgent(seed=3)
        action = agent.select_action(open_center_board)
        assert action.kind is ActionKind.REVEAL
        assert action.position in agent.candidates(open_center_board)

    def test_same_seed_same_choices(self, open_center_board: Board) -> None:
        """Seeded agents make identical picks."""
        first = RandomAgent(seed=42)
        second = RandomAgent(seed=42)
        picks_a = [first.select_action(open_center_board) for _ in range(10)]
        picks_b = [second.select_action(open_center_board) for _ in range(10)]
        assert picks_a == picks_b

    def test_generator_is_used(self, open_center_board: Board) -> None:
        """An injected generator drives the choice."""
        agent = RandomAgent(rng=np.random.default_rng(5))
        expected_index = np.random.default_rng(5).integers(8)
        action = agent.select_action(open_center_board)
        assert action.position == open_center_board.neighbors_of(1, 1)[expected_index]

    @pytest.mark.parametrize("seed", range(5))
    def test_single_candidate_always_chosen(self, seed: int) -> None:
        """With one candidate the choice is forced."""
        board = Board.from_rows(["1 1", "1 ."])
        action = RandomAgent(seed=seed).select_action(board)
        assert action.position == (1, 1)
