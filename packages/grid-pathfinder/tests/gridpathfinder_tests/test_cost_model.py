"""Tests for step costs and the heuristic."""

import pytest
from gridpathfinder.cost_model import CostModel, heuristic, step_cost
from gridpathfinder.errors import InvalidMoveError, PathfindingError
from gridpathfinder.grid import NEIGHBOR_OFFSETS

ORTHOGONAL_OFFSETS = [(0, 1), (0, -1), (1, 0), (-1, 0)]
DIAGONAL_OFFSETS = [(1, 1), (1, -1), (-1, 1), (-1, -1)]


class TestStepCost:
    """Test step cost between adjacent cells."""

    @pytest.mark.parametrize(("d_row", "d_col"), ORTHOGONAL_OFFSETS)
    def test_orthogonal_step(self, d_row, d_col):
        """Test that orthogonal steps cost 10."""
        assert step_cost((5, 5), (5 + d_row, 5 + d_col)) == 10

    @pytest.mark.parametrize(("d_row", "d_col"), DIAGONAL_OFFSETS)
    def test_diagonal_step(self, d_row, d_col):
        """Test that diagonal steps cost 14."""
        assert step_cost((5, 5), (5 + d_row, 5 + d_col)) == 14

    @pytest.mark.parametrize(("d_row", "d_col"), NEIGHBOR_OFFSETS)
    def test_symmetric(self, d_row, d_col):
        """Test that step cost does not depend on direction."""
        a, b = (3, 4), (3 + d_row, 4 + d_col)
        assert step_cost(a, b) == step_cost(b, a)

    @pytest.mark.parametrize(
        "dest",
        [(5, 5), (5, 7), (7, 5), (7, 7), (3, 6), (6, 3), (0, 0)],
    )
    def test_invalid_move(self, dest):
        """Test that identical or non-adjacent cells raise InvalidMoveError."""
        with pytest.raises(InvalidMoveError):
            step_cost((5, 5), dest)

    def test_invalid_move_is_assertion(self):
        """Test that invalid moves surface as assertion failures."""
        with pytest.raises(AssertionError):
            step_cost((0, 0), (0, 2))
        assert issubclass(InvalidMoveError, PathfindingError)

    def test_custom_costs(self):
        """Test a cost model with non-default step costs."""
        model = CostModel(orthogonal_cost=2, diagonal_cost=3)
        assert model.step_cost((0, 0), (0, 1)) == 2
        assert model.step_cost((0, 0), (1, 1)) == 3


class TestHeuristic:
    """Test the Manhattan heuristic."""

    def test_zero_at_goal(self):
        """Test that the heuristic is zero exactly at the goal."""
        assert heuristic((4, 7), (4, 7)) == 0
        assert heuristic((4, 6), (4, 7)) > 0

    def test_manhattan_times_orthogonal_cost(self):
        """Test the scaled Manhattan distance."""
        assert heuristic((0, 0), (2, 2)) == 40
        assert heuristic((5, 1), (2, 3)) == 50

    def test_ignores_diagonal_shortcuts(self):
        """Test that the estimate exceeds the true diagonal cost."""
        # Two diagonal steps cost 28 but the estimate is 40
        assert heuristic((0, 0), (2, 2)) > 2 * step_cost((0, 0), (1, 1))

    @pytest.mark.parametrize(("d_row", "d_col"), ORTHOGONAL_OFFSETS)
    def test_strictly_decreasing_on_straight_approach(self, d_row, d_col):
        """Test that h drops with every orthogonal step toward the goal."""
        goal = (10, 10)
        values = [heuristic((10 + d_row * k, 10 + d_col * k), goal) for k in range(6, -1, -1)]
        assert values[-1] == 0
        assert all(later < earlier for earlier, later in zip(values, values[1:], strict=False))

    def test_scales_with_model(self):
        """Test that the heuristic uses the model's orthogonal cost."""
        model = CostModel(orthogonal_cost=3, diagonal_cost=4)
        assert model.heuristic((0, 0), (1, 2)) == 9
