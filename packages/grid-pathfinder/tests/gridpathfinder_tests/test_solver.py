"""Tests for the A* solver."""

from pathlib import Path

import pytest
from gridpathfinder.adapters.text import load_grid, parse_grid
from gridpathfinder.cost_model import CostModel, step_cost
from gridpathfinder.errors import ExpansionLimitError, MarkerNotFoundError
from gridpathfinder.generator import generate_grid
from gridpathfinder.grid import CellMarker
from gridpathfinder.report.dtypes import SolveOutcome
from gridpathfinder.solver import Solver, SolverState, apply_path, mark_explored, solve

MAZE_DIR = Path(__file__).parents[4] / "mazes"


class TestSolverScenarios:
    """Test concrete solving scenarios."""

    def test_open_grid_takes_diagonal(self, open_grid):
        """Test that an open 3x3 grid is crossed with two diagonal steps."""
        result = Solver(open_grid).solve()

        assert result.outcome == SolveOutcome.SUCCEEDED
        assert result.path == [(1, 1)]
        assert result.total_cost == 28
        assert result.route == [(0, 0), (1, 1), (2, 2)]
        assert result.route_costs == [0, 14, 28]
        assert result.solved_grid.at((1, 1)) == CellMarker.PATH

    def test_corridor_forces_detour(self, corridor_grid):
        """Test that a walled middle row forces a route through (1, 0)."""
        result = Solver(corridor_grid).solve()

        assert result.success
        assert result.path == [(1, 0), (2, 1)]
        # orthogonal + diagonal + orthogonal, not the naive 28
        assert result.total_cost == 34
        assert result.solved_grid.positions_of(CellMarker.PATH) == [(1, 0), (2, 1)]

    def test_walled_goal_reports_no_path(self, walled_goal_grid):
        """Test that an enclosed goal ends in NO_PATH instead of raising."""
        solver = Solver(walled_goal_grid)
        result = solver.solve()

        assert result.outcome == SolveOutcome.NO_PATH
        assert not result.success
        assert result.path == []
        assert result.route == []
        assert result.total_cost is None
        assert result.solved_grid is None
        assert solver.state == SolverState.EXHAUSTED
        # every open cell outside the enclosure was expanded
        assert len(result.expansions) == 25 - 9

    def test_enclosed_start_reports_no_path(self):
        """Test that a start with no reachable neighbors ends immediately."""
        grid = parse_grid("S*.\n**.\n..E\n")
        result = Solver(grid).solve()

        assert result.outcome == SolveOutcome.NO_PATH
        assert result.expanded_positions == [(0, 0)]

    def test_start_equals_goal(self, open_grid):
        """Test that identical start and goal succeed without expanding neighbors."""
        solver = Solver(open_grid, start=(1, 1), goal=(1, 1))
        result = solver.solve()

        assert result.success
        assert result.path == []
        assert result.total_cost == 0
        assert result.route == [(1, 1)]
        assert result.expanded_positions == [(1, 1)]
        assert solver.state == SolverState.SUCCEEDED

    def test_adjacent_goal(self):
        """Test a goal directly next to the start."""
        result = Solver(parse_grid("SE\n")).solve()

        assert result.success
        assert result.path == []
        assert result.total_cost == 10

    def test_explicit_positions_override_markers(self, open_grid):
        """Test solving between positions that carry no markers."""
        result = Solver(open_grid, start=(0, 2), goal=(2, 0)).solve()

        assert result.start == (0, 2)
        assert result.goal == (2, 0)
        assert result.path == [(1, 1)]

    def test_longer_maze(self):
        """Test a maze that needs to wind around walls."""
        grid = parse_grid(
            "*********\n"
            "*S  *   *\n"
            "*** * * *\n"
            "*   * * *\n"
            "* *** * *\n"
            "*     *E*\n"
            "*********\n",
        )
        result = Solver(grid).solve()

        assert result.success
        route = result.route
        assert route[0] == (1, 1)
        assert route[-1] == (5, 7)
        for cell in route:
            assert grid.is_passable(cell)
        assert result.total_cost == sum(
            step_cost(a, b) for a, b in zip(route, route[1:], strict=False)
        )


class TestSolverErrors:
    """Test fatal errors raised by the solver."""

    def test_missing_start(self):
        """Test that a grid without a start marker raises MarkerNotFoundError."""
        with pytest.raises(MarkerNotFoundError, match="start"):
            Solver(parse_grid("...\n..E\n")).solve()

    def test_missing_goal(self):
        """Test that a grid without a goal marker raises MarkerNotFoundError."""
        with pytest.raises(MarkerNotFoundError, match="goal"):
            Solver(parse_grid("S..\n...\n")).solve()

    def test_expansion_limit(self):
        """Test that the expansion guard stops long searches."""
        grid = generate_grid(10, 10, obstacle_density=0.0, seed=1)
        with pytest.raises(ExpansionLimitError, match="1 cells"):
            Solver(grid, max_expansions=1).solve()

    def test_expansion_limit_not_hit(self, open_grid):
        """Test that a generous limit does not interfere."""
        result = Solver(open_grid, max_expansions=100).solve()
        assert result.total_cost == 28


class TestSolverProperties:
    """Test properties that hold across many grids."""

    @pytest.mark.parametrize(("rows", "cols"), [(2, 2), (3, 7), (8, 5), (12, 12), (1, 2)])
    def test_open_grids_always_succeed(self, rows, cols):
        """Test that a grid without walls always has a route."""
        if rows == 1:
            grid = parse_grid("S" + "." * (cols - 2) + "E\n")
        else:
            grid = generate_grid(rows, cols, obstacle_density=0.0, seed=0)
        assert Solver(grid).solve().success

    @pytest.mark.parametrize("seed", range(12))
    def test_routes_are_valid(self, seed):
        """Test that every route is connected, passable and consistently costed."""
        grid = generate_grid(12, 15, obstacle_density=0.3, seed=seed)
        result = Solver(grid).solve()

        if not result.success:
            assert result.outcome == SolveOutcome.NO_PATH
            return

        route = result.route
        for a, b in zip(route, route[1:], strict=False):
            assert max(abs(a[0] - b[0]), abs(a[1] - b[1])) == 1
            assert grid.is_passable(b)
        assert result.route_costs == sorted(result.route_costs)
        assert result.route_costs[-1] == result.total_cost
        assert len(set(route)) == len(route)

    def test_route_costs_non_decreasing(self, corridor_grid):
        """Test that movement cost never drops along the route."""
        costs = Solver(corridor_grid).solve().route_costs
        assert all(b > a for a, b in zip(costs, costs[1:], strict=False))

    @pytest.mark.parametrize("seed", [3, 17, 42])
    def test_deterministic(self, seed):
        """Test that solving twice gives identical paths and expansion orders."""
        grid = generate_grid(15, 15, obstacle_density=0.25, seed=seed)
        solver = Solver(grid)

        first = solver.solve()
        second = solver.solve()
        third = Solver(grid).solve()

        assert first.path == second.path == third.path
        assert first.expansions == second.expansions == third.expansions

    def test_input_grid_is_not_modified(self, open_grid):
        """Test that solving leaves the input grid untouched."""
        before = open_grid.copy()
        Solver(open_grid).solve()
        assert open_grid == before

    def test_frontier_is_released_after_run(self, open_grid):
        """Test that the per-run tables are dropped once a result exists."""
        solver = Solver(open_grid)
        solver.solve()
        assert solver.frontier is None


class TestPathMarking:
    """Test applying results back onto grids."""

    def test_apply_path(self, open_grid):
        """Test that only intermediate cells are marked."""
        marked = apply_path(open_grid, [(1, 1), (1, 2)])

        assert marked.positions_of(CellMarker.PATH) == [(1, 1), (1, 2)]
        assert marked.at((0, 0)) == CellMarker.START
        assert marked.at((2, 2)) == CellMarker.GOAL

    def test_mark_explored(self):
        """Test that expanded cells off the route are marked explored."""
        grid = parse_grid("S....\n.***.\n....E\n")
        result = Solver(grid).solve()
        explored = mark_explored(grid, result)

        assert explored.at(result.start) == CellMarker.START
        assert explored.at(result.goal) == CellMarker.GOAL
        for pos in result.path:
            assert explored.at(pos) == CellMarker.PATH
        off_route = set(result.expanded_positions) - {result.start, result.goal, *result.path}
        for pos in off_route:
            assert explored.at(pos) == CellMarker.EXPLORED
        assert explored.count(CellMarker.IMPASSABLE) == 3

    def test_solve_helper_uses_cost_model(self, open_grid):
        """Test the one-off solve function with custom costs."""
        result = solve(open_grid, CostModel(orthogonal_cost=1, diagonal_cost=2))

        assert result.success
        assert result.total_cost == 4


class TestShippedMazes:
    """Test the sample mazes in the repository."""

    def test_maze1_is_solvable(self):
        """Test that the walled demo maze has a consistent route."""
        grid = load_grid(MAZE_DIR / "maze1")
        result = Solver(grid).solve()

        assert result.success
        assert result.route[0] == grid.find_marker(CellMarker.START)
        assert result.route[-1] == grid.find_marker(CellMarker.GOAL)
        for cell in result.path:
            assert grid.at(cell) == CellMarker.PASSABLE
        assert result.total_cost == sum(
            step_cost(a, b) for a, b in zip(result.route, result.route[1:], strict=False)
        )

    def test_walled_has_no_path(self):
        """Test that the enclosed goal is reported as unreachable."""
        result = Solver(load_grid(MAZE_DIR / "walled.txt")).solve()

        assert result.outcome == SolveOutcome.NO_PATH
        assert result.solved_grid is None
