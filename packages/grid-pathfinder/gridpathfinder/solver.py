"""
A* solver for octile grids.

The solver is a small state machine::

    INITIALIZING -> EXPANDING -> (EXPANDING ...) -> SUCCEEDED | EXHAUSTED

It owns one Grid, one Frontier and one CostModel for the duration of a run.
Every call to ``solve`` builds a fresh Frontier, so solving the same grid
twice gives identical results.
"""

from enum import Enum

from gridpathfinder.cost_model import CostModel
from gridpathfinder.dtypes import Position
from gridpathfinder.errors import ERROR_EXPANSION_LIMIT, ExpansionLimitError, FrontierExhaustedError
from gridpathfinder.frontier import Frontier
from gridpathfinder.grid import CellMarker, Grid
from gridpathfinder.logging_config import logger
from gridpathfinder.reconstructor import reconstruct
from gridpathfinder.report.dtypes import ExpansionRecord, SolveOutcome, SolveResult


class SolverState(Enum):
    """States of the search loop."""

    INITIALIZING = "initializing"
    EXPANDING = "expanding"
    SUCCEEDED = "succeeded"
    EXHAUSTED = "exhausted"


class Solver:
    """
    Find a route between the start and goal cells of a grid.

    Parameters
    ----------
    grid : Grid
        Grid to search. It is never modified.
    cost_model : CostModel | None
        Step and heuristic costs, defaults to 10 orthogonal / 14 diagonal.
    start : tuple[int, int] | None
        Start cell. Located via the START marker when omitted.
    goal : tuple[int, int] | None
        Goal cell. Located via the GOAL marker when omitted.
    max_expansions : int | None
        Upper bound on cells expanded after the start, or None for no bound.

    Attributes
    ----------
    state : SolverState
        State the last run ended in.
    frontier : Frontier | None
        Frontier of the run in progress, or None between runs.
    """

    def __init__(  # noqa: PLR0913
        self,
        grid: Grid,
        cost_model: CostModel | None = None,
        *,
        start: tuple[int, int] | None = None,
        goal: tuple[int, int] | None = None,
        max_expansions: int | None = None,
    ) -> None:
        """Initialize the solver."""
        self.grid = grid
        self.cost_model = cost_model or CostModel()
        self._start = Position(*start) if start is not None else None
        self._goal = Position(*goal) if goal is not None else None
        self.max_expansions = max_expansions

        self.state = SolverState.INITIALIZING
        self.frontier: Frontier | None = None

    def solve(self) -> SolveResult:
        """
        Run the search to completion.

        Returns
        -------
        SolveResult
            ``SUCCEEDED`` with the route, or ``NO_PATH`` when start and goal
            are not connected.

        Raises
        ------
        MarkerNotFoundError
            If the grid lacks a start or goal marker and no explicit
            position was given.
        BrokenChainError
            If the parent links are corrupted.
        ExpansionLimitError
            If ``max_expansions`` is exceeded.
        """
        self.state = SolverState.INITIALIZING
        start = self._start if self._start is not None else self.grid.find_marker(CellMarker.START)
        goal = self._goal if self._goal is not None else self.grid.find_marker(CellMarker.GOAL)
        logger.info(f"Solving {self.grid.rows}x{self.grid.cols} grid from {start} to {goal}")

        frontier = Frontier(self.grid, goal, self.cost_model)
        self.frontier = frontier
        try:
            expansions = self._search(frontier, start, goal)
            if self.state == SolverState.EXHAUSTED:
                logger.info(f"No path found after {len(expansions)} expansions")
                return SolveResult(
                    outcome=SolveOutcome.NO_PATH,
                    start=start,
                    goal=goal,
                    expansions=expansions,
                )
            return self._succeed(frontier, start, goal, expansions)
        finally:
            self.frontier = None

    # -------------------- states --------------------

    def _search(
        self,
        frontier: Frontier,
        start: Position,
        goal: Position,
    ) -> list[ExpansionRecord]:
        frontier.seed(start)
        expansions = [_record(frontier, 0, start)]

        if start == goal:
            frontier.settle(start)
            self.state = SolverState.SUCCEEDED
            return expansions

        for neighbor in frontier.reachable_neighbors(start):
            frontier.discover(neighbor, via=start)
        frontier.settle(start)

        try:
            current = frontier.select_next()
        except FrontierExhaustedError:
            self.state = SolverState.EXHAUSTED
            return expansions

        self.state = SolverState.EXPANDING
        while self.state == SolverState.EXPANDING:
            step = len(expansions)
            if self.max_expansions is not None and step > self.max_expansions:
                error_message = ERROR_EXPANSION_LIMIT.format(limit=self.max_expansions)
                logger.error(error_message)
                raise ExpansionLimitError(error_message)

            frontier.settle(current)
            record = _record(frontier, step, current)
            expansions.append(record)
            logger.debug(f"Expanding {current} (step {step}): f={record.net_cost}")

            if current == goal:
                self.state = SolverState.SUCCEEDED
                break

            for neighbor in frontier.reachable_neighbors(current):
                if frontier.is_open(neighbor):
                    frontier.relax(neighbor, via=current)
                else:
                    frontier.discover(neighbor, via=current)

            try:
                current = frontier.select_next()
            except FrontierExhaustedError:
                self.state = SolverState.EXHAUSTED

        return expansions

    def _succeed(
        self,
        frontier: Frontier,
        start: Position,
        goal: Position,
        expansions: list[ExpansionRecord],
    ) -> SolveResult:
        path = reconstruct(frontier.parents, start, goal, limit=self.grid.rows * self.grid.cols)
        route = [start] if start == goal else [start, *path, goal]
        total_cost = frontier.movement_cost[goal]
        logger.info(
            f"Path found: {len(path)} intermediate cells, total cost {total_cost}, "
            f"{len(expansions)} expansions",
        )
        return SolveResult(
            outcome=SolveOutcome.SUCCEEDED,
            start=start,
            goal=goal,
            path=path,
            route_costs=[frontier.movement_cost[cell] for cell in route],
            total_cost=total_cost,
            expansions=expansions,
            solved_grid=apply_path(self.grid, path),
        )


def apply_path(grid: Grid, path: list[Position]) -> Grid:
    """Return a copy of ``grid`` with every intermediate path cell marked PATH."""
    return grid.with_markers(path, CellMarker.PATH)


def mark_explored(grid: Grid, result: SolveResult) -> Grid:
    """
    Return a copy of ``grid`` with every expanded cell marked EXPLORED.

    Start, goal and path cells keep their markers.
    """
    keep = {result.start, result.goal, *result.path}
    base = result.solved_grid if result.solved_grid is not None else grid
    explored = [
        pos
        for pos in result.expanded_positions
        if pos not in keep and base.at(pos) == CellMarker.PASSABLE
    ]
    return base.with_markers(explored, CellMarker.EXPLORED)


def solve(
    grid: Grid,
    cost_model: CostModel | None = None,
    *,
    max_expansions: int | None = None,
) -> SolveResult:
    """Solve a grid with a one-off ``Solver``."""
    return Solver(grid, cost_model, max_expansions=max_expansions).solve()


def _record(frontier: Frontier, step: int, pos: Position) -> ExpansionRecord:
    costs = frontier.costs_of(pos)
    return ExpansionRecord(
        step=step,
        position=pos,
        movement_cost=costs.movement_cost,
        heuristic_cost=costs.heuristic_cost,
        net_cost=costs.net_cost,
    )
