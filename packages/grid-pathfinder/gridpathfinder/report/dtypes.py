"""Data types for reporting search results in Grid Pathfinder."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from gridpathfinder.dtypes import Position, Route
from gridpathfinder.grid import Grid


class SolveOutcome(str, Enum):
    """Outcome of a completed search.

    Attributes
    ----------
    SUCCEEDED : str
        The goal was expanded and a route was reconstructed.
    NO_PATH : str
        The open set ran dry; start and goal are not connected.
    """

    SUCCEEDED = "succeeded"
    NO_PATH = "no_path"


class ExpansionRecord(BaseModel):
    """
    A single expansion performed by the solver.

    Attributes
    ----------
    step : int
        1-based expansion counter. The start cell is step 0.
    position : Position
        Cell that was expanded.
    movement_cost : int
        g of the cell when it was expanded.
    heuristic_cost : int
        h of the cell.
    net_cost : int
        f of the cell.
    """

    step: int
    position: Position
    movement_cost: int
    heuristic_cost: int
    net_cost: int


class SolveResult(BaseModel):
    """
    Result of one solver run.

    Attributes
    ----------
    outcome : SolveOutcome
        Whether a route was found.
    start : Position
        Start cell.
    goal : Position
        Goal cell.
    path : list[Position]
        Intermediate cells of the route, start-to-goal, endpoints excluded.
        Empty when no route exists.
    route_costs : list[int]
        Movement cost of each cell of ``route``. Empty when no route exists.
    total_cost : int | None
        Movement cost of the goal, or None when no route exists.
    expansions : list[ExpansionRecord]
        Every expansion in the order it happened.
    solved_grid : Grid | None
        Copy of the input grid with ``path`` marked, or None when no route exists.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    outcome: SolveOutcome
    start: Position
    goal: Position
    path: list[Position] = Field(default_factory=list)
    route_costs: list[int] = Field(default_factory=list)
    total_cost: int | None = None
    expansions: list[ExpansionRecord] = Field(default_factory=list)
    solved_grid: Grid | None = None

    @property
    def success(self) -> bool:
        """Whether the search reached the goal."""
        return self.outcome == SolveOutcome.SUCCEEDED

    @property
    def route(self) -> Route:
        """Full route including start and goal, or empty when unsolved."""
        if not self.success:
            return []
        if self.start == self.goal:
            return [self.start]
        return [self.start, *self.path, self.goal]

    @property
    def expanded_positions(self) -> list[Position]:
        """Expanded cells in expansion order."""
        return [record.position for record in self.expansions]
