"""
Open/closed set bookkeeping for the A* search.

The frontier owns every table the search mutates: the open set, the closed
set, the movement/heuristic/net cost tables and the parent links. The solver
drives it through ``discover``, ``relax``, ``select_next`` and ``settle``.

Tie-break policy
----------------
``select_next`` scans the open set in insertion order and returns the first
position whose net cost equals the minimum. This is deliberate: two
implementations that discover cells in the same order pick the same cell,
which keeps solved paths comparable. A priority queue would break ties in
an arbitrary order instead.
"""

from dataclasses import dataclass

from gridpathfinder.cost_model import CostModel
from gridpathfinder.dtypes import Position
from gridpathfinder.errors import ERROR_FRONTIER_EXHAUSTED, FrontierExhaustedError
from gridpathfinder.grid import Grid
from gridpathfinder.logging_config import logger


@dataclass(frozen=True)
class CellCosts:
    """
    Recorded costs of a discovered cell.

    Attributes
    ----------
    movement_cost : int
        Cost of the best known route from the start (g).
    heuristic_cost : int
        Estimated remaining cost to the goal (h).
    net_cost : int
        ``movement_cost + heuristic_cost`` (f).
    """

    movement_cost: int
    heuristic_cost: int
    net_cost: int


class Frontier:
    """
    Frontier of one A* run.

    Attributes
    ----------
    grid : Grid
        Grid being searched.
    goal : Position
        Target cell the heuristic is measured against.
    cost_model : CostModel
        Step and heuristic costs.
    movement_cost : dict[Position, int]
        g per discovered cell.
    heuristic_cost : dict[Position, int]
        h per discovered cell.
    net_cost : dict[Position, int]
        f per discovered cell.
    parents : dict[Position, Position]
        Cell that produced each cell's current movement cost.
    current : Position | None
        Last position returned by ``select_next``.
    """

    def __init__(self, grid: Grid, goal: tuple[int, int], cost_model: CostModel) -> None:
        """Initialize an empty frontier."""
        self.grid = grid
        self.goal = Position(*goal)
        self.cost_model = cost_model

        # dict keys keep insertion order, which the tie-break relies on
        self._open: dict[Position, None] = {}
        self._closed: set[Position] = set()

        self.movement_cost: dict[Position, int] = {}
        self.heuristic_cost: dict[Position, int] = {}
        self.net_cost: dict[Position, int] = {}
        self.parents: dict[Position, Position] = {}
        self.current: Position | None = None

    # -------------------- membership --------------------

    def is_open(self, pos: tuple[int, int]) -> bool:
        """Check whether a position is discovered but not yet expanded."""
        return Position(*pos) in self._open

    def is_closed(self, pos: tuple[int, int]) -> bool:
        """Check whether a position has been expanded."""
        return Position(*pos) in self._closed

    def is_known(self, pos: tuple[int, int]) -> bool:
        """Check whether a position is in the open or the closed set."""
        return self.is_open(pos) or self.is_closed(pos)

    @property
    def open_positions(self) -> list[Position]:
        """Open positions in insertion order."""
        return list(self._open)

    @property
    def closed_positions(self) -> set[Position]:
        """Snapshot of the closed set."""
        return set(self._closed)

    def costs_of(self, pos: tuple[int, int]) -> CellCosts:
        """
        Return the recorded costs of a discovered position.

        Raises
        ------
        KeyError
            If the position has no recorded movement cost.
        """
        key = Position(*pos)
        return CellCosts(
            movement_cost=self.movement_cost[key],
            heuristic_cost=self.heuristic_cost[key],
            net_cost=self.net_cost[key],
        )

    # -------------------- operations --------------------

    def seed(self, start: tuple[int, int]) -> None:
        """Record the start cell with zero movement cost."""
        self._record_costs(Position(*start), 0)

    def reachable_neighbors(self, pos: tuple[int, int]) -> list[Position]:
        """
        Return the neighbors of a position a route may continue through.

        A neighbor qualifies when it is inside the grid, not a wall and not
        already expanded.
        """
        return [
            neighbor
            for neighbor in self.grid.neighbors8(pos)
            if self.grid.is_passable(neighbor) and neighbor not in self._closed
        ]

    def discover(self, pos: tuple[int, int], via: tuple[int, int]) -> bool:
        """
        Add a newly seen position to the open set.

        Known positions are left alone. Returns True if the position was added.
        """
        pos, via = Position(*pos), Position(*via)
        if pos in self._open or pos in self._closed:
            return False

        self._open[pos] = None
        self.parents[pos] = via
        self._record_costs(pos, self.movement_cost[via] + self.cost_model.step_cost(via, pos))
        logger.debug(f"Discovered {pos} via {via}: {self.costs_of(pos)}")
        return True

    def relax(self, pos: tuple[int, int], via: tuple[int, int]) -> bool:
        """
        Route an open position through ``via`` if that is cheaper.

        Returns True if the position's costs and parent were updated.
        """
        pos, via = Position(*pos), Position(*via)
        if pos not in self._open:
            return False

        candidate = self.movement_cost[via] + self.cost_model.step_cost(via, pos)
        known = self.movement_cost.get(pos)
        if known is not None and candidate >= known:
            return False

        self.parents[pos] = via
        self._record_costs(pos, candidate)
        logger.debug(f"Relaxed {pos} via {via}: movement cost {known} -> {candidate}")
        return True

    def select_next(self) -> Position:
        """
        Pick the open position with the lowest net cost.

        Ties go to the earliest-inserted position. Nothing is removed from the
        open set; the caller settles the returned position.

        Raises
        ------
        FrontierExhaustedError
            If the open set is empty.
        """
        if not self._open:
            logger.debug(ERROR_FRONTIER_EXHAUSTED)
            raise FrontierExhaustedError(ERROR_FRONTIER_EXHAUSTED)

        best: Position | None = None
        best_cost = 0
        for pos in self._open:
            cost = self.net_cost[pos]
            if best is None or cost < best_cost:
                best, best_cost = pos, cost

        self.current = best
        return best

    def settle(self, pos: tuple[int, int]) -> None:
        """Move a position from the open set to the closed set."""
        pos = Position(*pos)
        self._open.pop(pos, None)
        self._closed.add(pos)

    # -------------------- helpers --------------------

    def _record_costs(self, pos: Position, movement_cost: int) -> None:
        heuristic_cost = self.cost_model.heuristic(pos, self.goal)
        self.movement_cost[pos] = movement_cost
        self.heuristic_cost[pos] = heuristic_cost
        self.net_cost[pos] = movement_cost + heuristic_cost
