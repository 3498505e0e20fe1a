"""Octile step costs and the Manhattan heuristic."""

from dataclasses import dataclass

from gridpathfinder.constants import DIAGONAL_STEP_COST, ORTHOGONAL_STEP_COST
from gridpathfinder.errors import ERROR_INVALID_MOVE, InvalidMoveError
from gridpathfinder.logging_config import logger


@dataclass(frozen=True)
class CostModel:
    """
    Fixed costs for one orthogonal or diagonal step between adjacent cells.

    Attributes
    ----------
    orthogonal_cost : int
        Cost of a step that changes exactly one coordinate.
    diagonal_cost : int
        Cost of a step that changes both coordinates.
    """

    orthogonal_cost: int = ORTHOGONAL_STEP_COST
    diagonal_cost: int = DIAGONAL_STEP_COST

    def step_cost(self, source: tuple[int, int], dest: tuple[int, int]) -> int:
        """
        Return the cost of stepping from ``source`` to ``dest``.

        Raises
        ------
        InvalidMoveError
            If the cells are identical or not 8-adjacent.
        """
        d_row = abs(source[0] - dest[0])
        d_col = abs(source[1] - dest[1])

        if d_row > 1 or d_col > 1 or (d_row == 0 and d_col == 0):
            error_message = ERROR_INVALID_MOVE.format(source=tuple(source), dest=tuple(dest))
            logger.error(error_message)
            raise InvalidMoveError(error_message)

        if d_row and d_col:
            return self.diagonal_cost
        return self.orthogonal_cost

    def heuristic(self, pos: tuple[int, int], goal: tuple[int, int]) -> int:
        """
        Estimate the remaining cost from ``pos`` to ``goal``.

        Manhattan distance scaled by the orthogonal cost, ignoring walls.
        It overestimates when diagonal shortcuts are available, so the search
        is not guaranteed to return an optimal route.
        """
        manhattan = abs(pos[0] - goal[0]) + abs(pos[1] - goal[1])
        return manhattan * self.orthogonal_cost


DEFAULT_COST_MODEL = CostModel()


def step_cost(source: tuple[int, int], dest: tuple[int, int]) -> int:
    """Step cost under the default 10/14 model."""
    return DEFAULT_COST_MODEL.step_cost(source, dest)


def heuristic(pos: tuple[int, int], goal: tuple[int, int]) -> int:
    """Heuristic cost under the default 10/14 model."""
    return DEFAULT_COST_MODEL.heuristic(pos, goal)
