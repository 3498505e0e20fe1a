"""Rebuild a route from the parent links left behind by the search."""

from collections.abc import Mapping

from gridpathfinder.dtypes import PathTrace, Position
from gridpathfinder.errors import ERROR_BROKEN_CHAIN, BrokenChainError
from gridpathfinder.logging_config import logger


def reconstruct(
    parents: Mapping[Position, Position],
    start: tuple[int, int],
    goal: tuple[int, int],
    limit: int,
) -> PathTrace:
    """
    Walk parent links from the goal back to the start.

    Parameters
    ----------
    parents : Mapping[Position, Position]
        Parent of every discovered cell except the start.
    start : tuple[int, int]
        Cell the walk must end at.
    goal : tuple[int, int]
        Cell the walk begins from.
    limit : int
        Maximum number of links to follow, normally ``rows * cols``.

    Returns
    -------
    PathTrace
        Intermediate cells in start-to-goal order, excluding both endpoints.
        Empty when start and goal coincide or are adjacent.

    Raises
    ------
    BrokenChainError
        If a link is missing or the walk does not reach the start within
        ``limit`` steps.
    """
    start, goal = Position(*start), Position(*goal)
    if start == goal:
        return []

    trace: PathTrace = []
    cell = _parent_of(parents, goal, start, goal)
    steps = 1
    while cell != start:
        if steps > limit:
            _raise_broken(start, goal, f"no termination within {limit} steps")
        trace.append(cell)
        cell = _parent_of(parents, cell, start, goal)
        steps += 1

    trace.reverse()
    return trace


def _parent_of(
    parents: Mapping[Position, Position],
    cell: Position,
    start: Position,
    goal: Position,
) -> Position:
    if cell not in parents:
        _raise_broken(start, goal, f"{cell} has no parent")
    return Position(*parents[cell])


def _raise_broken(start: Position, goal: Position, reason: str) -> None:
    error_message = ERROR_BROKEN_CHAIN.format(goal=goal, start=start, reason=reason)
    logger.error(error_message)
    raise BrokenChainError(error_message)
