"""Random grid generation for demos and tests."""

import numpy as np

from gridpathfinder.constants import DEFAULT_OBSTACLE_DENSITY, MIN_GENERATED_GRID_SIZE
from gridpathfinder.dtypes import Position
from gridpathfinder.grid import CellMarker, Grid
from gridpathfinder.logging_config import logger
from gridpathfinder.utils.seeding import ensure_seed, get_rng


def generate_grid(  # noqa: PLR0913
    rows: int,
    cols: int,
    obstacle_density: float = DEFAULT_OBSTACLE_DENSITY,
    seed: int | None = None,
    start: tuple[int, int] | None = None,
    goal: tuple[int, int] | None = None,
) -> Grid:
    """
    Generate a grid with randomly placed walls.

    Parameters
    ----------
    rows : int
        Number of rows.
    cols : int
        Number of columns.
    obstacle_density : float
        Probability that any cell is a wall, in ``[0, 1)``.
    seed : int | None
        Seed for the random generator. A random seed is drawn when None.
    start : tuple[int, int] | None
        Start cell, top-left corner by default.
    goal : tuple[int, int] | None
        Goal cell, bottom-right corner by default.

    Returns
    -------
    Grid
        A grid with exactly one START and one GOAL marker. The two are not
        guaranteed to be connected.

    Raises
    ------
    ValueError
        If the dimensions, density or endpoints are invalid.
    """
    if rows < MIN_GENERATED_GRID_SIZE or cols < MIN_GENERATED_GRID_SIZE:
        error_message = (
            f"Grid must be at least {MIN_GENERATED_GRID_SIZE}x{MIN_GENERATED_GRID_SIZE}. "
            f"Provided grid size: {rows}x{cols}."
        )
        logger.error(error_message)
        raise ValueError(error_message)

    if not 0.0 <= obstacle_density < 1.0:
        error_message = f"Obstacle density must be in [0, 1). Provided density: {obstacle_density}."
        logger.error(error_message)
        raise ValueError(error_message)

    start = Position(*start) if start is not None else Position(0, 0)
    goal = Position(*goal) if goal is not None else Position(rows - 1, cols - 1)
    for name, pos in (("Start", start), ("Goal", goal)):
        if not (0 <= pos.row < rows and 0 <= pos.col < cols):
            error_message = f"{name} {tuple(pos)} is outside a {rows}x{cols} grid."
            logger.error(error_message)
            raise ValueError(error_message)
    if start == goal:
        error_message = f"Start and goal must differ, both are {tuple(start)}."
        logger.error(error_message)
        raise ValueError(error_message)

    seed = ensure_seed(seed)
    rng = get_rng(seed)

    walls = rng.random((rows, cols)) < obstacle_density
    cells = np.where(walls, int(CellMarker.IMPASSABLE), int(CellMarker.PASSABLE)).astype(np.int8)
    cells[start.row, start.col] = int(CellMarker.START)
    cells[goal.row, goal.col] = int(CellMarker.GOAL)

    logger.debug(
        f"Generated {rows}x{cols} grid with density {obstacle_density} "
        f"({int(walls.sum())} walls drawn) from seed {seed}",
    )
    return Grid(cells)
