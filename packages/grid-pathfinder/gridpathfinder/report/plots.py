"""Plotting functions for Grid Pathfinder."""

from pathlib import Path

import numpy as np
from matplotlib import pyplot as plt
from matplotlib.colors import ListedColormap

from gridpathfinder.grid import CellMarker, Grid
from gridpathfinder.logging_config import (
    logger,
)
from gridpathfinder.report.dtypes import SolveResult

# Indexed by CellMarker value
MARKER_COLORS = [
    "#f5f5f5",  # passable
    "#303030",  # impassable
    "#2ca02c",  # start
    "#d62728",  # goal
    "#ffbf00",  # path
    "#9ecae1",  # explored
]


def plot_solved_grid(  # pragma: no cover
    result: SolveResult,
    grid: Grid,
    plot_dir: Path,
    file_prefix: str = "",
) -> Path:
    """
    Plot the grid with the explored cells and the route, and save the plot.

    Args:
        result (SolveResult): Result of a solver run.
        grid (Grid): The grid that was solved.
        plot_dir (Path): Directory to save the plot.
        file_prefix (str): Prefix for the output file name.

    Returns
    -------
        Path: File written.
    """
    plot_dir.mkdir(parents=True, exist_ok=True)
    cells = np.array(grid.cells, dtype=np.int8)

    for pos in result.expanded_positions:
        if cells[pos.row, pos.col] == CellMarker.PASSABLE:
            cells[pos.row, pos.col] = CellMarker.EXPLORED
    for pos in result.path:
        cells[pos.row, pos.col] = CellMarker.PATH

    plt.figure(figsize=(max(4, grid.cols / 3), max(4, grid.rows / 3)))
    plt.imshow(
        cells,
        cmap=ListedColormap(MARKER_COLORS),
        vmin=0,
        vmax=len(MARKER_COLORS) - 1,
        interpolation="nearest",
    )
    if result.success:
        route = np.array(result.route)
        plt.plot(route[:, 1], route[:, 0], color="#d95f02", linewidth=2, label="Route")
        plt.legend()
    title = (
        f"Route cost {result.total_cost}, {len(result.expansions)} expansions"
        if result.success
        else f"No path, {len(result.expansions)} expansions"
    )
    plt.title(title)
    plt.xticks([])
    plt.yticks([])
    filepath = plot_dir / f"{file_prefix}solved_grid.png"
    plt.savefig(filepath)
    plt.close()

    logger.info(f"Saved grid plot to {filepath}")
    return filepath


def plot_net_cost_over_expansions(  # pragma: no cover
    result: SolveResult,
    plot_dir: Path,
    file_prefix: str = "",
) -> Path:
    """
    Plot g, h and f of each expanded cell in expansion order, and save the plot.

    Args:
        result (SolveResult): Result of a solver run.
        plot_dir (Path): Directory to save the plot.
        file_prefix (str): Prefix for the output file name.

    Returns
    -------
        Path: File written.
    """
    plot_dir.mkdir(parents=True, exist_ok=True)
    steps = [record.step for record in result.expansions]

    plt.figure(figsize=(10, 6))
    plt.plot(steps, [r.movement_cost for r in result.expansions], label="Movement cost (g)")
    plt.plot(steps, [r.heuristic_cost for r in result.expansions], label="Heuristic cost (h)")
    plt.plot(steps, [r.net_cost for r in result.expansions], marker="o", label="Net cost (f)")
    plt.title("Costs of Expanded Cells")
    plt.xlabel("Expansion")
    plt.ylabel("Cost")
    plt.legend()
    plt.grid()
    filepath = plot_dir / f"{file_prefix}expansion_costs.png"
    plt.savefig(filepath)
    plt.close()

    logger.info(f"Saved expansion cost plot to {filepath}")
    return filepath
