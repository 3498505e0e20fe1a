"""CSV export functions for Grid Pathfinder search data."""

import csv
from pathlib import Path

from gridpathfinder.logging_config import logger
from gridpathfinder.report.dtypes import SolveResult


def export_search_to_csv(
    result: SolveResult,
    data_dir: Path,
    file_prefix: str = "",
) -> list[Path]:
    """
    Export the expansion trace and, if solved, the route to CSV files.

    Args:
        result (SolveResult): Result of a solver run.
        data_dir (Path): Directory to save the CSV files.
        file_prefix (str): Prefix for the output file names.

    Returns
    -------
        list[Path]: Files written.
    """
    data_dir.mkdir(parents=True, exist_ok=True)

    written = [export_expansions_to_csv(result, data_dir, file_prefix)]
    if result.success:
        written.append(export_route_to_csv(result, data_dir, file_prefix))
    return written


def export_expansions_to_csv(
    result: SolveResult,
    data_dir: Path,
    file_prefix: str = "",
) -> Path:
    """Export every expansion with its costs to ``<prefix>expansions.csv``."""
    filepath = data_dir / f"{file_prefix}expansions.csv"

    with filepath.open("w", newline="") as csvfile:
        fieldnames = ["step", "row", "col", "movement_cost", "heuristic_cost", "net_cost"]
        writer = csv.DictWriter(csvfile, fieldnames=fieldnames)
        writer.writeheader()

        for record in result.expansions:
            writer.writerow(
                {
                    "step": record.step,
                    "row": record.position.row,
                    "col": record.position.col,
                    "movement_cost": record.movement_cost,
                    "heuristic_cost": record.heuristic_cost,
                    "net_cost": record.net_cost,
                },
            )

    logger.info(f"Exported {len(result.expansions)} expansions to {filepath}")
    return filepath


def export_route_to_csv(
    result: SolveResult,
    data_dir: Path,
    file_prefix: str = "",
) -> Path:
    """Export the solved route with cumulative movement costs to ``<prefix>route.csv``."""
    filepath = data_dir / f"{file_prefix}route.csv"

    with filepath.open("w", newline="") as csvfile:
        writer = csv.DictWriter(csvfile, fieldnames=["index", "row", "col", "movement_cost"])
        writer.writeheader()

        for index, (pos, cost) in enumerate(zip(result.route, result.route_costs, strict=True)):
            writer.writerow({"index": index, "row": pos.row, "col": pos.col, "movement_cost": cost})

    logger.info(f"Exported route of {len(result.route)} cells to {filepath}")
    return filepath
