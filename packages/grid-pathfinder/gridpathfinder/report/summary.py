"""Reporting module for Grid Pathfinder search results."""

from gridpathfinder.logging_config import (
    logger,
)
from gridpathfinder.report.dtypes import SolveResult

NO_PATH_MESSAGE = "No path found"


def summary(result: SolveResult) -> list[str]:
    """
    Log and print a summary of a solver run.

    Parameters
    ----------
    result : SolveResult
        The result to summarize.

    Returns
    -------
    list[str]
        The printed lines.
    """
    lines = [f"Start: {tuple(result.start)}", f"Goal: {tuple(result.goal)}"]

    if result.success:
        lines.extend(
            [
                f"Total cost: {result.total_cost}",
                f"Route length: {len(result.route)} cells",
                f"Expansions: {len(result.expansions)}",
            ],
        )
    else:
        lines.extend([NO_PATH_MESSAGE, f"Expansions: {len(result.expansions)}"])

    for line in lines:
        logger.info(line)
        print(line)  # noqa: T201

    return lines
