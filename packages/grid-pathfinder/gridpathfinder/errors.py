"""Define errors and error messages for the Grid Pathfinder package."""

ERROR_MARKER_NOT_FOUND = "Grid does not contain a {marker} marker."
ERROR_INVALID_MOVE = "Cells {source} and {dest} are not 8-adjacent; no step cost is defined."
ERROR_FRONTIER_EXHAUSTED = "Open set is empty: no path exists between start and goal."
ERROR_BROKEN_CHAIN = "Parent chain from {goal} did not reach start {start}: {reason}."
ERROR_EXPANSION_LIMIT = "Search exceeded the expansion limit of {limit} cells."
ERROR_EMPTY_GRID = "Grid must contain at least one row and one column."
ERROR_RAGGED_GRID = "Grid rows must have equal length: row {row} has {found} cells, expected {expected}."
ERROR_UNKNOWN_MARKER = "Unknown cell marker code {code} in grid."


class PathfindingError(Exception):
    """Base class for all errors raised by the pathfinder."""


class MarkerNotFoundError(PathfindingError):
    """A required marker (start or goal) is missing from the grid."""


class InvalidMoveError(PathfindingError, AssertionError):
    """A step cost was requested between identical or non-adjacent cells.

    This signals an internal bug in neighbor generation, so it is also an
    ``AssertionError``.
    """


class FrontierExhaustedError(PathfindingError):
    """The open set ran dry before the goal was reached."""


class BrokenChainError(PathfindingError):
    """Walking the parent links did not terminate at the start cell."""


class ExpansionLimitError(PathfindingError):
    """The search expanded more cells than the configured limit allows."""


class GridFormatError(PathfindingError, ValueError):
    """The grid handed to the pathfinder is malformed."""
