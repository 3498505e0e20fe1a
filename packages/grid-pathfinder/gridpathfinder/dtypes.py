"""Core type definitions for Grid Pathfinder.

This module provides the coordinate type used as the key of every cost
table and membership set, plus aliases for sequences of positions.
"""

from typing import NamedTuple

# =============================================================================
# Position Types
# =============================================================================


class Position(NamedTuple):
    """A grid cell address, ``(row, col)`` with row 0 at the top."""

    row: int
    col: int


# =============================================================================
# Path Types
# =============================================================================

# Intermediate cells of a solved route (start and goal excluded)
PathTrace = list[Position]

# Full route including start and goal
Route = list[Position]
