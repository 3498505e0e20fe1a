"""
Immutable grid of cell markers.

The grid is a rectangular, read-only numpy array of ``CellMarker`` codes
indexed ``[row, col]``. It answers bounds, passability and neighbor queries
for the search and produces marked copies once a route is known.
"""

from collections.abc import Iterable, Sequence
from enum import IntEnum

import numpy as np

from gridpathfinder.dtypes import Position
from gridpathfinder.errors import (
    ERROR_EMPTY_GRID,
    ERROR_MARKER_NOT_FOUND,
    ERROR_RAGGED_GRID,
    ERROR_UNKNOWN_MARKER,
    GridFormatError,
    MarkerNotFoundError,
)
from gridpathfinder.logging_config import logger


class CellMarker(IntEnum):
    """Markers a grid cell can carry."""

    PASSABLE = 0
    IMPASSABLE = 1
    START = 2
    GOAL = 3
    PATH = 4
    EXPLORED = 5


# Compass offsets in the order neighbors are produced: E, W, S, N, SE, SW, NE, NW.
# The order feeds the open set's insertion order and therefore the tie-break.
NEIGHBOR_OFFSETS: tuple[tuple[int, int], ...] = (
    (0, 1),
    (0, -1),
    (1, 0),
    (-1, 0),
    (1, 1),
    (1, -1),
    (-1, 1),
    (-1, -1),
)

_VALID_CODES = frozenset(int(marker) for marker in CellMarker)


class Grid:
    """
    Rectangular, immutable table of cell markers.

    Attributes
    ----------
    cells : np.ndarray
        Read-only ``int8`` array of shape ``(rows, cols)`` holding marker codes.
    """

    def __init__(self, cells: np.ndarray | Sequence[Sequence[int]]) -> None:
        """
        Build a grid from a 2-D array or a sequence of rows.

        Parameters
        ----------
        cells : np.ndarray | Sequence[Sequence[int]]
            Marker codes, one inner sequence per row.

        Raises
        ------
        GridFormatError
            If the input is empty, ragged, not two-dimensional or holds
            unknown marker codes.
        """
        if not isinstance(cells, np.ndarray):
            _check_rectangular(cells)

        array = np.array(cells, dtype=np.int8)
        if array.ndim != 2 or array.shape[0] == 0 or array.shape[1] == 0:  # noqa: PLR2004
            logger.error(ERROR_EMPTY_GRID)
            raise GridFormatError(ERROR_EMPTY_GRID)

        unknown = set(np.unique(array).tolist()) - _VALID_CODES
        if unknown:
            error_message = ERROR_UNKNOWN_MARKER.format(code=min(unknown))
            logger.error(error_message)
            raise GridFormatError(error_message)

        array.flags.writeable = False
        self.cells = array

    @classmethod
    def from_rows(cls, rows: Iterable[Iterable[CellMarker]]) -> "Grid":
        """Build a grid from rows of ``CellMarker`` values."""
        return cls([[int(marker) for marker in row] for row in rows])

    @property
    def rows(self) -> int:
        """Number of rows."""
        return int(self.cells.shape[0])

    @property
    def cols(self) -> int:
        """Number of columns."""
        return int(self.cells.shape[1])

    @property
    def shape(self) -> tuple[int, int]:
        """Grid dimensions as ``(rows, cols)``."""
        return self.rows, self.cols

    def in_bounds(self, pos: tuple[int, int]) -> bool:
        """Check whether a position lies inside the grid."""
        row, col = pos
        return 0 <= row < self.rows and 0 <= col < self.cols

    def at(self, pos: tuple[int, int]) -> CellMarker:
        """
        Return the marker at a position.

        Raises
        ------
        IndexError
            If the position is out of bounds. Negative indices are not
            wrapped around.
        """
        if not self.in_bounds(pos):
            error_message = f"Position {tuple(pos)} is outside a {self.rows}x{self.cols} grid."
            raise IndexError(error_message)
        row, col = pos
        return CellMarker(int(self.cells[row, col]))

    def is_passable(self, pos: tuple[int, int]) -> bool:
        """Check whether a position is inside the grid and not a wall."""
        return self.in_bounds(pos) and self.at(pos) != CellMarker.IMPASSABLE

    def neighbors8(self, pos: tuple[int, int]) -> list[Position]:
        """
        Return the eight compass neighbors of a position, unfiltered.

        Out-of-bounds positions are included; callers filter with
        ``is_passable`` or ``in_bounds``.
        """
        row, col = pos
        return [Position(row + d_row, col + d_col) for d_row, d_col in NEIGHBOR_OFFSETS]

    def find_marker(self, marker: CellMarker) -> Position:
        """
        Locate the first cell carrying a marker, scanning row-major.

        Raises
        ------
        MarkerNotFoundError
            If no cell carries the marker.
        """
        matches = np.argwhere(self.cells == int(marker))
        if matches.size == 0:
            error_message = ERROR_MARKER_NOT_FOUND.format(marker=marker.name.lower())
            logger.error(error_message)
            raise MarkerNotFoundError(error_message)
        row, col = matches[0]
        return Position(int(row), int(col))

    def positions_of(self, marker: CellMarker) -> list[Position]:
        """Return every position carrying a marker, in row-major order."""
        return [Position(int(row), int(col)) for row, col in np.argwhere(self.cells == int(marker))]

    def count(self, marker: CellMarker) -> int:
        """Count the cells carrying a marker."""
        return int(np.count_nonzero(self.cells == int(marker)))

    def with_markers(self, positions: Iterable[tuple[int, int]], marker: CellMarker) -> "Grid":
        """
        Return a copy of the grid with the given positions re-marked.

        The original grid is left untouched.
        """
        cells = self.cells.copy()
        for row, col in positions:
            cells[row, col] = int(marker)
        return Grid(cells)

    def to_rows(self) -> list[list[CellMarker]]:
        """Return the grid as nested lists of ``CellMarker``."""
        return [[CellMarker(int(code)) for code in row] for row in self.cells]

    def copy(self) -> "Grid":
        """Create an independent copy of the grid."""
        return Grid(self.cells.copy())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return bool(np.array_equal(self.cells, other.cells))

    def __hash__(self) -> int:
        return hash((self.shape, self.cells.tobytes()))

    def __repr__(self) -> str:
        return f"Grid(rows={self.rows}, cols={self.cols})"


def _check_rectangular(rows: Sequence[Sequence[int]]) -> None:
    """Raise ``GridFormatError`` if rows are missing or of unequal length."""
    if len(rows) == 0 or len(rows[0]) == 0:
        logger.error(ERROR_EMPTY_GRID)
        raise GridFormatError(ERROR_EMPTY_GRID)

    expected = len(rows[0])
    for index, row in enumerate(rows):
        if len(row) != expected:
            error_message = ERROR_RAGGED_GRID.format(row=index, found=len(row), expected=expected)
            logger.error(error_message)
            raise GridFormatError(error_message)
