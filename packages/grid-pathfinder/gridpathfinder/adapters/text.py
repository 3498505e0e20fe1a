"""
Plain-text maze files.

A maze file holds one grid row per line, one character per cell::

    ***********
    *S    *   *
    * ** *** *E
    *    *    *
    ***********

The characters are configurable through ``MarkerSet``. Any character that is
not a wall, start, goal, path or explored marker is open floor.
"""

from pathlib import Path

from pydantic import BaseModel, field_validator, model_validator

from gridpathfinder.constants import (
    DEFAULT_EXPLORED_CHAR,
    DEFAULT_GOAL_CHAR,
    DEFAULT_IMPASSABLE_CHAR,
    DEFAULT_MAZE_SUFFIX,
    DEFAULT_PASSABLE_CHAR,
    DEFAULT_PATH_CHAR,
    DEFAULT_SOLVED_SUFFIX,
    DEFAULT_START_CHAR,
)
from gridpathfinder.errors import ERROR_EMPTY_GRID, GridFormatError
from gridpathfinder.grid import CellMarker, Grid
from gridpathfinder.logging_config import logger


class MarkerSet(BaseModel):
    """Characters used for each cell marker in maze files.

    Attributes
    ----------
    passable : str
        Open floor.
    impassable : str
        Wall.
    start : str
        Start cell.
    goal : str
        Goal cell.
    path : str
        Cell on the solved route.
    explored : str
        Cell the search expanded but the route does not use.
    """

    passable: str = DEFAULT_PASSABLE_CHAR
    impassable: str = DEFAULT_IMPASSABLE_CHAR
    start: str = DEFAULT_START_CHAR
    goal: str = DEFAULT_GOAL_CHAR
    path: str = DEFAULT_PATH_CHAR
    explored: str = DEFAULT_EXPLORED_CHAR

    @field_validator("passable", "impassable", "start", "goal", "path", "explored")
    @classmethod
    def validate_single_char(cls, value: str) -> str:
        """Each marker must be exactly one character."""
        if len(value) != 1:
            error_message = f"Markers must be a single character, got {value!r}."
            raise ValueError(error_message)
        return value

    @model_validator(mode="after")
    def validate_distinct(self) -> "MarkerSet":
        """No two markers may share a character."""
        chars = list(self.char_for_marker().values())
        if len(set(chars)) != len(chars):
            error_message = f"Marker characters must be distinct, got {chars}."
            raise ValueError(error_message)
        return self

    def char_for_marker(self) -> dict[CellMarker, str]:
        """Map each ``CellMarker`` to its character."""
        return {
            CellMarker.PASSABLE: self.passable,
            CellMarker.IMPASSABLE: self.impassable,
            CellMarker.START: self.start,
            CellMarker.GOAL: self.goal,
            CellMarker.PATH: self.path,
            CellMarker.EXPLORED: self.explored,
        }

    def marker_for_char(self, char: str) -> CellMarker:
        """Map a character to its ``CellMarker``; unknown characters are passable."""
        for marker, marker_char in self.char_for_marker().items():
            if char == marker_char:
                return marker
        return CellMarker.PASSABLE


DEFAULT_MARKERS = MarkerSet()


def parse_grid(text: str, markers: MarkerSet = DEFAULT_MARKERS) -> Grid:
    """
    Parse maze text into a ``Grid``.

    Trailing empty lines are ignored. Line endings are stripped but other
    whitespace is kept, since a space is a valid cell.

    Raises
    ------
    GridFormatError
        If the text holds no rows or its rows differ in length.
    """
    lines = text.splitlines()
    while lines and not lines[-1]:
        lines.pop()

    if not lines:
        logger.error(ERROR_EMPTY_GRID)
        raise GridFormatError(ERROR_EMPTY_GRID)

    rows = [[markers.marker_for_char(char) for char in line] for line in lines]
    return Grid.from_rows(rows)


def format_grid(grid: Grid, markers: MarkerSet = DEFAULT_MARKERS) -> str:
    """Serialize a ``Grid`` to maze text, one line per row."""
    chars = markers.char_for_marker()
    lines = ["".join(chars[marker] for marker in row) for row in grid.to_rows()]
    return "\n".join(lines) + "\n"


def resolve_maze_path(path: str | Path) -> Path:
    """Append the default ``.txt`` suffix to a bare maze name."""
    path = Path(path)
    if not path.suffix:
        path = path.with_suffix(DEFAULT_MAZE_SUFFIX)
    return path


def load_grid(path: str | Path, markers: MarkerSet = DEFAULT_MARKERS) -> Grid:
    """Read and parse a maze file."""
    path = resolve_maze_path(path)
    logger.info(f"Loading maze from {path}")
    with path.open(encoding="utf-8") as file:
        return parse_grid(file.read(), markers)


def save_grid(grid: Grid, path: str | Path, markers: MarkerSet = DEFAULT_MARKERS) -> Path:
    """Write a grid to a maze file and return the path written."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as file:
        file.write(format_grid(grid, markers))
    logger.info(f"Wrote solved maze to {path}")
    return path


def solved_path_for(path: str | Path, suffix: str = DEFAULT_SOLVED_SUFFIX) -> Path:
    """Derive the output file name, e.g. ``maze.txt`` -> ``maze_solved.txt``."""
    path = resolve_maze_path(path)
    return path.with_name(f"{path.stem}{suffix}{path.suffix}")
