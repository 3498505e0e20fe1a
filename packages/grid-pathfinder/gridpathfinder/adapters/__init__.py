"""Input and output adapters for grids."""

__all__ = [
    "DEFAULT_MARKERS",
    "MarkerSet",
    "format_grid",
    "load_grid",
    "parse_grid",
    "resolve_maze_path",
    "save_grid",
    "solved_path_for",
]

from gridpathfinder.adapters.text import (
    DEFAULT_MARKERS,
    MarkerSet,
    format_grid,
    load_grid,
    parse_grid,
    resolve_maze_path,
    save_grid,
    solved_path_for,
)
