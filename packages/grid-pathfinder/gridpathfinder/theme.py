"""Themes for rendering grids in the terminal."""

from enum import Enum

from pydantic import BaseModel

from gridpathfinder.grid import CellMarker


class Theme(str, Enum):
    """Rendering themes."""

    ASCII = "ascii"
    UNICODE = "unicode"
    RICH = "rich"


DEFAULT_THEME = Theme.ASCII


class ThemeSymbolSet(BaseModel):
    """Symbol set for a specific theme.

    Attributes
    ----------
    passable : str
        Symbol for open floor.
    impassable : str
        Symbol for a wall.
    start : str
        Symbol for the start cell.
    goal : str
        Symbol for the goal cell.
    path : str
        Symbol for a cell on the solved route.
    explored : str
        Symbol for a cell the search expanded off the route.
    """

    passable: str
    impassable: str
    start: str
    goal: str
    path: str
    explored: str

    def symbol_for(self, marker: CellMarker) -> str:
        """Return the symbol drawn for a marker."""
        return getattr(self, marker.name.lower())


class RichStyleConfig(BaseModel):
    """Rich styling configuration for the Rich theme.

    Attributes
    ----------
    start_style : str
        Rich style string for the start cell.
    goal_style : str
        Rich style string for the goal cell.
    path_style : str
        Rich style string for route cells.
    explored_style : str
        Rich style string for explored cells.
    wall_style : str
        Rich style string for walls.
    empty_style : str
        Rich style string for open floor.
    grid_background : str
        Rich style string for the table lines.
    """

    start_style: str = "bold green"
    goal_style: str = "bold red"
    path_style: str = "bold yellow"
    explored_style: str = "dim cyan"
    wall_style: str = "bold grey50"
    empty_style: str = "dim grey93"
    grid_background: str = "bold grey93"

    def style_for(self, marker: CellMarker) -> str:
        """Return the Rich style used for a marker."""
        return {
            CellMarker.PASSABLE: self.empty_style,
            CellMarker.IMPASSABLE: self.wall_style,
            CellMarker.START: self.start_style,
            CellMarker.GOAL: self.goal_style,
            CellMarker.PATH: self.path_style,
            CellMarker.EXPLORED: self.explored_style,
        }[marker]


THEME_SYMBOLS = {
    Theme.ASCII: ThemeSymbolSet(
        passable=" ",
        impassable="*",
        start="S",
        goal="E",
        path="+",
        explored=".",
    ),
    Theme.UNICODE: ThemeSymbolSet(
        passable=" ",
        impassable="█",
        start="◉",
        goal="◆",
        path="●",
        explored="·",
    ),
    Theme.RICH: ThemeSymbolSet(
        passable="·",
        impassable="■",
        start="S",
        goal="E",
        path="●",
        explored="•",
    ),
}
