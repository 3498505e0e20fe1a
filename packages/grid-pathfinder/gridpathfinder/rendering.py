"""Terminal rendering of grids before and after solving."""

from __future__ import annotations

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text as RichText

from gridpathfinder.grid import Grid
from gridpathfinder.theme import DEFAULT_THEME, THEME_SYMBOLS, RichStyleConfig, Theme


class GridRenderer:
    """Draws grids to the terminal.

    Parameters
    ----------
    theme : Theme, optional
        Symbol set and layout to draw with, by default ``Theme.ASCII``.
    enabled : bool, optional
        Whether rendering is enabled. If False, ``render_frame`` is a no-op.
        Default is True.
    rich_style_config : RichStyleConfig | None, optional
        Styles for the Rich theme.

    Attributes
    ----------
    enabled : bool
        Whether rendering is currently enabled.
    """

    def __init__(
        self,
        theme: Theme = DEFAULT_THEME,
        *,
        enabled: bool = True,
        rich_style_config: RichStyleConfig | None = None,
    ) -> None:
        """Initialize the grid renderer."""
        self.theme = theme
        self.enabled = enabled
        self.rich_style_config = rich_style_config or RichStyleConfig()

    def render(self, grid: Grid) -> list[str]:
        """
        Render a grid to lines of text.

        Parameters
        ----------
        grid : Grid
            The grid to draw.

        Returns
        -------
        list[str]
            One string per output line, followed by an empty line.
        """
        if self.theme == Theme.RICH:
            return self._render_rich(grid)

        symbols = THEME_SYMBOLS[self.theme]
        lines = ["".join(symbols.symbol_for(marker) for marker in row) for row in grid.to_rows()]
        return [*lines, ""]

    def render_frame(self, grid: Grid, *, text: str | None = None) -> None:
        """Print a grid, optionally preceded by a caption."""
        if not self.enabled:
            return

        if text:
            print(text)  # noqa: T201
        print("\n".join(self.render(grid)))  # noqa: T201

    def _render_rich(self, grid: Grid) -> list[str]:
        """Render the grid as a Rich table and capture it as strings."""
        table_width = (grid.cols * 4) + 1

        console = Console(
            record=True,
            width=table_width,
            legacy_windows=False,
            force_terminal=True,
        )

        symbols = THEME_SYMBOLS[Theme.RICH]

        table = Table(
            show_header=False,
            show_lines=True,
            box=box.SQUARE,
            padding=(0, 0),
            pad_edge=False,
            style=self.rich_style_config.grid_background,
        )

        for _ in range(grid.cols):
            table.add_column(
                justify="center",
                width=3,
                min_width=3,
                max_width=3,
                no_wrap=True,
            )

        for row in grid.to_rows():
            table.add_row(
                *(
                    RichText(
                        symbols.symbol_for(marker),
                        style=self.rich_style_config.style_for(marker),
                        justify="center",
                    )
                    for marker in row
                ),
            )

        with console.capture() as capture:
            console.print(table, crop=True)

        output_lines = capture.get().splitlines()
        cleaned_lines = [line.rstrip() for line in output_lines if line.strip()]

        return [*cleaned_lines, ""]
