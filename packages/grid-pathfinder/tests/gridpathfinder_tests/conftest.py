import pytest
from gridpathfinder.adapters.text import parse_grid
from gridpathfinder.grid import Grid


def make_grid(text: str) -> Grid:
    """Build a grid from maze text; '.' reads as open floor."""
    return parse_grid(text)


@pytest.fixture
def open_grid():
    """3x3 grid with no walls, start top-left and goal bottom-right."""
    return make_grid("S..\n...\n..E\n")


@pytest.fixture
def corridor_grid():
    """3x3 grid whose middle row is walled except for column 0."""
    return make_grid("S..\n.**\n..E\n")


@pytest.fixture
def walled_goal_grid():
    """5x5 grid with the goal enclosed by walls on all eight sides."""
    return make_grid("S....\n.....\n..***\n..*E*\n..***\n")
