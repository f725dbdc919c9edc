import matplotlib
matplotlib.use('Agg')

import pytest

from lifegrid.utils.game_of_life import MARGIN, Grid


@pytest.fixture
def grid():
    return Grid(40, 20)


@pytest.fixture
def at():
    """Translate a visible-field position into grid-absolute coordinates."""
    def _at(x, y):
        return (x + MARGIN, y + MARGIN)
    return _at


@pytest.fixture
def outer_ring():
    """All cells of the single-cell ring along a grid's edge."""
    def _ring(g):
        cells = set()
        for x in range(g.width):
            cells.add((x, 0))
            cells.add((x, g.height - 1))
        for y in range(g.height):
            cells.add((0, y))
            cells.add((g.width - 1, y))
        return cells
    return _ring
