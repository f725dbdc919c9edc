"""Conway's Game of Life on a fixed grid with a dead margin."""
import logging
from typing import Iterable, Iterator, NamedTuple, Set, Tuple

import numpy as np

logger = logging.getLogger(__name__)

# Cell states
ALIVE = True
DEAD = False

# Dead buffer around the visible field
MARGIN = 5

# The glider gun (36 x 9) must fit with room to spare.
MIN_VISIBLE_WIDTH = 40
MIN_VISIBLE_HEIGHT = 20


class Coordinate(NamedTuple):
    """Grid position: x is the column (positive right), y the row (positive down)."""
    x: int
    y: int


class Grid:
    """Game of Life world surrounded by a dead margin.

    Cells live in a boolean array of shape (height, width) indexed [y, x],
    where width and height include the margin on both sides. The outermost
    ring of cells is never updated, so it stays dead for the life of the
    grid and neighbour lookups never leave the array.
    """

    def __init__(self, visible_width: int, visible_height: int):
        """Allocate an all-dead grid around a visible field of the given size."""
        if visible_width < MIN_VISIBLE_WIDTH or visible_height < MIN_VISIBLE_HEIGHT:
            raise ValueError(
                f"Visible grid must be at least {MIN_VISIBLE_WIDTH}x{MIN_VISIBLE_HEIGHT}, "
                f"got {visible_width}x{visible_height}"
            )
        self.margin = MARGIN
        self.visible_width = visible_width
        self.visible_height = visible_height
        self.width = visible_width + 2 * MARGIN
        self.height = visible_height + 2 * MARGIN
        self.generation = 0
        self._grid = np.full((self.height, self.width), DEAD, dtype=bool)
        logger.debug("Allocated %dx%d grid (margin %d)", self.width, self.height, MARGIN)

    def seed(self, coordinates: Iterable[Tuple[int, int]]) -> None:
        """Mark every coordinate alive. Repeated calls add to the live set."""
        cells = [Coordinate(*c) for c in coordinates]
        for c in cells:
            if not self._in_visible_field(c):
                raise ValueError(
                    f"Seed cell {tuple(c)} lies outside the visible field "
                    f"[{self.margin}, {self.width - self.margin}) x "
                    f"[{self.margin}, {self.height - self.margin})"
                )
        for c in cells:
            self._grid[c.y, c.x] = ALIVE
        if cells:
            logger.debug("Seeded %d cells", len(cells))

    def step(self) -> None:
        """Advance the world by one generation."""
        current = self._grid
        h, w = current.shape

        # Neighbour counts for every cell except the outer ring, all read
        # from the current generation.
        neighbors = np.zeros((h - 2, w - 2), dtype=np.uint8)
        for dy in (-1, 0, 1):
            for dx in (-1, 0, 1):
                if dy == 0 and dx == 0:
                    continue
                neighbors += current[1 + dy:h - 1 + dy, 1 + dx:w - 1 + dx]

        interior = current[1:-1, 1:-1]
        next_grid = current.copy()
        next_grid[1:-1, 1:-1] = (neighbors == 3) | (interior & (neighbors == 2))

        self._grid = next_grid
        self.generation += 1

    def is_alive(self, coordinate: Tuple[int, int]) -> bool:
        """Return the state of a cell given in grid-absolute coordinates."""
        x, y = coordinate
        return bool(self._grid[y, x])

    def visible_window(self) -> Iterator[Tuple[bool, ...]]:
        """Iterate over the rows of the visible field, top to bottom.

        The iterator is bound to the generation current when this is called;
        a later step() does not change the rows it yields.
        """
        m = self.margin
        window = self._grid[m:self.height - m, m:self.width - m]
        return (tuple(bool(v) for v in row) for row in window)

    def whole_grid(self) -> Iterator[Tuple[bool, ...]]:
        """Iterate over every row of the grid, margin included."""
        grid = self._grid
        return (tuple(bool(v) for v in row) for row in grid)

    def window_array(self) -> np.ndarray:
        """Return a uint8 copy of the visible field."""
        m = self.margin
        return self._grid[m:self.height - m, m:self.width - m].astype(np.uint8)

    def live_cells(self) -> Set[Coordinate]:
        """Return the grid-absolute coordinates of all live cells."""
        ys, xs = np.nonzero(self._grid)
        return {Coordinate(int(x), int(y)) for y, x in zip(ys, xs)}

    def simulate(self, num_steps: int) -> np.ndarray:
        """Step num_steps times and return the visible trajectory, initial frame first."""
        trajectory = np.zeros((num_steps + 1, self.visible_height, self.visible_width),
                              dtype=np.uint8)
        trajectory[0] = self.window_array()
        for t in range(1, num_steps + 1):
            self.step()
            trajectory[t] = self.window_array()
        return trajectory

    def _in_visible_field(self, c: Coordinate) -> bool:
        m = self.margin
        return m <= c.x < self.width - m and m <= c.y < self.height - m
