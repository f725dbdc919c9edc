"""Run analysis for Game of Life grids."""
from typing import Optional, Tuple

import numpy as np

from ..utils.game_of_life import Grid


def population(state: np.ndarray) -> int:
    """Return the number of live cells in a state."""
    return int(np.count_nonzero(state))


def population_history(trajectory: np.ndarray) -> np.ndarray:
    """Return the live-cell count of every frame in a trajectory."""
    return np.count_nonzero(trajectory.reshape(len(trajectory), -1), axis=1)


def hamming_distance(a: np.ndarray, b: np.ndarray) -> float:
    """Return the fraction of cells that differ between two states."""
    return float(np.mean(a.astype(bool) != b.astype(bool)))


def bounding_box(state: np.ndarray) -> Optional[Tuple[int, int, int, int]]:
    """Return (x_min, y_min, x_max, y_max) of the live cells, or None if none are alive."""
    ys, xs = np.nonzero(state)
    if len(xs) == 0:
        return None
    return int(xs.min()), int(ys.min()), int(xs.max()), int(ys.max())


def find_period(grid: Grid, max_period: int = 60) -> int:
    """
    Step a grid until its live cells repeat the starting configuration.

    Returns the period (1 for a still life), or -1 if no repeat is seen
    within max_period generations. The grid is advanced in place.
    """
    start = grid.live_cells()
    for t in range(1, max_period + 1):
        grid.step()
        if grid.live_cells() == start:
            return t
    return -1


def is_extinct(state: np.ndarray) -> bool:
    """Return True when no cell is alive."""
    return not np.any(state)
