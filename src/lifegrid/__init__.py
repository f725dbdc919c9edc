"""Conway's Game of Life on a bordered grid."""

from .utils import Coordinate, Grid, load_pattern

__all__ = ['Coordinate', 'Grid', 'load_pattern']
