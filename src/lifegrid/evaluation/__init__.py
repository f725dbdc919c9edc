"""Population and periodicity metrics."""

from .metrics import (
    population,
    population_history,
    hamming_distance,
    bounding_box,
    find_period,
    is_extinct
)

__all__ = [
    'population',
    'population_history',
    'hamming_distance',
    'bounding_box',
    'find_period',
    'is_extinct'
]
