"""Game of Life engine, seed patterns and rendering"""

from .game_of_life import (
    ALIVE,
    DEAD,
    MARGIN,
    MIN_VISIBLE_WIDTH,
    MIN_VISIBLE_HEIGHT,
    Coordinate,
    Grid,
)
from .patterns import (
    PATTERNS,
    PATTERN_ALIASES,
    load_pattern,
    resolve_pattern_name,
    pattern_size,
    pattern_to_array,
    get_all_patterns,
)
from .console import render_rows, render_window, render_whole_grid, clear_screen

__all__ = [
    'ALIVE',
    'DEAD',
    'MARGIN',
    'MIN_VISIBLE_WIDTH',
    'MIN_VISIBLE_HEIGHT',
    'Coordinate',
    'Grid',
    'PATTERNS',
    'PATTERN_ALIASES',
    'load_pattern',
    'resolve_pattern_name',
    'pattern_size',
    'pattern_to_array',
    'get_all_patterns',
    'render_rows',
    'render_window',
    'render_whole_grid',
    'clear_screen',
]
