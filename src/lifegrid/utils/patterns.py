"""Predefined Game of Life seed patterns."""
import logging
from typing import Dict, List, Optional, Tuple

import numpy as np

from .game_of_life import MARGIN, Coordinate

logger = logging.getLogger(__name__)


# Pattern-local (x, y) cells, origin at the pattern's top-left corner.

# Oscillator (period 2), vertical phase
OSCILLATOR = ((1, 0), (1, 1), (1, 2))

# Spaceship (period 4), travels down and to the right
GLIDER = ((0, 2), (1, 0), (1, 2), (2, 1), (2, 2))

# Glider Gun (period 30)
# Gosper's Glider Gun - emits one glider every 30 generations
GLIDER_GUN = (
    (0, 4), (0, 5), (1, 4), (1, 5),
    (10, 4), (10, 5), (10, 6), (11, 3),
    (11, 7), (12, 2), (12, 8), (13, 2),
    (13, 8), (14, 5), (15, 3), (15, 7),
    (16, 4), (16, 5), (16, 6), (17, 5),
    (20, 2), (20, 3), (20, 4), (21, 2),
    (21, 3), (21, 4), (22, 1), (22, 5),
    (24, 0), (24, 1), (24, 5), (24, 6),
    (34, 2), (34, 3), (35, 2), (35, 3),
)


PATTERNS = {
    'oscillator': OSCILLATOR,
    'glider': GLIDER,
    'gun': GLIDER_GUN,
}

# Alternative names, including the single-letter codes of the console game
PATTERN_ALIASES = {
    'o': 'oscillator',
    'blinker': 'oscillator',
    'g': 'glider',
    'u': 'gun',
    'glider_gun': 'gun',
}


def resolve_pattern_name(pattern_id: str) -> Optional[str]:
    """Return the canonical pattern name for an id or alias, None if unknown."""
    if pattern_id in PATTERNS:
        return pattern_id
    return PATTERN_ALIASES.get(pattern_id)


def load_pattern(pattern_id: str, x_offset: int = 0, y_offset: int = 0) -> List[Coordinate]:
    """
    Return the live cells of a pattern in grid-absolute coordinates.

    The pattern's top-left corner lands at (x_offset, y_offset) relative to
    the visible field, i.e. every cell is shifted by MARGIN plus the offset.
    Keeping the result inside the visible field is the caller's job.

    Args:
        pattern_id: Pattern name or alias
        x_offset: Column of the pattern's corner within the visible field
        y_offset: Row of the pattern's corner within the visible field

    Returns:
        List of Coordinates, empty for an unknown pattern id
    """
    name = resolve_pattern_name(pattern_id)
    if name is None:
        available = sorted(PATTERNS) + sorted(PATTERN_ALIASES)
        logger.warning("Pattern '%s' not found, seeding nothing. Available patterns: %s",
                       pattern_id, available)
        return []

    dx = MARGIN + x_offset
    dy = MARGIN + y_offset
    return [Coordinate(x + dx, y + dy) for x, y in PATTERNS[name]]


def pattern_size(pattern_id: str) -> Tuple[int, int]:
    """Return the (width, height) of a pattern's bounding box."""
    cells = PATTERNS[_require(pattern_id)]
    return (max(x for x, _ in cells) + 1, max(y for _, y in cells) + 1)


def pattern_to_array(pattern_id: str) -> np.ndarray:
    """Return a pattern as a 0/1 array the size of its bounding box."""
    name = _require(pattern_id)
    w, h = pattern_size(name)
    arr = np.zeros((h, w), dtype=np.uint8)
    for x, y in PATTERNS[name]:
        arr[y, x] = 1
    return arr


def get_all_patterns() -> Dict[str, np.ndarray]:
    """Return every pattern as an array, keyed by canonical name."""
    return {name: pattern_to_array(name) for name in PATTERNS}


def _require(pattern_id: str) -> str:
    name = resolve_pattern_name(pattern_id)
    if name is None:
        raise ValueError(f"Pattern '{pattern_id}' not found. Available patterns: {list(PATTERNS)}")
    return name
