"""
Text rendering of a Game of Life grid for the console
"""
import os
from typing import Iterable, Sequence

from .game_of_life import Grid

ALIVE_GLYPH = 'X'
DEAD_GLYPH = '.'


def render_rows(rows: Iterable[Sequence[bool]],
                alive: str = ALIVE_GLYPH,
                dead: str = DEAD_GLYPH) -> str:
    """
    Turn rows of cell states into text, one line per row.

    Args:
        rows: Rows of booleans (True = alive)
        alive: Glyph for a live cell
        dead: Glyph for a dead cell

    Returns:
        Multi-line string with a trailing newline
    """
    return ''.join(''.join(alive if cell else dead for cell in row) + '\n'
                   for row in rows)


def render_window(grid: Grid, alive: str = ALIVE_GLYPH, dead: str = DEAD_GLYPH) -> str:
    """Render the visible field, margin hidden."""
    return render_rows(grid.visible_window(), alive, dead)


def render_whole_grid(grid: Grid, alive: str = ALIVE_GLYPH, dead: str = DEAD_GLYPH) -> str:
    """Render the entire grid including the margin. Useful for debugging."""
    return render_rows(grid.whole_grid(), alive, dead)


def clear_screen() -> None:
    """Clear the terminal so the next frame lines up with the previous one."""
    os.system('cls' if os.name == 'nt' else 'clear')
