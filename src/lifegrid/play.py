"""
Animated console Game of Life.

Seeds a grid with one of the predefined patterns and prints every
generation of the visible field, clearing the console between frames.
"""
import logging
import sys
import time
from typing import Callable, Optional

from .evaluation.metrics import population
from .logutil import init_game_log
from .utils.console import ALIVE_GLYPH, DEAD_GLYPH, clear_screen, render_whole_grid, render_window
from .utils.game_of_life import MIN_VISIBLE_HEIGHT, MIN_VISIBLE_WIDTH, Grid
from .utils.patterns import PATTERN_ALIASES, PATTERNS, load_pattern, pattern_size, resolve_pattern_name

logger = logging.getLogger(__name__)


def check_fit(pattern_id: str, width: int, height: int, x_offset: int, y_offset: int) -> None:
    """Raise ValueError unless the whole pattern lies inside the visible field."""
    name = resolve_pattern_name(pattern_id)
    if name is None:
        return
    pw, ph = pattern_size(name)
    if x_offset < 0 or y_offset < 0 or x_offset + pw > width or y_offset + ph > height:
        raise ValueError(
            f"Pattern '{name}' ({pw}x{ph}) at offset ({x_offset}, {y_offset}) "
            f"does not fit in a {width}x{height} window"
        )


def build_grid(width: int, height: int, pattern_id: str,
               x_offset: int = 0, y_offset: int = 0) -> Grid:
    """Create a grid and seed it with a pattern placed at the given offset."""
    check_fit(pattern_id, width, height, x_offset, y_offset)
    grid = Grid(width, height)
    grid.seed(load_pattern(pattern_id, x_offset, y_offset))
    return grid


def play(grid: Grid,
         generations: int,
         pause: float,
         alive: str = ALIVE_GLYPH,
         dead: str = DEAD_GLYPH,
         show_margin: bool = False,
         clear: bool = True,
         out=None,
         sleep: Callable[[float], None] = time.sleep) -> None:
    """
    Print `generations` frames, pausing between them and stepping after each.

    Args:
        grid: Seeded grid, advanced in place
        generations: Number of frames to show
        pause: Seconds each frame stays on screen
        alive: Glyph for live cells
        dead: Glyph for dead cells
        show_margin: Print the whole grid instead of the visible field
        clear: Clear the console between frames
        out: Stream to write frames to, stdout by default
        sleep: Pause function
    """
    if generations < 0:
        raise ValueError(f"generations must be non-negative, got {generations}")
    if pause < 0:
        raise ValueError(f"pause must be non-negative, got {pause}")
    if out is None:
        out = sys.stdout
    render = render_whole_grid if show_margin else render_window

    if clear:
        out.flush()
        clear_screen()

    for gen in range(generations):
        out.write(render(grid, alive, dead))
        out.flush()
        logger.debug("Generation %d: %d live cells",
                     grid.generation, population(grid.window_array()))

        sleep(pause)

        # the last generation stays on screen
        if clear and gen < generations - 1:
            clear_screen()
        grid.step()


def main(argv: Optional[list] = None) -> None:
    import argparse

    pattern_ids = sorted(PATTERNS) + sorted(PATTERN_ALIASES)

    parser = argparse.ArgumentParser(description="Play Conway's Game of Life in the console")
    parser.add_argument('--width', type=int, default=80,
                        help=f'Visible width (at least {MIN_VISIBLE_WIDTH})')
    parser.add_argument('--height', type=int, default=30,
                        help=f'Visible height (at least {MIN_VISIBLE_HEIGHT})')
    parser.add_argument('--pattern', type=str, default='gun', choices=pattern_ids,
                        help='Initial pattern')
    parser.add_argument('--x-offset', type=int, default=1,
                        help='Column of the pattern corner in the visible field')
    parser.add_argument('--y-offset', type=int, default=1,
                        help='Row of the pattern corner in the visible field')
    parser.add_argument('--generations', type=int, default=200,
                        help='Number of generations to show')
    parser.add_argument('--pause', type=float, default=0.1,
                        help='Seconds between generations')
    parser.add_argument('--alive', type=str, default=ALIVE_GLYPH,
                        help='Glyph for live cells')
    parser.add_argument('--dead', type=str, default=DEAD_GLYPH,
                        help='Glyph for dead cells')
    parser.add_argument('--show-margin', action='store_true',
                        help='Also print the hidden margin')
    parser.add_argument('--no-clear', action='store_true',
                        help='Do not clear the console between generations')
    parser.add_argument('--log-level', type=str, default='WARNING',
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
                        help='Logging level')
    parser.add_argument('--log-file', type=str, default=None,
                        help='Write log records to this file instead of stderr')

    args = parser.parse_args(argv)

    init_game_log('console', getattr(logging, args.log_level), args.log_file)

    try:
        grid = build_grid(args.width, args.height, args.pattern,
                          args.x_offset, args.y_offset)
        play(grid, args.generations, args.pause,
             alive=args.alive, dead=args.dead,
             show_margin=args.show_margin, clear=not args.no_clear)
    except ValueError as e:
        parser.error(str(e))


if __name__ == "__main__":
    main()
