"""
Generate figures and animations of each seed pattern for review
"""
import argparse
import logging
from pathlib import Path

from tqdm import tqdm

from lifegrid.evaluation.metrics import population_history
from lifegrid.logutil import init_game_log
from lifegrid.play import build_grid
from lifegrid.utils.patterns import PATTERNS, get_all_patterns
from lifegrid.utils.visualization import (
    visualize_state,
    visualize_trajectory,
    create_animation,
    visualize_pattern_grid
)

logger = logging.getLogger(__name__)

# (visible width, visible height, steps) per pattern
RUN_SETTINGS = {
    'oscillator': (40, 20, 8),
    'glider': (40, 20, 60),
    'gun': (80, 50, 150),
}


def main():
    """Run every pattern and save its initial state, trajectory and animation."""
    parser = argparse.ArgumentParser(description='Export Game of Life sample figures')
    parser.add_argument('--output-dir', type=str, default='figures/samples',
                        help='Directory for the generated files')
    parser.add_argument('--fps', type=int, default=10,
                        help='Animation frames per second')
    args = parser.parse_args()

    init_game_log('samples', logging.INFO)

    output_dir = Path(args.output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    for name in tqdm(PATTERNS, desc="Patterns"):
        width, height, num_steps = RUN_SETTINGS[name]
        grid = build_grid(width, height, name, x_offset=2, y_offset=2)

        visualize_state(
            grid.window_array(),
            title=f"{name.upper()} (t=0)",
            save_path=output_dir / f"{name}_initial.png",
            figsize=(10, 7) if name == 'gun' else (8, 4),
        )

        trajectory = grid.simulate(num_steps)
        pops = population_history(trajectory)
        logger.info("%s: population %d -> %d over %d steps",
                    name, pops[0], pops[-1], num_steps)

        visualize_trajectory(
            trajectory,
            pattern_name=name.upper(),
            save_path=output_dir / f"{name}_trajectory.png",
            figsize=(18, 5) if name == 'gun' else (16, 4),
        )
        create_animation(
            trajectory,
            pattern_name=name.upper(),
            save_path=output_dir / f"{name}_animation.gif",
            fps=args.fps,
        )

    visualize_pattern_grid(
        get_all_patterns(),
        save_path=output_dir / "all_patterns_overview.png",
    )

    print(f"All samples saved to: {output_dir.absolute()}")


if __name__ == "__main__":
    main()
