from lifegrid.utils.patterns import get_all_patterns, load_pattern
from lifegrid.utils.visualization import (
    create_animation,
    visualize_pattern_grid,
    visualize_state,
    visualize_trajectory,
)


def test_visualize_state_saves_png(grid, tmp_path):
    grid.seed(load_pattern('glider', 2, 2))
    path = tmp_path / "state.png"
    visualize_state(grid.window_array(), save_path=path, figsize=(4, 2))
    assert path.stat().st_size > 0


def test_visualize_trajectory_saves_png(grid, tmp_path):
    grid.seed(load_pattern('oscillator', 5, 5))
    trajectory = grid.simulate(3)
    path = tmp_path / "trajectory.png"
    visualize_trajectory(trajectory, "OSCILLATOR", save_path=path,
                         num_frames_to_show=8, figsize=(8, 2))
    assert path.stat().st_size > 0


def test_create_animation_saves_gif(grid, tmp_path):
    grid.seed(load_pattern('glider', 2, 2))
    trajectory = grid.simulate(3)
    path = tmp_path / "glider.gif"
    create_animation(trajectory, "GLIDER", save_path=path, fps=5, figsize=(4, 2))
    assert path.read_bytes()[:3] == b"GIF"


def test_visualize_pattern_grid_saves_png(tmp_path):
    path = tmp_path / "overview.png"
    visualize_pattern_grid(get_all_patterns(), save_path=path)
    assert path.stat().st_size > 0
