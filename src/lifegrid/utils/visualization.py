"""
Figure and animation export for Game of Life runs
"""
import logging
from typing import Dict, Optional

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.animation import FuncAnimation, PillowWriter

logger = logging.getLogger(__name__)


def _draw_cells(ax, state: np.ndarray, show_grid: bool, **imshow_kwargs):
    """Draw one state on an axis with optional cell separators."""
    im = ax.imshow(state, cmap='binary', interpolation='nearest',
                   vmin=0, vmax=1, **imshow_kwargs)
    if show_grid:
        h, w = state.shape
        ax.set_xticks(np.arange(-0.5, w, 1), minor=True)
        ax.set_yticks(np.arange(-0.5, h, 1), minor=True)
        ax.grid(which='minor', color='gray', linestyle='-', linewidth=0.5, alpha=0.3)
    ax.set_xticks([])
    ax.set_yticks([])
    return im


def _finish(fig, save_path: Optional[str], what: str) -> None:
    if save_path:
        fig.savefig(save_path, dpi=200, bbox_inches='tight')
        logger.info("Saved %s to %s", what, save_path)
    else:
        plt.show()
    plt.close(fig)


def visualize_state(state: np.ndarray,
                    title: str = "Game of Life",
                    save_path: Optional[str] = None,
                    figsize: tuple = (8, 8),
                    show_grid: bool = True) -> None:
    """
    Plot a single generation.

    Args:
        state: Visible field (H x W), e.g. Grid.window_array()
        title: Plot title
        save_path: Path to save figure, None for display only
        figsize: Figure size
        show_grid: Whether to show grid lines
    """
    fig, ax = plt.subplots(figsize=figsize)
    _draw_cells(ax, state, show_grid)
    ax.set_title(title, fontsize=16, pad=10)
    fig.tight_layout()
    _finish(fig, save_path, "state")


def visualize_trajectory(trajectory: np.ndarray,
                         pattern_name: str = "Pattern",
                         save_path: Optional[str] = None,
                         figsize: tuple = (16, 4),
                         num_frames_to_show: int = 8,
                         show_grid: bool = False) -> None:
    """
    Plot evenly spaced frames of a run side by side.

    Args:
        trajectory: Trajectory array (T, H, W) from Grid.simulate()
        pattern_name: Pattern name for title
        save_path: Path to save figure
        figsize: Figure size
        num_frames_to_show: Number of frames to display
        show_grid: Whether to show grid lines
    """
    num_frames_to_show = min(num_frames_to_show, len(trajectory))
    indices = np.linspace(0, len(trajectory) - 1, num_frames_to_show, dtype=int)

    fig, axes = plt.subplots(1, num_frames_to_show, figsize=figsize)
    axes = np.atleast_1d(axes)
    for ax, idx in zip(axes, indices):
        _draw_cells(ax, trajectory[idx], show_grid)
        ax.set_title(f"t={idx}", fontsize=12)

    fig.suptitle(f"{pattern_name} Evolution", fontsize=16)
    fig.tight_layout()
    _finish(fig, save_path, "trajectory")


def create_animation(trajectory: np.ndarray,
                     pattern_name: str = "Pattern",
                     save_path: Optional[str] = None,
                     fps: int = 10,
                     figsize: tuple = (8, 8),
                     show_grid: bool = False) -> None:
    """
    Create an animated GIF from a trajectory.

    Args:
        trajectory: Trajectory array (T, H, W)
        pattern_name: Pattern name for title
        save_path: Path to save GIF file, None to display
        fps: Frames per second
        figsize: Figure size
        show_grid: Whether to show grid lines
    """
    fig, ax = plt.subplots(figsize=figsize)
    im = _draw_cells(ax, trajectory[0], show_grid, animated=True)
    title = ax.set_title(f"{pattern_name} - Step 0", fontsize=16)

    def update(frame):
        im.set_array(trajectory[frame])
        title.set_text(f"{pattern_name} - Step {frame}")
        return [im, title]

    anim = FuncAnimation(fig, update, frames=len(trajectory),
                         interval=1000 // fps, blit=True, repeat=True)

    if save_path:
        anim.save(str(save_path), writer=PillowWriter(fps=fps))
        logger.info("Saved animation to %s", save_path)
    else:
        plt.show()
    plt.close(fig)


def visualize_pattern_grid(patterns_dict: Dict[str, np.ndarray],
                           save_path: Optional[str] = None,
                           figsize: tuple = (15, 5),
                           show_grid: bool = True) -> None:
    """
    Plot several seed patterns next to each other.

    Args:
        patterns_dict: Dictionary of {name: pattern_array}
        save_path: Path to save figure
        figsize: Figure size
        show_grid: Whether to show grid lines
    """
    num_patterns = len(patterns_dict)
    ncols = min(4, num_patterns)
    nrows = (num_patterns + ncols - 1) // ncols

    fig, axes = plt.subplots(nrows, ncols, figsize=figsize)
    axes = np.atleast_1d(axes).flatten()

    for ax, (name, pattern) in zip(axes, patterns_dict.items()):
        _draw_cells(ax, pattern, show_grid)
        ax.set_title(name, fontsize=12)

    for ax in axes[num_patterns:]:
        ax.axis('off')

    fig.tight_layout()
    _finish(fig, save_path, "pattern grid")
