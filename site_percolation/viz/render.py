"""Matplotlib-based rendering functions for labeled lattices."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path
from random import Random

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.image import AxesImage

from site_percolation.domain.labeling import LabeledGrid
from site_percolation.io.paths import resolve_within_base as _resolve_within_base
from site_percolation.session import generate_labeled
from site_percolation.viz.colors import cell_rgb
from site_percolation.viz.theme import DEFAULT_THEME, Theme, get_theme

logger = logging.getLogger(__name__)

_active_theme: Theme = DEFAULT_THEME


def set_active_theme(name: str) -> Theme:
    """Select the theme used when render functions get no explicit ``theme``."""
    global _active_theme
    _active_theme = get_theme(name)
    return _active_theme


def get_active_theme() -> Theme:
    return _active_theme


def _resolve_output_path(output_path: Path, base_dir: Path | None) -> Path:
    if base_dir is None:
        return Path(output_path).resolve()
    return _resolve_within_base(Path(output_path), Path(base_dir).resolve())


# ---------------------------------------------------------------------------
# Cell-fill helpers
# ---------------------------------------------------------------------------


def build_rgb_array(labeled: LabeledGrid, theme: Theme = DEFAULT_THEME) -> np.ndarray:
    """Return (size, size, 3) float array of per-cell colours."""
    grid = labeled.grid
    rgb = np.empty((grid.size, grid.size, 3), dtype=float)
    for row, col, cell in grid:
        rgb[row, col] = cell_rgb(cell, theme)
    return rgb


def _draw_cell_grid(ax: plt.Axes, rgb: np.ndarray, theme: Theme = DEFAULT_THEME) -> AxesImage:
    """Shared renderer: imshow with thin cell separators on *ax*."""
    img = ax.imshow(rgb, origin="upper", aspect="equal", interpolation="nearest")
    h, w = rgb.shape[:2]
    for x in range(w + 1):
        ax.axvline(x - 0.5, color=theme.grid_line_color, linewidth=0.5)
    for y in range(h + 1):
        ax.axhline(y - 0.5, color=theme.grid_line_color, linewidth=0.5)
    ax.set_xticks([])
    ax.set_yticks([])
    return img


def render_text(labeled: LabeledGrid) -> str:
    """Plain-text lattice: ``.`` for empty sites, cluster id otherwise."""
    grid = labeled.grid
    width = max(1, len(str(labeled.cluster_count)))
    lines = []
    for row in grid.cells:
        tokens = [str(cell.cluster) if cell.occupied else "." for cell in row]
        lines.append(" ".join(token.rjust(width) for token in tokens))
    lines.append(f"Number of Clusters: {labeled.cluster_count}")
    return "\n".join(lines)


# ---------------------------------------------------------------------------
# render_lattice
# ---------------------------------------------------------------------------


def render_lattice(
    labeled: LabeledGrid,
    output_path: Path,
    base_dir: Path | None = None,
    dpi: int = 150,
    title: str | None = None,
    theme: Theme | None = None,
) -> Path:
    """Render one labeled lattice with its cluster count and save it."""
    theme = theme if theme is not None else _active_theme
    output_path = _resolve_output_path(output_path, base_dir)
    if dpi < 1:
        raise ValueError("dpi must be >= 1")

    size = labeled.grid.size
    side = max(4.0, min(10.0, size * 0.2))
    fig, ax = plt.subplots(figsize=(side, side + 0.6))
    fig.patch.set_facecolor(theme.background_color)
    _draw_cell_grid(ax, build_rgb_array(labeled, theme), theme=theme)
    if title is not None:
        fig.suptitle(title, fontsize=14, fontweight="bold", color=theme.text_color)
    ax.set_title(
        f"Number of Clusters: {labeled.cluster_count}", fontsize=11, color=theme.text_color
    )

    output_path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(output_path, dpi=dpi, facecolor=fig.get_facecolor())
    plt.close(fig)
    logger.info("wrote %s (%d clusters)", output_path, labeled.cluster_count)
    return output_path


# ---------------------------------------------------------------------------
# render_probability_strip
# ---------------------------------------------------------------------------


def render_probability_strip(
    size: int,
    probabilities: Sequence[float],
    output_path: Path,
    seed: int | None = None,
    base_dir: Path | None = None,
    dpi: int = 150,
    theme: Theme | None = None,
) -> list[LabeledGrid]:
    """Render a horizontal strip of lattices, one panel per probability.

    Every panel is generated from its own ``Random(seed)`` when *seed* is
    given, so panels share the same uniform draws and occupied sets grow
    monotonically from left to right for increasing probabilities.
    """
    theme = theme if theme is not None else _active_theme
    if not probabilities:
        raise ValueError("probabilities must not be empty")
    if dpi < 1:
        raise ValueError("dpi must be >= 1")
    output_path = _resolve_output_path(output_path, base_dir)

    results = [
        generate_labeled(size, p, Random(seed) if seed is not None else None)
        for p in probabilities
    ]

    n = len(results)
    fig, axes = plt.subplots(1, n, figsize=(3 * n, 3.4), squeeze=False)
    fig.patch.set_facecolor(theme.background_color)
    for col_idx, (probability, labeled) in enumerate(zip(probabilities, results, strict=True)):
        ax = axes[0, col_idx]
        _draw_cell_grid(ax, build_rgb_array(labeled, theme), theme=theme)
        ax.set_title(
            f"p = {probability:g}\n{labeled.cluster_count} clusters",
            fontsize=9,
            color=theme.text_color,
        )

    fig.suptitle(f"{size}x{size} site percolation", fontsize=11, color=theme.text_color)
    fig.tight_layout(rect=(0, 0, 1, 0.92))
    output_path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(output_path, dpi=dpi, facecolor=fig.get_facecolor())
    plt.close(fig)
    logger.info("wrote %s (%d panels)", output_path, n)
    return results
