"""Visualization layer: colours, themes, renderers, and CLI."""

from site_percolation.viz.cli import main
from site_percolation.viz.colors import cell_rgb, cluster_color, cluster_hue, cluster_rgb
from site_percolation.viz.render import (
    build_rgb_array,
    get_active_theme,
    render_lattice,
    render_probability_strip,
    render_text,
    set_active_theme,
)
from site_percolation.viz.theme import (
    DARK_THEME,
    DEFAULT_THEME,
    PAPER_THEME,
    REGISTERED_THEMES,
    Theme,
    get_theme,
)

__all__ = [
    "DARK_THEME",
    "DEFAULT_THEME",
    "PAPER_THEME",
    "REGISTERED_THEMES",
    "Theme",
    "build_rgb_array",
    "cell_rgb",
    "cluster_color",
    "cluster_hue",
    "cluster_rgb",
    "get_active_theme",
    "get_theme",
    "main",
    "render_lattice",
    "render_probability_strip",
    "render_text",
    "set_active_theme",
]
