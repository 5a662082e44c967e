"""Cluster id to colour mapping.

Consecutive ids are spread around the hue wheel by a fixed step, so
neighbouring labels rarely look alike. Saturation and lightness are fixed
per theme.
"""

from __future__ import annotations

import colorsys

from matplotlib.colors import to_rgb

from site_percolation.config.constants import UNLABELED_CLUSTER
from site_percolation.domain.grid import Cell
from site_percolation.viz.theme import DEFAULT_THEME, Theme

RGB = tuple[float, float, float]


def cluster_hue(cluster_id: int, theme: Theme = DEFAULT_THEME) -> float:
    """Hue in degrees, ``(cluster_id * hue_step) mod 360``."""
    return (cluster_id * theme.hue_step) % 360


def cluster_color(cluster_id: int, theme: Theme = DEFAULT_THEME) -> str:
    """CSS ``hsl(...)`` string for *cluster_id*."""
    hue = cluster_hue(cluster_id, theme)
    return f"hsl({hue:g}, {theme.saturation * 100:g}%, {theme.lightness * 100:g}%)"


def cluster_rgb(cluster_id: int, theme: Theme = DEFAULT_THEME) -> RGB:
    """Same colour as :func:`cluster_color` as an RGB triple in [0, 1]."""
    hue = cluster_hue(cluster_id, theme)
    return colorsys.hls_to_rgb(hue / 360, theme.lightness, theme.saturation)


def cell_rgb(cell: Cell, theme: Theme = DEFAULT_THEME) -> RGB:
    """Cluster colour for occupied cells, the theme's empty colour otherwise.

    Occupied cells must already carry a cluster id; an unlabeled occupied
    cell raises :exc:`ValueError`.
    """
    if not cell.occupied:
        return to_rgb(theme.empty_cell_color)
    if cell.cluster == UNLABELED_CLUSTER:
        raise ValueError("occupied cell has no cluster id; label the grid before rendering")
    return cluster_rgb(cell.cluster, theme)
