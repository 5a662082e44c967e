"""Site percolation on a square lattice: generation, cluster labeling, rendering."""

from site_percolation.domain import Cell, Grid, LabeledGrid, generate, label, label_clusters
from site_percolation.session import (
    PercolationSession,
    clamp_probability,
    clamp_size,
    generate_labeled,
)

__all__ = [
    "Cell",
    "Grid",
    "LabeledGrid",
    "PercolationSession",
    "clamp_probability",
    "clamp_size",
    "generate",
    "generate_labeled",
    "label",
    "label_clusters",
]
