"""Domain layer: lattice model, generator and cluster labeler."""

from site_percolation.domain.grid import Cell, Grid, generate
from site_percolation.domain.labeling import (
    NEIGHBOR_OFFSETS,
    LabeledGrid,
    label,
    label_clusters,
)

__all__ = [
    "Cell",
    "Grid",
    "LabeledGrid",
    "NEIGHBOR_OFFSETS",
    "generate",
    "label",
    "label_clusters",
]
