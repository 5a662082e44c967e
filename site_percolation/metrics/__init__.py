"""Read-only summaries of labeled grids."""

from site_percolation.metrics.clusters import (
    cluster_sizes,
    largest_cluster_size,
    mean_cluster_size,
    occupied_fraction,
)

__all__ = [
    "cluster_sizes",
    "largest_cluster_size",
    "mean_cluster_size",
    "occupied_fraction",
]
