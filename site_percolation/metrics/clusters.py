"""Cluster statistics over a labeled grid: sizes, largest cluster, occupancy."""

from __future__ import annotations

from collections import Counter

from site_percolation.config.constants import UNLABELED_CLUSTER
from site_percolation.domain.grid import Grid


def cluster_sizes(grid: Grid) -> dict[int, int]:
    """Return ``{cluster_id: cell_count}`` for every labeled cluster, ordered by id."""
    counts = Counter(cell.cluster for _, _, cell in grid if cell.cluster != UNLABELED_CLUSTER)
    return dict(sorted(counts.items()))


def largest_cluster_size(grid: Grid) -> int:
    """Size of the largest cluster, or 0 when nothing is occupied."""
    sizes = cluster_sizes(grid)
    return max(sizes.values(), default=0)


def occupied_fraction(grid: Grid) -> float:
    """Fraction of sites that are occupied."""
    occupied = sum(1 for _, _, cell in grid if cell.occupied)
    return occupied / (grid.size * grid.size)


def mean_cluster_size(grid: Grid) -> float:
    """Average cells per cluster. Returns NaN when there are no clusters."""
    sizes = cluster_sizes(grid)
    if not sizes:
        return float("nan")
    return sum(sizes.values()) / len(sizes)
