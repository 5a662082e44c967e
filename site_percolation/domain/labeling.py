"""Cluster labeling by 4-connected flood fill.

Two occupied cells belong to the same cluster iff a path of edge-adjacent
occupied cells joins them. Diagonal contact does not connect cells.
"""

from __future__ import annotations

from dataclasses import dataclass

from site_percolation.domain.grid import Grid

# Up, down, left, right
NEIGHBOR_OFFSETS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))


@dataclass(frozen=True)
class LabeledGrid:
    """A fully labeled grid together with its cluster count."""

    grid: Grid
    cluster_count: int


def label_clusters(grid: Grid) -> tuple[Grid, int]:
    """Assign cluster ids ``1..K`` in place and return ``(grid, K)``.

    Cells are scanned row-major, so the component containing the first
    occupied cell in reading order always gets id 1.  Any previous labels
    are cleared first, which makes relabeling idempotent.
    """
    size = grid.size
    grid.reset_clusters()
    visited = [[False] * size for _ in range(size)]
    cluster_count = 0

    for row in range(size):
        for col in range(size):
            if visited[row][col] or not grid.cells[row][col].occupied:
                continue
            cluster_count += 1
            _flood_cluster(grid, visited, row, col, cluster_count)

    return grid, cluster_count


def _flood_cluster(
    grid: Grid, visited: list[list[bool]], row: int, col: int, cluster_id: int
) -> None:
    """Label every cell reachable from (row, col) with *cluster_id*.

    Uses an explicit stack; a fully occupied lattice is one cluster of
    ``size * size`` cells, which would overflow a recursive traversal.
    """
    size = grid.size
    stack = [(row, col)]
    while stack:
        r, c = stack.pop()
        if r < 0 or r >= size or c < 0 or c >= size:
            continue
        if visited[r][c] or not grid.cells[r][c].occupied:
            continue
        visited[r][c] = True
        grid.cells[r][c].cluster = cluster_id
        for dr, dc in NEIGHBOR_OFFSETS:
            stack.append((r + dr, c + dc))


def label(grid: Grid) -> LabeledGrid:
    """Label *grid* in place and wrap the result for renderers."""
    labeled, cluster_count = label_clusters(grid)
    return LabeledGrid(grid=labeled, cluster_count=cluster_count)
