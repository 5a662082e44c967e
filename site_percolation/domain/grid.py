"""Square site-percolation lattice and its Bernoulli generator.

A grid is a row-major ``size x size`` matrix of :class:`Cell` objects.
Occupancy is fixed when the grid is built; cluster ids start at
``UNLABELED_CLUSTER`` and are filled in by the labeler.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from random import Random

import numpy as np

from site_percolation.config.constants import UNLABELED_CLUSTER
from site_percolation.config.types import validate_probability, validate_size


@dataclass
class Cell:
    """A single lattice site."""

    occupied: bool
    cluster: int = UNLABELED_CLUSTER


@dataclass
class Grid:
    """Square lattice of cells, indexed ``cells[row][col]``."""

    cells: list[list[Cell]]

    def __post_init__(self) -> None:
        if not self.cells:
            raise ValueError("grid must have at least one row")
        size = len(self.cells)
        for row in self.cells:
            if len(row) != size:
                raise ValueError(
                    f"grid must be square; got a row of length {len(row)} in a {size}-row grid"
                )

    @classmethod
    def from_occupancy(cls, occupancy: Sequence[Sequence[bool]]) -> Grid:
        """Build an unlabeled grid from an explicit occupancy pattern."""
        return cls(cells=[[Cell(occupied=bool(value)) for value in row] for row in occupancy])

    @property
    def size(self) -> int:
        return len(self.cells)

    def __getitem__(self, position: tuple[int, int]) -> Cell:
        row, col = position
        return self.cells[row][col]

    def __iter__(self) -> Iterator[tuple[int, int, Cell]]:
        """Yield ``(row, col, cell)`` in row-major order."""
        for row, cells in enumerate(self.cells):
            for col, cell in enumerate(cells):
                yield row, col, cell

    def reset_clusters(self) -> None:
        """Return every cell to the unlabeled sentinel."""
        for _, _, cell in self:
            cell.cluster = UNLABELED_CLUSTER

    def occupancy_array(self) -> np.ndarray:
        """Return (size, size) bool array of occupancy."""
        return np.array([[cell.occupied for cell in row] for row in self.cells], dtype=bool)

    def cluster_array(self) -> np.ndarray:
        """Return (size, size) int array of cluster ids (0 for empty cells)."""
        return np.array([[cell.cluster for cell in row] for row in self.cells], dtype=int)


def generate(size: int, probability: float, rng: Random | None = None) -> Grid:
    """Occupy each of ``size * size`` cells independently with *probability*.

    Cells are sampled in row-major order, so a seeded *rng* reproduces the
    same lattice.  Out-of-range parameters raise :exc:`ValueError`; callers
    that accept user input are expected to clamp before calling.
    """
    validate_size(size)
    validate_probability(probability)
    rng = rng if rng is not None else Random()
    cells = [
        [Cell(occupied=rng.random() < probability) for _ in range(size)] for _ in range(size)
    ]
    return Grid(cells=cells)
