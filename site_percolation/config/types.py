"""Configuration dataclasses for lattice generation."""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass

from site_percolation.config.constants import (
    DEFAULT_GRID_SIZE,
    DEFAULT_PROBABILITY,
    MAX_GRID_SIZE,
    MIN_GRID_SIZE,
)

__all__ = [
    "LatticeConfig",
    "validate_probability",
    "validate_size",
]


def validate_size(size: int) -> None:
    """Fail fast when *size* is outside the supported lattice range."""
    if isinstance(size, bool) or not isinstance(size, numbers.Integral):
        raise ValueError(f"size must be an int, got {size!r}")
    if not MIN_GRID_SIZE <= size <= MAX_GRID_SIZE:
        raise ValueError(f"size must be in [{MIN_GRID_SIZE}, {MAX_GRID_SIZE}], got {size}")


def validate_probability(probability: float) -> None:
    """Fail fast when *probability* is not a finite value in [0, 1]."""
    if isinstance(probability, bool) or not isinstance(probability, numbers.Real):
        raise ValueError(f"probability must be a number, got {probability!r}")
    if math.isnan(probability) or not 0.0 <= probability <= 1.0:
        raise ValueError(f"probability must be in [0.0, 1.0], got {probability}")


@dataclass(frozen=True)
class LatticeConfig:
    """Parameters for one lattice regeneration."""

    size: int = DEFAULT_GRID_SIZE
    probability: float = DEFAULT_PROBABILITY
    seed: int | None = None

    def __post_init__(self) -> None:
        validate_size(self.size)
        validate_probability(self.probability)
