"""Configuration layer: constants and typed config dataclasses."""

from site_percolation.config.constants import (
    CLUSTER_LIGHTNESS,
    CLUSTER_SATURATION,
    DEFAULT_GRID_SIZE,
    DEFAULT_PROBABILITY,
    HUE_STEP_DEGREES,
    MAX_GRID_SIZE,
    MIN_GRID_SIZE,
    UNLABELED_CLUSTER,
)
from site_percolation.config.types import (
    LatticeConfig,
    validate_probability,
    validate_size,
)

__all__ = [
    "CLUSTER_LIGHTNESS",
    "CLUSTER_SATURATION",
    "DEFAULT_GRID_SIZE",
    "DEFAULT_PROBABILITY",
    "HUE_STEP_DEGREES",
    "LatticeConfig",
    "MAX_GRID_SIZE",
    "MIN_GRID_SIZE",
    "UNLABELED_CLUSTER",
    "validate_probability",
    "validate_size",
]
