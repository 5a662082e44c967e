"""Centralized lattice and rendering constants.

All magic numbers shared between the core, the session layer and the
renderers are defined here.
"""

from __future__ import annotations

MIN_GRID_SIZE = 5
"""Smallest accepted lattice side length."""

MAX_GRID_SIZE = 50
"""Largest accepted lattice side length."""

DEFAULT_GRID_SIZE = 20
"""Lattice side length used on initial load."""

DEFAULT_PROBABILITY = 0.5
"""Occupation probability used on initial load."""

UNLABELED_CLUSTER = 0
"""Cluster id carried by unoccupied and not-yet-labeled cells."""

HUE_STEP_DEGREES = 137.5
"""Hue rotation per cluster id (golden-angle spacing)."""

CLUSTER_SATURATION = 0.5
"""HSL saturation for cluster colours."""

CLUSTER_LIGHTNESS = 0.5
"""HSL lightness for cluster colours."""
