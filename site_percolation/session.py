"""Regeneration loop between user-facing inputs and the percolation core.

The session owns the current lattice parameters, clamps raw user input into
the supported range, and produces a fresh :class:`LabeledGrid` on every
trigger (construction, parameter change, explicit regenerate).  Each result
is a new value; earlier grids are never touched again.
"""

from __future__ import annotations

import logging
import math
from random import Random

from site_percolation.config.constants import (
    DEFAULT_GRID_SIZE,
    DEFAULT_PROBABILITY,
    MAX_GRID_SIZE,
    MIN_GRID_SIZE,
)
from site_percolation.config.types import LatticeConfig
from site_percolation.domain.grid import generate
from site_percolation.domain.labeling import LabeledGrid, label

logger = logging.getLogger(__name__)


def _to_float(raw: object) -> float:
    try:
        return float(raw)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return float("nan")


def clamp_size(raw: object, fallback: int = DEFAULT_GRID_SIZE) -> int:
    """Clamp *raw* to ``[MIN_GRID_SIZE, MAX_GRID_SIZE]``.

    Unparseable input (empty field, text, NaN) yields *fallback*.
    Fractional values are truncated toward zero, like parsing "12.7" as 12.
    """
    value = _to_float(raw)
    if math.isnan(value):
        return fallback
    if math.isinf(value):
        return MAX_GRID_SIZE if value > 0 else MIN_GRID_SIZE
    return max(MIN_GRID_SIZE, min(MAX_GRID_SIZE, int(value)))


def clamp_probability(raw: object, fallback: float = DEFAULT_PROBABILITY) -> float:
    """Clamp *raw* to ``[0.0, 1.0]``; unparseable input yields *fallback*."""
    value = _to_float(raw)
    if math.isnan(value):
        return fallback
    return max(0.0, min(1.0, value))


def generate_labeled(size: int, probability: float, rng: Random | None = None) -> LabeledGrid:
    """Run the generator then the labeler and return the composed result."""
    return label(generate(size, probability, rng))


class PercolationSession:
    """Holds (size, probability) and regenerates on every trigger."""

    def __init__(
        self,
        size: object = DEFAULT_GRID_SIZE,
        probability: object = DEFAULT_PROBABILITY,
        rng: Random | None = None,
    ) -> None:
        self._size = clamp_size(size)
        self._probability = clamp_probability(probability)
        self._rng = rng if rng is not None else Random()
        self._current = self.regenerate()

    @classmethod
    def from_config(cls, config: LatticeConfig) -> PercolationSession:
        rng = Random(config.seed) if config.seed is not None else None
        return cls(size=config.size, probability=config.probability, rng=rng)

    @property
    def size(self) -> int:
        return self._size

    @property
    def probability(self) -> float:
        return self._probability

    @property
    def current(self) -> LabeledGrid:
        return self._current

    def set_size(self, raw: object) -> LabeledGrid:
        self._size = clamp_size(raw, fallback=self._size)
        return self.regenerate()

    def set_probability(self, raw: object) -> LabeledGrid:
        self._probability = clamp_probability(raw, fallback=self._probability)
        return self.regenerate()

    def regenerate(self) -> LabeledGrid:
        """Discard the current grid and build a new labeled one."""
        result = generate_labeled(self._size, self._probability, self._rng)
        logger.debug(
            "regenerated %dx%d lattice at p=%.3f: %d clusters",
            self._size,
            self._size,
            self._probability,
            result.cluster_count,
        )
        self._current = result
        return result
