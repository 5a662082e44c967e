"""Filesystem helpers."""

from site_percolation.io.paths import resolve_within_base

__all__ = ["resolve_within_base"]
