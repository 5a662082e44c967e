"""Visualization theme presets for lattice renderers.

Themes are frozen dataclasses that group all styling constants together,
so palettes can be swapped via the ``--theme`` CLI argument or by passing
a ``Theme`` to the render functions.
"""

from __future__ import annotations

from dataclasses import dataclass

from site_percolation.config.constants import (
    CLUSTER_LIGHTNESS,
    CLUSTER_SATURATION,
    HUE_STEP_DEGREES,
)


@dataclass(frozen=True)
class Theme:
    """Complete collection of visualization style tokens."""

    # Cluster palette (HSL)
    hue_step: float = HUE_STEP_DEGREES
    saturation: float = CLUSTER_SATURATION
    lightness: float = CLUSTER_LIGHTNESS

    # Lattice
    empty_cell_color: str = "#FFFFFF"
    grid_line_color: str = "#000000"

    # Figure
    background_color: str = "#F3F4F6"
    text_color: str = "#111827"

    def __post_init__(self) -> None:
        if not 0.0 <= self.saturation <= 1.0:
            raise ValueError("saturation must be in [0.0, 1.0]")
        if not 0.0 <= self.lightness <= 1.0:
            raise ValueError("lightness must be in [0.0, 1.0]")


# ---------------------------------------------------------------------------
# Built-in presets
# ---------------------------------------------------------------------------

DEFAULT_THEME = Theme()

PAPER_THEME = Theme(
    empty_cell_color="#FFFFFF",
    grid_line_color="#E0E0E0",
    background_color="#FFFFFF",
    text_color="#000000",
)

DARK_THEME = Theme(
    lightness=0.6,
    empty_cell_color="#1A1A1A",
    grid_line_color="#333333",
    background_color="#0D0D0D",
    text_color="#FFFFFF",
)

REGISTERED_THEMES: dict[str, Theme] = {
    "default": DEFAULT_THEME,
    "paper": PAPER_THEME,
    "dark": DARK_THEME,
}


def get_theme(name: str) -> Theme:
    """Look up a theme by name (case-insensitive)."""
    key = name.lower()
    if key not in REGISTERED_THEMES:
        valid = ", ".join(sorted(REGISTERED_THEMES))
        raise ValueError(f"Unknown theme {name!r}; available: {valid}")
    return REGISTERED_THEMES[key]
