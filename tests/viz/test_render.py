"""Tests for viz/render.py: RGB arrays, text output, and image files."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path
from random import Random
from unittest.mock import patch

import numpy as np
import pytest

from site_percolation.domain.grid import Grid, generate
from site_percolation.domain.labeling import LabeledGrid, label
from site_percolation.viz import render as viz_render
from site_percolation.viz.colors import cluster_rgb
from site_percolation.viz.render import (
    build_rgb_array,
    get_active_theme,
    render_lattice,
    render_probability_strip,
    render_text,
    set_active_theme,
)
from site_percolation.viz.theme import DARK_THEME, DEFAULT_THEME


@pytest.fixture(autouse=True)
def _reset_theme() -> Iterator[None]:
    yield
    set_active_theme("default")


def _scenario_grid() -> Grid:
    return Grid.from_occupancy(
        [
            [True, True, False],
            [False, False, False],
            [False, False, True],
        ]
    )


class TestBuildRgbArray:
    def test_shape_and_colors(self) -> None:
        labeled = label(_scenario_grid())
        rgb = build_rgb_array(labeled)
        assert rgb.shape == (3, 3, 3)
        assert np.allclose(rgb[1, 1], (1.0, 1.0, 1.0))
        assert np.allclose(rgb[0, 0], cluster_rgb(1))
        assert np.allclose(rgb[0, 1], cluster_rgb(1))
        assert np.allclose(rgb[2, 2], cluster_rgb(2))

    def test_rejects_unlabeled_occupied_cells(self) -> None:
        unlabeled = LabeledGrid(grid=_scenario_grid(), cluster_count=0)
        with pytest.raises(ValueError, match="no cluster id"):
            build_rgb_array(unlabeled)


class TestRenderText:
    def test_scenario_layout(self) -> None:
        text = render_text(label(_scenario_grid()))
        assert text.splitlines() == [
            "1 1 .",
            ". . .",
            ". . 2",
            "Number of Clusters: 2",
        ]

    def test_wide_ids_are_aligned(self) -> None:
        pattern = [[(row + col) % 2 == 0 for col in range(5)] for row in range(5)]
        labeled = label(Grid.from_occupancy(pattern))
        lines = render_text(labeled).splitlines()
        assert labeled.cluster_count == 13
        assert len({len(line) for line in lines[:-1]}) == 1


class TestActiveTheme:
    def test_set_and_get(self) -> None:
        assert set_active_theme("dark") is DARK_THEME
        assert get_active_theme() is DARK_THEME

    def test_unknown_theme(self) -> None:
        with pytest.raises(ValueError, match="Unknown theme"):
            set_active_theme("neon")
        assert get_active_theme() is DEFAULT_THEME


class TestRenderLattice:
    def test_writes_image(self, tmp_path: Path) -> None:
        labeled = label(generate(10, 0.6, Random(0)))
        output = render_lattice(labeled, tmp_path / "nested" / "lattice.png")
        assert output.exists()
        assert output.stat().st_size > 0

    def test_uses_active_theme(self, tmp_path: Path) -> None:
        set_active_theme("dark")
        labeled = label(generate(5, 0.5, Random(0)))
        assert render_lattice(labeled, tmp_path / "dark.png").exists()

    def test_rejects_paths_outside_base_dir(self, tmp_path: Path) -> None:
        labeled = label(generate(5, 0.5, Random(0)))
        with pytest.raises(ValueError, match="escapes base_dir"):
            render_lattice(labeled, Path("../outside.png"), base_dir=tmp_path)

    def test_rejects_bad_dpi(self, tmp_path: Path) -> None:
        labeled = label(generate(5, 0.5, Random(0)))
        with pytest.raises(ValueError, match="dpi"):
            render_lattice(labeled, tmp_path / "x.png", dpi=0)

    def test_closes_figure(self, tmp_path: Path) -> None:
        labeled = label(generate(5, 0.5, Random(0)))
        before = len(viz_render.plt.get_fignums())
        render_lattice(labeled, tmp_path / "x.png")
        assert len(viz_render.plt.get_fignums()) == before


class TestRenderProbabilityStrip:
    def test_one_panel_per_probability(self, tmp_path: Path) -> None:
        output = tmp_path / "strip.png"
        results = render_probability_strip(
            size=8, probabilities=[0.0, 0.5, 1.0], output_path=output, seed=3
        )
        assert output.exists()
        assert [r.cluster_count for r in results][0] == 0
        assert results[-1].cluster_count == 1

    def test_seeded_panels_grow_monotonically(self, tmp_path: Path) -> None:
        results = render_probability_strip(
            size=12,
            probabilities=[0.2, 0.4, 0.6, 0.8],
            output_path=tmp_path / "strip.png",
            seed=9,
        )
        occupancies = [r.grid.occupancy_array() for r in results]
        for smaller, larger in zip(occupancies, occupancies[1:]):
            assert not (smaller & ~larger).any()

    def test_rejects_empty_probabilities(self, tmp_path: Path) -> None:
        with pytest.raises(ValueError, match="must not be empty"):
            render_probability_strip(size=8, probabilities=[], output_path=tmp_path / "s.png")

    def test_rejects_bad_dpi(self, tmp_path: Path) -> None:
        before = viz_render.plt.get_fignums()
        with pytest.raises(ValueError, match="dpi"):
            render_probability_strip(
                size=8, probabilities=[0.5], output_path=tmp_path / "s.png", dpi=0
            )
        assert viz_render.plt.get_fignums() == before
        assert not (tmp_path / "s.png").exists()

    def test_panel_titles_keep_full_probability(self, tmp_path: Path) -> None:
        with patch.object(viz_render.plt, "close") as mock_close:
            render_probability_strip(
                size=8, probabilities=[0.593, 0.7], output_path=tmp_path / "s.png", seed=1
            )
        fig = mock_close.call_args.args[0]
        try:
            titles = [ax.get_title() for ax in fig.axes]
        finally:
            viz_render.plt.close(fig)
        assert titles[0].startswith("p = 0.593\n")
        assert titles[1].startswith("p = 0.7\n")
