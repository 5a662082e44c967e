from __future__ import annotations

import argparse
import logging
import math
from pathlib import Path
from random import Random

import site_percolation.viz.render as viz_render
from site_percolation.config.constants import DEFAULT_GRID_SIZE, DEFAULT_PROBABILITY
from site_percolation.domain.labeling import LabeledGrid
from site_percolation.metrics.clusters import (
    largest_cluster_size,
    mean_cluster_size,
    occupied_fraction,
)
from site_percolation.session import clamp_probability, clamp_size, generate_labeled
from site_percolation.viz.render import render_lattice, render_probability_strip, render_text
from site_percolation.viz.theme import REGISTERED_THEMES

logger = logging.getLogger(__name__)


def _add_lattice_arguments(p: argparse.ArgumentParser) -> None:
    p.add_argument("--size", type=str, default=str(DEFAULT_GRID_SIZE))
    p.add_argument("--probability", type=str, default=str(DEFAULT_PROBABILITY))
    p.add_argument("--seed", type=int, default=None)


def _build_render_parser(sub: argparse._SubParsersAction) -> None:
    p = sub.add_parser("render", help="Render one labeled lattice to an image file")
    p.set_defaults(func=_handle_render)
    _add_lattice_arguments(p)
    p.add_argument("--output", type=Path, required=True)
    p.add_argument("--base-dir", type=Path, default=Path("."))
    p.add_argument("--dpi", type=int, default=150)


def _build_summary_parser(sub: argparse._SubParsersAction) -> None:
    p = sub.add_parser("summary", help="Print a text lattice and cluster statistics")
    p.set_defaults(func=_handle_summary)
    _add_lattice_arguments(p)


def _build_strip_parser(sub: argparse._SubParsersAction) -> None:
    p = sub.add_parser("strip", help="Render one panel per occupation probability")
    p.set_defaults(func=_handle_strip)
    p.add_argument("--size", type=str, default=str(DEFAULT_GRID_SIZE))
    p.add_argument(
        "--probabilities",
        type=str,
        default="0.3,0.5,0.593,0.7",
        metavar="P1,P2,...",
        help="Comma-separated occupation probabilities",
    )
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--output", type=Path, required=True)
    p.add_argument("--base-dir", type=Path, default=Path("."))
    p.add_argument("--dpi", type=int, default=150)


def _parse_probabilities(raw: str) -> list[float]:
    parts = [part.strip() for part in raw.split(",") if part.strip()]
    if not parts:
        raise ValueError("probabilities must contain at least one value")
    result = []
    for part in parts:
        try:
            value = float(part)
        except ValueError as exc:
            raise ValueError(f"Invalid probability: {part}") from exc
        if math.isnan(value):
            raise ValueError(f"Invalid probability: {part}")
        result.append(clamp_probability(value))
    return result


def _format_stats(size: int, probability: float, grid_stats: dict[str, float]) -> str:
    return (
        f"size={size} probability={probability:g} "
        f"clusters={int(grid_stats['clusters'])} "
        f"largest={int(grid_stats['largest'])} "
        f"mean_size={grid_stats['mean_size']:.2f} "
        f"occupied={grid_stats['occupied']:.3f}"
    )


def _generate_from_args(
    args: argparse.Namespace,
) -> tuple[int, float, LabeledGrid, dict[str, float]]:
    size = clamp_size(args.size)
    probability = clamp_probability(args.probability)
    logger.debug("lattice inputs clamped to size=%d probability=%g", size, probability)
    rng = Random(args.seed) if args.seed is not None else None
    labeled = generate_labeled(size, probability, rng)
    grid_stats = {
        "clusters": labeled.cluster_count,
        "largest": largest_cluster_size(labeled.grid),
        "mean_size": mean_cluster_size(labeled.grid),
        "occupied": occupied_fraction(labeled.grid),
    }
    return size, probability, labeled, grid_stats


def _handle_render(args: argparse.Namespace) -> None:
    size, probability, labeled, grid_stats = _generate_from_args(args)
    render_lattice(
        labeled=labeled,
        output_path=args.output,
        base_dir=args.base_dir,
        dpi=args.dpi,
        title="Percolation Theory Visualization",
    )
    print(_format_stats(size, probability, grid_stats))


def _handle_summary(args: argparse.Namespace) -> None:
    size, probability, labeled, grid_stats = _generate_from_args(args)
    print(render_text(labeled))
    print(_format_stats(size, probability, grid_stats))


def _handle_strip(args: argparse.Namespace) -> None:
    results = render_probability_strip(
        size=clamp_size(args.size),
        probabilities=_parse_probabilities(args.probabilities),
        output_path=args.output,
        seed=args.seed,
        base_dir=args.base_dir,
        dpi=args.dpi,
    )
    print(" ".join(str(labeled.cluster_count) for labeled in results))


def main() -> None:
    """CLI entrypoint with subcommands."""
    parser = argparse.ArgumentParser(description="Site percolation cluster visualization")
    parser.add_argument(
        "--theme",
        type=str,
        default="default",
        choices=sorted(REGISTERED_THEMES),
        help="Theme preset name",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    sub = parser.add_subparsers(dest="command", required=True)
    _build_render_parser(sub)
    _build_summary_parser(sub)
    _build_strip_parser(sub)
    args = parser.parse_args()

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    viz_render.set_active_theme(args.theme)

    args.func(args)


if __name__ == "__main__":
    main()
