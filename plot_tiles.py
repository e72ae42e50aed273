#!/usr/bin/env python3
"""
Plot the day 9 red-tile loop and the largest rectangle found inside it.

Reads a day 9 input, prints the part 1 / part 2 rectangles and saves a figure
with the loop outline, the red tiles, and both rectangles.
"""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Iterable, List, Optional

import matplotlib.pyplot as plt
from matplotlib.patches import Rectangle as RectPatch

import day09


def save_fig(
    fig: plt.Figure,
    out_dir: Path,
    name: str,
    formats: Iterable[str],
    close: bool = True,
) -> List[Path]:
    out_dir.mkdir(parents=True, exist_ok=True)
    paths: List[Path] = []
    for fmt in formats:
        fig_path = out_dir / f"{name}.{fmt}"
        fig.savefig(fig_path, bbox_inches="tight", dpi=150)
        print(f"Saved {fig_path}")
        paths.append(fig_path)
    if close:
        plt.close(fig)
    return paths


def largest_rectangle(points: List[day09.Point]) -> Optional[day09.Rectangle]:
    best: Optional[day09.Rectangle] = None
    for i, a in enumerate(points):
        for b in points[i + 1 :]:
            size = day09.area(a, b)
            if best is None or size > best.area:
                best = day09.Rectangle(a, b, size)
    return best


def _patch(rect: day09.Rectangle, **kwargs) -> RectPatch:
    # Tiles are unit squares centred on their coordinates.
    x0 = min(rect.a[0], rect.b[0]) - 0.5
    y0 = min(rect.a[1], rect.b[1]) - 0.5
    width = abs(rect.a[0] - rect.b[0]) + 1
    height = abs(rect.a[1] - rect.b[1]) + 1
    return RectPatch((x0, y0), width, height, **kwargs)


def plot_loop(
    points: List[day09.Point],
    out_dir: Path,
    formats: Iterable[str],
    close: bool = True,
) -> List[Path]:
    outer = largest_rectangle(points)
    inside = day09.best_inside_rectangle(points)
    print(f"part 1 rectangle: {outer}")
    print(f"part 2 rectangle: {inside}")

    fig, ax = plt.subplots(figsize=(8, 8))
    loop = points + points[:1]
    ax.plot(
        [p[0] for p in loop],
        [p[1] for p in loop],
        linestyle="-",
        linewidth=1.2,
        color="#2a9d8f",  # Teal
        label="Loop",
        zorder=2,
    )
    ax.scatter(
        [p[0] for p in points],
        [p[1] for p in points],
        color="#e76f51",
        s=12,
        label="Red tiles",
        zorder=3,
    )
    if outer is not None:
        ax.add_patch(
            _patch(
                outer,
                fill=False,
                linestyle="--",
                edgecolor="#8d99ae",
                label=f"Largest rectangle ({outer.area})",
            )
        )
    if inside is not None:
        ax.add_patch(
            _patch(
                inside,
                color="#e9c46a",
                alpha=0.5,
                label=f"Largest inside rectangle ({inside.area})",
            )
        )

    ax.set_aspect("equal")
    ax.invert_yaxis()
    ax.set_title("Red tile loop", fontsize=13, fontweight="bold")
    ax.grid(True, linestyle="--", alpha=0.4)
    ax.legend(loc="upper left", frameon=True, framealpha=0.9)

    return save_fig(fig, out_dir, "tiles", formats, close=close)


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "input",
        type=Path,
        nargs="?",
        default=Path("inputs") / "day09.txt",
        help="Day 9 puzzle input.",
    )
    parser.add_argument(
        "--out-dir",
        type=Path,
        default=Path("plots"),
        help="Where to save generated plots.",
    )
    parser.add_argument(
        "--formats",
        nargs="+",
        default=["png"],
        help="Image formats to save (passed to matplotlib).",
    )
    parser.add_argument(
        "--show",
        action="store_true",
        help="Display the plot interactively after saving.",
    )
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    points = day09.parse(args.input.read_text())
    plot_loop(points, args.out_dir, args.formats, close=not args.show)
    if args.show:
        plt.show()


if __name__ == "__main__":
    main()
