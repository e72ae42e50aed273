"""Laboratories: a tachyon beam travels down a manifold and splits on `^`."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, Set, Tuple


@dataclass
class Manifold:
    source_col: int
    splitters: Dict[int, Set[int]] = field(default_factory=dict)  # row -> cols


def parse(text: str) -> Manifold:
    source = None
    splitters: Dict[int, Set[int]] = {}
    for row, line in enumerate(text.split()):
        for col, ch in enumerate(line):
            if ch == "S":
                if source is not None:
                    raise ValueError(f"second source at row {row}, column {col}")
                source = (row, col)
            elif ch == "^":
                splitters.setdefault(row, set()).add(col)
            elif ch != ".":
                raise ValueError(f"unexpected char {ch!r}")
    if source is None:
        raise ValueError("manifold has no S source")
    # Splitters above the source never see the beam.
    below = {r: cols for r, cols in splitters.items() if r > source[0]}
    return Manifold(source_col=source[1], splitters=below)


def _sweep(manifold: Manifold) -> Tuple[int, Counter]:
    """Walk the beams row by row; return (splitters hit, timelines per column)."""
    beams: Counter = Counter({manifold.source_col: 1})
    hit = 0
    for row in sorted(manifold.splitters):
        cols = manifold.splitters[row]
        nxt: Counter = Counter()
        for col, timelines in beams.items():
            if col in cols:
                hit += 1
                nxt[col - 1] += timelines
                nxt[col + 1] += timelines
            else:
                nxt[col] += timelines
        beams = nxt
    return hit, beams


def part_1(manifold: Manifold) -> int:
    hit, _ = _sweep(manifold)
    return hit


def part_2(manifold: Manifold) -> int:
    _, beams = _sweep(manifold)
    return sum(beams.values())


def solve(text: str) -> Tuple[int, int]:
    manifold = parse(text)
    return part_1(manifold), part_2(manifold)
