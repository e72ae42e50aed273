"""Christmas tree farm: decide which regions can hold their presents.

Presents are small polyomino shapes that may be rotated and flipped; a region
lists how many presents of each shape must fit under its tree. Cheap area
bounds settle most regions; the rest go to an exact CP-SAT packing model.
"""

from __future__ import annotations

import re
import time
from dataclasses import dataclass
from typing import Dict, FrozenSet, List, Optional, Set, Tuple

from solver_backends import cp_model, require_cpsat

Cell = Tuple[int, int]
Shape = FrozenSet[Cell]

SLOT = 3  # presents fit in a 3x3 box

_SHAPE_HEADER = re.compile(r"^(\d+):$")
_REGION_LINE = re.compile(r"^(\d+)x(\d+):(.*)$")


@dataclass
class Region:
    width: int
    height: int
    counts: List[int]


@dataclass
class Farm:
    shapes: List[Shape]
    regions: List[Region]


def _normalize(cells: Set[Cell]) -> Shape:
    min_r = min(r for r, _ in cells)
    min_c = min(c for _, c in cells)
    return frozenset((r - min_r, c - min_c) for r, c in cells)


def orientations(shape: Shape) -> List[Shape]:
    """Distinct rotations and reflections of a shape, normalized to the origin."""
    seen: Set[Shape] = set()
    out: List[Shape] = []
    cells = set(shape)
    for _ in range(2):
        for _ in range(4):
            cells = {(c, -r) for r, c in cells}
            norm = _normalize(cells)
            if norm not in seen:
                seen.add(norm)
                out.append(norm)
        cells = {(r, -c) for r, c in cells}
    return out


def parse(text: str) -> Farm:
    shapes: Dict[int, Set[Cell]] = {}
    regions: List[Region] = []
    current: Optional[int] = None
    row = 0
    for line in text.splitlines():
        line = line.strip()
        if not line:
            current = None
            continue
        header = _SHAPE_HEADER.match(line)
        region = _REGION_LINE.match(line)
        if header:
            current = int(header.group(1))
            shapes[current] = set()
            row = 0
        elif region:
            current = None
            try:
                counts = [int(tok) for tok in region.group(3).split()]
            except ValueError:
                raise ValueError(f"could not parse counts in {line!r}") from None
            regions.append(Region(int(region.group(1)), int(region.group(2)), counts))
        elif current is not None and set(line) <= {"#", "."}:
            shapes[current].update((row, col) for col, ch in enumerate(line) if ch == "#")
            row += 1
        else:
            raise ValueError(f"unexpected line {line!r}")

    if sorted(shapes) != list(range(len(shapes))):
        raise ValueError(f"shape indices are not 0..{len(shapes) - 1}")
    ordered = [frozenset(shapes[i]) for i in range(len(shapes))]
    if any(not shape for shape in ordered):
        raise ValueError("empty present shape")
    for region in regions:
        if len(region.counts) > len(ordered) and any(region.counts[len(ordered) :]):
            raise ValueError(
                f"region {region.width}x{region.height} asks for unknown shapes"
            )
    return Farm(shapes=ordered, regions=regions)


def quick_verdict(region: Region, shapes: List[Shape]) -> Optional[bool]:
    """True/False when area bounds decide the region, None otherwise."""
    slots = (region.width // SLOT) * (region.height // SLOT)
    if sum(region.counts) <= slots:
        return True
    needed = sum(len(shape) * count for shape, count in zip(shapes, region.counts))
    if needed > region.width * region.height:
        return False
    return None


def exact_fit(
    region: Region,
    shapes: List[Shape],
    threads: int = 1,
    time_limit: float = 10.0,
) -> Optional[bool]:
    """Pack the region with CP-SAT; None when the time limit hits first."""
    require_cpsat()
    model = cp_model.CpModel()
    covering: Dict[Cell, List[cp_model.IntVar]] = {}

    for idx, (shape, count) in enumerate(zip(shapes, region.counts)):
        if count == 0:
            continue
        placements: List[cp_model.IntVar] = []
        for o, variant in enumerate(orientations(shape)):
            rows = max(r for r, _ in variant) + 1
            cols = max(c for _, c in variant) + 1
            for dr in range(region.height - rows + 1):
                for dc in range(region.width - cols + 1):
                    var = model.NewBoolVar(f"p_{idx}_{o}_{dr}_{dc}")
                    placements.append(var)
                    for r, c in variant:
                        covering.setdefault((r + dr, c + dc), []).append(var)
        if len(placements) < count:
            return False
        model.Add(sum(placements) == count)

    for cell_vars in covering.values():
        if len(cell_vars) > 1:
            model.AddAtMostOne(cell_vars)

    solver = cp_model.CpSolver()
    solver.parameters.num_search_workers = threads
    solver.parameters.max_time_in_seconds = time_limit
    status = solver.Solve(model)
    if status in (cp_model.OPTIMAL, cp_model.FEASIBLE):
        return True
    if status == cp_model.INFEASIBLE:
        return False
    return None


def part_1(
    farm: Farm,
    threads: int = 1,
    time_limit: float = 10.0,
    verbose: bool = False,
) -> int:
    fitting = 0
    for idx, region in enumerate(farm.regions):
        verdict = quick_verdict(region, farm.shapes)
        if verdict is None:
            t0 = time.perf_counter()
            verdict = exact_fit(region, farm.shapes, threads, time_limit)
            if verbose:
                print(
                    f"[day12] region {idx} {region.width}x{region.height}: fits={verdict} | {time.perf_counter() - t0:.3f}s"
                )
        if verdict:
            fitting += 1
    return fitting


def part_2(farm: Farm) -> int:
    return sum(1 for r in farm.regions if quick_verdict(r, farm.shapes) is None)


def solve(text: str, threads: int = 1, time_limit: float = 10.0) -> Tuple[int, int]:
    farm = parse(text)
    return part_1(farm, threads=threads, time_limit=time_limit), part_2(farm)
