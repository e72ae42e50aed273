"""Movie theater: largest rectangles between red tiles of a rectilinear loop.

Red tiles are the vertices of an axis-aligned simple polygon, listed in
boundary order. Part 2 only accepts rectangles whose tiles all lie on or
inside the loop. Geometry runs on doubled coordinates so the centre of any
rectangle is a lattice point.
"""

from __future__ import annotations

import bisect
from dataclasses import dataclass
from typing import List, Optional, Tuple

Point = Tuple[int, int]


def parse(text: str) -> List[Point]:
    points: List[Point] = []
    for line in text.split():
        try:
            x_str, y_str = line.split(",")
            points.append((int(x_str), int(y_str)))
        except ValueError:
            raise ValueError(f"could not parse tile {line!r}") from None
    return points


def area(a: Point, b: Point) -> int:
    """Tiles covered by the rectangle with opposite corners a and b."""
    return (abs(a[0] - b[0]) + 1) * (abs(a[1] - b[1]) + 1)


class Walls:
    """The loop's edges split into vertical and horizontal walls."""

    def __init__(self, points: List[Point]):
        if len(points) < 4:
            raise ValueError("a loop needs at least four red tiles")
        vertical: List[Tuple[int, int, int]] = []
        horizontal: List[Tuple[int, int, int]] = []
        for (x1, y1), (x2, y2) in zip(points, points[1:] + points[:1]):
            if x1 == x2:
                vertical.append((2 * x1, 2 * min(y1, y2), 2 * max(y1, y2)))
            elif y1 == y2:
                horizontal.append((2 * y1, 2 * min(x1, x2), 2 * max(x1, x2)))
            else:
                raise ValueError(f"edge {(x1, y1)} -> {(x2, y2)} is not axis aligned")
        self._vertical = sorted(vertical)
        self._horizontal = sorted(horizontal)
        self._vx = [w[0] for w in self._vertical]
        self._hy = [w[0] for w in self._horizontal]

    def _on_boundary(self, px: int, py: int) -> bool:
        lo, hi = bisect.bisect_left(self._vx, px), bisect.bisect_right(self._vx, px)
        if any(y1 <= py <= y2 for _, y1, y2 in self._vertical[lo:hi]):
            return True
        lo, hi = bisect.bisect_left(self._hy, py), bisect.bisect_right(self._hy, py)
        return any(x1 <= px <= x2 for _, x1, x2 in self._horizontal[lo:hi])

    def _ray_parity(self, px: int, py: int) -> bool:
        # Half-open rule: a wall counts when py is in [y1, y2), so a ray
        # grazing a vertex is counted exactly once.
        end = bisect.bisect_left(self._vx, px)
        crossings = sum(1 for _, y1, y2 in self._vertical[:end] if y1 <= py < y2)
        return crossings % 2 == 1

    def is_inside(self, point: Point) -> bool:
        """Whether a tile is on the loop or enclosed by it."""
        px, py = 2 * point[0], 2 * point[1]
        return self._on_boundary(px, py) or self._ray_parity(px, py)

    def crosses_interior(self, a: Point, b: Point) -> bool:
        """Whether any wall passes through the open interior of the rectangle a-b."""
        min_x, max_x = 2 * min(a[0], b[0]), 2 * max(a[0], b[0])
        min_y, max_y = 2 * min(a[1], b[1]), 2 * max(a[1], b[1])

        lo = bisect.bisect_right(self._vx, min_x)
        hi = bisect.bisect_left(self._vx, max_x)
        for _, y1, y2 in self._vertical[lo:hi]:
            if y1 < max_y and y2 > min_y:
                return True

        lo = bisect.bisect_right(self._hy, min_y)
        hi = bisect.bisect_left(self._hy, max_y)
        for _, x1, x2 in self._horizontal[lo:hi]:
            if x1 < max_x and x2 > min_x:
                return True
        return False

    def rectangle_inside(self, a: Point, b: Point) -> bool:
        """Whether the rectangle a-b lies inside the loop.

        With no wall through its interior the interior is entirely inside or
        entirely outside, so probing the centre decides. Rectangles one tile
        thick have no interior and are rejected.
        """
        if a[0] == b[0] or a[1] == b[1]:
            return False
        if self.crosses_interior(a, b):
            return False
        return self._ray_parity(a[0] + b[0], a[1] + b[1])


@dataclass
class Rectangle:
    a: Point
    b: Point
    area: int


def _candidates(points: List[Point]) -> List[Rectangle]:
    out = [
        Rectangle(points[i], points[j], area(points[i], points[j]))
        for i in range(len(points))
        for j in range(i + 1, len(points))
    ]
    out.sort(key=lambda r: r.area, reverse=True)
    return out


def best_inside_rectangle(points: List[Point]) -> Optional[Rectangle]:
    """Largest rectangle between two red tiles lying inside the loop."""
    walls = Walls(points)
    for rect in _candidates(points):
        if walls.rectangle_inside(rect.a, rect.b):
            return rect
    return None


def part_1(points: List[Point]) -> int:
    return max(
        (area(points[i], points[j]) for i in range(len(points)) for j in range(i + 1, len(points))),
        default=0,
    )


def part_2(points: List[Point]) -> int:
    rect = best_inside_rectangle(points)
    return rect.area if rect else 0


def solve(text: str) -> Tuple[int, int]:
    points = parse(text)
    return part_1(points), part_2(points)
