"""Playground: wire junction boxes together, closest pairs first."""

from __future__ import annotations

import heapq
import itertools
import math
from typing import Dict, Iterator, List, Tuple

Point = Tuple[int, int, int]
Pair = Tuple[int, int, int]  # (squared distance, index a, index b)

DEFAULT_PAIRS = 1000


def parse(text: str) -> List[Point]:
    points: List[Point] = []
    for line in text.split():
        try:
            coords = [int(c) for c in line.split(",")]
        except ValueError:
            raise ValueError(f"could not parse number in {line!r}") from None
        if len(coords) != 3:
            raise ValueError(f"expected x,y,z in {line!r}")
        points.append((coords[0], coords[1], coords[2]))
    return points


def distance(a: Point, b: Point) -> int:
    """Squared euclidean distance; exact and ordered like the real distance."""
    return sum((p - q) ** 2 for p, q in zip(a, b))


def _pairs(points: List[Point]) -> Iterator[Pair]:
    for i, j in itertools.combinations(range(len(points)), 2):
        yield distance(points[i], points[j]), i, j


class Circuits:
    """Union-find over point indices with union by size."""

    def __init__(self, n: int):
        self._parent = list(range(n))
        self._size = [1] * n
        self.count = n

    def find(self, i: int) -> int:
        root = i
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[i] != root:
            self._parent[i], i = root, self._parent[i]
        return root

    def union(self, a: int, b: int) -> bool:
        ra, rb = self.find(a), self.find(b)
        if ra == rb:
            return False
        if self._size[ra] < self._size[rb]:
            ra, rb = rb, ra
        self._parent[rb] = ra
        self._size[ra] += self._size[rb]
        self.count -= 1
        return True

    def sizes(self) -> List[int]:
        roots: Dict[int, int] = {}
        for i in range(len(self._parent)):
            root = self.find(i)
            roots[root] = self._size[root]
        return sorted(roots.values(), reverse=True)


def part_1(points: List[Point], pairs: int = DEFAULT_PAIRS) -> int:
    circuits = Circuits(len(points))
    for _, i, j in heapq.nsmallest(pairs, _pairs(points)):
        circuits.union(i, j)
    return math.prod(circuits.sizes()[:3])


def part_2(points: List[Point]) -> int:
    if len(points) < 2:
        raise ValueError("need at least two junction boxes to connect")
    circuits = Circuits(len(points))
    for _, i, j in sorted(_pairs(points)):
        if circuits.union(i, j) and circuits.count == 1:
            return points[i][0] * points[j][0]
    raise RuntimeError("pairs exhausted before all boxes joined")  # pragma: no cover


def solve(text: str, pairs: int = DEFAULT_PAIRS) -> Tuple[int, int]:
    points = parse(text)
    return part_1(points, pairs=pairs), part_2(points)
