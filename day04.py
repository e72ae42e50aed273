"""Printing department: forklifts can reach paper rolls with few neighbours."""

from __future__ import annotations

from typing import List, Set, Tuple

Cell = Tuple[int, int]

NEIGHBOURS = [
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
]
MAX_CROWDING = 3


def parse(text: str) -> Set[Cell]:
    rolls: Set[Cell] = set()
    for row, line in enumerate(text.split()):
        for col, ch in enumerate(line):
            if ch == "@":
                rolls.add((row, col))
            elif ch != ".":
                raise ValueError(f"cannot match {ch!r} at row {row}, column {col}")
    return rolls


def accessible(rolls: Set[Cell]) -> List[Cell]:
    """Rolls with at most three rolls among their eight neighbours."""
    out: List[Cell] = []
    for row, col in rolls:
        crowding = sum(1 for dr, dc in NEIGHBOURS if (row + dr, col + dc) in rolls)
        if crowding <= MAX_CROWDING:
            out.append((row, col))
    return out


def part_1(rolls: Set[Cell]) -> int:
    return len(accessible(rolls))


def part_2(rolls: Set[Cell]) -> int:
    remaining = set(rolls)
    removed = 0
    while True:
        batch = accessible(remaining)
        if not batch:
            return removed
        removed += len(batch)
        remaining.difference_update(batch)


def solve(text: str) -> Tuple[int, int]:
    rolls = parse(text)
    return part_1(rolls), part_2(rolls)
