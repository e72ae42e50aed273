"""Secret entrance dial: count how often a 100-position dial points at 0.

The dial starts at 50. Each line is a rotation, `L<n>` turning left (towards
lower numbers) and `R<n>` turning right.
"""

from __future__ import annotations

from typing import List, Tuple

DIAL_SIZE = 100
START_POSITION = 50


def parse(text: str) -> List[int]:
    turns: List[int] = []
    for line in text.split():
        if line.startswith("L"):
            sign = -1
        elif line.startswith("R"):
            sign = 1
        else:
            raise ValueError(f"did not start with L or R: {line!r}")
        if not line[1:].isdigit():
            raise ValueError(f"invalid rotation amount: {line!r}")
        turns.append(sign * int(line[1:]))
    return turns


def rotate(position: int, turn: int) -> Tuple[int, int]:
    """Apply one rotation; return (new_position, clicks that landed on 0).

    Every click counts, including the last one. Leaving 0 is not a hit.
    """
    new_position = (position + turn) % DIAL_SIZE
    if turn >= 0:
        hits = (position + turn) // DIAL_SIZE
    else:
        # Mirror the dial so a left turn becomes a right turn.
        mirrored = (DIAL_SIZE - position) % DIAL_SIZE
        hits = (mirrored - turn) // DIAL_SIZE
    return new_position, hits


def part_1(turns: List[int]) -> int:
    position = START_POSITION
    count = 0
    for turn in turns:
        position, _ = rotate(position, turn)
        if position == 0:
            count += 1
    return count


def part_2(turns: List[int]) -> int:
    position = START_POSITION
    count = 0
    for turn in turns:
        position, hits = rotate(position, turn)
        count += hits
    return count


def solve(text: str) -> Tuple[int, int]:
    turns = parse(text)
    return part_1(turns), part_2(turns)
