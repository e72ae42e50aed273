"""Gift shop: find product ids made of a repeated digit block inside id ranges."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Set, Tuple


@dataclass
class IdRange:
    begin: int
    end: int


def parse(text: str) -> List[IdRange]:
    ranges: List[IdRange] = []
    for chunk in text.replace("\n", "").split(","):
        chunk = chunk.strip()
        if not chunk:
            continue
        begin_str, sep, end_str = chunk.partition("-")
        if not sep:
            raise ValueError(f"could not split on - in the range {chunk!r}")
        try:
            begin, end = int(begin_str), int(end_str)
        except ValueError:
            raise ValueError(f"invalid range bounds {chunk!r}") from None
        if begin > end:
            raise ValueError(f"range {chunk!r} is reversed")
        ranges.append(IdRange(begin, end))
    return ranges


def repeat(block: int, count: int) -> int:
    """Concatenate the decimal digits of block `count` times."""
    return int(str(block) * count)


def repeated_ids(begin: int, end: int, repeats: int) -> Iterator[int]:
    """Yield ids in [begin, end] that are a digit block repeated exactly `repeats` times.

    For a block of length L the id equals block * (10^(L*k) - 1) / (10^L - 1),
    so the valid blocks form a contiguous interval found by division.
    """
    for digits in range(len(str(begin)), len(str(end)) + 1):
        if digits % repeats:
            continue
        length = digits // repeats
        multiplier = (10 ** digits - 1) // (10 ** length - 1)
        lowest = max(10 ** (length - 1), -(-begin // multiplier))
        highest = min(10 ** length - 1, end // multiplier)
        for block in range(lowest, highest + 1):
            yield block * multiplier


def part_1(ranges: List[IdRange]) -> int:
    return sum(sum(repeated_ids(r.begin, r.end, 2)) for r in ranges)


def part_2(ranges: List[IdRange]) -> int:
    # 111111 is both 111 twice and 11 three times; count it once.
    invalid: Set[int] = set()
    for r in ranges:
        for repeats in range(2, len(str(r.end)) + 1):
            invalid.update(repeated_ids(r.begin, r.end, repeats))
    return sum(invalid)


def solve(text: str) -> Tuple[int, int]:
    ranges = parse(text)
    return part_1(ranges), part_2(ranges)
