"""Lobby batteries: pick digits from each bank to form the largest joltage."""

from __future__ import annotations

from typing import List, Tuple


def parse(text: str) -> List[List[int]]:
    banks: List[List[int]] = []
    for line in text.split():
        if not line.isdigit():
            raise ValueError(f"could not parse digits in {line!r}")
        banks.append([int(ch) for ch in line])
    return banks


def max_joltage(digits: List[int], count: int) -> int:
    """Largest number made of `count` digits kept in their original order."""
    if len(digits) < count:
        raise ValueError(f"bank of {len(digits)} batteries cannot supply {count}")
    drops = len(digits) - count
    stack: List[int] = []
    for digit in digits:
        while drops and stack and stack[-1] < digit:
            stack.pop()
            drops -= 1
        stack.append(digit)
    value = 0
    for digit in stack[:count]:
        value = value * 10 + digit
    return value


def part_1(banks: List[List[int]]) -> int:
    return sum(max_joltage(bank, 2) for bank in banks)


def part_2(banks: List[List[int]]) -> int:
    return sum(max_joltage(bank, 12) for bank in banks)


def solve(text: str) -> Tuple[int, int]:
    banks = parse(text)
    return part_1(banks), part_2(banks)
