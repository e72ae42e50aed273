"""Trash compactor worksheet: column-aligned arithmetic problems.

Problems sit side by side, separated by columns that are blank in every row.
The last row holds each problem's operator. Part 1 reads numbers row by row;
part 2 reads them column by column, each column's digits top to bottom
forming one number.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Tuple

OPERATORS = {"+": sum, "*": math.prod}


@dataclass
class Problem:
    rows: List[str]  # the problem's slice of every number row, padded
    op: str

    def row_numbers(self) -> List[int]:
        return [int(row) for row in self.rows if row.strip()]

    def column_numbers(self) -> List[int]:
        numbers: List[int] = []
        for col in range(len(self.rows[0])):
            digits = "".join(row[col] for row in self.rows).strip()
            if digits:
                numbers.append(int(digits))
        return numbers

    def evaluate(self, numbers: List[int]) -> int:
        if not numbers:
            raise ValueError(f"no numbers in {self.op!r} problem")
        return OPERATORS[self.op](numbers)


def parse(text: str) -> List[Problem]:
    lines = [line for line in text.splitlines() if line.strip()]
    if len(lines) < 2:
        raise ValueError("worksheet needs number rows and an operator row")
    width = max(len(line) for line in lines)
    grid = [line.ljust(width) for line in lines]
    *number_rows, op_row = grid

    problems: List[Problem] = []
    start = 0
    for col in range(width + 1):
        blank = col == width or all(line[col] == " " for line in grid)
        if not blank:
            continue
        if col > start:
            op = op_row[start:col].strip()
            if op not in OPERATORS:
                raise ValueError(f"{op!r} is not an operation (column {start})")
            problems.append(Problem([row[start:col] for row in number_rows], op))
        start = col + 1
    return problems


def part_1(problems: List[Problem]) -> int:
    return sum(p.evaluate(p.row_numbers()) for p in problems)


def part_2(problems: List[Problem]) -> int:
    return sum(p.evaluate(p.column_numbers()) for p in problems)


def solve(text: str) -> Tuple[int, int]:
    problems = parse(text)
    return part_1(problems), part_2(problems)
