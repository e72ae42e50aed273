"""Factory: fewest button presses to configure each machine.

Each line describes one machine:

    [.##.] (3) (1,3) (2) (2,3) (0,2) (0,1) {3,5,4,7}

The bracketed pattern is the wanted light state (`#` on), every parenthesised
group is a button listing the light/counter indices it touches, and the braced
list holds the joltage targets.

Part 1: buttons toggle lights; press each at most once (pressing twice cancels),
so the program is binary with a parity constraint per light.
Part 2: buttons add one to their counters; counters must hit the joltage
targets exactly, presses unbounded.

Both are integer programs handed to a backend from `solver_backends`.
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import List, Tuple

from solver_backends import BackendSpec, min_presses


@dataclass
class Machine:
    lights: List[bool]
    buttons: List[List[int]]
    joltage: List[int]

    def lights_program(self) -> BackendSpec:
        return BackendSpec(
            buttons=self.buttons,
            targets=[int(on) for on in self.lights],
            parity=True,
        )

    def joltage_program(self) -> BackendSpec:
        return BackendSpec(buttons=self.buttons, targets=self.joltage, parity=False)


def _parse_numbers(word: str) -> List[int]:
    try:
        return [int(tok) for tok in word[1:-1].split(",") if tok]
    except ValueError:
        raise ValueError(f"could not parse numbers in {word!r}") from None


def parse_line(line: str) -> Machine:
    lights = None
    buttons: List[List[int]] = []
    joltage = None
    for word in line.split():
        if word.startswith("[") and word.endswith("]"):
            pattern = word[1:-1]
            if set(pattern) - {"#", "."}:
                raise ValueError(f"unexpected light pattern {word!r}")
            lights = [ch == "#" for ch in pattern]
        elif word.startswith("(") and word.endswith(")"):
            buttons.append(_parse_numbers(word))
        elif word.startswith("{") and word.endswith("}"):
            joltage = _parse_numbers(word)
        else:
            raise ValueError(f"unexpected token {word!r}")
    if lights is None:
        raise ValueError(f"did not find target in {line!r}")
    if joltage is None:
        raise ValueError(f"did not find joltage in {line!r}")
    if len(joltage) != len(lights):
        raise ValueError(
            f"{len(lights)} lights but {len(joltage)} joltage targets in {line!r}"
        )
    for button in buttons:
        if any(not 0 <= i < len(lights) for i in button):
            raise ValueError(f"button {button} outside the {len(lights)} lights")
    return Machine(lights=lights, buttons=buttons, joltage=joltage)


def parse(text: str) -> List[Machine]:
    return [parse_line(line) for line in text.splitlines() if line.strip()]


def _total(
    programs: List[BackendSpec], backend: str, threads: int, verbose: bool
) -> int:
    total = 0
    for idx, program in enumerate(programs):
        t0 = time.perf_counter()
        presses = min_presses(program, backend=backend, threads=threads)
        if verbose:
            print(
                f"[day10] machine {idx}: presses={presses} | {backend} {time.perf_counter() - t0:.3f}s"
            )
        total += presses
    return total


def part_1(
    machines: List[Machine],
    backend: str = "cbc",
    threads: int = 1,
    verbose: bool = False,
) -> int:
    return _total([m.lights_program() for m in machines], backend, threads, verbose)


def part_2(
    machines: List[Machine],
    backend: str = "cbc",
    threads: int = 1,
    verbose: bool = False,
) -> int:
    return _total([m.joltage_program() for m in machines], backend, threads, verbose)


def solve(text: str, backend: str = "cbc", threads: int = 1) -> Tuple[int, int]:
    machines = parse(text)
    return (
        part_1(machines, backend=backend, threads=threads),
        part_2(machines, backend=backend, threads=threads),
    )
