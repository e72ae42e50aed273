"""Run the daily puzzle solutions and print both answers.

Every day lives in its own module (`day01` .. `day12`) exposing `parse`,
`part_1` and `part_2`. The runner reads the input, times each phase and
forwards only the options a day's parts accept:

- `--backend`/`--threads`: integer-programming backend for day 10
  (CBC by default, CP-SAT, or MaxSAT for part 1 only) and CP-SAT threads for day 12.
- `--pairs`: how many closest pairs day 8 part 1 connects (1000 for real
  inputs, 10 for the puzzle example).
- `--time-limit`: seconds CP-SAT may spend per day 12 region.
- `--verbose`: per-phase durations and per-item solver details.

Answers can be written as JSON records (`--answers`, or `--answers-dir` in
`--all` mode, where days with an existing record are skipped to allow resume).

Example commands:
  # One day, default input inputs/day05.txt
  python aoc.py 5
  # Day 10 on CP-SAT with timings
  python aoc.py 10 --input inputs/day10.txt --backend cpsat --threads 4 --verbose
  # Every day with an input file, recording answers
  python aoc.py --all --input-dir inputs --answers-dir answers
"""

from __future__ import annotations

import argparse
import importlib
import inspect
import time
from dataclasses import dataclass, field
from pathlib import Path
from types import ModuleType
from typing import Any, Callable, Dict, List, Optional, Sequence

from answers import answers_path, save_answers
from solver_backends import BACKENDS

DAYS: Dict[int, str] = {day: f"day{day:02d}" for day in range(1, 13)}


@dataclass
class DayResult:
    day: int
    part_1: int
    part_2: int
    timings: Dict[str, float] = field(default_factory=dict)

    @property
    def runtime(self) -> float:
        return sum(self.timings.values())


def load_day(day: int) -> ModuleType:
    if day not in DAYS:
        raise ValueError(f"no solution for day {day}; pick one of {sorted(DAYS)}")
    return importlib.import_module(DAYS[day])


def default_input(input_dir: Path, day: int) -> Path:
    return input_dir / f"{DAYS[day]}.txt"


def accepted_options(func: Callable[..., Any], options: Dict[str, Any]) -> Dict[str, Any]:
    """Subset of options that func takes as keyword arguments (None means unset)."""
    params = inspect.signature(func).parameters
    return {
        name: value
        for name, value in options.items()
        if name in params and value is not None
    }


def format_timings(day: int, timings: Dict[str, float]) -> str:
    parts = [f"[timing] day={day:02d}"]
    parts.extend(f"{phase} {seconds:.3f}s" for phase, seconds in timings.items())
    return " | ".join(parts)


def run_day(day: int, text: str, verbose: bool = False, **options: Any) -> DayResult:
    """Parse once, then compute both parts, timing every phase."""
    module = load_day(day)
    options = dict(options, verbose=verbose)
    timings: Dict[str, float] = {}

    t0 = time.perf_counter()
    parsed = module.parse(text)
    timings["parse"] = time.perf_counter() - t0

    t0 = time.perf_counter()
    part_1 = module.part_1(parsed, **accepted_options(module.part_1, options))
    timings["part 1"] = time.perf_counter() - t0

    t0 = time.perf_counter()
    part_2 = module.part_2(parsed, **accepted_options(module.part_2, options))
    timings["part 2"] = time.perf_counter() - t0

    if verbose:
        print(format_timings(day, timings))
    return DayResult(day=day, part_1=part_1, part_2=part_2, timings=timings)


def run_all(
    input_dir: Path,
    answers_dir: Optional[Path],
    verbose: bool = False,
    **options: Any,
) -> List[DayResult]:
    """Run every day that has an input file, skipping days already recorded."""
    results: List[DayResult] = []
    for day in sorted(DAYS):
        input_path = default_input(input_dir, day)
        if not input_path.exists():
            if verbose:
                print(f"[skip] day={day:02d} | no input at {input_path}")
            continue
        record = answers_path(answers_dir, day) if answers_dir else None
        if record is not None and record.exists():
            print(f"[skip] day={day:02d} | already recorded in {record}")
            continue
        res = run_day(day, input_path.read_text(), verbose=verbose, **options)
        if record is not None:
            save_answers(
                day,
                res.part_1,
                res.part_2,
                record,
                runtime=res.runtime,
                input_path=input_path,
                timings=res.timings,
            )
        saved = f" | saved {record}" if record is not None else ""
        print(
            f"day {day:02d} -> part1 : {res.part_1} | part2 : {res.part_2} | time {res.runtime:.3f}s{saved}"
        )
        results.append(res)
    return results


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Solve a day's puzzle and print part 1 and part 2."
    )
    parser.add_argument("day", type=int, nargs="?", help="Day number (1..12)")
    parser.add_argument(
        "--input", type=Path, help="Puzzle input (default: <input-dir>/dayNN.txt)."
    )
    parser.add_argument(
        "--input-dir",
        type=Path,
        default=Path("inputs"),
        help="Directory holding dayNN.txt inputs.",
    )
    parser.add_argument(
        "--all",
        action="store_true",
        help="Run every day with an input file in --input-dir.",
    )
    parser.add_argument(
        "--backend",
        choices=list(BACKENDS),
        default=None,
        help="Integer-programming backend for day 10 (default cbc; maxsat handles part 1 only).",
    )
    parser.add_argument(
        "--threads", type=int, default=None, help="Number of solver threads"
    )
    parser.add_argument(
        "--pairs",
        type=int,
        default=None,
        help="Closest pairs day 8 part 1 connects (default 1000; the example uses 10).",
    )
    parser.add_argument(
        "--time-limit",
        type=float,
        default=None,
        help="Seconds the day 12 packing model may spend per region.",
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Print timings and solver details."
    )
    parser.add_argument(
        "--answers", type=Path, help="Write a JSON answer record to this path."
    )
    parser.add_argument(
        "--answers-dir",
        type=Path,
        help="Directory for dayNN.json answer records in --all mode.",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    options = dict(
        backend=args.backend,
        threads=args.threads,
        pairs=args.pairs,
        time_limit=args.time_limit,
    )

    try:
        if args.all:
            run_all(args.input_dir, args.answers_dir, verbose=args.verbose, **options)
            return 0

        if args.day is None:
            parser.error("Provide a day or --all.")
        if args.day not in DAYS:
            parser.error(f"no solution for day {args.day}; pick one of 1..{len(DAYS)}")
        input_path = args.input or default_input(args.input_dir, args.day)
        if not input_path.exists():
            parser.error(f"input not found: {input_path}")
        res = run_day(args.day, input_path.read_text(), verbose=args.verbose, **options)
    except (ValueError, RuntimeError) as exc:
        parser.error(str(exc))

    print(f"part1 : {res.part_1}")
    print(f"part2 : {res.part_2}")
    if args.answers:
        save_answers(
            args.day,
            res.part_1,
            res.part_2,
            args.answers,
            runtime=res.runtime,
            input_path=input_path,
            timings=res.timings,
        )
        print(f"wrote answers to {args.answers}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
