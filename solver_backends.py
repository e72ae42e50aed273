"""Backend abstraction for button-press programs: CBC, CP-SAT, and MaxSAT."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Protocol

try:
    from ortools.linear_solver import pywraplp
except ImportError as exc:  # pragma: no cover - import guard
    pywraplp = None  # type: ignore[assignment]
    _ORTOOLS_LINEAR_ERROR = exc
else:  # pragma: no cover - import guard
    _ORTOOLS_LINEAR_ERROR = None

try:
    from ortools.sat.python import cp_model
except ImportError as exc:  # pragma: no cover - import guard
    cp_model = None  # type: ignore[assignment]
    _ORTOOLS_CP_ERROR = exc
else:  # pragma: no cover - import guard
    _ORTOOLS_CP_ERROR = None

try:
    from pysat.examples.rc2 import RC2
    from pysat.formula import WCNF
except ImportError as exc:  # pragma: no cover - import guard
    RC2 = None  # type: ignore[assignment]
    WCNF = None  # type: ignore[assignment]
    _PYSAT_ERROR = exc
else:  # pragma: no cover - import guard
    _PYSAT_ERROR = None


ORTOOLS_LINEAR_AVAILABLE = pywraplp is not None
CPSAT_AVAILABLE = cp_model is not None
MAXSAT_AVAILABLE = RC2 is not None and WCNF is not None

BACKENDS = ("cbc", "cpsat", "maxsat")


class BackendNotAvailable(RuntimeError):
    """Raised when the requested backend is missing a dependency or unavailable."""


@dataclass
class BackendSpec:
    """One button-press program.

    buttons[j] lists the counters button j touches. With parity=True every
    target is 0/1 and a counter only has to reach the target modulo 2, each
    button being pressed at most once; otherwise counters must equal targets
    exactly and presses are unbounded non-negative integers.
    """

    buttons: List[List[int]]
    targets: List[int]
    parity: bool

    def touching(self, counter: int) -> List[int]:
        return [j for j, button in enumerate(self.buttons) if counter in button]


class BackendSession(Protocol):
    def solve(self) -> List[int]:
        """Solve the program and return the press count of each button."""

    def close(self) -> None:
        """Release resources (optional)."""


def _require_ortools_linear() -> None:
    if pywraplp is None:
        raise BackendNotAvailable(
            "CBC backend requires ortools; install with `pip install ortools`."
        ) from _ORTOOLS_LINEAR_ERROR


def require_cpsat() -> None:
    if cp_model is None:
        raise BackendNotAvailable(
            "CP-SAT backend requires ortools; install with `pip install ortools`."
        ) from _ORTOOLS_CP_ERROR


def _require_pysat() -> None:
    if not MAXSAT_AVAILABLE:
        raise BackendNotAvailable(
            "MaxSAT backend requires python-sat; install with `pip install python-sat`."
        ) from _PYSAT_ERROR


class CBCBackendSession:
    def __init__(self, spec: BackendSpec, threads: int):
        _require_ortools_linear()
        solver = pywraplp.Solver.CreateSolver("CBC")
        if solver is None:
            raise BackendNotAvailable("CBC solver unavailable")
        solver.SetNumThreads(threads)

        self._spec = spec
        self._solver = solver
        upper = 1 if spec.parity else solver.infinity()
        self._x: Dict[int, pywraplp.Variable] = {
            j: solver.IntVar(0, upper, f"x_{j}") for j in range(len(spec.buttons))
        }

        for counter, target in enumerate(spec.targets):
            touching = spec.touching(counter)
            if not touching:
                if target:
                    raise RuntimeError(f"no button reaches counter {counter}")
                continue
            total = solver.Sum([self._x[j] for j in touching])
            if spec.parity:
                # Sum of toggles = 2 * half + target keeps only the parity.
                half = solver.IntVar(0, solver.infinity(), f"h_{counter}")
                solver.Add(total == 2 * half + target)
            else:
                solver.Add(total == target)

        solver.Minimize(solver.Sum(self._x.values()))

    def solve(self) -> List[int]:
        status = self._solver.Solve()
        if status != pywraplp.Solver.OPTIMAL:
            raise RuntimeError(f"CBC failed with status {status}")
        return [
            int(round(self._x[j].solution_value())) for j in range(len(self._x))
        ]

    def close(self) -> None:
        return


class CPSATBackendSession:
    def __init__(self, spec: BackendSpec, threads: int):
        require_cpsat()
        self._spec = spec
        self._threads = threads

    def _build_model(self) -> tuple[cp_model.CpModel, Dict[int, cp_model.IntVar]]:
        spec = self._spec
        model = cp_model.CpModel()
        # No button is ever worth pressing more often than the largest target.
        upper = 1 if spec.parity else max(spec.targets, default=0)
        x: Dict[int, cp_model.IntVar] = {
            j: model.NewIntVar(0, upper, f"x_{j}") for j in range(len(spec.buttons))
        }
        for counter, target in enumerate(spec.targets):
            touching = spec.touching(counter)
            if not touching:
                if target:
                    raise RuntimeError(f"no button reaches counter {counter}")
                continue
            total = sum(x[j] for j in touching)
            if spec.parity:
                half = model.NewIntVar(0, len(touching), f"h_{counter}")
                model.Add(total == 2 * half + target)
            else:
                model.Add(total == target)

        model.Minimize(sum(x.values()))
        return model, x

    def solve(self) -> List[int]:
        model, x = self._build_model()
        solver = cp_model.CpSolver()
        solver.parameters.num_search_workers = self._threads
        status = solver.Solve(model)
        if status != cp_model.OPTIMAL:
            raise RuntimeError(f"CP-SAT failed with status {status}")
        return [solver.Value(x[j]) for j in range(len(x))]

    def close(self) -> None:
        return


class MaxSATBackendSession:
    def __init__(self, spec: BackendSpec, threads: int):
        _require_pysat()
        if not spec.parity:
            raise ValueError("MaxSAT backend only handles parity (on/off) programs")
        self._spec = spec
        self._threads = threads

    def _build_wcnf(self) -> WCNF:
        wcnf = WCNF()
        spec = self._spec
        # Button j is variable j + 1; xor chain auxiliaries follow.
        next_var = len(spec.buttons) + 1
        for counter, target in enumerate(spec.targets):
            literals = [j + 1 for j in spec.touching(counter)]
            if not literals:
                if target:
                    raise RuntimeError(f"no button toggles light {counter}")
                continue
            acc = literals[0]
            for lit in literals[1:]:
                # Tseitin: t <-> acc xor lit
                t = next_var
                next_var += 1
                wcnf.append([-t, acc, lit])
                wcnf.append([-t, -acc, -lit])
                wcnf.append([t, -acc, lit])
                wcnf.append([t, acc, -lit])
                acc = t
            wcnf.append([acc] if target else [-acc])

        # Soft objective: reward each button staying unpressed.
        for j in range(len(spec.buttons)):
            wcnf.append([-(j + 1)], weight=1)
        return wcnf

    def solve(self) -> List[int]:
        wcnf = self._build_wcnf()
        solver = RC2(wcnf)
        model = solver.compute()
        solver.delete()
        if model is None:
            raise RuntimeError("MaxSAT solver returned UNSAT/None")
        pressed = {lit for lit in model if lit > 0}
        return [1 if j + 1 in pressed else 0 for j in range(len(self._spec.buttons))]

    def close(self) -> None:
        return


def create_backend_session(
    name: str, spec: BackendSpec, threads: int
) -> BackendSession:
    name = name.lower()
    if name == "cbc":
        return CBCBackendSession(spec, threads)
    if name in ("cpsat", "cp-sat", "cp_sat"):
        return CPSATBackendSession(spec, threads)
    if name == "maxsat":
        return MaxSATBackendSession(spec, threads)
    raise ValueError(f"Unknown backend {name}")


def min_presses(spec: BackendSpec, backend: str = "cbc", threads: int = 1) -> int:
    """Minimum total number of presses solving the program."""
    session = create_backend_session(backend, spec, threads)
    try:
        return sum(session.solve())
    finally:
        session.close()
