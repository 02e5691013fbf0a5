"""
Base class for incremental SAT oracles.

An oracle accepts clauses permanently, answers satisfiability queries with
or without temporary assumptions, and explains its answers with a model
(after SAT) or a subset of failed assumptions (after UNSAT). Literals are
non-zero signed integers in the DIMACS convention.
"""

from abc import ABC, abstractmethod
import time
from typing import Dict, List, Optional, Sequence

from primenum.utils.exceptions import OracleContractError
from primenum.utils.types import SolverResult


class SATOracle(ABC):
    """
    Abstract base class for SAT oracles.

    Subclasses implement the ``_``-prefixed hooks; this class keeps track of
    the last answer so that ``current_model`` and ``failed_assumptions`` are
    only served when the preceding call makes them meaningful.
    """

    def __init__(self) -> None:
        self.nvars: int = 0
        self.calls: int = 0
        self._time: float = 0.0
        self._last: Optional[SolverResult] = None
        self._last_assumptions: Optional[List[int]] = None

    def declare_variables(self, up_to: int) -> None:
        """Make sure variables ``1..up_to`` exist. Idempotent."""
        if up_to > self.nvars:
            self._declare(self.nvars + 1, up_to)
            self.nvars = up_to

    def add_clause(self, literals: Sequence[int]) -> None:
        """Permanently conjoin a clause."""
        lits = list(literals)
        self.declare_variables(max((abs(lit) for lit in lits), default=0))
        self._add_clause(lits)
        self._last = None

    def solve(self) -> SolverResult:
        """Decide the conjunction of all clauses added so far."""
        return self._timed(None)

    def solve_with_assumptions(self, assumptions: Sequence[int]) -> SolverResult:
        """Like :meth:`solve`, additionally requiring every assumption to hold."""
        return self._timed(list(assumptions))

    def current_model(self) -> Dict[int, bool]:
        """Assignment of every declared variable; valid right after SAT."""
        if self._last is not SolverResult.SAT:
            raise OracleContractError("model requested without a preceding SAT answer")
        return self._model()

    def failed_assumptions(self) -> List[int]:
        """
        Subset of the last assumptions that is unsatisfiable on its own,
        in assumption order; valid right after UNSAT under assumptions.
        """
        if self._last is not SolverResult.UNSAT or self._last_assumptions is None:
            raise OracleContractError(
                "core requested without a preceding UNSAT answer under assumptions"
            )
        core = set(self._core())
        return [lit for lit in self._last_assumptions if lit in core]

    def time_accum(self) -> float:
        """Total wall time spent inside the backend's solve calls."""
        return self._time

    def _timed(self, assumptions: Optional[List[int]]) -> SolverResult:
        if assumptions:
            self.declare_variables(max(abs(lit) for lit in assumptions))
        start = time.perf_counter()
        result = self._solve(assumptions or [])
        self._time += time.perf_counter() - start
        self.calls += 1
        self._last = result
        self._last_assumptions = assumptions
        return result

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.delete()

    @abstractmethod
    def delete(self) -> None:
        """Release the backend."""

    @abstractmethod
    def _declare(self, first: int, last: int) -> None:
        """Allocate variables ``first..last``."""

    @abstractmethod
    def _add_clause(self, literals: List[int]) -> None:
        """Hand a clause to the backend."""

    @abstractmethod
    def _solve(self, assumptions: List[int]) -> SolverResult:
        """Run the backend, with an empty list meaning no assumptions."""

    @abstractmethod
    def _model(self) -> Dict[int, bool]:
        """Read the backend's model for variables ``1..nvars``."""

    @abstractmethod
    def _core(self) -> List[int]:
        """Read the backend's failed assumptions."""
