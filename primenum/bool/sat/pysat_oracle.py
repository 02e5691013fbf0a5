# coding: utf-8
"""
SAT oracle backed by one of the solvers bundled with pysat.
"""
import logging
from typing import Dict, List

from pysat.solvers import Solver

from primenum.bool.sat.oracle import SATOracle
from primenum.utils.types import SolverResult

logger = logging.getLogger(__name__)


class PySATOracle(SATOracle):
    """Incremental oracle over ``pysat.solvers.Solver``."""

    def __init__(self, solver_name: str = "cadical195") -> None:
        super().__init__()
        self.solver_name = solver_name
        self.solver = Solver(name=solver_name)

    def delete(self) -> None:
        if self.solver:
            self.solver.delete()
            self.solver = None

    def _declare(self, first: int, last: int) -> None:
        # pysat solvers grow on demand; unseen variables are reported as false
        pass

    def _add_clause(self, literals: List[int]) -> None:
        self.solver.add_clause(literals)

    def _solve(self, assumptions: List[int]) -> SolverResult:
        res = self.solver.solve(assumptions=assumptions)
        if res is True:
            return SolverResult.SAT
        if res is False:
            return SolverResult.UNSAT
        logger.warning("%s returned no answer", self.solver_name)
        return SolverResult.UNKNOWN

    def _model(self) -> Dict[int, bool]:
        model = {var: False for var in range(1, self.nvars + 1)}
        for lit in self.solver.get_model() or []:
            if abs(lit) <= self.nvars:
                model[abs(lit)] = lit > 0
        return model

    def _core(self) -> List[int]:
        return list(self.solver.get_core() or [])
