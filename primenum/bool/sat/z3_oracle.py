# coding: utf-8
"""
SAT oracle backed by Z3's finite-domain engine.

Integer variable ``v`` is represented by the Boolean constant ``k!v``.
"""
from typing import Dict, List

import z3

from primenum.bool.sat.oracle import SATOracle
from primenum.utils.types import SolverResult


def get_id(x: z3.ExprRef) -> int:
    """Get unique integer identifier for a Z3 AST."""
    return z3.Z3_get_ast_id(x.ctx.ref(), x.as_ast())


class Z3Oracle(SATOracle):
    """Incremental oracle over ``z3.SolverFor("QF_FD")``."""

    def __init__(self, logic: str = "QF_FD") -> None:
        super().__init__()
        self.solver = z3.SolverFor(logic)
        self.int2z3var: Dict[int, z3.BoolRef] = {}
        # AST id of an assumption literal -> integer literal
        self.idcache: Dict[int, int] = {}

    def delete(self) -> None:
        self.solver = None

    def _declare(self, first: int, last: int) -> None:
        for var in range(first, last + 1):
            self.int2z3var[var] = z3.Bool(f"k!{var}")

    def to_z3(self, lit: int) -> z3.BoolRef:
        b = self.int2z3var[abs(lit)]
        return z3.Not(b) if lit < 0 else b

    def _add_clause(self, literals: List[int]) -> None:
        self.solver.add(z3.Or(*[self.to_z3(lit) for lit in literals]))

    def _solve(self, assumptions: List[int]) -> SolverResult:
        z3_assumptions = []
        for lit in assumptions:
            expr = self.to_z3(lit)
            self.idcache[get_id(expr)] = lit
            z3_assumptions.append(expr)
        res = self.solver.check(z3_assumptions)
        if res == z3.sat:
            return SolverResult.SAT
        if res == z3.unsat:
            return SolverResult.UNSAT
        return SolverResult.UNKNOWN

    def _model(self) -> Dict[int, bool]:
        m = self.solver.model()
        return {var: z3.is_true(m.eval(b, model_completion=True))
                for var, b in self.int2z3var.items()}

    def _core(self) -> List[int]:
        return [self.idcache[get_id(x)] for x in self.solver.unsat_core()]
