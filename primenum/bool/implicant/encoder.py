# coding: utf-8
"""
The two clause sinks of the enumerator.

``ConjunctiveOracle`` keeps the formula itself: every clause goes in verbatim
and the oracle hands out full models.

``FalsificationEncoder`` keeps, in a second oracle, an incrementally grown
Tseitin encoding of "some registered clause is falsified". Each clause ``C``
gets an indicator ``I_C`` constrained by

    (l_i | -I_C)   for every literal l_i of C
    (-l_1 | ... | -l_n | I_C)

so ``I_C`` holds exactly when every literal of ``C`` is true. Queries against
this oracle are phrased over complemented assignments: an assignment ``A``
falsifies ``C`` iff ``I_C`` is forced under the literal-wise complement of
``A``. The indicators are OR-ed together through a chain of binary gates

    N_k <-> N_{k-1} | I_k

so adding a clause costs a constant number of gate clauses, whatever the
number of clauses before it.
"""
import logging
from typing import Dict, List, Optional, Sequence

from primenum.bool.implicant.registry import NameRegistry, VarName
from primenum.bool.sat.oracle import SATOracle
from primenum.utils.types import SolverResult

logger = logging.getLogger(__name__)


class ConjunctiveOracle:
    """Adapter feeding the formula, clause by clause, to its own oracle."""

    def __init__(self, registry: NameRegistry, oracle: SATOracle) -> None:
        self.registry = registry
        self.oracle = oracle

    def add_clause(self, literals: Sequence[int]) -> None:
        self.oracle.declare_variables(len(self.registry))
        self.oracle.add_clause(literals)

    def solve(self) -> SolverResult:
        self.oracle.declare_variables(len(self.registry))
        return self.oracle.solve()

    def current_model(self) -> Dict[int, bool]:
        return self.oracle.current_model()


class FalsificationEncoder:
    """Incremental encoding of the disjunction of clause indicators."""

    def __init__(self, registry: NameRegistry, oracle: SATOracle) -> None:
        self.registry = registry
        self.oracle = oracle
        self.num_clauses: int = 0
        self.chain: Optional[int] = None

    def add_clause(self, literals: Sequence[int]) -> int:
        """Encode a non-empty clause of internal literals; returns its indicator."""
        if not literals:
            raise ValueError("the empty clause cannot be encoded")
        self.num_clauses += 1
        number = self.num_clauses
        indicator = self.registry.intern(VarName.clause(number))

        prev_chain, next_chain = self.chain, indicator
        if prev_chain is not None:
            next_chain = self.registry.intern(VarName.chain(number))

        self.oracle.declare_variables(len(self.registry))
        for clause in self.encode(literals, indicator, prev_chain, next_chain):
            self.oracle.add_clause(clause)
        self.chain = next_chain

        logger.debug("Encoded clause %d (%d literals), chain is now %d",
                     number, len(literals), self.chain)
        return indicator

    @staticmethod
    def encode(literals: Sequence[int], indicator: int,
               prev_chain: Optional[int], next_chain: int) -> List[List[int]]:
        """
        Clauses tying ``indicator`` to ``literals`` and, unless this is the
        first clause, ``next_chain`` to ``prev_chain | indicator``.
        """
        clauses = []
        if prev_chain is not None:
            clauses.append([-prev_chain, next_chain])
            clauses.append([-indicator, next_chain])
            clauses.append([prev_chain, indicator, -next_chain])
        clauses.extend([lit, -indicator] for lit in literals)
        clauses.append([-lit for lit in literals] + [indicator])
        return clauses
