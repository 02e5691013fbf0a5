# coding: utf-8
"""
Enumeration of irreducible implicants over a growing clause set.

Clauses arrive one at a time. On every solve request the enumerator asks
the conjunctive oracle for a full model, shrinks it against the
falsification oracle, reports both, and blocks the reduced model so that
no later model extends it.
"""
from dataclasses import dataclass, field
from enum import Enum
import logging
from typing import Iterable, Iterator, List, Optional, Sequence

from primenum.bool.implicant.encoder import ConjunctiveOracle, FalsificationEncoder
from primenum.bool.implicant.reduction import ReductionEngine
from primenum.bool.implicant.registry import NameRegistry
from primenum.bool.sat import create_oracle
from primenum.bool.sat.oracle import SATOracle
from primenum.global_params.config import EnumerationConfig
from primenum.utils.exceptions import EnumerationHaltedError, OracleContractError
from primenum.utils.types import SolverResult

logger = logging.getLogger(__name__)


class EnumeratorState(Enum):
    """States of the enumeration driver."""

    ACCEPTING_CLAUSES = "accepting-clauses"
    HALTED_UNSAT = "halted-unsat"


@dataclass
class RoundResult:
    """Report of one solve request.

    ``full_model``, ``reduced_model`` and ``blocking_clause`` use the
    caller's signed variable names.
    """

    status: SolverResult
    full_model: List[int] = field(default_factory=list)
    reduced_model: Optional[List[int]] = None
    blocking_clause: Optional[List[int]] = None
    nothing_to_reduce: bool = False
    oracle_calls: int = 0


class ImplicantEnumerator:
    """Drives the two oracles through add/solve rounds."""

    def __init__(self, config: Optional[EnumerationConfig] = None,
                 conj_oracle: Optional[SATOracle] = None,
                 neg_oracle: Optional[SATOracle] = None) -> None:
        self.config = config or EnumerationConfig()
        self.registry = NameRegistry()
        self.conjunction = ConjunctiveOracle(self.registry, conj_oracle or create_oracle(self.config))
        self.encoder = FalsificationEncoder(self.registry, neg_oracle or create_oracle(self.config))
        self.reducer = ReductionEngine(self.encoder.oracle)
        self.state = EnumeratorState.ACCEPTING_CLAUSES
        self.rounds: int = 0
        # set once an empty implicant has been blocked, i.e. nothing is left
        self._exhausted = False

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()

    def close(self) -> None:
        self.conjunction.oracle.delete()
        self.encoder.oracle.delete()

    def _check_accepting(self) -> None:
        if self.state is EnumeratorState.HALTED_UNSAT:
            raise EnumerationHaltedError("no model exists, enumeration has halted")

    def add_clause(self, external_literals: Sequence[int]) -> None:
        """Register a non-empty clause given as the caller's signed literals."""
        self._check_accepting()
        if not external_literals:
            raise ValueError("the empty clause is the solve request, use solve()")
        self._commit([self.registry.user_literal(lit) for lit in external_literals])

    def _commit(self, literals: List[int]) -> None:
        self.conjunction.add_clause(literals)
        self.encoder.add_clause(literals)

    def feed(self, clause: Sequence[int]) -> Optional[RoundResult]:
        """Add ``clause``, or solve if it is empty."""
        if not clause:
            return self.solve()
        self.add_clause(clause)
        return None

    def run(self, clauses: Iterable[Sequence[int]]) -> Iterator[RoundResult]:
        """Feed clauses in order, yielding a result per solve request until unsat."""
        for clause in clauses:
            result = self.feed(clause)
            if result is None:
                continue
            yield result
            if result.status == SolverResult.UNSAT:
                break

    def solve(self) -> RoundResult:
        """Run one enumeration round."""
        self._check_accepting()
        self.rounds += 1

        status = SolverResult.UNSAT if self._exhausted else self.conjunction.solve()
        if status == SolverResult.UNSAT:
            logger.info("Round %d: unsat", self.rounds)
            self.state = EnumeratorState.HALTED_UNSAT
            return RoundResult(status)
        if status != SolverResult.SAT:
            raise OracleContractError(f"conjunctive oracle answered {status.name}")

        model = self.conjunction.current_model()
        users = list(self.registry.user_variables())
        result = RoundResult(status, [self.registry.external_name(v, model[v]) for v in users])

        chain = self.encoder.chain
        if chain is None:
            logger.info("Round %d: no clauses to reduce", self.rounds)
            result.nothing_to_reduce = True
            return result

        # literals the model makes false
        falsified = [-v if model[v] else v for v in users]
        reduction = self.reducer.reduce(falsified, chain)
        essential = reduction.essential
        result.oracle_calls = reduction.oracle_calls
        result.reduced_model = [self.registry.external_name(abs(lit), model[abs(lit)])
                                for lit in essential]
        result.blocking_clause = [-lit for lit in result.reduced_model]

        if essential:
            self._commit(essential)
        else:
            # every assignment satisfies the formula and has now been blocked
            self._exhausted = True
        logger.info("Round %d: reduced %d literals to %d",
                    self.rounds, len(users), len(essential))
        return result
