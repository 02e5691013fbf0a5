# coding: utf-8
"""
Shrinking a full model to an irreducible implicant.

The procedure is a deletion-based search in the spirit of MUS extraction
(see MUSX), run against the falsification oracle of
:mod:`primenum.bool.implicant.encoder`. Its assumptions are the
*complemented* model literals, so that ``chain`` together with a set of
complemented literals ``E`` is unsatisfiable exactly when the model
literals behind ``E`` force every clause to hold.

.. code-block:: python

    essential = {chain}
    candidates = complemented model literals

    while candidates:
        candidate = candidates.pop()
        trial = candidates + essential
        if oracle.solve(assumptions=trial):
            essential.add(candidate)
        else:
            candidates = [lit for lit in oracle.core() if lit not in essential]

    return essential - {chain}

Without ``candidate`` some clause can be falsified, so ``candidate`` is
kept. Otherwise the failed assumptions are a smaller, still sufficient set
of candidates and the search restarts from them. Every iteration takes one
literal off the candidates for good, so the number of oracle calls is
bounded by the number of model literals.
"""
from dataclasses import dataclass
import logging
from typing import List, Sequence

from primenum.bool.sat.oracle import SATOracle
from primenum.utils.exceptions import OracleContractError
from primenum.utils.types import SolverResult

logger = logging.getLogger(__name__)


@dataclass
class ReductionResult:
    """Outcome of one reduction.

    Attributes:
        essential: Complemented model literals that must stay fixed,
            ordered by variable.
        oracle_calls: Number of oracle queries issued.
    """

    essential: List[int]
    oracle_calls: int = 0


class ReductionEngine:
    """Deletion-based implicant reduction with core-directed restarts."""

    def __init__(self, oracle: SATOracle) -> None:
        self.oracle = oracle

    def reduce(self, falsified: Sequence[int], chain: int) -> ReductionResult:
        """
        Find an irreducible subset of ``falsified`` that, together with
        ``chain``, leaves the oracle unsatisfiable.

        :param falsified: for each user variable in registry order, the
            literal the model makes false
        :param chain: literal standing for "some clause is falsified"
        """
        essential = {chain}
        candidates = list(falsified)
        calls = 0

        while candidates:
            candidate = candidates.pop()
            logger.debug("solving... %d/%d", len(essential) - 1,
                         len(essential) - 1 + len(candidates))
            trial = candidates + sorted(essential, key=abs)
            res = self.oracle.solve_with_assumptions(trial)
            calls += 1
            if res == SolverResult.SAT:
                # without the candidate a clause can be falsified
                essential.add(candidate)
            elif res == SolverResult.UNSAT:
                candidates = [lit for lit in self.oracle.failed_assumptions()
                              if lit not in essential]
            else:
                raise OracleContractError(f"oracle answered {res.name} during reduction")

        essential.discard(chain)
        logger.debug("Reduced %d literals to %d with %d oracle calls",
                     len(falsified), len(essential), calls)
        return ReductionResult(sorted(essential, key=abs), calls)
