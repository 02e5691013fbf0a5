"""
Brute-force checks of the falsification encoding.

Queries are made over complemented assignments: the chain is forced true
under the complement of ``A`` exactly when ``A`` falsifies a clause.
"""
import random

import pytest

from primenum.bool.implicant.encoder import ConjunctiveOracle, FalsificationEncoder
from primenum.bool.implicant.registry import NameRegistry, VarKind
from primenum.bool.sat import create_oracle
from primenum.global_params.config import EnumerationConfig
from primenum.tests.grammar_gene import gen_cnf_numeric_clauses
from primenum.tests.model_validator import all_assignments, clause_satisfied, variables_of
from primenum.utils.types import SolverResult


@pytest.fixture(params=["pysat", "z3"])
def backend(request):
    return request.param


def build(clauses, backend):
    reg = NameRegistry()
    enc = FalsificationEncoder(reg, create_oracle(EnumerationConfig(backend=backend)))
    for clause in clauses:
        enc.add_clause([reg.user_literal(lit) for lit in clause])
    return reg, enc


def complement_assumptions(reg, assignment):
    lits = []
    for v, value in assignment.items():
        internal = reg.user_literal(v)
        lits.append(-internal if value else internal)
    return lits


def test_first_clause_has_no_gate():
    reg, enc = build([[1, -2]], "pysat")
    assert enc.chain == 3
    assert reg.kind_of(enc.chain) is VarKind.CLAUSE
    assert enc.num_clauses == 1


def test_chain_links_allocated_per_clause():
    reg, enc = build([[1], [2], [1, 2]], "pysat")
    kinds = [reg.kind_of(i) for i in range(1, len(reg) + 1)]
    assert kinds.count(VarKind.CLAUSE) == 3
    assert kinds.count(VarKind.CHAIN) == 2
    assert reg.kind_of(enc.chain) is VarKind.CHAIN


def test_encoding_size_independent_of_clause_count():
    small = FalsificationEncoder.encode([1, 2], 10, 8, 11)
    assert len(small) == 3 + 2 + 1
    assert small[:3] == [[-8, 11], [-10, 11], [8, 10, -11]]
    assert small[3:] == [[1, -10], [2, -10], [-1, -2, 10]]
    assert FalsificationEncoder.encode([1, 2], 3, None, 3) == [[1, -3], [2, -3], [-1, -2, 3]]


def test_empty_clause_rejected():
    _, enc = build([], "pysat")
    with pytest.raises(ValueError):
        enc.add_clause([])


@pytest.mark.parametrize("seed", range(8))
def test_chain_iff_some_clause_falsified(seed, backend):
    rng = random.Random(seed)
    clauses = gen_cnf_numeric_clauses(num_vars=4, num_clauses=rng.randint(1, 5), rng=rng)
    reg, enc = build(clauses, backend)
    for assignment in all_assignments(variables_of(clauses)):
        falsified = any(not clause_satisfied(c, assignment) for c in clauses)
        base = complement_assumptions(reg, assignment)
        chain_true = enc.oracle.solve_with_assumptions(base + [enc.chain])
        chain_false = enc.oracle.solve_with_assumptions(base + [-enc.chain])
        assert (chain_true == SolverResult.SAT) == falsified
        assert (chain_false == SolverResult.SAT) == (not falsified)


def test_chain_grows_incrementally(backend):
    clauses = [[1, 2], [-1, 2], [1, -2]]
    reg, enc = build([], backend)
    seen = []
    for clause in clauses:
        enc.add_clause([reg.user_literal(lit) for lit in clause])
        seen.append(clause)
        # 1 = 2 = False falsifies only the first clause
        base = complement_assumptions(reg, {1: False, 2: False})
        assert enc.oracle.solve_with_assumptions(base + [enc.chain]) == SolverResult.SAT
        # 1 = True, 2 = False falsifies only the second
        base = complement_assumptions(reg, {1: True, 2: False})
        expected = SolverResult.SAT if len(seen) >= 2 else SolverResult.UNSAT
        assert enc.oracle.solve_with_assumptions(base + [enc.chain]) == expected


def test_conjunctive_oracle_takes_clauses_verbatim(backend):
    reg = NameRegistry()
    conj = ConjunctiveOracle(reg, create_oracle(EnumerationConfig(backend=backend)))
    conj.add_clause([reg.user_literal(1), reg.user_literal(2)])
    conj.add_clause([reg.user_literal(-1)])
    assert conj.solve() == SolverResult.SAT
    model = conj.current_model()
    assert model[reg.user_literal(1)] is False
    assert model[reg.user_literal(2)] is True
    conj.add_clause([reg.user_literal(-2)])
    assert conj.solve() == SolverResult.UNSAT
