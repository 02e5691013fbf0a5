import pytest

from primenum.bool.implicant.enumerator import RoundResult
from primenum.bool.implicant.protocol import (
    format_literals,
    format_round,
    iter_clauses,
    parse_clause_line,
)
from primenum.utils.exceptions import MalformedInputError
from primenum.utils.types import SolverResult


def test_parse_clause_line():
    assert parse_clause_line("1 -2 3 0") == [1, -2, 3]
    assert parse_clause_line("  4\t-5  0\n") == [4, -5]
    # the terminator is optional
    assert parse_clause_line("7 8") == [7, 8]
    # everything after the terminator is ignored, even garbage
    assert parse_clause_line("1 0 2 x") == [1]


def test_solve_requests():
    assert parse_clause_line("") == []
    assert parse_clause_line("   \n") == []
    assert parse_clause_line("0") == []


def test_comments_are_skipped():
    assert parse_clause_line("c a comment 1 2 0") is None
    assert list(iter_clauses(["c header", "1 0", "", "c", "-1 0"])) == [[1], [], [-1]]


def test_malformed_token():
    with pytest.raises(MalformedInputError) as info:
        list(iter_clauses(["1 0", "2 x 0"]))
    assert info.value.line_number == 2
    assert info.value.token == "x"


def test_iter_clauses_is_lazy():
    clauses = iter_clauses(["1 0", "oops"])
    assert next(clauses) == [1]


def test_format_round():
    assert format_literals([1, -2]) == "1 -2"
    assert format_round(RoundResult(SolverResult.UNSAT)) == ["unsat"]
    assert format_round(RoundResult(SolverResult.SAT, [], nothing_to_reduce=True)) == [
        "full model: ",
        "no clauses",
    ]
    res = RoundResult(SolverResult.SAT, [1, -2], reduced_model=[1], blocking_clause=[-1])
    assert format_round(res) == [
        "full model: 1 -2",
        "reduced model: 1",
        "blocking reduced model",
    ]


@pytest.mark.parametrize("token", ["1_0", "\u0661", "1.0", "--1", "0x1", "+"])
def test_only_plain_integers_are_literals(token):
    with pytest.raises(MalformedInputError) as info:
        parse_clause_line(f"{token} 2 0", 5)
    assert info.value.token == token
    assert info.value.line_number == 5


def test_signed_literals():
    assert parse_clause_line("+3 -04 0") == [3, -4]


def test_only_bare_c_starts_a_comment():
    assert parse_clause_line("c") is None
    with pytest.raises(MalformedInputError):
        parse_clause_line("cat 1 0")
    with pytest.raises(MalformedInputError):
        parse_clause_line("c1 0")
