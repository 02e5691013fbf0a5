# coding: utf-8
"""
Line protocol of the enumerator.

Each line holds whitespace separated signed integers; a ``0`` ends the
clause and anything after it is ignored. A line without literals asks for
a solve round. Lines whose first token is ``c`` are comments.
"""
import re
from typing import Iterable, Iterator, List, Optional

from primenum.bool.implicant.enumerator import RoundResult
from primenum.utils.exceptions import MalformedInputError
from primenum.utils.types import SolverResult

LITERAL_RE = re.compile(r"[+-]?[0-9]+", re.ASCII)


def parse_clause_line(line: str, line_number: int = 0) -> Optional[List[int]]:
    """
    Parse one input line.

    Returns the clause's literals (empty for a solve request), or None for
    a comment line.
    """
    tokens = line.split()
    if tokens and tokens[0] == "c":
        return None
    clause = []
    for token in tokens:
        if not LITERAL_RE.fullmatch(token):
            raise MalformedInputError(line_number, token)
        lit = int(token)
        if lit == 0:
            break
        clause.append(lit)
    return clause


def iter_clauses(lines: Iterable[str]) -> Iterator[List[int]]:
    """Parse a stream lazily, so nothing is read past an unsat round."""
    for line_number, line in enumerate(lines, 1):
        clause = parse_clause_line(line, line_number)
        if clause is not None:
            yield clause


def format_literals(literals: Iterable[int]) -> str:
    return " ".join(str(lit) for lit in literals)


def format_round(result: RoundResult) -> List[str]:
    """Output lines describing one round."""
    if result.status == SolverResult.UNSAT:
        return ["unsat"]
    lines = [f"full model: {format_literals(result.full_model)}"]
    if result.nothing_to_reduce:
        lines.append("no clauses")
    elif result.reduced_model is not None:
        lines.append(f"reduced model: {format_literals(result.reduced_model)}")
        lines.append("blocking reduced model")
    return lines
