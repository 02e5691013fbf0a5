# coding: utf-8
"""
Random CNF generation for tests
"""
import random
from typing import List, Optional


def gen_cnf_numeric_clauses(num_vars: int = 5, num_clauses: Optional[int] = None,
                            max_len: int = 3, rng: Optional[random.Random] = None) -> List[List[int]]:
    """
    Generate a random CNF over variables 1..num_vars as lists of signed ints.
    Clauses have no repeated variable.
    """
    rng = rng or random.Random()
    if num_clauses is None:
        num_clauses = rng.randint(1, 2 * num_vars)
    clauses = []
    for _ in range(num_clauses):
        size = rng.randint(1, min(max_len, num_vars))
        variables = rng.sample(range(1, num_vars + 1), size)
        clauses.append([v if rng.random() < 0.5 else -v for v in variables])
    return clauses
