# coding: utf-8
"""
Common result types
"""
from enum import Enum


class SolverResult(Enum):
    """Answer of a satisfiability oracle."""

    SAT = 0
    UNSAT = 1
    UNKNOWN = 2
    ERROR = 3
