# coding: utf-8
"""
Prime implicant enumeration over an incrementally growing CNF.
"""
from .registry import NameRegistry, VarKind, VarName
from .encoder import ConjunctiveOracle, FalsificationEncoder
from .reduction import ReductionEngine, ReductionResult
from .enumerator import ImplicantEnumerator, EnumeratorState, RoundResult

__all__ = [
    "NameRegistry",
    "VarKind",
    "VarName",
    "ConjunctiveOracle",
    "FalsificationEncoder",
    "ReductionEngine",
    "ReductionResult",
    "ImplicantEnumerator",
    "EnumeratorState",
    "RoundResult",
]
