"""
primenum: enumeration of prime implicants over an incrementally growing CNF.

The heavy lifting lives in :mod:`primenum.bool.implicant`; SAT oracles are in
:mod:`primenum.bool.sat`.
"""
import os

from .bool.implicant import ImplicantEnumerator, RoundResult  # noqa: F401

# Debug flag - can be set via environment variable PRIMENUM_DEBUG
PRIMENUM_DEBUG = os.environ.get("PRIMENUM_DEBUG", "False").lower() in ("true", "1", "yes")

__all__ = ["ImplicantEnumerator", "RoundResult", "PRIMENUM_DEBUG"]
