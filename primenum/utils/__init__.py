# coding: utf-8
"""Shared helpers: result types and exceptions."""
from .types import SolverResult
from .exceptions import (
    PrimEnumException,
    MalformedInputError,
    OracleContractError,
    ConfigurationError,
    EnumerationHaltedError,
)

__all__ = [
    "SolverResult",
    "PrimEnumException",
    "MalformedInputError",
    "OracleContractError",
    "ConfigurationError",
    "EnumerationHaltedError",
]
