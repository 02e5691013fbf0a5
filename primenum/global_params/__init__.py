"""Global parameters module for primenum.

This module provides the run configuration shared by the CLI and the enumerator.
"""
from .config import EnumerationConfig, ORACLE_BACKENDS, DEFAULT_BACKEND, DEFAULT_SOLVER

__all__ = ["EnumerationConfig", "ORACLE_BACKENDS", "DEFAULT_BACKEND", "DEFAULT_SOLVER"]
