# coding: utf-8
"""
SAT oracles used by the implicant enumerator.
  - PySATOracle (default)
  - Z3Oracle
"""
from typing import Optional

from primenum.global_params.config import EnumerationConfig
from .oracle import SATOracle
from .pysat_oracle import PySATOracle
from .z3_oracle import Z3Oracle


def create_oracle(config: Optional[EnumerationConfig] = None) -> SATOracle:
    """Create a fresh, independent oracle instance for the configured backend."""
    config = config or EnumerationConfig()
    if config.backend == "z3":
        return Z3Oracle()
    return PySATOracle(config.solver_name)


__all__ = ["SATOracle", "PySATOracle", "Z3Oracle", "create_oracle"]
