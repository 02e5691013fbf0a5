"""Run configuration for the implicant enumerator.

Selects which SAT backend answers the oracle queries. Values come from the
defaults below, then from the environment (``PRIMENUM_BACKEND``,
``PRIMENUM_SOLVER``), then from explicit arguments such as CLI flags.
"""
from dataclasses import dataclass
import logging
import os
from typing import Optional, Set

from pysat.solvers import SolverNames

from primenum.utils.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

ORACLE_BACKENDS = ("pysat", "z3")
DEFAULT_BACKEND = "pysat"
DEFAULT_SOLVER = "cadical195"


def known_pysat_names() -> Set[str]:
    """All solver names and aliases pysat accepts."""
    names = set()
    for attr, aliases in vars(SolverNames).items():
        if attr.startswith("_") or not isinstance(aliases, (list, tuple)):
            continue
        names.update(aliases)
    return names


@dataclass
class EnumerationConfig:
    """Configuration of one enumeration run.

    Attributes:
        backend: Oracle backend, one of ``ORACLE_BACKENDS``.
        solver_name: pysat solver name (ignored by the z3 backend).
        report_stats: Whether the CLI prints oracle statistics.
    """

    backend: str = DEFAULT_BACKEND
    solver_name: str = DEFAULT_SOLVER
    report_stats: bool = False

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """Reject unknown backends and pysat solver names."""
        if self.backend not in ORACLE_BACKENDS:
            raise ConfigurationError(
                f"unknown oracle backend {self.backend!r}, "
                f"expected one of {', '.join(ORACLE_BACKENDS)}"
            )
        if self.backend == "pysat" and self.solver_name not in known_pysat_names():
            raise ConfigurationError(f"unknown pysat solver {self.solver_name!r}")

    @classmethod
    def from_env(cls, backend: Optional[str] = None,
                 solver_name: Optional[str] = None,
                 report_stats: bool = False) -> "EnumerationConfig":
        """Build a configuration, explicit arguments taking precedence over the environment."""
        backend = backend or os.environ.get("PRIMENUM_BACKEND", DEFAULT_BACKEND)
        solver_name = solver_name or os.environ.get("PRIMENUM_SOLVER", DEFAULT_SOLVER)
        logger.debug("Configuration: backend=%s, solver=%s", backend, solver_name)
        return cls(backend=backend, solver_name=solver_name, report_stats=report_stats)
