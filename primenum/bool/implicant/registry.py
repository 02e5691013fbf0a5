# coding: utf-8
"""
Name registry: dense, append-only numbering of the variables the enumerator
talks to its oracles about.

Three kinds of names share one index space:
  - user variables, named by the caller's (unsigned) integer,
  - clause indicators, one per registered clause,
  - chain links, one per registered clause after the first.
"""
from enum import Enum
import logging
from typing import Dict, Iterator, List, NamedTuple

logger = logging.getLogger(__name__)


class VarKind(Enum):
    """Kinds of registered variables."""

    USER = "user"
    CLAUSE = "clause"
    CHAIN = "chain"


class VarName(NamedTuple):
    """Identity of a registered variable."""

    kind: VarKind
    payload: int

    @classmethod
    def user(cls, external: int) -> "VarName":
        return cls(VarKind.USER, abs(external))

    @classmethod
    def clause(cls, number: int) -> "VarName":
        return cls(VarKind.CLAUSE, number)

    @classmethod
    def chain(cls, number: int) -> "VarName":
        return cls(VarKind.CHAIN, number)


class NameRegistry:
    """Insertion-ordered bijection between names and indices ``1..len(self)``."""

    def __init__(self) -> None:
        self._names: List[VarName] = []
        self._index: Dict[VarName, int] = {}

    def __len__(self) -> int:
        return len(self._names)

    def __contains__(self, name: VarName) -> bool:
        return name in self._index

    def intern(self, name: VarName) -> int:
        """Index of ``name``, allocating the next free one on first request."""
        index = self._index.get(name)
        if index is None:
            self._names.append(name)
            index = len(self._names)
            self._index[name] = index
            logger.debug("Registered %s %d as variable %d", name.kind.value, name.payload, index)
        return index

    def name_of(self, index: int) -> VarName:
        if index < 1 or index > len(self._names):
            raise KeyError(f"variable {index} is not registered")
        return self._names[index - 1]

    def kind_of(self, index: int) -> VarKind:
        return self.name_of(index).kind

    def user_literal(self, external: int) -> int:
        """Internal literal for the caller's signed literal ``external``."""
        if external == 0:
            raise ValueError("0 is not a literal")
        index = self.intern(VarName.user(external))
        return index if external > 0 else -index

    def external_name(self, index: int, value: bool) -> int:
        """The caller's signed literal for user variable ``index`` taking ``value``."""
        name = self.name_of(index)
        if name.kind is not VarKind.USER:
            raise ValueError(f"variable {index} is a {name.kind.value} variable, not a user variable")
        return name.payload if value else -name.payload

    def user_variables(self) -> Iterator[int]:
        """Indices of user variables in registration order."""
        for index, name in enumerate(self._names, 1):
            if name.kind is VarKind.USER:
                yield index
