# coding: utf-8
"""
Public subclasses of different Exceptions
"""


class PrimEnumException(Exception):
    """Base class for primenum exceptions"""

    pass


class MalformedInputError(PrimEnumException):
    """A token of the clause stream is not an integer."""

    def __init__(self, line_number: int, token: str):
        self.line_number = line_number
        self.token = token
        super().__init__(f"line {line_number}: invalid literal {token!r}")


class OracleContractError(PrimEnumException):
    """An oracle was queried out of protocol (e.g. a model after UNSAT)."""

    pass


class ConfigurationError(PrimEnumException):
    """Unknown solver backend or solver name."""

    pass


class EnumerationHaltedError(PrimEnumException):
    """The enumeration already reported unsat and accepts no more input."""

    pass
