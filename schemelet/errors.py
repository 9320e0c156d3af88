"""Error taxonomy for Schemelet.

Every failure raised while reading or evaluating derives from SchemeletError.
Errors propagate unchanged to the caller; nothing is retried or recovered
below the top-level boundary in schemelet.interpreter.
"""

from __future__ import annotations

from typing import Iterable


def unwords(values: Iterable[object]) -> str:
    return " ".join(str(v) for v in values)


class SchemeletError(Exception):
    """ Base class for all Schemelet errors"""
    pass


class NumArgsError(SchemeletError):
    """ Raised when a procedure receives the wrong number of arguments"""

    def __init__(self, expected: int, found: Iterable[object]):
        self.expected = expected
        self.found = list(found)
        super().__init__(f"Expected {expected} args; found values {unwords(self.found)}")


class TypeMismatchError(SchemeletError):
    """ Raised when an argument has the wrong type"""

    def __init__(self, expected: str, found: object):
        self.expected = expected
        self.found = found
        super().__init__(f"Invalid type: expected {expected}, found {found}")


class ParserError(SchemeletError):
    """ Raised when source text cannot be read"""

    def __init__(self, message: str, line: int | None = None, column: int | None = None):
        self.message = message
        self.line = line
        self.column = column
        if line is None:
            super().__init__(f"Parse error: {message}")
        else:
            super().__init__(f"Parse error at line {line}, column {column}: {message}")


class BadSpecialFormError(SchemeletError):
    """ Raised when a form does not match any evaluation rule"""

    def __init__(self, message: str, form: object):
        self.message = message
        self.form = form
        super().__init__(f"{message}: {form}")


class NotFunctionError(SchemeletError):
    """ Raised when a non-procedure is applied"""

    def __init__(self, message: str, func: object):
        self.message = message
        self.func = func
        super().__init__(f"{message}: {func}")


class UnboundVarError(SchemeletError):
    """ Raised when a variable is read or set before it is bound"""

    def __init__(self, message: str, name: str):
        self.message = message
        self.name = name
        super().__init__(f"{message}: {name}")


class DefaultError(SchemeletError):
    """ Raised for failures without a dedicated kind (host I/O, division by zero)"""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)
