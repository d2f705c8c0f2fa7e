"""
db/errors.py
------------
Typed failures raised by the data access layer.
Callers can tell "no data" (``find`` returns None) apart from
"operation failed" (one of the exceptions below).
"""

from typing import Optional


class DataAccessError(Exception):
    """Base class for every failure surfaced by the data access layer."""


class ConnectivityError(DataAccessError):
    """A connection could not be acquired (pool exhausted or store unreachable)."""


class ExecutionError(DataAccessError):
    """The store rejected a statement (bad SQL, constraint or type violation)."""

    def __init__(self, table: str, action: str, cause: Optional[Exception] = None):
        self.table = table
        self.action = action
        self.cause = cause
        message = f"Failed to {action} on {table}"
        if cause is not None:
            message += f": {cause}"
        super().__init__(message)


class GeneratedKeyMissingError(DataAccessError):
    """An insert succeeded but the store handed back no generated identifier."""

    def __init__(self, table: str, id_column: str):
        self.table = table
        self.id_column = id_column
        super().__init__(f"No generated {id_column} returned for insert into {table}")


class BindingTypeError(DataAccessError, TypeError):
    """A value does not match the semantic type declared for its column."""

    def __init__(self, column: str, expected: str, value: object):
        self.column = column
        self.expected = expected
        self.value = value
        super().__init__(
            f"Column '{column}' expects {expected}, got {type(value).__name__}: {value!r}"
        )
