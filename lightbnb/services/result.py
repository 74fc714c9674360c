"""Outcome of a single data-access call.

The original service resolved to nothing both when a lookup came back empty and
when the database failed. ``QueryResult`` keeps those apart while staying
falsy for anything but a hit, so callers that only test truthiness behave as
before.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

class Outcome(str, Enum):
    FOUND = "found"
    NOT_FOUND = "not_found"
    STORE_ERROR = "store_error"

@dataclass
class QueryResult:
    outcome: Outcome
    value: Any = None
    error: Optional[BaseException] = field(default=None, repr=False)

    @classmethod
    def found(cls, value) -> "QueryResult":
        return cls(Outcome.FOUND, value)

    @classmethod
    def not_found(cls, value=None) -> "QueryResult":
        return cls(Outcome.NOT_FOUND, value)

    @classmethod
    def store_error(cls, cause: BaseException) -> "QueryResult":
        return cls(Outcome.STORE_ERROR, error=cause)

    @classmethod
    def from_rows(cls, rows: list) -> "QueryResult":
        return cls.found(rows) if rows else cls.not_found([])

    @classmethod
    def from_row(cls, row: Optional[dict]) -> "QueryResult":
        return cls.found(row) if row is not None else cls.not_found()

    @property
    def is_error(self) -> bool:
        return self.outcome is Outcome.STORE_ERROR

    @property
    def rows(self) -> list:
        if isinstance(self.value, list):
            return self.value
        return [self.value] if self.value is not None else []

    def __bool__(self):
        return self.outcome is Outcome.FOUND

    def __iter__(self):
        return iter(self.rows)
