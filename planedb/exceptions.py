"""
Exceptions raised while building the plane database.

Only I/O and record construction problems are exceptional. Short lines,
garbled fields and lookup misses are ordinary outcomes and never raise.
"""

from typing import Optional


class PlaneDbError(Exception):
    """Base error: the database could not be initialized."""


class DataFileError(PlaneDbError):
    """A data file is missing or unreadable."""

    def __init__(self, path: str, reason: Optional[str] = None):
        self.path = path
        self.reason = reason
        message = f"cannot open file '{path}'"
        if reason:
            message = f'{message}: {reason}'
        super().__init__(message)


class RecordBuildError(PlaneDbError):
    """A record could not be constructed from an accepted line."""

    def __init__(self, path: str, line_number: int, reason: str):
        self.path = path
        self.line_number = line_number
        super().__init__(f'{path}:{line_number}: cannot build record: {reason}')
