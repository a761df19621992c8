"""Error codes and the single exception type raised by classbytes.

Absent classes and missing classpath locations are not errors: lookups
return ``None`` for them. ``ClassBytesError`` is reserved for I/O that was
expected to succeed and did not.
"""

from __future__ import annotations

from enum import StrEnum


class ErrorCode(StrEnum):
    ARCHIVE_OPEN_FAILED = "ARCHIVE_OPEN_FAILED"
    CLASS_READ_FAILED = "CLASS_READ_FAILED"
    REPOSITORY_CLOSED = "REPOSITORY_CLOSED"


class ClassBytesError(Exception):
    """Failure while opening an archive or reading class file bytes."""

    def __init__(self, code: ErrorCode, message: str, recoverable: bool = False) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.recoverable = recoverable
