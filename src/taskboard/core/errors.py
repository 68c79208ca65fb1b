# src/taskboard/core/errors.py

"""
Error kinds raised by the core.

Core layers (models/registry/codec/store) raise these; the command facade
catches them and turns them into result values, so callers can branch on
`kind` and render distinct messages.
"""

from __future__ import annotations

from enum import StrEnum


class ErrorKind(StrEnum):
    INVALID_ARGUMENT = "invalid_argument"
    OUT_OF_RANGE = "out_of_range"
    INDEX_OUT_OF_RANGE = "index_out_of_range"
    PARSE_ERROR = "parse_error"
    IO_FAILURE = "io_failure"
    CORRUPT_DATA = "corrupt_data"


class TaskBoardError(Exception):
    """Base exception for all core errors."""

    kind: ErrorKind = ErrorKind.INVALID_ARGUMENT

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class InvalidArgument(TaskBoardError):
    """Empty or blank text where a name is required."""

    kind = ErrorKind.INVALID_ARGUMENT


class OutOfRange(TaskBoardError):
    """Progress value outside [0, 100]."""

    kind = ErrorKind.OUT_OF_RANGE

    def __init__(self, value: int, message: str = "Progress must be between 0 and 100.") -> None:
        self.value = value
        super().__init__(message)


class IndexOutOfRange(TaskBoardError):
    """Stale or absent selection in one of the buckets."""

    kind = ErrorKind.INDEX_OUT_OF_RANGE

    def __init__(self, bucket: str, index: int, size: int) -> None:
        self.bucket = bucket
        self.index = index
        self.size = size
        super().__init__(f"No task at position {index} in {bucket} (size={size}).")


class ParseError(TaskBoardError):
    """Non-numeric text where a number was expected."""

    kind = ErrorKind.PARSE_ERROR

    def __init__(self, text: str, message: str = "Invalid input. Please enter a number.") -> None:
        self.text = text
        super().__init__(message)


class IOFailure(TaskBoardError):
    """Reading or writing the persisted state failed."""

    kind = ErrorKind.IO_FAILURE


class CorruptData(TaskBoardError):
    """Persisted state is truncated or malformed."""

    kind = ErrorKind.CORRUPT_DATA
