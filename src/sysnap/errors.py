"""Errors reported at the CLI boundary."""

from enum import Enum


class ErrorKind(Enum):
    """What stage of writing the report failed."""

    FILE_CREATION = "Failed to create file"
    FILE_WRITE = "Failed to write to file"
    SERIALIZATION = "Failed to serialize data to JSON"


class ReportError(Exception):
    """Raised when the JSON report cannot be produced.

    One exception type discriminated by ``kind``; the underlying error is
    kept in ``cause`` and chained as ``__cause__``.
    """

    def __init__(self, kind: ErrorKind, cause: BaseException):
        self.kind = kind
        self.cause = cause
        super().__init__(f"{kind.value}: {cause}")


class ConfigError(Exception):
    """Raised when configuration loading or validation fails."""
