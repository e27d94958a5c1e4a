from __future__ import annotations
from enum import Enum


class ErrorKind(str, Enum):
    INVALID_DATE = "invalid_date"
    CONVERSION_FAILED = "conversion_failed"


class AnnivError(Exception):
    """Base error. Match on ``kind`` rather than on the subclass."""

    kind: ErrorKind

    def __init__(self, message: str, *, value: object = None):
        super().__init__(message)
        self.value = value


class InvalidDate(AnnivError):
    """Raised for malformed date strings and structurally impossible dates."""

    kind = ErrorKind.INVALID_DATE


class ConversionFailed(AnnivError):
    """Raised when the lunisolar backend cannot convert a date."""

    kind = ErrorKind.CONVERSION_FAILED
