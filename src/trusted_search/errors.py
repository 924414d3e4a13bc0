"""
Error codes, exceptions and the wire error envelope.
"""

from __future__ import annotations

import uuid
from datetime import datetime, timezone
from typing import Any

from .dates import format_iso_datetime


MISSING_QUERY = "MISSING_QUERY"
INVALID_QUERY = "INVALID_QUERY"
INVALID_PARAMETERS = "INVALID_PARAMETERS"
INVALID_FILTERS = "INVALID_FILTERS"
INVALID_LIMIT = "INVALID_LIMIT"
VALIDATION_ERROR = "VALIDATION_ERROR"
METHOD_NOT_ALLOWED = "METHOD_NOT_ALLOWED"
INTERNAL_ERROR = "INTERNAL_ERROR"


class SearchError(ValueError):
    """Base class for input the search pipeline refuses to run on."""

    code: str = VALIDATION_ERROR

    def __init__(self, message: str, *, code: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        if code is not None:
            self.code = code


class QueryValidationError(SearchError):
    """Raised when the free-text query is blank or too long."""

    code = INVALID_QUERY


class PaginationError(SearchError):
    """Raised when page or page size is out of range."""

    code = INVALID_PARAMETERS


class FilterValidationError(SearchError):
    """Raised when a decoded filter set holds unacceptable values."""

    code = VALIDATION_ERROR

    def __init__(self, errors: list[str]) -> None:
        super().__init__("; ".join(errors))
        self.errors = errors


class FilterDecodeError(SearchError):
    """Raised when filter parameters cannot be decoded."""

    code = INVALID_FILTERS


def error_envelope(code: str, message: str) -> dict[str, Any]:
    """Return the error body shared by every endpoint."""
    return {
        "error": {
            "code": code,
            "message": message,
            "timestamp": format_iso_datetime(datetime.now(timezone.utc)),
            "requestId": str(uuid.uuid4()),
        }
    }
