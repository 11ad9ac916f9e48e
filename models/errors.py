"""Structured error codes returned in API error bodies.

Error responses follow one format::

    {"detail": "{ERROR_CODE}: {human_readable_detail}", "code": "{ERROR_CODE}"}

The frontend keys off ``code``; ``detail`` is for people.
"""

from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    """Error codes shared with the frontend."""

    INVALID_REQUEST = "INVALID_REQUEST"
    UNAUTHORIZED = "UNAUTHORIZED"
    FORBIDDEN = "FORBIDDEN"
    NOT_FOUND = "NOT_FOUND"
    NO_DISTRIBUTION = "NO_DISTRIBUTION"
    INTERNAL_ERROR = "INTERNAL_ERROR"


def format_error(code: ErrorCode, detail: str) -> str:
    """Format an error for the ``detail`` field.

    Returns:
        ``{ERROR_CODE}: {detail}``
    """
    return f"{code.value}: {detail}"


def error_body(code: ErrorCode, detail: str) -> dict[str, str]:
    """Build the JSON body for an error response."""
    return {"detail": format_error(code, detail), "code": code.value}
