"""
Query parser exception hierarchy.

All exceptions inherit from ``QueryParserError`` and provide
``to_dict()`` for API-friendly error responses.
"""

from __future__ import annotations

from enum import Enum
from typing import Any


class ParseErrorKind(str, Enum):
    """Category of a parse failure."""

    INVALID_NUMBER = "INVALID_NUMBER"
    INVALID_URL = "INVALID_URL"


class QueryParserError(Exception):
    """Base exception for all query parser errors."""

    kind: ParseErrorKind

    def __init__(self, message: str, kind: ParseErrorKind) -> None:
        self.message = message
        self.kind = kind
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.kind.value,
            "message": self.message,
        }


class InvalidNumberError(QueryParserError):
    """An integer parameter (limit/page, top level or override) is not a number."""

    def __init__(self, parameter: str, value: str) -> None:
        self.parameter = parameter
        self.value = value
        super().__init__(
            f"Invalid integer {value!r} for parameter {parameter!r}",
            ParseErrorKind.INVALID_NUMBER,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.kind.value,
            "message": self.message,
            "parameter": self.parameter,
            "value": self.value,
        }


class InvalidURLError(QueryParserError):
    """The URL handed to the parser could not be split into components."""

    def __init__(self, url: str, reason: str) -> None:
        self.url = url
        self.reason = reason
        super().__init__(f"Invalid URL {url!r}: {reason}", ParseErrorKind.INVALID_URL)
