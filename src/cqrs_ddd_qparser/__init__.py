"""API query parsing — pagination, expansion, search, filters, projection, order."""

from __future__ import annotations

from .exceptions import (
    InvalidNumberError,
    InvalidURLError,
    ParseErrorKind,
    QueryParserError,
)
from .expand import ExpandParser
from .fields import FieldsParser
from .models import (
    ExpandParams,
    FilterParams,
    OrderDirection,
    OrderItem,
    PaginationOptions,
    ParseResult,
    SearchValue,
)
from .options import DEFAULT_OPTIONS, ParserOptions
from .order import OrderParser
from .pagination import PaginationParser
from .parser import QueryParser, parse
from .query_string import QueryStringBuilder
from .search import SearchParser, ValuesSection
from .syntax import split_outside_brackets, tokenize_segment

__all__ = [
    # Facade
    "QueryParser",
    "parse",
    # Configuration
    "DEFAULT_OPTIONS",
    "ParserOptions",
    # Section parsers
    "ExpandParser",
    "FieldsParser",
    "OrderParser",
    "PaginationParser",
    "SearchParser",
    "ValuesSection",
    # Results
    "ExpandParams",
    "FilterParams",
    "OrderDirection",
    "OrderItem",
    "PaginationOptions",
    "ParseResult",
    "SearchValue",
    # Links
    "QueryStringBuilder",
    # Syntax
    "split_outside_brackets",
    "tokenize_segment",
    # Exceptions
    "InvalidNumberError",
    "InvalidURLError",
    "ParseErrorKind",
    "QueryParserError",
]
