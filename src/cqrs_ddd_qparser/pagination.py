"""PaginationParser — top-level page/limit from query params."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .models import PaginationOptions
from .options import DEFAULT_OPTIONS, ParserOptions
from .syntax import parse_int

if TYPE_CHECKING:
    from .models import QueryValues


def first_value(values: QueryValues, key: str) -> str:
    """Return the first value given for *key*, or ``""``."""
    given = values.get(key)
    return given[0] if given else ""


class PaginationParser:
    """Parse page/limit, falling back to the configured defaults."""

    def __init__(self, options: ParserOptions | None = None) -> None:
        self._options = options or DEFAULT_OPTIONS

    def defaults(self) -> PaginationOptions:
        return PaginationOptions(
            page=self._options.page_value, limit=self._options.limit_value
        )

    def parse(self, values: QueryValues) -> PaginationOptions:
        opts = self._options
        limit = opts.limit_value
        page = opts.page_value
        raw_limit = first_value(values, opts.limit_string)
        if raw_limit:
            limit = parse_int(raw_limit, parameter=opts.limit_string)
        raw_page = first_value(values, opts.page_string)
        if raw_page:
            page = parse_int(raw_page, parameter=opts.page_string)
        return PaginationOptions(page=page, limit=limit)
