"""QueryStringBuilder — ParseResult -> query string (HATEOAS links)."""

from __future__ import annotations

from typing import TYPE_CHECKING
from urllib.parse import urlencode

from .models import OrderDirection
from .options import DEFAULT_OPTIONS, ParserOptions

if TYPE_CHECKING:
    from .models import ParseResult


class QueryStringBuilder:
    """Build a query string that parses back to the same request options.

    Uses the same vocabulary as the :class:`QueryParser` it pairs with.
    """

    def __init__(self, options: ParserOptions | None = None) -> None:
        self._options = options or DEFAULT_OPTIONS

    def build(
        self,
        result: ParseResult,
        *,
        page: int | None = None,
        limit: int | None = None,
    ) -> str:
        """Produce a query string, optionally swapping page/limit (e.g. next page)."""
        opts = self._options
        if limit is None:
            limit = result.pagination.limit
        if page is None:
            page = result.pagination.page
        params: list[tuple[str, str]] = [
            (opts.limit_string, str(limit)),
            (opts.page_string, str(page)),
        ]
        if result.expand:
            params.append((opts.expand_string, self._expand_value(result)))
        if result.fields:
            params.append((opts.fields_string, opts.separator.join(result.fields)))
        if result.order:
            params.append((opts.order_string, self._order_value(result)))
        if result.search.value:
            params.append((opts.query_string, result.search.value))
        if result.search.keys:
            params.append((opts.param_string, opts.separator.join(result.search.keys)))
        for key, values in result.filter.items():
            params.extend((key, value) for value in values)
        return urlencode(params)

    def _expand_value(self, result: ParseResult) -> str:
        opts = self._options
        items = []
        for name, pagination in result.expand.items():
            items.append(
                f"{name}{opts.left_bracket}"
                f"{opts.limit_string}{opts.kv_separator}{pagination.limit}"
                f"{opts.separator}"
                f"{opts.page_string}{opts.kv_separator}{pagination.page}"
                f"{opts.right_bracket}"
            )
        return opts.separator.join(items)

    def _order_value(self, result: ParseResult) -> str:
        opts = self._options
        items = []
        for item in result.order:
            direction = (
                opts.desc_string
                if item.direction is OrderDirection.DESC
                else opts.asc_string
            )
            items.append(
                f"{item.field}{opts.left_bracket}{direction}{opts.right_bracket}"
            )
        return opts.separator.join(items)
