"""QueryParser — query string / URL / mapping -> ParseResult."""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any
from urllib.parse import parse_qs, urlsplit

from .exceptions import InvalidURLError
from .expand import ExpandParser
from .fields import FieldsParser
from .models import ParseResult
from .options import DEFAULT_OPTIONS, ParserOptions
from .pagination import PaginationParser
from .search import SearchParser

if TYPE_CHECKING:
    from collections.abc import Sequence

    from .models import QueryValues

logger = logging.getLogger("cqrs_ddd.qparser")

_SCHEME_RE = re.compile(r"[A-Za-z][A-Za-z0-9+.-]*://")


def _normalise_values(
    values: Mapping[str, str | Sequence[str]],
) -> dict[str, list[str]]:
    """Coerce single string values into one-element lists."""
    out: dict[str, list[str]] = {}
    for key, given in values.items():
        if isinstance(given, str):
            out[key] = [given]
        else:
            out[key] = [str(v) for v in given]
    return out


def _looks_like_url(source: str) -> bool:
    """True when *source* carries a path or scheme before any query."""
    head, sep, _ = source.partition("?")
    if _SCHEME_RE.match(head):
        return True
    if "=" in head or "&" in head:
        return False
    return bool(sep) or head.startswith("/")


class QueryParser:
    """Parse list/search request options from a query string.

    Holds only immutable configuration, so one instance can be shared across
    threads. Every call builds a fresh :class:`ParseResult`.

    Usage::

        parser = QueryParser(limit_string="l", page_string="pg")
        result = parser.parse("https://api.example.com/items?l=10&expand=owner")
        result.expand.lookup("owner")
    """

    def __init__(
        self, options: ParserOptions | None = None, **overrides: Any
    ) -> None:
        """
        Initialize QueryParser.

        Args:
            options: Base configuration (defaults to ``DEFAULT_OPTIONS``).
            **overrides: Individual ``ParserOptions`` fields; ``None`` or
                empty values keep the base value.
        """
        base = options or DEFAULT_OPTIONS
        self._options = base.merge(**overrides) if overrides else base
        self._pagination = PaginationParser(self._options)
        self._expand = ExpandParser(self._options)
        self._fields = FieldsParser(self._options)
        self._search = SearchParser(self._options)

    @property
    def options(self) -> ParserOptions:
        return self._options

    def parse(self, source: str | Mapping[str, str | Sequence[str]]) -> ParseResult:
        """Parse a mapping, a raw query string or a full URL."""
        if isinstance(source, Mapping):
            return self.parse_values(source)
        if _looks_like_url(source):
            return self.parse_url(source)
        return self.parse_query(source)

    def parse_url(self, url: str) -> ParseResult:
        """Parse the query component of *url*."""
        try:
            query = urlsplit(url).query
        except ValueError as e:
            raise InvalidURLError(url, str(e)) from e
        return self.parse_query(query)

    def parse_query(self, query: str) -> ParseResult:
        """Parse a raw ``key=value&...`` string (a leading ``?`` is allowed)."""
        return self.parse_values(parse_qs(query.lstrip("?"), keep_blank_values=True))

    def parse_values(self, values: Mapping[str, str | Sequence[str]]) -> ParseResult:
        """Parse an already-decoded key -> values mapping.

        Raises:
            InvalidNumberError: A limit/page value, top level or inside an
                ``expand`` override, is not an integer.
        """
        params: QueryValues = _normalise_values(values)
        logger.debug("Parsing query params: %s", params.keys())
        pagination = self._pagination.parse(params)
        expand = self._expand.parse(params)
        fields = self._fields.parse(params)
        section = self._search.parse(params)
        result = ParseResult(
            pagination=pagination,
            expand=expand,
            fields=fields,
            search=section.search,
            filter=section.filter,
            order=section.order,
        )
        logger.debug(
            "Parsed page=%d limit=%d expand=%d filters=%d order=%d",
            pagination.page,
            pagination.limit,
            len(expand),
            len(section.filter),
            len(section.order),
        )
        return result


def parse(
    source: str | Mapping[str, str | Sequence[str]],
    options: ParserOptions | None = None,
) -> ParseResult:
    """Parse *source* once with *options* (defaults if omitted)."""
    return QueryParser(options).parse(source)
