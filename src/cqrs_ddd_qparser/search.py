"""SearchParser — free-text search, exact-match filters and sort order."""

from __future__ import annotations

from typing import TYPE_CHECKING, NamedTuple

from .models import FilterParams, OrderItem, SearchValue
from .options import DEFAULT_OPTIONS, ParserOptions
from .order import OrderParser
from .pagination import first_value
from .syntax import split_list

if TYPE_CHECKING:
    from .models import QueryValues


class ValuesSection(NamedTuple):
    """Search, filters and order decoded from one pass over the params."""

    search: SearchValue
    filter: FilterParams
    order: tuple[OrderItem, ...]


class SearchParser:
    """Parse ``q``/``p`` into a :class:`SearchValue`; unreserved keys become filters.

    ``p`` may be one comma-separated value or repeated keys; both shapes
    flatten to the same ordered list. Order is decoded in the same pass so
    the whole section fails as one unit.
    """

    def __init__(self, options: ParserOptions | None = None) -> None:
        self._options = options or DEFAULT_OPTIONS
        self._order = OrderParser(self._options)

    def parse(self, values: QueryValues) -> ValuesSection:
        opts = self._options
        search = SearchValue(
            value=first_value(values, opts.query_string),
            keys=tuple(split_list(values.get(opts.param_string, ()), opts.separator)),
        )
        reserved = opts.reserved_keys
        filters = {
            key: tuple(split_list(given, opts.separator))
            for key, given in values.items()
            if key not in reserved
        }
        return ValuesSection(
            search=search,
            filter=FilterParams(filters),
            order=self._order.parse(values),
        )
