"""ExpandParser — ``expand=rel1,rel2(limit:5,page:1)`` to per-relation pagination."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .models import ExpandParams
from .options import DEFAULT_OPTIONS, ParserOptions
from .pagination import PaginationParser
from .syntax import (
    apply_pagination_overrides,
    split_outside_brackets,
    tokenize_segment,
)

if TYPE_CHECKING:
    from .models import PaginationOptions, QueryValues

logger = logging.getLogger("cqrs_ddd.qparser.expand")


class ExpandParser:
    """Parse every ``expand`` value into an :class:`ExpandParams` map.

    A bare relation name gets the default pagination. When a relation is
    listed more than once the last occurrence wins.
    """

    def __init__(self, options: ParserOptions | None = None) -> None:
        self._options = options or DEFAULT_OPTIONS
        self._pagination = PaginationParser(self._options)

    def parse(self, values: QueryValues) -> ExpandParams:
        opts = self._options
        relations: dict[str, PaginationOptions] = {}
        for raw in values.get(opts.expand_string, ()):
            for item in split_outside_brackets(
                raw, opts.separator, opts.left_bracket, opts.right_bracket
            ):
                tokens = tokenize_segment(
                    item, opts.left_bracket, opts.right_bracket, opts.separator
                )
                if not tokens:
                    continue
                name = tokens[0]
                if name in relations:
                    logger.debug("Relation %r expanded again; overwriting", name)
                relations[name] = apply_pagination_overrides(
                    self._pagination.defaults(),
                    tokens[1:],
                    kv_separator=opts.kv_separator,
                    limit_key=opts.limit_string,
                    page_key=opts.page_string,
                )
        return ExpandParams(relations)
