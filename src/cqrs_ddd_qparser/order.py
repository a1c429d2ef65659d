"""OrderParser — ``order=age(desc),name`` to an ordered list of sort keys."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .models import OrderDirection, OrderItem
from .options import DEFAULT_OPTIONS, ParserOptions
from .syntax import split_outside_brackets, tokenize_segment

if TYPE_CHECKING:
    from .models import QueryValues


class OrderParser:
    """Parse sort keys; anything other than the ``desc`` token sorts ascending."""

    def __init__(self, options: ParserOptions | None = None) -> None:
        self._options = options or DEFAULT_OPTIONS

    def parse(self, values: QueryValues) -> tuple[OrderItem, ...]:
        opts = self._options
        out: list[OrderItem] = []
        for raw in values.get(opts.order_string, ()):
            for item in split_outside_brackets(
                raw, opts.separator, opts.left_bracket, opts.right_bracket
            ):
                tokens = tokenize_segment(
                    item, opts.left_bracket, opts.right_bracket, opts.separator
                )
                if not tokens:
                    continue
                direction = (
                    OrderDirection.DESC
                    if len(tokens) > 1 and tokens[1] == opts.desc_string
                    else OrderDirection.ASC
                )
                out.append(OrderItem(field=tokens[0], direction=direction))
        return tuple(out)
