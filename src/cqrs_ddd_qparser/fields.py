"""FieldsParser — projection list from ``fields=name,email``."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .options import DEFAULT_OPTIONS, ParserOptions
from .syntax import split_list

if TYPE_CHECKING:
    from .models import QueryValues


class FieldsParser:
    def __init__(self, options: ParserOptions | None = None) -> None:
        self._options = options or DEFAULT_OPTIONS

    def parse(self, values: QueryValues) -> tuple[str, ...]:
        opts = self._options
        return tuple(split_list(values.get(opts.fields_string, ()), opts.separator))
