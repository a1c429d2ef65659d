"""
Mini-language primitives shared by the ``expand`` and ``order`` sections.

``relation(limit:6,page:8),other`` is decoded in three steps:

1. :func:`split_outside_brackets` cuts the raw value on the list separator,
   ignoring separators inside brackets -> ``["relation(limit:6,page:8)", "other"]``.
2. :func:`tokenize_segment` splits one item on brackets and separator
   -> ``["relation", "limit:6", "page:8"]``.
3. :func:`apply_pagination_overrides` reads the ``key:value`` tokens after
   the head into a :class:`PaginationOptions`.

These are pure functions with no dependency on the parser configuration type.
"""

from __future__ import annotations

import logging
import re
from dataclasses import replace
from typing import TYPE_CHECKING

from .exceptions import InvalidNumberError

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from .models import PaginationOptions

logger = logging.getLogger("cqrs_ddd.qparser.syntax")

# Only the first two tokens after the head are consulted.
MAX_OVERRIDES = 2

_INT_RE = re.compile(r"[+-]?[0-9]+")


def parse_int(value: str, *, parameter: str) -> int:
    """Parse a signed decimal integer, raising ``InvalidNumberError`` otherwise."""
    if not _INT_RE.fullmatch(value):
        raise InvalidNumberError(parameter, value)
    try:
        return int(value)
    except ValueError as e:
        # Digit strings past the interpreter's conversion limit.
        raise InvalidNumberError(parameter, value) from e


def split_outside_brackets(
    text: str, separator: str, left_bracket: str, right_bracket: str
) -> list[str]:
    """
    Split *text* on *separator*, except inside a bracket pair.

    Brackets do not nest: a second left bracket is a no-op and a stray right
    bracket clears an already-clear flag. Unbalanced input is not rejected;
    the trailing segment is always emitted as-is.

    Example:
        ``split_outside_brackets("a(x,y),b", ",", "(", ")")``
        -> ``["a(x,y)", "b"]``
    """
    segments: list[str] = []
    inside = False
    start = 0
    for i, char in enumerate(text):
        if char == left_bracket:
            inside = True
        elif char == right_bracket:
            inside = False
        elif char == separator and not inside:
            segments.append(text[start:i])
            start = i + 1
    segments.append(text[start:])
    return segments


def tokenize_segment(
    segment: str, left_bracket: str, right_bracket: str, separator: str
) -> list[str]:
    """Split *segment* on any of the three characters, dropping empty tokens."""
    delimiters = {left_bracket, right_bracket, separator}
    tokens: list[str] = []
    current: list[str] = []
    for char in segment:
        if char in delimiters:
            if current:
                tokens.append("".join(current))
                current = []
        else:
            current.append(char)
    if current:
        tokens.append("".join(current))
    return tokens


def split_list(values: Iterable[str], separator: str) -> list[str]:
    """Split every value on *separator* and flatten, dropping empty items."""
    return [item for value in values for item in value.split(separator) if item]


def apply_pagination_overrides(
    base: PaginationOptions,
    tokens: Sequence[str],
    *,
    kv_separator: str,
    limit_key: str,
    page_key: str,
) -> PaginationOptions:
    """Return *base* with ``limit``/``page`` overridden from ``key:value`` tokens.

    Unknown keys are ignored. A recognised key with a non-integer value
    raises ``InvalidNumberError``.
    """
    result = base
    for token in tokens[:MAX_OVERRIDES]:
        parts = token.split(kv_separator)
        key = parts[0]
        value = parts[1] if len(parts) > 1 else ""
        if key == limit_key:
            result = replace(result, limit=parse_int(value, parameter=limit_key))
        elif key == page_key:
            result = replace(result, page=parse_int(value, parameter=page_key))
        else:
            logger.debug("Ignoring unknown override %r", token)
    return result
