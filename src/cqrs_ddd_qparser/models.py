"""
Parse result types.

``ParseResult`` aggregates the sections decoded from one query string.
Every value here is immutable and compared structurally, so parsing the
same input twice yields equal results.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Generic, TypeVar

_V = TypeVar("_V")

# Decoded query: key -> every value given for it, in input order.
QueryValues = Mapping[str, Sequence[str]]


@dataclass(frozen=True)
class PaginationOptions:
    """Page number and per-page item count."""

    page: int
    limit: int

    def to_dict(self) -> dict[str, int]:
        return {"page": self.page, "limit": self.limit}


class _FrozenMapping(Mapping[str, _V], Generic[_V]):
    """Read-only mapping with an explicit optional ``lookup``."""

    __slots__ = ("_data",)

    def __init__(self, data: Mapping[str, _V] | None = None) -> None:
        self._data: Mapping[str, _V] = MappingProxyType(dict(data or {}))

    def __getitem__(self, key: str) -> _V:
        return self._data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Mapping):
            return NotImplemented
        return dict(self._data) == dict(other)

    def __hash__(self) -> int:
        return hash(tuple(sorted(self._data.items())))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({dict(self._data)!r})"

    def lookup(self, key: str) -> _V | None:
        """Return the value for *key*, or ``None`` when absent."""
        return self._data.get(key)


class ExpandParams(_FrozenMapping[PaginationOptions]):
    """Relation name -> pagination applied to the expanded relation."""

    def to_dict(self) -> dict[str, dict[str, int]]:
        return {name: opts.to_dict() for name, opts in self.items()}


class FilterParams(_FrozenMapping[tuple[str, ...]]):
    """Unreserved query key -> list of exact-match values."""

    def to_dict(self) -> dict[str, list[str]]:
        return {key: list(values) for key, values in self.items()}


@dataclass(frozen=True)
class SearchValue:
    """Free-text query plus the field names it targets."""

    value: str = ""
    keys: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {"value": self.value, "keys": list(self.keys)}


class OrderDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


@dataclass(frozen=True)
class OrderItem:
    """One sort key."""

    field: str
    direction: OrderDirection = OrderDirection.ASC

    def to_dict(self) -> dict[str, str]:
        return {"field": self.field, "direction": self.direction.value}


@dataclass(frozen=True)
class ParseResult:
    """
    Immutable container for everything decoded from one query string.

    Attributes:
        pagination: Top-level page/limit.
        expand: Relations to expand with their own pagination.
        fields: Field names requested for projection.
        search: Free-text query and its target fields.
        filter: Exact-match filters from unreserved keys.
        order: Sort keys, primary first.
    """

    pagination: PaginationOptions
    expand: ExpandParams = field(default_factory=ExpandParams)
    fields: tuple[str, ...] = ()
    search: SearchValue = field(default_factory=SearchValue)
    filter: FilterParams = field(default_factory=FilterParams)
    order: tuple[OrderItem, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        """Serialise to a JSON-compatible dictionary."""
        return {
            "pagination": self.pagination.to_dict(),
            "expand": self.expand.to_dict(),
            "fields": list(self.fields),
            "search": self.search.to_dict(),
            "filter": self.filter.to_dict(),
            "order": [item.to_dict() for item in self.order],
        }
