"""ParserOptions — immutable token vocabulary and pagination defaults."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, Field

if TYPE_CHECKING:
    from collections.abc import Mapping


class ParserOptions(BaseModel):
    """Immutable configuration shared by every section parser.

    Token strings name the reserved query parameters; the four single
    characters drive the ``expand``/``order`` mini-language. Pairwise
    distinctness of the characters is left to the caller.

    Usage::

        opts = ParserOptions(limit_string="l", page_string="pg")
        opts = ParserOptions.from_overrides({"limit_value": None, "separator": ";"})
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    limit_value: int = Field(default=25, description="Default page size")
    page_value: int = Field(default=1, description="Default page number")

    limit_string: str = Field(default="limit", min_length=1)
    page_string: str = Field(default="page", min_length=1)
    expand_string: str = Field(default="expand", min_length=1)
    fields_string: str = Field(default="fields", min_length=1)
    order_string: str = Field(default="order", min_length=1)
    asc_string: str = Field(default="asc", min_length=1)
    desc_string: str = Field(default="desc", min_length=1)
    query_string: str = Field(default="q", min_length=1)
    param_string: str = Field(default="p", min_length=1)

    left_bracket: str = Field(default="(", min_length=1, max_length=1)
    right_bracket: str = Field(default=")", min_length=1, max_length=1)
    separator: str = Field(default=",", min_length=1, max_length=1)
    kv_separator: str = Field(default=":", min_length=1, max_length=1)

    @classmethod
    def from_overrides(
        cls, overrides: Mapping[str, Any] | None = None, **kwargs: Any
    ) -> ParserOptions:
        """Build options, using each override only if present and non-empty."""
        return DEFAULT_OPTIONS.merge(**{**(overrides or {}), **kwargs})

    def merge(self, **overrides: Any) -> ParserOptions:
        """Return a copy with the non-empty overrides applied.

        ``None`` and ``""`` mean "unset" and keep the current value.
        """
        update = {k: v for k, v in overrides.items() if v is not None and v != ""}
        if not update:
            return self
        # Re-validate through the constructor; model_copy(update=) does not.
        return ParserOptions(**{**self.model_dump(), **update})

    @property
    def reserved_keys(self) -> frozenset[str]:
        """Parameter names that never become filters."""
        return frozenset(
            {
                self.limit_string,
                self.page_string,
                self.param_string,
                self.query_string,
                self.expand_string,
                self.fields_string,
                self.order_string,
            }
        )


DEFAULT_OPTIONS = ParserOptions()
