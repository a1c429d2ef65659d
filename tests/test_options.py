"""Tests for ParserOptions."""

from __future__ import annotations

import pydantic
import pytest

from cqrs_ddd_qparser.options import DEFAULT_OPTIONS, ParserOptions


def test_defaults() -> None:
    opts = ParserOptions()
    assert opts.limit_value == 25
    assert opts.page_value == 1
    assert opts.limit_string == "limit"
    assert opts.page_string == "page"
    assert opts.expand_string == "expand"
    assert opts.fields_string == "fields"
    assert opts.order_string == "order"
    assert opts.asc_string == "asc"
    assert opts.desc_string == "desc"
    assert opts.query_string == "q"
    assert opts.param_string == "p"
    assert opts.left_bracket == "("
    assert opts.right_bracket == ")"
    assert opts.separator == ","
    assert opts.kv_separator == ":"


def test_default_options_equal_fresh_instance() -> None:
    assert ParserOptions() == DEFAULT_OPTIONS


def test_frozen() -> None:
    with pytest.raises(pydantic.ValidationError):
        DEFAULT_OPTIONS.limit_value = 10  # type: ignore[misc]


def test_unknown_field_rejected() -> None:
    with pytest.raises(pydantic.ValidationError):
        ParserOptions(limt_string="l")  # type: ignore[call-arg]


@pytest.mark.parametrize("field", ["left_bracket", "separator", "kv_separator"])
def test_single_character_fields(field: str) -> None:
    with pytest.raises(pydantic.ValidationError):
        ParserOptions(**{field: "::"})


def test_empty_token_rejected() -> None:
    with pytest.raises(pydantic.ValidationError):
        ParserOptions(limit_string="")


# -- Merging ----------------------------------------------------------------


def test_from_overrides_uses_present_values() -> None:
    opts = ParserOptions.from_overrides(limit_string="l", page_string="pg")
    assert opts.limit_string == "l"
    assert opts.page_string == "pg"
    assert opts.expand_string == "expand"


def test_from_overrides_treats_none_and_empty_as_unset() -> None:
    opts = ParserOptions.from_overrides(
        {"limit_value": None, "separator": "", "desc_string": "down"}
    )
    assert opts.limit_value == 25
    assert opts.separator == ","
    assert opts.desc_string == "down"


def test_merge_without_overrides_returns_same_instance() -> None:
    assert DEFAULT_OPTIONS.merge() is DEFAULT_OPTIONS
    assert DEFAULT_OPTIONS.merge(limit_string=None) is DEFAULT_OPTIONS


def test_merge_does_not_touch_original() -> None:
    merged = DEFAULT_OPTIONS.merge(limit_value=50)
    assert merged.limit_value == 50
    assert DEFAULT_OPTIONS.limit_value == 25


def test_merge_validates() -> None:
    with pytest.raises(pydantic.ValidationError):
        DEFAULT_OPTIONS.merge(left_bracket="((")


def test_reserved_keys() -> None:
    opts = ParserOptions(query_string="search")
    assert opts.reserved_keys == {
        "limit",
        "page",
        "p",
        "search",
        "expand",
        "fields",
        "order",
    }
