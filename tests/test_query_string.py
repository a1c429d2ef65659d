"""Tests for QueryStringBuilder."""

from __future__ import annotations

from urllib.parse import parse_qs

from cqrs_ddd_qparser import ParserOptions, QueryParser, QueryStringBuilder


def test_build_reparses_to_equal_result(parser: QueryParser) -> None:
    original = parser.parse(
        "?limit=10&page=2&expand=rel1,rel2(limit:5,page:3)&fields=name,email"
        "&order=age(desc),name&q=foo&p=name,bio&color=red,blue"
    )
    qs = QueryStringBuilder().build(original)
    assert parser.parse(qs) == original


def test_next_page_link(parser: QueryParser) -> None:
    result = parser.parse("?limit=10&page=2&color=red")
    qs = QueryStringBuilder().build(result, page=result.pagination.page + 1)
    assert parse_qs(qs) == {"limit": ["10"], "page": ["3"], "color": ["red"]}


def test_defaults_are_written_explicitly(parser: QueryParser) -> None:
    qs = QueryStringBuilder().build(parser.parse(""))
    assert qs == "limit=25&page=1"


def test_custom_vocabulary() -> None:
    opts = ParserOptions(
        limit_string="l",
        page_string="pg",
        order_string="sort",
        left_bracket="[",
        right_bracket="]",
    )
    parser = QueryParser(opts)
    result = parser.parse("?l=5&sort=a[desc]&expand=r[l:2]")
    qs = QueryStringBuilder(opts).build(result)
    assert parse_qs(qs)["sort"] == ["a[desc]"]
    assert parse_qs(qs)["expand"] == ["r[l:2,pg:1]"]
    assert parser.parse(qs) == result
