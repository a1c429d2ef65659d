"""Shared fixtures for query parser tests."""

from __future__ import annotations

import pytest

from cqrs_ddd_qparser import ParserOptions, QueryParser


@pytest.fixture
def options() -> ParserOptions:
    """Default parser configuration."""
    return ParserOptions()


@pytest.fixture
def parser(options: ParserOptions) -> QueryParser:
    """Parser with default vocabulary."""
    return QueryParser(options)


@pytest.fixture
def base_url() -> str:
    return "http://some-api.com/api/endpoint"
