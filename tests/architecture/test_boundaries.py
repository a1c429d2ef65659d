from pytest_archon import archrule


def test_syntax_independence() -> None:
    """
    The mini-language primitives must not depend on the facade, the section
    parsers or the pydantic configuration layer.
    """
    (
        archrule("syntax_is_independent")
        .match("cqrs_ddd_qparser.syntax")
        .should_not_import("cqrs_ddd_qparser.parser")
        .should_not_import("cqrs_ddd_qparser.options")
        .should_not_import("pydantic*")
        .check("cqrs_ddd_qparser", only_direct_imports=True)
    )


def test_models_isolation() -> None:
    """
    Result types are plain values: no parsing, no configuration.
    """
    (
        archrule("models_isolation")
        .match("cqrs_ddd_qparser.models")
        .should_not_import("cqrs_ddd_qparser.syntax")
        .should_not_import("cqrs_ddd_qparser.options")
        .should_not_import("pydantic*")
        .check("cqrs_ddd_qparser", only_direct_imports=True)
    )


def test_section_parsers_do_not_import_facade() -> None:
    """
    Section parsers are consumed by the facade, never the other way round.
    """
    for module in ("pagination", "expand", "fields", "order", "search"):
        (
            archrule(f"{module}_layering")
            .match(f"cqrs_ddd_qparser.{module}")
            .should_not_import("cqrs_ddd_qparser.parser")
            .check("cqrs_ddd_qparser", only_direct_imports=True)
        )
