"""Testy pod.syntax — adaptery składni komentarzy i rejestr."""

from __future__ import annotations

import pytest

from pod.syntax import (
    CommentSyntax,
    JsSyntax,
    NoSyntaxAdaptersError,
    PerlSyntax,
    PhpSyntax,
    SyntaxRegistry,
    default_registry,
)


@pytest.mark.parametrize(
    "line, expected",
    [
        ("=head1 NAME\n", ("head1", "NAME")),
        ("=back\n", ("back", "")),
        ("=item   Some Title  \n", ("item", "Some Title")),
        ("=cut*/\n", ("cut", "*/")),
        ("plain text\n", None),
        (" =head1 indented\n", None),
        ("=\n", None),
    ],
)
def test_classify(line: str, expected: tuple[str, str] | None) -> None:
    assert CommentSyntax().classify(line) == expected


def test_default_syntax_keeps_lines_and_names() -> None:
    syntax = CommentSyntax()

    assert syntax.strip_comment_lead_in("// =head1 X\n") == "// =head1 X\n"
    assert syntax.name_to_relative_path("Widget") == "Widget"
    assert syntax.supported_extensions() == set()


@pytest.mark.parametrize(
    "line, expected",
    [
        ("/*=head1 NAME\n", "=head1 NAME\n"),
        ("//=item x\n", "=item x\n"),
        ("#=over\n", "=over\n"),
        ("code(); // =item x\n", "code(); // =item x\n"),
    ],
)
def test_php_strip_comment_lead_in(line: str, expected: str) -> None:
    assert PhpSyntax().strip_comment_lead_in(line) == expected


def test_js_strip_comment_lead_in_ignores_hash() -> None:
    syntax = JsSyntax()

    assert syntax.strip_comment_lead_in("/*=head1 NAME\n") == "=head1 NAME\n"
    assert syntax.strip_comment_lead_in("#=head1 NAME\n") == "#=head1 NAME\n"


def test_name_to_relative_path_per_language() -> None:
    assert PhpSyntax().name_to_relative_path("File\\POD\\Parser") == "File/POD/Parser.php"
    assert JsSyntax().name_to_relative_path("widget.core.Button") == "widget/core/Button.js"
    assert PerlSyntax().name_to_relative_path("File::POD") == "File/POD.pm"


# ---------------------------------------------------------------------------
# Rejestr
# ---------------------------------------------------------------------------

def test_registry_lookup_is_case_insensitive() -> None:
    registry = SyntaxRegistry.from_names()

    assert isinstance(registry.for_extension("PHP"), PhpSyntax)
    assert isinstance(registry.for_extension(".js"), JsSyntax)
    assert isinstance(registry.for_path("lib/File/POD.pm"), PerlSyntax)
    assert registry.extensions() == {"php", "js", "pl", "pm"}


def test_registry_falls_back_to_default() -> None:
    registry = SyntaxRegistry.from_names()

    syntax = registry.for_extension("txt")
    assert type(syntax) is CommentSyntax
    assert registry.for_path("README") is syntax


def test_registry_restricted_by_names() -> None:
    registry = SyntaxRegistry.from_names(["php"])

    assert isinstance(registry.for_extension("php"), PhpSyntax)
    assert type(registry.for_extension("js")) is CommentSyntax


def test_registry_unknown_name_raises() -> None:
    with pytest.raises(ValueError, match="cobol"):
        SyntaxRegistry.from_names(["cobol"])


def test_registry_without_any_adapter_is_fatal() -> None:
    with pytest.raises(NoSyntaxAdaptersError):
        SyntaxRegistry([])


def test_registry_with_only_default_is_allowed() -> None:
    registry = SyntaxRegistry([], default=CommentSyntax())

    assert type(registry.for_extension("php")) is CommentSyntax


def test_default_registry_is_shared() -> None:
    assert default_registry() is default_registry()
