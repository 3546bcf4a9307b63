from __future__ import annotations

from wrapsmith import dedent, indent


def test_indent_skips_blank_lines() -> None:
    assert indent("Foo\n\nBar\n", "  ") == "  Foo\n\n  Bar\n"


def test_indent_keeps_whitespace_only_lines() -> None:
    assert indent("foo\n   \nbar", "> ") == "> foo\n   \n> bar"


def test_indent_empty_text() -> None:
    assert indent("", "  ") == ""


def test_dedent_removes_common_prefix() -> None:
    assert dedent("    1st line\n      2nd line\n    3rd line\n") == "1st line\n  2nd line\n3rd line\n"


def test_dedent_ignores_blank_lines() -> None:
    assert dedent("  foo\n\n    bar") == "foo\n\n  bar"
    assert dedent("  foo\n   \n  bar\n") == "foo\n\nbar\n"


def test_dedent_without_common_prefix() -> None:
    assert dedent("foo\n  bar") == "foo\n  bar"


def test_dedent_mixed_tabs_and_spaces() -> None:
    assert dedent("\t  foo\n\t bar\n") == " foo\nbar\n"


def test_dedent_empty_text() -> None:
    assert dedent("") == ""
