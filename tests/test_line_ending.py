from __future__ import annotations

import pytest

from wrapsmith.core.exceptions import InvalidConfiguration
from wrapsmith.core.line_ending import LineEnding, non_empty_lines, split_lines


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("", []),
        ("one", ["one"]),
        ("one\n", ["one"]),
        ("one\r\ntwo\n\nthree", ["one", "two", "", "three"]),
        ("\n", [""]),
    ],
)
def test_split_lines(text: str, expected: list[str]) -> None:
    assert split_lines(text) == expected


def test_non_empty_lines_report_their_terminator() -> None:
    assert list(non_empty_lines("a\nb\r\n\r\n\nc")) == [
        ("a", LineEnding.LF),
        ("b", LineEnding.CRLF),
        ("c", None),
    ]


@pytest.mark.parametrize("value", ["\n", "lf", "LF", LineEnding.LF])
def test_parse_lf(value: object) -> None:
    assert LineEnding.parse(value) is LineEnding.LF


@pytest.mark.parametrize("value", ["\r", "cr", 10, None])
def test_parse_rejects_unknown_values(value: object) -> None:
    with pytest.raises(InvalidConfiguration):
        LineEnding.parse(value)
