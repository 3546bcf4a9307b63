from __future__ import annotations

import math

from pydantic import ValidationError
import pytest

from wrapsmith import (
    AsciiSpace,
    FirstFit,
    HyphenSplitter,
    Hyphenator,
    InvalidConfiguration,
    LineEnding,
    NoHyphenation,
    OptimalFit,
    Penalties,
    UnicodeBreakProperties,
    WrapOptions,
)
from wrapsmith.core.config import as_options


def test_defaults() -> None:
    options = WrapOptions(40)

    assert options.width == 40
    assert options.break_words is True
    assert isinstance(options.word_separator, UnicodeBreakProperties)
    assert isinstance(options.word_splitter, HyphenSplitter)
    assert isinstance(options.wrap_algorithm, OptimalFit)
    assert options.wrap_algorithm.penalties == Penalties()
    assert options.line_ending is LineEnding.LF


@pytest.mark.parametrize("width", [0, -3])
def test_width_must_be_positive(width: int) -> None:
    with pytest.raises(InvalidConfiguration):
        WrapOptions(width)


def test_unknown_fields_are_rejected() -> None:
    with pytest.raises(ValidationError):
        WrapOptions(10, colour="red")


@pytest.mark.parametrize(
    ("field", "value", "expected"),
    [
        ("word_separator", "AsciiSpace", AsciiSpace),
        ("word_separator", "unicode-break-properties", UnicodeBreakProperties),
        ("word_splitter", "none", NoHyphenation),
        ("word_splitter", "dictionary", Hyphenator),
        ("wrap_algorithm", "first_fit", FirstFit),
        ("wrap_algorithm", "OptimalFit", OptimalFit),
    ],
)
def test_components_resolve_by_name(field: str, value: str, expected: type) -> None:
    options = WrapOptions(10, **{field: value})

    assert isinstance(getattr(options, field), expected)


@pytest.mark.parametrize(
    ("field", "value"),
    [
        ("word_separator", "tabs"),
        ("word_splitter", "syllables"),
        ("wrap_algorithm", "best-fit"),
        ("word_splitter", object()),
    ],
)
def test_invalid_components(field: str, value: object) -> None:
    with pytest.raises(InvalidConfiguration):
        WrapOptions(10, **{field: value})


def test_penalties_reach_optimal_fit() -> None:
    options = WrapOptions(10, penalties=Penalties(hyphen_penalty=5))

    assert options.wrap_algorithm.penalties.hyphen_penalty == 5


def test_explicit_algorithm_keeps_its_penalties() -> None:
    algorithm = OptimalFit(Penalties(nline_penalty=10))

    assert WrapOptions(10, wrap_algorithm=algorithm).wrap_algorithm is algorithm


def test_explicit_algorithm_penalties_win_over_options_penalties() -> None:
    algorithm = OptimalFit(Penalties(nline_penalty=10))

    options = WrapOptions(10, penalties=Penalties(hyphen_penalty=5), wrap_algorithm=algorithm)

    assert options.wrap_algorithm.penalties.nline_penalty == 10
    assert options.wrap_algorithm.penalties.hyphen_penalty == 25
    assert options.replace(width=20).wrap_algorithm is algorithm


def test_options_penalties_apply_to_default_algorithm_instance() -> None:
    options = WrapOptions(10, penalties=Penalties(hyphen_penalty=5), wrap_algorithm=OptimalFit())

    assert options.wrap_algorithm.penalties.hyphen_penalty == 5


def test_line_ending_names() -> None:
    assert WrapOptions(10, line_ending="crlf").line_ending is LineEnding.CRLF
    assert WrapOptions(10, line_ending="\r\n").line_ending is LineEnding.CRLF
    with pytest.raises(InvalidConfiguration):
        WrapOptions(10, line_ending="\r")


def test_line_widths_deduct_indents() -> None:
    options = WrapOptions(6, initial_indent="* ", subsequent_indent="你好你好")

    assert options.line_widths() == (4, 0)


def test_replace_returns_validated_copy() -> None:
    options = WrapOptions(10, initial_indent="> ")

    wider = options.replace(width=20)

    assert wider.width == 20
    assert wider.initial_indent == "> "
    assert options.width == 10
    with pytest.raises(InvalidConfiguration):
        options.replace(width=0)


def test_replace_penalties_rebuilds_algorithm() -> None:
    options = WrapOptions(10, penalties=Penalties(hyphen_penalty=5))

    changed = options.replace(penalties=Penalties(hyphen_penalty=50))

    assert changed.wrap_algorithm.penalties.hyphen_penalty == 50


def test_as_options() -> None:
    options = WrapOptions(10)

    assert as_options(options) is options
    assert as_options(12).width == 12


def test_penalty_defaults() -> None:
    penalties = Penalties()

    assert penalties.nline_penalty == 1000
    assert penalties.overflow_penalty == 2500
    assert penalties.short_last_line_fraction == 0.25
    assert penalties.short_last_line_penalty == 25
    assert penalties.hyphen_penalty == 25


def test_penalty_aliases() -> None:
    penalties = Penalties(nline=5, overflow=6, hyphen=7)

    assert (penalties.nline_penalty, penalties.overflow_penalty, penalties.hyphen_penalty) == (5, 6, 7)


@pytest.mark.parametrize(
    "overrides",
    [
        {"short_last_line_fraction": 0},
        {"short_last_line_fraction": 1.5},
        {"nline_penalty": -1},
        {"overflow_penalty": math.inf},
        {"hyphen_penalty": math.nan},
    ],
)
def test_invalid_penalties(overrides: dict) -> None:
    with pytest.raises(InvalidConfiguration):
        Penalties(**overrides)


def test_penalties_are_frozen() -> None:
    with pytest.raises(ValidationError):
        Penalties().nline_penalty = 1
