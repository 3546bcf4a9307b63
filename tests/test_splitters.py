from __future__ import annotations

import pytest

from wrapsmith.core.exceptions import InvalidConfiguration
from wrapsmith.splitters import HyphenSplitter, Hyphenator, NoHyphenation, WordSplitter


def test_no_hyphenation() -> None:
    assert NoHyphenation().split_points("cannot-be-split") == []


@pytest.mark.parametrize(
    ("word", "expected"),
    [
        ("can-be-split", [4, 7]),
        ("--foo-bar", [6]),
        ("foo-", []),
        ("-foo", []),
        ("plain", []),
    ],
)
def test_hyphen_splitter(word: str, expected: list[int]) -> None:
    assert HyphenSplitter().split_points(word) == expected


def test_splitters_satisfy_protocol() -> None:
    assert isinstance(NoHyphenation(), WordSplitter)
    assert isinstance(HyphenSplitter(), WordSplitter)
    assert isinstance(Hyphenator(), WordSplitter)


def test_hyphenator_finds_points_inside_words() -> None:
    word = "hyphenation"
    points = Hyphenator("en_US").split_points(word)

    assert points
    assert points == sorted(set(points))
    assert all(0 < point < len(word) for point in points)


def test_hyphenator_ignores_surrounding_punctuation() -> None:
    hyphenator = Hyphenator("en_US")

    bare = hyphenator.split_points("hyphenation")
    quoted = hyphenator.split_points("(hyphenation),")

    assert quoted == [point + 1 for point in bare]


def test_hyphenator_keeps_existing_hyphens() -> None:
    points = Hyphenator("en_US").split_points("well-known")

    assert 5 in points
    assert 4 not in points


def test_hyphenator_rejects_unknown_language() -> None:
    with pytest.raises(InvalidConfiguration):
        Hyphenator("xx_XX")
