from __future__ import annotations

from dataclasses import dataclass

from wrapsmith.algorithms import FirstFit, line_width_at, wrap_first_fit, wrap_fragments
from wrapsmith.core.fragments import FragmentKind


@dataclass(frozen=True)
class Box:
    width: float
    whitespace_width: float = 1
    penalty_width: float = 0
    kind: FragmentKind = FragmentKind.WORD


def test_fills_lines_greedily() -> None:
    assert wrap_first_fit([Box(3), Box(3), Box(3)], [7]) == [2, 3]


def test_empty_input_is_one_empty_line() -> None:
    assert wrap_first_fit([], [10]) == [0]


def test_oversized_fragment_gets_its_own_line() -> None:
    assert wrap_first_fit([Box(10), Box(2)], [5]) == [1, 2]


def test_last_line_width_repeats() -> None:
    assert wrap_first_fit([Box(2)] * 4, [3, 6]) == [1, 3, 4]


def test_split_word_only_joins_when_its_whitespace_fits() -> None:
    fragments = [
        Box(2, whitespace_width=0, kind=FragmentKind.BREAK),
        Box(1),
        Box(1, whitespace_width=0),
    ]

    assert wrap_first_fit(fragments, [3]) == [1, 3]


def test_penalty_width_counts_at_line_end() -> None:
    hyphenated = Box(3, whitespace_width=0, penalty_width=1, kind=FragmentKind.BREAK)
    existing_hyphen = Box(3, whitespace_width=0, kind=FragmentKind.BREAK)
    tail = Box(3, whitespace_width=0)

    assert wrap_first_fit([Box(3), hyphenated, tail], [7]) == [1, 3]
    assert wrap_first_fit([Box(3), existing_hyphen, tail], [7]) == [2, 3]


def test_line_width_at() -> None:
    assert line_width_at([], 3) == 0
    assert line_width_at([5, 8], 0) == 5
    assert line_width_at([5, 8], 7) == 8


def test_wrap_fragments_slices_any_fragment_type() -> None:
    boxes = [Box(3), Box(3), Box(3)]

    lines = wrap_fragments(boxes, [7], FirstFit())

    assert [len(line) for line in lines] == [2, 1]
    assert lines[1][0] is boxes[2]
