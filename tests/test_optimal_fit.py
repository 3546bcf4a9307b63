from __future__ import annotations

from dataclasses import dataclass
import logging
import math
import random

import pytest

from wrapsmith.algorithms import (
    OptimalFit,
    line_cost,
    online_column_minima,
    smawk_row_minima,
    total_cost,
    wrap_first_fit,
    wrap_optimal_fit,
    wrap_optimal_fit_quadratic,
)
from wrapsmith.core.exceptions import OptimalFitOverflow
from wrapsmith.core.fragments import Fragment, FragmentKind
from wrapsmith.core.penalties import Penalties


@dataclass(frozen=True)
class Box:
    width: float
    whitespace_width: float = 1
    penalty_width: float = 0
    kind: FragmentKind = FragmentKind.WORD


def _random_words(rng: random.Random, count: int) -> list[Fragment]:
    words = [Fragment("x" * rng.randint(1, 10), " ") for _ in range(count - 1)]
    words.append(Fragment("x" * rng.randint(1, 10)))
    return words


def test_smawk_row_minima() -> None:
    matrix = [[3, 2, 4], [5, 3, 2], [6, 4, 1]]

    minima = smawk_row_minima([0, 1, 2], [0, 1, 2], lambda row, col: matrix[row][col])

    assert minima == {0: 1, 1: 2, 2: 2}


@pytest.mark.parametrize("seed", range(5))
def test_smawk_matches_brute_force_on_monge_matrices(seed: int) -> None:
    rng = random.Random(seed)
    xs = sorted(rng.uniform(0, 100) for _ in range(rng.randint(1, 25)))
    ys = sorted(rng.uniform(0, 100) for _ in range(rng.randint(1, 25)))
    matrix = [[(x - y) ** 2 for y in ys] for x in xs]

    minima = smawk_row_minima(range(len(xs)), range(len(ys)), lambda r, c: matrix[r][c])

    for row, values in enumerate(matrix):
        assert values[minima[row]] == min(values)


def test_online_column_minima_matches_dynamic_programming() -> None:
    size = 30

    def cost(minima, i, j):
        return minima[i][1] + (j - i - 3) ** 2

    result = online_column_minima(0.0, size, cost)

    best = [0.0]
    for j in range(1, size):
        best.append(min(best[i] + (j - i - 3) ** 2 for i in range(j)))
    assert [value for _, value in result] == best


def test_line_cost() -> None:
    penalties = Penalties()
    fragments = [Fragment("aaa", " "), Fragment("bb")]

    assert line_cost(fragments, 0, 1, 3, 10, penalties) == 49
    assert line_cost(fragments, 1, 2, 2, 10, penalties) == 1000 + 25
    assert line_cost(fragments, 0, 2, 12, 10, penalties) == 2 * 2500


def test_line_cost_of_hyphenated_line() -> None:
    fragments = [Fragment("ab", "", "-", FragmentKind.BREAK), Fragment("cd")]

    assert line_cost(fragments, 0, 1, 3, 5, Penalties()) == 4 + 25


def test_empty_input_is_one_empty_line() -> None:
    assert wrap_optimal_fit([], [10]) == [0]


def test_balances_lines() -> None:
    # First-fit leaves "b" alone on the last line.
    fragments = [Fragment("aaaa", " ")] * 4 + [Fragment("b")]
    penalties = Penalties(short_last_line_penalty=100)

    assert wrap_first_fit(fragments, [20]) == [4, 5]
    assert wrap_optimal_fit(fragments, [20], penalties) == [3, 5]
    assert wrap_optimal_fit(fragments, [20], Penalties(short_last_line_penalty=0)) == [4, 5]


def _random_penalties(rng: random.Random) -> Penalties:
    return Penalties(
        nline_penalty=rng.uniform(0, 2000),
        overflow_penalty=rng.uniform(100, 5000),
        short_last_line_fraction=rng.uniform(0.1, 1),
        short_last_line_penalty=rng.uniform(0, 200),
        hyphen_penalty=rng.uniform(0, 200),
    )


def _random_pieces(rng: random.Random, count: int) -> list[Fragment]:
    fragments: list[Fragment] = []
    for word in _random_words(rng, count):
        # Cut some words at sub-word break opportunities.
        for _ in range(rng.choice([0, 0, 1, 2])):
            fragments.append(Fragment("x" * rng.randint(1, 6), "", "-", FragmentKind.BREAK))
        fragments.append(word)
    return fragments


@pytest.mark.parametrize("seed", range(40))
def test_online_smawk_matches_quadratic(seed: int) -> None:
    rng = random.Random(seed)
    fragments = _random_pieces(rng, rng.randint(1, 40))
    line_widths = [rng.randint(5, 60), rng.randint(5, 40)]
    penalties = _random_penalties(rng)

    fast = wrap_optimal_fit(fragments, line_widths, penalties)
    slow = wrap_optimal_fit_quadratic(fragments, line_widths, penalties)

    assert math.isclose(
        total_cost(fragments, fast, line_widths, penalties),
        total_cost(fragments, slow, line_widths, penalties),
        rel_tol=1e-9,
        abs_tol=1e-6,
    )


@pytest.mark.parametrize("seed", range(10))
def test_never_worse_than_first_fit(seed: int) -> None:
    rng = random.Random(seed)
    fragments = _random_words(rng, rng.randint(1, 60))
    line_widths = [rng.randint(5, 40)]

    optimal = total_cost(fragments, wrap_optimal_fit(fragments, line_widths), line_widths)
    greedy = total_cost(fragments, wrap_first_fit(fragments, line_widths), line_widths)

    assert optimal <= greedy + 1e-9


def test_overflowing_costs_raise() -> None:
    boxes = [Box(1e308), Box(1e308)]

    with pytest.raises(OptimalFitOverflow):
        wrap_optimal_fit(boxes, [10])


def test_overflowing_costs_fall_back_to_first_fit(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="wrapsmith.algorithms")

    assert OptimalFit().compute_breaks([Box(1e308), Box(1e308)], [10]) == [1, 2]
    assert "first-fit" in caplog.text
