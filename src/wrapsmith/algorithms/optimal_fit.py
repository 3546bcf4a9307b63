"""Optimal-fit wrapping: minimise the total cost of all lines.

The cost of a line is built from the :class:`~wrapsmith.core.penalties.Penalties`:

* every line after the first costs ``nline_penalty``;
* a line wider than its target costs ``overflow_penalty`` per extra column;
* any other line but the last costs the square of the gap it leaves;
* a last line made of a single fragment narrower than
  ``short_last_line_fraction`` of the target costs ``short_last_line_penalty``;
* a line ending at a sub-word break costs ``hyphen_penalty``.

Minimising the sum is a shortest path problem over the break positions. Once
the first line is set aside, every line shares one target and the cost matrix
is totally monotone, so the column minima come from the online SMAWK algorithm
in linear time. The first line is compared with those minima column by column,
and the last column is evaluated exhaustively, which keeps the result exact
even where the short last line penalty bends monotonicity.
"""

from __future__ import annotations

from collections.abc import Sequence
import math

from wrapsmith.algorithms.first_fit import line_width_at
from wrapsmith.algorithms.smawk import Minimum, online_column_minima
from wrapsmith.core.exceptions import OptimalFitOverflow
from wrapsmith.core.fragments import FragmentKind, SupportsWidths
from wrapsmith.core.penalties import Penalties


def line_cost(
    fragments: Sequence[SupportsWidths],
    start: int,
    end: int,
    line_width: float,
    target_width: float,
    penalties: Penalties,
) -> float:
    """Return the cost of a line holding ``fragments[start:end]``.

    ``line_width`` is the rendered width of the line: all fragments with
    their whitespace, except the last one which contributes its penalty
    instead of its whitespace.
    """
    cost = penalties.nline_penalty if start > 0 else 0.0

    if line_width > target_width:
        cost += (line_width - target_width) * penalties.overflow_penalty
    elif end < len(fragments):
        gap = target_width - line_width
        cost += gap * gap
    elif start + 1 == end and line_width < target_width * penalties.short_last_line_fraction:
        cost += penalties.short_last_line_penalty

    if fragments[end - 1].kind is FragmentKind.BREAK:
        cost += penalties.hyphen_penalty
    return cost


class _LineCosts:
    """Cost of the line ``fragments[i:j]`` given the best layout up to ``i``.

    The first line is the only one measured against ``line_widths[0]``, so it
    is kept out of the matrix: row ``0`` is infinite and :meth:`best` weighs
    the first line against the row minima of every column.
    """

    def __init__(
        self,
        fragments: Sequence[SupportsWidths],
        line_widths: Sequence[float],
        penalties: Penalties,
    ) -> None:
        self.fragments = fragments
        self.line_widths = line_widths
        self.penalties = penalties
        self.offsets = [0.0]
        for fragment in fragments:
            self.offsets.append(self.offsets[-1] + fragment.width + fragment.whitespace_width)
        self.best_layouts: list[Minimum] = [(0, 0.0)]
        self._line_numbers = [0]

    def width(self, start: int, end: int) -> float:
        last = self.fragments[end - 1]
        return (
            self.offsets[end]
            - self.offsets[start]
            - last.whitespace_width
            + last.penalty_width
        )

    def line(self, start: int, end: int) -> float:
        target = max(1, line_width_at(self.line_widths, self.line_number(start)))
        return line_cost(
            self.fragments, start, end, self.width(start, end), target, self.penalties
        )

    def first_line(self, end: int) -> float:
        cost = self.line(0, end)
        if not math.isfinite(cost):
            raise OptimalFitOverflow((0, end), cost)
        return cost

    def best(self, position: int, minima: Sequence[Minimum]) -> Minimum:
        """Return the cheapest ``(start, cost)`` of a layout ending at ``position``."""
        layouts = self.best_layouts
        while len(layouts) <= position:
            end = len(layouts)
            first = (0, self.first_line(end))
            layouts.append(first if first[1] <= minima[end][1] else minima[end])
        return layouts[position]

    def line_number(self, position: int) -> int:
        numbers = self._line_numbers
        while len(numbers) <= position:
            numbers.append(numbers[self.best_layouts[len(numbers)][0]] + 1)
        return numbers[position]

    def __call__(self, minima: Sequence[Minimum], start: int, end: int) -> float:
        if start == 0:
            return math.inf
        cost = self.best(start, minima)[1] + self.line(start, end)
        if not math.isfinite(cost):
            raise OptimalFitOverflow((start, end), cost)
        return cost


def _backtrack(layouts: Sequence[Minimum], size: int) -> list[int]:
    ends: list[int] = []
    position = size
    while position > 0:
        ends.append(position)
        position = layouts[position][0]
    ends.reverse()
    return ends


def _last_line(costs: _LineCosts, minima: Sequence[Minimum], size: int) -> list[int]:
    # The short last line term breaks monotonicity, so the last column is
    # searched exhaustively.
    final = (0, costs.first_line(size))
    for start in range(1, size):
        cost = costs(minima, start, size)
        if cost < final[1]:
            final = (start, cost)
    costs.best(size - 1, minima)
    return _backtrack([*costs.best_layouts[:size], final], size)


def wrap_optimal_fit(
    fragments: Sequence[SupportsWidths],
    line_widths: Sequence[float],
    penalties: Penalties | None = None,
) -> list[int]:
    """Find the line breaks with the lowest total cost.

    Returns the exclusive end index of every line; an empty sequence wraps
    into a single empty line. Among layouts of equal cost, each line starts
    at the earliest position.

    The search is exact for one or two ``line_widths`` (a first line and the
    lines after it), which is all `wrap` ever passes. With three or more
    widths the target of a line depends on how many lines precede it, the
    cost matrix stops being totally monotone and the result may cost more
    than the one of :func:`wrap_optimal_fit_quadratic`.

    Raises :class:`~wrapsmith.core.exceptions.OptimalFitOverflow` when a cost
    cannot be represented, for instance with fragments of astronomical width.
    """
    if not fragments:
        return [0]
    penalties = penalties or Penalties()
    size = len(fragments)
    costs = _LineCosts(fragments, line_widths, penalties)
    minima = online_column_minima(0.0, size + 1, costs)
    return _last_line(costs, minima, size)


def wrap_optimal_fit_quadratic(
    fragments: Sequence[SupportsWidths],
    line_widths: Sequence[float],
    penalties: Penalties | None = None,
) -> list[int]:
    """Reference implementation of :func:`wrap_optimal_fit` in ``O(n²)``.

    Every predecessor of every position is evaluated, so no monotonicity is
    assumed.
    """
    if not fragments:
        return [0]
    penalties = penalties or Penalties()
    size = len(fragments)
    costs = _LineCosts(fragments, line_widths, penalties)
    minima: list[Minimum] = [(0, 0.0), (0, math.inf)]
    for end in range(2, size + 1):
        best = (1, costs(minima, 1, end))
        for start in range(2, end):
            cost = costs(minima, start, end)
            if cost < best[1]:
                best = (start, cost)
        minima.append(best)
    return _last_line(costs, minima, size)


def total_cost(
    fragments: Sequence[SupportsWidths],
    ends: Sequence[int],
    line_widths: Sequence[float],
    penalties: Penalties | None = None,
) -> float:
    """Sum the line costs of the layout described by ``ends``."""
    penalties = penalties or Penalties()
    costs = _LineCosts(fragments, line_widths, penalties)
    cost = 0.0
    start = 0
    for line_number, end in enumerate(ends):
        if end == start:
            continue
        target = max(1, line_width_at(line_widths, line_number))
        cost += line_cost(fragments, start, end, costs.width(start, end), target, penalties)
        start = end
    return cost


__all__ = [
    "line_cost",
    "total_cost",
    "wrap_optimal_fit",
    "wrap_optimal_fit_quadratic",
]
