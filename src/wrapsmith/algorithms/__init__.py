"""Wrap algorithms arranging fragments into lines.

Two algorithms are available:

* :class:`FirstFit` fills each line greedily, like most word processors;
* :class:`OptimalFit` balances the whole paragraph by minimising the total
  cost of its lines.

Both only consume widths (see :class:`~wrapsmith.core.fragments.SupportsWidths`)
and return the exclusive end index of every line.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
import logging
from typing import Protocol, TypeVar, runtime_checkable

from wrapsmith.core.exceptions import OptimalFitOverflow
from wrapsmith.core.fragments import SupportsWidths
from wrapsmith.core.penalties import Penalties

from .first_fit import line_width_at, wrap_first_fit
from .optimal_fit import line_cost, total_cost, wrap_optimal_fit, wrap_optimal_fit_quadratic
from .smawk import online_column_minima, smawk_row_minima


logger = logging.getLogger(__name__)

T = TypeVar("T", bound=SupportsWidths)


@runtime_checkable
class WrapAlgorithm(Protocol):
    """Capability interface of the wrap algorithms."""

    def compute_breaks(
        self, fragments: Sequence[SupportsWidths], line_widths: Sequence[float]
    ) -> list[int]: ...


@dataclass(frozen=True, slots=True)
class FirstFit:
    """Greedy wrapping, see :func:`~wrapsmith.algorithms.first_fit.wrap_first_fit`."""

    name = "first-fit"

    def compute_breaks(
        self, fragments: Sequence[SupportsWidths], line_widths: Sequence[float]
    ) -> list[int]:
        return wrap_first_fit(fragments, line_widths)


@dataclass(frozen=True, slots=True)
class OptimalFit:
    """Balanced wrapping, see :func:`~wrapsmith.algorithms.optimal_fit.wrap_optimal_fit`.

    Falls back to first-fit when a line cost overflows.
    """

    penalties: Penalties = field(default_factory=Penalties)

    name = "optimal-fit"

    def compute_breaks(
        self, fragments: Sequence[SupportsWidths], line_widths: Sequence[float]
    ) -> list[int]:
        try:
            return wrap_optimal_fit(fragments, line_widths, self.penalties)
        except OptimalFitOverflow as exc:
            logger.debug("%s Falling back to first-fit.", exc)
            return wrap_first_fit(fragments, line_widths)


def wrap_fragments(
    fragments: Sequence[T],
    line_widths: Sequence[float],
    algorithm: WrapAlgorithm | None = None,
) -> list[Sequence[T]]:
    """Split ``fragments`` into consecutive lines.

    >>> from wrapsmith.core.fragments import Fragment
    >>> words = [Fragment.from_text(w) for w in ("aaa ", "bb ", "cc")]
    >>> [[f.word for f in line] for line in wrap_fragments(words, [6], FirstFit())]
    [['aaa', 'bb'], ['cc']]
    """
    algorithm = algorithm or OptimalFit()
    lines: list[Sequence[T]] = []
    start = 0
    for end in algorithm.compute_breaks(fragments, line_widths):
        lines.append(fragments[start:end])
        start = end
    return lines


__all__ = [
    "FirstFit",
    "OptimalFit",
    "WrapAlgorithm",
    "line_cost",
    "line_width_at",
    "online_column_minima",
    "smawk_row_minima",
    "total_cost",
    "wrap_first_fit",
    "wrap_fragments",
    "wrap_optimal_fit",
    "wrap_optimal_fit_quadratic",
]
