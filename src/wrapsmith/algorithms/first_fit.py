"""Greedy first-fit wrapping."""

from __future__ import annotations

from collections.abc import Sequence

from wrapsmith.core.fragments import FragmentKind, SupportsWidths


def line_width_at(line_widths: Sequence[float], line_number: int) -> float:
    """Return the width of line ``line_number``; the last entry repeats."""
    if not line_widths:
        return 0
    if line_number < len(line_widths):
        return line_widths[line_number]
    return line_widths[-1]


def wrap_first_fit(fragments: Sequence[SupportsWidths], line_widths: Sequence[float]) -> list[int]:
    """Put as many fragments as possible on each line before moving on.

    Returns the exclusive end index of every line. A fragment is never left
    alone on a line when it could have gone to the previous one, so the
    result can be unbalanced:

    * a short word on a line followed by a line holding a long word;
    * the last piece of a hyphenated word alone on its line.

    A fragment wider than the line still gets a line of its own. The last
    piece of a split word only joins the current line when its trailing
    whitespace fits as well; otherwise the line ends at the preceding break
    opportunity.

    An empty sequence wraps into a single empty line.
    """
    ends: list[int] = []
    start = 0
    width = 0.0
    for index, fragment in enumerate(fragments):
        line_width = line_width_at(line_widths, len(ends))
        needed = width + fragment.width + fragment.penalty_width
        if index > start and fragments[index - 1].kind is FragmentKind.BREAK:
            needed += fragment.whitespace_width
        if index > start and needed > line_width:
            ends.append(index)
            start = index
            width = 0.0
        width += fragment.width + fragment.whitespace_width

    ends.append(len(fragments))
    return ends


__all__ = ["line_width_at", "wrap_first_fit"]
