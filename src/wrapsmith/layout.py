"""Wrapping and filling text into lines of a given width.

>>> wrap("Memory safety without garbage collection.", 15)
['Memory safety', 'without garbage', 'collection.']
>>> print(fill("Memory safety without garbage collection.", 15))
Memory safety
without garbage
collection.
"""

from __future__ import annotations

from collections.abc import Sequence

from wrapsmith.algorithms import total_cost
from wrapsmith.core.config import WrapOptions, as_options
from wrapsmith.core.exceptions import InvalidConfiguration
from wrapsmith.core.fragments import Fragment, break_words, split_words
from wrapsmith.core.line_ending import LineEnding, non_empty_lines, split_lines
from wrapsmith.core.width import display_width


# Characters allowed in the indentation detected by `unfill`.
PREFIX_CHARS = " -+*>#/"


def _assemble(fragments: Sequence[Fragment], indent: str) -> str:
    if not fragments:
        return ""
    *body, last = fragments
    return indent + "".join(fragment.text for fragment in body) + last.word + last.penalty


def _line_fragments(
    line: str, options: WrapOptions, first: bool
) -> tuple[list[Fragment], tuple[int, int]]:
    initial_width, subsequent_width = options.line_widths()
    if not first:
        initial_width = subsequent_width
    words = options.word_separator.find_words(line)
    pieces = split_words(words, options.word_splitter)
    if not options.break_words:
        return list(pieces), (initial_width, subsequent_width)

    fragments = break_words(pieces, subsequent_width)
    if first and options.initial_indent:
        # Lets the first line hold nothing but its indent.
        fragments.insert(0, Fragment(""))
    return fragments, (initial_width, subsequent_width)


def _layout_line(
    line: str, options: WrapOptions, first: bool
) -> list[tuple[str, Sequence[Fragment]]] | None:
    """Return the indent and fragments of every output line, ``None`` if it fits as is."""
    indent = options.initial_indent if first else options.subsequent_indent
    if not indent and display_width(line) <= options.width:
        return None

    fragments, line_widths = _line_fragments(line, options, first)
    layout: list[tuple[str, Sequence[Fragment]]] = []
    start = 0
    for end in options.wrap_algorithm.compute_breaks(fragments, line_widths):
        indent = options.initial_indent if first and not layout else options.subsequent_indent
        layout.append((indent, fragments[start:end]))
        start = end
    return layout


def _line_width(fragments: Sequence[Fragment]) -> int:
    last = fragments[-1]
    width = sum(fragment.width + fragment.whitespace_width for fragment in fragments)
    return width - last.whitespace_width + last.penalty_width


def _wrap_line(line: str, options: WrapOptions, lines: list[str]) -> None:
    layout = _layout_line(line, options, first=not lines)
    if layout is None:
        lines.append(line.rstrip(" "))
        return
    lines.extend(_assemble(fragments, indent) for indent, fragments in layout)


def wrap(text: str, width_or_options: int | WrapOptions) -> list[str]:
    """Wrap ``text`` into lines no wider than the configured width.

    Each line of the input is wrapped on its own; blank lines are kept as
    empty lines. Trailing whitespace is removed from the output lines. A line
    only exceeds the width when it holds a single fragment that cannot be
    broken, for instance a long word with ``break_words=False``.

    ``wrap("")`` returns an empty list.
    """
    options = as_options(width_or_options)
    if not text:
        return []

    lines: list[str] = []
    for line in text.split(options.line_ending.value):
        _wrap_line(line, options, lines)
    return lines


def fill(text: str, width_or_options: int | WrapOptions) -> str:
    """Wrap ``text`` and join the lines with the configured line ending."""
    options = as_options(width_or_options)
    return options.line_ending.value.join(wrap(text, options))


def try_wrap(text: str, width_or_options: int | WrapOptions) -> list[int]:
    """Return the display width of every line `wrap` would produce.

    The lines are laid out but never assembled into strings. Indents count
    towards the widths.

    >>> try_wrap("Memory safety without garbage collection.", 15)
    [13, 15, 11]
    """
    options = as_options(width_or_options)
    if not text:
        return []

    widths: list[int] = []
    for index, line in enumerate(text.split(options.line_ending.value)):
        layout = _layout_line(line, options, first=index == 0)
        if layout is None:
            widths.append(display_width(line.rstrip(" ")))
            continue
        for indent, fragments in layout:
            # `_assemble` drops the indent of a line without fragments.
            widths.append(display_width(indent) + _line_width(fragments) if fragments else 0)
    return widths


def wrap_cost(text: str, width_or_options: int | WrapOptions) -> float:
    """Score the layout produced by `wrap` with the optimal-fit cost model.

    The penalties are those of the configured algorithm when it has any,
    otherwise ``options.penalties`` or the defaults. Useful to compare
    algorithms or penalty settings on the same text.
    """
    options = as_options(width_or_options)
    penalties = getattr(options.wrap_algorithm, "penalties", None) or options.penalties
    cost = 0.0
    if not text:
        return cost
    for index, line in enumerate(text.split(options.line_ending.value)):
        fragments, line_widths = _line_fragments(line, options, first=index == 0)
        breaks = options.wrap_algorithm.compute_breaks(fragments, line_widths)
        cost += total_cost(fragments, breaks, line_widths, penalties)
    return cost


def unfill(text: str) -> tuple[str, WrapOptions]:
    """Join a filled paragraph back into a single line.

    Returns the text together with options describing how it was filled: the
    width of its widest line, its indentation and its line ending.

    >>> text, options = unfill("* This is an\\n  example of\\n  a list.\\n")
    >>> text
    'This is an example of a list.\\n'
    >>> options.initial_indent, options.subsequent_indent
    ('* ', '  ')

    Indentation is made of the characters in :data:`PREFIX_CHARS`, so
    ``"> "`` quotes and ``"// "`` comments are detected as well.
    """
    initial_indent = ""
    subsequent_indent = ""
    width = 0
    for index, line in enumerate(split_lines(text)):
        width = max(width, display_width(line))
        prefix = line[: len(line) - len(line.lstrip(PREFIX_CHARS))]
        if index == 0:
            initial_indent = prefix
        elif index == 1:
            subsequent_indent = prefix
        else:
            common = 0
            for a, b in zip(prefix, subsequent_indent):
                if a != b:
                    break
                common += 1
            subsequent_indent = subsequent_indent[:common]

    parts: list[str] = []
    detected: LineEnding | None = None
    for index, (line, ending) in enumerate(non_empty_lines(text)):
        if index == 0:
            parts.append(line[len(initial_indent) :])
        else:
            parts.append(" ")
            parts.append(line[len(subsequent_indent) :])
        if detected is None:
            detected = ending
        elif detected is LineEnding.CRLF and ending is LineEnding.LF:
            detected = LineEnding.LF
    line_ending = detected or LineEnding.LF

    unfilled = "".join(parts)
    if text.endswith(line_ending.value):
        unfilled += line_ending.value

    options = WrapOptions(
        width=max(width, 1),
        initial_indent=initial_indent,
        subsequent_indent=subsequent_indent,
        line_ending=line_ending,
    )
    return unfilled, options


def refill(filled_text: str, width_or_options: int | WrapOptions) -> str:
    """Refill a paragraph to a new width, keeping its indentation.

    >>> refill("> Memory safety without\\n> garbage collection.\\n", 16)
    '> Memory safety\\n> without\\n> garbage\\n> collection.\\n'
    """
    new_options = as_options(width_or_options)
    text, options = unfill(filled_text)
    ending = options.line_ending.value
    trailing = text.endswith(ending)
    if trailing:
        text = text[: -len(ending)]

    new_options = new_options.replace(
        initial_indent=options.initial_indent,
        subsequent_indent=options.subsequent_indent,
    )
    refilled = fill(text, new_options)
    if trailing:
        refilled += new_options.line_ending.value
    return refilled


def wrap_columns(
    text: str,
    columns: int,
    total_width_or_options: int | WrapOptions,
    left_gap: str,
    middle_gap: str,
    right_gap: str,
) -> list[str]:
    """Wrap ``text`` into ``columns`` columns laid out side by side.

    The total width is shared between the gaps and the columns; the column
    width is at least one. Lines are padded with spaces, so every output line
    has the same width unless a column overflows.

    >>> wrap_columns("1 2 3 4 5 6 7", 3, 21, "| ", " | ", " |")
    ['| 1 2 | 5 6 |       |', '| 3 4 | 7   |       |']
    """
    if columns < 1:
        raise InvalidConfiguration(f"At least one column is required, got {columns}.")
    options = as_options(total_width_or_options)
    inner_width = max(
        options.width
        - display_width(left_gap)
        - display_width(right_gap)
        - display_width(middle_gap) * (columns - 1),
        0,
    )
    column_width = max(inner_width // columns, 1)
    last_column_padding = " " * (inner_width % column_width)
    wrapped = wrap(text, options.replace(width=column_width))
    lines_per_column = -(-len(wrapped) // columns)

    lines: list[str] = []
    for line_number in range(lines_per_column):
        parts = [left_gap]
        for column in range(columns):
            index = line_number + column * lines_per_column
            if index < len(wrapped):
                cell = wrapped[index]
                parts.append(cell + " " * (column_width - display_width(cell)))
            else:
                parts.append(" " * column_width)
            parts.append(last_column_padding if column == columns - 1 else middle_gap)
        parts.append(right_gap)
        lines.append("".join(parts))
    return lines


__all__ = [
    "PREFIX_CHARS",
    "fill",
    "refill",
    "try_wrap",
    "unfill",
    "wrap",
    "wrap_columns",
    "wrap_cost",
]
