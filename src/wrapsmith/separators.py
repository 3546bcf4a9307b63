"""Word separators: finding the words of a line of text.

Splitting on spaces works for most Western text, but not for scripts written
without spaces (Chinese, Japanese) or for long runs of emojis. The
:class:`UnicodeBreakProperties` separator uses the Unicode line breaking
algorithm (UAX #14) to find break opportunities in such text.

Hyphenation of individual words is left to :mod:`wrapsmith.splitters`.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from functools import lru_cache
from typing import Protocol, runtime_checkable

from wrapsmith.core.fragments import Fragment
from wrapsmith.core.width import ANSI_ESCAPE_PATTERN


# Soft hyphen. Breaking at it would need a fragment that is not contiguous in
# the input, so like U+002D it never creates a break opportunity here.
SOFT_HYPHEN = "\u00ad"


@runtime_checkable
class WordSeparator(Protocol):
    """Capability interface of the word separators."""

    def find_words(self, line: str) -> Iterator[Fragment]: ...


def _words_from_ranges(line: str, ranges: Iterator[tuple[int, int]]) -> Iterator[Fragment]:
    for start, end in ranges:
        yield Fragment.from_text(line[start:end])


@dataclass(frozen=True, slots=True)
class AsciiSpace:
    """Find words by splitting on runs of ``' '`` characters.

    >>> [f.text for f in AsciiSpace().find_words("Hello   World!")]
    ['Hello   ', 'World!']
    """

    name = "ascii-space"

    def find_word_ranges(self, line: str) -> Iterator[tuple[int, int]]:
        start = 0
        in_whitespace = False
        for index, char in enumerate(line):
            if in_whitespace and char != " ":
                yield start, index
                start = index
            in_whitespace = char == " "

        if start < len(line):
            yield start, len(line)

    def find_words(self, line: str) -> Iterator[Fragment]:
        return _words_from_ranges(line, self.find_word_ranges(line))


@lru_cache(maxsize=1)
def line_break_boundaries() -> Callable[[str], Iterator[int]]:
    """Return the UAX #14 boundary finder, importing the Unicode tables once."""
    from uniseg.linebreak import line_break_boundaries as boundaries

    return boundaries


def _strip_with_offsets(line: str) -> tuple[str, dict[int, int]]:
    """Strip escape sequences, mapping stripped offsets to original offsets.

    An offset maps to the first original position that renders at it, so a
    break in front of a character also goes in front of the escape sequences
    preceding that character.
    """
    parts: list[str] = []
    offsets: dict[int, int] = {}
    stripped_length = 0
    position = 0
    for match in ANSI_ESCAPE_PATTERN.finditer(line):
        for index in range(position, match.start()):
            offsets.setdefault(stripped_length, index)
            stripped_length += 1
        parts.append(line[position : match.start()])
        offsets.setdefault(stripped_length, match.start())
        position = match.end()
    for index in range(position, len(line)):
        offsets.setdefault(stripped_length, index)
        stripped_length += 1
    parts.append(line[position:])
    return "".join(parts), offsets


@dataclass(frozen=True, slots=True)
class UnicodeBreakProperties:
    """Find words using the Unicode line breaking algorithm.

    Break opportunities are found between characters of scripts written
    without spaces:

    >>> [f.text for f in UnicodeBreakProperties().find_words("CJK: 你好")]
    ['CJK: ', '你', '好']

    Insert U+2060 (Word Joiner) to keep characters together. Breaks right
    after ``-`` and soft hyphens are suppressed: use a word splitter to allow
    breaking on hyphens.
    """

    name = "unicode-break-properties"

    def find_word_ranges(self, line: str) -> Iterator[tuple[int, int]]:
        if not line:
            return
        stripped, offsets = _strip_with_offsets(line)
        start = 0
        for boundary in line_break_boundaries()(stripped):
            # The final boundary is replaced by the end of the original line
            # so a trailing escape sequence stays with the last word.
            if boundary <= 0 or boundary >= len(stripped):
                continue
            if stripped[boundary - 1] in ("-", SOFT_HYPHEN):
                continue
            end = offsets[boundary]
            if end > start:
                yield start, end
                start = end

        if start < len(line):
            yield start, len(line)

    def find_words(self, line: str) -> Iterator[Fragment]:
        return _words_from_ranges(line, self.find_word_ranges(line))


__all__ = [
    "AsciiSpace",
    "SOFT_HYPHEN",
    "UnicodeBreakProperties",
    "WordSeparator",
    "line_break_boundaries",
]
