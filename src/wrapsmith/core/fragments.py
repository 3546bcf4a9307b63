"""Fragments: the measured units that wrap algorithms arrange into lines.

A fragment is an abstract *word* followed by optional *whitespace*. When the
fragment falls at the end of a line the whitespace is dropped and the
*penalty* text is emitted instead (``"-"`` when a word was hyphenated at a
point that is not already a hyphen).

The wrap algorithms only look at the widths of these three parts, so anything
exposing them (see :class:`SupportsWidths`) can be wrapped: words, but also
tasks to schedule into working days or boxes to pack into rows.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import TYPE_CHECKING, Protocol

from wrapsmith.core.width import char_width, display_width, is_ansi_escape, iter_tokens


if TYPE_CHECKING:
    from wrapsmith.splitters import WordSplitter


class FragmentKind(str, Enum):
    """Classification of a fragment."""

    WORD = "word"
    WHITESPACE = "whitespace"
    BREAK = "break"


class SupportsWidths(Protocol):
    """Minimal interface consumed by the wrap algorithms."""

    @property
    def width(self) -> float: ...

    @property
    def whitespace_width(self) -> float: ...

    @property
    def penalty_width(self) -> float: ...

    @property
    def kind(self) -> FragmentKind: ...


@dataclass(frozen=True, slots=True)
class Fragment:
    """A piece of wrappable text together with its trailing whitespace."""

    word: str
    whitespace: str = ""
    penalty: str = ""
    kind: FragmentKind = FragmentKind.WORD
    width: int = field(init=False, repr=False, compare=False)
    whitespace_width: int = field(init=False, repr=False, compare=False)
    penalty_width: int = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "width", display_width(self.word))
        object.__setattr__(self, "whitespace_width", display_width(self.whitespace))
        object.__setattr__(self, "penalty_width", display_width(self.penalty))

    @classmethod
    def from_text(cls, text: str) -> Fragment:
        """Build a fragment, taking a trailing run of ``' '`` as its whitespace.

        >>> Fragment.from_text("Hello  ")
        Fragment(word='Hello', whitespace='  ', penalty='', kind=<FragmentKind.WORD: 'word'>)
        """
        word = text.rstrip(" ")
        kind = FragmentKind.WORD if word else FragmentKind.WHITESPACE
        return cls(word, text[len(word) :], "", kind)

    @property
    def is_break(self) -> bool:
        """Whether the fragment ends at a sub-word break opportunity."""
        return self.kind is FragmentKind.BREAK

    @property
    def text(self) -> str:
        """The fragment as it appears when it does not end a line."""
        return self.word + self.whitespace

    def break_apart(self, line_width: int) -> Iterator[Fragment]:
        """Break the word into pieces of at most ``line_width`` columns.

        Pieces always hold at least one code point, so a character wider than
        ``line_width`` still gets a piece of its own. The whitespace, penalty
        and kind of this fragment move to the last piece; no hyphen is added.
        """
        start = 0
        offset = 0
        width = 0
        for token in iter_tokens(self.word):
            if not is_ansi_escape(token):
                token_width = char_width(token)
                if width > 0 and width + token_width > line_width:
                    yield Fragment(self.word[start:offset])
                    start = offset
                    width = 0
                width += token_width
            offset += len(token)

        if start < len(self.word):
            yield replace(self, word=self.word[start:])


def split_words(fragments: Iterable[Fragment], splitter: WordSplitter) -> Iterator[Fragment]:
    """Split every fragment at the points reported by ``splitter``.

    All words are split regardless of their length: deciding which pieces end
    up together on a line is the job of the wrap algorithm. Pieces before a
    split point are break opportunities whose penalty is a hyphen, unless the
    piece already ends with one.
    """
    for fragment in fragments:
        word = fragment.word
        points = sorted({point for point in splitter.split_points(word) if 0 < point < len(word)})
        if not points:
            yield fragment
            continue

        previous = 0
        for point in points:
            piece = word[previous:point]
            penalty = "" if piece.endswith("-") else "-"
            yield Fragment(piece, "", penalty, FragmentKind.BREAK)
            previous = point
        yield replace(fragment, word=word[previous:])


def break_words(fragments: Iterable[Fragment], line_width: int) -> list[Fragment]:
    """Forcibly break fragments wider than ``line_width`` into smaller ones."""
    shortened: list[Fragment] = []
    for fragment in fragments:
        if fragment.width > line_width:
            shortened.extend(fragment.break_apart(line_width))
        else:
            shortened.append(fragment)
    return shortened


__all__ = [
    "Fragment",
    "FragmentKind",
    "SupportsWidths",
    "break_words",
    "split_words",
]
