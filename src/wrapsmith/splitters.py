"""Word splitters: where a single word may be broken across lines.

A splitter reports split points as offsets *after* the split, so that
``word[:point]`` and ``word[point:]`` are the two halves. Splitting on an
existing hyphen keeps the hyphen on the first half and adds no glyph; a
dictionary split point makes the line assembler insert a ``"-"``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import logging
import re
from typing import Any, Protocol, runtime_checkable

import pyphen

from wrapsmith.core.exceptions import InvalidConfiguration


logger = logging.getLogger(__name__)

_EDGE_PUNCTUATION = re.compile(r"^(\W*)(.*?)(\W*)$", re.DOTALL)


@runtime_checkable
class WordSplitter(Protocol):
    """Capability interface of the word splitters."""

    def split_points(self, word: str) -> list[int]: ...


@dataclass(frozen=True, slots=True)
class NoHyphenation:
    """Never split words.

    >>> NoHyphenation().split_points("cannot-be-split")
    []
    """

    name = "none"

    def split_points(self, word: str) -> list[int]:
        return []


@dataclass(frozen=True, slots=True)
class HyphenSplitter:
    """Split words on the hyphens they already contain.

    Only hyphens surrounded by alphanumeric characters are used, which keeps
    option names such as ``--foo-bar`` from being split on the leading dashes.

    >>> HyphenSplitter().split_points("can-be-split")
    [4, 7]
    """

    name = "hyphen"

    def split_points(self, word: str) -> list[int]:
        points: list[int] = []
        index = word.find("-")
        while index != -1:
            before = word[index - 1] if index > 0 else ""
            after = word[index + 1] if index + 1 < len(word) else ""
            if before.isalnum() and after.isalnum():
                points.append(index + 1)
            index = word.find("-", index + 1)
        return points


@dataclass(frozen=True)
class Hyphenator:
    """Language-aware hyphenation backed by the pyphen dictionaries.

    Existing hyphens remain valid split points. Leading and trailing
    punctuation is kept out of the dictionary lookup, so ``"(hyphenation),"``
    hyphenates like ``"hyphenation"``.
    """

    language: str = "en_US"
    left: int = 2
    right: int = 2
    _dictionary: Any = field(default=None, init=False, repr=False, compare=False)

    name = "dictionary"

    def __post_init__(self) -> None:
        resolved = pyphen.language_fallback(self.language)
        if resolved is None:
            raise InvalidConfiguration(f"No hyphenation dictionary available for '{self.language}'.")
        logger.debug("Loading hyphenation dictionary %s for %s", resolved, self.language)
        object.__setattr__(
            self, "_dictionary", pyphen.Pyphen(lang=resolved, left=self.left, right=self.right)
        )

    def split_points(self, word: str) -> list[int]:
        match = _EDGE_PUNCTUATION.match(word)
        prefix, core = match.group(1), match.group(2)
        # Dictionary points in front of an existing hyphen would orphan it.
        points = {
            len(prefix) + int(position)
            for position in self._dictionary.positions(core)
            if core[int(position)] != "-"
        }
        points.update(HyphenSplitter().split_points(word))
        return sorted(point for point in points if 0 < point < len(word))


__all__ = ["HyphenSplitter", "Hyphenator", "NoHyphenation", "WordSplitter"]
