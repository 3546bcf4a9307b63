"""Display width computation for terminal text.

Text is measured in columns: ANSI control sequences (typically used for
colours) are invisible, East Asian wide characters and most emojis take two
columns, and combining marks, zero width joiners and variation selectors take
none.
"""

from __future__ import annotations

from collections.abc import Iterator
import re

from wcwidth import wcwidth


# A CSI ("Control Sequence Introducer") sequence runs until the first final
# byte in the 0x40-0x7E range. An unterminated sequence swallows the rest.
ANSI_ESCAPE_PATTERN = re.compile(r"\x1b\[[^\x40-\x7e]*[\x40-\x7e]?")

_TOKEN_PATTERN = re.compile(r"\x1b\[[^\x40-\x7e]*[\x40-\x7e]?|.", re.DOTALL)


def char_width(char: str) -> int:
    """Return the number of columns occupied by a single code point."""
    width = wcwidth(char)
    # wcwidth reports -1 for control characters, which do not advance the cursor.
    return width if width > 0 else 0


def is_ansi_escape(token: str) -> bool:
    return token.startswith("\x1b[")


def iter_tokens(text: str) -> Iterator[str]:
    """Yield escape sequences and single code points in order."""
    for match in _TOKEN_PATTERN.finditer(text):
        yield match.group(0)


def strip_ansi(text: str) -> str:
    """Remove ANSI escape sequences from ``text``."""
    if "\x1b" not in text:
        return text
    return ANSI_ESCAPE_PATTERN.sub("", text)


def display_width(text: str) -> int:
    """Compute the displayed width of ``text`` while skipping ANSI escape sequences.

    >>> display_width("Café Plain")
    10
    >>> display_width("\\x1b[31mCafé Rouge\\x1b[0m")
    10
    >>> display_width("你好")
    4

    The width of a string cannot always be computed from the string alone:
    emoji modifier sequences such as ``"👨\\u200d🦰"`` are measured per code
    point (the joiner counts zero), so the result may be wider than what a
    given terminal renders.
    """
    if text.isascii() and text.isprintable():
        return len(text)
    return sum(char_width(char) for char in strip_ansi(text))


__all__ = [
    "ANSI_ESCAPE_PATTERN",
    "char_width",
    "display_width",
    "is_ansi_escape",
    "iter_tokens",
    "strip_ansi",
]
