"""Line ending detection and line iteration."""

from __future__ import annotations

from collections.abc import Iterator
from enum import Enum
from typing import Any

from wrapsmith.core.exceptions import InvalidConfiguration


class LineEnding(str, Enum):
    """Supported line terminators."""

    LF = "\n"
    CRLF = "\r\n"

    @classmethod
    def parse(cls, value: Any) -> LineEnding:
        """Resolve a terminator, or one of the names ``lf`` and ``crlf``.

        >>> LineEnding.parse("crlf") is LineEnding.CRLF
        True
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            lowered = value.lower()
            for member in cls:
                if value == member.value or lowered == member.name.lower():
                    return member
        raise InvalidConfiguration(f"Unsupported line ending: {value!r}.")


def split_lines(text: str) -> list[str]:
    """Split on ``"\\n"``, dropping a final ``"\\r"`` from each line.

    Unlike :meth:`str.splitlines`, only LF and CRLF terminate lines. A
    trailing terminator does not produce an empty last line.
    """
    if not text:
        return []
    lines = text.split("\n")
    if text.endswith("\n"):
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def non_empty_lines(text: str) -> Iterator[tuple[str, LineEnding | None]]:
    """Yield the lines holding content together with their terminator.

    >>> list(non_empty_lines("LF\\nCRLF\\r\\n\\r\\n\\nend"))  # doctest: +NORMALIZE_WHITESPACE
    [('LF', <LineEnding.LF: '\\n'>), ('CRLF', <LineEnding.CRLF: '\\r\\n'>), ('end', None)]
    """
    for line in text.split("\n")[:-1]:
        if line.endswith("\r"):
            if len(line) > 1:
                yield line[:-1], LineEnding.CRLF
        elif line:
            yield line, LineEnding.LF
    last = text.rsplit("\n", 1)[-1]
    if last:
        yield last, None


__all__ = ["LineEnding", "non_empty_lines", "split_lines"]
