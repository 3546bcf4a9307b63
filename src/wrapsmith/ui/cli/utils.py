"""Auxiliary helpers used by the CLI command."""

from __future__ import annotations

from pathlib import Path
import re
import shutil

import typer


_PARAGRAPH_BREAK = re.compile(r"(\r?\n[ \t]*\r?\n(?:[ \t]*\r?\n)*)")


def termwidth(fallback: int = 80) -> int:
    """Return the width of the terminal in columns.

    Honours the ``COLUMNS`` environment variable and falls back to ``fallback``
    when the output is not a terminal.
    """
    columns = shutil.get_terminal_size((fallback, 24)).columns
    return columns if columns > 0 else fallback


def read_input(path: Path | None) -> str:
    """Read the text to wrap from ``path``, or from stdin for ``None`` and ``-``.

    Line endings are kept as they are so CRLF input can be written back as CRLF.
    """
    if path is None or str(path) == "-":
        return typer.get_binary_stream("stdin").read().decode("utf-8")
    try:
        return path.read_bytes().decode("utf-8")
    except OSError as exc:
        raise typer.BadParameter(f"Unable to read '{path}': {exc.strerror}.") from exc


def split_paragraphs(text: str) -> list[str]:
    """Split ``text`` into paragraphs and the blank runs separating them.

    Even indexes hold paragraphs, odd indexes the separators, so joining the
    list gives the text back.

    >>> split_paragraphs("a\\nb\\n\\nc")
    ['a\\nb', '\\n\\n', 'c']
    """
    return _PARAGRAPH_BREAK.split(text)


__all__ = ["read_input", "split_paragraphs", "termwidth"]
