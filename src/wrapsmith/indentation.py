"""Adding and removing indentation from lines of text."""

from __future__ import annotations

from wrapsmith.core.line_ending import split_lines


def indent(text: str, prefix: str) -> str:
    """Add ``prefix`` to each line holding more than whitespace.

    >>> indent("Foo\\n\\nBar\\n", "  ")
    '  Foo\\n\\n  Bar\\n'

    Whitespace-only lines, and the whitespace of other lines, are kept as is.
    """
    return "\n".join(
        prefix + line if line.strip() else line for line in text.split("\n")
    )


def _leading_whitespace(line: str) -> str:
    return line[: len(line) - len(line.lstrip())]


def dedent(text: str) -> str:
    """Remove the leading whitespace common to all non-blank lines.

    >>> dedent("    1st line\\n      2nd line\\n    3rd line\\n")
    '1st line\\n  2nd line\\n3rd line\\n'

    Whitespace-only lines come out empty. CRLF terminators are normalised to
    ``"\\n"``.
    """
    lines = split_lines(text)
    prefix: str | None = None
    for line in lines:
        if not line.strip():
            continue
        whitespace = _leading_whitespace(line)
        if prefix is None:
            prefix = whitespace
            continue
        common = 0
        for a, b in zip(whitespace, prefix):
            if a != b:
                break
            common += 1
        prefix = prefix[:common]

    prefix = prefix or ""
    result = "\n".join(line[len(prefix) :] if line.strip() else "" for line in lines)
    if text.endswith("\n"):
        result += "\n"
    return result


__all__ = ["dedent", "indent"]
