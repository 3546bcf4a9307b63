"""Shared Typer option definitions for the wrapsmith command."""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Annotated

import typer


INPUTS_PANEL = "Input Handling"
LAYOUT_PANEL = "Layout"
PENALTIES_PANEL = "Optimal-Fit Penalties"
DIAGNOSTICS_PANEL = "Diagnostics"


class AlgorithmChoice(str, Enum):
    FIRST_FIT = "first-fit"
    OPTIMAL_FIT = "optimal-fit"


class SeparatorChoice(str, Enum):
    ASCII_SPACE = "ascii-space"
    UNICODE = "unicode"


class SplitterChoice(str, Enum):
    NONE = "none"
    HYPHEN = "hyphen"
    DICTIONARY = "dictionary"


InputPathArgument = Annotated[
    Path | None,
    typer.Argument(
        metavar="INPUT",
        help="Text file to wrap. Reads standard input when omitted or '-'.",
        allow_dash=True,
        rich_help_panel=INPUTS_PANEL,
    ),
]

RefillOption = Annotated[
    bool,
    typer.Option(
        "--refill",
        help=(
            "Treat blank-line separated paragraphs as already filled text: join their "
            "lines and refill them, keeping list markers, quotes and comment prefixes."
        ),
        rich_help_panel=INPUTS_PANEL,
    ),
]

WidthOption = Annotated[
    int | None,
    typer.Option(
        "--width",
        "-w",
        min=1,
        help="Target line width in columns. Defaults to the terminal width.",
        rich_help_panel=LAYOUT_PANEL,
    ),
]

AlgorithmOption = Annotated[
    AlgorithmChoice,
    typer.Option(
        "--algorithm",
        "-a",
        case_sensitive=False,
        help="Wrap greedily (first-fit) or balance whole paragraphs (optimal-fit).",
        rich_help_panel=LAYOUT_PANEL,
    ),
]

SeparatorOption = Annotated[
    SeparatorChoice,
    typer.Option(
        "--separator",
        case_sensitive=False,
        help="Find words on ASCII spaces or with the Unicode line breaking rules.",
        rich_help_panel=LAYOUT_PANEL,
    ),
]

SplitterOption = Annotated[
    SplitterChoice,
    typer.Option(
        "--splitter",
        case_sensitive=False,
        help="Never split words, split on existing hyphens, or hyphenate with a dictionary.",
        rich_help_panel=LAYOUT_PANEL,
    ),
]

LanguageOption = Annotated[
    str,
    typer.Option(
        "--language",
        "-l",
        help="Hyphenation dictionary used by '--splitter dictionary' (e.g. en_US, fr, de_DE).",
        rich_help_panel=LAYOUT_PANEL,
    ),
]

NoBreakWordsOption = Annotated[
    bool,
    typer.Option(
        "--no-break-words",
        help="Let words longer than the width overflow instead of breaking them.",
        rich_help_panel=LAYOUT_PANEL,
    ),
]

InitialIndentOption = Annotated[
    str,
    typer.Option(
        "--initial-indent",
        help="Prefix of the first output line.",
        rich_help_panel=LAYOUT_PANEL,
    ),
]

SubsequentIndentOption = Annotated[
    str,
    typer.Option(
        "--subsequent-indent",
        help="Prefix of the following output lines.",
        rich_help_panel=LAYOUT_PANEL,
    ),
]

NlinePenaltyOption = Annotated[
    float | None,
    typer.Option(
        "--nline-penalty",
        min=0,
        help="Cost of every line after the first one.",
        rich_help_panel=PENALTIES_PANEL,
    ),
]

OverflowPenaltyOption = Annotated[
    float | None,
    typer.Option(
        "--overflow-penalty",
        min=0,
        help="Cost per column of a line exceeding the width.",
        rich_help_panel=PENALTIES_PANEL,
    ),
]

ShortLastLineFractionOption = Annotated[
    float | None,
    typer.Option(
        "--short-last-line-fraction",
        help="Fraction of the width below which a one-word last line is too short.",
        rich_help_panel=PENALTIES_PANEL,
    ),
]

ShortLastLinePenaltyOption = Annotated[
    float | None,
    typer.Option(
        "--short-last-line-penalty",
        min=0,
        help="Cost of a last line that is too short.",
        rich_help_panel=PENALTIES_PANEL,
    ),
]

HyphenPenaltyOption = Annotated[
    float | None,
    typer.Option(
        "--hyphen-penalty",
        min=0,
        help="Cost of ending a line inside a word.",
        rich_help_panel=PENALTIES_PANEL,
    ),
]

StatsOption = Annotated[
    bool,
    typer.Option(
        "--stats",
        help="Print the width of every output line and the layout cost to stderr.",
        rich_help_panel=DIAGNOSTICS_PANEL,
    ),
]

VerboseOption = Annotated[
    int,
    typer.Option(
        "--verbose",
        "-v",
        count=True,
        help="Increase CLI verbosity. Combine multiple times for additional diagnostics.",
        rich_help_panel=DIAGNOSTICS_PANEL,
    ),
]

DebugOption = Annotated[
    bool,
    typer.Option(
        "--debug",
        help="Show full tracebacks when an unexpected error occurs.",
        rich_help_panel=DIAGNOSTICS_PANEL,
    ),
]


__all__ = [
    "AlgorithmChoice",
    "AlgorithmOption",
    "DebugOption",
    "HyphenPenaltyOption",
    "InitialIndentOption",
    "InputPathArgument",
    "LanguageOption",
    "NlinePenaltyOption",
    "NoBreakWordsOption",
    "OverflowPenaltyOption",
    "RefillOption",
    "SeparatorChoice",
    "SeparatorOption",
    "ShortLastLineFractionOption",
    "ShortLastLinePenaltyOption",
    "SplitterChoice",
    "SplitterOption",
    "StatsOption",
    "SubsequentIndentOption",
    "VerboseOption",
    "WidthOption",
]
