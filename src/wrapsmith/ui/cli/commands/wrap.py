"""Implementation of the ``wrapsmith`` command."""

from __future__ import annotations

import logging
from typing import Annotated

import click
import typer

from wrapsmith.core.config import WrapOptions
from wrapsmith.core.exceptions import WrapsmithError
from wrapsmith.core.line_ending import LineEnding
from wrapsmith.core.penalties import Penalties
from wrapsmith.core.width import display_width
from wrapsmith.layout import fill, refill, try_wrap, unfill, wrap_cost
from wrapsmith.splitters import Hyphenator
from wrapsmith.version import get_version

from .._options import (
    DIAGNOSTICS_PANEL,
    AlgorithmChoice,
    AlgorithmOption,
    DebugOption,
    HyphenPenaltyOption,
    InitialIndentOption,
    InputPathArgument,
    LanguageOption,
    NlinePenaltyOption,
    NoBreakWordsOption,
    OverflowPenaltyOption,
    RefillOption,
    SeparatorChoice,
    SeparatorOption,
    ShortLastLineFractionOption,
    ShortLastLinePenaltyOption,
    SplitterChoice,
    SplitterOption,
    StatsOption,
    SubsequentIndentOption,
    VerboseOption,
    WidthOption,
)
from ..presenter import present_layout_stats
from ..state import configure_logging, emit_error, emit_warning, set_cli_state
from ..utils import read_input, split_paragraphs, termwidth


logger = logging.getLogger(__name__)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"wrapsmith {get_version()}")
        raise typer.Exit()


def build_options(
    *,
    width: int,
    algorithm: AlgorithmChoice,
    separator: SeparatorChoice,
    splitter: SplitterChoice,
    language: str,
    break_words: bool,
    initial_indent: str,
    subsequent_indent: str,
    line_ending: LineEnding,
    penalty_overrides: dict[str, float | None],
) -> WrapOptions:
    """Translate command line values into validated wrap options."""
    overrides = {name: value for name, value in penalty_overrides.items() if value is not None}
    penalties = Penalties(**overrides) if overrides else None
    word_splitter = Hyphenator(language) if splitter is SplitterChoice.DICTIONARY else splitter.value
    return WrapOptions(
        width=width,
        break_words=break_words,
        word_separator=separator.value,
        word_splitter=word_splitter,
        penalties=penalties,
        wrap_algorithm=algorithm.value,
        initial_indent=initial_indent,
        subsequent_indent=subsequent_indent,
        line_ending=line_ending,
    )


def _refill_paragraphs(body: str, options: WrapOptions) -> tuple[str, float]:
    parts = split_paragraphs(body)
    cost = 0.0
    for index in range(0, len(parts), 2):
        paragraph = parts[index]
        if not paragraph.strip():
            continue
        text, detected = unfill(paragraph)
        paragraph_options = options.replace(
            initial_indent=detected.initial_indent,
            subsequent_indent=detected.subsequent_indent,
        )
        cost += wrap_cost(text.rstrip("\r\n"), paragraph_options)
        parts[index] = refill(paragraph, options)
    return "".join(parts), cost


def wrap_text(
    input_path: InputPathArgument = None,
    width: WidthOption = None,
    algorithm: AlgorithmOption = AlgorithmChoice.OPTIMAL_FIT,
    separator: SeparatorOption = SeparatorChoice.UNICODE,
    splitter: SplitterOption = SplitterChoice.HYPHEN,
    language: LanguageOption = "en_US",
    no_break_words: NoBreakWordsOption = False,
    initial_indent: InitialIndentOption = "",
    subsequent_indent: SubsequentIndentOption = "",
    nline_penalty: NlinePenaltyOption = None,
    overflow_penalty: OverflowPenaltyOption = None,
    short_last_line_fraction: ShortLastLineFractionOption = None,
    short_last_line_penalty: ShortLastLinePenaltyOption = None,
    hyphen_penalty: HyphenPenaltyOption = None,
    refill_paragraphs: RefillOption = False,
    stats: StatsOption = False,
    verbose: VerboseOption = 0,
    debug: DebugOption = False,
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            callback=_version_callback,
            is_eager=True,
            help="Show the wrapsmith version and exit.",
            rich_help_panel=DIAGNOSTICS_PANEL,
        ),
    ] = False,
) -> None:
    """Wrap text to a given width, greedily or with balanced paragraphs."""
    ctx = click.get_current_context(silent=True)
    typer_ctx = ctx if isinstance(ctx, typer.Context) else None
    state = set_cli_state(ctx=typer_ctx, verbosity=verbose, debug=debug)
    configure_logging(state)
    if refill_paragraphs and (initial_indent or subsequent_indent):
        emit_warning("Indent options are ignored with --refill: each paragraph keeps its own prefixes.")

    text = read_input(input_path)
    line_ending = LineEnding.CRLF if "\r\n" in text else LineEnding.LF
    body = text[: -len(line_ending.value)] if text.endswith(line_ending.value) else text

    try:
        options = build_options(
            width=width or termwidth(),
            algorithm=algorithm,
            separator=separator,
            splitter=splitter,
            language=language,
            break_words=not no_break_words,
            initial_indent=initial_indent,
            subsequent_indent=subsequent_indent,
            line_ending=line_ending,
            penalty_overrides={
                "nline_penalty": nline_penalty,
                "overflow_penalty": overflow_penalty,
                "short_last_line_fraction": short_last_line_fraction,
                "short_last_line_penalty": short_last_line_penalty,
                "hyphen_penalty": hyphen_penalty,
            },
        )
        logger.info(
            "Wrapping %d characters at %d columns with %s",
            len(body),
            options.width,
            algorithm.value,
        )
        cost = 0.0
        widths: list[int] = []
        if refill_paragraphs:
            output, cost = _refill_paragraphs(body, options)
            if stats:
                widths = [display_width(line) for line in output.split(line_ending.value)]
        else:
            output = fill(body, options)
            if stats:
                cost = wrap_cost(body, options)
                widths = try_wrap(body, options)
    except WrapsmithError as exc:
        emit_error(str(exc), exception=exc)
        raise typer.Exit(code=1) from exc

    typer.echo(output)
    if stats:
        present_layout_stats(state, widths, options.width, cost)


__all__ = ["build_options", "wrap_text"]
