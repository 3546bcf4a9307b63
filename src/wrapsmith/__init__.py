"""Primary public API for wrapsmith."""

from __future__ import annotations

from wrapsmith.algorithms import (
    FirstFit,
    OptimalFit,
    WrapAlgorithm,
    wrap_first_fit,
    wrap_fragments,
    wrap_optimal_fit,
)
from wrapsmith.core.config import WrapOptions
from wrapsmith.core.exceptions import InvalidConfiguration, WrapsmithError
from wrapsmith.core.fragments import Fragment, FragmentKind, SupportsWidths
from wrapsmith.core.line_ending import LineEnding
from wrapsmith.core.penalties import Penalties
from wrapsmith.core.width import display_width
from wrapsmith.indentation import dedent, indent
from wrapsmith.layout import fill, refill, try_wrap, unfill, wrap, wrap_columns, wrap_cost
from wrapsmith.separators import AsciiSpace, UnicodeBreakProperties, WordSeparator
from wrapsmith.splitters import HyphenSplitter, Hyphenator, NoHyphenation, WordSplitter
from wrapsmith.version import get_version


__version__ = get_version()

__all__ = [
    "AsciiSpace",
    "FirstFit",
    "Fragment",
    "FragmentKind",
    "HyphenSplitter",
    "Hyphenator",
    "InvalidConfiguration",
    "LineEnding",
    "NoHyphenation",
    "OptimalFit",
    "Penalties",
    "SupportsWidths",
    "UnicodeBreakProperties",
    "WordSeparator",
    "WordSplitter",
    "WrapAlgorithm",
    "WrapOptions",
    "WrapsmithError",
    "__version__",
    "dedent",
    "display_width",
    "fill",
    "get_version",
    "indent",
    "refill",
    "try_wrap",
    "unfill",
    "wrap",
    "wrap_columns",
    "wrap_cost",
    "wrap_first_fit",
    "wrap_fragments",
    "wrap_optimal_fit",
]
