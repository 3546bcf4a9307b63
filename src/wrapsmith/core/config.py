"""Options controlling how text is wrapped.

WrapOptions

`width` (`int`)
: Target width of the lines, in columns. Must be positive.

`break_words` (`bool`)
: Allow breaking words longer than the available width. When `False` such
  words overflow their line instead.

`word_separator` (`AsciiSpace | UnicodeBreakProperties`)
: How words are found in a line. Accepts an instance or one of the names
  `ascii-space` and `unicode-break-properties`.

`word_splitter` (`NoHyphenation | HyphenSplitter | Hyphenator`)
: How words may be split across lines. Accepts an instance or one of the names
  `none`, `hyphen` and `dictionary`.

`penalties` (`Penalties | None`)
: Penalties handed to the optimal-fit algorithm when it is selected by name or
  with its default penalties. An `OptimalFit` built with other penalties keeps
  them.

`wrap_algorithm` (`FirstFit | OptimalFit`)
: How fragments are arranged into lines. Accepts an instance or one of the
  names `first-fit` and `optimal-fit`.

`initial_indent` (`str`)
: Prefix of the first output line. Its width is deducted from `width`.

`subsequent_indent` (`str`)
: Prefix of the other output lines.

`line_ending` (`LineEnding`)
: Line terminator used to split the input and join the output of `fill`.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from wrapsmith.algorithms import FirstFit, OptimalFit
from wrapsmith.core.exceptions import InvalidConfiguration
from wrapsmith.core.line_ending import LineEnding
from wrapsmith.core.penalties import Penalties
from wrapsmith.core.width import display_width
from wrapsmith.separators import AsciiSpace, UnicodeBreakProperties
from wrapsmith.splitters import HyphenSplitter, Hyphenator, NoHyphenation


def _normalise(name: str) -> str:
    return name.lower().replace("-", "").replace("_", "").replace(" ", "")


_SEPARATORS: dict[str, type] = {
    "ascii": AsciiSpace,
    "asciispace": AsciiSpace,
    "unicode": UnicodeBreakProperties,
    "unicodebreakproperties": UnicodeBreakProperties,
}

_SPLITTERS: dict[str, type] = {
    "none": NoHyphenation,
    "nosplit": NoHyphenation,
    "nohyphenation": NoHyphenation,
    "hyphen": HyphenSplitter,
    "hyphensplitter": HyphenSplitter,
    "existinghyphen": HyphenSplitter,
    "dictionary": Hyphenator,
    "hyphenation": Hyphenator,
    "hyphenator": Hyphenator,
}

_ALGORITHMS: dict[str, type] = {
    "firstfit": FirstFit,
    "optimalfit": OptimalFit,
}


def _resolve(value: Any, registry: dict[str, type], capability: str, kind: str) -> Any:
    if isinstance(value, str):
        factory = registry.get(_normalise(value))
        if factory is None:
            names = ", ".join(sorted(registry))
            raise InvalidConfiguration(f"Unknown {kind} '{value}'. Expected one of: {names}.")
        return factory()
    if not callable(getattr(value, capability, None)):
        raise InvalidConfiguration(f"{value!r} is not a valid {kind}: missing '{capability}'.")
    return value


class WrapOptions(BaseModel):
    """Everything `wrap` and `fill` need to know about the output.

    >>> WrapOptions(20).width
    20
    """

    model_config = ConfigDict(extra="forbid", arbitrary_types_allowed=True)

    width: int
    break_words: bool = True
    word_separator: Any = Field(default_factory=UnicodeBreakProperties)
    word_splitter: Any = Field(default_factory=HyphenSplitter)
    penalties: Penalties | None = None
    wrap_algorithm: Any = Field(default_factory=OptimalFit, validate_default=True)
    initial_indent: str = ""
    subsequent_indent: str = ""
    line_ending: LineEnding = LineEnding.LF

    def __init__(self, width: int | None = None, /, **data: Any) -> None:
        if width is not None:
            data["width"] = width
        super().__init__(**data)

    @field_validator("width")
    @classmethod
    def _check_width(cls, value: int) -> int:
        if value <= 0:
            raise InvalidConfiguration(f"Width must be a positive number of columns, got {value}.")
        return value

    @field_validator("word_separator", mode="before")
    @classmethod
    def _coerce_separator(cls, value: Any) -> Any:
        return _resolve(value, _SEPARATORS, "find_words", "word separator")

    @field_validator("word_splitter", mode="before")
    @classmethod
    def _coerce_splitter(cls, value: Any) -> Any:
        return _resolve(value, _SPLITTERS, "split_points", "word splitter")

    @field_validator("wrap_algorithm", mode="before")
    @classmethod
    def _coerce_algorithm(cls, value: Any, info: ValidationInfo) -> Any:
        algorithm = _resolve(value, _ALGORITHMS, "compute_breaks", "wrap algorithm")
        penalties = info.data.get("penalties")
        if penalties is None or not isinstance(algorithm, OptimalFit):
            return algorithm
        # An instance carrying its own weights wins over `penalties`.
        if isinstance(value, str) or algorithm.penalties == Penalties():
            return OptimalFit(penalties)
        return algorithm

    @field_validator("line_ending", mode="before")
    @classmethod
    def _coerce_line_ending(cls, value: Any) -> LineEnding:
        return LineEnding.parse(value)

    def line_widths(self) -> tuple[int, int]:
        """Return the widths left for the first and the following lines."""
        return (
            max(self.width - display_width(self.initial_indent), 0),
            max(self.width - display_width(self.subsequent_indent), 0),
        )

    def replace(self, **changes: Any) -> WrapOptions:
        """Return a validated copy with ``changes`` applied."""
        data = {name: getattr(self, name) for name in type(self).model_fields}
        if "penalties" in changes and "wrap_algorithm" not in changes:
            if isinstance(self.wrap_algorithm, OptimalFit):
                data["wrap_algorithm"] = OptimalFit()
        data.update(changes)
        return type(self).model_validate(data)


def as_options(width_or_options: int | WrapOptions) -> WrapOptions:
    """Accept either a bare width or fully specified options."""
    if isinstance(width_or_options, WrapOptions):
        return width_or_options
    return WrapOptions(width=width_or_options)


__all__ = ["LineEnding", "Penalties", "WrapOptions", "as_options"]
