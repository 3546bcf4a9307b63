"""Penalties steering the optimal-fit wrapping algorithm.

Penalties

`nline_penalty` (`float`)
: Added for every line after the first one, which makes it expensive to
  output more lines than the minimum required.

`overflow_penalty` (`float`)
: Cost per column of a line exceeding the target width.

`short_last_line_fraction` (`float`)
: A last line made of a single fragment narrower than this fraction of the
  target width is considered "too short".

`short_last_line_penalty` (`float`)
: Extra cost of a too short last line. Set it to zero to accept a final line
  holding a single short word.

`hyphen_penalty` (`float`)
: Cost of a line ending at a sub-word break opportunity (existing hyphen or
  hyphenation point).

Lines other than the last one also cost the square of the gap they leave
before the target width. The defaults expect gaps in the ``0..100`` range,
which suits monospace text; scale them for proportional text.
"""

from __future__ import annotations

import math

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, model_validator

from wrapsmith.core.exceptions import InvalidConfiguration


class Penalties(BaseModel):
    """Weights of the optimal-fit cost model."""

    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)

    nline_penalty: float = Field(
        default=1000.0, validation_alias=AliasChoices("nline_penalty", "nline")
    )
    overflow_penalty: float = Field(
        default=50.0 * 50.0, validation_alias=AliasChoices("overflow_penalty", "overflow")
    )
    short_last_line_fraction: float = 0.25
    short_last_line_penalty: float = 25.0
    hyphen_penalty: float = Field(
        default=25.0, validation_alias=AliasChoices("hyphen_penalty", "hyphen")
    )

    @model_validator(mode="after")
    def check_ranges(self) -> Penalties:
        """Reject negative or non-finite weights and out of range fractions."""
        for name in type(self).model_fields:
            value = getattr(self, name)
            if not math.isfinite(value) or value < 0:
                raise InvalidConfiguration(
                    f"Penalty '{name}' must be a finite non-negative number, got {value!r}."
                )
        if not 0 < self.short_last_line_fraction <= 1:
            raise InvalidConfiguration(
                "short_last_line_fraction must lie in (0, 1], "
                f"got {self.short_last_line_fraction!r}."
            )
        return self


__all__ = ["Penalties"]
