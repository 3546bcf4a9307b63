"""Exception hierarchy for the wrapping engine."""

from __future__ import annotations


class WrapsmithError(Exception):
    """Base exception for wrapsmith failures."""


class InvalidConfiguration(WrapsmithError):
    """Raised when wrapping options cannot be constructed from the given values.

    Must not derive from ``ValueError``, which pydantic would wrap into a
    ``ValidationError`` when raised from model validators.
    """


class OptimalFitOverflow(WrapsmithError):
    """Raised when a line cost cannot be represented as a finite number."""

    def __init__(self, line: tuple[int, int], cost: float) -> None:
        self.line = line
        self.cost = cost
        start, end = line
        super().__init__(f"Cost of line spanning fragments {start}..{end} overflowed ({cost}).")


__all__ = ["InvalidConfiguration", "OptimalFitOverflow", "WrapsmithError"]
