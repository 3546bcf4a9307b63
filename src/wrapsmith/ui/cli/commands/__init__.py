"""CLI command implementations."""

from __future__ import annotations

from .wrap import build_options, wrap_text


__all__ = ["build_options", "wrap_text"]
