"""Public CLI exports for wrapsmith."""

from __future__ import annotations

from .app import app, main
from .commands import wrap_text
from .state import debug_enabled, emit_error, emit_warning, get_cli_state
from .utils import termwidth


__all__ = [
    "app",
    "debug_enabled",
    "emit_error",
    "emit_warning",
    "get_cli_state",
    "main",
    "termwidth",
    "wrap_text",
]
