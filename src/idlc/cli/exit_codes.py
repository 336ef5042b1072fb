"""Exit-code constants used by the CLI layer.

Centralised here so that every exit path uses a well-known, tested
value rather than magic integers scattered across the codebase.
"""

from __future__ import annotations

SUCCESS: int = 0
"""Clean exit — e.g. ``--version`` was answered."""

UNEXPECTED_ERROR: int = 1
"""An unhandled exception escaped all known error boundaries."""

USAGE_ERROR: int = 2
"""Malformed invocation, wrong positional count, or help was rendered."""

KEYBOARD_INTERRUPT: int = 130
"""User pressed Ctrl+C.  Follows POSIX convention (128 + SIGINT=2)."""
