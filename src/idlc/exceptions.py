"""Custom exception hierarchy for idlc.

Every error condition raised by the argument layer derives from
:class:`IdlcError` so that the CLI error boundary can render a clean
message without a stack trace.

Hierarchy
---------
IdlcError
├── UsageError
│   ├── CompactSpecError
│   └── HelpRequested
├── DuplicateBackendError
└── EnvironmentError
"""

from __future__ import annotations


class IdlcError(Exception):
    """Base exception for all idlc errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Command line ----------------------------------------------------------

class UsageError(IdlcError):
    """Raised for any malformed invocation.

    Covers unrecognised flags, malformed flag values, a wrong number of
    positional arguments, and unparsable compact specifications.  All of
    them terminate the process with :data:`~idlc.cli.exit_codes.USAGE_ERROR`.
    """

    def __init__(
        self,
        message: str,
        *,
        hint: str | None = None,
        show_usage: bool = False,
    ) -> None:
        super().__init__(message, hint=hint)
        self.show_usage: bool = show_usage
        """Whether the full usage text must follow the message."""


class CompactSpecError(UsageError):
    """Raised when a ``name[:key=val,...]`` string cannot be parsed."""


class HelpRequested(UsageError):
    """Raised for ``-h``/``--help``.

    Help is not a successful outcome: it exits with the usage-error status.
    """

    def __init__(self) -> None:
        super().__init__("", show_usage=True)


# --- Backends --------------------------------------------------------------

class DuplicateBackendError(IdlcError):
    """Raised when two backends register under the same name."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(IdlcError):
    """Raised when an optional runtime dependency is not available."""
