"""Protocols (interfaces) for the collaborators of the argument layer.

The IDL parser, the generator backends and the compact-specification
grammar live outside this package.  Core code depends ONLY on these
protocols, never on concrete implementations.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Protocol

from idlc.core.models import BackendOption, CompactSpec, LangSpec, PluginDesc

if TYPE_CHECKING:
    from idlc.core.arguments import Arguments
    from idlc.core.logs import LogFuncs


class CompactSpecParser(Protocol):
    """Contract for compact-specification parsers.

    Any callable taking the raw string and returning a
    :class:`~idlc.core.models.CompactSpec` satisfies this protocol.
    """

    def __call__(self, text: str) -> CompactSpec:
        """Parse *text* of the form ``name[:key1=val1,key2]``.

        Raises
        ------
        UsageError
            When *text* does not follow the grammar.  Callers propagate
            the exception unchanged.
        """
        ...  # pragma: no cover


class Backend(Protocol):
    """Contract for a registered code-generation backend.

    Only the attributes needed to render the help catalogue are part of
    the contract.
    """

    @property
    def name(self) -> str:
        """Backend name as used with ``-g``."""
        ...  # pragma: no cover

    @property
    def language(self) -> str:
        """Target language produced by the backend."""
        ...  # pragma: no cover

    @property
    def options(self) -> Sequence[BackendOption]:
        """Options accepted by the backend, in display order."""
        ...  # pragma: no cover


class Driver(Protocol):
    """Contract for the downstream compilation step.

    Receives the resolved configuration and returns a process exit code.
    Output directories are obtained through ``arguments.output(lang)``.
    """

    def __call__(
        self,
        arguments: Arguments,
        targets: Sequence[LangSpec],
        plugins: Sequence[PluginDesc],
        logs: LogFuncs,
    ) -> int:
        ...  # pragma: no cover
