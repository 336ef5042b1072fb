"""Descriptor models for idlc.

All models are **frozen** dataclasses: immutable value objects carrying
no I/O and no dependency on external packages.
"""

from __future__ import annotations

from dataclasses import dataclass


# ---------------------------------------------------------------------------
# Compact specification
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class CompactOption:
    """A single option of a compact specification string."""

    name: str
    """Option key, never empty."""

    value: str | None = None
    """Option value.  ``None`` for a bare key (implicit boolean true)."""


@dataclass(frozen=True, slots=True)
class CompactSpec:
    """Parsed form of ``name[:key1=val1,key2[,key3=val3]]``."""

    name: str
    options: tuple[CompactOption, ...] = ()

    def option_map(self) -> dict[str, str | None]:
        """Return options as an ordered dict; a repeated key keeps its last value."""
        return {opt.name: opt.value for opt in self.options}


# ---------------------------------------------------------------------------
# Resolved generator / plugin descriptors
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class LangSpec:
    """A generation target: which backend to run and with which options."""

    language: str
    options: tuple[CompactOption, ...] = ()


@dataclass(frozen=True, slots=True)
class PluginDesc:
    """An external plugin to invoke after the built-in generators."""

    name: str
    """Plugin name, verbatim (may carry a ``=path`` suffix)."""

    options: tuple[CompactOption, ...] = ()


# ---------------------------------------------------------------------------
# Backend catalogue
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class BackendOption:
    """One configurable option advertised by a backend."""

    name: str
    description: str = ""


@dataclass(frozen=True, slots=True)
class BackendInfo:
    """Static description of a code-generation backend.

    Satisfies :class:`~idlc.core.protocols.Backend` structurally.
    """

    name: str
    language: str
    options: tuple[BackendOption, ...] = ()
