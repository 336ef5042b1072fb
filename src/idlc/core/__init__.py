"""Core layer — the configuration model and pure derivations over it.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O.
* No imports from ``cli``.
"""

from idlc.core.arguments import Arguments
from idlc.core.compact import parse_compact_arguments
from idlc.core.logs import LogFuncs, make_log_funcs
from idlc.core.models import (
    BackendInfo,
    BackendOption,
    CompactOption,
    CompactSpec,
    LangSpec,
    PluginDesc,
)
from idlc.core.protocols import Backend, CompactSpecParser, Driver
from idlc.core.registry import BackendRegistry

__all__: list[str] = [
    "Arguments",
    "Backend",
    "BackendInfo",
    "BackendOption",
    "BackendRegistry",
    "CompactOption",
    "CompactSpec",
    "CompactSpecParser",
    "Driver",
    "LangSpec",
    "LogFuncs",
    "PluginDesc",
    "make_log_funcs",
    "parse_compact_arguments",
]
