"""Logging-policy derivation.

Maps the ``--verbose`` / ``--quiet`` flags onto a set of log emitters
handed to generators and plugins.  ``quiet`` always wins:

=========  =======  ======  ==================
verbose    quiet    info    warn / multi_warn
=========  =======  ======  ==================
False      False    no-op   active
True       False    active  active
any        True     no-op   no-op
=========  =======  ======  ==================

The emitters write through an injected *sink* (one call per line), so
this module performs no I/O of its own.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass

INFO_PREFIX: str = "[INFO] "
WARN_PREFIX: str = "[WARN] "

LineSink = Callable[[str], None]
LogFunc = Callable[..., None]
MultiLogFunc = Callable[[Iterable[str]], None]


@dataclass(frozen=True, slots=True)
class LogFuncs:
    """The emitters passed to downstream generators."""

    info: LogFunc
    warn: LogFunc
    multi_warn: MultiLogFunc


def _noop(*_values: object) -> None:
    return None


def _noop_multi(_messages: Iterable[str]) -> None:
    return None


def _emitter(prefix: str, sink: LineSink) -> LogFunc:
    def emit(*values: object) -> None:
        sink(prefix + " ".join(str(v) for v in values))

    return emit


def _multi_emitter(prefix: str, sink: LineSink) -> MultiLogFunc:
    def emit_all(messages: Iterable[str]) -> None:
        for message in messages:
            sink(prefix + message)

    return emit_all


def make_log_funcs(verbose: bool, quiet: bool, sink: LineSink) -> LogFuncs:
    """Build the emitters for the given verbosity flags."""
    info = _emitter(INFO_PREFIX, sink) if verbose and not quiet else _noop
    if quiet:
        return LogFuncs(info=info, warn=_noop, multi_warn=_noop_multi)
    return LogFuncs(
        info=info,
        warn=_emitter(WARN_PREFIX, sink),
        multi_warn=_multi_emitter(WARN_PREFIX, sink),
    )
