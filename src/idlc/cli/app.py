"""CLI application entry point for idlc.

This module is the **sole error boundary** of the argument layer.  It
turns the outcome of :func:`~idlc.cli.flags.parse_arguments` into console
output and a well-defined exit code.

Architecture notes
------------------
* Parsing and resolution never print or exit; they return values or
  raise :class:`~idlc.exceptions.UsageError`.
* :func:`main` returns an exit code; only :func:`cli` calls ``sys.exit``.
* Compilation itself is delegated to a :class:`~idlc.core.protocols.Driver`.
"""

from __future__ import annotations

import sys
from collections.abc import Sequence

from idlc.cli import exit_codes
from idlc.cli.console import console
from idlc.cli.flags import parse_arguments
from idlc.cli.usage import render_usage
from idlc.core.arguments import Arguments
from idlc.core.logs import LogFuncs
from idlc.core.models import LangSpec, PluginDesc
from idlc.core.protocols import Driver
from idlc.core.registry import BackendRegistry
from idlc.exceptions import UsageError
from idlc.version import __version__


# ---------------------------------------------------------------------------
# Default driver
# ---------------------------------------------------------------------------

def report_plan(
    arguments: Arguments,
    targets: Sequence[LangSpec],
    plugins: Sequence[PluginDesc],
    logs: LogFuncs,
) -> int:
    """Log what would be generated.  Used when no driver is supplied."""
    logs.info("IDL:", arguments.idl)
    if arguments.includes:
        logs.info("include paths:", ", ".join(arguments.includes))
    for target in targets:
        logs.info(f"target {target.language} ->", arguments.output(target.language))
    for plugin in plugins:
        logs.info("plugin", plugin.name)
    if not targets:
        logs.warn("no target language specified, nothing will be generated")
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Outcome rendering
# ---------------------------------------------------------------------------

def _report_usage_error(exc: UsageError, registry: BackendRegistry) -> None:
    message = str(exc)
    if message:
        console.error(message, exc.hint)
    if exc.show_usage:
        console.line(render_usage(registry.all_backends()))


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(
    argv: Sequence[str] | None = None,
    *,
    registry: BackendRegistry | None = None,
    driver: Driver | None = None,
) -> int:
    """Run the idlc CLI.

    Parameters
    ----------
    argv:
        Explicit argument list without the program name.  When ``None``
        (default), ``sys.argv[1:]`` is used.
    registry:
        Backends listed in the help catalogue.
    driver:
        Downstream compilation step; defaults to :func:`report_plan`.

    Returns
    -------
    int
        OS process exit code.
    """
    registry = registry if registry is not None else BackendRegistry()
    driver = driver if driver is not None else report_plan
    tokens = list(sys.argv[1:] if argv is None else argv)

    try:
        arguments = parse_arguments(tokens)
        if arguments.ask_version:
            console.line(f"idlc {__version__}")
            return exit_codes.SUCCESS

        targets = arguments.targets()
        plugins = arguments.used_plugins()
    except UsageError as exc:
        _report_usage_error(exc, registry)
        return exit_codes.USAGE_ERROR

    logs = arguments.make_log_funcs(console.line)
    return driver(arguments, targets, plugins, logs)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    Backends advertised by installed distributions are discovered here so
    that the help text lists them.
    """
    try:
        code = main(registry=BackendRegistry.from_entry_points())
        sys.exit(code)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.error(
            f"Unexpected error. Please report this issue.\n  {type(exc).__name__}: {exc}",
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
