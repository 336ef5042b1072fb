"""Help / usage text for idlc.

The text is a fixed options block followed by a catalogue generated from
the registered backends.  Rendering is pure; printing is left to
:mod:`idlc.cli.app`.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from idlc.core.models import BackendOption
from idlc.core.protocols import Backend
from idlc.version import __version__

ROW_INDENT: int = 4
"""Spaces before an option name in the backend catalogue."""

COLUMN_GAP: int = 2
"""Minimum distance between the longest option name and its description."""

USAGE_TEXT: str = """\
Usage: idlc [options] file
Options:
  --version           Print the compiler version and exit.
  -h, --help          Print help message and exit.
  -i, --include dir   Add a search path for includes.
  -o, --out dir       Set the output location for generated files. (default: ./gen-*)
  -r, --recurse       Generate codes for includes recursively.
  -v, --verbose       Output detail logs.
  -q, --quiet         Suppress all warnings and informatic logs.
  -g, --gen STR       Specify the target language.
                      STR has the form language[:key1=val1[,key2[,key3=val3]]].
                      Keys and values are options passed to the backend.
                      Many options will not require values. Boolean options accept
                      "false", "true" and "" (empty is treated as "true").
  -p, --plugin STR    Specify an external plugin to invoke.
                      STR has the form plugin[=path][:key1=val1[,key2[,key3=val3]]].

Available generators (and options):"""


def align_options(options: Sequence[BackendOption]) -> list[str]:
    """Render one row per option with descriptions in a shared column.

    The description column starts at ``ROW_INDENT + longest name +
    COLUMN_GAP`` for every row.  An empty description still yields a
    row, with a blank right column.
    """
    if not options:
        return []
    width = max(len(opt.name) for opt in options)
    column = ROW_INDENT + width + COLUMN_GAP
    return [
        (" " * ROW_INDENT + f"{opt.name}:").ljust(column) + (opt.description or "")
        for opt in options
    ]


def render_backend(backend: Backend) -> list[str]:
    """Header line plus aligned option rows for one backend."""
    lines = [f"  {backend.name} ({backend.language}):"]
    lines.extend(align_options(list(backend.options)))
    return lines


def render_usage(backends: Iterable[Backend] = ()) -> str:
    """Return the full help text, ending with a blank line."""
    lines = [f"Version: {__version__}", USAGE_TEXT]
    for backend in backends:
        lines.extend(render_backend(backend))
    lines.append("")
    return "\n".join(lines)
