"""The resolved command-line configuration.

:class:`Arguments` is built exactly once per invocation by
:func:`idlc.cli.flags.parse_arguments` and then handed, read-only, to
every consumer.  Its helper methods are pure: they derive target lists,
plugin lists, output directories and log emitters on demand without
touching the filesystem or any global state.
"""

from __future__ import annotations

from dataclasses import dataclass

from idlc.core.compact import parse_compact_arguments
from idlc.core.logs import LineSink, LogFuncs, make_log_funcs
from idlc.core.models import LangSpec, PluginDesc
from idlc.core.protocols import CompactSpecParser

DEFAULT_OUTPUT_PREFIX: str = "./gen-"


@dataclass(frozen=True, slots=True)
class Arguments:
    """Command-line arguments of the compiler front-end."""

    ask_version: bool = False
    recursive: bool = False
    verbose: bool = False
    quiet: bool = False

    output_path: str = ""
    """Shared output directory.  Empty means one ``./gen-<lang>`` per target."""

    includes: tuple[str, ...] = ()
    """Include search paths, in priority order."""

    plugins: tuple[str, ...] = ()
    langs: tuple[str, ...] = ()

    idl: str = ""
    """Path of the input IDL file.  Empty only after ``--version``."""

    # ------------------------------------------------------------------
    # Derived values
    # ------------------------------------------------------------------

    def output(self, language: str) -> str:
        """Return the output directory for generated *language* code."""
        if self.output_path:
            return self.output_path
        return DEFAULT_OUTPUT_PREFIX + language

    def targets(
        self,
        *,
        parser: CompactSpecParser = parse_compact_arguments,
    ) -> list[LangSpec]:
        """Resolve every ``-g`` entry into a :class:`LangSpec`, in order.

        The first parse failure propagates unchanged; later entries are
        not parsed.
        """
        specs: list[LangSpec] = []
        for text in self.langs:
            desc = parser(text)
            specs.append(LangSpec(language=desc.name, options=desc.options))
        return specs

    def used_plugins(
        self,
        *,
        parser: CompactSpecParser = parse_compact_arguments,
    ) -> list[PluginDesc]:
        """Resolve every ``-p`` entry into a :class:`PluginDesc`, in order.

        Same failure semantics as :meth:`targets`.
        """
        descs: list[PluginDesc] = []
        for text in self.plugins:
            desc = parser(text)
            descs.append(PluginDesc(name=desc.name, options=desc.options))
        return descs

    def make_log_funcs(self, sink: LineSink) -> LogFuncs:
        """Build log emitters honouring ``--verbose`` and ``--quiet``."""
        return make_log_funcs(self.verbose, self.quiet, sink)
