"""Flag declarations and argument parsing for idlc.

Every option is declared exactly once in :data:`FLAGS` together with all
of its spellings, so the short and long forms of an option share one
storage cell.  :data:`FLAG_ALIASES` maps each external spelling back to
the canonical field name of :class:`~idlc.core.arguments.Arguments`.

:func:`parse_arguments` never prints and never exits: malformed input
raises :class:`~idlc.exceptions.UsageError` and the CLI entry point
decides what to do with it.
"""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Literal, NoReturn

from idlc.core.arguments import Arguments
from idlc.exceptions import HelpRequested, UsageError

FlagKind = Literal["bool", "string", "repeatable"]


# ---------------------------------------------------------------------------
# Multi-value accumulator
# ---------------------------------------------------------------------------

class MultiValue:
    """Ordered record of every occurrence of a repeatable flag.

    Values are kept exactly as given: no deduplication, no sorting.
    """

    def __init__(self) -> None:
        self._values: list[str] = []

    def set(self, value: str) -> None:
        """Append *value*.  Never fails."""
        self._values.append(value)

    def values(self) -> tuple[str, ...]:
        return tuple(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __str__(self) -> str:
        return "[" + " ".join(self._values) + "]"

    def __repr__(self) -> str:
        return f"MultiValue({self._values!r})"


class _AccumulateAction(argparse.Action):
    """Feed every occurrence of an option into the namespace's accumulator."""

    def __call__(
        self,
        parser: argparse.ArgumentParser,
        namespace: argparse.Namespace,
        values: Any,
        option_string: str | None = None,
    ) -> None:
        accumulator: MultiValue = getattr(namespace, self.dest)
        accumulator.set(values)


# ---------------------------------------------------------------------------
# Flag table
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class FlagSpec:
    """One logical option and every spelling that refers to it."""

    dest: str
    """Canonical field name on :class:`Arguments`."""

    spellings: tuple[str, ...]
    kind: FlagKind
    metavar: str | None = None


FLAGS: tuple[FlagSpec, ...] = (
    FlagSpec("ask_version", ("--version",), "bool"),
    FlagSpec("ask_help", ("-h", "--help"), "bool"),
    FlagSpec("recursive", ("-r", "--recurse"), "bool"),
    FlagSpec("verbose", ("-v", "--verbose"), "bool"),
    FlagSpec("quiet", ("-q", "--quiet"), "bool"),
    FlagSpec("output_path", ("-o", "--out"), "string", "dir"),
    FlagSpec("includes", ("-i", "--include"), "repeatable", "dir"),
    FlagSpec("langs", ("-g", "--gen"), "repeatable", "STR"),
    FlagSpec("plugins", ("-p", "--plugin"), "repeatable", "STR"),
)

FLAG_ALIASES: dict[str, str] = {
    spelling: flag.dest for flag in FLAGS for spelling in flag.spellings
}
"""External spelling (``-i``, ``--include``, ...) → canonical field name."""

_FLAGS_BY_SPELLING: dict[str, FlagSpec] = {
    spelling: flag for flag in FLAGS for spelling in flag.spellings
}


class _FlagParser(argparse.ArgumentParser):
    """ArgumentParser that raises instead of printing and exiting."""

    def error(self, message: str) -> NoReturn:
        raise UsageError(message, show_usage=True)


def build_flags(prog: str = "idlc") -> argparse.ArgumentParser:
    """Construct the parser with every flag in :data:`FLAGS` declared."""
    parser = _FlagParser(prog=prog, add_help=False, allow_abbrev=False)
    for flag in FLAGS:
        if flag.kind == "bool":
            parser.add_argument(
                *flag.spellings,
                dest=flag.dest,
                action=argparse.BooleanOptionalAction,
                default=False,
            )
        elif flag.kind == "string":
            parser.add_argument(
                *flag.spellings, dest=flag.dest, default="", metavar=flag.metavar,
            )
        else:
            parser.add_argument(
                *flag.spellings,
                dest=flag.dest,
                action=_AccumulateAction,
                metavar=flag.metavar,
            )
    parser.add_argument("rest", nargs="*", metavar="file")
    return parser


_TRUE_WORDS = frozenset({"1", "t", "T", "true", "TRUE", "True"})
_FALSE_WORDS = frozenset({"0", "f", "F", "false", "FALSE", "False"})


def _long_spelling(flag: FlagSpec) -> str:
    return flag.spellings[-1]


def _bool_token(flag: FlagSpec, spelling: str, value: str) -> str:
    """Rewrite ``-v=false`` style tokens into ``--verbose`` / ``--no-verbose``."""
    if value in _TRUE_WORDS:
        return _long_spelling(flag)
    if value in _FALSE_WORDS:
        return "--no-" + _long_spelling(flag).removeprefix("--")
    raise UsageError(
        f"invalid boolean value {value!r} for {spelling}",
        show_usage=True,
    )


def split_tokens(argv: Sequence[str]) -> tuple[list[str], list[str]]:
    """Split *argv* into flag-section tokens and literal positionals.

    Everything after the first ``--`` that is not a flag value is
    positional.  A string or repeatable flag always takes the next token
    as its value, even when that token starts with ``-``; such pairs are
    rewritten to the ``--long=value`` form.  Boolean flags accept an
    explicit ``=true`` / ``=false``.
    """
    tokens = list(argv)
    head: list[str] = []
    index = 0
    while index < len(tokens):
        token = tokens[index]
        if token == "--":
            return head, tokens[index + 1:]

        spelling, sep, value = token.partition("=")
        flag = _FLAGS_BY_SPELLING.get(spelling)
        if flag is not None and flag.kind == "bool" and sep:
            head.append(_bool_token(flag, spelling, value))
        elif (
            flag is not None
            and flag.kind != "bool"
            and not sep
            and index + 1 < len(tokens)
        ):
            head.append(f"{_long_spelling(flag)}={tokens[index + 1]}")
            index += 1
        else:
            head.append(token)
        index += 1
    return head, []


def _fresh_namespace() -> argparse.Namespace:
    """Namespace holding one empty accumulator per repeatable flag."""
    namespace = argparse.Namespace()
    for flag in FLAGS:
        if flag.kind == "repeatable":
            setattr(namespace, flag.dest, MultiValue())
    return namespace


def _to_arguments(namespace: argparse.Namespace, idl: str) -> Arguments:
    return Arguments(
        ask_version=namespace.ask_version,
        recursive=namespace.recursive,
        verbose=namespace.verbose,
        quiet=namespace.quiet,
        output_path=namespace.output_path,
        includes=namespace.includes.values(),
        plugins=namespace.plugins.values(),
        langs=namespace.langs.values(),
        idl=idl,
    )


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def parse_arguments(argv: Sequence[str]) -> Arguments:
    """Parse *argv* (without the program name) into :class:`Arguments`.

    Flags and the positional IDL path may be intermixed; tokens after
    ``--`` are positional.

    Raises
    ------
    HelpRequested
        For ``-h`` / ``--help``.
    UsageError
        For an unknown flag, a missing flag value, or anything other
        than exactly one positional argument.
    """
    head, tail = split_tokens(argv)
    parser = build_flags()
    namespace = parser.parse_intermixed_args(head, namespace=_fresh_namespace())

    if namespace.ask_help:
        raise HelpRequested()

    if namespace.ask_version:
        return _to_arguments(namespace, idl="")

    rest: list[str] = [*(namespace.rest or []), *tail]
    if len(rest) != 1:
        raise UsageError(
            f"require exactly 1 argument for the IDL parameter, got: {len(rest)}",
        )
    return _to_arguments(namespace, idl=rest[0])
