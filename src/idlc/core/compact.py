"""Default parser for compact specification strings.

Grammar
-------
::

    spec    := name [ ":" options ]
    options := option { "," option }
    option  := key [ "=" value ]

* ``name`` is everything before the first ``:`` and must not be empty.
  A plugin name may therefore carry a path (``plugin=/opt/bin/gen``).
* A bare ``key`` has value ``None``; ``key=`` has the empty string.
* There is no escaping: ``,`` ``:`` and ``=`` cannot appear inside keys,
  and only ``:`` and ``=`` may appear inside values.

Every function here is pure.
"""

from __future__ import annotations

from idlc.core.models import CompactOption, CompactSpec
from idlc.exceptions import CompactSpecError

_GRAMMAR_HINT = "Expected the form name[:key1=val1,key2[,key3=val3]]."


def parse_option(text: str, *, source: str) -> CompactOption:
    """Parse a single ``key`` or ``key=value`` item of an option list."""
    key, sep, value = text.partition("=")
    if not key:
        raise CompactSpecError(
            f"invalid option {text!r} in {source!r}: empty key",
            hint=_GRAMMAR_HINT,
        )
    return CompactOption(name=key, value=value if sep else None)


def parse_compact_arguments(text: str) -> CompactSpec:
    """Parse *text* into a :class:`CompactSpec`.

    Raises
    ------
    CompactSpecError
        If the name is missing or an option has an empty key.
    """
    name, sep, rest = text.partition(":")
    if not name:
        raise CompactSpecError(
            f"invalid argument {text!r}: missing name",
            hint=_GRAMMAR_HINT,
        )
    if not sep:
        return CompactSpec(name=name)

    options = tuple(parse_option(item, source=text) for item in rest.split(","))
    return CompactSpec(name=name, options=options)
