"""idlc — command-line front-end for an IDL-to-code compiler.

Turns raw process arguments into an immutable configuration consumed by
the IDL parser, code generators, and plugin runners.
"""

from idlc.version import __version__

__all__: list[str] = ["__version__"]
