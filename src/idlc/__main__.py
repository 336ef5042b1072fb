"""Allow ``python -m idlc`` invocation.

Delegates to the CLI error-boundary entry point so that ``python -m idlc``
behaves identically to the ``idlc`` console script.
"""

from __future__ import annotations

from idlc.cli.app import cli

if __name__ == "__main__":
    cli()
