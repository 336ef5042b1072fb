"""Shared pytest fixtures and configuration for the idlc test suite.

Guidelines
----------
* No filesystem or network access in any test.
* Parsing and resolution tests must be pure: call the functions, never
  spawn the console script.
* CLI tests assert on return codes and captured stderr.
"""

from __future__ import annotations

import pytest

from idlc.core.models import BackendInfo, BackendOption
from idlc.core.registry import BackendRegistry


@pytest.fixture
def registry() -> BackendRegistry:
    """Two backends, the first with options of different name lengths."""
    return BackendRegistry(
        [
            BackendInfo(
                name="go",
                language="go",
                options=(
                    BackendOption("a", "first option"),
                    BackendOption("bb", "second option"),
                ),
            ),
            BackendInfo(name="fastpy", language="python"),
        ]
    )


@pytest.fixture
def line_sink() -> list[str]:
    """A list that collects emitted log lines; pass ``line_sink.append``."""
    return []
