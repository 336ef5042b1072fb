"""Tests for logging-policy derivation (core/logs.py).

The emitters write through an injected sink, so every test is pure
except the console round-trip at the bottom.
"""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from idlc.cli.console import console
from idlc.core.logs import INFO_PREFIX, WARN_PREFIX, make_log_funcs


def _exploding_messages() -> Iterator[str]:
    raise AssertionError("inactive multi_warn must not iterate")
    yield ""  # pragma: no cover


# ---------------------------------------------------------------------------
# Policy table
# ---------------------------------------------------------------------------

class TestPolicy:
    @pytest.mark.parametrize(
        ("verbose", "quiet", "info_active", "warn_active"),
        [
            (False, False, False, True),
            (True, False, True, True),
            (False, True, False, False),
            (True, True, False, False),
        ],
    )
    def test_activity_table(
        self,
        line_sink: list[str],
        verbose: bool,
        quiet: bool,
        info_active: bool,
        warn_active: bool,
    ) -> None:
        logs = make_log_funcs(verbose, quiet, line_sink.append)
        logs.info("i")
        assert bool(line_sink) is info_active

        line_sink.clear()
        logs.warn("w")
        assert bool(line_sink) is warn_active

        line_sink.clear()
        logs.multi_warn(["m1", "m2"])
        assert len(line_sink) == (2 if warn_active else 0)


# ---------------------------------------------------------------------------
# Line format
# ---------------------------------------------------------------------------

class TestFormat:
    def test_prefixes(self) -> None:
        assert INFO_PREFIX == "[INFO] "
        assert WARN_PREFIX == "[WARN] "

    def test_values_joined_with_spaces(self, line_sink: list[str]) -> None:
        logs = make_log_funcs(True, False, line_sink.append)
        logs.info("target", "go", 3)
        assert line_sink == ["[INFO] target go 3"]

    def test_multi_warn_one_line_per_message_in_order(self, line_sink: list[str]) -> None:
        logs = make_log_funcs(False, False, line_sink.append)
        logs.multi_warn(["second", "first", "second"])
        assert line_sink == ["[WARN] second", "[WARN] first", "[WARN] second"]

    def test_inactive_multi_warn_does_not_iterate(self, line_sink: list[str]) -> None:
        logs = make_log_funcs(False, True, line_sink.append)
        logs.multi_warn(_exploding_messages())
        assert line_sink == []


# ---------------------------------------------------------------------------
# Console sink
# ---------------------------------------------------------------------------

class TestConsoleSink:
    def test_lines_reach_stderr_verbatim(self, capsys: pytest.CaptureFixture[str]) -> None:
        logs = make_log_funcs(True, False, console.line)
        logs.info("hello [world]")
        logs.warn("careful")

        captured = capsys.readouterr()
        assert captured.out == ""
        assert "[INFO] hello [world]" in captured.err
        assert "[WARN] careful" in captured.err
