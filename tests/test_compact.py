"""Tests for the default compact-specification parser (core/compact.py)."""

from __future__ import annotations

import pytest

from idlc.core.compact import parse_compact_arguments, parse_option
from idlc.core.models import CompactOption, CompactSpec
from idlc.exceptions import CompactSpecError, UsageError


# ---------------------------------------------------------------------------
# Names
# ---------------------------------------------------------------------------

class TestName:
    def test_name_only(self) -> None:
        assert parse_compact_arguments("go") == CompactSpec(name="go")

    def test_missing_name_raises(self) -> None:
        with pytest.raises(CompactSpecError, match="missing name"):
            parse_compact_arguments(":a=b")

    def test_empty_string_raises(self) -> None:
        with pytest.raises(CompactSpecError):
            parse_compact_arguments("")

    def test_failure_is_a_usage_error(self) -> None:
        with pytest.raises(UsageError):
            parse_compact_arguments("")

    def test_plugin_path_stays_in_name(self) -> None:
        spec = parse_compact_arguments("lint=/opt/bin/lint:strict")
        assert spec.name == "lint=/opt/bin/lint"
        assert spec.options == (CompactOption("strict"),)


# ---------------------------------------------------------------------------
# Options
# ---------------------------------------------------------------------------

class TestOptions:
    def test_mixed_options_keep_order(self) -> None:
        spec = parse_compact_arguments("go:package_prefix=x/y,frugal,naming=snake")
        assert spec.options == (
            CompactOption("package_prefix", "x/y"),
            CompactOption("frugal", None),
            CompactOption("naming", "snake"),
        )

    def test_empty_value_differs_from_bare_key(self) -> None:
        spec = parse_compact_arguments("go:a=,b")
        assert spec.options == (CompactOption("a", ""), CompactOption("b", None))

    def test_value_may_contain_equals_and_colon(self) -> None:
        spec = parse_compact_arguments("go:url=http://h/p?q=1")
        assert spec.options == (CompactOption("url", "http://h/p?q=1"),)

    def test_duplicate_keys_are_kept(self) -> None:
        spec = parse_compact_arguments("go:k=1,k=2")
        assert len(spec.options) == 2

    @pytest.mark.parametrize("text", ["go:", "go:a,,b", "go:=x", "go:a,"])
    def test_empty_key_raises(self, text: str) -> None:
        with pytest.raises(CompactSpecError, match="empty key"):
            parse_compact_arguments(text)

    def test_error_carries_grammar_hint(self) -> None:
        with pytest.raises(CompactSpecError) as exc_info:
            parse_compact_arguments("go:=x")
        assert exc_info.value.hint is not None
        assert "name[:" in exc_info.value.hint


class TestParseOption:
    def test_key_value(self) -> None:
        assert parse_option("k=v", source="s") == CompactOption("k", "v")

    def test_bare_key(self) -> None:
        assert parse_option("k", source="s") == CompactOption("k")

    def test_error_mentions_source(self) -> None:
        with pytest.raises(CompactSpecError, match="go:=v"):
            parse_option("=v", source="go:=v")
