"""Tests for the Severity enumeration."""

import logging

import pytest

from severr import Severity


class TestSeverityValues:
    """Display names, ordering, and logging levels."""

    def test_display_names(self) -> None:
        assert str(Severity.FATAL) == "Fatal"
        assert str(Severity.WARN) == "Warn"
        assert str(Severity.INFO) == "Info"

    def test_declaration_order(self) -> None:
        assert list(Severity) == [Severity.FATAL, Severity.WARN, Severity.INFO]
        assert [s.ordinal for s in Severity] == [0, 1, 2]

    def test_members_are_strings(self) -> None:
        assert Severity.WARN == "Warn"
        assert f"{Severity.FATAL}" == "Fatal"

    @pytest.mark.parametrize(
        ("severity", "level"),
        [
            (Severity.FATAL, logging.CRITICAL),
            (Severity.WARN, logging.WARNING),
            (Severity.INFO, logging.INFO),
        ],
    )
    def test_log_level(self, severity: Severity, level: int) -> None:
        assert severity.log_level == level


class TestSeverityParse:
    """Severity.parse coercion."""

    def test_member_passes_through(self) -> None:
        assert Severity.parse(Severity.WARN) is Severity.WARN

    @pytest.mark.parametrize("name", ["fatal", "FATAL", "Fatal", "  fatal "])
    def test_display_name_case_insensitive(self, name: str) -> None:
        assert Severity.parse(name) is Severity.FATAL

    @pytest.mark.parametrize("bad", ["error", "", "0", 2, None])
    def test_unknown_raises_value_error(self, bad: object) -> None:
        with pytest.raises(ValueError, match="Unknown severity"):
            Severity.parse(bad)  # type: ignore[arg-type]
