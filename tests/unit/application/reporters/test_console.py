"""Tests for ConsoleReporter.

Tests:
- ConsoleConfig default values and validation
- ConsoleReporter report() output format
- Key filtering (max_keys, exclude_keys)
"""

import pytest

from compscan.application.reporters import ConsoleConfig, ConsoleReporter
from compscan.domain.model.comparison import ComparisonResult

CHANGES = ComparisonResult(
    new=frozenset({"core::A", "core::B", "core::C"}),
    removed=frozenset({"web::Old"}),
    modified=frozenset({"core::D"}),
)


def _report(result: ComparisonResult = CHANGES, **config: object) -> str:
    return ConsoleReporter(ConsoleConfig(color=False, **config)).report(result)  # type: ignore[arg-type]


class TestConsoleConfig:
    """Tests for ConsoleConfig."""

    def test_default_values(self) -> None:
        config = ConsoleConfig()
        assert config.show_summary is True
        assert config.max_keys is None
        assert config.exclude_keys == ()
        assert config.width == 120
        assert config.color is True

    def test_invalid_max_keys(self) -> None:
        with pytest.raises(ValueError, match="max_keys must be >= 1"):
            ConsoleConfig(max_keys=0)

    def test_invalid_width(self) -> None:
        with pytest.raises(ValueError, match="width must be >= 20"):
            ConsoleConfig(width=10)


class TestConsoleReporter:
    """Tests for ConsoleReporter."""

    def test_report_contains_header(self) -> None:
        assert "COMPONENT CHANGES" in _report()

    def test_no_changes(self) -> None:
        output = _report(ComparisonResult.no_changes())
        assert "No architectural changes detected." in output
        assert "Summary" not in output

    def test_sections_with_markers(self) -> None:
        output = _report()
        assert "NEW COMPONENTS (3)" in output
        assert "+ core::A" in output
        assert "- web::Old" in output
        assert "~ core::D" in output

    def test_summary_table(self) -> None:
        output = _report()
        assert "Summary" in output
        assert "Total" in output

    def test_summary_can_be_hidden(self) -> None:
        assert "Summary" not in _report(show_summary=False)

    def test_max_keys_truncates(self) -> None:
        output = _report(max_keys=1)
        assert "+ core::A" in output
        assert "+ core::B" not in output
        assert "... 2 more" in output

    def test_exclude_keys(self) -> None:
        output = _report(exclude_keys=("web::*",))
        assert "web::Old" not in output
        assert "REMOVED COMPONENTS (1)" in output

    def test_returns_string_without_printing(self, capsys: pytest.CaptureFixture[str]) -> None:
        output = _report()
        assert isinstance(output, str)
        assert capsys.readouterr().out == ""
