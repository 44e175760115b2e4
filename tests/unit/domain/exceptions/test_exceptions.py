"""Tests for domain/exceptions."""

from pathlib import Path

import pytest

from compscan.domain.exceptions import (
    ClassFileError,
    CompScanError,
    ConfigurationError,
    DuplicateComponentError,
    NoComponentsError,
    ScanTimeoutError,
    StrategyValidationError,
)


class TestHierarchy:
    """All errors share CompScanError as root."""

    @pytest.mark.parametrize(
        "error_type",
        [ConfigurationError, ClassFileError, ScanTimeoutError, NoComponentsError],
    )
    def test_rooted_at_compscan_error(self, error_type: type) -> None:
        assert issubclass(error_type, CompScanError)

    @pytest.mark.parametrize("error_type", [StrategyValidationError, DuplicateComponentError])
    def test_configuration_errors(self, error_type: type) -> None:
        assert issubclass(error_type, ConfigurationError)


class TestMessages:
    """Error messages carry their context."""

    def test_strategy_validation_error(self) -> None:
        err = StrategyValidationError("controllers", "pattern", "REGEX")
        assert err.strategy_name == "controllers"
        assert err.key == "pattern"
        assert "strategy 'controllers': 'pattern' is required for REGEX strategy" in str(err)

    def test_class_file_error(self) -> None:
        err = ClassFileError(Path("A.class"), "bad magic number")
        assert str(err) == "Failed to parse A.class: bad magic number"

    def test_scan_timeout_error(self) -> None:
        err = ScanTimeoutError(Path("build"), 1.5)
        assert str(err) == "Scanning build exceeded 1.5s"

    def test_scan_timeout_must_be_positive(self) -> None:
        with pytest.raises(ValueError, match="timeout must be > 0"):
            ScanTimeoutError(Path("build"), 0)

    def test_no_components_error(self) -> None:
        assert "any of 2 container(s)" in str(NoComponentsError(2))
        assert str(NoComponentsError(0)) == "No containers were scanned"
