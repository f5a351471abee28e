"""Tests verifying the PwStrengthError type hierarchy."""

from pathlib import Path

from pw_strength.config.infrastructure.errors import (
    ConfigLoadError,
    ConfigValidationError,
)
from pw_strength.core.errors import PwStrengthError
from pw_strength.criterion.infrastructure.errors import CriterionNotSupportedError


class TestPwStrengthErrorHierarchy:
    """All pw-strength-specific exceptions inherit from PwStrengthError."""

    def test_config_validation_error_is_pw_strength_error(self) -> None:
        error = ConfigValidationError(reason="bad value")
        assert isinstance(error, PwStrengthError)

    def test_config_load_error_is_pw_strength_error(self) -> None:
        error = ConfigLoadError(path=Path("/some/config.yaml"))
        assert isinstance(error, PwStrengthError)

    def test_criterion_not_supported_error_is_pw_strength_error(self) -> None:
        error = CriterionNotSupportedError(kind="entropy")
        assert isinstance(error, PwStrengthError)

    def test_pw_strength_error_is_exception(self) -> None:
        error = PwStrengthError("test")
        assert isinstance(error, Exception)


class TestErrorMessages:
    """Error messages start with 'Failed to ' and name the offending input."""

    def test_config_validation_message(self) -> None:
        error = ConfigValidationError(reason="bad value")
        assert str(error) == "Failed to validate config: bad value"

    def test_config_load_message_includes_path(self) -> None:
        error = ConfigLoadError(path=Path("/some/config.yaml"))
        assert str(error).startswith("Failed to ")
        assert "/some/config.yaml" in str(error)
        assert error.path == Path("/some/config.yaml")

    def test_criterion_not_supported_message_includes_kind(self) -> None:
        error = CriterionNotSupportedError(kind="entropy")
        assert str(error).startswith("Failed to ")
        assert "entropy" in str(error)
        assert error.kind == "entropy"
