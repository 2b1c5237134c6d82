"""Unit tests for settings, error types and logging setup."""

import logging

import pytest
import structlog
from structlog.testing import capture_logs

from renocost.config.errors import (
    ConfigurationError,
    ErrorCode,
    RenoCostError,
    ValidationError,
)
from renocost.config.logging import configure_logging
from renocost.config.settings import Settings


# =============================================================================
# SETTINGS
# =============================================================================


class TestSettings:
    """Environment-driven settings."""

    def test_defaults(self, monkeypatch):
        for name in ("RENOCOST_DEFAULT_JURISDICTION", "RENOCOST_FLYER_MATCH_LIMIT", "LOG_LEVEL", "LOG_JSON"):
            monkeypatch.delenv(name, raising=False)
        s = Settings()
        assert s.default_jurisdiction == "ON"
        assert s.flyer_match_limit == 4
        assert s.log_level == "INFO"
        assert s.log_json is False
        s.validate()

    def test_env_overrides(self, monkeypatch):
        monkeypatch.setenv("RENOCOST_DEFAULT_JURISDICTION", " bc ")
        monkeypatch.setenv("RENOCOST_FLYER_MATCH_LIMIT", "7")
        monkeypatch.setenv("LOG_LEVEL", "debug")
        monkeypatch.setenv("LOG_JSON", "TRUE")
        s = Settings()
        assert s.default_jurisdiction == "BC"
        assert s.flyer_match_limit == 7
        assert s.log_level == "DEBUG"
        assert s.log_json is True

    def test_non_positive_match_limit_is_rejected(self):
        with pytest.raises(ConfigurationError) as exc_info:
            Settings(flyer_match_limit=0).validate()
        assert exc_info.value.setting == "flyer_match_limit"
        assert exc_info.value.code == ErrorCode.CONFIGURATION_ERROR

    def test_unknown_log_level_is_rejected(self):
        with pytest.raises(ConfigurationError) as exc_info:
            Settings(log_level="LOUD").validate()
        assert exc_info.value.details == {"setting": "log_level"}


# =============================================================================
# ERRORS
# =============================================================================


class TestErrors:
    """Structured error payloads."""

    def test_to_dict(self):
        error = RenoCostError(ErrorCode.VALIDATION_ERROR, "bad input", {"row": 3})
        assert error.to_dict() == {
            "code": "VALIDATION_ERROR",
            "message": "bad input",
            "details": {"row": 3},
        }
        assert str(error) == "bad input"
        assert "VALIDATION_ERROR" in repr(error)

    def test_validation_error_records_field(self):
        error = ValidationError("quantity must be positive", field="quantity", code=ErrorCode.INVALID_QUANTITY)
        assert error.code == ErrorCode.INVALID_QUANTITY
        assert error.details == {"field": "quantity"}

    def test_validation_error_without_field(self):
        error = ValidationError("bad")
        assert error.code == ErrorCode.VALIDATION_ERROR
        assert error.details == {}
        assert error.field is None

    def test_hierarchy(self):
        assert issubclass(ValidationError, RenoCostError)
        assert issubclass(ConfigurationError, RenoCostError)


# =============================================================================
# LOGGING
# =============================================================================


class TestConfigureLogging:
    """structlog configuration."""

    def test_level_filters_debug(self):
        configure_logging(level="info", json_logs=True)
        logger = structlog.get_logger("renocost.test")
        with capture_logs() as logs:
            logger.debug("hidden")
            logger.info("shown", value=1)
        assert [e["event"] for e in logs] == ["shown"]

    def test_unknown_level_is_rejected(self):
        """An unknown level name fails with a configuration error, not a KeyError."""
        with pytest.raises(ConfigurationError) as exc_info:
            configure_logging(level="loud", json_logs=True)
        assert exc_info.value.setting == "log_level"
        assert exc_info.value.code == ErrorCode.CONFIGURATION_ERROR

    def test_json_renderer_selected(self):
        configure_logging(level="DEBUG", json_logs=True)
        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)

    def test_console_renderer_selected(self):
        configure_logging(level="WARNING", json_logs=False)
        config = structlog.get_config()
        assert isinstance(config["processors"][-1], structlog.dev.ConsoleRenderer)
        assert config["wrapper_class"] is structlog.make_filtering_bound_logger(logging.WARNING)
