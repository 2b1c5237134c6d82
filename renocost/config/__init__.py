"""renocost configuration.

This package contains:
- settings: Environment variables and configuration
- errors: Custom exceptions and error codes
- logging: structlog setup for host applications
"""

from renocost.config.settings import settings, Settings
from renocost.config.errors import (
    ErrorCode,
    RenoCostError,
    ValidationError,
    ConfigurationError,
)
from renocost.config.logging import configure_logging

__all__ = [
    "settings",
    "Settings",
    "ErrorCode",
    "RenoCostError",
    "ValidationError",
    "ConfigurationError",
    "configure_logging",
]
