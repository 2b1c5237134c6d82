"""renocost error handling.

Custom exceptions and error codes for the pricing engine.

The engine itself recovers from every soft-default condition (unknown
jurisdiction, unmatched material, unmatched pricing key). These exceptions
are raised only by the caller-facing validators and by settings validation.
"""

from typing import Optional, Dict, Any


# Error Codes
class ErrorCode:
    """Error code constants."""

    # Validation Errors (1xxx)
    VALIDATION_ERROR = "VALIDATION_ERROR"
    EMPTY_SCOPE = "EMPTY_SCOPE"
    INVALID_QUANTITY = "INVALID_QUANTITY"
    INVALID_UNIT = "INVALID_UNIT"
    INVALID_LABOR_HOURS = "INVALID_LABOR_HOURS"

    # Configuration Errors (2xxx)
    CONFIGURATION_ERROR = "CONFIGURATION_ERROR"


class RenoCostError(Exception):
    """Base exception for renocost errors.

    Provides structured error information for API responses.

    Attributes:
        code: Error code from ErrorCode constants
        message: Human-readable error message
        details: Additional error context
    """

    def __init__(
        self,
        code: str,
        message: str,
        details: Optional[Dict[str, Any]] = None
    ):
        """Initialize RenoCostError.

        Args:
            code: Error code from ErrorCode constants
            message: Human-readable error message
            details: Additional error context
        """
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary for API response.

        Returns:
            Dictionary with code, message, and details.
        """
        return {
            "code": self.code,
            "message": self.message,
            "details": self.details
        }

    def __repr__(self) -> str:
        return f"RenoCostError(code={self.code!r}, message={self.message!r})"


class ValidationError(RenoCostError):
    """Caller-input validation error."""

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        code: str = ErrorCode.VALIDATION_ERROR,
        details: Optional[Dict] = None
    ):
        super().__init__(
            code=code,
            message=message,
            details={**(details or {}), "field": field} if field else details
        )
        self.field = field


class ConfigurationError(RenoCostError):
    """Invalid runtime configuration."""

    def __init__(self, message: str, setting: str, details: Optional[Dict] = None):
        super().__init__(
            code=ErrorCode.CONFIGURATION_ERROR,
            message=message,
            details={**(details or {}), "setting": setting}
        )
        self.setting = setting
