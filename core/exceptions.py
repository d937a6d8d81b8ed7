# contentgen/core/exceptions.py
"""
Custom exception classes for the content generator.

Every failure that reaches the HTTP layer is reported with the same
500 error shape, so these classes exist to carry a readable message and
structured details for logging rather than to select status codes.
"""

from typing import Optional, Dict, Any


UNKNOWN_ERROR = "Unknown error"


class ContentGenError(Exception):
    """
    Base exception class for all content generator errors.

    All custom exceptions should inherit from this class.
    """

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        """
        Initialize custom exception.

        Args:
            message: Human-readable error message
            error_code: Machine-readable error code (e.g., "VALIDATION_ERROR")
            details: Additional error details for debugging
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for logging"""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details
        }


class ValidationError(ContentGenError):
    """Request payload failed schema validation"""

    def __init__(self, message: str, field: Optional[str] = None, **kwargs):
        details = {"field": field} if field else {}
        details.update(kwargs)
        super().__init__(message, "VALIDATION_ERROR", details)


class ConfigurationError(ContentGenError):
    """Missing API key"""

    def __init__(self, message: str, **kwargs):
        super().__init__(message, "CONFIGURATION_ERROR", kwargs)


# ============================================================
# AI Provider Exceptions
# ============================================================

class AIProviderError(ContentGenError):
    """Base class for AI provider errors"""
    pass


class GeminiError(AIProviderError):
    """Google Gemini API error"""

    def __init__(self, message: str, **kwargs):
        super().__init__(message, "GEMINI_ERROR", kwargs)


def error_details(exc: BaseException) -> str:
    """
    Extract the message reported to API callers for a failure.

    Args:
        exc: Any exception raised while handling a request

    Returns:
        The exception message, or "Unknown error" if it has none
    """
    if isinstance(exc, ContentGenError):
        message = exc.message
    else:
        message = str(exc)

    return message if message else UNKNOWN_ERROR
