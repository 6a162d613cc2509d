"""
Custom Exceptions - Application-specific error classes.

This module defines a hierarchy of exceptions for clean error handling:
- Each exception has a status code and error code
- Used by the API layer for consistent error responses
- Every response body carries a human-readable "error" string
"""
from typing import Optional


class WellnessException(Exception):
    """
    Base exception for all wellness service errors.

    Subclass this for specific error types.
    """
    status_code: int = 500
    error_code: str = "internal_error"

    def __init__(self, message: str, details: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def to_dict(self) -> dict:
        """Convert to error response dict."""
        return {
            "error": self.message,
            "code": self.error_code,
            "details": self.details
        }


class RateLimitExceeded(WellnessException):
    """Raised when a client exceeds the rate limit."""
    status_code = 429
    error_code = "rate_limit_exceeded"

    def __init__(self, retry_after: int = 60):
        super().__init__(
            message=f"Rate limit exceeded. Please wait {retry_after} seconds.",
            details=f"retry_after={retry_after}"
        )
        self.retry_after = retry_after


class ValidationError(WellnessException):
    """Raised when input validation fails."""
    status_code = 400
    error_code = "validation_error"

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message, details=f"field={field}" if field else None)
        self.field = field


class InvalidEmail(ValidationError):
    """Raised when the submitted email does not look like local@domain.tld."""
    error_code = "invalid_email"

    def __init__(self, message: str = "Invalid email format"):
        super().__init__(message, field="email")


class InvalidPhone(ValidationError):
    """Raised when the submitted phone is not exactly 10 digits."""
    error_code = "invalid_phone"

    def __init__(self, message: str = "Invalid phone number format"):
        super().__init__(message, field="phone")


class EmptySurvey(ValidationError):
    """Raised when no survey responses were submitted (score would be 0/0)."""
    error_code = "empty_survey"

    def __init__(self, message: str = "Survey responses cannot be empty"):
        super().__init__(message, field="surveyResponses")


class ExternalServiceFailure(WellnessException):
    """
    Raised when the survey could not be analyzed.

    Network, authentication and malformed-response failures from the
    text-generation provider all collapse into this one error.
    """
    status_code = 500
    error_code = "analysis_failed"

    def __init__(self, message: str = "Failed to analyze survey", details: Optional[str] = None):
        super().__init__(message, details=details)
