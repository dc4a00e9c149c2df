# 📄 File: garden_calendar/shared/core/exceptions.py
# 🧭 Purpose (Layman Explanation):
# This file defines all the special error types the Garden Calendar uses to say
# what went wrong in a clear, organized way instead of generic error messages.
# 🧪 Purpose (Technical Summary):
# Custom exception hierarchy providing specific error types with HTTP status codes,
# error details, and serialization for API responses and error handling.
# 🔗 Dependencies:
# typing, FastAPI HTTP status constants
# 🔄 Connected Modules / Calls From:
# All modules for error handling, the API exception handler, domain services

from typing import Any, Dict, Optional

from fastapi import status


class GardenCalendarException(Exception):
    """
    Base exception class for the Garden Calendar application.
    All custom exceptions should inherit from this class.
    """

    def __init__(
        self,
        message: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: Optional[Dict[str, Any]] = None,
        error_code: Optional[str] = None
    ):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        self.error_code = error_code or self.__class__.__name__.upper()
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary format."""
        return {
            "error": {
                "code": self.error_code,
                "message": self.message,
                "details": self.details,
                "status_code": self.status_code
            }
        }


# =============================================================================
# VALIDATION & DATA EXCEPTIONS
# =============================================================================

class ValidationError(GardenCalendarException):
    """
    Exception raised for data validation failures.
    Used when input data doesn't meet validation requirements.
    """

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        value: Optional[Any] = None,
        constraint: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        error_code: str = "VALIDATION_ERROR"
    ):
        if not details:
            details = {}

        if field:
            details["field"] = field
        if value is not None:
            details["value"] = str(value)
        if constraint:
            details["constraint"] = constraint

        super().__init__(
            message=message,
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            details=details,
            error_code=error_code
        )


class MalformedStoredDateError(ValidationError):
    """
    Raised when a date literal is not a real YYYY-MM-DD calendar date.

    Aggregation catches it per entry and skips the record.
    """

    def __init__(self, value: Any, entry_id: Optional[str] = None):
        details = {"entry_id": entry_id} if entry_id else None
        super().__init__(
            message=f"Malformed calendar date: {value!r}",
            field="date",
            value=value,
            constraint="YYYY-MM-DD",
            details=details,
            error_code="MALFORMED_STORED_DATE"
        )
        self.value = value


class NotFoundError(GardenCalendarException):
    """
    Exception raised when requested resource is not found.
    """

    def __init__(
        self,
        message: str = "Resource not found",
        resource_type: Optional[str] = None,
        resource_id: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}

        if resource_type:
            details["resource_type"] = resource_type
        if resource_id:
            details["resource_id"] = resource_id

        super().__init__(
            message=message,
            status_code=status.HTTP_404_NOT_FOUND,
            details=details,
            error_code="NOT_FOUND"
        )


class CalendarEntryNotFoundError(NotFoundError):
    """Raised when a user's calendar entry does not exist."""

    def __init__(self, user_id: str, entry_id: str):
        super().__init__(
            message=f"Calendar entry {entry_id} not found",
            resource_type="calendar_entry",
            resource_id=entry_id,
            details={"user_id": user_id}
        )


class PlantNotFoundError(NotFoundError):
    """Raised when a plant name does not describe a real garden plant."""

    def __init__(self, plant_name: str):
        super().__init__(
            message=f"'{plant_name}' is not a plant that can be grown in a garden",
            resource_type="plant",
            resource_id=plant_name
        )


# =============================================================================
# PLANTING DATE EXCEPTIONS
# =============================================================================

class InvalidRecommendationError(GardenCalendarException):
    """
    The recommendation service answered with something that is not a usable
    MM-DD month/day. Not retried; the raw answer is surfaced to the caller.
    """

    def __init__(self, raw_value: Any, reason: str):
        super().__init__(
            message=f"Invalid planting date recommendation {raw_value!r}: {reason}",
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            details={"raw_recommendation": str(raw_value), "reason": reason},
            error_code="INVALID_RECOMMENDATION"
        )
        self.raw_value = raw_value
        self.reason = reason


class RecommendationUnavailableError(GardenCalendarException):
    """The recommendation service could not be reached or failed to answer."""

    def __init__(
        self,
        message: str = "Planting date recommendation unavailable",
        service: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}
        if service:
            details["service"] = service

        super().__init__(
            message=message,
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            details=details,
            error_code="RECOMMENDATION_UNAVAILABLE"
        )


# =============================================================================
# EXTERNAL API EXCEPTIONS
# =============================================================================

class ExternalAPIError(GardenCalendarException):
    """
    Exception raised for external API failures.
    Used when third-party services (language model APIs) fail.
    """

    def __init__(
        self,
        message: str = "External API error",
        api_name: Optional[str] = None,
        api_status_code: Optional[int] = None,
        api_response: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}

        if api_name:
            details["api_name"] = api_name
        if api_status_code:
            details["api_status_code"] = api_status_code
        if api_response:
            details["api_response"] = api_response

        super().__init__(
            message=message,
            status_code=status.HTTP_502_BAD_GATEWAY,
            details=details,
            error_code="EXTERNAL_API_ERROR"
        )


class APITimeoutError(ExternalAPIError):
    """Exception raised when an external API call times out."""

    def __init__(self, api_name: str, timeout_seconds: int = 10):
        super().__init__(
            message=f"{api_name} API request timed out after {timeout_seconds} seconds",
            api_name=api_name,
            details={"timeout_seconds": timeout_seconds}
        )


class APIAuthenticationError(ExternalAPIError):
    """Exception raised when an external API request is not properly authenticated."""

    def __init__(self, api_name: str, api_status_code: int = 401):
        super().__init__(
            message=f"Authentication failed for {api_name} API",
            api_name=api_name,
            api_status_code=api_status_code
        )


class APIRateLimitError(ExternalAPIError):
    """Exception raised when an external API throttles or its quota is used up."""

    def __init__(self, api_name: str, retry_after: Optional[str] = None):
        super().__init__(
            message=f"Rate limit exceeded for {api_name} API",
            api_name=api_name,
            api_status_code=429,
            details={"retry_after": retry_after} if retry_after else None
        )


# =============================================================================
# DATABASE & INFRASTRUCTURE EXCEPTIONS
# =============================================================================

class DatabaseError(GardenCalendarException):
    """
    Exception raised for database operation failures.
    Used for connection issues, session setup, etc.
    """

    def __init__(
        self,
        message: str = "Database error",
        operation: Optional[str] = None,
        table: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}

        if operation:
            details["operation"] = operation
        if table:
            details["table"] = table

        super().__init__(
            message=message,
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            details=details,
            error_code="DATABASE_ERROR"
        )


class RepositoryError(GardenCalendarException):
    """
    Exception raised for repository/database operation failures.
    Used when database operations fail at the repository layer.
    """

    def __init__(
        self,
        message: str = "Repository operation failed",
        operation: Optional[str] = None,
        entity: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}

        if operation:
            details["operation"] = operation
        if entity:
            details["entity"] = entity

        super().__init__(
            message=message,
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            details=details,
            error_code="REPOSITORY_ERROR"
        )
