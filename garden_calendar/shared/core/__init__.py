# 📄 File: garden_calendar/shared/core/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# Gathers the shared error types so other parts of the service can import them from one place.
#
# 🧪 Purpose (Technical Summary):
# Core package exports for the exception hierarchy.

from .exceptions import (
    APIAuthenticationError,
    APIRateLimitError,
    APITimeoutError,
    CalendarEntryNotFoundError,
    DatabaseError,
    ExternalAPIError,
    GardenCalendarException,
    InvalidRecommendationError,
    MalformedStoredDateError,
    NotFoundError,
    PlantNotFoundError,
    RecommendationUnavailableError,
    RepositoryError,
    ValidationError,
)

__all__ = [
    "APIAuthenticationError",
    "APIRateLimitError",
    "APITimeoutError",
    "CalendarEntryNotFoundError",
    "DatabaseError",
    "ExternalAPIError",
    "GardenCalendarException",
    "InvalidRecommendationError",
    "MalformedStoredDateError",
    "NotFoundError",
    "PlantNotFoundError",
    "RecommendationUnavailableError",
    "RepositoryError",
    "ValidationError",
]
