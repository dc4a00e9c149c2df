# 📄 File: garden_calendar/modules/planting_calendar/domain/services/planting_date_resolver.py
# 🧭 Purpose (Layman Explanation):
# Asks the planting expert for a month and day, checks the answer makes sense, and turns
# it into a real upcoming date, picking next year when this year's day has already come.
# 🧪 Purpose (Technical Summary):
# PlantingDateResolver: strict MM-DD validation (including day-in-month), next-occurrence
# year resolution against an explicit clock value, and mapping of service failures to
# RecommendationUnavailableError.
# 🔗 Dependencies:
# re, asyncio, shared date helpers, shared exceptions, recommendation port
# 🔄 Connected Modules / Calls From:
# AddPlantToCalendarCommandHandler, presentation dependencies

import asyncio
import re
from typing import Any, Tuple

from garden_calendar.shared.core.exceptions import (
    ExternalAPIError,
    InvalidRecommendationError,
    RecommendationUnavailableError,
)
from garden_calendar.shared.utils.dates import DateLike, days_in_month, format_iso_date, next_occurrence
from garden_calendar.shared.utils.logging import get_logger

from ..models.plant import LocationData, PlantProfile
from .recommendation import PlantingDateRecommender, RecommendationRequest

logger = get_logger(__name__)

MONTH_DAY_PATTERN = re.compile(r"^(\d{2})-(\d{2})$")


def parse_month_day(raw: Any) -> Tuple[int, int]:
    """
    Validate a recommendation and split it into (month, day).

    Surrounding whitespace is ignored. February accepts the 29th.

    Raises:
        InvalidRecommendationError: not MM-DD, month outside 1..12, or a day the
            month never has (02-30, 04-31).
    """
    if not isinstance(raw, str):
        raise InvalidRecommendationError(raw, "recommendation is not a string")

    match = MONTH_DAY_PATTERN.match(raw.strip())
    if not match:
        raise InvalidRecommendationError(raw, "expected MM-DD")

    month, day = int(match.group(1)), int(match.group(2))
    if not 1 <= month <= 12:
        raise InvalidRecommendationError(raw, f"month {month:02d} is out of range")
    if not 1 <= day <= 31:
        raise InvalidRecommendationError(raw, f"day {day:02d} is out of range")
    if day > days_in_month(month):
        raise InvalidRecommendationError(raw, f"month {month:02d} has no day {day:02d}")
    return month, day


def resolve_month_day(raw: Any, now: DateLike) -> str:
    """
    Turn a raw MM-DD recommendation into the first YYYY-MM-DD strictly after today.

    A month/day equal to today's counts as already passed.
    """
    month, day = parse_month_day(raw)
    return format_iso_date(next_occurrence(month, day, now))


class PlantingDateResolver:
    """Resolves a plant and a location to a concrete, future planting date."""

    def __init__(self, recommender: PlantingDateRecommender):
        self.recommender = recommender

    async def resolve_planting_date(
        self,
        profile: PlantProfile,
        location: LocationData,
        now: DateLike,
    ) -> str:
        """
        Ask for a recommendation once and resolve it against `now`.

        Raises:
            InvalidRecommendationError: the answer is not a usable month/day
            RecommendationUnavailableError: the recommendation service failed
        """
        request = RecommendationRequest.from_profile(profile, location)

        try:
            raw = await self.recommender.recommend(request)
        except (InvalidRecommendationError, RecommendationUnavailableError):
            raise
        except ExternalAPIError as e:
            logger.warning(
                "Planting date recommendation failed",
                plant_id=profile.id,
                error_code=e.error_code,
            )
            raise RecommendationUnavailableError(
                message=f"Planting date recommendation unavailable: {e.message}",
                service=e.details.get("api_name"),
                details={"cause": e.error_code},
            ) from e
        except asyncio.TimeoutError as e:
            raise RecommendationUnavailableError(
                message="Planting date recommendation timed out"
            ) from e

        try:
            planting_date = resolve_month_day(raw, now)
        except InvalidRecommendationError as e:
            logger.warning(
                "Rejected planting date recommendation",
                plant_id=profile.id,
                raw_recommendation=str(raw),
                reason=e.reason,
            )
            raise

        logger.debug(
            "Resolved planting date",
            plant_id=profile.id,
            raw_recommendation=raw.strip(),
            planting_date=planting_date,
        )
        return planting_date
