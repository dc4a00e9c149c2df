# 📄 File: garden_calendar/modules/planting_calendar/domain/services/__init__.py
# 🧭 Purpose (Layman Explanation):
# The planting calendar's thinking parts: picking planting dates and laying out months.
# 🧪 Purpose (Technical Summary):
# Domain service exports.

from .month_event_aggregator import (
    MonthEventAggregator,
    build_day_markers,
    build_month_view,
    filter_by_month,
    split_agenda,
)
from .plant_profile_generator import PlantProfileGenerator
from .planting_date_resolver import PlantingDateResolver, parse_month_day, resolve_month_day
from .recommendation import PlantingDateRecommender, RecommendationRequest

__all__ = [
    "MonthEventAggregator",
    "build_day_markers",
    "build_month_view",
    "filter_by_month",
    "split_agenda",
    "PlantProfileGenerator",
    "PlantingDateResolver",
    "parse_month_day",
    "resolve_month_day",
    "PlantingDateRecommender",
    "RecommendationRequest",
]
