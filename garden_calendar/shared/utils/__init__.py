# 📄 File: garden_calendar/shared/utils/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# Shared helper tools (dates and logging) used across the service.
#
# 🧪 Purpose (Technical Summary):
# Utility package exports.

from .dates import (
    Clock,
    DateLike,
    format_iso_date,
    next_occurrence,
    parse_iso_date,
    to_calendar_date,
    system_clock,
    try_parse_iso_date,
)
from .logging import get_logger, log_context, setup_logging

__all__ = [
    "Clock",
    "DateLike",
    "format_iso_date",
    "next_occurrence",
    "parse_iso_date",
    "to_calendar_date",
    "system_clock",
    "try_parse_iso_date",
    "get_logger",
    "log_context",
    "setup_logging",
]
