# 📄 File: garden_calendar/modules/planting_calendar/domain/services/month_event_aggregator.py
# 🧭 Purpose (Layman Explanation):
# Takes all of a gardener's planting notes and works out what to show: which ones fall in
# the month on screen, which days get a little plant picture (and a "+2" when several
# plants share a day), which day is today, and what is still coming up.
# 🧪 Purpose (Technical Summary):
# Pure, stateless month aggregation over CalendarEntry collections: exact (year, month)
# filtering with a stable ascending sort, per-day marker construction into a fresh map of
# frozen DayMarkers, month view composition and upcoming/archived agenda split.
# Malformed stored dates are skipped per entry and logged.
# 🔗 Dependencies:
# shared date helpers, shared exceptions, structured logging, domain models
# 🔄 Connected Modules / Calls From:
# Month/agenda query handlers, presentation dependencies

from datetime import date
from typing import Dict, Iterable, List, Optional, Tuple

from garden_calendar.shared.core.exceptions import MalformedStoredDateError, ValidationError
from garden_calendar.shared.utils.dates import (
    DateLike,
    format_iso_date,
    to_calendar_date,
    try_parse_iso_date,
)
from garden_calendar.shared.utils.logging import get_logger

from ..models.calendar_entry import AgendaSections, CalendarEntry, DayMarker, MonthView
from ..models.plant import PlantProfile

logger = get_logger(__name__)


def _entry_date(entry: CalendarEntry) -> Optional[date]:
    """Parsed entry date, or None (logged) when the stored literal is malformed."""
    parsed = try_parse_iso_date(entry.date)
    if parsed is None:
        logger.warning(
            "Skipping calendar entry with malformed date",
            entry_id=entry.id,
            user_id=entry.user_id,
            raw_date=str(entry.date),
        )
    return parsed


def _dated_entries(entries: Iterable[CalendarEntry]) -> List[Tuple[date, CalendarEntry]]:
    dated = []
    for entry in entries:
        parsed = _entry_date(entry)
        if parsed is not None:
            dated.append((parsed, entry))
    return dated


def _caller_date(value: DateLike, field: str) -> date:
    try:
        return to_calendar_date(value)
    except MalformedStoredDateError as e:
        raise ValidationError(
            f"{field} must be a YYYY-MM-DD date",
            field=field,
            value=value,
            constraint="YYYY-MM-DD",
        ) from e


def _sorted_by_date(dated: List[Tuple[date, CalendarEntry]]) -> List[CalendarEntry]:
    # sorted() is stable, so same-day entries keep their supplied order
    return [entry for _, entry in sorted(dated, key=lambda pair: pair[0])]


def filter_by_month(entries: Iterable[CalendarEntry], year: int, month: int) -> List[CalendarEntry]:
    """
    Entries whose date is in (year, month), ascending by date.

    Months are 1-indexed. Matching compares the parsed components exactly.
    """
    if not 1 <= month <= 12:
        raise ValidationError("month must be between 1 and 12", field="month", value=month)

    in_month = [
        (parsed, entry) for parsed, entry in _dated_entries(entries)
        if parsed.year == year and parsed.month == month
    ]
    return _sorted_by_date(in_month)


def build_day_markers(
    entries: Iterable[CalendarEntry],
    selected_date: DateLike,
    today: DateLike,
) -> Dict[str, DayMarker]:
    """
    Build a new date -> DayMarker map.

    Every entry's plant is appended to its day in input order. The markers for
    today and the selected date always exist and keep any plants already on them.
    """
    today_key = format_iso_date(_caller_date(today, "today"))
    selected_key = format_iso_date(_caller_date(selected_date, "selected_date"))

    plants_by_day: Dict[str, List[PlantProfile]] = {}
    for parsed, entry in _dated_entries(entries):
        plants_by_day.setdefault(format_iso_date(parsed), []).append(entry.plant)

    plants_by_day.setdefault(today_key, [])
    plants_by_day.setdefault(selected_key, [])

    return {
        day: DayMarker(
            plants=tuple(plants),
            is_selected=day == selected_key,
            is_today=day == today_key,
        )
        for day, plants in plants_by_day.items()
    }


def build_month_view(
    entries: Iterable[CalendarEntry],
    year: int,
    month: int,
    selected_date: DateLike,
    today: DateLike,
) -> MonthView:
    """Month events plus the day markers computed from them."""
    events = filter_by_month(entries, year, month)
    markers = build_day_markers(events, selected_date, today)
    return MonthView(
        year=year,
        month=month,
        selected_date=format_iso_date(_caller_date(selected_date, "selected_date")),
        today=format_iso_date(_caller_date(today, "today")),
        events=events,
        day_markers=markers,
    )


def split_agenda(entries: Iterable[CalendarEntry], today: DateLike) -> AgendaSections:
    """
    Split entries into upcoming (on or after today) and archived (before today).

    Both sections are ascending by date.
    """
    reference = _caller_date(today, "today")
    dated = _dated_entries(entries)
    return AgendaSections(
        today=format_iso_date(reference),
        upcoming=_sorted_by_date([pair for pair in dated if pair[0] >= reference]),
        archived=_sorted_by_date([pair for pair in dated if pair[0] < reference]),
    )


class MonthEventAggregator:
    """
    Stateless facade over the month aggregation functions.

    Holds no memory between calls; every call recomputes from the entries given.
    """

    def filter_by_month(self, entries: Iterable[CalendarEntry], year: int, month: int) -> List[CalendarEntry]:
        return filter_by_month(entries, year, month)

    def build_day_markers(
        self,
        entries: Iterable[CalendarEntry],
        selected_date: DateLike,
        today: DateLike,
    ) -> Dict[str, DayMarker]:
        return build_day_markers(entries, selected_date, today)

    def build_month_view(
        self,
        entries: Iterable[CalendarEntry],
        year: int,
        month: int,
        selected_date: DateLike,
        today: DateLike,
    ) -> MonthView:
        return build_month_view(entries, year, month, selected_date, today)

    def split_agenda(self, entries: Iterable[CalendarEntry], today: DateLike) -> AgendaSections:
        return split_agenda(entries, today)
