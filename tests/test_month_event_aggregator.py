"""Tests for month filtering, day markers and the agenda split."""
import logging
import random
from datetime import date

import pytest
from pydantic import ValidationError as PydanticValidationError

from garden_calendar.modules.planting_calendar.domain.services import (
    MonthEventAggregator,
    build_day_markers,
    build_month_view,
    filter_by_month,
    split_agenda,
)
from garden_calendar.shared.core.exceptions import ValidationError

from conftest import make_entry

AGGREGATOR_LOGGER = "garden_calendar.modules.planting_calendar.domain.services.month_event_aggregator"


# --------------------
# filter_by_month
# --------------------
def test_filter_by_month_keeps_only_exact_year_and_month():
    entries = [
        make_entry("Tomato", "2024-03-20"),
        make_entry("Basil", "2024-04-01"),
        make_entry("Pepper", "2025-03-02"),
        make_entry("Kale", "2024-03-01"),
    ]

    result = filter_by_month(entries, 2024, 3)

    assert [entry.id for entry in result] == ["kale", "tomato"]


def test_filter_by_month_months_are_one_indexed():
    entries = [make_entry("Tomato", "2024-01-10"), make_entry("Basil", "2024-12-31")]

    assert [e.id for e in filter_by_month(entries, 2024, 1)] == ["tomato"]
    assert [e.id for e in filter_by_month(entries, 2024, 12)] == ["basil"]


def test_filter_by_month_first_of_month_is_not_shifted():
    """A date-only literal on the 1st stays in its own month."""
    entries = [make_entry("Tomato", "2024-03-01")]

    assert len(filter_by_month(entries, 2024, 3)) == 1
    assert filter_by_month(entries, 2024, 2) == []


def test_filter_by_month_same_day_keeps_supplied_order():
    entries = [
        make_entry("Zucchini", "2024-03-05"),
        make_entry("Arugula", "2024-03-05"),
        make_entry("Basil", "2024-03-01"),
    ]

    result = filter_by_month(entries, 2024, 3)

    assert [e.id for e in result] == ["basil", "zucchini", "arugula"]


def test_filter_by_month_skips_malformed_dates_and_logs(caplog):
    entries = [make_entry("Tomato", "2024-13-40"), make_entry("Basil", "2024-03-05")]

    with caplog.at_level(logging.WARNING, logger=AGGREGATOR_LOGGER):
        result = filter_by_month(entries, 2024, 3)

    assert [e.id for e in result] == ["basil"]
    warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
    assert len(warnings) == 1
    assert warnings[0].extra_fields["entry_id"] == "tomato"
    assert warnings[0].extra_fields["raw_date"] == "2024-13-40"


def test_filter_by_month_empty_input():
    assert filter_by_month([], 2024, 3) == []


@pytest.mark.parametrize("month", [0, 13, -1])
def test_filter_by_month_rejects_month_out_of_range(month):
    with pytest.raises(ValidationError):
        filter_by_month([make_entry("Tomato", "2024-03-01")], 2024, month)


# --------------------
# build_day_markers
# --------------------
def test_build_day_markers_groups_plants_in_input_order():
    entries = [make_entry("Tomato", "2024-03-05"), make_entry("Basil", "2024-03-05")]

    markers = build_day_markers(entries, selected_date="2024-03-10", today="2024-03-01")

    marker = markers["2024-03-05"]
    assert [plant.display_name for plant in marker.plants] == ["Tomato", "Basil"]
    assert marker.overflow_count == 1
    assert marker.is_selected is False
    assert marker.is_today is False


def test_build_day_markers_single_plant_has_no_overflow():
    markers = build_day_markers([make_entry("Tomato", "2024-03-05")], "2024-03-10", "2024-03-01")

    assert markers["2024-03-05"].overflow_count == 0
    assert markers["2024-03-05"].has_plants


def test_build_day_markers_today_and_selected_exist_without_plants():
    markers = build_day_markers([], selected_date="2024-03-10", today="2024-03-01")

    assert set(markers) == {"2024-03-10", "2024-03-01"}
    assert markers["2024-03-10"].is_selected and not markers["2024-03-10"].is_today
    assert markers["2024-03-01"].is_today and not markers["2024-03-01"].is_selected
    assert markers["2024-03-01"].overflow_count == 0
    assert not markers["2024-03-01"].has_plants


def test_build_day_markers_selected_day_keeps_its_plants():
    entries = [make_entry("Tomato", "2024-03-05"), make_entry("Basil", "2024-03-05")]

    markers = build_day_markers(entries, selected_date="2024-03-05", today="2024-03-05")

    marker = markers["2024-03-05"]
    assert marker.is_selected and marker.is_today
    assert [plant.id for plant in marker.plants] == ["tomato", "basil"]
    assert len(markers) == 1


def test_build_day_markers_accepts_date_objects():
    markers = build_day_markers([], selected_date=date(2024, 3, 10), today=date(2024, 3, 1))

    assert "2024-03-10" in markers and "2024-03-01" in markers


def test_build_day_markers_skips_malformed_dates():
    entries = [make_entry("Tomato", "2024-13-40"), make_entry("Basil", "2024-03-05")]

    markers = build_day_markers(entries, "2024-03-10", "2024-03-01")

    assert "2024-13-40" not in markers
    assert [p.id for p in markers["2024-03-05"].plants] == ["basil"]


@pytest.mark.parametrize("field, kwargs", [
    ("today", {"selected_date": "2024-03-10", "today": "2024-13-01"}),
    ("selected_date", {"selected_date": "not-a-date", "today": "2024-03-01"}),
])
def test_build_day_markers_rejects_malformed_caller_dates(field, kwargs):
    with pytest.raises(ValidationError) as exc_info:
        build_day_markers([], **kwargs)

    assert exc_info.value.details["field"] == field


def test_build_day_markers_is_idempotent_and_returns_fresh_maps():
    entries = [make_entry("Tomato", "2024-03-05"), make_entry("Basil", "2024-03-06")]

    first = build_day_markers(entries, "2024-03-10", "2024-03-01")
    second = build_day_markers(entries, "2024-03-10", "2024-03-01")

    assert first == second
    assert first is not second


def test_build_day_markers_set_membership_ignores_input_order():
    entries = [
        make_entry("Tomato", "2024-03-05"),
        make_entry("Basil", "2024-03-05"),
        make_entry("Kale", "2024-03-07"),
        make_entry("Pepper", "2024-03-09"),
    ]
    shuffled = list(entries)
    random.Random(7).shuffle(shuffled)

    first = build_day_markers(entries, "2024-03-10", "2024-03-01")
    second = build_day_markers(shuffled, "2024-03-10", "2024-03-01")

    assert set(first) == set(second)
    for day in first:
        assert {p.id for p in first[day].plants} == {p.id for p in second[day].plants}
        assert first[day].overflow_count == second[day].overflow_count


def test_day_markers_are_frozen():
    markers = build_day_markers([make_entry("Tomato", "2024-03-05")], "2024-03-10", "2024-03-01")

    with pytest.raises(PydanticValidationError):
        markers["2024-03-05"].is_today = True


# --------------------
# build_month_view
# --------------------
def test_build_month_view_markers_only_cover_month_events():
    entries = [
        make_entry("Tomato", "2024-03-05"),
        make_entry("Basil", "2024-03-05"),
        make_entry("Kale", "2024-04-02"),
    ]

    view = build_month_view(entries, 2024, 3, selected_date="2024-03-05", today="2024-03-01")

    assert [e.id for e in view.events] == ["tomato", "basil"]
    assert "2024-04-02" not in view.day_markers
    assert view.day_markers["2024-03-05"].overflow_count == 1
    assert view.day_markers["2024-03-05"].is_selected
    assert view.day_markers["2024-03-01"].is_today
    assert view.today == "2024-03-01"
    assert view.selected_date == "2024-03-05"


def test_month_event_aggregator_facade_delegates():
    aggregator = MonthEventAggregator()
    entries = [make_entry("Tomato", "2024-03-05")]

    assert aggregator.filter_by_month(entries, 2024, 3) == filter_by_month(entries, 2024, 3)
    assert aggregator.build_day_markers(entries, "2024-03-05", "2024-03-01") == build_day_markers(
        entries, "2024-03-05", "2024-03-01"
    )


# --------------------
# split_agenda
# --------------------
def test_split_agenda_today_counts_as_upcoming():
    entries = [
        make_entry("Tomato", "2024-06-10"),
        make_entry("Basil", "2024-06-01"),
        make_entry("Kale", "2024-05-31"),
        make_entry("Pepper", "2023-09-01"),
        make_entry("Leek", "bad-date"),
    ]

    agenda = split_agenda(entries, "2024-06-01")

    assert [e.id for e in agenda.upcoming] == ["basil", "tomato"]
    assert [e.id for e in agenda.archived] == ["pepper", "kale"]
    assert agenda.today == "2024-06-01"


def test_split_agenda_rejects_malformed_today():
    with pytest.raises(ValidationError):
        split_agenda([], "06/01/2024")


def test_filter_by_month_is_idempotent():
    entries = [
        make_entry("Tomato", "2024-03-15"),
        make_entry("Basil", "2024-03-15"),
        make_entry("Kale", "2024-04-01"),
    ]

    once = filter_by_month(entries, 2024, 3)

    assert filter_by_month(once, 2024, 3) == once


def test_two_plants_on_the_same_day_show_one_overflow():
    entries = [make_entry("Tomato", "2024-03-15"), make_entry("Basil", "2024-03-15")]

    marker = build_day_markers(entries, "2024-03-01", "2024-03-01")["2024-03-15"]

    assert [p.display_name for p in marker.plants] == ["Tomato", "Basil"]
    assert marker.overflow_count == 1
