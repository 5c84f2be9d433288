"""Tests for day keys and Sunday-based week helpers."""

from datetime import date

from ibtida.domain.dates import (
    date_range_for_last_n_weeks,
    day_id,
    day_index_in_week,
    days_in_week,
    last_n_week_starts,
    month_bounds,
    parse_day_id,
    parse_month_id,
    week_id,
    week_start,
)

WEDNESDAY = date(2025, 1, 29)


def test_day_id_round_trip_and_malformed_input() -> None:
    assert day_id(WEDNESDAY) == "2025-01-29"
    assert parse_day_id("2025-01-29") == WEDNESDAY
    assert parse_day_id("2025-13-01") is None
    assert parse_day_id("yesterday") is None


def test_weeks_start_on_sunday() -> None:
    assert week_start(WEDNESDAY) == date(2025, 1, 26)
    assert week_start(date(2025, 1, 26)) == date(2025, 1, 26)
    assert week_start(date(2025, 2, 1)) == date(2025, 1, 26)
    assert day_index_in_week(WEDNESDAY) == 3
    assert days_in_week(WEDNESDAY)[0] == date(2025, 1, 26)
    assert days_in_week(WEDNESDAY)[-1] == date(2025, 2, 1)


def test_last_n_week_starts_lists_current_week_first() -> None:
    assert last_n_week_starts(3, WEDNESDAY) == [
        date(2025, 1, 26),
        date(2025, 1, 19),
        date(2025, 1, 12),
    ]
    assert last_n_week_starts(0, WEDNESDAY) == []


def test_date_range_for_last_n_weeks_ends_after_current_week() -> None:
    assert date_range_for_last_n_weeks(3, WEDNESDAY) == (
        date(2025, 1, 12),
        date(2025, 2, 2),
    )


def test_month_helpers() -> None:
    assert month_bounds(2024, 2) == (date(2024, 2, 1), date(2024, 2, 29))
    assert parse_month_id("2025-02") == (2025, 2)
    assert parse_month_id("2025-2x") is None
    assert week_id(WEDNESDAY) == "2025-04"
