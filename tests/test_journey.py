"""Tests for journey summaries."""

from datetime import date

import pytest

from ibtida.containers import AppContainer
from ibtida.domain.prayers import Gender, PrayerStatus, PrayerType
from ibtida.services.errors import UserNotFoundError
from ibtida.services.journey import summarize_month, summarize_week
from tests.conftest import (
    InMemoryPrayerDayRepository,
    InMemoryUserProfileRepository,
    all_prayers,
    make_day,
    make_profile,
)

WEDNESDAY = date(2025, 1, 29)
SUNDAY = date(2025, 1, 26)


def _records():  # type: ignore[no-untyped-def]
    full = make_day(SUNDAY, all_prayers(PrayerStatus.ON_TIME))
    partial = make_day(
        date(2025, 1, 27),
        {
            PrayerType.FAJR: PrayerStatus.QADA,
            PrayerType.ASR: PrayerStatus.PRAYED_AT_MASJID,
            PrayerType.ISHA: PrayerStatus.MISSED,
        },
    )
    return {full.day: full, partial.day: partial}


def test_summarize_week_counts_performed_prayers() -> None:
    summary = summarize_week(SUNDAY, _records(), Gender.BROTHER)

    assert summary.week_end == date(2025, 2, 1)
    assert summary.completed_count == 7
    assert summary.total_count == 35
    assert summary.completion_percent == 20
    assert [day.prayers_completed for day in summary.day_summaries] == [
        5, 2, 0, 0, 0, 0, 0
    ]


def test_summarize_month_reports_full_days_and_weeks() -> None:
    summary = summarize_month(2025, 1, _records(), Gender.BROTHER)

    assert summary.month_id == "2025-01"
    assert summary.month_name == "January"
    assert summary.total_days == 31
    assert summary.total_count == 155
    assert summary.completed_count == 7
    assert summary.completed_days == 1
    assert summary.weekly_completed == [0, 0, 0, 0, 7]


def test_last_n_weeks_lists_current_week_first(
    container: AppContainer,
    profile_repository: InMemoryUserProfileRepository,
    prayer_day_repository: InMemoryPrayerDayRepository,
) -> None:
    profile_repository.save_profile(make_profile())
    for record in _records().values():
        prayer_day_repository.put(record)

    weeks = container.journey_service.last_n_weeks("user-1", 3, today=WEDNESDAY)

    assert [week.week_start for week in weeks] == [
        date(2025, 1, 26),
        date(2025, 1, 19),
        date(2025, 1, 12),
    ]
    assert weeks[0].completed_count == 7
    assert weeks[1].completed_count == 0


def test_day_detail_uses_jumuah_slot_on_friday(
    container: AppContainer,
    profile_repository: InMemoryUserProfileRepository,
    prayer_day_repository: InMemoryPrayerDayRepository,
) -> None:
    friday = date(2025, 1, 31)
    profile_repository.save_profile(make_profile())
    prayer_day_repository.put(
        make_day(
            friday,
            {PrayerType.JUMUAH: PrayerStatus.JUMMAH},
            sunnah_prayed={PrayerType.JUMUAH},
            total_credits_for_day=22,
        )
    )

    detail = container.journey_service.day_detail("user-1", friday)

    assert [item.prayer_type for item in detail.prayer_items][1] == PrayerType.JUMUAH
    assert detail.prayer_items[1].sunnah_prayed
    assert detail.prayers_completed == 1
    assert detail.total_credits_for_day == 22


def test_user_summary_reports_milestones(
    container: AppContainer, profile_repository: InMemoryUserProfileRepository
) -> None:
    profile_repository.save_profile(make_profile(credits=120, current_streak=4))

    summary = container.journey_service.user_summary("user-1")

    assert summary.streak_days == 4
    assert summary.milestone.name == "Consistent"
    assert summary.next_milestone is not None
    assert summary.next_milestone.name == "Steady"
    assert summary.credits_to_next == 130


def test_unknown_user_has_no_journey(container: AppContainer) -> None:
    with pytest.raises(UserNotFoundError):
        container.journey_service.user_summary("ghost")


def test_week_summary_aligns_to_sunday(
    container: AppContainer,
    profile_repository: InMemoryUserProfileRepository,
    prayer_day_repository: InMemoryPrayerDayRepository,
) -> None:
    profile_repository.save_profile(make_profile())
    for record in _records().values():
        prayer_day_repository.put(record)

    summary = container.journey_service.week_summary("user-1", WEDNESDAY)

    assert summary.week_start == SUNDAY
    assert summary.week_id == "2025-04"
    assert summary.completed_count == 7
