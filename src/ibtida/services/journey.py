"""Journey dashboard summaries over stored prayer days."""

import calendar
from dataclasses import dataclass
from datetime import date, timedelta

from ibtida.domain import credits as credit_rules
from ibtida.domain.dates import (
    DAYS_PER_WEEK,
    day_id,
    last_n_week_starts,
    month_bounds,
    month_id,
    today_in,
    week_id,
    week_start,
)
from ibtida.domain.journey import (
    PRAYERS_PER_DAY,
    JourneyDayDetail,
    JourneyDaySummary,
    JourneyMonthSummary,
    JourneyPrayerItem,
    JourneyUserSummary,
    JourneyWeekSummary,
)
from ibtida.domain.prayers import Gender, PrayerDay, active_prayers, is_performed
from ibtida.services.prayer_days import PrayerDayService
from ibtida.services.users import UserProfileService


def summarize_day(
    day: date, record: PrayerDay | None, gender: Gender | None
) -> JourneyDaySummary:
    """Summarize one day; a missing record counts as nothing logged."""
    completed = record.completed_count(gender) if record else 0
    return JourneyDaySummary(
        day=day,
        day_id=day_id(day),
        prayers_completed=completed,
        prayers_total=PRAYERS_PER_DAY,
    )


def summarize_range(
    start: date, days: int, records: dict[date, PrayerDay], gender: Gender | None
) -> list[JourneyDaySummary]:
    """Summarize ``days`` consecutive days beginning at ``start``."""
    summaries = []
    for offset in range(days):
        day = start + timedelta(days=offset)
        summaries.append(summarize_day(day, records.get(day), gender))
    return summaries


def summarize_week(
    start: date, records: dict[date, PrayerDay], gender: Gender | None
) -> JourneyWeekSummary:
    """Summarize the Sunday-based week beginning at ``start``."""
    daily = summarize_range(start, DAYS_PER_WEEK, records, gender)
    return JourneyWeekSummary(
        week_start=start,
        week_end=start + timedelta(days=DAYS_PER_WEEK - 1),
        week_id=week_id(start),
        day_summaries=daily,
        completed_count=sum(entry.prayers_completed for entry in daily),
        total_count=PRAYERS_PER_DAY * len(daily),
    )


def summarize_month(
    year: int, month: int, records: dict[date, PrayerDay], gender: Gender | None
) -> JourneyMonthSummary:
    """Summarize a calendar month, with per-week completed counts."""
    first, last = month_bounds(year, month)
    daily = summarize_range(first, (last - first).days + 1, records, gender)
    weekly: dict[date, int] = {}
    for entry in daily:
        key = week_start(entry.day)
        weekly[key] = weekly.get(key, 0) + entry.prayers_completed
    return JourneyMonthSummary(
        month_id=month_id(year, month),
        month_name=calendar.month_name[month],
        day_summaries=daily,
        completed_count=sum(entry.prayers_completed for entry in daily),
        total_count=PRAYERS_PER_DAY * len(daily),
        completed_days=sum(
            1 for entry in daily if entry.prayers_completed == entry.prayers_total
        ),
        weekly_completed=[weekly[key] for key in sorted(weekly)],
    )


def build_day_detail(
    day: date, record: PrayerDay | None, gender: Gender | None
) -> JourneyDayDetail:
    """Build the per-prayer detail for a day."""
    prayer_day = record or PrayerDay(user_id="", day=day)
    items = [
        JourneyPrayerItem(
            prayer_type=prayer,
            status=prayer_day.status(prayer),
            sunnah_prayed=prayer in prayer_day.sunnah_prayed,
        )
        for prayer in active_prayers(day, gender)
    ]
    return JourneyDayDetail(
        day=day,
        day_id=day_id(day),
        prayer_items=items,
        prayers_completed=sum(1 for item in items if is_performed(item.status)),
        prayers_total=len(items),
        total_credits_for_day=prayer_day.total_credits_for_day,
        is_menstrual_day=prayer_day.is_menstrual_day,
    )


@dataclass
class JourneyService:
    """Service for journey progress views."""

    prayer_day_service: PrayerDayService
    user_service: UserProfileService
    default_timezone: str = "UTC"

    def week_summary(self, user_id: str, start: date) -> JourneyWeekSummary:
        """Return the summary for the week starting on ``start``."""
        gender = self.user_service.require_profile(user_id).gender
        aligned = week_start(start)
        records = self._records(
            user_id, aligned, aligned + timedelta(days=DAYS_PER_WEEK - 1)
        )
        return summarize_week(aligned, records, gender)

    def last_n_weeks(
        self, user_id: str, n: int = 5, today: date | None = None
    ) -> list[JourneyWeekSummary]:
        """Return summaries for the last ``n`` weeks, current week first."""
        gender = self.user_service.require_profile(user_id).gender
        starts = last_n_week_starts(n, today or today_in(self.default_timezone))
        if not starts:
            return []
        records = self._records(
            user_id, starts[-1], starts[0] + timedelta(days=DAYS_PER_WEEK - 1)
        )
        return [summarize_week(start, records, gender) for start in starts]

    def month_summary(
        self, user_id: str, year: int, month: int
    ) -> JourneyMonthSummary:
        """Return the summary for a calendar month."""
        gender = self.user_service.require_profile(user_id).gender
        first, last = month_bounds(year, month)
        records = self._records(user_id, first, last)
        return summarize_month(year, month, records, gender)

    def day_detail(self, user_id: str, day: date) -> JourneyDayDetail:
        """Return the per-prayer detail for a day."""
        gender = self.user_service.require_profile(user_id).gender
        records = self._records(user_id, day, day)
        return build_day_detail(day, records.get(day), gender)

    def user_summary(self, user_id: str) -> JourneyUserSummary:
        """Return streak, credits and milestone progress."""
        profile = self.user_service.require_profile(user_id)
        return JourneyUserSummary(
            streak_days=profile.current_streak,
            credits=profile.credits,
            milestone=credit_rules.current_milestone(profile.credits),
            next_milestone=credit_rules.next_milestone(profile.credits),
            progress_to_next=credit_rules.progress_to_next(profile.credits),
            credits_to_next=credit_rules.credits_to_next(profile.credits),
        )

    def _records(
        self, user_id: str, start: date, end: date
    ) -> dict[date, PrayerDay]:
        days = self.prayer_day_service.list_days(user_id, start, end)
        return {record.day: record for record in days}
