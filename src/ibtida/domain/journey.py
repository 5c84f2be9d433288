"""Read-only journey summaries derived from prayer days."""

from dataclasses import dataclass
from datetime import date

from ibtida.domain.credits import Milestone
from ibtida.domain.prayers import PrayerStatus, PrayerType

PRAYERS_PER_DAY = 5
PRAYERS_PER_WEEK = 35


def _fraction(completed: int, total: int) -> float:
    if total <= 0:
        return 0.0
    return completed / total


@dataclass(frozen=True)
class JourneyDaySummary:
    """Completion for one day in a week or month grid."""

    day: date
    day_id: str
    prayers_completed: int
    prayers_total: int = PRAYERS_PER_DAY

    @property
    def completion_fraction(self) -> float:
        return _fraction(self.prayers_completed, self.prayers_total)


@dataclass(frozen=True)
class JourneyWeekSummary:
    """Completion for a Sunday-based week."""

    week_start: date
    week_end: date
    week_id: str
    day_summaries: list[JourneyDaySummary]
    completed_count: int
    total_count: int = PRAYERS_PER_WEEK

    @property
    def completion_fraction(self) -> float:
        return _fraction(self.completed_count, self.total_count)

    @property
    def completion_percent(self) -> int:
        return int(self.completion_fraction * 100)


@dataclass(frozen=True)
class JourneyMonthSummary:
    """Completion for a calendar month."""

    month_id: str
    month_name: str
    day_summaries: list[JourneyDaySummary]
    completed_count: int
    total_count: int
    completed_days: int
    weekly_completed: list[int]

    @property
    def total_days(self) -> int:
        return len(self.day_summaries)

    @property
    def completion_fraction(self) -> float:
        return _fraction(self.completed_count, self.total_count)

    @property
    def completion_percent(self) -> int:
        return int(self.completion_fraction * 100)


@dataclass(frozen=True)
class JourneyUserSummary:
    """Header figures for the journey dashboard."""

    streak_days: int
    credits: int
    milestone: Milestone
    next_milestone: Milestone | None
    progress_to_next: float
    credits_to_next: int | None


@dataclass(frozen=True)
class JourneyPrayerItem:
    """One prayer row in a day detail."""

    prayer_type: PrayerType
    status: PrayerStatus
    sunnah_prayed: bool


@dataclass(frozen=True)
class JourneyDayDetail:
    """All prayers for a single day."""

    day: date
    day_id: str
    prayer_items: list[JourneyPrayerItem]
    prayers_completed: int
    prayers_total: int
    total_credits_for_day: int
    is_menstrual_day: bool
