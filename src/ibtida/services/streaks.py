"""Prayer streak calculation."""

import logging
from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import Protocol

from ibtida.domain.dates import today_in
from ibtida.domain.prayers import Gender, PrayerDay
from ibtida.services.errors import PersistenceError
from ibtida.services.retry import RetryPolicy
from ibtida.services.users import UserProfileService

_logger = logging.getLogger(__name__)

DEFAULT_LOOKBACK_DAYS = 60


class PrayerHistoryRepository(Protocol):
    """Read access to a user's stored prayer days."""

    def list_days(self, user_id: str, start: date, end: date) -> list[PrayerDay]:
        """Return stored prayer days with start <= day <= end."""


def calculate_streak(
    days: dict[date, PrayerDay],
    today: date,
    gender: Gender | None,
    lookback_days: int = DEFAULT_LOOKBACK_DAYS,
) -> int:
    """Count consecutive qualifying days before ``today``.

    Today is never counted: only fully elapsed days qualify. A day with a
    performed prayer extends the streak, an exempt (menstrual) day carries
    it without extending it, and any other day, including one with no
    record, ends the walk.
    """
    streak = 0
    for offset in range(1, lookback_days + 1):
        record = days.get(today - timedelta(days=offset))
        if record is None:
            break
        if record.counts_for_streak(gender):
            streak += 1
        elif not record.is_streak_exempt(gender):
            break
    return streak


@dataclass
class StreakCalculator:
    """Recomputes and caches a user's current streak."""

    history: PrayerHistoryRepository
    user_service: UserProfileService
    default_timezone: str = "UTC"
    lookback_days: int = DEFAULT_LOOKBACK_DAYS
    retry: RetryPolicy = field(default_factory=RetryPolicy)

    def load_history(self, user_id: str, today: date) -> dict[date, PrayerDay] | None:
        """Return prayer days in the look-back window, or None if unreadable."""
        start = today - timedelta(days=self.lookback_days)
        end = today - timedelta(days=1)
        try:
            records = self.retry.call(
                lambda: self.history.list_days(user_id, start, end),
                action="list_prayer_days",
            )
        except PersistenceError:
            _logger.warning("Prayer history unavailable for %s, streak is 0", user_id)
            return None
        return {record.day: record for record in records}

    def calculate_for_user(
        self, user_id: str, gender: Gender | None, today: date
    ) -> int:
        """Compute the streak without persisting it."""
        history = self.load_history(user_id, today)
        if history is None:
            return 0
        return calculate_streak(history, today, gender, self.lookback_days)

    def recalculate_and_update_streak(
        self, user_id: str, today: date | None = None
    ) -> int:
        """Recompute the streak from stored history and cache it on the profile."""
        profile = self.user_service.require_profile(user_id)
        resolved_today = today or today_in(self.default_timezone)
        streak = self.calculate_for_user(user_id, profile.gender, resolved_today)
        self.user_service.set_current_streak(user_id, streak)
        _logger.info("Updated streak to %s for %s", streak, user_id)
        return streak
