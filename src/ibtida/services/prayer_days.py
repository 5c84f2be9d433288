"""Prayer day logging and credit awarding."""

import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Protocol

from ibtida.domain.prayers import (
    PrayerDay,
    PrayerStatus,
    PrayerType,
    active_prayers,
    statuses_for_gender,
)
from ibtida.services.errors import InactivePrayerSlotError, StatusNotAllowedError
from ibtida.services.retry import RetryPolicy
from ibtida.services.streaks import PrayerHistoryRepository, StreakCalculator
from ibtida.services.users import UserProfileService

_logger = logging.getLogger(__name__)


class PrayerDayRepository(PrayerHistoryRepository, Protocol):
    """Persistence interface for prayer days."""

    def get_day(self, user_id: str, day: date) -> PrayerDay | None:
        """Return the stored prayer day, if present."""

    def save_day(self, prayer_day: PrayerDay) -> None:
        """Create or replace a prayer day."""


@dataclass(frozen=True)
class PrayerDayUpdate:
    """Result of a status change."""

    prayer_day: PrayerDay
    credits: int
    credits_added: int
    current_streak: int


@dataclass
class PrayerDayService:
    """Service for reading and updating daily prayer statuses."""

    repository: PrayerDayRepository
    user_service: UserProfileService
    streak_calculator: StreakCalculator
    retry: RetryPolicy = field(default_factory=RetryPolicy)

    def get_day(self, user_id: str, day: date) -> PrayerDay:
        """Return the stored day or a fresh, unsaved one."""
        stored = self.retry.call(
            lambda: self.repository.get_day(user_id, day), action="get_prayer_day"
        )
        return stored or PrayerDay(user_id=user_id, day=day)

    def list_days(self, user_id: str, start: date, end: date) -> list[PrayerDay]:
        """Return stored days in an inclusive range."""
        return self.retry.call(
            lambda: self.repository.list_days(user_id, start, end),
            action="list_prayer_days",
        )

    def update_status(  # noqa: PLR0913
        self,
        user_id: str,
        day: date,
        prayer: PrayerType,
        status: PrayerStatus,
        sunnah_prayed: bool | None = None,
        witr_prayed: bool | None = None,
    ) -> PrayerDayUpdate:
        """Set a prayer status, recompute credits and refresh the streak."""
        profile = self.user_service.require_profile(user_id)
        gender = profile.gender
        if prayer not in active_prayers(day, gender):
            raise InactivePrayerSlotError(f"{prayer} is not tracked on {day}")
        if status not in statuses_for_gender(gender, prayer):
            raise StatusNotAllowedError(f"{status} is not available for {prayer}")

        prayer_day = self.get_day(user_id, day)
        prayer_day.set_status(
            status, prayer, sunnah_prayed=sunnah_prayed, witr_prayed=witr_prayed
        )
        prayer_day.is_menstrual_day = profile.menstrual_mode_enabled
        prayer_day.recalculate_credits(
            account_age_days=profile.account_age_days(day),
            current_streak=profile.current_streak,
            gender=gender,
        )

        credits_added = max(
            0, prayer_day.total_credits_for_day - prayer_day.credits_awarded
        )
        # The award mark is raised only after the profile holds the credits.
        self.retry.call(
            lambda: self.repository.save_day(prayer_day), action="save_prayer_day"
        )
        if credits_added:
            profile = self.user_service.add_credits(user_id, credits_added)
            prayer_day.credits_awarded += credits_added
            self.retry.call(
                lambda: self.repository.save_day(prayer_day),
                action="save_prayer_day",
            )

        streak = self.streak_calculator.recalculate_and_update_streak(
            user_id, today=day
        )
        _logger.info(
            "Prayer %s set to %s for %s on %s (+%s credits)",
            prayer,
            status,
            user_id,
            prayer_day.day_id,
            credits_added,
        )
        return PrayerDayUpdate(
            prayer_day=prayer_day,
            credits=profile.credits,
            credits_added=credits_added,
            current_streak=streak,
        )
