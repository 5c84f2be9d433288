"""Daily fasting log service."""

import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Protocol

from ibtida.domain.credits import fasting_bonus
from ibtida.domain.daily_logs import DailyLog, FastingAnswer, FastingReason
from ibtida.domain.hijri import (
    HijriDate,
    HijriMethod,
    hijri_components,
    should_show_fasting_prompt,
)
from ibtida.services.retry import RetryPolicy
from ibtida.services.users import UserProfileService

_logger = logging.getLogger(__name__)


class DailyLogRepository(Protocol):
    """Persistence interface for daily logs."""

    def get_log(self, user_id: str, day_id: str) -> DailyLog | None:
        """Return the stored log for a day, if present."""

    def save_log(self, user_id: str, log: DailyLog) -> None:
        """Create or replace the log for a day."""


@dataclass(frozen=True)
class FastingPrompt:
    """Whether to ask the user about fasting on a day."""

    show: bool
    eligible: bool
    answered: bool
    reason: FastingReason
    hijri: HijriDate


@dataclass(frozen=True)
class FastingAnswerResult:
    """Outcome of recording a fasting answer."""

    log: DailyLog
    bonus_awarded: int
    credits: int


@dataclass
class DailyLogService:
    """Service for daily fasting answers and the fasting bonus."""

    repository: DailyLogRepository
    user_service: UserProfileService
    hijri_method: HijriMethod = HijriMethod.CIVIL
    default_timezone: str = "UTC"
    retry: RetryPolicy = field(default_factory=RetryPolicy)

    def get_log(self, user_id: str, day: date) -> DailyLog | None:
        """Return the stored log for a day."""
        return self.retry.call(
            lambda: self.repository.get_log(user_id, day.isoformat()),
            action="get_daily_log",
        )

    def fasting_prompt(self, user_id: str, day: date) -> FastingPrompt:
        """Return whether the fasting question should be shown."""
        eligible = should_show_fasting_prompt(day, self.hijri_method)
        existing = self.get_log(user_id, day)
        answered = bool(existing and existing.fasting_answered)
        fresh = DailyLog.for_day(day, self.default_timezone, self.hijri_method)
        return FastingPrompt(
            show=eligible and not answered,
            eligible=eligible,
            answered=answered,
            reason=fresh.fasting_reason or FastingReason.OTHER,
            hijri=hijri_components(day, self.hijri_method),
        )

    def answer_fasting(
        self, user_id: str, day: date, answer: FastingAnswer
    ) -> FastingAnswerResult:
        """Record a fasting answer, awarding the bonus once per day."""
        profile = self.user_service.require_profile(user_id)
        fresh = DailyLog.for_day(day, self.default_timezone, self.hijri_method)
        log = self.get_log(user_id, day) or fresh
        log.fasting_reason = fresh.fasting_reason
        log.record_answer(answer)

        bonus = 0
        eligible = log.fasting_reason not in {None, FastingReason.OTHER}
        if eligible and log.is_fasting_today and not log.fasting_bonus_awarded:
            bonus = fasting_bonus(log.fasting_reason)

        self.retry.call(
            lambda: self.repository.save_log(user_id, log), action="save_daily_log"
        )
        if bonus:
            profile = self.user_service.add_credits(user_id, bonus)
            log.fasting_bonus_awarded = True
            self.retry.call(
                lambda: self.repository.save_log(user_id, log),
                action="save_daily_log",
            )
            _logger.info(
                "Fasting bonus %s awarded to %s for %s", bonus, user_id, log.day_id
            )
        return FastingAnswerResult(
            log=log, bonus_awarded=bonus, credits=profile.credits
        )
