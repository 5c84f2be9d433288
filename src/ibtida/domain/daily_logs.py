"""Domain models for per-day fasting logs."""

from dataclasses import dataclass
from datetime import UTC, date, datetime
from enum import StrEnum

from ibtida.domain.hijri import (
    MONDAY,
    THURSDAY,
    HijriMethod,
    hijri_components,
    hijri_display_string,
    weekday,
)


class FastingAnswer(StrEnum):
    """Answer to the daily fasting question."""

    YES = "yes"
    NO = "no"
    PREFER_NOT_TO_SAY = "prefer_not_to_say"


class FastingReason(StrEnum):
    """Why a day is a recommended fasting day."""

    MONDAY = "monday"
    THURSDAY = "thursday"
    WHITE_DAY = "white_day"
    OTHER = "other"


def fasting_reason_for(
    day: date, method: HijriMethod = HijriMethod.CIVIL
) -> FastingReason:
    """Return the fasting reason for a day; White Days take precedence."""
    if hijri_components(day, method).is_white_day:
        return FastingReason.WHITE_DAY
    day_of_week = weekday(day)
    if day_of_week == MONDAY:
        return FastingReason.MONDAY
    if day_of_week == THURSDAY:
        return FastingReason.THURSDAY
    return FastingReason.OTHER


@dataclass
class DailyLog:
    """Fasting answer and Hijri date for one user on one day."""

    day_id: str
    timezone: str
    hijri_year: int = 0
    hijri_month: int = 0
    hijri_day: int = 0
    hijri_display: str | None = None
    fasting_answer: FastingAnswer | None = None
    is_fasting: bool | None = None
    fasting_reason: FastingReason | None = None
    fasting_answered: bool = False
    fasting_bonus_awarded: bool = False
    updated_at: datetime | None = None

    @classmethod
    def for_day(
        cls, day: date, timezone: str, method: HijriMethod = HijriMethod.CIVIL
    ) -> "DailyLog":
        """Create an unanswered log with Hijri fields filled in."""
        hijri = hijri_components(day, method)
        return cls(
            day_id=day.isoformat(),
            timezone=timezone,
            hijri_year=hijri.year,
            hijri_month=hijri.month,
            hijri_day=hijri.day,
            hijri_display=hijri_display_string(day, method),
            fasting_reason=fasting_reason_for(day, method),
            updated_at=datetime.now(tz=UTC),
        )

    @property
    def is_fasting_today(self) -> bool:
        return self.is_fasting is True

    def record_answer(self, answer: FastingAnswer) -> None:
        """Apply the user's answer; the answer stays editable."""
        self.fasting_answer = answer
        if answer == FastingAnswer.YES:
            self.is_fasting = True
        elif answer == FastingAnswer.NO:
            self.is_fasting = False
        else:
            self.is_fasting = None
        self.fasting_answered = True
        self.updated_at = datetime.now(tz=UTC)
