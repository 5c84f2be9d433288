"""Credit rules for prayer and fasting tracking.

Credits are personal consistency scores used to motivate regular prayer.
They do not represent religious reward.
"""

from collections.abc import Iterable
from dataclasses import dataclass

from ibtida.domain.daily_logs import FastingReason
from ibtida.domain.prayers import Gender, PrayerStatus, parse_status

ON_TIME_CREDIT = 10
LATE_CREDIT = 6
QADA_CREDIT = 4
MISSED_CREDIT = 0
NONE_CREDIT = 0
PRAYED_AT_MASJID_CREDIT = 15
PRAYED_AT_HOME_CREDIT = 10
MENSTRUAL_CREDIT = 0
JUMMAH_CREDIT = 20

SUNNAH_PRAYER_BONUS = 2
WITR_BONUS = 2
STREAK_BONUS = 5
STREAK_BONUS_MIN_DAYS = 7
FASTING_MON_THU_BONUS = 10
FASTING_WHITE_DAY_BONUS = 15

PRAYERS_PER_DAY = 5

_BASE_CREDITS = {
    PrayerStatus.NONE: NONE_CREDIT,
    PrayerStatus.ON_TIME: ON_TIME_CREDIT,
    PrayerStatus.LATE: LATE_CREDIT,
    PrayerStatus.QADA: QADA_CREDIT,
    PrayerStatus.MISSED: MISSED_CREDIT,
    PrayerStatus.PRAYED_AT_MASJID: PRAYED_AT_MASJID_CREDIT,
    PrayerStatus.PRAYED_AT_HOME: PRAYED_AT_HOME_CREDIT,
    PrayerStatus.MENSTRUAL: MENSTRUAL_CREDIT,
    PrayerStatus.JUMMAH: JUMMAH_CREDIT,
}


def base_credit_value(status: PrayerStatus | str) -> int:
    """Return the base credit value for a status (unknown values score 0)."""
    return _BASE_CREDITS.get(parse_status(status), 0)


def calculate_day_credits(
    statuses: Iterable[PrayerStatus], gender: Gender | None
) -> int:
    """Sum base credits for a day's slot statuses.

    Jumu'ah is a brother-only status and scores nothing for anyone else.
    """
    total = 0
    for status in statuses:
        if status == PrayerStatus.JUMMAH and gender != Gender.BROTHER:
            continue
        total += base_credit_value(status)
    return total


def calculate_final_credits(  # noqa: PLR0913
    base_credits: int,
    account_age_days: int,
    current_streak: int,
    gender: Gender | None,
    *,
    performed_count: int = 0,
    sunnah_count: int = 0,
    witr_prayed: bool = False,
) -> int:
    """Combine base credits with the day's bonuses.

    Each bonus category is awarded at most once per slot (Sunnah) or once
    per day (Witr, streak). The streak used for the streak bonus cannot
    exceed the account age.
    """
    if performed_count <= 0:
        return base_credits
    total = base_credits
    total += SUNNAH_PRAYER_BONUS * min(max(sunnah_count, 0), performed_count)
    if witr_prayed:
        total += WITR_BONUS
    effective_streak = min(max(current_streak, 0), max(account_age_days, 0))
    if effective_streak >= STREAK_BONUS_MIN_DAYS:
        total += STREAK_BONUS
    return total


def fasting_bonus(reason: FastingReason | None) -> int:
    """Return the bonus for a voluntary fast."""
    if reason == FastingReason.WHITE_DAY:
        return FASTING_WHITE_DAY_BONUS
    return FASTING_MON_THU_BONUS


def max_credits_per_day() -> int:
    """Return the highest score a single day can reach."""
    return (
        PRAYERS_PER_DAY * (JUMMAH_CREDIT + SUNNAH_PRAYER_BONUS)
        + WITR_BONUS
        + STREAK_BONUS
    )


@dataclass(frozen=True)
class Milestone:
    """Journey milestone unlocked at a credit threshold."""

    name: str
    arabic_name: str
    required_credits: int

    @property
    def full_name(self) -> str:
        return f"{self.name} ({self.arabic_name})"


MILESTONES = (
    Milestone("Getting Started", "البداية", 0),
    Milestone("Consistent", "مواظب", 100),
    Milestone("Steady", "ثابت", 250),
    Milestone("Committed", "ملتزم", 500),
    Milestone("Devoted", "متفاني", 1000),
    Milestone("Elite", "متميز", 2500),
    Milestone("Master", "خبير", 5000),
    Milestone("Legend", "أسطورة", 10000),
)


def current_milestone(credits: int) -> Milestone:
    """Return the highest milestone reached."""
    current = MILESTONES[0]
    for milestone in MILESTONES:
        if credits < milestone.required_credits:
            break
        current = milestone
    return current


def next_milestone(credits: int) -> Milestone | None:
    """Return the next milestone, or None when all are reached."""
    for milestone in MILESTONES:
        if credits < milestone.required_credits:
            return milestone
    return None


def progress_to_next(credits: int) -> float:
    """Return progress from the current milestone to the next in [0, 1]."""
    upcoming = next_milestone(credits)
    if upcoming is None:
        return 1.0
    current = current_milestone(credits)
    span = upcoming.required_credits - current.required_credits
    if span <= 0:
        return 1.0
    return min(1.0, max(0.0, (credits - current.required_credits) / span))


def credits_to_next(credits: int) -> int | None:
    """Return credits still needed for the next milestone."""
    upcoming = next_milestone(credits)
    if upcoming is None:
        return None
    return upcoming.required_credits - credits
