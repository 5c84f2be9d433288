"""Domain models for daily prayer tracking."""

import logging
from dataclasses import dataclass, field
from datetime import UTC, date, datetime
from enum import StrEnum

_logger = logging.getLogger(__name__)

_FRIDAY_WEEKDAY = 4


class PrayerStatus(StrEnum):
    """Logged outcome for a single prayer slot."""

    NONE = "none"
    ON_TIME = "onTime"
    LATE = "late"
    QADA = "qada"
    MISSED = "missed"
    PRAYED_AT_MASJID = "prayedAtMasjid"
    PRAYED_AT_HOME = "prayedAtHome"
    MENSTRUAL = "menstrual"
    JUMMAH = "jummah"


class PrayerType(StrEnum):
    """Prayer slots tracked per day."""

    FAJR = "fajr"
    DHUHR = "dhuhr"
    ASR = "asr"
    MAGHRIB = "maghrib"
    ISHA = "isha"
    JUMUAH = "jumuah"


class Gender(StrEnum):
    """User cohort used for status options and Friday substitution."""

    BROTHER = "brother"
    SISTER = "sister"


_LEGACY_STATUS_ALIASES = {
    "later": PrayerStatus.LATE,
    "made up": PrayerStatus.QADA,
    "madeup": PrayerStatus.QADA,
    "jumu'ah": PrayerStatus.JUMMAH,
    "jumua": PrayerStatus.JUMMAH,
    "jumah": PrayerStatus.JUMMAH,
}

PERFORMED_STATUSES = frozenset(
    {
        PrayerStatus.ON_TIME,
        PrayerStatus.LATE,
        PrayerStatus.QADA,
        PrayerStatus.PRAYED_AT_MASJID,
        PrayerStatus.PRAYED_AT_HOME,
        PrayerStatus.JUMMAH,
    }
)

DAILY_PRAYERS = (
    PrayerType.FAJR,
    PrayerType.DHUHR,
    PrayerType.ASR,
    PrayerType.MAGHRIB,
    PrayerType.ISHA,
)

_BROTHER_STATUSES = (
    PrayerStatus.PRAYED_AT_MASJID,
    PrayerStatus.ON_TIME,
    PrayerStatus.QADA,
    PrayerStatus.MISSED,
    PrayerStatus.NONE,
)
_BROTHER_JUMUAH_STATUSES = (
    PrayerStatus.JUMMAH,
    PrayerStatus.MISSED,
    PrayerStatus.NONE,
)
_SISTER_STATUSES = (
    PrayerStatus.PRAYED_AT_HOME,
    PrayerStatus.QADA,
    PrayerStatus.MISSED,
    PrayerStatus.MENSTRUAL,
    PrayerStatus.NONE,
)


def parse_status(raw: object) -> PrayerStatus:
    """Parse a stored status string, accepting legacy aliases.

    Unknown or missing values resolve to ``PrayerStatus.NONE``.
    """
    if isinstance(raw, PrayerStatus):
        return raw
    if not isinstance(raw, str):
        if raw is not None:
            _logger.warning("Non-string prayer status %r, using none", raw)
        return PrayerStatus.NONE
    try:
        return PrayerStatus(raw)
    except ValueError:
        pass
    alias = _LEGACY_STATUS_ALIASES.get(raw.strip().lower())
    if alias is not None:
        return alias
    _logger.warning("Unknown prayer status %r, using none", raw)
    return PrayerStatus.NONE


def parse_gender(raw: object) -> Gender | None:
    """Parse a stored gender value."""
    if isinstance(raw, Gender):
        return raw
    if isinstance(raw, str):
        try:
            return Gender(raw.strip().lower())
        except ValueError:
            return None
    return None


def is_performed(status: PrayerStatus) -> bool:
    """Return True when the status counts as a prayer actually performed."""
    return status in PERFORMED_STATUSES


def active_prayers(day: date, gender: Gender | None) -> tuple[PrayerType, ...]:
    """Return the five prayer slots active on a day for a user."""
    if day.weekday() == _FRIDAY_WEEKDAY and gender == Gender.BROTHER:
        return (
            PrayerType.FAJR,
            PrayerType.JUMUAH,
            PrayerType.ASR,
            PrayerType.MAGHRIB,
            PrayerType.ISHA,
        )
    return DAILY_PRAYERS


def statuses_for_gender(
    gender: Gender | None, prayer: PrayerType | None = None
) -> tuple[PrayerStatus, ...]:
    """Return the status options a user may pick for a prayer."""
    if gender == Gender.BROTHER:
        if prayer == PrayerType.JUMUAH:
            return _BROTHER_JUMUAH_STATUSES
        return _BROTHER_STATUSES
    if gender == Gender.SISTER:
        return _SISTER_STATUSES
    combined = list(_BROTHER_STATUSES)
    combined.extend(s for s in _SISTER_STATUSES if s not in combined)
    return tuple(combined)


@dataclass
class PrayerDay:
    """Prayer statuses for one user on one calendar day.

    Status writes and credit recomputation are separate steps: call
    ``set_status`` for each change, then ``recalculate_credits`` with the
    user's context before persisting.
    """

    user_id: str
    day: date
    statuses: dict[PrayerType, PrayerStatus] = field(default_factory=dict)
    sunnah_prayed: set[PrayerType] = field(default_factory=set)
    witr_prayed: bool = False
    is_menstrual_day: bool = False
    total_credits_for_day: int = 0
    credits_awarded: int = 0
    last_updated_at: datetime | None = None
    dirty: bool = False

    @property
    def day_id(self) -> str:
        """Return the yyyy-MM-dd document key for the day."""
        return self.day.isoformat()

    def status(self, prayer: PrayerType) -> PrayerStatus:
        """Return the status for a prayer slot, defaulting to none."""
        return self.statuses.get(prayer, PrayerStatus.NONE)

    def set_status(
        self,
        status: PrayerStatus,
        prayer: PrayerType,
        sunnah_prayed: bool | None = None,
        witr_prayed: bool | None = None,
    ) -> None:
        """Set a slot status in place and mark the day for recomputation."""
        self.statuses[prayer] = status
        if not is_performed(status):
            self.sunnah_prayed.discard(prayer)
            if prayer == PrayerType.ISHA:
                self.witr_prayed = False
        elif sunnah_prayed is not None:
            if sunnah_prayed:
                self.sunnah_prayed.add(prayer)
            else:
                self.sunnah_prayed.discard(prayer)
        if (
            prayer == PrayerType.ISHA
            and witr_prayed is not None
            and is_performed(status)
        ):
            self.witr_prayed = witr_prayed
        self.dirty = True

    def active_statuses(self, gender: Gender | None) -> list[PrayerStatus]:
        """Return statuses for the five active slots of this day."""
        return [self.status(prayer) for prayer in active_prayers(self.day, gender)]

    def completed_count(self, gender: Gender | None) -> int:
        """Count performed prayers among the active slots."""
        return sum(1 for status in self.active_statuses(gender) if is_performed(status))

    def counts_for_streak(self, gender: Gender | None) -> bool:
        """Return True when the day has at least one performed prayer."""
        return self.completed_count(gender) > 0

    def is_streak_exempt(self, gender: Gender | None) -> bool:
        """Return True when the day neither extends nor breaks a streak."""
        if self.is_menstrual_day:
            return True
        return all(
            status == PrayerStatus.MENSTRUAL for status in self.active_statuses(gender)
        )

    def recalculate_credits(
        self, account_age_days: int, current_streak: int, gender: Gender | None
    ) -> int:
        """Recompute total credits for the day from its statuses."""
        # Deferred: ibtida.domain.credits imports this module.
        from ibtida.domain.credits import (  # noqa: PLC0415
            calculate_day_credits,
            calculate_final_credits,
        )

        prayers = active_prayers(self.day, gender)
        statuses = [self.status(prayer) for prayer in prayers]
        performed = [p for p in prayers if is_performed(self.status(p))]
        base = calculate_day_credits(statuses, gender)
        self.total_credits_for_day = calculate_final_credits(
            base,
            account_age_days=account_age_days,
            current_streak=current_streak,
            gender=gender,
            performed_count=len(performed),
            sunnah_count=sum(1 for p in performed if p in self.sunnah_prayed),
            witr_prayed=self.witr_prayed and PrayerType.ISHA in performed,
        )
        self.last_updated_at = datetime.now(tz=UTC)
        self.dirty = False
        return self.total_credits_for_day
