"""Hijri calendar conversion and fasting-day helpers."""

import logging
from dataclasses import dataclass
from datetime import date
from enum import StrEnum

from hijridate import Gregorian

_logger = logging.getLogger(__name__)

# Julian day number of 1 Muharram 1 AH (civil, Friday epoch).
_CIVIL_EPOCH_JDN = 1948440
_ORDINAL_TO_JDN = 1721425

MONDAY = 2
THURSDAY = 5
FRIDAY = 6
WHITE_DAYS = frozenset({13, 14, 15})

_MONTH_NAMES = {
    1: "Muharram",
    2: "Safar",
    3: "Rabi I",
    4: "Rabi II",
    5: "Jumada I",
    6: "Jumada II",
    7: "Rajab",
    8: "Sha'ban",
    9: "Ramadan",
    10: "Shawwal",
    11: "Dhu al-Qi'dah",
    12: "Dhu al-Hijjah",
}


class HijriMethod(StrEnum):
    """Hijri calculation method."""

    CIVIL = "civil"
    UMM_AL_QURA = "ummAlQura"


@dataclass(frozen=True)
class HijriDate:
    """Hijri year, month and day."""

    year: int
    month: int
    day: int

    @property
    def is_white_day(self) -> bool:
        """Return True for the 13th, 14th and 15th of the month."""
        return self.day in WHITE_DAYS

    @property
    def month_name(self) -> str:
        return month_name(self.month)


def parse_method(raw: object) -> HijriMethod:
    """Parse a method name, defaulting to civil."""
    if isinstance(raw, HijriMethod):
        return raw
    if isinstance(raw, str):
        try:
            return HijriMethod(raw)
        except ValueError:
            _logger.warning("Unknown Hijri method %r, using civil", raw)
    return HijriMethod.CIVIL


def month_name(month: int) -> str:
    """Return the English Hijri month name, or the number when unknown."""
    return _MONTH_NAMES.get(month, str(month))


def _civil_to_jdn(year: int, month: int, day: int) -> int:
    return (
        day
        + (59 * (month - 1) + 1) // 2
        + (year - 1) * 354
        + (3 + 11 * year) // 30
        + _CIVIL_EPOCH_JDN
        - 1
    )


def _civil_components(day: date) -> HijriDate:
    jdn = day.toordinal() + _ORDINAL_TO_JDN
    year = (30 * (jdn - _CIVIL_EPOCH_JDN) + 10646) // 10631
    offset = jdn - 29 - _civil_to_jdn(year, 1, 1)
    month = min(12, -((-2 * offset) // 59) + 1)
    hijri_day = jdn - _civil_to_jdn(year, month, 1) + 1
    return HijriDate(year=year, month=month, day=hijri_day)


def hijri_components(day: date, method: HijriMethod = HijriMethod.CIVIL) -> HijriDate:
    """Convert a Gregorian calendar day to Hijri components."""
    if method == HijriMethod.UMM_AL_QURA:
        try:
            converted = Gregorian(day.year, day.month, day.day).to_hijri()
        except OverflowError:
            _logger.warning(
                "Date %s outside Umm al-Qura range, using civil calendar", day
            )
        else:
            return HijriDate(
                year=converted.year, month=converted.month, day=converted.day
            )
    return _civil_components(day)


def hijri_display_string(day: date, method: HijriMethod = HijriMethod.CIVIL) -> str:
    """Return a display string such as ``Rajab 9, 1447``."""
    hijri = hijri_components(day, method)
    return f"{hijri.month_name} {hijri.day}, {hijri.year}"


def hijri_short_string(day: date, method: HijriMethod = HijriMethod.CIVIL) -> str:
    """Return a day-first string such as ``9 Rajab 1447``."""
    hijri = hijri_components(day, method)
    return f"{hijri.day} {hijri.month_name} {hijri.year}"


def is_white_day(day: date, method: HijriMethod = HijriMethod.CIVIL) -> bool:
    """Return True when the day falls on the 13th-15th of a Hijri month."""
    return hijri_components(day, method).is_white_day


def weekday(day: date) -> int:
    """Return the weekday with 1 = Sunday through 7 = Saturday."""
    return day.isoweekday() % 7 + 1


def is_monday_or_thursday(day: date) -> bool:
    return weekday(day) in {MONDAY, THURSDAY}


def is_friday(day: date) -> bool:
    return weekday(day) == FRIDAY


def should_show_fasting_prompt(
    day: date, method: HijriMethod = HijriMethod.CIVIL
) -> bool:
    """Return True on Mondays, Thursdays and White Days."""
    return is_monday_or_thursday(day) or is_white_day(day, method)
