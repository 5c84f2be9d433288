"""Calendar-day helpers for prayer day keys and Sunday-based weeks."""

import calendar
from datetime import date, datetime, timedelta
from zoneinfo import ZoneInfo

DAYS_PER_WEEK = 7


def day_id(day: date) -> str:
    """Return the yyyy-MM-dd key for a calendar day."""
    return day.isoformat()


def parse_day_id(raw: str) -> date | None:
    """Parse a yyyy-MM-dd key, returning None when malformed."""
    try:
        parsed = datetime.strptime(raw, "%Y-%m-%d")
    except (TypeError, ValueError):
        return None
    return parsed.date()


def today_in(timezone_name: str) -> date:
    """Return the current calendar day in a timezone."""
    return datetime.now(tz=ZoneInfo(timezone_name)).date()


def week_start(day: date) -> date:
    """Return the Sunday that starts the week containing ``day``."""
    return day - timedelta(days=day.isoweekday() % 7)


def days_in_week(day: date) -> list[date]:
    """Return the seven days, Sunday through Saturday, of a week."""
    start = week_start(day)
    return [start + timedelta(days=offset) for offset in range(DAYS_PER_WEEK)]


def day_index_in_week(day: date) -> int:
    """Return the position of a day within its week (0 = Sunday)."""
    return (day - week_start(day)).days


def last_n_week_starts(n: int, today: date) -> list[date]:
    """Return the last ``n`` week starts, current week first."""
    current = week_start(today)
    return [current - timedelta(weeks=offset) for offset in range(max(n, 0))]


def date_range_for_last_n_weeks(n: int, today: date) -> tuple[date, date]:
    """Return ``(start, end)`` covering the last ``n`` weeks; end is exclusive."""
    starts = last_n_week_starts(n, today)
    current = week_start(today)
    if not starts:
        return current, current
    return starts[-1], current + timedelta(days=DAYS_PER_WEEK)


def month_bounds(year: int, month: int) -> tuple[date, date]:
    """Return the first and last day of a month."""
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, 1), date(year, month, last_day)


def week_id(day: date) -> str:
    """Return a ``yyyy-ww`` identifier for the Sunday-based week of a day."""
    start = week_start(day)
    return f"{start.year:04d}-{int(start.strftime('%U')):02d}"


def month_id(year: int, month: int) -> str:
    return f"{year:04d}-{month:02d}"


def parse_month_id(raw: str) -> tuple[int, int] | None:
    """Parse a ``yyyy-MM`` identifier."""
    try:
        parsed = datetime.strptime(raw, "%Y-%m")
    except (TypeError, ValueError):
        return None
    return parsed.year, parsed.month
