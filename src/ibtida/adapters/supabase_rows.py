"""Value conversion helpers shared by the Supabase repositories."""

from datetime import datetime


def parse_timestamp(raw: object) -> datetime | None:
    """Parse an ISO timestamp column, returning None when empty or invalid."""
    if not isinstance(raw, str) or not raw:
        return None
    try:
        return datetime.fromisoformat(raw)
    except ValueError:
        return None


def format_timestamp(value: datetime | None) -> str | None:
    return value.isoformat() if value else None


def as_int(raw: object, default: int = 0) -> int:
    """Coerce a numeric column to int."""
    if isinstance(raw, bool):
        return int(raw)
    if isinstance(raw, int | float):
        return int(raw)
    if isinstance(raw, str):
        try:
            return int(float(raw))
        except ValueError:
            return default
    return default
