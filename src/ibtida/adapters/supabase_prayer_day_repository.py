"""Supabase repository for prayer days."""

from dataclasses import dataclass
from datetime import date

from supabase import Client

from ibtida.adapters.supabase_rows import as_int, format_timestamp, parse_timestamp
from ibtida.domain.dates import parse_day_id
from ibtida.domain.prayers import PrayerDay, PrayerType, parse_status
from ibtida.services.prayer_days import PrayerDayRepository

_STATUS_COLUMNS = {prayer: f"{prayer.value}_status" for prayer in PrayerType}
_COLUMNS = ", ".join(
    [
        "user_id",
        "day_id",
        *_STATUS_COLUMNS.values(),
        "sunnah_prayed",
        "witr_prayed",
        "is_menstrual_day",
        "total_credits_for_day",
        "credits_awarded",
        "last_updated_at",
    ]
)


@dataclass
class SupabasePrayerDayRepository(PrayerDayRepository):
    """Supabase implementation for prayer day persistence."""

    client: Client

    def get_day(self, user_id: str, day: date) -> PrayerDay | None:
        """Return the stored prayer day, if present."""
        response = (
            self.client.table("prayer_days")
            .select(_COLUMNS)
            .eq("user_id", user_id)
            .eq("day_id", day.isoformat())
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_row(response.data[0], user_id)

    def list_days(self, user_id: str, start: date, end: date) -> list[PrayerDay]:
        """Return prayer days in an inclusive range, oldest first."""
        response = (
            self.client.table("prayer_days")
            .select(_COLUMNS)
            .eq("user_id", user_id)
            .gte("day_id", start.isoformat())
            .lte("day_id", end.isoformat())
            .order("day_id", desc=False)
            .execute()
        )
        days = [_parse_row(row, user_id) for row in response.data or []]
        return [day for day in days if day is not None]

    def save_day(self, prayer_day: PrayerDay) -> None:
        """Upsert a prayer day keyed by user and day."""
        payload: dict[str, object] = {
            "user_id": prayer_day.user_id,
            "day_id": prayer_day.day_id,
            "sunnah_prayed": sorted(p.value for p in prayer_day.sunnah_prayed),
            "witr_prayed": prayer_day.witr_prayed,
            "is_menstrual_day": prayer_day.is_menstrual_day,
            "total_credits_for_day": prayer_day.total_credits_for_day,
            "credits_awarded": prayer_day.credits_awarded,
            "last_updated_at": format_timestamp(prayer_day.last_updated_at),
        }
        for prayer, column in _STATUS_COLUMNS.items():
            payload[column] = prayer_day.status(prayer).value
        self.client.table("prayer_days").upsert(
            payload, on_conflict="user_id,day_id"
        ).execute()


def _parse_row(row: dict[str, object], user_id: str) -> PrayerDay | None:
    day = parse_day_id(str(row.get("day_id") or ""))
    if day is None:
        return None
    sunnah_raw = row.get("sunnah_prayed") or []
    sunnah: set[PrayerType] = set()
    if isinstance(sunnah_raw, list):
        for value in sunnah_raw:
            try:
                sunnah.add(PrayerType(value))
            except ValueError:
                continue
    return PrayerDay(
        user_id=str(row.get("user_id") or user_id),
        day=day,
        statuses={
            prayer: parse_status(row.get(column))
            for prayer, column in _STATUS_COLUMNS.items()
            if row.get(column) is not None
        },
        sunnah_prayed=sunnah,
        witr_prayed=bool(row.get("witr_prayed", False)),
        is_menstrual_day=bool(row.get("is_menstrual_day", False)),
        total_credits_for_day=as_int(row.get("total_credits_for_day")),
        credits_awarded=as_int(row.get("credits_awarded")),
        last_updated_at=parse_timestamp(row.get("last_updated_at")),
    )
