"""Supabase repository for daily fasting logs."""

from dataclasses import dataclass
from enum import StrEnum
from typing import TypeVar

from supabase import Client

from ibtida.adapters.supabase_rows import as_int, format_timestamp, parse_timestamp
from ibtida.domain.daily_logs import DailyLog, FastingAnswer, FastingReason
from ibtida.services.daily_logs import DailyLogRepository

E = TypeVar("E", bound=StrEnum)

_COLUMNS = (
    "day_id, timezone, hijri_year, hijri_month, hijri_day, hijri_display, "
    "fasting_answer, is_fasting, fasting_reason, fasting_answered, "
    "fasting_bonus_awarded, updated_at"
)


@dataclass
class SupabaseDailyLogRepository(DailyLogRepository):
    """Supabase implementation for daily logs."""

    client: Client

    def get_log(self, user_id: str, day_id: str) -> DailyLog | None:
        """Return the stored log for a day."""
        response = (
            self.client.table("daily_logs")
            .select(_COLUMNS)
            .eq("user_id", user_id)
            .eq("day_id", day_id)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_row(response.data[0], day_id)

    def save_log(self, user_id: str, log: DailyLog) -> None:
        """Upsert the log keyed by user and day."""
        self.client.table("daily_logs").upsert(
            {
                "user_id": user_id,
                "day_id": log.day_id,
                "timezone": log.timezone,
                "hijri_year": log.hijri_year,
                "hijri_month": log.hijri_month,
                "hijri_day": log.hijri_day,
                "hijri_display": log.hijri_display,
                "fasting_answer": (
                    log.fasting_answer.value if log.fasting_answer else None
                ),
                "is_fasting": log.is_fasting,
                "fasting_reason": (
                    log.fasting_reason.value if log.fasting_reason else None
                ),
                "fasting_answered": log.fasting_answered,
                "fasting_bonus_awarded": log.fasting_bonus_awarded,
                "updated_at": format_timestamp(log.updated_at),
            },
            on_conflict="user_id,day_id",
        ).execute()


def _parse_enum(enum_type: type[E], raw: object) -> E | None:
    if not isinstance(raw, str):
        return None
    try:
        return enum_type(raw)
    except ValueError:
        return None


def _parse_row(row: dict[str, object], day_id: str) -> DailyLog:
    is_fasting = row.get("is_fasting")
    answer = _parse_enum(FastingAnswer, row.get("fasting_answer"))
    answered = row.get("fasting_answered")
    return DailyLog(
        day_id=str(row.get("day_id") or day_id),
        timezone=str(row.get("timezone") or "UTC"),
        hijri_year=as_int(row.get("hijri_year")),
        hijri_month=as_int(row.get("hijri_month")),
        hijri_day=as_int(row.get("hijri_day")),
        hijri_display=row.get("hijri_display") or None,
        fasting_answer=answer,
        is_fasting=is_fasting if isinstance(is_fasting, bool) else None,
        fasting_reason=_parse_enum(FastingReason, row.get("fasting_reason")),
        fasting_answered=(
            bool(answered) if answered is not None else is_fasting is not None
        ),
        fasting_bonus_awarded=bool(row.get("fasting_bonus_awarded", False)),
        updated_at=parse_timestamp(row.get("updated_at")),
    )
