"""Hijri calendar lookup endpoint."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from ibtida.api.dependencies import get_container, parse_day, require_api_token
from ibtida.api.schemas import CalendarDayOut, HijriOut
from ibtida.containers import AppContainer  # noqa: TC001
from ibtida.domain.daily_logs import fasting_reason_for
from ibtida.domain.hijri import (
    is_friday,
    is_monday_or_thursday,
    is_white_day,
    parse_method,
    should_show_fasting_prompt,
    weekday,
)

router = APIRouter(
    prefix="/calendar",
    tags=["calendar"],
    dependencies=[Depends(require_api_token)],
)


@router.get("/{day_id}")
def get_calendar_day(
    day_id: str,
    method: str | None = None,
    container: AppContainer = Depends(get_container),
) -> CalendarDayOut:
    """Return the Hijri date and fasting flags for a Gregorian day."""
    day = parse_day(day_id)
    resolved = parse_method(method or container.settings.hijri_method)
    return CalendarDayOut(
        day_id=day.isoformat(),
        weekday=weekday(day),
        is_friday=is_friday(day),
        is_monday_or_thursday=is_monday_or_thursday(day),
        is_white_day=is_white_day(day, resolved),
        show_fasting_prompt=should_show_fasting_prompt(day, resolved),
        fasting_reason=fasting_reason_for(day, resolved),
        hijri=HijriOut.from_day(day, resolved),
    )
