"""Prayer day endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status

from ibtida.api.dependencies import get_container, parse_day, require_api_token
from ibtida.api.schemas import PrayerDayOut, PrayerStatusUpdate, PrayerUpdateOut
from ibtida.containers import AppContainer  # noqa: TC001
from ibtida.domain.dates import today_in
from ibtida.domain.prayers import PrayerType

router = APIRouter(
    prefix="/users/{user_id}/prayer-days",
    tags=["prayers"],
    dependencies=[Depends(require_api_token)],
)


@router.get("/{day_id}")
def get_prayer_day(
    user_id: str, day_id: str, container: AppContainer = Depends(get_container)
) -> PrayerDayOut:
    """Return the stored day, or an empty one when nothing was logged."""
    day = parse_day(day_id)
    profile = container.user_service.require_profile(user_id)
    prayer_day = container.prayer_day_service.get_day(user_id, day)
    return PrayerDayOut.from_domain(prayer_day, profile.gender)


@router.put("/{day_id}/prayers/{prayer}")
def put_prayer_status(
    user_id: str,
    day_id: str,
    prayer: PrayerType,
    payload: PrayerStatusUpdate,
    container: AppContainer = Depends(get_container),
) -> PrayerUpdateOut:
    """Set one prayer's status; only the current day can be edited."""
    day = parse_day(day_id)
    if day != today_in(container.settings.default_timezone):
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Only today's prayers can be edited",
        )
    profile = container.user_service.require_profile(user_id)
    result = container.prayer_day_service.update_status(
        user_id,
        day,
        prayer,
        payload.status,
        sunnah_prayed=payload.sunnah_prayed,
        witr_prayed=payload.witr_prayed,
    )
    return PrayerUpdateOut(
        prayer_day=PrayerDayOut.from_domain(result.prayer_day, profile.gender),
        credits=result.credits,
        credits_added=result.credits_added,
        current_streak=result.current_streak,
    )
