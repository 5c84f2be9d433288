"""Journey dashboard endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query, status

from ibtida.api.dependencies import get_container, parse_day, require_api_token
from ibtida.api.schemas import (
    DayDetailOut,
    MonthSummaryOut,
    UserSummaryOut,
    WeekSummaryOut,
)
from ibtida.containers import AppContainer  # noqa: TC001
from ibtida.domain.dates import parse_month_id

router = APIRouter(
    prefix="/users/{user_id}/journey",
    tags=["journey"],
    dependencies=[Depends(require_api_token)],
)


@router.get("/weeks")
def list_weeks(
    user_id: str,
    count: int = Query(default=5, ge=1, le=52),
    container: AppContainer = Depends(get_container),
) -> list[WeekSummaryOut]:
    """Return the last ``count`` weeks, current week first."""
    weeks = container.journey_service.last_n_weeks(user_id, count)
    return [WeekSummaryOut.from_domain(week) for week in weeks]


@router.get("/months/{month_id}")
def get_month(
    user_id: str, month_id: str, container: AppContainer = Depends(get_container)
) -> MonthSummaryOut:
    parsed = parse_month_id(month_id)
    if parsed is None:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=f"Malformed month id {month_id!r}, expected yyyy-MM",
        )
    year, month = parsed
    summary = container.journey_service.month_summary(user_id, year, month)
    return MonthSummaryOut.from_domain(summary)


@router.get("/days/{day_id}")
def get_day_detail(
    user_id: str, day_id: str, container: AppContainer = Depends(get_container)
) -> DayDetailOut:
    day = parse_day(day_id)
    gender = container.user_service.require_profile(user_id).gender
    detail = container.journey_service.day_detail(user_id, day)
    return DayDetailOut.from_domain(detail, gender)


@router.get("/summary")
def get_summary(
    user_id: str, container: AppContainer = Depends(get_container)
) -> UserSummaryOut:
    """Return streak, credits and milestone progress."""
    return UserSummaryOut.from_domain(container.journey_service.user_summary(user_id))
