"""Daily log and fasting endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status

from ibtida.api.dependencies import get_container, parse_day, require_api_token
from ibtida.api.schemas import (
    DailyLogOut,
    FastingAnswerOut,
    FastingAnswerUpdate,
    FastingPromptOut,
    HijriOut,
)
from ibtida.containers import AppContainer  # noqa: TC001

router = APIRouter(
    prefix="/users/{user_id}/daily-logs",
    tags=["daily-logs"],
    dependencies=[Depends(require_api_token)],
)


@router.get("/{day_id}")
def get_daily_log(
    user_id: str, day_id: str, container: AppContainer = Depends(get_container)
) -> DailyLogOut:
    day = parse_day(day_id)
    log = container.daily_log_service.get_log(user_id, day)
    if log is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return DailyLogOut.from_domain(log)


@router.get("/{day_id}/fasting-prompt")
def get_fasting_prompt(
    user_id: str, day_id: str, container: AppContainer = Depends(get_container)
) -> FastingPromptOut:
    """Return whether to ask about fasting on this day."""
    day = parse_day(day_id)
    prompt = container.daily_log_service.fasting_prompt(user_id, day)
    return FastingPromptOut(
        show=prompt.show,
        eligible=prompt.eligible,
        answered=prompt.answered,
        reason=prompt.reason,
        hijri=HijriOut.from_day(day, container.daily_log_service.hijri_method),
    )


@router.put("/{day_id}/fasting")
def put_fasting_answer(
    user_id: str,
    day_id: str,
    payload: FastingAnswerUpdate,
    container: AppContainer = Depends(get_container),
) -> FastingAnswerOut:
    """Record the fasting answer; the bonus is awarded at most once per day."""
    day = parse_day(day_id)
    result = container.daily_log_service.answer_fasting(user_id, day, payload.answer)
    return FastingAnswerOut(
        log=DailyLogOut.from_domain(result.log),
        bonus_awarded=result.bonus_awarded,
        credits=result.credits,
    )
