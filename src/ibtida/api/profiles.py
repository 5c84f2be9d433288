"""Profile, menstrual mode and streak endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from ibtida.api.dependencies import get_container, require_api_token
from ibtida.api.schemas import MenstrualModeUpdate, ProfileOut, ProfileUpdate, StreakOut
from ibtida.containers import AppContainer  # noqa: TC001

router = APIRouter(
    prefix="/users/{user_id}",
    tags=["profile"],
    dependencies=[Depends(require_api_token)],
)


@router.get("/profile")
def get_profile(
    user_id: str, container: AppContainer = Depends(get_container)
) -> ProfileOut:
    """Return the user's profile."""
    return ProfileOut.from_domain(container.user_service.require_profile(user_id))


@router.put("/profile")
def put_profile(
    user_id: str,
    payload: ProfileUpdate,
    container: AppContainer = Depends(get_container),
) -> ProfileOut:
    """Create the profile if needed and apply the editable fields."""
    container.user_service.ensure_profile(user_id, name=payload.name or "")
    profile = container.user_service.update_profile(
        user_id,
        name=payload.name,
        gender=payload.gender,
        onboarding_completed=payload.onboarding_completed,
    )
    return ProfileOut.from_domain(profile)


@router.put("/menstrual-mode")
def put_menstrual_mode(
    user_id: str,
    payload: MenstrualModeUpdate,
    container: AppContainer = Depends(get_container),
) -> ProfileOut:
    """Toggle menstrual mode (sisters only)."""
    profile = container.user_service.set_menstrual_mode(user_id, payload.enabled)
    return ProfileOut.from_domain(profile)


@router.post("/streak/recalculate")
def recalculate_streak(
    user_id: str, container: AppContainer = Depends(get_container)
) -> StreakOut:
    """Recompute the streak from stored history."""
    streak = container.streak_calculator.recalculate_and_update_streak(user_id)
    return StreakOut(user_id=user_id, current_streak=streak)
