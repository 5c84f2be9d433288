"""User profile business logic."""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Protocol

from ibtida.domain.models import UserProfile
from ibtida.domain.prayers import Gender
from ibtida.services.errors import MenstrualModeNotAllowedError, UserNotFoundError
from ibtida.services.retry import RetryPolicy


class UserProfileRepository(Protocol):
    """Persistence interface for user profiles."""

    def get_profile(self, user_id: str) -> UserProfile | None:
        """Return the profile for a user id, if present."""

    def save_profile(self, profile: UserProfile) -> None:
        """Create or replace a profile."""

    def set_current_streak(self, user_id: str, streak: int) -> None:
        """Update the cached streak for a user."""


@dataclass
class UserProfileService:
    """Application service for profile lifecycle actions."""

    repository: UserProfileRepository
    retry: RetryPolicy = field(default_factory=RetryPolicy)

    def get_profile(self, user_id: str) -> UserProfile | None:
        """Return a profile or None."""
        return self.retry.call(
            lambda: self.repository.get_profile(user_id), action="get_profile"
        )

    def require_profile(self, user_id: str) -> UserProfile:
        """Return a profile or raise UserNotFoundError."""
        profile = self.get_profile(user_id)
        if profile is None:
            raise UserNotFoundError(user_id)
        return profile

    def ensure_profile(self, user_id: str, name: str = "") -> UserProfile:
        """Return the existing profile or create an empty one."""
        existing = self.get_profile(user_id)
        if existing:
            return existing
        now = datetime.now(tz=UTC)
        profile = UserProfile(
            id=user_id, name=name, created_at=now, last_updated_at=now
        )
        self._save(profile)
        return profile

    def update_profile(
        self,
        user_id: str,
        *,
        name: str | None = None,
        gender: Gender | None = None,
        onboarding_completed: bool | None = None,
    ) -> UserProfile:
        """Update editable profile fields."""
        profile = self.require_profile(user_id)
        if name is not None:
            profile.name = name
        if gender is not None:
            profile.gender = gender
            if gender != Gender.SISTER:
                profile.menstrual_mode_enabled = False
                profile.menstrual_mode_started_at = None
        if onboarding_completed is not None:
            profile.onboarding_completed = onboarding_completed
        self._save(profile)
        return profile

    def set_menstrual_mode(self, user_id: str, enabled: bool) -> UserProfile:
        """Toggle menstrual mode for a sister."""
        profile = self.require_profile(user_id)
        if enabled and not profile.is_sister:
            raise MenstrualModeNotAllowedError(user_id)
        if enabled and not profile.menstrual_mode_enabled:
            profile.menstrual_mode_started_at = datetime.now(tz=UTC)
        profile.menstrual_mode_enabled = enabled
        self._save(profile)
        return profile

    def add_credits(self, user_id: str, amount: int) -> UserProfile:
        """Add a non-negative number of credits to the running total."""
        if amount < 0:
            raise ValueError("Credits can only be added")
        profile = self.require_profile(user_id)
        if amount == 0:
            return profile
        profile.credits += amount
        self._save(profile)
        return profile

    def set_current_streak(self, user_id: str, streak: int) -> None:
        """Persist the recomputed streak."""
        self.retry.call(
            lambda: self.repository.set_current_streak(user_id, streak),
            action="set_current_streak",
        )

    def _save(self, profile: UserProfile) -> None:
        profile.last_updated_at = datetime.now(tz=UTC)
        self.retry.call(
            lambda: self.repository.save_profile(profile), action="save_profile"
        )
