"""Domain models for Ibtida users."""

from dataclasses import dataclass
from datetime import date, datetime

from ibtida.domain.prayers import Gender


@dataclass
class UserProfile:
    """Represents a user profile stored in the database."""

    id: str
    name: str = ""
    credits: int = 0
    current_streak: int = 0
    gender: Gender | None = None
    onboarding_completed: bool = False
    menstrual_mode_enabled: bool = False
    menstrual_mode_started_at: datetime | None = None
    created_at: datetime | None = None
    last_updated_at: datetime | None = None

    @property
    def is_sister(self) -> bool:
        return self.gender == Gender.SISTER

    def account_age_days(self, today: date) -> int:
        """Return whole days since the account was created (0 when unknown)."""
        if self.created_at is None:
            return 0
        return max((today - self.created_at.date()).days, 0)
