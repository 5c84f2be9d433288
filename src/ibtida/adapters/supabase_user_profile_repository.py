"""Supabase-backed user profile repository."""

from dataclasses import dataclass
from datetime import UTC, datetime

from supabase import Client

from ibtida.adapters.supabase_rows import as_int, format_timestamp, parse_timestamp
from ibtida.domain.models import UserProfile
from ibtida.domain.prayers import parse_gender
from ibtida.services.users import UserProfileRepository

_COLUMNS = (
    "id, name, credits, current_streak, gender, onboarding_completed, "
    "menstrual_mode_enabled, menstrual_mode_started_at, created_at, last_updated_at"
)


@dataclass
class SupabaseUserProfileRepository(UserProfileRepository):
    """Supabase implementation for profile persistence."""

    client: Client

    def get_profile(self, user_id: str) -> UserProfile | None:
        """Return the profile for a user id, if present."""
        response = (
            self.client.table("user_profiles")
            .select(_COLUMNS)
            .eq("id", user_id)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_row(response.data[0])

    def save_profile(self, profile: UserProfile) -> None:
        """Upsert the full profile row."""
        self.client.table("user_profiles").upsert(
            {
                "id": profile.id,
                "name": profile.name,
                "credits": profile.credits,
                "current_streak": profile.current_streak,
                "gender": profile.gender.value if profile.gender else None,
                "onboarding_completed": profile.onboarding_completed,
                "menstrual_mode_enabled": profile.menstrual_mode_enabled,
                "menstrual_mode_started_at": format_timestamp(
                    profile.menstrual_mode_started_at
                ),
                "created_at": format_timestamp(profile.created_at),
                "last_updated_at": format_timestamp(profile.last_updated_at),
            },
            on_conflict="id",
        ).execute()

    def set_current_streak(self, user_id: str, streak: int) -> None:
        """Update only the cached streak column."""
        self.client.table("user_profiles").update(
            {
                "current_streak": streak,
                "last_updated_at": datetime.now(tz=UTC).isoformat(),
            }
        ).eq("id", user_id).execute()


def _parse_row(row: dict[str, object]) -> UserProfile:
    return UserProfile(
        id=str(row["id"]),
        name=str(row.get("name") or ""),
        credits=as_int(row.get("credits")),
        current_streak=as_int(row.get("current_streak")),
        gender=parse_gender(row.get("gender")),
        onboarding_completed=bool(row.get("onboarding_completed", False)),
        menstrual_mode_enabled=bool(row.get("menstrual_mode_enabled", False)),
        menstrual_mode_started_at=parse_timestamp(row.get("menstrual_mode_started_at")),
        created_at=parse_timestamp(row.get("created_at")),
        last_updated_at=parse_timestamp(row.get("last_updated_at")),
    )
