"""Shared test fixtures."""

import copy
from dataclasses import dataclass, field, replace
from datetime import UTC, date, datetime

import pytest

from ibtida.config import Settings
from ibtida.containers import AppContainer, wire_services
from ibtida.domain.daily_logs import DailyLog
from ibtida.domain.models import UserProfile
from ibtida.domain.prayers import Gender, PrayerDay, PrayerStatus, PrayerType
from ibtida.services.daily_logs import DailyLogRepository
from ibtida.services.prayer_days import PrayerDayRepository
from ibtida.services.users import UserProfileRepository


@dataclass
class InMemoryUserProfileRepository(UserProfileRepository):
    """In-memory profile repository for tests."""

    profiles: dict[str, UserProfile] = field(default_factory=dict)
    streak_updates: list[tuple[str, int]] = field(default_factory=list)
    save_failures_remaining: int = 0

    def get_profile(self, user_id: str) -> UserProfile | None:
        profile = self.profiles.get(user_id)
        return replace(profile) if profile else None

    def save_profile(self, profile: UserProfile) -> None:
        if self.save_failures_remaining > 0:
            self.save_failures_remaining -= 1
            raise ConnectionError("profiles offline")
        self.profiles[profile.id] = replace(profile)

    def set_current_streak(self, user_id: str, streak: int) -> None:
        self.streak_updates.append((user_id, streak))
        self.profiles[user_id].current_streak = streak


@dataclass
class InMemoryPrayerDayRepository(PrayerDayRepository):
    """In-memory prayer day repository that can simulate outages."""

    days: dict[tuple[str, date], PrayerDay] = field(default_factory=dict)
    failures_remaining: int = 0
    calls: int = 0

    def _maybe_fail(self) -> None:
        self.calls += 1
        if self.failures_remaining > 0:
            self.failures_remaining -= 1
            raise ConnectionError("storage offline")

    def get_day(self, user_id: str, day: date) -> PrayerDay | None:
        self._maybe_fail()
        stored = self.days.get((user_id, day))
        return copy.deepcopy(stored) if stored else None

    def list_days(self, user_id: str, start: date, end: date) -> list[PrayerDay]:
        self._maybe_fail()
        return [
            copy.deepcopy(record)
            for (owner, day), record in sorted(self.days.items())
            if owner == user_id and start <= day <= end
        ]

    def save_day(self, prayer_day: PrayerDay) -> None:
        self._maybe_fail()
        self.days[(prayer_day.user_id, prayer_day.day)] = copy.deepcopy(prayer_day)

    def put(self, prayer_day: PrayerDay) -> None:
        self.days[(prayer_day.user_id, prayer_day.day)] = prayer_day


@dataclass
class InMemoryDailyLogRepository(DailyLogRepository):
    """In-memory daily log repository for tests."""

    logs: dict[tuple[str, str], DailyLog] = field(default_factory=dict)

    def get_log(self, user_id: str, day_id: str) -> DailyLog | None:
        stored = self.logs.get((user_id, day_id))
        return replace(stored) if stored else None

    def save_log(self, user_id: str, log: DailyLog) -> None:
        self.logs[(user_id, log.day_id)] = replace(log)


def make_profile(
    user_id: str = "user-1",
    gender: Gender | None = Gender.BROTHER,
    created_at: datetime | None = None,
    **overrides: object,
) -> UserProfile:
    """Build a profile created well before any test date."""
    return UserProfile(
        id=user_id,
        name="Test",
        gender=gender,
        onboarding_completed=True,
        created_at=created_at or datetime(2024, 1, 1, tzinfo=UTC),
        **overrides,
    )


def make_day(
    day: date,
    statuses: dict[PrayerType, PrayerStatus] | None = None,
    user_id: str = "user-1",
    **overrides: object,
) -> PrayerDay:
    return PrayerDay(
        user_id=user_id, day=day, statuses=dict(statuses or {}), **overrides
    )


def all_prayers(status: PrayerStatus) -> dict[PrayerType, PrayerStatus]:
    """Return the same status for the five daily prayers."""
    return {
        prayer: status
        for prayer in (
            PrayerType.FAJR,
            PrayerType.DHUHR,
            PrayerType.ASR,
            PrayerType.MAGHRIB,
            PrayerType.ISHA,
        )
    }


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key="header.payload.signature",
        api_token="api-token",
        retry_delay_seconds=0,
    )


@pytest.fixture
def profile_repository() -> InMemoryUserProfileRepository:
    return InMemoryUserProfileRepository()


@pytest.fixture
def prayer_day_repository() -> InMemoryPrayerDayRepository:
    return InMemoryPrayerDayRepository()


@pytest.fixture
def daily_log_repository() -> InMemoryDailyLogRepository:
    return InMemoryDailyLogRepository()


@pytest.fixture
def container(
    settings: Settings,
    profile_repository: InMemoryUserProfileRepository,
    prayer_day_repository: InMemoryPrayerDayRepository,
    daily_log_repository: InMemoryDailyLogRepository,
) -> AppContainer:
    return wire_services(
        settings,
        user_repository=profile_repository,
        prayer_day_repository=prayer_day_repository,
        daily_log_repository=daily_log_repository,
    )
