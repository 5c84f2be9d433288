"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import Client, ClientOptions, create_client

from ibtida.adapters.supabase_daily_log_repository import SupabaseDailyLogRepository
from ibtida.adapters.supabase_prayer_day_repository import (
    SupabasePrayerDayRepository,
)
from ibtida.adapters.supabase_user_profile_repository import (
    SupabaseUserProfileRepository,
)
from ibtida.config import Settings
from ibtida.services.daily_logs import DailyLogRepository, DailyLogService
from ibtida.services.journey import JourneyService
from ibtida.services.prayer_days import PrayerDayRepository, PrayerDayService
from ibtida.services.retry import RetryPolicy
from ibtida.services.streaks import StreakCalculator
from ibtida.services.users import UserProfileRepository, UserProfileService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    user_service: UserProfileService
    prayer_day_service: PrayerDayService
    streak_calculator: StreakCalculator
    journey_service: JourneyService
    daily_log_service: DailyLogService


def create_supabase_client(settings: Settings) -> Client:
    """Create a Supabase client honoring the configured request timeout."""
    return create_client(
        settings.supabase_url,
        settings.supabase_service_key,
        options=ClientOptions(
            postgrest_client_timeout=settings.request_timeout_seconds
        ),
    )


def wire_services(
    settings: Settings,
    user_repository: UserProfileRepository,
    prayer_day_repository: PrayerDayRepository,
    daily_log_repository: DailyLogRepository,
) -> AppContainer:
    """Build the service graph on top of the given repositories."""
    retry = RetryPolicy(
        attempts=settings.retry_attempts,
        delay_seconds=settings.retry_delay_seconds,
    )
    user_service = UserProfileService(user_repository, retry=retry)
    streak_calculator = StreakCalculator(
        history=prayer_day_repository,
        user_service=user_service,
        default_timezone=settings.default_timezone,
        lookback_days=settings.streak_lookback_days,
        retry=retry,
    )
    prayer_day_service = PrayerDayService(
        repository=prayer_day_repository,
        user_service=user_service,
        streak_calculator=streak_calculator,
        retry=retry,
    )
    journey_service = JourneyService(
        prayer_day_service=prayer_day_service,
        user_service=user_service,
        default_timezone=settings.default_timezone,
    )
    daily_log_service = DailyLogService(
        repository=daily_log_repository,
        user_service=user_service,
        hijri_method=settings.hijri_method,
        default_timezone=settings.default_timezone,
        retry=retry,
    )
    return AppContainer(
        settings=settings,
        user_service=user_service,
        prayer_day_service=prayer_day_service,
        streak_calculator=streak_calculator,
        journey_service=journey_service,
        daily_log_service=daily_log_service,
    )


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_supabase_client(resolved_settings)
    return wire_services(
        resolved_settings,
        user_repository=SupabaseUserProfileRepository(supabase_client),
        prayer_day_repository=SupabasePrayerDayRepository(supabase_client),
        daily_log_repository=SupabaseDailyLogRepository(supabase_client),
    )
