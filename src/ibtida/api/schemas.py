"""Pydantic request and response models for the HTTP API."""

from datetime import date, datetime

from pydantic import BaseModel

from ibtida.domain.credits import Milestone
from ibtida.domain.daily_logs import DailyLog, FastingAnswer, FastingReason
from ibtida.domain.hijri import (
    HijriMethod,
    hijri_components,
    hijri_display_string,
    hijri_short_string,
)
from ibtida.domain.journey import (
    JourneyDayDetail,
    JourneyDaySummary,
    JourneyMonthSummary,
    JourneyUserSummary,
    JourneyWeekSummary,
)
from ibtida.domain.labels import (
    prayer_display_name,
    prayer_full_name,
    status_arabic_description,
    status_display_name,
)
from ibtida.domain.models import UserProfile
from ibtida.domain.prayers import (
    Gender,
    PrayerDay,
    PrayerStatus,
    PrayerType,
    active_prayers,
    statuses_for_gender,
)


class ProfileUpdate(BaseModel):
    """Editable profile fields."""

    name: str | None = None
    gender: Gender | None = None
    onboarding_completed: bool | None = None


class MenstrualModeUpdate(BaseModel):
    enabled: bool


class PrayerStatusUpdate(BaseModel):
    """New status for one prayer slot."""

    status: PrayerStatus
    sunnah_prayed: bool | None = None
    witr_prayed: bool | None = None


class FastingAnswerUpdate(BaseModel):
    answer: FastingAnswer


class ProfileOut(BaseModel):
    id: str
    name: str
    credits: int
    current_streak: int
    gender: Gender | None
    onboarding_completed: bool
    menstrual_mode_enabled: bool
    menstrual_mode_started_at: datetime | None

    @classmethod
    def from_domain(cls, profile: UserProfile) -> "ProfileOut":
        return cls(
            id=profile.id,
            name=profile.name,
            credits=profile.credits,
            current_streak=profile.current_streak,
            gender=profile.gender,
            onboarding_completed=profile.onboarding_completed,
            menstrual_mode_enabled=profile.menstrual_mode_enabled,
            menstrual_mode_started_at=profile.menstrual_mode_started_at,
        )


class StatusOption(BaseModel):
    status: PrayerStatus
    label: str
    arabic: str


class PrayerSlotOut(BaseModel):
    """One active prayer slot with its picker options."""

    prayer: PrayerType
    name: str
    full_name: str
    status: PrayerStatus
    label: str
    sunnah_prayed: bool
    options: list[StatusOption]


class PrayerDayOut(BaseModel):
    user_id: str
    day_id: str
    prayers: list[PrayerSlotOut]
    witr_prayed: bool
    is_menstrual_day: bool
    total_credits_for_day: int
    prayers_completed: int

    @classmethod
    def from_domain(
        cls, prayer_day: PrayerDay, gender: Gender | None
    ) -> "PrayerDayOut":
        """Render the active slots of a day for the user's cohort."""
        slots = []
        for prayer in active_prayers(prayer_day.day, gender):
            status = prayer_day.status(prayer)
            slots.append(
                PrayerSlotOut(
                    prayer=prayer,
                    name=prayer_display_name(prayer),
                    full_name=prayer_full_name(prayer),
                    status=status,
                    label=status_display_name(status, gender),
                    sunnah_prayed=prayer in prayer_day.sunnah_prayed,
                    options=[
                        StatusOption(
                            status=option,
                            label=status_display_name(option, gender),
                            arabic=status_arabic_description(option),
                        )
                        for option in statuses_for_gender(gender, prayer)
                    ],
                )
            )
        return cls(
            user_id=prayer_day.user_id,
            day_id=prayer_day.day_id,
            prayers=slots,
            witr_prayed=prayer_day.witr_prayed,
            is_menstrual_day=prayer_day.is_menstrual_day,
            total_credits_for_day=prayer_day.total_credits_for_day,
            prayers_completed=prayer_day.completed_count(gender),
        )


class PrayerUpdateOut(BaseModel):
    prayer_day: PrayerDayOut
    credits: int
    credits_added: int
    current_streak: int


class StreakOut(BaseModel):
    user_id: str
    current_streak: int


class DaySummaryOut(BaseModel):
    day: date
    day_id: str
    prayers_completed: int
    prayers_total: int
    completion_fraction: float

    @classmethod
    def from_domain(cls, summary: JourneyDaySummary) -> "DaySummaryOut":
        return cls(
            day=summary.day,
            day_id=summary.day_id,
            prayers_completed=summary.prayers_completed,
            prayers_total=summary.prayers_total,
            completion_fraction=summary.completion_fraction,
        )


class WeekSummaryOut(BaseModel):
    week_start: date
    week_end: date
    week_id: str
    completed_count: int
    total_count: int
    completion_percent: int
    days: list[DaySummaryOut]

    @classmethod
    def from_domain(cls, summary: JourneyWeekSummary) -> "WeekSummaryOut":
        return cls(
            week_start=summary.week_start,
            week_end=summary.week_end,
            week_id=summary.week_id,
            completed_count=summary.completed_count,
            total_count=summary.total_count,
            completion_percent=summary.completion_percent,
            days=[DaySummaryOut.from_domain(day) for day in summary.day_summaries],
        )


class MonthSummaryOut(BaseModel):
    month_id: str
    month_name: str
    completed_count: int
    total_count: int
    completion_percent: int
    completed_days: int
    total_days: int
    weekly_completed: list[int]
    days: list[DaySummaryOut]

    @classmethod
    def from_domain(cls, summary: JourneyMonthSummary) -> "MonthSummaryOut":
        return cls(
            month_id=summary.month_id,
            month_name=summary.month_name,
            completed_count=summary.completed_count,
            total_count=summary.total_count,
            completion_percent=summary.completion_percent,
            completed_days=summary.completed_days,
            total_days=summary.total_days,
            weekly_completed=summary.weekly_completed,
            days=[DaySummaryOut.from_domain(day) for day in summary.day_summaries],
        )


class PrayerItemOut(BaseModel):
    prayer: PrayerType
    name: str
    status: PrayerStatus
    label: str
    sunnah_prayed: bool


class DayDetailOut(BaseModel):
    day: date
    day_id: str
    prayers: list[PrayerItemOut]
    prayers_completed: int
    prayers_total: int
    total_credits_for_day: int
    is_menstrual_day: bool

    @classmethod
    def from_domain(
        cls, detail: JourneyDayDetail, gender: Gender | None
    ) -> "DayDetailOut":
        return cls(
            day=detail.day,
            day_id=detail.day_id,
            prayers=[
                PrayerItemOut(
                    prayer=item.prayer_type,
                    name=prayer_display_name(item.prayer_type),
                    status=item.status,
                    label=status_display_name(item.status, gender),
                    sunnah_prayed=item.sunnah_prayed,
                )
                for item in detail.prayer_items
            ],
            prayers_completed=detail.prayers_completed,
            prayers_total=detail.prayers_total,
            total_credits_for_day=detail.total_credits_for_day,
            is_menstrual_day=detail.is_menstrual_day,
        )


class MilestoneOut(BaseModel):
    name: str
    arabic_name: str
    full_name: str
    required_credits: int

    @classmethod
    def from_domain(cls, milestone: Milestone) -> "MilestoneOut":
        return cls(
            name=milestone.name,
            arabic_name=milestone.arabic_name,
            full_name=milestone.full_name,
            required_credits=milestone.required_credits,
        )


class UserSummaryOut(BaseModel):
    streak_days: int
    credits: int
    milestone: MilestoneOut
    next_milestone: MilestoneOut | None
    progress_to_next: float
    credits_to_next: int | None

    @classmethod
    def from_domain(cls, summary: JourneyUserSummary) -> "UserSummaryOut":
        return cls(
            streak_days=summary.streak_days,
            credits=summary.credits,
            milestone=MilestoneOut.from_domain(summary.milestone),
            next_milestone=(
                MilestoneOut.from_domain(summary.next_milestone)
                if summary.next_milestone
                else None
            ),
            progress_to_next=summary.progress_to_next,
            credits_to_next=summary.credits_to_next,
        )


class DailyLogOut(BaseModel):
    day_id: str
    timezone: str
    hijri_year: int
    hijri_month: int
    hijri_day: int
    hijri_display: str | None
    fasting_answer: FastingAnswer | None
    is_fasting: bool | None
    fasting_reason: FastingReason | None
    fasting_answered: bool
    fasting_bonus_awarded: bool

    @classmethod
    def from_domain(cls, log: DailyLog) -> "DailyLogOut":
        return cls(
            day_id=log.day_id,
            timezone=log.timezone,
            hijri_year=log.hijri_year,
            hijri_month=log.hijri_month,
            hijri_day=log.hijri_day,
            hijri_display=log.hijri_display,
            fasting_answer=log.fasting_answer,
            is_fasting=log.is_fasting,
            fasting_reason=log.fasting_reason,
            fasting_answered=log.fasting_answered,
            fasting_bonus_awarded=log.fasting_bonus_awarded,
        )


class HijriOut(BaseModel):
    year: int
    month: int
    day: int
    month_name: str
    display: str
    short: str

    @classmethod
    def from_day(cls, day: date, method: HijriMethod) -> "HijriOut":
        hijri = hijri_components(day, method)
        return cls(
            year=hijri.year,
            month=hijri.month,
            day=hijri.day,
            month_name=hijri.month_name,
            display=hijri_display_string(day, method),
            short=hijri_short_string(day, method),
        )


class FastingPromptOut(BaseModel):
    show: bool
    eligible: bool
    answered: bool
    reason: FastingReason
    hijri: HijriOut


class FastingAnswerOut(BaseModel):
    log: DailyLogOut
    bonus_awarded: int
    credits: int


class CalendarDayOut(BaseModel):
    """Hijri and fasting facts about a calendar day."""

    day_id: str
    weekday: int
    is_friday: bool
    is_monday_or_thursday: bool
    is_white_day: bool
    show_fasting_prompt: bool
    fasting_reason: FastingReason
    hijri: HijriOut
