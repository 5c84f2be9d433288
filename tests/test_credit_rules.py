"""Tests for credit values, bonuses and milestones."""

from ibtida.domain import credits
from ibtida.domain.daily_logs import FastingReason
from ibtida.domain.prayers import Gender, PrayerStatus


def test_credit_ordering_rewards_masjid_and_jummah() -> None:
    assert credits.JUMMAH_CREDIT >= credits.PRAYED_AT_MASJID_CREDIT
    assert credits.PRAYED_AT_MASJID_CREDIT >= credits.ON_TIME_CREDIT
    assert credits.ON_TIME_CREDIT > credits.LATE_CREDIT > credits.QADA_CREDIT > 0
    assert credits.FASTING_MON_THU_BONUS > 0
    assert credits.SUNNAH_PRAYER_BONUS > 0


def test_base_credit_value_handles_legacy_and_unknown_strings() -> None:
    assert credits.base_credit_value(PrayerStatus.ON_TIME) == 10
    assert credits.base_credit_value("later") == credits.LATE_CREDIT
    assert credits.base_credit_value("made up") == credits.QADA_CREDIT
    assert credits.base_credit_value("bogus") == 0
    assert credits.base_credit_value(PrayerStatus.MENSTRUAL) == 0


def test_calculate_day_credits_sums_slots() -> None:
    statuses = [
        PrayerStatus.PRAYED_AT_MASJID,
        PrayerStatus.ON_TIME,
        PrayerStatus.QADA,
        PrayerStatus.MISSED,
        PrayerStatus.NONE,
    ]
    assert credits.calculate_day_credits(statuses, Gender.BROTHER) == 29


def test_jummah_only_scores_for_brothers() -> None:
    statuses = [PrayerStatus.JUMMAH]
    assert credits.calculate_day_credits(statuses, Gender.BROTHER) == 20
    assert credits.calculate_day_credits(statuses, Gender.SISTER) == 0
    assert credits.calculate_day_credits(statuses, None) == 0


def test_final_credits_add_sunnah_and_witr_once() -> None:
    total = credits.calculate_final_credits(
        50,
        account_age_days=1,
        current_streak=0,
        gender=Gender.BROTHER,
        performed_count=2,
        sunnah_count=5,
        witr_prayed=True,
    )
    assert total == 50 + 2 * credits.SUNNAH_PRAYER_BONUS + credits.WITR_BONUS


def test_streak_bonus_is_capped_by_account_age() -> None:
    with_bonus = credits.calculate_final_credits(
        10, account_age_days=30, current_streak=7, gender=None, performed_count=1
    )
    young_account = credits.calculate_final_credits(
        10, account_age_days=3, current_streak=10, gender=None, performed_count=1
    )
    short_streak = credits.calculate_final_credits(
        10, account_age_days=30, current_streak=6, gender=None, performed_count=1
    )
    assert with_bonus == 10 + credits.STREAK_BONUS
    assert young_account == 10
    assert short_streak == 10


def test_no_bonuses_without_a_performed_prayer() -> None:
    total = credits.calculate_final_credits(
        0,
        account_age_days=100,
        current_streak=50,
        gender=Gender.SISTER,
        performed_count=0,
        sunnah_count=3,
        witr_prayed=True,
    )
    assert total == 0


def test_fasting_bonus_prefers_white_days() -> None:
    assert credits.fasting_bonus(FastingReason.WHITE_DAY) == 15
    assert credits.fasting_bonus(FastingReason.MONDAY) == 10
    assert credits.fasting_bonus(FastingReason.THURSDAY) == 10
    assert credits.fasting_bonus(None) == 10


def test_max_credits_per_day() -> None:
    assert credits.max_credits_per_day() == 117


def test_milestone_progression() -> None:
    assert credits.current_milestone(0).name == "Getting Started"
    assert credits.current_milestone(100).name == "Consistent"
    assert credits.current_milestone(99).name == "Getting Started"

    upcoming = credits.next_milestone(99)
    assert upcoming is not None
    assert upcoming.name == "Consistent"
    assert credits.credits_to_next(99) == 1
    assert credits.progress_to_next(175) == 0.5


def test_milestones_top_out_at_legend() -> None:
    assert credits.current_milestone(25000).name == "Legend"
    assert credits.next_milestone(25000) is None
    assert credits.credits_to_next(25000) is None
    assert credits.progress_to_next(25000) == 1.0
    assert credits.current_milestone(10000).full_name == "Legend (أسطورة)"
