"""Tests for the fasting prompt and fasting bonus."""

from datetime import date

import pytest

from ibtida.containers import AppContainer
from ibtida.domain.daily_logs import FastingAnswer, FastingReason
from ibtida.services.errors import PersistenceError
from tests.conftest import (
    InMemoryDailyLogRepository,
    InMemoryUserProfileRepository,
    make_profile,
)

MONDAY = date(2025, 1, 27)
WEDNESDAY = date(2025, 1, 29)
WHITE_THURSDAY = date(2025, 2, 13)


@pytest.fixture(autouse=True)
def _profile(profile_repository: InMemoryUserProfileRepository) -> None:
    profile_repository.save_profile(make_profile())


def test_prompt_shown_on_unanswered_monday(container: AppContainer) -> None:
    prompt = container.daily_log_service.fasting_prompt("user-1", MONDAY)

    assert prompt.show
    assert prompt.reason == FastingReason.MONDAY
    assert prompt.hijri.month == 7


def test_prompt_hidden_on_ordinary_day(container: AppContainer) -> None:
    prompt = container.daily_log_service.fasting_prompt("user-1", WEDNESDAY)

    assert not prompt.show
    assert not prompt.eligible
    assert prompt.reason == FastingReason.OTHER


def test_answering_yes_awards_bonus_once(
    container: AppContainer,
    profile_repository: InMemoryUserProfileRepository,
    daily_log_repository: InMemoryDailyLogRepository,
) -> None:
    service = container.daily_log_service

    first = service.answer_fasting("user-1", MONDAY, FastingAnswer.YES)
    changed = service.answer_fasting("user-1", MONDAY, FastingAnswer.NO)
    again = service.answer_fasting("user-1", MONDAY, FastingAnswer.YES)

    assert first.bonus_awarded == 10
    assert changed.bonus_awarded == 0
    assert again.bonus_awarded == 0
    assert again.credits == 10
    assert profile_repository.profiles["user-1"].credits == 10
    stored = daily_log_repository.logs[("user-1", "2025-01-27")]
    assert stored.is_fasting is True
    assert stored.fasting_bonus_awarded


def test_white_day_bonus(container: AppContainer) -> None:
    result = container.daily_log_service.answer_fasting(
        "user-1", WHITE_THURSDAY, FastingAnswer.YES
    )

    assert result.log.fasting_reason == FastingReason.WHITE_DAY
    assert result.bonus_awarded == 15


def test_answer_hides_prompt_without_bonus(container: AppContainer) -> None:
    service = container.daily_log_service

    result = service.answer_fasting("user-1", MONDAY, FastingAnswer.PREFER_NOT_TO_SAY)
    prompt = service.fasting_prompt("user-1", MONDAY)

    assert result.bonus_awarded == 0
    assert result.log.is_fasting is None
    assert result.log.fasting_answered
    assert prompt.answered
    assert not prompt.show


def test_fasting_on_ordinary_day_earns_no_bonus(container: AppContainer) -> None:
    result = container.daily_log_service.answer_fasting(
        "user-1", WEDNESDAY, FastingAnswer.YES
    )

    assert result.log.is_fasting is True
    assert result.bonus_awarded == 0


def test_log_carries_hijri_fields(container: AppContainer) -> None:
    container.daily_log_service.answer_fasting("user-1", MONDAY, FastingAnswer.NO)

    log = container.daily_log_service.get_log("user-1", MONDAY)

    assert log is not None
    assert (log.hijri_year, log.hijri_month, log.hijri_day) == (1446, 7, 27)
    assert log.hijri_display == "Rajab 27, 1446"


def test_bonus_survives_a_failed_profile_write(
    container: AppContainer,
    profile_repository: InMemoryUserProfileRepository,
    daily_log_repository: InMemoryDailyLogRepository,
) -> None:
    service = container.daily_log_service
    profile_repository.save_failures_remaining = 2

    with pytest.raises(PersistenceError):
        service.answer_fasting("user-1", MONDAY, FastingAnswer.YES)
    assert not daily_log_repository.logs[("user-1", "2025-01-27")].fasting_bonus_awarded

    retried = service.answer_fasting("user-1", MONDAY, FastingAnswer.YES)

    assert retried.bonus_awarded == 10
    assert retried.credits == 10
    assert profile_repository.profiles["user-1"].credits == 10
    assert daily_log_repository.logs[("user-1", "2025-01-27")].fasting_bonus_awarded
