"""Tests for the repository retry policy."""

import pytest

from ibtida.services.errors import PersistenceError
from ibtida.services.retry import RetryPolicy


def test_retry_succeeds_after_one_failure() -> None:
    attempts = []

    def flaky() -> str:
        attempts.append(1)
        if len(attempts) == 1:
            raise ConnectionError("reset")
        return "ok"

    assert RetryPolicy(delay_seconds=0).call(flaky, action="read") == "ok"
    assert len(attempts) == 2


def test_retry_raises_persistence_error_when_exhausted() -> None:
    def broken() -> None:
        raise TimeoutError("slow")

    with pytest.raises(PersistenceError, match="save_day") as excinfo:
        RetryPolicy(attempts=1, delay_seconds=0).call(broken, action="save_day")

    assert isinstance(excinfo.value.__cause__, TimeoutError)
    assert excinfo.value.action == "save_day"
