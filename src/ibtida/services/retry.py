"""Retry policy for repository calls."""

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import TypeVar

from ibtida.services.errors import PersistenceError

_logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class RetryPolicy:
    """Retry a failed repository call a fixed number of times.

    The delay blocks, so HTTP routes calling services are plain functions
    that FastAPI runs in its threadpool.
    """

    attempts: int = 1
    delay_seconds: float = 0.3

    def call(self, func: Callable[[], T], *, action: str) -> T:
        """Call ``func`` with a short retry, raising PersistenceError at the end."""
        attempt = 0
        while True:
            try:
                return func()
            except Exception as exc:
                attempt += 1
                _logger.warning(
                    "Repository %s failed (attempt %s/%s): %s",
                    action,
                    attempt,
                    self.attempts + 1,
                    exc,
                )
                if attempt > self.attempts:
                    raise PersistenceError(action) from exc
                time.sleep(self.delay_seconds)
