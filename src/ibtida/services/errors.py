"""Error types raised by application services."""


class PersistenceError(RuntimeError):
    """A repository call failed after retrying; the caller may try again."""

    def __init__(self, action: str) -> None:
        super().__init__(f"Storage is unavailable ({action}). Please try again.")
        self.action = action


class UserNotFoundError(LookupError):
    """No profile exists for the user id."""


class RuleViolationError(ValueError):
    """A request breaks a tracking rule."""


class InactivePrayerSlotError(RuleViolationError):
    """The prayer slot is not one of the five active slots that day."""


class StatusNotAllowedError(RuleViolationError):
    """The status is not offered to the user's cohort for that prayer."""


class MenstrualModeNotAllowedError(RuleViolationError):
    """Menstrual mode is only available to sisters."""
