"""Exception hierarchy for GoalTrack."""

from datetime import date


class GoalTrackError(Exception):
    """Base class for all GoalTrack errors."""


class InvalidDateRangeError(GoalTrackError):
    """Analysis window is not usable.

    Raised when the goal starts in the future or the requested end
    date lies before the start date.
    """

    def __init__(self, start_date: date, end_date: date, reason: str):
        self.start_date = start_date
        self.end_date = end_date
        self.reason = reason
        super().__init__(
            f"Invalid date range for retroactive analysis "
            f"({start_date.isoformat()} to {end_date.isoformat()}): {reason}"
        )


class DivisionByZeroError(GoalTrackError, ZeroDivisionError):
    """Raised by money.divide when the divisor is zero."""


class DecimalParseError(GoalTrackError, ValueError):
    """Value cannot be interpreted as a finite decimal amount."""

    def __init__(self, value: object):
        self.value = value
        super().__init__(f"Invalid decimal value: {value!r}")


class GoalFileError(GoalTrackError):
    """Goal file is missing, unreadable, or fails validation."""
