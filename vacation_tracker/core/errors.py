"""
Exceptions raised by the vacation tracker core and surfaced to the user.
"""

from typing import Optional

from vacation_tracker.data.schemas import ErrorKind
from vacation_tracker.i18n import t


class VacationTrackerError(Exception):
    """Base error. `kind` identifies the message slot category."""

    kind: ErrorKind
    message_key: str

    def __init__(self, message: Optional[str] = None):
        self.message = message or t(self.message_key)
        super().__init__(self.message)


class InvalidRangeError(VacationTrackerError):
    """Date range is unparsable, inverted or incomplete."""

    kind = ErrorKind.INVALID_RANGE
    message_key = "error.invalid_range"


class NoBusinessDaysError(VacationTrackerError):
    """Date range is valid but only covers weekends and holidays."""

    kind = ErrorKind.NO_BUSINESS_DAYS
    message_key = "error.no_business_days"


class InsufficientBalanceError(VacationTrackerError):
    """Requested days exceed the remaining balance."""

    kind = ErrorKind.INSUFFICIENT_BALANCE
    message_key = "error.insufficient_balance"

    def __init__(self, requested: int, remaining: int):
        self.requested = requested
        self.remaining = remaining
        super().__init__(t(self.message_key, remaining=remaining))


class InvalidHolidayError(VacationTrackerError):
    """Holiday date cannot be parsed."""

    kind = ErrorKind.INVALID_HOLIDAY
    message_key = "error.invalid_holiday"


class RequestNotCancellableError(VacationTrackerError):
    """Request is missing or no longer pending."""

    kind = ErrorKind.NOT_CANCELLABLE
    message_key = "error.not_cancellable"


class NotAuthenticatedError(VacationTrackerError):
    """A store operation was attempted before sign-in completed."""

    kind = ErrorKind.NOT_AUTHENTICATED
    message_key = "error.not_authenticated"


class PersistenceError(VacationTrackerError):
    """A store read or write failed. The original failure is kept as `cause`."""

    kind = ErrorKind.PERSISTENCE
    message_key = "error.save_request"

    def __init__(self, message_key: Optional[str] = None, cause: Optional[BaseException] = None):
        self.cause = cause
        super().__init__(t(message_key or self.message_key))
