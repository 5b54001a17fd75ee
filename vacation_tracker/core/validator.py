"""
Validation of vacation request submissions and cancellations.
"""

from datetime import date
from typing import Callable, Iterable, Optional, Sequence, Union

from vacation_tracker.core.balance import remaining_days
from vacation_tracker.core.business_days import DateInput, evaluate_range
from vacation_tracker.core.errors import (
    InsufficientBalanceError,
    InvalidRangeError,
    NoBusinessDaysError,
    RequestNotCancellableError,
)
from vacation_tracker.data.schemas import (
    Holiday,
    RangeStatus,
    RequestStatus,
    VacationRequest,
)


class RequestValidator:
    """Checks a draft request against the calendar and the remaining balance."""

    def __init__(self, today: Optional[Callable[[], date]] = None):
        """
        Initialize the validator.

        Args:
            today: Clock used for the request's submission date.
        """
        self.today = today or date.today

    def validate(
        self,
        start: DateInput,
        end: DateInput,
        holidays: Iterable[Union[Holiday, DateInput]],
        available_days: int,
        requests: Sequence[VacationRequest],
    ) -> VacationRequest:
        """
        Build a Pending request for the range, or raise why it cannot be submitted.

        Checks run in order: the range must contain working days, then the
        working days must fit in the remaining balance.

        Args:
            start: Entered start date.
            end: Entered end date.
            holidays: Configured holidays.
            available_days: Annual allotment.
            requests: Current request list.

        Returns:
            A new, not yet persisted, VacationRequest with status Pending.

        Raises:
            InvalidRangeError: Range is missing, unparsable or inverted.
            NoBusinessDaysError: Range only covers weekends and holidays.
            InsufficientBalanceError: Range needs more days than remain.
        """
        evaluation = evaluate_range(start, end, holidays)
        if evaluation.business_days == 0:
            if evaluation.status == RangeStatus.NO_BUSINESS_DAYS:
                raise NoBusinessDaysError()
            raise InvalidRangeError()

        remaining = remaining_days(available_days, requests)
        if evaluation.business_days > remaining:
            raise InsufficientBalanceError(evaluation.business_days, remaining)

        return VacationRequest(
            start_date=evaluation.start_date,
            end_date=evaluation.end_date,
            days=evaluation.business_days,
            status=RequestStatus.PENDING,
            requested_on=self.today(),
        )

    def ensure_cancellable(self, request: Optional[VacationRequest]) -> VacationRequest:
        """Only pending requests may be withdrawn by the user."""
        if request is None or not request.is_pending:
            raise RequestNotCancellableError()
        return request
