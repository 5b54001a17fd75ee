"""
Tests for request submission validation.
"""

from datetime import date

import pytest

from vacation_tracker.core.errors import (
    InsufficientBalanceError,
    InvalidRangeError,
    NoBusinessDaysError,
    RequestNotCancellableError,
)
from vacation_tracker.core.validator import RequestValidator
from vacation_tracker.data.schemas import ErrorKind, RequestStatus
from vacation_tracker.i18n import set_language


@pytest.fixture
def validator():
    """Create a validator with a fixed clock."""
    return RequestValidator(today=lambda: date(2024, 12, 1))


class TestValidate:
    """Tests for RequestValidator.validate."""

    def test_valid_request_is_pending(self, validator):
        request = validator.validate("2024-12-23", "2024-12-27", ["2024-12-25"], 22, [])

        assert request.status == RequestStatus.PENDING
        assert request.days == 4
        assert request.start_date == date(2024, 12, 23)
        assert request.end_date == date(2024, 12, 27)
        assert request.requested_on == date(2024, 12, 1)
        assert request.id is None

    def test_missing_dates_is_invalid_range(self, validator):
        with pytest.raises(InvalidRangeError) as exc_info:
            validator.validate("", "", [], 22, [])
        assert exc_info.value.kind == ErrorKind.INVALID_RANGE

    def test_inverted_range_is_invalid_range(self, validator):
        with pytest.raises(InvalidRangeError):
            validator.validate("2024-12-27", "2024-12-23", [], 22, [])

    def test_weekend_only_is_no_business_days(self, validator):
        with pytest.raises(NoBusinessDaysError) as exc_info:
            validator.validate("2024-12-21", "2024-12-22", [], 22, [])
        assert "weekends" in exc_info.value.message

    def test_range_and_balance_messages_differ(self, validator):
        with pytest.raises(InvalidRangeError) as invalid:
            validator.validate("2024-12-27", "2024-12-23", [], 22, [])
        with pytest.raises(NoBusinessDaysError) as no_days:
            validator.validate("2024-12-21", "2024-12-22", [], 22, [])
        assert invalid.value.message != no_days.value.message

    def test_insufficient_balance_states_remaining(self, validator, make_request):
        # 22 allotment, 19 already approved, 3 remain; Mon-Fri needs 5
        requests = [make_request("2024-07-01", "2024-07-25", 19, RequestStatus.APPROVED)]

        with pytest.raises(InsufficientBalanceError) as exc_info:
            validator.validate("2024-12-02", "2024-12-06", [], 22, requests)

        assert exc_info.value.remaining == 3
        assert exc_info.value.requested == 5
        assert "3" in exc_info.value.message

    def test_pending_days_reduce_balance(self, validator, make_request):
        requests = [make_request("2024-07-01", "2024-07-05", 5, RequestStatus.PENDING)]

        with pytest.raises(InsufficientBalanceError):
            validator.validate("2024-12-02", "2024-12-06", [], 9, requests)

    def test_exactly_remaining_is_accepted(self, validator, make_request):
        requests = [make_request("2024-07-01", "2024-07-25", 17, RequestStatus.APPROVED)]

        request = validator.validate("2024-12-02", "2024-12-06", [], 22, requests)

        assert request.days == 5

    def test_range_checked_before_balance(self, validator):
        with pytest.raises(NoBusinessDaysError):
            validator.validate("2024-12-21", "2024-12-22", [], 0, [])

    def test_spanish_messages(self, validator):
        set_language("es")
        with pytest.raises(InsufficientBalanceError) as exc_info:
            validator.validate("2024-12-02", "2024-12-06", [], 3, [])
        assert exc_info.value.message == "Solicitud excede los días restantes (3)."


class TestEnsureCancellable:
    """Tests for cancellation rules."""

    def test_pending_can_be_cancelled(self, validator, make_request):
        request = make_request("2024-07-01", "2024-07-05", 5, RequestStatus.PENDING, "abc")
        assert validator.ensure_cancellable(request) is request

    @pytest.mark.parametrize("status", [RequestStatus.APPROVED, RequestStatus.REJECTED])
    def test_decided_requests_cannot_be_cancelled(self, validator, make_request, status):
        request = make_request("2024-07-01", "2024-07-05", 5, status, "abc")
        with pytest.raises(RequestNotCancellableError):
            validator.ensure_cancellable(request)

    def test_missing_request_cannot_be_cancelled(self, validator):
        with pytest.raises(RequestNotCancellableError):
            validator.ensure_cancellable(None)
