"""
Application state and the pure update functions that produce new states.

Every function takes the current AppState and returns a new one; nothing here
touches the store or the screen.
"""

import math
from typing import Any, List, Optional, Sequence

from pydantic import BaseModel, ConfigDict, Field

from vacation_tracker.core.business_days import evaluate_range
from vacation_tracker.core.errors import (
    InvalidRangeError,
    NoBusinessDaysError,
    VacationTrackerError,
)
from vacation_tracker.core.holidays import sort_holidays
from vacation_tracker.data.schemas import (
    ErrorKind,
    Holiday,
    RangeStatus,
    VacationRequest,
    View,
)

# Errors produced by date entry; a valid range clears only these
RANGE_ERROR_KINDS = (ErrorKind.INVALID_RANGE, ErrorKind.NO_BUSINESS_DAYS)


class AppState(BaseModel):
    """Everything the presentation layer needs, owned by the controller."""

    model_config = ConfigDict(frozen=True)

    view: View = View.DASHBOARD
    is_auth_ready: bool = False
    user_id: Optional[str] = None

    # Store snapshots
    available_days: int = 0
    requests: List[VacationRequest] = Field(default_factory=list)
    holidays: List[Holiday] = Field(default_factory=list)

    # Status
    is_saving: bool = False
    error_message: str = ""
    error_kind: Optional[ErrorKind] = None

    # Form fields
    start_date: str = ""
    end_date: str = ""
    temp_available_days: float = 0
    temp_holiday_name: str = ""
    temp_holiday_date: str = ""


def mark_authenticated(state: AppState, user_id: str) -> AppState:
    return state.model_copy(update={"is_auth_ready": True, "user_id": user_id})


def navigate(state: AppState, view: View) -> AppState:
    """Switch screens; entering configuration reloads the allotment field."""
    update: dict[str, Any] = {"view": view}
    if view == View.CONFIG:
        update["temp_available_days"] = state.available_days
    return state.model_copy(update=update)


def set_error(state: AppState, error: VacationTrackerError) -> AppState:
    """Show `error`, replacing whatever message was there."""
    return state.model_copy(update={"error_message": error.message, "error_kind": error.kind})


def clear_error(state: AppState) -> AppState:
    return state.model_copy(update={"error_message": "", "error_kind": None})


def set_dates(
    state: AppState,
    start_date: Optional[str] = None,
    end_date: Optional[str] = None,
) -> AppState:
    """
    Update the entered range and re-classify it.

    Clearing a field clears the message. A complete but invalid range or a
    range without working days sets the matching message. A valid range clears
    a message left over from date entry, leaving other errors in place.
    """
    update: dict[str, Any] = {}
    if start_date is not None:
        update["start_date"] = start_date
    if end_date is not None:
        update["end_date"] = end_date
    state = state.model_copy(update=update)

    evaluation = evaluate_range(state.start_date, state.end_date, state.holidays)
    if evaluation.status == RangeStatus.EMPTY:
        return clear_error(state)
    if evaluation.status == RangeStatus.INVALID_RANGE:
        return set_error(state, InvalidRangeError())
    if evaluation.status == RangeStatus.NO_BUSINESS_DAYS:
        return set_error(state, NoBusinessDaysError())
    if state.error_kind in RANGE_ERROR_KINDS:
        return clear_error(state)
    return state


def clear_request_form(state: AppState) -> AppState:
    return state.model_copy(update={"start_date": "", "end_date": ""})


def set_temp_available_days(state: AppState, value: Any) -> AppState:
    """Accept any numeric input; non-numeric input counts as 0."""
    try:
        number = float(value)
    except (TypeError, ValueError):
        number = 0
    if math.isnan(number) or math.isinf(number):
        number = 0
    return state.model_copy(update={"temp_available_days": number})


def days_to_save(state: AppState) -> int:
    """Allotment to persist: whole days, never negative."""
    return max(0, math.floor(state.temp_available_days))


def set_holiday_name(state: AppState, name: str) -> AppState:
    return state.model_copy(update={"temp_holiday_name": name})


def set_holiday_date(state: AppState, holiday_date: str) -> AppState:
    return state.model_copy(update={"temp_holiday_date": holiday_date})


def clear_holiday_form(state: AppState) -> AppState:
    return state.model_copy(update={"temp_holiday_name": "", "temp_holiday_date": ""})


def start_saving(state: AppState) -> AppState:
    return state.model_copy(update={"is_saving": True})


def finish_saving(state: AppState) -> AppState:
    return state.model_copy(update={"is_saving": False})


def settings_saved(state: AppState, available_days: int) -> AppState:
    """Local update after a successful save; the snapshot confirms it later."""
    return state.model_copy(update={"available_days": available_days, "view": View.DASHBOARD})


def apply_settings_snapshot(state: AppState, available_days: int) -> AppState:
    return state.model_copy(
        update={"available_days": available_days, "temp_available_days": available_days}
    )


def apply_requests_snapshot(state: AppState, requests: Sequence[VacationRequest]) -> AppState:
    """Replace the request list wholesale, keeping store order."""
    return state.model_copy(update={"requests": list(requests)})


def apply_holidays_snapshot(state: AppState, holidays: Sequence[Holiday]) -> AppState:
    """Replace the holiday list wholesale, sorted by date."""
    return state.model_copy(update={"holidays": sort_holidays(holidays)})
