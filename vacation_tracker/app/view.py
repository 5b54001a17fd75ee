"""
Declarative view: maps an AppState to the view model the presentation layer draws.
"""

from datetime import date
from typing import List, Literal, Optional, Union

from pydantic import BaseModel

from vacation_tracker.app.state import AppState, days_to_save
from vacation_tracker.core.balance import sorted_requests, summarize
from vacation_tracker.core.business_days import evaluate_range
from vacation_tracker.core.holidays import can_add_holiday
from vacation_tracker.data.schemas import RangeStatus, RequestStatus, View
from vacation_tracker.i18n import t


class RequestRow(BaseModel):
    """One request as shown in the list."""

    id: Optional[str]
    start_date: date
    end_date: date
    days: int
    status: RequestStatus
    status_label: str
    requested_on: date
    can_cancel: bool


class HolidayRow(BaseModel):
    name: str
    holiday_date: date


class LoadingView(BaseModel):
    kind: Literal["loading"] = "loading"


class DashboardView(BaseModel):
    """Balances, the request form and the request list."""

    kind: Literal["dashboard"] = "dashboard"
    user_id: Optional[str]
    remaining_days: int
    approved_days: int
    pending_days: int
    available_days: int
    start_date: str
    end_date: str
    calculated_days: int
    range_status: RangeStatus
    can_submit: bool
    balance_warning: Optional[str]
    requests: List[RequestRow]
    error_message: str
    is_saving: bool


class ConfigView(BaseModel):
    """Allotment form and holiday management."""

    kind: Literal["config"] = "config"
    user_id: Optional[str]
    available_days: int
    temp_available_days: int
    holiday_name: str
    holiday_date: str
    can_add_holiday: bool
    holidays: List[HolidayRow]
    error_message: str
    is_saving: bool


AppView = Union[LoadingView, DashboardView, ConfigView]


def build_view(state: AppState) -> AppView:
    """Compute everything the current screen shows from the state alone."""
    if not state.is_auth_ready:
        return LoadingView()
    if state.view == View.CONFIG:
        return build_config_view(state)
    return build_dashboard_view(state)


def build_dashboard_view(state: AppState) -> DashboardView:
    balance = summarize(state.available_days, state.requests)
    evaluation = evaluate_range(state.start_date, state.end_date, state.holidays)
    calculated = evaluation.business_days

    balance_warning = None
    if not state.is_saving and calculated > balance.remaining_days:
        balance_warning = t("dashboard.insufficient", remaining=balance.remaining_days)

    rows = [
        RequestRow(
            id=request.id,
            start_date=request.start_date,
            end_date=request.end_date,
            days=request.days,
            status=request.status,
            status_label=t(f"status.{request.status.value}"),
            requested_on=request.requested_on,
            can_cancel=request.is_pending,
        )
        for request in sorted_requests(state.requests)
    ]

    return DashboardView(
        user_id=state.user_id,
        remaining_days=balance.remaining_days,
        approved_days=balance.approved_days,
        pending_days=balance.pending_days,
        available_days=balance.available_days,
        start_date=state.start_date,
        end_date=state.end_date,
        calculated_days=calculated,
        range_status=evaluation.status,
        can_submit=0 < calculated <= balance.remaining_days and not state.is_saving,
        balance_warning=balance_warning,
        requests=rows,
        error_message=state.error_message,
        is_saving=state.is_saving,
    )


def build_config_view(state: AppState) -> ConfigView:
    return ConfigView(
        user_id=state.user_id,
        available_days=state.available_days,
        temp_available_days=days_to_save(state),
        holiday_name=state.temp_holiday_name,
        holiday_date=state.temp_holiday_date,
        can_add_holiday=can_add_holiday(state.temp_holiday_name, state.temp_holiday_date)
        and not state.is_saving,
        holidays=[HolidayRow(name=h.name, holiday_date=h.holiday_date) for h in state.holidays],
        error_message=state.error_message,
        is_saving=state.is_saving,
    )
