"""
Tests for the state update functions.
"""

from datetime import date

import pytest

from vacation_tracker.app import state as reducers
from vacation_tracker.app.state import AppState
from vacation_tracker.core.errors import InsufficientBalanceError, PersistenceError
from vacation_tracker.data.schemas import ErrorKind, Holiday, View


class TestSetDates:
    """Tests for range entry and its error transitions."""

    def test_partial_entry_has_no_error(self):
        state = reducers.set_dates(AppState(), start_date="2024-12-23")
        assert state.start_date == "2024-12-23"
        assert state.error_message == ""

    def test_inverted_range_sets_error(self):
        state = reducers.set_dates(AppState(), start_date="2024-12-27", end_date="2024-12-23")
        assert state.error_kind == ErrorKind.INVALID_RANGE
        assert state.error_message

    def test_weekend_range_sets_no_business_days(self):
        state = reducers.set_dates(AppState(), start_date="2024-12-21", end_date="2024-12-22")
        assert state.error_kind == ErrorKind.NO_BUSINESS_DAYS

    def test_holidays_are_considered(self):
        state = AppState(holidays=[Holiday(name="Navidad", holiday_date=date(2024, 12, 25))])
        state = reducers.set_dates(state, start_date="2024-12-25", end_date="2024-12-25")
        assert state.error_kind == ErrorKind.NO_BUSINESS_DAYS

    def test_valid_range_clears_range_error(self):
        state = reducers.set_dates(AppState(), start_date="2024-12-27", end_date="2024-12-23")
        state = reducers.set_dates(state, start_date="2024-12-23", end_date="2024-12-27")
        assert state.error_kind is None
        assert state.error_message == ""

    def test_valid_range_keeps_other_errors(self):
        state = reducers.set_error(AppState(), PersistenceError("error.save_request"))
        state = reducers.set_dates(state, start_date="2024-12-23", end_date="2024-12-27")
        assert state.error_kind == ErrorKind.PERSISTENCE

    def test_clearing_a_date_clears_error(self):
        state = reducers.set_error(AppState(), InsufficientBalanceError(5, 3))
        state = reducers.set_dates(state, end_date="")
        assert state.error_kind is None

    def test_state_is_not_mutated(self):
        original = AppState()
        reducers.set_dates(original, start_date="2024-12-27", end_date="2024-12-23")
        assert original.start_date == ""
        assert original.error_message == ""


class TestAvailableDays:
    """Tests for the allotment form field."""

    @pytest.mark.parametrize(
        "value,expected",
        [(25, 25), ("25", 25), (22.7, 22), ("-3", 0), ("abc", 0), (None, 0), ("nan", 0), ("inf", 0)],
    )
    def test_days_to_save(self, value, expected):
        state = reducers.set_temp_available_days(AppState(), value)
        assert reducers.days_to_save(state) == expected

    def test_navigate_to_config_loads_current_allotment(self):
        state = AppState(available_days=22, temp_available_days=5)
        state = reducers.navigate(state, View.CONFIG)
        assert state.view == View.CONFIG
        assert state.temp_available_days == 22

    def test_navigate_to_dashboard_keeps_field(self):
        state = AppState(view=View.CONFIG, available_days=22, temp_available_days=5)
        state = reducers.navigate(state, View.DASHBOARD)
        assert state.temp_available_days == 5

    def test_settings_saved_returns_to_dashboard(self):
        state = AppState(view=View.CONFIG, available_days=22)
        state = reducers.settings_saved(state, 25)
        assert state.view == View.DASHBOARD
        assert state.available_days == 25

    def test_settings_snapshot_updates_field(self):
        state = reducers.apply_settings_snapshot(AppState(), 18)
        assert state.available_days == 18
        assert state.temp_available_days == 18


class TestSnapshots:
    """Tests for applying store snapshots."""

    def test_holidays_are_sorted(self):
        state = reducers.apply_holidays_snapshot(AppState(), [
            Holiday(name="Reyes", holiday_date=date(2025, 1, 6)),
            Holiday(name="Navidad", holiday_date=date(2024, 12, 25)),
        ])
        assert [h.name for h in state.holidays] == ["Navidad", "Reyes"]

    def test_requests_replace_wholesale(self, make_request):
        state = AppState(requests=[make_request("2024-07-01", "2024-07-05", 5, request_id="old")])
        state = reducers.apply_requests_snapshot(
            state, [make_request("2024-08-05", "2024-08-07", 3, request_id="new")]
        )
        assert [r.id for r in state.requests] == ["new"]


class TestForms:
    """Tests for form and flag helpers."""

    def test_clear_request_form(self):
        state = AppState(start_date="2024-12-23", end_date="2024-12-27")
        state = reducers.clear_request_form(state)
        assert (state.start_date, state.end_date) == ("", "")

    def test_holiday_form(self):
        state = reducers.set_holiday_date(reducers.set_holiday_name(AppState(), "Navidad"), "2024-12-25")
        assert (state.temp_holiday_name, state.temp_holiday_date) == ("Navidad", "2024-12-25")

        state = reducers.clear_holiday_form(state)
        assert (state.temp_holiday_name, state.temp_holiday_date) == ("", "")

    def test_saving_flag(self):
        state = reducers.start_saving(AppState())
        assert state.is_saving
        assert not reducers.finish_saving(state).is_saving

    def test_set_error_replaces_message(self):
        state = reducers.set_error(AppState(), PersistenceError("error.save_request"))
        state = reducers.set_error(state, InsufficientBalanceError(5, 3))
        assert state.error_kind == ErrorKind.INSUFFICIENT_BALANCE
        assert "3" in state.error_message

        state = reducers.clear_error(state)
        assert state.error_message == ""
        assert state.error_kind is None
