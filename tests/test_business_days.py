"""
Tests for business-day counting and range classification.
"""

from datetime import date, datetime, timedelta

import pytest

from vacation_tracker.core.business_days import (
    count_business_days,
    evaluate_range,
    holiday_dates,
    parse_date,
)
from vacation_tracker.data.schemas import Holiday, RangeStatus


class TestParseDate:
    """Tests for date normalization."""

    def test_iso_format(self):
        assert parse_date("2024-12-23") == date(2024, 12, 23)

    def test_european_formats(self):
        assert parse_date("23.12.2024") == date(2024, 12, 23)
        assert parse_date("23/12/2024") == date(2024, 12, 23)

    def test_datetime_drops_time_of_day(self):
        assert parse_date(datetime(2024, 12, 23, 23, 59)) == date(2024, 12, 23)

    def test_blank_is_none(self):
        assert parse_date("") is None
        assert parse_date("   ") is None
        assert parse_date(None) is None

    def test_invalid_raises(self):
        with pytest.raises(ValueError, match="Invalid date format"):
            parse_date("2024-13-45")


class TestCountBusinessDays:
    """Tests for count_business_days."""

    def test_christmas_week_with_holiday(self):
        """Mon 23 to Fri 27 December 2024 with the 25th as a holiday."""
        assert count_business_days("2024-12-23", "2024-12-27", {"2024-12-25"}) == 4

    def test_weekend_only(self):
        assert count_business_days("2024-12-21", "2024-12-22", set()) == 0

    def test_single_weekday(self):
        assert count_business_days("2024-12-23", "2024-12-23") == 1

    def test_single_weekend_day(self):
        assert count_business_days("2024-12-21", "2024-12-21") == 0

    @pytest.mark.parametrize("offset", range(7))
    def test_same_weekday_one_week_later(self, offset):
        """Exactly the two weekend days are excluded from an eight-day span."""
        start = date(2024, 12, 2) + timedelta(days=offset)
        end = start + timedelta(days=7)
        expected = 6 if start.weekday() < 5 else 5
        assert count_business_days(start, end) == expected

    def test_full_weeks(self):
        # Monday 2 December to Sunday 15 December 2024
        assert count_business_days(date(2024, 12, 2), date(2024, 12, 15)) == 10

    def test_adding_holidays_never_increases_count(self):
        start, end = date(2024, 12, 2), date(2024, 12, 31)
        holidays = []
        previous = count_business_days(start, end, holidays)
        for day in range(2, 32):
            holidays.append(date(2024, 12, day))
            current = count_business_days(start, end, holidays)
            assert current <= previous
            previous = current
        assert previous == 0

    def test_holiday_on_weekend_does_not_count_twice(self):
        assert count_business_days("2024-12-21", "2024-12-27", {"2024-12-21"}) == 5

    def test_holiday_models_are_accepted(self):
        holidays = [Holiday(name="Navidad", holiday_date=date(2024, 12, 25))]
        assert count_business_days("2024-12-23", "2024-12-27", holidays) == 4

    def test_inverted_range_is_zero(self):
        assert count_business_days("2024-12-27", "2024-12-23") == 0

    def test_unparsable_input_is_zero(self):
        assert count_business_days("not-a-date", "2024-12-23") == 0

    def test_year_boundary(self):
        # Mon 30 Dec 2024 to Fri 3 Jan 2025, New Year's Day excluded
        assert count_business_days("2024-12-30", "2025-01-03", {"2025-01-01"}) == 4


class TestEvaluateRange:
    """Tests for range classification."""

    def test_ok(self):
        evaluation = evaluate_range("2024-12-23", "2024-12-27", {"2024-12-25"})
        assert evaluation.status == RangeStatus.OK
        assert evaluation.business_days == 4
        assert evaluation.start_date == date(2024, 12, 23)
        assert evaluation.end_date == date(2024, 12, 27)

    def test_no_business_days(self):
        evaluation = evaluate_range("2024-12-21", "2024-12-22")
        assert evaluation.status == RangeStatus.NO_BUSINESS_DAYS
        assert evaluation.business_days == 0

    def test_holidays_only_is_no_business_days(self):
        evaluation = evaluate_range("2024-12-25", "2024-12-26", {"2024-12-25", "2024-12-26"})
        assert evaluation.status == RangeStatus.NO_BUSINESS_DAYS

    @pytest.mark.parametrize(
        "start,end",
        [("", ""), ("2024-12-23", ""), ("", "2024-12-27"), (None, "2024-12-27")],
    )
    def test_missing_input_is_empty_not_invalid(self, start, end):
        evaluation = evaluate_range(start, end)
        assert evaluation.status == RangeStatus.EMPTY
        assert evaluation.business_days == 0

    def test_inverted_is_invalid(self):
        evaluation = evaluate_range("2024-12-27", "2024-12-23")
        assert evaluation.status == RangeStatus.INVALID_RANGE

    def test_unparsable_is_invalid(self):
        evaluation = evaluate_range("2024-02-30", "2024-03-01")
        assert evaluation.status == RangeStatus.INVALID_RANGE


class TestHolidayDates:
    """Tests for holiday set normalization."""

    def test_mixed_inputs(self):
        result = holiday_dates([
            "2024-12-25",
            date(2024, 12, 26),
            Holiday(name="Año Nuevo", holiday_date=date(2025, 1, 1)),
            "",
        ])
        assert result == {date(2024, 12, 25), date(2024, 12, 26), date(2025, 1, 1)}
