"""
Business-day counting over inclusive date ranges.
"""

from datetime import date, datetime, timedelta
from typing import Iterable, Optional, Set, Union

from vacation_tracker.data.schemas import Holiday, RangeEvaluation, RangeStatus

DateInput = Union[date, datetime, str, None]

DATE_FORMATS = ["%Y-%m-%d", "%d.%m.%Y", "%d/%m/%Y"]

# date.weekday(): Monday == 0 ... Sunday == 6
WEEKEND_DAYS = (5, 6)


def parse_date(value: DateInput) -> Optional[date]:
    """
    Normalize a date input to a calendar date.

    Args:
        value: A date, a datetime (time of day is dropped) or a string in
            YYYY-MM-DD, DD.MM.YYYY or DD/MM/YYYY format.

    Returns:
        The calendar date, or None for an empty input.

    Raises:
        ValueError: If the string matches none of the supported formats.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value

    text = str(value).strip()
    if not text:
        return None

    for fmt in DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt).date()
        except ValueError:
            continue
    raise ValueError(
        f"Invalid date format: {text}. Use YYYY-MM-DD, DD.MM.YYYY, or DD/MM/YYYY"
    )


def holiday_dates(holidays: Iterable[Union[Holiday, DateInput]]) -> Set[date]:
    """Build the set of holiday dates from holidays, dates or date strings."""
    result: Set[date] = set()
    for holiday in holidays:
        if isinstance(holiday, Holiday):
            result.add(holiday.holiday_date)
            continue
        parsed = parse_date(holiday)
        if parsed is not None:
            result.add(parsed)
    return result


def is_business_day(day: date, holiday_set: Set[date]) -> bool:
    return day.weekday() not in WEEKEND_DAYS and day not in holiday_set


def count_business_days(
    start: DateInput,
    end: DateInput,
    holidays: Iterable[Union[Holiday, DateInput]] = (),
) -> int:
    """
    Count the working days (Monday to Friday, not a holiday) from start to end inclusive.

    Args:
        start: First day of the range.
        end: Last day of the range.
        holidays: Holidays to exclude.

    Returns:
        Number of business days; 0 for an empty, unparsable or inverted range.
    """
    return evaluate_range(start, end, holidays).business_days


def evaluate_range(
    start: DateInput,
    end: DateInput,
    holidays: Iterable[Union[Holiday, DateInput]] = (),
) -> RangeEvaluation:
    """
    Count business days in a range and classify the outcome.

    An empty start or end is EMPTY (nothing entered yet). Unparsable input or
    start after end is INVALID_RANGE. A valid range without a single working
    day is NO_BUSINESS_DAYS.

    Args:
        start: First day of the range.
        end: Last day of the range.
        holidays: Holidays to exclude.

    Returns:
        RangeEvaluation with the parsed dates, count and status.
    """
    if _is_blank(start) or _is_blank(end):
        return RangeEvaluation(status=RangeStatus.EMPTY)

    try:
        start_date = parse_date(start)
        end_date = parse_date(end)
    except ValueError:
        return RangeEvaluation(status=RangeStatus.INVALID_RANGE)

    if start_date > end_date:
        return RangeEvaluation(
            start_date=start_date,
            end_date=end_date,
            status=RangeStatus.INVALID_RANGE,
        )

    excluded = holiday_dates(holidays)
    count = 0
    current = start_date
    while current <= end_date:
        if is_business_day(current, excluded):
            count += 1
        current += timedelta(days=1)

    return RangeEvaluation(
        start_date=start_date,
        end_date=end_date,
        business_days=count,
        status=RangeStatus.OK if count > 0 else RangeStatus.NO_BUSINESS_DAYS,
    )


def _is_blank(value: DateInput) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())
