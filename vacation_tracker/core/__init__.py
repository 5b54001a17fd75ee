"""
Core business logic: business days, balances and request validation.
"""

from vacation_tracker.core.balance import (
    approved_days,
    pending_days,
    remaining_days,
    sorted_requests,
    summarize,
)
from vacation_tracker.core.business_days import count_business_days, evaluate_range, parse_date
from vacation_tracker.core.holidays import PublicHolidayProvider, sort_holidays
from vacation_tracker.core.validator import RequestValidator

__all__ = [
    "PublicHolidayProvider",
    "RequestValidator",
    "approved_days",
    "count_business_days",
    "evaluate_range",
    "parse_date",
    "pending_days",
    "remaining_days",
    "sort_holidays",
    "sorted_requests",
    "summarize",
]
