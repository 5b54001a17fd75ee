"""
Data models and schemas for the vacation tracker.
"""

from vacation_tracker.data.schemas import (
    BalanceSummary,
    Config,
    ErrorKind,
    Holiday,
    RangeEvaluation,
    RangeStatus,
    RequestStatus,
    Settings,
    VacationRequest,
    View,
)

__all__ = [
    "BalanceSummary",
    "Config",
    "ErrorKind",
    "Holiday",
    "RangeEvaluation",
    "RangeStatus",
    "RequestStatus",
    "Settings",
    "VacationRequest",
    "View",
]
