"""
Day balances derived from the allotment and the request list.
"""

from typing import Iterable, List

from vacation_tracker.data.schemas import BalanceSummary, RequestStatus, VacationRequest


def _sum_days(requests: Iterable[VacationRequest], status: RequestStatus) -> int:
    return sum(r.days for r in requests if r.status == status)


def approved_days(requests: Iterable[VacationRequest]) -> int:
    return _sum_days(requests, RequestStatus.APPROVED)


def pending_days(requests: Iterable[VacationRequest]) -> int:
    return _sum_days(requests, RequestStatus.PENDING)


def remaining_days(allotment: int, requests: Iterable[VacationRequest]) -> int:
    """Allotment minus approved and pending days. Negative if the allotment was lowered."""
    requests = list(requests)
    return allotment - approved_days(requests) - pending_days(requests)


def sorted_requests(requests: Iterable[VacationRequest]) -> List[VacationRequest]:
    """Most recent start date first; requests sharing a start date keep store order."""
    # sorted() with reverse=True is still stable
    return sorted(requests, key=lambda r: r.start_date, reverse=True)


def summarize(allotment: int, requests: Iterable[VacationRequest]) -> BalanceSummary:
    requests = list(requests)
    approved = approved_days(requests)
    pending = pending_days(requests)
    return BalanceSummary(
        available_days=allotment,
        approved_days=approved,
        pending_days=pending,
        remaining_days=allotment - approved - pending,
    )
