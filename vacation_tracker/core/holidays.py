"""
Holiday set rules and public holiday import using the holidays library.
"""

from typing import Dict, Iterable, List, Optional

import holidays

from vacation_tracker.core.business_days import DateInput, parse_date
from vacation_tracker.data.schemas import Holiday


def sort_holidays(holiday_list: Iterable[Holiday]) -> List[Holiday]:
    """Ascending by date string, the display order after every load."""
    return sorted(holiday_list, key=lambda h: h.key)


def can_add_holiday(name: Optional[str], holiday_date: DateInput) -> bool:
    """Adding needs both a non-empty name and a non-empty date."""
    if not name or not name.strip():
        return False
    if holiday_date is None:
        return False
    if isinstance(holiday_date, str) and not holiday_date.strip():
        return False
    return True


def build_holiday(name: str, holiday_date: DateInput) -> Holiday:
    """
    Create a Holiday from user input.

    Raises:
        ValueError: If the name is blank or the date cannot be parsed.
    """
    if not can_add_holiday(name, holiday_date):
        raise ValueError("Holiday name and date are required")
    return Holiday(name=name.strip(), holiday_date=parse_date(holiday_date))


class PublicHolidayProvider:
    """Provides official public holidays for a country and optional region."""

    def __init__(
        self,
        country: str = "ES",
        subdivision: Optional[str] = None,
        language: Optional[str] = None,
    ):
        """
        Initialize the holiday provider.

        Args:
            country: ISO 3166-1 alpha-2 country code.
            subdivision: Optional region code (e.g., 'MD' for Madrid).
            language: Optional language for holiday names.
        """
        self.country = country.upper()
        self.subdivision = subdivision
        self.language = language
        self._cache: Dict[int, List[Holiday]] = {}

    def get_holidays_for_year(self, year: int) -> List[Holiday]:
        """
        Get all public holidays for a year, sorted by date.

        Raises:
            NotImplementedError: If the holidays library has no calendar for the country.
        """
        if year in self._cache:
            return self._cache[year]

        calendar = holidays.country_holidays(
            self.country,
            subdiv=self.subdivision,
            years=year,
            language=self.language,
        )
        result = sort_holidays(
            Holiday(name=name, holiday_date=holiday_date)
            for holiday_date, name in calendar.items()
            if holiday_date.year == year
        )
        self._cache[year] = result
        return result
