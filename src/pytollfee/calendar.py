"""Toll-free calendar strategies."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping
from datetime import date, timedelta
from typing import TYPE_CHECKING

from .exceptions import ConfigError, HolidayLookupError, ValidationError
from .util import normalize_country_code

if TYPE_CHECKING:
    from .holiday.base import BaseHolidayProvider

_LOGGER = logging.getLogger(__name__)

STATIC_VARIANT = "static"
PUBLIC_HOLIDAYS_VARIANT = "public_holidays"
CALENDAR_VARIANTS = (STATIC_VARIANT, PUBLIC_HOLIDAYS_VARIANT)

DEFAULT_COUNTRY_CODE = "SE"
TOLL_FREE_MONTH = 7

REFERENCE_YEAR = 2013
# (month, day) pairs; a day of None covers the whole month.
REFERENCE_HOLIDAYS: tuple[tuple[int, int | None], ...] = (
    (1, 1),
    (3, 28),
    (3, 29),
    (4, 1),
    (4, 30),
    (5, 1),
    (5, 8),
    (5, 9),
    (6, 5),
    (6, 6),
    (6, 21),
    (7, None),
    (11, 1),
    (12, 24),
    (12, 25),
    (12, 26),
    (12, 31),
)


def _is_weekend(day: date) -> bool:
    return day.weekday() >= 5


class BaseTollFreeCalendar(ABC):
    """Decides on which calendar days no toll is charged."""

    def is_toll_free_day(self, day: date) -> bool:
        if _is_weekend(day):
            return True
        return self._is_holiday(day)

    @abstractmethod
    def _is_holiday(self, day: date) -> bool:
        """Return True when a weekday is toll-free."""


class StaticHolidayCalendar(BaseTollFreeCalendar):
    """Holidays from a fixed table that only applies to one reference year."""

    def __init__(
        self,
        year: int = REFERENCE_YEAR,
        holidays: Iterable[tuple[int, int | None]] = REFERENCE_HOLIDAYS,
    ) -> None:
        self._year = year
        self._whole_months = frozenset(month for month, day in holidays if day is None)
        self._days = frozenset((month, day) for month, day in holidays if day is not None)

    @property
    def year(self) -> int:
        return self._year

    def _is_holiday(self, day: date) -> bool:
        if day.year != self._year:
            return False
        return day.month in self._whole_months or (day.month, day.day) in self._days


class PublicHolidayCalendar(BaseTollFreeCalendar):
    """July, public holidays and the day before a public holiday are toll-free.

    Holidays are held per year and must be loaded, either with
    :meth:`add_holidays` or from a provider with :meth:`async_load`, before a
    day of that year is queried.
    """

    def __init__(
        self,
        country_code: str = DEFAULT_COUNTRY_CODE,
        holidays: Mapping[int, Iterable[date]] | None = None,
    ) -> None:
        self._country_code = normalize_country_code(country_code)
        self._holidays: dict[int, frozenset[date]] = {}
        for year, days in (holidays or {}).items():
            self.add_holidays(year, days)

    @property
    def country_code(self) -> str:
        return self._country_code

    def has_year(self, year: int) -> bool:
        return year in self._holidays

    def add_holidays(self, year: int, days: Iterable[date]) -> None:
        holidays = frozenset(days)
        if any(day.year != year for day in holidays):
            raise ValidationError(f"Holidays for {year} must fall within that year.")
        self._holidays[year] = holidays

    def required_years(self, days: Iterable[date]) -> set[int]:
        """Return the holiday years needed to classify the given days.

        Weekends and days in the toll-free month never consult holidays.
        """
        years: set[int] = set()
        for day in days:
            if _is_weekend(day) or day.month == TOLL_FREE_MONTH:
                continue
            years.add(day.year)
            # The day-before rule looks one day ahead, into January of the next year.
            years.add((day + timedelta(days=1)).year)
        return years

    async def async_load(self, provider: BaseHolidayProvider, years: Iterable[int]) -> None:
        for year in sorted(set(years)):
            if self.has_year(year):
                continue
            _LOGGER.debug(
                "Loading %s holidays for %s from %s",
                self._country_code,
                year,
                provider.provider_id,
            )
            self.add_holidays(year, await provider.get_holidays(self._country_code, year))

    def is_public_holiday(self, day: date) -> bool:
        holidays = self._holidays.get(day.year)
        if holidays is None:
            raise HolidayLookupError(
                f"Holidays for {self._country_code} {day.year} are not loaded.",
                error_code="holidays_not_loaded",
            )
        return day in holidays

    def _is_holiday(self, day: date) -> bool:
        if day.month == TOLL_FREE_MONTH:
            return True
        return self.is_public_holiday(day) or self.is_public_holiday(day + timedelta(days=1))


def get_calendar(
    variant: str = STATIC_VARIANT,
    *,
    country_code: str = DEFAULT_COUNTRY_CODE,
    holidays: Mapping[int, Iterable[date]] | None = None,
) -> BaseTollFreeCalendar:
    """Build a calendar from its configuration name."""
    if variant == STATIC_VARIANT:
        return StaticHolidayCalendar()
    if variant == PUBLIC_HOLIDAYS_VARIANT:
        return PublicHolidayCalendar(country_code, holidays)
    raise ConfigError(f"Unknown calendar variant {variant!r}; expected one of {CALENDAR_VARIANTS}.")
