"""Daily toll fee aggregation."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime

from .calendar import BaseTollFreeCalendar, StaticHolidayCalendar
from .fees import DAILY_FEE_CAP, fee_for_timestamp
from .models import Vehicle
from .util import ensure_passings, ensure_vehicle, minutes_between

WINDOW_MINUTES = 60


class TollCalculator:
    """Computes the fee one vehicle pays for one calendar day of passings."""

    def __init__(self, calendar: BaseTollFreeCalendar | None = None) -> None:
        self._calendar = calendar if calendar is not None else StaticHolidayCalendar()

    @property
    def calendar(self) -> BaseTollFreeCalendar:
        return self._calendar

    def fee_for_passing(self, vehicle: Vehicle, passing: datetime) -> int:
        """Return the fee of a single passing before window and cap rules."""
        ensure_vehicle(vehicle)
        (passing,) = ensure_passings((passing,))
        return self._raw_fee(vehicle, passing)

    def passing_fees(self, vehicle: Vehicle, passings: Iterable[datetime]) -> list[int]:
        ensure_vehicle(vehicle)
        return [self._raw_fee(vehicle, passing) for passing in ensure_passings(passings)]

    def total_fee(self, vehicle: Vehicle, passings: Iterable[datetime]) -> int:
        """Return the capped total fee for a day of passings.

        Passings must be in chronological order and fall on one calendar day.
        A passing at most an hour after the previous one is compared with that
        previous passing only: when its fee is not lower it replaces the
        previous fee in the total, otherwise nothing is added. This is a
        pairwise rule, not a sliding-window maximum, so runs chain past an
        hour and a cheap passing lowers the fee a later one is compared with.
        """
        ensure_vehicle(vehicle)
        values = ensure_passings(passings)
        if not values:
            return 0

        previous = values[0]
        previous_fee = self._raw_fee(vehicle, previous)
        total = previous_fee
        for passing in values[1:]:
            fee = self._raw_fee(vehicle, passing)
            if minutes_between(previous, passing) <= WINDOW_MINUTES:
                if fee >= previous_fee:
                    total += fee - previous_fee
            else:
                total += fee
            previous = passing
            previous_fee = fee

        return min(total, DAILY_FEE_CAP)

    def _raw_fee(self, vehicle: Vehicle, passing: datetime) -> int:
        if vehicle.is_toll_free or self._calendar.is_toll_free_day(passing.date()):
            return 0
        return fee_for_timestamp(passing)


def total_fee(
    vehicle: Vehicle,
    passings: Iterable[datetime],
    *,
    calendar: BaseTollFreeCalendar | None = None,
) -> int:
    return TollCalculator(calendar).total_fee(vehicle, passings)
