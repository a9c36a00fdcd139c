from datetime import date, datetime, timedelta

import pytest

from pytollfee import TollCalculator, total_fee
from pytollfee.calendar import PublicHolidayCalendar
from pytollfee.exceptions import HolidayLookupError, ValidationError
from pytollfee.models import Vehicle, VehicleType

CAR = Vehicle.from_type(VehicleType.CAR)
# A regular Wednesday in the reference year.
WEEKDAY = date(2013, 1, 2)


def _at(hour: int, minute: int, day: date = WEEKDAY) -> datetime:
    return datetime(day.year, day.month, day.day, hour, minute)


def test_no_passings() -> None:
    assert total_fee(CAR, []) == 0


def test_single_passing() -> None:
    assert total_fee(CAR, [_at(7, 15)]) == 18


def test_passings_within_an_hour_are_charged_once() -> None:
    assert total_fee(CAR, [_at(6, 0), _at(6, 20)]) == 8


def test_passings_more_than_an_hour_apart_are_both_charged() -> None:
    assert total_fee(CAR, [_at(6, 0), _at(7, 5)]) == 26


def test_exactly_sixty_minutes_apart_shares_the_window() -> None:
    assert total_fee(CAR, [_at(6, 15), _at(7, 15)]) == 18


def test_window_keeps_highest_fee() -> None:
    assert total_fee(CAR, [_at(7, 0), _at(7, 45)]) == 18
    assert total_fee(CAR, [_at(7, 50), _at(8, 40)]) == 18


def test_higher_fee_replaces_window_fee() -> None:
    assert total_fee(CAR, [_at(6, 0), _at(6, 45), _at(7, 30)]) == 18


def test_window_chains_on_previous_passing() -> None:
    # Each gap is under an hour although the run spans 100 minutes.
    assert total_fee(CAR, [_at(6, 0), _at(6, 50), _at(7, 40)]) == 18


def test_lower_fee_inside_window_is_not_added() -> None:
    assert total_fee(CAR, [_at(7, 30), _at(8, 10), _at(8, 50)]) == 18
    assert total_fee(CAR, [_at(8, 25), _at(8, 45), _at(9, 40)]) == 13


def test_cheap_passing_lowers_the_comparison_fee() -> None:
    passings = [
        _at(8, 25),
        _at(8, 35),
        _at(9, 30),
        _at(10, 25),
        _at(11, 20),
        _at(12, 15),
        _at(13, 10),
        _at(14, 5),
        _at(15, 0),
    ]
    calculator = TollCalculator()
    assert calculator.passing_fees(CAR, passings) == [13, 8, 8, 8, 8, 8, 8, 8, 13]
    # The 15:00 passing replaces the preceding 8, not the 13 that opened the run.
    assert calculator.total_fee(CAR, passings) == 18


def test_daily_cap() -> None:
    passings = [
        _at(6, 0),
        _at(7, 5),
        _at(8, 10),
        _at(9, 15),
        _at(10, 20),
        _at(15, 30),
        _at(16, 35),
    ]
    assert total_fee(CAR, passings) == 60


def test_passings_every_ten_minutes() -> None:
    start = _at(6, 0)
    passings = [start + timedelta(minutes=10 * step) for step in range(76)]
    fee = total_fee(CAR, passings)
    assert 0 <= fee <= 60
    # 18 by 07:00, then 8 -> 13 at 15:00 and 13 -> 18 at 15:30 each add 5.
    assert fee == 28


@pytest.mark.parametrize("vehicle_type", [t for t in VehicleType if t.toll_free])
def test_toll_free_vehicles_pay_nothing(vehicle_type: VehicleType) -> None:
    vehicle = Vehicle.from_type(vehicle_type)
    assert total_fee(vehicle, [_at(7, 0), _at(8, 5), _at(16, 0)]) == 0


@pytest.mark.parametrize("day", [date(2013, 1, 5), date(2013, 1, 6)])
def test_weekend_passings_are_free(day: date) -> None:
    calculator = TollCalculator()
    passings = [_at(7, 0, day), _at(16, 0, day)]
    assert calculator.passing_fees(CAR, passings) == [0, 0]
    assert calculator.total_fee(CAR, passings) == 0


def test_static_holiday_is_free() -> None:
    assert total_fee(CAR, [_at(7, 0, date(2013, 5, 1))]) == 0


def test_duck_typed_vehicle() -> None:
    class Truck:
        type_label = "Truck"
        is_toll_free = False

    assert total_fee(Truck(), [_at(7, 0)]) == 18  # type: ignore[arg-type]


def test_missing_vehicle_fails_fast() -> None:
    with pytest.raises(ValidationError):
        total_fee(None, [_at(7, 0)])  # type: ignore[arg-type]
    with pytest.raises(ValidationError):
        total_fee(None, [])  # type: ignore[arg-type]


def test_rejects_non_datetime_passings() -> None:
    with pytest.raises(ValidationError):
        total_fee(CAR, ["2013-01-02 07:00"])  # type: ignore[list-item]


def test_total_fee_is_idempotent() -> None:
    calculator = TollCalculator()
    passings = [_at(6, 0), _at(7, 5), _at(15, 45)]
    assert calculator.total_fee(CAR, passings) == calculator.total_fee(CAR, passings) == 44


def test_fee_for_passing() -> None:
    calculator = TollCalculator()
    assert calculator.fee_for_passing(CAR, _at(15, 10)) == 13
    assert calculator.fee_for_passing(Vehicle.from_type(VehicleType.TRACTOR), _at(15, 10)) == 0
    with pytest.raises(ValidationError):
        calculator.fee_for_passing(CAR, WEEKDAY)  # type: ignore[arg-type]


def test_public_holiday_calendar() -> None:
    calendar = PublicHolidayCalendar("SE", {2024: {date(2024, 6, 6)}})
    calculator = TollCalculator(calendar)
    assert calculator.calendar is calendar
    assert calculator.total_fee(CAR, [_at(7, 0, date(2024, 6, 5))]) == 0
    assert calculator.total_fee(CAR, [_at(7, 0, date(2024, 6, 4))]) == 18
    assert calculator.total_fee(CAR, [_at(7, 0, date(2024, 7, 16))]) == 0


def test_july_is_free_for_every_vehicle_and_time() -> None:
    calendar = PublicHolidayCalendar("SE")
    day = date(2024, 7, 17)
    passings = [_at(hour, 0, day) for hour in range(24)]
    assert total_fee(CAR, passings, calendar=calendar) == 0


def test_public_holiday_calendar_without_data() -> None:
    calendar = PublicHolidayCalendar("SE")
    with pytest.raises(HolidayLookupError):
        total_fee(CAR, [_at(7, 0, date(2024, 3, 5))], calendar=calendar)
