"""Time-of-day fee table."""

from __future__ import annotations

from bisect import bisect_right
from datetime import datetime

from .exceptions import ValidationError

DAILY_FEE_CAP = 60

# (first minute of the day the band applies from, fee)
FEE_BANDS: tuple[tuple[int, int], ...] = (
    (0, 0),
    (6 * 60, 8),
    (6 * 60 + 30, 13),
    (7 * 60, 18),
    (8 * 60, 13),
    (8 * 60 + 30, 8),
    (15 * 60, 13),
    (15 * 60 + 30, 18),
    (17 * 60, 13),
    (18 * 60, 8),
    (18 * 60 + 30, 0),
)

_BAND_STARTS = tuple(start for start, _ in FEE_BANDS)


def fee_for_time(hour: int, minute: int) -> int:
    """Return the fee for a single passing at the given local time."""
    if not isinstance(hour, int) or not 0 <= hour <= 23:
        raise ValidationError("hour must be an integer between 0 and 23.")
    if not isinstance(minute, int) or not 0 <= minute <= 59:
        raise ValidationError("minute must be an integer between 0 and 59.")
    index = bisect_right(_BAND_STARTS, hour * 60 + minute) - 1
    return FEE_BANDS[index][1]


def fee_for_timestamp(value: datetime) -> int:
    return fee_for_time(value.hour, value.minute)
