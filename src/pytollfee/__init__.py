"""pytollfee package."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

from .calculator import TollCalculator, total_fee
from .calendar import (
    BaseTollFreeCalendar,
    PublicHolidayCalendar,
    StaticHolidayCalendar,
    get_calendar,
)
from .client import Client
from .exceptions import (
    ConfigError,
    HolidayLookupError,
    NetworkError,
    ProviderError,
    TollFeeError,
    ValidationError,
)
from .fees import DAILY_FEE_CAP, fee_for_time
from .models import HolidayProviderInfo, Vehicle, VehicleType

try:
    __version__ = version("pytollfee")
except PackageNotFoundError:  # pragma: no cover - not installed
    __version__ = "0.0.0"

__all__ = [
    "DAILY_FEE_CAP",
    "BaseTollFreeCalendar",
    "Client",
    "ConfigError",
    "HolidayLookupError",
    "HolidayProviderInfo",
    "NetworkError",
    "ProviderError",
    "PublicHolidayCalendar",
    "StaticHolidayCalendar",
    "TollCalculator",
    "TollFeeError",
    "ValidationError",
    "Vehicle",
    "VehicleType",
    "__version__",
    "fee_for_time",
    "get_calendar",
    "total_fee",
]
