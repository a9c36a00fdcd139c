"""Client facade for holiday providers and fee calculation."""

from __future__ import annotations

import asyncio
import importlib
from collections.abc import Iterable
from datetime import datetime

import aiohttp

from .calculator import TollCalculator
from .calendar import (
    DEFAULT_COUNTRY_CODE,
    STATIC_VARIANT,
    BaseTollFreeCalendar,
    PublicHolidayCalendar,
    get_calendar,
)
from .exceptions import ConfigError
from .holiday.base import BaseHolidayProvider
from .holiday.loader import ProviderManifest, get_manifest, list_providers
from .models import HolidayProviderInfo, Vehicle
from .util import ensure_passings, ensure_vehicle

DEFAULT_HOLIDAY_PROVIDER = "nager_date"
_DEFAULT_TIMEOUT = aiohttp.ClientTimeout(total=30)


def _load_provider_data(provider_id: str) -> tuple[ProviderManifest, type[BaseHolidayProvider]]:
    if not provider_id:
        raise ConfigError("Holiday provider id is required.")
    manifest = get_manifest(provider_id)
    module_name = f"pytollfee.holiday.{provider_id}"
    try:
        module = importlib.import_module(module_name)
    except ModuleNotFoundError as exc:
        raise ConfigError("Holiday provider module could not be imported.") from exc
    provider_cls = getattr(module, "Provider", None)
    if provider_cls is None:
        raise ConfigError("Holiday provider module does not export Provider.")
    if not isinstance(provider_cls, type) or not issubclass(provider_cls, BaseHolidayProvider):
        raise ConfigError("Holiday provider must inherit from BaseHolidayProvider.")
    return manifest, provider_cls


class Client:
    """Facade that loads holidays when needed and computes daily fees."""

    def __init__(
        self,
        session: aiohttp.ClientSession | None = None,
        *,
        calendar: str | BaseTollFreeCalendar = STATIC_VARIANT,
        country_code: str = DEFAULT_COUNTRY_CODE,
        holiday_provider: str = DEFAULT_HOLIDAY_PROVIDER,
        base_url: str | None = None,
        timeout: aiohttp.ClientTimeout | None = None,
        retry_count: int = 0,
    ) -> None:
        self._session = session
        self._owns_session = session is None
        if isinstance(calendar, BaseTollFreeCalendar):
            self._calendar = calendar
        else:
            self._calendar = get_calendar(calendar, country_code=country_code)
        self._calculator = TollCalculator(self._calendar)
        self._holiday_provider_id = holiday_provider
        self._holiday_provider: BaseHolidayProvider | None = None
        self._base_url = base_url
        self._timeout = timeout or _DEFAULT_TIMEOUT
        self._retry_count = max(0, retry_count)

    async def __aenter__(self) -> Client:
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_session and self._session is not None:
            await self._session.close()
            self._session = None
        self._holiday_provider = None

    @property
    def calendar(self) -> BaseTollFreeCalendar:
        return self._calendar

    async def list_holiday_providers(self) -> list[HolidayProviderInfo]:
        return await asyncio.to_thread(list_providers)

    async def get_holiday_provider(
        self,
        provider_id: str | None = None,
        *,
        base_url: str | None = None,
    ) -> BaseHolidayProvider:
        manifest, provider_cls = await asyncio.to_thread(
            _load_provider_data,
            provider_id or self._holiday_provider_id,
        )
        session = self._ensure_session()
        return provider_cls(
            session,
            manifest,
            base_url=base_url if base_url is not None else self._base_url,
            timeout=self._timeout,
            retry_count=self._retry_count,
        )

    async def total_fee(self, vehicle: Vehicle, passings: Iterable[datetime]) -> int:
        ensure_vehicle(vehicle)
        values = ensure_passings(passings)
        if isinstance(self._calendar, PublicHolidayCalendar) and not vehicle.is_toll_free:
            years = self._calendar.required_years(passing.date() for passing in values)
            missing = {year for year in years if not self._calendar.has_year(year)}
            if missing:
                provider = await self._ensure_holiday_provider()
                await self._calendar.async_load(provider, missing)
        return self._calculator.total_fee(vehicle, values)

    async def _ensure_holiday_provider(self) -> BaseHolidayProvider:
        if self._holiday_provider is None:
            self._holiday_provider = await self.get_holiday_provider()
        return self._holiday_provider

    def _ensure_session(self) -> aiohttp.ClientSession:
        if self._session is None:
            self._session = aiohttp.ClientSession(timeout=self._timeout)
        return self._session
