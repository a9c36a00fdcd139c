"""Nager.Date provider implementation."""

from __future__ import annotations

import logging
from datetime import date
from typing import Any

import aiohttp

from ...exceptions import ProviderError, ValidationError
from ...util import parse_iso_date
from ..base import BaseHolidayProvider
from ..loader import ProviderManifest
from .const import (
    API_URI,
    DEFAULT_HEADERS,
    PUBLIC_HOLIDAY_TYPE,
    PUBLIC_HOLIDAYS_ENDPOINT,
    UNSUPPORTED_COUNTRY_STATUSES,
)

_LOGGER = logging.getLogger(__name__)


class Provider(BaseHolidayProvider):
    """Provider for the public Nager.Date holiday API."""

    def __init__(
        self,
        session: aiohttp.ClientSession,
        manifest: ProviderManifest,
        *,
        base_url: str | None = None,
        api_uri: str | None = None,
        timeout: aiohttp.ClientTimeout | None = None,
        retry_count: int = 0,
    ) -> None:
        """Initialize the provider."""
        super().__init__(
            session,
            manifest,
            base_url=base_url,
            api_uri=api_uri if api_uri is not None else API_URI,
            timeout=timeout,
            retry_count=retry_count,
        )

    async def get_holidays(self, country_code: str, year: int) -> frozenset[date]:
        """Return the public holidays of a country for one calendar year."""
        normalized_country = self._normalize_country_code(country_code)
        year_value = self._validate_year(year)
        _LOGGER.debug(
            "Provider %s get_holidays started for %s/%s",
            self.provider_id,
            normalized_country,
            year_value,
        )
        data = await self._request_json(
            "GET",
            PUBLIC_HOLIDAYS_ENDPOINT.format(year=year_value, country_code=normalized_country),
            headers=DEFAULT_HEADERS,
        )
        holidays = self._map_holiday_list(data, year_value)
        _LOGGER.debug(
            "Provider %s get_holidays completed (%s holidays)",
            self.provider_id,
            len(holidays),
        )
        return holidays

    def _raise_for_status(self, response: aiohttp.ClientResponse) -> None:
        if response.status in UNSUPPORTED_COUNTRY_STATUSES:
            raise ProviderError(
                "Country is not supported by the holiday provider.",
                error_code="unsupported_country",
            )
        super()._raise_for_status(response)

    def _map_holiday_list(self, data: Any, year: int) -> frozenset[date]:
        if not isinstance(data, list):
            raise ProviderError("Holiday response must be a list.")
        holidays: set[date] = set()
        for item in data:
            holiday = self._map_holiday(item)
            if holiday is None:
                continue
            if holiday.year != year:
                raise ProviderError("Holiday response contains dates outside the requested year.")
            holidays.add(holiday)
        return frozenset(holidays)

    def _map_holiday(self, data: Any) -> date | None:
        if not isinstance(data, dict):
            raise ProviderError("Holiday entry must be an object.")
        types = data.get("types")
        # Bank, school and optional observances do not suspend tolls.
        if isinstance(types, list) and PUBLIC_HOLIDAY_TYPE not in types:
            return None
        try:
            return parse_iso_date(data.get("date"))
        except ValidationError as exc:
            raise ProviderError("Holiday entry has an invalid date.") from exc
