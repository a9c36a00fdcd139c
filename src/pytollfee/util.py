"""Shared utilities for validation and normalization."""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence
from datetime import date, datetime

from .exceptions import ValidationError

_COUNTRY_CODE_RE = re.compile(r"^[A-Z]{2}$")


def normalize_country_code(country_code: str) -> str:
    if not isinstance(country_code, str):
        raise ValidationError("Country code must be a string.")
    normalized = country_code.strip().upper()
    if not _COUNTRY_CODE_RE.match(normalized):
        raise ValidationError("Country code must be an ISO 3166-1 alpha-2 code.")
    return normalized


def ensure_vehicle(vehicle: object) -> None:
    if vehicle is None:
        raise ValidationError("Vehicle is required.")
    if not hasattr(vehicle, "type_label") or not hasattr(vehicle, "is_toll_free"):
        raise ValidationError("Vehicle must expose type_label and is_toll_free.")


def ensure_passings(passings: Iterable[datetime] | None) -> Sequence[datetime]:
    if passings is None:
        return ()
    if isinstance(passings, (str, bytes)):
        raise ValidationError("Passings must be a sequence of datetime values.")
    values = tuple(passings)
    for value in values:
        if not isinstance(value, datetime):
            raise ValidationError("Every passing must be a datetime value.")
    return values


def minutes_between(earlier: datetime, later: datetime) -> float:
    try:
        delta = later - earlier
    except TypeError as exc:
        raise ValidationError("Passings cannot mix naive and timezone-aware values.") from exc
    return delta.total_seconds() / 60


def parse_iso_date(value: str) -> date:
    if not isinstance(value, str) or not value:
        raise ValidationError("Date must be a non-empty string.")
    try:
        return date.fromisoformat(value.strip()[:10])
    except ValueError as exc:
        raise ValidationError("Date is not a valid ISO 8601 value.") from exc
