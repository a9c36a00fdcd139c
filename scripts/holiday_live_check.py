"""Manual live check for a holiday provider and the fee calculation.

Run from the repository root with:
  PYTHONPATH=src COUNTRY_CODE=SE python scripts/holiday_live_check.py --year 2024

Compute a daily fee with holidays looked up live:
  PYTHONPATH=src python scripts/holiday_live_check.py \
    --vehicle car --passing 2024-04-30T07:10 --passing 2024-04-30T16:45

Optional environment variables:
  PROVIDER_ID
  BASE_URL
  COUNTRY_CODE

Debug helpers:
  --log-level DEBUG prints provider request logging.
  --traceback prints full tracebacks on errors.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import os
import sys
import traceback
from datetime import datetime

from pytollfee import Client, Vehicle, VehicleType
from pytollfee.exceptions import TollFeeError

_LOGGER = logging.getLogger(__name__)


def _print_exception(label: str, exc: Exception, *, trace: bool) -> None:
    print(f"{label}: {exc.__class__.__name__}: {exc}", file=sys.stderr)
    if trace:
        traceback.print_exc()


def _parse_passing(value: str) -> datetime:
    try:
        return datetime.fromisoformat(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"Invalid passing timestamp: {value}") from exc


def _parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Live check for holiday lookup and toll fees.")
    parser.add_argument(
        "--provider",
        dest="provider_id",
        help="Holiday provider id (e.g. nager_date).",
    )
    parser.add_argument("--base-url", dest="base_url", help="Holiday provider base URL.")
    parser.add_argument("--country", dest="country_code", help="ISO 3166-1 alpha-2 country code.")
    parser.add_argument("--year", type=int, help="List the public holidays of this year.")
    parser.add_argument(
        "--vehicle",
        choices=[vehicle_type.name.lower() for vehicle_type in VehicleType],
        default="car",
        help="Vehicle category used for --passing.",
    )
    parser.add_argument(
        "--passing",
        dest="passings",
        action="append",
        type=_parse_passing,
        default=[],
        help="Passing timestamp (ISO 8601). Repeat for multiple passings.",
    )
    parser.add_argument("--retry-count", type=int, default=1, help="GET retries for the provider.")
    parser.add_argument("--log-level", default="INFO", help="Logging level (default: INFO).")
    parser.add_argument("--traceback", action="store_true", help="Print full tracebacks.")
    return parser.parse_args()


async def main() -> int:
    args = _parse_args()
    logging.basicConfig(level=args.log_level.upper())
    provider_id = args.provider_id or os.getenv("PROVIDER_ID") or "nager_date"
    base_url = args.base_url or os.getenv("BASE_URL")
    country_code = args.country_code or os.getenv("COUNTRY_CODE") or "SE"
    if args.year is None and not args.passings:
        print("Nothing to do: pass --year and/or --passing.", file=sys.stderr)
        return 2

    async with Client(
        calendar="public_holidays",
        country_code=country_code,
        holiday_provider=provider_id,
        base_url=base_url,
        retry_count=args.retry_count,
    ) as client:
        if args.year is not None:
            try:
                provider = await client.get_holiday_provider()
                holidays = await provider.get_holidays(country_code, args.year)
            except TollFeeError as exc:
                _print_exception("Holiday lookup failed", exc, trace=args.traceback)
                return 1
            print(f"{provider.provider_name} holidays for {country_code} {args.year}:")
            for holiday in sorted(holidays):
                print(f"  {holiday.isoformat()} ({holiday.strftime('%A')})")

        if args.passings:
            vehicle = Vehicle.from_type(VehicleType[args.vehicle.upper()])
            passings = sorted(args.passings)
            _LOGGER.debug("Computing fee for %s passings", len(passings))
            try:
                fee = await client.total_fee(vehicle, passings)
            except TollFeeError as exc:
                _print_exception("Fee calculation failed", exc, trace=args.traceback)
                return 1
            print(f"Total fee for {vehicle.type_label}: {fee}")
    return 0


if __name__ == "__main__":
    raise SystemExit(asyncio.run(main()))
