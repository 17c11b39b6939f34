#!/usr/bin/env python3
"""
Masjid Locator command line
Resolves a city, area or place name slug and prints:
  - The resolved location (city with area breakdown, area, or geocoded place)
  - Today's prayer times, or a 7-day table with --week
"""

import argparse
import datetime
import logging
import sys

from dotenv import load_dotenv

from masjid_locator.gazetteer import CITIES
from masjid_locator.location import (
    get_all_static_location_slugs,
    resolve_location_by_slug,
)
from masjid_locator.prayer_times import (
    PRAYER_DISPLAY,
    PRAYER_NAMES,
    UK_TIMEZONE,
    DegenerateScheduleError,
    calculate_prayer_times,
    calculate_weekly_prayer_times,
    format_time_display,
)

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_NOT_FOUND = 1
EXIT_DEGENERATE = 2


def setup_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def _parse_date(value: str) -> datetime.date:
    try:
        return datetime.date.fromisoformat(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid date {value!r}, expected YYYY-MM-DD")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="masjid-locator",
        description="Resolve a UK location slug and show its prayer times.",
    )
    parser.add_argument("slug", nargs="?", help="City, area or place slug, e.g. east-london")
    parser.add_argument("--date", type=_parse_date, help="Date as YYYY-MM-DD (default: today, UK time)")
    parser.add_argument("--week", action="store_true", help="Show 7 days starting at --date")
    parser.add_argument("--timeout", type=float, help="Geocoding request timeout in seconds")
    parser.add_argument("--list-slugs", action="store_true", help="Print every known city and area slug")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def describe_location(location) -> list:
    """Header lines for a resolved location."""
    if location.type == "city":
        lines = [f"📍 {location.name}, {location.country} — {location.total_masjids} masjids"]
        for area in location.areas:
            lines.append(f"   • {area.name} ({area.masjid_count})")
        return lines
    if location.type == "area":
        lines = [f"📍 {location.name}, {location.parent_city.name} — within {location.radius_km:g} km"]
        if location.description:
            lines.append(f"   {location.description}")
        return lines
    return [f"📍 {location.full_address}"]


def format_day(schedule) -> list:
    lines = [f"🕌 {schedule.date}"]
    for name in PRAYER_NAMES:
        lines.append(f"   {PRAYER_DISPLAY[name]:<8} {format_time_display(getattr(schedule, name))}")
    if not schedule.is_ordered:
        lines.append("   ⚠ times are out of order at this latitude; check with your local masjid")
    return lines


def format_week(schedules) -> list:
    header = "Date        " + "".join(f"{PRAYER_DISPLAY[n]:>10}" for n in PRAYER_NAMES)
    lines = [header]
    for s in schedules:
        row = f"{s.date}  " + "".join(f"{format_time_display(getattr(s, n)):>10}" for n in PRAYER_NAMES)
        lines.append(row + ("  ⚠" if not s.is_ordered else ""))
    return lines


def _directory_lines() -> list:
    return ["Browse known cities instead:"] + [
        f"   {city.id:<12} {city.name}" for city in CITIES
    ]


def main(argv=None) -> int:
    load_dotenv()
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    if args.list_slugs:
        for slug in get_all_static_location_slugs():
            print(slug)
        return EXIT_OK
    if not args.slug:
        parser.error("a slug is required unless --list-slugs is given")

    result = resolve_location_by_slug(args.slug, timeout=args.timeout)
    if not result.success:
        print(result.error)
        print("\n".join(_directory_lines()))
        return EXIT_NOT_FOUND

    location = result.location
    print("\n".join(describe_location(location)))
    print(f"   Times shown in {UK_TIMEZONE}")

    try:
        if args.week:
            schedules = calculate_weekly_prayer_times(location.latitude, location.longitude, args.date)
            print("\n".join(format_week(schedules)))
        else:
            on_date = args.date or datetime.datetime.now(datetime.timezone.utc)
            schedule = calculate_prayer_times(location.latitude, location.longitude, on_date)
            print("\n".join(format_day(schedule)))
    except DegenerateScheduleError as exc:
        logger.error("%s", exc)
        print(f"Prayer times unavailable: {exc}")
        return EXIT_DEGENERATE
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
