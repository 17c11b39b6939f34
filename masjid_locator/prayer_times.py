"""Calculate daily and weekly prayer times for UK locations."""

import datetime
import logging
from typing import Optional

import pytz
from adhanpy.PrayerTimes import PrayerTimes
from adhanpy.calculation import CalculationMethod
from adhanpy.calculation.CalculationParameters import CalculationParameters
from adhanpy.calculation.Madhab import Madhab

from masjid_locator.gazetteer import get_city_by_id
from masjid_locator.models import PrayerSchedule

logger = logging.getLogger(__name__)

UK_TIMEZONE = "Europe/London"
UK_TZ = pytz.timezone(UK_TIMEZONE)

# Moonsighting Committee is tuned for high latitudes and uses the Shafi
# (one shadow length) Asr. Neither is user-configurable.
CALCULATION_METHOD = CalculationMethod.MOON_SIGHTING_COMMITTEE
ASR_MADHAB = Madhab.SHAFI

PRAYER_NAMES = ["fajr", "sunrise", "dhuhr", "asr", "maghrib", "isha"]
PRAYER_DISPLAY = {
    "fajr": "Fajr",
    "sunrise": "Sunrise",
    "dhuhr": "Dhuhr",
    "asr": "Asr",
    "maghrib": "Maghrib",
    "isha": "Isha",
}

# Cities whose pages are generated at build time.
TOP_UK_CITIES = (
    "london",
    "birmingham",
    "manchester",
    "bradford",
    "leicester",
    "glasgow",
    "edinburgh",
    "cardiff",
    "dundee",
    "swansea",
)

# Schedules change daily; cached pages should be rebuilt this often.
REVALIDATE_SECONDS = 24 * 60 * 60

DAYS_IN_WEEK = 7


class DegenerateScheduleError(ValueError):
    """No prayer schedule exists for these coordinates on this date."""


def _calculation_parameters() -> CalculationParameters:
    params = CalculationParameters(method=CALCULATION_METHOD)
    params.madhab = ASR_MADHAB
    return params


def _today() -> datetime.date:
    return datetime.datetime.now(UK_TZ).date()


def _as_uk_date(value) -> datetime.date:
    if isinstance(value, datetime.datetime):
        if value.tzinfo is not None:
            return value.astimezone(UK_TZ).date()
        return value.date()
    return value


def calculate_prayer_times(latitude: float, longitude: float, on_date) -> PrayerSchedule:
    """
    Calculate the six prayer boundaries for one civil date.

    on_date is a date, or a datetime whose UK civil date is used. Times are
    'HH:MM' in Europe/London whatever the coordinates.
    Raises DegenerateScheduleError if a boundary cannot be computed, which
    happens near the poles.
    """
    day = _as_uk_date(on_date)
    try:
        times = PrayerTimes(
            (latitude, longitude),
            datetime.datetime(day.year, day.month, day.day),
            calculation_parameters=_calculation_parameters(),
            time_zone=UK_TZ,
        )
    except (RuntimeError, ValueError, ArithmeticError) as exc:
        raise DegenerateScheduleError(
            f"No prayer times for ({latitude}, {longitude}) on {day.isoformat()}: {exc!r}"
        ) from exc

    formatted = {}
    for name in PRAYER_NAMES:
        value = getattr(times, name, None)
        if value is None:
            raise DegenerateScheduleError(
                f"No {name} time for ({latitude}, {longitude}) on {day.isoformat()}"
            )
        formatted[name] = value.astimezone(UK_TZ).strftime("%H:%M")

    schedule = PrayerSchedule(date=day.isoformat(), **formatted)
    if not schedule.is_ordered:
        logger.warning(
            "Prayer times out of order for (%s, %s) on %s: %s",
            latitude, longitude, schedule.date, schedule.times(),
        )
    return schedule


def calculate_weekly_prayer_times(
    latitude: float, longitude: float, start_date=None
) -> list:
    """Seven consecutive daily schedules starting at start_date (default: today)."""
    start = _as_uk_date(start_date) if start_date is not None else _today()
    return [
        calculate_prayer_times(latitude, longitude, start + datetime.timedelta(days=offset))
        for offset in range(DAYS_IN_WEEK)
    ]


def get_prayer_times_for_city(city_id: str, on_date=None) -> Optional[PrayerSchedule]:
    """Today's (or on_date's) schedule for a gazetteer city; None for unknown ids."""
    city = get_city_by_id(city_id)
    if city is None:
        return None
    return calculate_prayer_times(
        city.latitude, city.longitude, on_date if on_date is not None else _today()
    )


def get_weekly_prayer_times_for_city(city_id: str, start_date=None) -> Optional[list]:
    city = get_city_by_id(city_id)
    if city is None:
        return None
    return calculate_weekly_prayer_times(city.latitude, city.longitude, start_date)


def format_time_display(time_str: str) -> str:
    """Convert 'HH:MM' to 12-hour display, e.g. '13:05' -> '1:05 pm'."""
    hours, minutes = map(int, time_str.split(":"))
    period = "pm" if hours >= 12 else "am"
    display_hours = hours % 12 or 12
    return f"{display_hours}:{minutes:02d} {period}"


def time_str_to_dt(time_str: str, on_date: datetime.date, tz=UK_TZ) -> datetime.datetime:
    """Combine an 'HH:MM' string with a date into an aware datetime in tz."""
    hour, minute = map(int, time_str.split(":"))
    naive = datetime.datetime.combine(on_date, datetime.time(hour, minute))
    return tz.localize(naive)


def get_next_prayer(schedule: PrayerSchedule, now: datetime.datetime, tz=UK_TZ) -> tuple:
    """
    Given a schedule and an aware current datetime, return (prayer_name, prayer_datetime)
    of the next upcoming prayer. Returns (None, None) if all prayers passed.
    """
    on_date = datetime.date.fromisoformat(schedule.date)
    for name, value in schedule.times():
        if name == "sunrise":
            continue  # end of the Fajr window, not a prayer
        prayer_dt = time_str_to_dt(value, on_date, tz)
        if prayer_dt > now:
            return name, prayer_dt
    return None, None


def seconds_until(target_dt: datetime.datetime, now: datetime.datetime = None) -> int:
    """Return seconds from now until target_dt (can be negative if past)."""
    if now is None:
        now = datetime.datetime.now(target_dt.tzinfo)
    delta = target_dt - now
    return int(delta.total_seconds())
