"""Resolved location and prayer schedule types shared by resolver, calculator and callers.

A resolved location is one of three frozen records told apart by their
``type`` field: "city", "area" or "dynamic". Branch on ``location.type``.
"""

from dataclasses import asdict, dataclass, field
from typing import Literal, Optional, Union


@dataclass(frozen=True)
class ParentCity:
    """Copy of the owning city's id and name, not a live reference."""

    id: str
    name: str


@dataclass(frozen=True)
class CityLocation:
    slug: str
    name: str
    latitude: float
    longitude: float
    country: str
    areas: tuple  # gazetteer Area records, in gazetteer order
    total_masjids: int
    type: Literal["city"] = field(default="city", init=False)


@dataclass(frozen=True)
class AreaLocation:
    slug: str
    name: str
    latitude: float
    longitude: float
    country: str
    parent_city: ParentCity
    radius_km: float
    description: Optional[str] = None
    type: Literal["area"] = field(default="area", init=False)


@dataclass(frozen=True)
class DynamicLocation:
    """A geocoded place outside the gazetteer. Rebuilt on every resolution."""

    slug: str
    name: str
    latitude: float
    longitude: float
    country: str
    full_address: str
    region: Optional[str] = None
    type: Literal["dynamic"] = field(default="dynamic", init=False)


Location = Union[CityLocation, AreaLocation, DynamicLocation]


@dataclass(frozen=True)
class LocationResult:
    """Outcome of resolving a slug: a location on success, an error message otherwise."""

    success: bool
    location: Optional[Location] = None
    error: Optional[str] = None

    @classmethod
    def found(cls, location: Location) -> "LocationResult":
        return cls(success=True, location=location)

    @classmethod
    def not_found(cls, error: str) -> "LocationResult":
        return cls(success=False, error=error)


@dataclass(frozen=True)
class PrayerSchedule:
    """One day's prayer boundaries as 'HH:MM' strings in UK civil time."""

    date: str  # YYYY-MM-DD
    fajr: str
    sunrise: str
    dhuhr: str
    asr: str
    maghrib: str
    isha: str

    def times(self) -> list:
        """(name, 'HH:MM') pairs in prayer order."""
        return [
            ("fajr", self.fajr),
            ("sunrise", self.sunrise),
            ("dhuhr", self.dhuhr),
            ("asr", self.asr),
            ("maghrib", self.maghrib),
            ("isha", self.isha),
        ]

    @property
    def is_ordered(self) -> bool:
        # Zero-padded HH:MM strings sort chronologically.
        values = [t for _, t in self.times()]
        return all(a <= b for a, b in zip(values, values[1:]))

    def as_dict(self) -> dict:
        return asdict(self)
