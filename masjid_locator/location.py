"""Resolve a URL slug to a location: gazetteer city, then area, then geocoding."""

import logging
from typing import Optional

import requests

from masjid_locator.gazetteer import CITIES, Area, City
from masjid_locator.geocoding import GeocodingError, search_locations
from masjid_locator.models import (
    AreaLocation,
    CityLocation,
    DynamicLocation,
    LocationResult,
    ParentCity,
)

logger = logging.getLogger(__name__)

# Compared verbatim against the geocoder's country field.
UK_COUNTRY_NAMES = ("United Kingdom", "UK")


def resolve_location_by_slug(slug: str, timeout: Optional[float] = None) -> LocationResult:
    """
    Resolve any location slug.

    Tries known cities, then known areas, then a single geocoding search.
    Never raises for a missing location; returns a failed LocationResult.
    timeout bounds the geocoding request only; there is none by default.
    """
    city = find_city_by_slug(slug)
    if city is not None:
        return LocationResult.found(city)

    area = find_area_by_slug(slug)
    if area is not None:
        return LocationResult.found(area)

    dynamic = geocode_location(slug, timeout=timeout)
    if dynamic is not None:
        return LocationResult.found(dynamic)

    return LocationResult.not_found(f"Location not found: {slug}")


def find_city_by_slug(slug: str) -> Optional[CityLocation]:
    for city in CITIES:
        if city.id == slug:
            return _city_to_location(city)
    return None


def find_area_by_slug(slug: str) -> Optional[AreaLocation]:
    for city in CITIES:
        for area in city.areas:
            if area.id == slug:
                return _area_to_location(area, city)
    return None


def geocode_location(slug: str, timeout: Optional[float] = None) -> Optional[DynamicLocation]:
    """
    Geocode an unknown slug and keep the first UK result.

    Returns None when nothing matches or the search fails; failures are
    logged, not raised.
    """
    try:
        candidates = search_locations(slug, timeout=timeout)
    except (GeocodingError, requests.RequestException, ValueError) as exc:
        logger.warning("Geocoding error for %r: %s", slug, exc)
        return None

    match = next((c for c in candidates if c.country in UK_COUNTRY_NAMES), None)
    if match is None:
        logger.debug("No UK geocoding result for %r among %d candidate(s)", slug, len(candidates))
        return None

    name = match.name or slug
    return DynamicLocation(
        slug=slug,
        name=name,
        latitude=match.latitude,
        longitude=match.longitude,
        country=match.country,
        region=match.region,
        full_address=match.full_address or name,
    )


def get_all_static_location_slugs() -> list:
    """Every city id followed by every area id, for pre-generating pages."""
    city_ids = [city.id for city in CITIES]
    area_ids = [area.id for city in CITIES for area in city.areas]
    return city_ids + area_ids


def _city_to_location(city: City) -> CityLocation:
    return CityLocation(
        slug=city.id,
        name=city.name,
        latitude=city.latitude,
        longitude=city.longitude,
        country=city.country,
        areas=city.areas,
        total_masjids=sum(area.masjid_count for area in city.areas),
    )


def _area_to_location(area: Area, city: City) -> AreaLocation:
    return AreaLocation(
        slug=area.id,
        name=area.name,
        latitude=area.latitude,
        longitude=area.longitude,
        country=city.country,
        parent_city=ParentCity(id=city.id, name=city.name),
        radius_km=area.radius_km,
        description=area.description,
    )
