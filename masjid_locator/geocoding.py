"""Free-text place search against the Mapbox geocoding API."""

import logging
import os
from dataclasses import dataclass
from typing import Optional
from urllib.parse import quote

import requests

logger = logging.getLogger(__name__)

MAPBOX_GEOCODING_URL = "https://api.mapbox.com/geocoding/v5/mapbox.places/{query}.json"
MAPBOX_TOKEN_ENV = "MAPBOX_ACCESS_TOKEN"

SEARCH_COUNTRY = "gb"
SEARCH_TYPES = "place,locality,neighborhood,address"
DEFAULT_SEARCH_LIMIT = 8
MIN_QUERY_LENGTH = 2


class GeocodingError(Exception):
    """The geocoding service could not be queried."""


@dataclass(frozen=True)
class GeocodeCandidate:
    id: str
    name: str
    full_address: str
    latitude: float
    longitude: float
    place_type: str
    country: Optional[str] = None
    region: Optional[str] = None


def _context_text(feature: dict, prefix: str) -> Optional[str]:
    context = feature.get("context")
    if not isinstance(context, list):
        return None
    for ctx in context:
        if isinstance(ctx, dict) and str(ctx.get("id", "")).startswith(prefix):
            return ctx.get("text")
    return None


def _valid_coordinates(lat, lon) -> bool:
    try:
        lat, lon = float(lat), float(lon)
    except (TypeError, ValueError):
        return False
    return -90.0 <= lat <= 90.0 and -180.0 <= lon <= 180.0


def _to_candidate(feature: dict) -> Optional[GeocodeCandidate]:
    """Convert one Mapbox feature, or None if its coordinates are unusable."""
    center = feature.get("center") or []
    if (
        not isinstance(center, (list, tuple))
        or len(center) != 2
        or not _valid_coordinates(center[1], center[0])
    ):
        logger.debug("Dropping feature %s with bad coordinates %r", feature.get("id"), center)
        return None
    place_types = feature.get("place_type") or []
    if not isinstance(place_types, list):
        place_types = []
    return GeocodeCandidate(
        id=feature.get("id", ""),
        name=feature.get("text", ""),
        full_address=feature.get("place_name", ""),
        latitude=float(center[1]),
        longitude=float(center[0]),
        place_type=place_types[0] if place_types else "place",
        country=_context_text(feature, "country."),
        region=_context_text(feature, "region."),
    )


def search_locations(
    query: str,
    limit: int = DEFAULT_SEARCH_LIMIT,
    timeout: Optional[float] = None,
) -> list:
    """
    Search UK places matching free text.

    Returns a list of GeocodeCandidate in the service's relevance order.
    Raises GeocodingError if the query is too short, no access token is
    configured or the response body is not a feature collection, and requests.RequestException on transport/HTTP failures.
    No timeout is applied unless the caller passes one.
    """
    if not query or len(query.strip()) < MIN_QUERY_LENGTH:
        raise GeocodingError(f"Query must be at least {MIN_QUERY_LENGTH} characters long")

    token = os.environ.get(MAPBOX_TOKEN_ENV)
    if not token:
        raise GeocodingError("Geocoding service is not configured")

    url = MAPBOX_GEOCODING_URL.format(query=quote(query, safe=""))
    params = {
        "access_token": token,
        "autocomplete": "true",
        "limit": limit,
        "country": SEARCH_COUNTRY,
        "types": SEARCH_TYPES,
        "language": "en",
    }
    logger.debug("Mapbox search request: query=%r limit=%d", query, limit)
    resp = requests.get(url, params=params, timeout=timeout)
    resp.raise_for_status()
    data = resp.json()
    if not isinstance(data, dict):
        raise GeocodingError(f"Unexpected geocoding response: {type(data).__name__}")
    features = data.get("features") or []
    if not isinstance(features, list):
        raise GeocodingError("Unexpected geocoding response: features is not a list")

    results = []
    for feature in features:
        if not isinstance(feature, dict):
            logger.debug("Dropping non-object feature %r", feature)
            continue
        candidate = _to_candidate(feature)
        if candidate is not None:
            results.append(candidate)
    logger.debug("Mapbox search for %r returned %d result(s)", query, len(results))
    return results
