# =============================================================================
# 📍 payloads/geo.py
# -----------------------------------------------------------------------------
# Geo-Payload (geo:<lat>,<lon>) + Koordinaten aus Google-Maps-Links lesen
# =============================================================================

from __future__ import annotations

import logging
import math
from typing import Optional, Union

from models.geo import GeoCoordinate
from payloads.errors import ErrorKind, Failure, invalid, missing, out_of_range
from payloads.patterns import (
    GEO_DECIMALS,
    LATITUDE_RANGE,
    LONGITUDE_RANGE,
    MAPS_COORDINATE_PATTERNS,
    MAPS_FALLBACK_PATTERN,
    MAPS_HOST_MARKERS,
    MAPS_LOCATION_INDICATORS,
    MAPS_SHORT_LINK_MARKERS,
)

logger = logging.getLogger(__name__)


def _in_range(lat: float, lon: float) -> bool:
    return (
        LATITUDE_RANGE[0] <= lat <= LATITUDE_RANGE[1]
        and LONGITUDE_RANGE[0] <= lon <= LONGITUDE_RANGE[1]
    )


def is_short_link(url: str) -> bool:
    return any(marker in url for marker in MAPS_SHORT_LINK_MARKERS)


def parse_maps_url(url: str) -> Union[GeoCoordinate, Failure]:
    """
    Liest Koordinaten aus einer eingefügten Karten-URL.

    Die Muster werden in fester Reihenfolge geprüft, der erste Treffer
    gewinnt: ?q=, @lat,lng,zoom, /lat,lng, ?ll=, ?center=. Kurzlinks
    werden abgelehnt (keine Netzwerkauflösung). Zuletzt greift ein
    generisches Muster für zwei Dezimalzahlen mit >= 4 Nachkommastellen;
    es kann theoretisch auch fremde Zahlen in der URL treffen.
    """
    clean_url = (url or "").strip()
    if not clean_url:
        return missing("url", "Please enter a Google Maps URL")

    for name, pattern in MAPS_COORDINATE_PATTERNS:
        match = pattern.search(clean_url)
        if match:
            logger.debug("Koordinaten über Muster '%s' gefunden", name)
            return GeoCoordinate(latitude=float(match.group(1)), longitude=float(match.group(2)))

    if is_short_link(clean_url):
        return Failure(
            ErrorKind.SHORT_URL_NOT_SUPPORTED,
            "Short URLs need to be expanded. Please visit the link and copy the full URL from your browser.",
            field="url",
        )

    match = MAPS_FALLBACK_PATTERN.search(clean_url)
    if match:
        lat, lon = float(match.group(1)), float(match.group(2))
        if _in_range(lat, lon):
            logger.debug("Koordinaten über Fallback-Muster gefunden")
            return GeoCoordinate(latitude=lat, longitude=lon)

    return Failure(
        ErrorKind.UNPARSEABLE,
        "Could not extract coordinates from this URL. "
        "Please ensure it's a valid Google Maps URL with location information.",
        field="url",
    )


def validate_maps_url(url: str) -> Optional[Failure]:
    """Formularprüfung: Google-Maps-Host und Standort-Information vorhanden."""
    clean_url = (url or "").strip()
    if not clean_url:
        return missing("url", "Please enter a Google Maps URL")

    lower_url = clean_url.lower()
    if not any(marker in lower_url for marker in MAPS_HOST_MARKERS):
        return invalid("url", "Please enter a Google Maps URL (maps.google.com or goo.gl/maps)")

    has_coordinates = any(p.search(clean_url) for _, p in MAPS_COORDINATE_PATTERNS) or bool(
        MAPS_FALLBACK_PATTERN.search(clean_url)
    )
    has_location = any(marker in clean_url for marker in MAPS_LOCATION_INDICATORS)
    if not has_coordinates and not has_location:
        return invalid("url", "URL should contain location information or coordinates")
    return None


def validate(coord: GeoCoordinate) -> Optional[Failure]:
    lat, lon = coord.latitude, coord.longitude
    if not isinstance(lat, (int, float)) or not isinstance(lon, (int, float)):
        return invalid("latitude", "Coordinates must be numbers")
    if math.isnan(lat) or math.isnan(lon) or math.isinf(lat) or math.isinf(lon):
        return invalid("latitude", "Invalid coordinate values")
    if not LATITUDE_RANGE[0] <= lat <= LATITUDE_RANGE[1]:
        return out_of_range("latitude", "Latitude must be between -90 and 90 degrees")
    if not LONGITUDE_RANGE[0] <= lon <= LONGITUDE_RANGE[1]:
        return out_of_range("longitude", "Longitude must be between -180 and 180 degrees")
    return None


def encode(coord: GeoCoordinate) -> str:
    # + 0.0 macht aus -0.0 eine 0.0
    lat = float(coord.latitude) + 0.0
    lon = float(coord.longitude) + 0.0
    return f"geo:{lat:.{GEO_DECIMALS}f},{lon:.{GEO_DECIMALS}f}"
