# routes/qr/geo.py
# =============================================================================
# 🚀 Geo/Location QR-Code Routes
# =============================================================================

from __future__ import annotations
from typing import Optional

from fastapi import APIRouter, Depends, Form

from models.geo import GeoCoordinate
from payloads import geo
from payloads.errors import Failure, invalid, missing
from routes.qr.base import FAILURE_RESPONSES, RenderOptions, fail, payload_response, request_png

router = APIRouter(prefix="/qr/geo", tags=["Geo QR"], responses=FAILURE_RESPONSES)


def _coordinate(field: str, raw: Optional[str]) -> float:
    if raw is None or not raw.strip():
        raise fail(missing(field, f"{field.capitalize()} is required"))
    try:
        return float(raw.strip())
    except ValueError:
        raise fail(invalid(field, "Coordinates must be numbers")) from None


def geo_form(latitude: Optional[str] = Form(None), longitude: Optional[str] = Form(None)) -> GeoCoordinate:
    return GeoCoordinate(latitude=_coordinate("latitude", latitude), longitude=_coordinate("longitude", longitude))


@router.post("/payload")
def geo_payload(coord: GeoCoordinate = Depends(geo_form)) -> dict:
    return payload_response(coord)


@router.post("/png")
def geo_png(coord: GeoCoordinate = Depends(geo_form), options: RenderOptions = Depends()):
    return request_png(coord, options)


@router.post("/parse")
def geo_parse(url: str = Form("")) -> dict:
    """Google-Maps-Link → Koordinaten + geo:-URI."""
    result = geo.parse_maps_url(url)
    if isinstance(result, Failure):
        raise fail(result)
    return {
        "latitude": result.latitude,
        "longitude": result.longitude,
        **payload_response(result),
    }
