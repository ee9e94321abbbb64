# =============================================================================
# 📍 models/geo.py
# -----------------------------------------------------------------------------
# Eingabemodell für Geo-QR-Codes (Breiten- und Längengrad)
# =============================================================================

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GeoCoordinate:
    latitude: float
    longitude: float
