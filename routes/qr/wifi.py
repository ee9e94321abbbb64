# routes/qr/wifi.py
# =============================================================================
# 🚀 WiFi QR-Code Routes
# =============================================================================

from __future__ import annotations
from typing import Optional

from fastapi import APIRouter, Depends, Form

from models.wifi import WiFiCredentials
from routes.qr.base import FAILURE_RESPONSES, RenderOptions, clean, payload_response, request_png

router = APIRouter(prefix="/qr/wifi", tags=["WiFi QR"], responses=FAILURE_RESPONSES)


def wifi_form(
    ssid: str = Form(""),
    password: Optional[str] = Form(None),
    encryption: str = Form("WPA"),
    hidden: bool = Form(False),
) -> WiFiCredentials:
    # SSID bleibt ungetrimmt: Leerzeichen können Teil des Netzwerknamens sein
    return WiFiCredentials(ssid=ssid, password=password or None, security=clean(encryption) or "WPA", hidden=hidden)


@router.post("/payload")
def wifi_payload(creds: WiFiCredentials = Depends(wifi_form)) -> dict:
    """Gibt den WIFI:-String zurück (ohne Bild)."""
    return payload_response(creds)


@router.post("/png")
def wifi_png(creds: WiFiCredentials = Depends(wifi_form), options: RenderOptions = Depends()):
    return request_png(creds, options)
