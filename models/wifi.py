# =============================================================================
# 📶 models/wifi.py
# -----------------------------------------------------------------------------
# Eingabemodell für WLAN-QR-Codes (WIFI:T:...;S:...;P:...;H:...;;)
# =============================================================================

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class WiFiCredentials:
    ssid: str
    password: Optional[str] = None
    security: str = "WPA"  # WPA / WPA3 / WEP / nopass
    hidden: bool = False
