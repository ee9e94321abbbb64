# =============================================================================
# 📶 payloads/wifi.py
# -----------------------------------------------------------------------------
# WLAN-Payload: WIFI:T:<sec>;S:<ssid>;P:<pw>;H:<true|false>;;
# =============================================================================

from __future__ import annotations

import logging
from typing import Dict, Optional

from models.wifi import WiFiCredentials
from payloads.errors import Failure, PayloadError, invalid, missing
from payloads.patterns import (
    HEX_RE,
    SSID_MAX_LENGTH,
    WEP_ASCII_LENGTHS,
    WEP_HEX_LENGTHS,
    WIFI_SECURITY_TYPES,
    WPA_PASSWORD_LENGTH,
)

logger = logging.getLogger(__name__)

# WPA3 wird im QR-Format als WPA geführt (Scanner unterscheiden nicht)
SECURITY_MAP: Dict[str, str] = {
    "WPA": "WPA",
    "WPA3": "WPA",
    "WEP": "WEP",
    "nopass": "nopass",
}


def escape_wifi(value: str) -> str:
    """Backslash zuerst, sonst würden die eigenen Escapes doppelt maskiert."""
    if not value:
        return ""
    return (
        value.replace("\\", "\\\\")
        .replace(";", "\\;")
        .replace(",", "\\,")
        .replace('"', '\\"')
    )


def _validate_ssid(ssid: str) -> Optional[Failure]:
    if not ssid or not ssid.strip():
        return missing("ssid", "Network name (SSID) is required", reason="invalid_ssid")
    if len(ssid) > SSID_MAX_LENGTH:
        return invalid("ssid", f"Network name cannot exceed {SSID_MAX_LENGTH} characters", reason="invalid_ssid")
    if "\n" in ssid or "\r" in ssid:
        return invalid("ssid", "Network name cannot contain line breaks", reason="invalid_ssid")
    return None


def _is_valid_wep(password: str) -> bool:
    # 5/13 Zeichen: ASCII-Passphrase. 10/26 Zeichen: Hex-Schlüssel
    if len(password) in WEP_ASCII_LENGTHS:
        return password.isascii()
    return len(password) in WEP_HEX_LENGTHS and bool(HEX_RE.match(password))


def validate(creds: WiFiCredentials) -> Optional[Failure]:
    failure = _validate_ssid(creds.ssid)
    if failure:
        return failure

    if creds.security not in WIFI_SECURITY_TYPES:
        return invalid("security", "Invalid security type")
    if creds.security == "nopass":
        return None

    password = creds.password or ""
    if not password:
        return missing("password", "Password is required for secured networks", reason="password_required")

    if creds.security in ("WPA", "WPA3"):
        low, high = WPA_PASSWORD_LENGTH
        if not low <= len(password) <= high:
            return invalid("password", f"WPA password must be {low}-{high} characters long", reason="password_format")
    elif creds.security == "WEP" and not _is_valid_wep(password):
        return invalid(
            "password",
            "WEP password must be 5 or 13 characters, or 10/26 hex digits",
            reason="password_format",
        )
    return None


def encode(creds: WiFiCredentials) -> str:
    security = SECURITY_MAP.get(creds.security)
    if security is None:
        raise PayloadError(invalid("security", "Invalid security type"))

    hidden = "true" if creds.hidden else "false"
    payload = f"WIFI:T:{security};S:{escape_wifi(creds.ssid)};"
    if security != "nopass" and creds.password:
        payload += f"P:{escape_wifi(creds.password)};"
    payload += f"H:{hidden};;"

    # Passwort nie loggen
    logger.debug("WiFi payload erstellt (security=%s, hidden=%s)", security, hidden)
    return payload
