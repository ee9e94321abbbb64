"""
payloads/patterns.py
────────────────────────────────────────────
Zentrale Regel-Tabelle für alle QR-Payload-Validatoren.

Jeder Codec (und jeder Decoder) liest Regex und Grenzwerte
ausschließlich von hier, damit Formular- und Codec-Prüfung
nie auseinanderlaufen.
────────────────────────────────────────────
"""

from __future__ import annotations

import re
from decimal import Decimal
from typing import Dict, Pattern, Tuple

# ─────────────────────────────────────────────
# 📶 WLAN
# ─────────────────────────────────────────────
SSID_MAX_LENGTH = 32
WPA_PASSWORD_LENGTH: Tuple[int, int] = (8, 63)
WEP_ASCII_LENGTHS = (5, 13)
WEP_HEX_LENGTHS = (10, 26)
HEX_RE: Pattern[str] = re.compile(r"^[0-9A-Fa-f]+$")
WIFI_SECURITY_TYPES = ("WPA", "WPA3", "WEP", "nopass")

# ─────────────────────────────────────────────
# 📧 E-Mail (SMTP-Längengrenzen)
# ─────────────────────────────────────────────
EMAIL_RE: Pattern[str] = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
EMAIL_MAX_LENGTH = 254
EMAIL_LOCAL_MAX_LENGTH = 64
EMAIL_DOMAIN_MAX_LENGTH = 253
EMAIL_SUBJECT_MAX_LENGTH = 100
EMAIL_BODY_MAX_LENGTH = 500

# ─────────────────────────────────────────────
# 📞 Telefon / Nachrichten
# ─────────────────────────────────────────────
PHONE_INPUT_RE: Pattern[str] = re.compile(r"^[\+]?[\d\s\-\(\)\.]{7,}$")
PHONE_STRIP_RE: Pattern[str] = re.compile(r"[^\d+]")
PHONE_DIGITS_RANGE: Tuple[int, int] = (7, 15)
MESSAGE_MAX_LENGTH = 160
MESSAGE_MAX_LINES = 5
MESSAGING_PLATFORMS = ("sms", "whatsapp", "phone")

# ─────────────────────────────────────────────
# 📝 Text
# ─────────────────────────────────────────────
TEXT_MAX_LENGTH = 2000
TEXT_WARNING_THRESHOLD = 300
TEXT_SPECIAL_CHAR_RE: Pattern[str] = re.compile(r"[^\w\s.,!?;:()\-]", re.ASCII)
TEXT_NON_ASCII_RE: Pattern[str] = re.compile(r"[^\x00-\x7F]")

# ─────────────────────────────────────────────
# 🔗 URL
# ─────────────────────────────────────────────
URL_SCHEME_RE: Pattern[str] = re.compile(r"^https?://", re.IGNORECASE)
URL_MAX_LENGTH = 2048
SUSPICIOUS_URL_PATTERNS: Tuple[Pattern[str], ...] = tuple(
    re.compile(p, re.IGNORECASE)
    for p in (
        r"javascript:",
        r"data:",
        r"vbscript:",
        r"<script",
        r"onclick",
        r"onerror",
        r"onload",
    )
)

# ─────────────────────────────────────────────
# 💳 Zahlungen
# ─────────────────────────────────────────────
PAYPAL_USERNAME_RE: Pattern[str] = re.compile(r"^[a-zA-Z0-9._-]+$")
PAYPAL_USERNAME_LENGTH: Tuple[int, int] = (3, 50)
BITCOIN_ADDRESS_RE: Pattern[str] = re.compile(r"^[13][a-km-zA-HJ-NP-Z1-9]{25,34}$")
ETHEREUM_ADDRESS_RE: Pattern[str] = re.compile(r"^0x[a-fA-F0-9]{40}$")
UPI_ID_RE: Pattern[str] = re.compile(r"^[a-zA-Z0-9._-]+@[a-zA-Z0-9._-]+$")
PAYEE_NAME_RE: Pattern[str] = re.compile(r"^[a-zA-Z\s.'-]+$")
PAYEE_NAME_LENGTH: Tuple[int, int] = (2, 100)
IBAN_RE: Pattern[str] = re.compile(r"^[A-Z]{2}[0-9]{2}[A-Z0-9]{4}[0-9]{7}([A-Z0-9]?){0,16}$")

# Obergrenzen je Zahlungsart (Plausibilitätsgrenzen, keine Protokollregeln)
PAYMENT_AMOUNT_CAPS: Dict[str, Decimal] = {
    "paypal": Decimal("10000"),
    "bitcoin": Decimal("21"),
    "ethereum": Decimal("1000"),
    "upi": Decimal("100000"),
    "iban": Decimal("999999"),
}

# Decoder-Varianten (nicht verankert, Query-Teil optional)
PAYPAL_URI_RE: Pattern[str] = re.compile(r"^https://paypal\.me/([a-zA-Z0-9._-]+)(?:/([^/?#]+))?/?$")
BITCOIN_URI_RE: Pattern[str] = re.compile(r"^bitcoin:([13][a-km-zA-HJ-NP-Z1-9]{25,34})(?:\?(.*))?$")
ETHEREUM_URI_RE: Pattern[str] = re.compile(r"^ethereum:(0x[a-fA-F0-9]{40})(?:\?(.*))?$")
UPI_URI_RE: Pattern[str] = re.compile(r"^upi://pay\?(.*)$")
IBAN_URI_RE: Pattern[str] = re.compile(
    r"^iban:([A-Z]{2}[0-9]{2}[A-Z0-9]{4}[0-9]{7}(?:[A-Z0-9]?){0,16})(?:\?(.*))?$"
)

# ─────────────────────────────────────────────
# 📍 Karten-URLs
# ─────────────────────────────────────────────
_COORD = r"(-?\d+\.?\d*)"

# Reihenfolge ist verbindlich: der erste Treffer gewinnt.
MAPS_COORDINATE_PATTERNS: Tuple[Tuple[str, Pattern[str]], ...] = (
    ("query", re.compile(rf"[?&]q={_COORD},{_COORD}")),
    ("at", re.compile(rf"@{_COORD},{_COORD},")),
    ("path", re.compile(rf"/{_COORD},{_COORD}")),
    ("ll", re.compile(rf"[?&]ll={_COORD},{_COORD}")),
    ("center", re.compile(rf"[?&]center={_COORD},{_COORD}")),
)
# Fallback: zwei Dezimalzahlen mit mindestens 4 Nachkommastellen
MAPS_FALLBACK_PATTERN: Pattern[str] = re.compile(r"(-?\d{1,3}\.\d{4,}),\s*(-?\d{1,3}\.\d{4,})")
MAPS_SHORT_LINK_MARKERS = ("goo.gl/maps", "maps.app.goo.gl")
MAPS_HOST_MARKERS = (
    "maps.google.com",
    "www.google.com/maps",
    "google.com/maps",
    "maps.app.goo.gl",
    "goo.gl/maps",
)
MAPS_LOCATION_INDICATORS = ("q=", "place/", "data=", "/maps/@", "goo.gl/maps", "maps.app.goo.gl")
LATITUDE_RANGE: Tuple[float, float] = (-90.0, 90.0)
LONGITUDE_RANGE: Tuple[float, float] = (-180.0, 180.0)
GEO_DECIMALS = 6
