# =============================================================================
# 🧹 payloads/normalizers.py
# -----------------------------------------------------------------------------
# Text- und Telefonnummern-Normalisierung für alle QR-Typen
# =============================================================================

from __future__ import annotations

import re

from payloads.patterns import PHONE_STRIP_RE

_EXCESS_NEWLINES_RE = re.compile(r"\n{3,}")


def normalize_text(raw: str) -> str:
    """
    Bereitet Freitext für den QR-Code auf:
    trimmen, Zeilenenden vereinheitlichen, mehr als zwei
    Leerzeilen in Folge zusammenfassen, Leerzeichen am Zeilenende entfernen.
    """
    if not raw:
        return ""
    text = raw.strip()
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    text = _EXCESS_NEWLINES_RE.sub("\n\n", text)
    text = "\n".join(line.rstrip() for line in text.split("\n"))
    return text.strip("\n")


def strip_phone(raw: str) -> str:
    """Entfernt alles außer Ziffern und '+'."""
    return PHONE_STRIP_RE.sub("", raw or "")


def normalize_phone(raw: str) -> str:
    """
    Macht aus einer Eingabe eine international aussehende Nummer.
    Heuristik, keine echte E.164-Prüfung:
    - 10 Ziffern ohne '+' → US-Nummer, '+1' davor
    - 11 Ziffern mit führender '1' → '+' davor
    - sonst → '+' davor, falls noch nicht vorhanden
    """
    phone = strip_phone(raw)
    if not phone:
        return ""
    if phone.startswith("+"):
        return "+" + phone[1:].replace("+", "")

    phone = phone.replace("+", "")
    if len(phone) == 10:
        return "+1" + phone
    return "+" + phone


def phone_digits(raw: str) -> str:
    """Nur die Ziffern nach einem optionalen führenden '+'."""
    return strip_phone(raw).lstrip("+")


def format_phone_display(raw: str) -> str:
    """Lesbare Darstellung, z. B. '+1 (555) 123-4567'."""
    phone = normalize_phone(raw)
    if phone.startswith("+1") and len(phone) == 12:
        digits = phone[2:]
        return f"+1 ({digits[:3]}) {digits[3:6]}-{digits[6:]}"
    if len(phone) <= 8:
        return phone

    country_code = phone[: 3 if len(phone) >= 12 else 2]
    remaining = phone[len(country_code):]
    if len(remaining) <= 6:
        return f"{country_code} {remaining}"
    return f"{country_code} {remaining[:3]} {remaining[3:]}"
