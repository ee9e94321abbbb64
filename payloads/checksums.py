"""
IBAN-Prüfsumme (ISO 13616, mod 97).

1) Leerzeichen entfernen, Großbuchstaben erzwingen
2) Die ersten 4 Zeichen ans Ende verschieben
3) Jeden Buchstaben durch seinen Wert ersetzen (A=10 … Z=35)
4) Die Ziffernfolge als große Zahl lesen; gültig, wenn Rest mod 97 == 1
"""

from __future__ import annotations

import re

_WHITESPACE_RE = re.compile(r"\s+")


def clean_iban(raw: str) -> str:
    return _WHITESPACE_RE.sub("", raw or "").upper()


def iban_to_digits(iban: str) -> str:
    rearranged = iban[4:] + iban[:4]
    return "".join(str(ord(ch) - 55) if ch.isalpha() else ch for ch in rearranged)


def iban_checksum_ok(code: str) -> bool:
    iban = clean_iban(code)
    if len(iban) < 5 or not iban.isalnum() or not iban.isascii():
        return False

    # Ziffernweise Restbildung, damit keine riesige Zahl entsteht
    remainder = 0
    for digit in iban_to_digits(iban):
        remainder = (remainder * 10 + int(digit)) % 97
    return remainder == 1
