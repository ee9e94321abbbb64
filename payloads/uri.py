# =============================================================================
# 🔗 payloads/uri.py
# -----------------------------------------------------------------------------
# URI-Helfer: encodeURIComponent-Nachbau, Query-Parsing, URL-Prüfung
# =============================================================================

from __future__ import annotations

from typing import Dict
from urllib.parse import parse_qsl, quote, urlparse

# Zeichen, die encodeURIComponent unverändert lässt
_URI_COMPONENT_SAFE = "-_.!~*'()"


def encode_uri_component(value: str) -> str:
    """Prozent-Kodierung wie JavaScripts encodeURIComponent (UTF-8)."""
    return quote(value or "", safe=_URI_COMPONENT_SAFE)


def parse_query(query: str) -> Dict[str, str]:
    """Liest einen Query-String; bei doppelten Schlüsseln gewinnt der erste."""
    params: Dict[str, str] = {}
    for key, value in parse_qsl(query or "", keep_blank_values=True):
        params.setdefault(key, value)
    return params


def is_valid_url(value: str) -> bool:
    """Grobe Prüfung wie `new URL(value)`: Schema plus Rest."""
    parsed = urlparse((value or "").strip())
    return bool(parsed.scheme) and bool(parsed.netloc or parsed.path)


def is_http_url(value: str) -> bool:
    parsed = urlparse((value or "").strip())
    return parsed.scheme.lower() in ("http", "https") and bool(parsed.netloc)
