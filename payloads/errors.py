# =============================================================================
# ⚠️ payloads/errors.py
# -----------------------------------------------------------------------------
# Fehlertypen der Codec-Schicht. validate()/decode() liefern Failure-Objekte
# zurück, statt Exceptions nach außen zu werfen.
# =============================================================================

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class ErrorKind(str, Enum):
    MISSING_REQUIRED_FIELD = "MissingRequiredField"
    FORMAT_INVALID = "FormatInvalid"
    OUT_OF_RANGE = "OutOfRange"
    CHECKSUM_INVALID = "ChecksumInvalid"
    SHORT_URL_NOT_SUPPORTED = "ShortUrlNotSupported"
    UNPARSEABLE = "Unparseable"


@dataclass(frozen=True)
class Failure:
    """Benutzerlesbarer Fehler: grobe Kategorie + Meldung (+ optional Feld)."""

    kind: ErrorKind
    message: str
    field: Optional[str] = None
    reason: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind.value,
            "message": self.message,
            "field": self.field,
            "reason": self.reason,
        }


class PayloadError(ValueError):
    """Wird nur von encode() geworfen, wenn die Eingabe nicht kodierbar ist."""

    def __init__(self, failure: Failure):
        super().__init__(failure.message)
        self.failure = failure


def is_failure(value: object) -> bool:
    return isinstance(value, Failure)


def missing(field: str, message: str, reason: Optional[str] = None) -> Failure:
    return Failure(ErrorKind.MISSING_REQUIRED_FIELD, message, field=field, reason=reason)


def invalid(field: str, message: str, reason: Optional[str] = None) -> Failure:
    return Failure(ErrorKind.FORMAT_INVALID, message, field=field, reason=reason)


def out_of_range(field: str, message: str) -> Failure:
    return Failure(ErrorKind.OUT_OF_RANGE, message, field=field)
