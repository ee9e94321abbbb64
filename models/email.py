# =============================================================================
# 📧 models/email.py
# -----------------------------------------------------------------------------
# Eingabemodell für mailto:-QR-Codes (Empfänger, Betreff, Text)
# =============================================================================

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class EmailIntent:
    recipient: str
    subject: Optional[str] = None
    body: Optional[str] = None
