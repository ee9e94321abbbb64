# =============================================================================
# 💬 models/messaging.py
# -----------------------------------------------------------------------------
# Eingabemodell für SMS-, WhatsApp- und Telefon-QR-Codes
# =============================================================================

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class MessagingIntent:
    platform: str  # sms / whatsapp / phone
    phone: str
    message: Optional[str] = None  # nur sms/whatsapp
