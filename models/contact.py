# =============================================================================
# 👤 models/contact.py
# -----------------------------------------------------------------------------
# Eingabemodell für vCard-QR-Codes (vCard 3.0)
# =============================================================================

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class ContactCard:
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    org: Optional[str] = None
    title: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    url: Optional[str] = None

    # 🔹 Adressbestandteile (ADR)
    street: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip_code: Optional[str] = None
    country: Optional[str] = None

    @property
    def address_parts(self) -> Tuple[str, ...]:
        return tuple(
            part or ""
            for part in (self.street, self.city, self.state, self.zip_code, self.country)
        )
