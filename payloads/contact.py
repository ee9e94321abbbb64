# =============================================================================
# 👤 payloads/contact.py
# -----------------------------------------------------------------------------
# vCard 3.0 Payload (BEGIN:VCARD … END:VCARD)
# Hinweis: Inhalte von ORG/TITLE/ADR werden nicht maskiert (wie bisher).
# =============================================================================

from __future__ import annotations

import logging
from typing import List, Optional

from models.contact import ContactCard
from payloads.errors import Failure, invalid, missing
from payloads.patterns import EMAIL_RE, PHONE_INPUT_RE
from payloads.uri import is_valid_url

logger = logging.getLogger(__name__)


def _clean(value: Optional[str]) -> str:
    return (value or "").strip()


def validate(card: ContactCard) -> Optional[Failure]:
    if not _clean(card.first_name) and not _clean(card.last_name):
        return missing("first_name", "At least first name or last name is required")

    email = _clean(card.email)
    if email and not EMAIL_RE.match(email):
        return invalid("email", "Please enter a valid email address")

    url = _clean(card.url)
    if url and not is_valid_url(url):
        return invalid("url", "Please enter a valid website URL")

    phone = _clean(card.phone)
    if phone and not PHONE_INPUT_RE.match(phone):
        return invalid("phone", "Please enter a valid phone number")
    return None


def encode(card: ContactCard) -> str:
    first_name = card.first_name or ""
    last_name = card.last_name or ""

    lines: List[str] = ["BEGIN:VCARD", "VERSION:3.0"]
    if first_name or last_name:
        lines.append(f"N:{last_name};{first_name};;;")
        lines.append(f"FN:{first_name} {last_name}".strip())

    # 🔹 Optionale Felder nur, wenn befüllt
    for prefix, value in (
        ("ORG", card.org),
        ("TITLE", card.title),
        ("TEL", card.phone),
        ("EMAIL", card.email),
        ("URL", card.url),
    ):
        if value:
            lines.append(f"{prefix}:{value}")

    # 🔹 ADR: Postfach;Zusatz;Straße;Ort;Region;PLZ;Land
    address = ("", "") + card.address_parts
    if any(part.strip() for part in address):
        lines.append("ADR:" + ";".join(address))

    lines.append("END:VCARD")
    logger.debug("vCard payload erstellt (%d Zeilen)", len(lines))
    return "\n".join(lines)
