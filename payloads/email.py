# =============================================================================
# 📧 payloads/email.py
# -----------------------------------------------------------------------------
# mailto:-Payload inkl. Rückweg (mailto-URL → EmailIntent)
# =============================================================================

from __future__ import annotations

import logging
from typing import List, Optional, Union
from urllib.parse import unquote

from models.email import EmailIntent
from payloads.errors import ErrorKind, Failure, invalid, missing
from payloads.patterns import (
    EMAIL_BODY_MAX_LENGTH,
    EMAIL_DOMAIN_MAX_LENGTH,
    EMAIL_LOCAL_MAX_LENGTH,
    EMAIL_MAX_LENGTH,
    EMAIL_RE,
    EMAIL_SUBJECT_MAX_LENGTH,
)
from payloads.uri import encode_uri_component, parse_query

logger = logging.getLogger(__name__)


def validate_recipient(recipient: str) -> Optional[Failure]:
    recipient = (recipient or "").strip()
    if not recipient:
        return missing("recipient", "Email address is required")
    if len(recipient) > EMAIL_MAX_LENGTH:
        return invalid("recipient", f"Email address is too long (maximum {EMAIL_MAX_LENGTH} characters)")
    if not EMAIL_RE.match(recipient):
        return invalid("recipient", "Please enter a valid email address")

    local_part, domain = recipient.rsplit("@", 1)
    if len(local_part) > EMAIL_LOCAL_MAX_LENGTH:
        return invalid("recipient", f"Email local part is too long (maximum {EMAIL_LOCAL_MAX_LENGTH} characters)")
    if len(domain) > EMAIL_DOMAIN_MAX_LENGTH:
        return invalid("recipient", f"Email domain is too long (maximum {EMAIL_DOMAIN_MAX_LENGTH} characters)")
    return None


def validate(intent: EmailIntent) -> Optional[Failure]:
    failure = validate_recipient(intent.recipient)
    if failure:
        return failure
    if intent.subject and len(intent.subject) > EMAIL_SUBJECT_MAX_LENGTH:
        return invalid("subject", f"Subject is too long (maximum {EMAIL_SUBJECT_MAX_LENGTH} characters)")
    if intent.body and len(intent.body) > EMAIL_BODY_MAX_LENGTH:
        return invalid("body", f"Email body is too long (maximum {EMAIL_BODY_MAX_LENGTH} characters)")
    return None


def encode(intent: EmailIntent) -> str:
    mailto = f"mailto:{encode_uri_component(intent.recipient.strip())}"

    params: List[str] = []
    subject = (intent.subject or "").strip()
    body = (intent.body or "").strip()
    if subject:
        params.append(f"subject={encode_uri_component(subject)}")
    if body:
        params.append(f"body={encode_uri_component(body)}")
    if params:
        mailto += "?" + "&".join(params)

    logger.debug("mailto payload erstellt (%d Zeichen)", len(mailto))
    return mailto


def decode(mailto: str) -> Union[EmailIntent, Failure]:
    """Liest Empfänger, Betreff und Text aus einer mailto-URL."""
    text = (mailto or "").strip()
    if not text.lower().startswith("mailto:"):
        return Failure(ErrorKind.UNPARSEABLE, "Invalid mailto URL", field="payload")

    address, _, query = text[len("mailto:"):].partition("?")
    recipient = unquote(address)
    if not recipient:
        return Failure(ErrorKind.UNPARSEABLE, "Failed to parse mailto URL", field="payload")

    params = parse_query(query)
    return EmailIntent(
        recipient=recipient,
        subject=params.get("subject") or None,
        body=params.get("body") or None,
    )
