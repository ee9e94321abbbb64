# =============================================================================
# 💬 payloads/messaging.py
# -----------------------------------------------------------------------------
# SMS (SMSTO:), WhatsApp (wa.me) und Telefon (tel:) Payloads
# =============================================================================

from __future__ import annotations

import logging
from typing import Optional

from models.messaging import MessagingIntent
from payloads.errors import Failure, PayloadError, invalid, missing
from payloads.normalizers import normalize_phone, strip_phone
from payloads.patterns import (
    MESSAGE_MAX_LENGTH,
    MESSAGE_MAX_LINES,
    MESSAGING_PLATFORMS,
    PHONE_DIGITS_RANGE,
)
from payloads.uri import encode_uri_component

logger = logging.getLogger(__name__)


def validate_phone(raw: str) -> Optional[Failure]:
    if not raw or not raw.strip():
        return missing("phone", "Phone number is required")

    clean = strip_phone(raw.strip())
    if not clean:
        return invalid("phone", "Please enter a valid phone number")

    low, high = PHONE_DIGITS_RANGE
    if clean.startswith("+"):
        digits = clean[1:]
        if not low <= len(digits) <= high:
            return invalid("phone", f"International phone number must be {low}-{high} digits after country code")
    else:
        digits = clean
        if not low <= len(digits) <= high:
            return invalid("phone", f"Phone number must be {low}-{high} digits long")
    if not digits.isdigit():
        return invalid("phone", "Phone number can only contain digits and + symbol")
    return None


def validate_message(message: Optional[str]) -> Optional[Failure]:
    if not message:
        return None
    if len(message) > MESSAGE_MAX_LENGTH:
        return invalid("message", f"Message cannot exceed {MESSAGE_MAX_LENGTH} characters")
    if len(message.split("\n")) > MESSAGE_MAX_LINES:
        return invalid("message", "Message has too many line breaks")
    return None


def validate(intent: MessagingIntent) -> Optional[Failure]:
    if not intent.platform:
        return missing("platform", "Please select a messaging platform")
    if intent.platform not in MESSAGING_PLATFORMS:
        return invalid("platform", "Please select a valid messaging platform")

    failure = validate_phone(intent.phone)
    if failure:
        return failure
    if intent.platform != "phone":
        return validate_message(intent.message)
    return None


def format_sms(phone: str, message: Optional[str]) -> str:
    return f"SMSTO:{phone}:{encode_uri_component(message or '')}"


def format_whatsapp(phone: str, message: Optional[str]) -> str:
    # wa.me erwartet die Nummer ohne '+'
    digits = phone[1:] if phone.startswith("+") else phone
    if message:
        return f"https://wa.me/{digits}?text={encode_uri_component(message)}"
    return f"https://wa.me/{digits}"


def format_tel(phone: str) -> str:
    return f"tel:{phone}"


def encode(intent: MessagingIntent) -> str:
    phone = normalize_phone(intent.phone)
    if intent.platform == "sms":
        payload = format_sms(phone, intent.message)
    elif intent.platform == "whatsapp":
        payload = format_whatsapp(phone, intent.message)
    elif intent.platform == "phone":
        payload = format_tel(phone)
    else:
        raise PayloadError(invalid("platform", "Please select a valid messaging platform"))

    logger.debug("Messaging payload erstellt (platform=%s)", intent.platform)
    return payload
