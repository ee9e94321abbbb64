# =============================================================================
# 📦 models/__init__.py
# -----------------------------------------------------------------------------
# Eingabemodelle aller QR-Typen. EncodingRequest ist die Vereinigung
# aller Varianten, die payloads.registry.build_payload() annimmt.
# =============================================================================

from typing import Union

from .wifi import WiFiCredentials
from .contact import ContactCard
from .event import CalendarEvent
from .geo import GeoCoordinate
from .messaging import MessagingIntent
from .email import EmailIntent
from .payment import (
    PaymentKind,
    PaymentInstruction,
    PayPalPayment,
    BitcoinPayment,
    EthereumPayment,
    UpiPayment,
    IbanPayment,
    UrlPayment,
)
from .text import PlainText

EncodingRequest = Union[
    WiFiCredentials,
    ContactCard,
    CalendarEvent,
    GeoCoordinate,
    MessagingIntent,
    EmailIntent,
    PayPalPayment,
    BitcoinPayment,
    EthereumPayment,
    UpiPayment,
    IbanPayment,
    UrlPayment,
    PlainText,
]

__all__ = [
    "WiFiCredentials",
    "ContactCard",
    "CalendarEvent",
    "GeoCoordinate",
    "MessagingIntent",
    "EmailIntent",
    "PaymentKind",
    "PaymentInstruction",
    "PayPalPayment",
    "BitcoinPayment",
    "EthereumPayment",
    "UpiPayment",
    "IbanPayment",
    "UrlPayment",
    "PlainText",
    "EncodingRequest",
]
