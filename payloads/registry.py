# =============================================================================
# 🧭 payloads/registry.py
# -----------------------------------------------------------------------------
# Einziger Einstiegspunkt für die HTTP-Schicht:
# Eingabemodell → passender Codec → validate() → encode()
# =============================================================================

from __future__ import annotations

import logging
from types import ModuleType
from typing import Dict, Tuple, Type, Union

from models import (
    BitcoinPayment,
    CalendarEvent,
    ContactCard,
    EmailIntent,
    EncodingRequest,
    EthereumPayment,
    GeoCoordinate,
    IbanPayment,
    MessagingIntent,
    PayPalPayment,
    PlainText,
    UpiPayment,
    UrlPayment,
    WiFiCredentials,
)
from payloads import contact, email, event, geo, messaging, payment, text, wifi
from payloads.errors import Failure, PayloadError

logger = logging.getLogger(__name__)

# Modelltyp → (QR-Typname, Codec-Modul)
CODECS: Dict[Type, Tuple[str, ModuleType]] = {
    WiFiCredentials: ("wifi", wifi),
    ContactCard: ("vcard", contact),
    CalendarEvent: ("event", event),
    GeoCoordinate: ("geo", geo),
    MessagingIntent: ("messaging", messaging),
    EmailIntent: ("email", email),
    PayPalPayment: ("payment", payment),
    BitcoinPayment: ("payment", payment),
    EthereumPayment: ("payment", payment),
    UpiPayment: ("payment", payment),
    IbanPayment: ("payment", payment),
    UrlPayment: ("payment", payment),
    PlainText: ("text", text),
}


def qr_type_of(request: EncodingRequest) -> str:
    try:
        return CODECS[type(request)][0]
    except KeyError:
        raise TypeError(f"Unsupported request type: {type(request).__name__}") from None


def build_payload(request: EncodingRequest) -> Union[str, Failure]:
    """
    Prüft und kodiert eine Eingabe.
    Gibt den fertigen Payload-String oder ein Failure zurück, nie eine
    PayloadError-Exception.
    """
    entry = CODECS.get(type(request))
    if entry is None:
        raise TypeError(f"Unsupported request type: {type(request).__name__}")
    qr_type, codec = entry

    failure = codec.validate(request)
    if failure is not None:
        logger.info("QR-Eingabe abgelehnt (%s): %s [%s]", qr_type, failure.kind.value, failure.field)
        return failure

    try:
        payload = codec.encode(request)
    except PayloadError as exc:
        logger.info("QR-Eingabe nicht kodierbar (%s): %s", qr_type, exc.failure.message)
        return exc.failure

    logger.debug("Payload erstellt: type=%s, %d Zeichen", qr_type, len(payload))
    return payload
