# =============================================================================
# 💳 payloads/payment.py
# -----------------------------------------------------------------------------
# Zahlungs-Payloads: PayPal.me, Bitcoin/Ethereum (BIP21-Stil), UPI, IBAN, URL
#
# Jede Zahlungsart hat genau einen Eintrag in PAYMENT_CODECS
# (validate / encode / decode). Fehlt eine Art, schlägt der Import fehl.
# =============================================================================

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any, Callable, Dict, List, Optional, Tuple, Type, Union

from models.payment import (
    Amount,
    BitcoinPayment,
    EthereumPayment,
    IbanPayment,
    PayPalPayment,
    PaymentInstruction,
    PaymentKind,
    UpiPayment,
    UrlPayment,
)
from payloads.checksums import clean_iban, iban_checksum_ok
from payloads.errors import ErrorKind, Failure, PayloadError, invalid, missing, out_of_range
from payloads.patterns import (
    BITCOIN_ADDRESS_RE,
    BITCOIN_URI_RE,
    ETHEREUM_ADDRESS_RE,
    ETHEREUM_URI_RE,
    IBAN_RE,
    IBAN_URI_RE,
    PAYEE_NAME_LENGTH,
    PAYEE_NAME_RE,
    PAYMENT_AMOUNT_CAPS,
    PAYPAL_URI_RE,
    PAYPAL_USERNAME_LENGTH,
    PAYPAL_USERNAME_RE,
    SUSPICIOUS_URL_PATTERNS,
    UPI_ID_RE,
    UPI_URI_RE,
    URL_MAX_LENGTH,
)
from payloads.uri import encode_uri_component, is_http_url, parse_query

logger = logging.getLogger(__name__)

DecodeResult = Union[PaymentInstruction, Failure]

# Anzeigenamen für Fehlermeldungen
_KIND_LABELS: Dict[PaymentKind, str] = {
    PaymentKind.PAYPAL: "PayPal",
    PaymentKind.BITCOIN: "Bitcoin",
    PaymentKind.ETHEREUM: "Ethereum",
    PaymentKind.UPI: "UPI",
    PaymentKind.IBAN: "IBAN",
}

_AMOUNT_CAP_MESSAGES: Dict[str, str] = {
    "paypal": "PayPal amount cannot exceed $10,000",
    "bitcoin": "Bitcoin amount cannot exceed 21 BTC",
    "ethereum": "Ethereum amount cannot exceed 1000 ETH",
    "upi": "UPI amount cannot exceed ₹1,00,000",
    "iban": "IBAN amount cannot exceed €999,999",
}


# ─────────────────────────────────────────────
# 🔢 Beträge
# ─────────────────────────────────────────────
def _is_blank(value: Optional[Amount]) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def to_decimal(value: Amount) -> Optional[Decimal]:
    """Formularwert → Decimal; None bei nicht-numerischer Eingabe."""
    try:
        if isinstance(value, float):
            number = Decimal(str(value))
        else:
            number = Decimal(str(value).strip().replace(",", "."))
    except InvalidOperation:
        return None
    if not number.is_finite():
        return None
    return number


def format_amount(number: Decimal) -> str:
    """Positionsschreibweise ohne Exponent und ohne überflüssige Nullen."""
    return format(number.normalize(), "f")


def validate_amount(kind: PaymentKind, value: Optional[Amount]) -> Optional[Failure]:
    if _is_blank(value):
        return None
    number = to_decimal(value)
    label = _KIND_LABELS[kind]
    if number is None:
        return invalid("amount", f"{label} amount must be a positive number")
    if number <= 0:
        return out_of_range("amount", f"{label} amount must be a positive number")
    if number > PAYMENT_AMOUNT_CAPS[kind.value]:
        return out_of_range("amount", _AMOUNT_CAP_MESSAGES[kind.value])
    return None


def _encoded_amount(value: Optional[Amount]) -> Optional[str]:
    """Betrag für den Payload; None wenn leer oder nicht positiv."""
    if _is_blank(value):
        return None
    number = to_decimal(value)
    if number is None:
        raise PayloadError(invalid("amount", "Amount must be a positive number"))
    if number <= 0:
        return None
    return format_amount(number)


def _decoded_amount(raw: Optional[str]) -> Optional[Amount]:
    if raw is None or not raw.strip():
        return None
    number = to_decimal(raw)
    return number if number is not None else raw


def _with_query(base: str, params: List[Tuple[str, str]]) -> str:
    if not params:
        return base
    return base + "?" + "&".join(f"{key}={value}" for key, value in params)


def _validate_payee_name(name: str, field: str, label: str) -> Optional[Failure]:
    low, high = PAYEE_NAME_LENGTH
    if len(name) < low:
        return invalid(field, f"{label} must be at least {low} characters long")
    if len(name) > high:
        return invalid(field, f"{label} must be less than {high} characters")
    if not PAYEE_NAME_RE.match(name):
        return invalid(field, f"{label} can only contain letters, spaces, dots, apostrophes, and hyphens")
    return None


def _unparseable(message: str) -> Failure:
    return Failure(ErrorKind.UNPARSEABLE, message, field="payload")


# ─────────────────────────────────────────────
# 🅿️ PayPal.me
# ─────────────────────────────────────────────
def _validate_paypal(payment: PayPalPayment) -> Optional[Failure]:
    username = (payment.username or "").strip()
    if not username:
        return missing("username", "PayPal username is required")
    if not PAYPAL_USERNAME_RE.match(username):
        return invalid(
            "username",
            "PayPal username can only contain letters, numbers, dots, underscores, and hyphens",
        )
    low, high = PAYPAL_USERNAME_LENGTH
    if len(username) < low:
        return invalid("username", f"PayPal username must be at least {low} characters long")
    if len(username) > high:
        return invalid("username", f"PayPal username must be less than {high} characters")
    return validate_amount(PaymentKind.PAYPAL, payment.amount)


def _encode_paypal(payment: PayPalPayment) -> str:
    url = f"https://paypal.me/{payment.username.strip()}"
    amount = _encoded_amount(payment.amount)
    if amount:
        url += f"/{amount}"
    return url


def _decode_paypal(text: str) -> DecodeResult:
    match = PAYPAL_URI_RE.match(text)
    if not match:
        return _unparseable("Invalid PayPal.me URL format")
    return PayPalPayment(username=match.group(1), amount=_decoded_amount(match.group(2)))


# ─────────────────────────────────────────────
# ₿ Bitcoin
# ─────────────────────────────────────────────
def _validate_bitcoin(payment: BitcoinPayment) -> Optional[Failure]:
    address = (payment.address or "").strip()
    if not address:
        return missing("address", "Wallet address is required")
    if not BITCOIN_ADDRESS_RE.match(address):
        return invalid("address", "Invalid Bitcoin address format")
    return validate_amount(PaymentKind.BITCOIN, payment.amount)


def _encode_bitcoin(payment: BitcoinPayment) -> str:
    params: List[Tuple[str, str]] = []
    amount = _encoded_amount(payment.amount)
    if amount:
        params.append(("amount", amount))
    if payment.label:
        params.append(("label", encode_uri_component(payment.label)))
    if payment.message:
        params.append(("message", encode_uri_component(payment.message)))
    return _with_query(f"bitcoin:{payment.address.strip()}", params)


def _decode_bitcoin(text: str) -> DecodeResult:
    match = BITCOIN_URI_RE.match(text)
    if not match:
        return _unparseable("Invalid Bitcoin URI format")
    params = parse_query(match.group(2) or "")
    return BitcoinPayment(
        address=match.group(1),
        amount=_decoded_amount(params.get("amount")),
        label=params.get("label") or None,
        message=params.get("message") or None,
    )


# ─────────────────────────────────────────────
# Ξ Ethereum
# ─────────────────────────────────────────────
def _validate_ethereum(payment: EthereumPayment) -> Optional[Failure]:
    address = (payment.address or "").strip()
    if not address:
        return missing("address", "Wallet address is required")
    if not ETHEREUM_ADDRESS_RE.match(address):
        return invalid(
            "address",
            "Invalid Ethereum address format (must start with 0x and be 42 characters long)",
        )
    return validate_amount(PaymentKind.ETHEREUM, payment.amount)


def _encode_ethereum(payment: EthereumPayment) -> str:
    params: List[Tuple[str, str]] = []
    amount = _encoded_amount(payment.amount)
    if amount:
        params.append(("value", amount))
    return _with_query(f"ethereum:{payment.address.strip()}", params)


def _decode_ethereum(text: str) -> DecodeResult:
    match = ETHEREUM_URI_RE.match(text)
    if not match:
        return _unparseable("Invalid Ethereum URI format")
    params = parse_query(match.group(2) or "")
    return EthereumPayment(address=match.group(1), amount=_decoded_amount(params.get("value")))


# ─────────────────────────────────────────────
# 🇮🇳 UPI
# ─────────────────────────────────────────────
def _validate_upi(payment: UpiPayment) -> Optional[Failure]:
    upi_id = (payment.upi_id or "").strip()
    name = (payment.name or "").strip()
    if not upi_id:
        return missing("upi_id", "UPI ID is required")
    if not name:
        return missing("name", "Payee name is required")
    if not UPI_ID_RE.match(upi_id):
        return invalid("upi_id", "Invalid UPI ID format (should be like user@bank)")
    failure = _validate_payee_name(name, "name", "Payee name")
    if failure:
        return failure
    return validate_amount(PaymentKind.UPI, payment.amount)


def _encode_upi(payment: UpiPayment) -> str:
    params: List[Tuple[str, str]] = [
        ("pa", payment.upi_id.strip()),
        ("pn", encode_uri_component(payment.name.strip())),
    ]
    amount = _encoded_amount(payment.amount)
    if amount:
        params += [("am", amount), ("cu", "INR")]
    if payment.note:
        params.append(("tn", encode_uri_component(payment.note)))
    return _with_query("upi://pay", params)


def _decode_upi(text: str) -> DecodeResult:
    match = UPI_URI_RE.match(text)
    if not match:
        return _unparseable("Invalid UPI string format")
    params = parse_query(match.group(1))
    if not params.get("pa"):
        return _unparseable("UPI string has no payee address (pa)")
    return UpiPayment(
        upi_id=params["pa"],
        name=params.get("pn", ""),
        amount=_decoded_amount(params.get("am")),
        note=params.get("tn") or None,
    )


# ─────────────────────────────────────────────
# 🏦 IBAN
# ─────────────────────────────────────────────
def _validate_iban(payment: IbanPayment) -> Optional[Failure]:
    code = clean_iban(payment.iban)
    beneficiary = (payment.beneficiary or "").strip()
    if not code:
        return missing("iban", "IBAN code is required")
    if not beneficiary:
        return missing("beneficiary", "Account holder name is required")
    if not IBAN_RE.match(code):
        return invalid("iban", "Invalid IBAN format")
    if not iban_checksum_ok(code):
        return Failure(ErrorKind.CHECKSUM_INVALID, "Invalid IBAN checksum", field="iban")
    failure = _validate_payee_name(beneficiary, "beneficiary", "Account holder name")
    if failure:
        return failure
    return validate_amount(PaymentKind.IBAN, payment.amount)


def _encode_iban(payment: IbanPayment) -> str:
    params: List[Tuple[str, str]] = [("beneficiary", encode_uri_component(payment.beneficiary.strip()))]
    amount = _encoded_amount(payment.amount)
    if amount:
        params += [("amount", amount), ("currency", "EUR")]
    if payment.reference:
        params.append(("reference", encode_uri_component(payment.reference)))
    return _with_query(f"iban:{clean_iban(payment.iban)}", params)


def _decode_iban(text: str) -> DecodeResult:
    match = IBAN_URI_RE.match(text)
    if not match:
        return _unparseable("Invalid IBAN string format")
    params = parse_query(match.group(2) or "")
    return IbanPayment(
        iban=match.group(1),
        beneficiary=params.get("beneficiary", ""),
        amount=_decoded_amount(params.get("amount")),
        reference=params.get("reference") or None,
    )


# ─────────────────────────────────────────────
# 🔗 Freie Zahlungs-URL
# ─────────────────────────────────────────────
def contains_suspicious_patterns(url: str) -> bool:
    return any(pattern.search(url) for pattern in SUSPICIOUS_URL_PATTERNS)


def _validate_url(payment: UrlPayment) -> Optional[Failure]:
    url = (payment.url or "").strip()
    if not url:
        return missing("url", "Payment URL is required")
    if not is_http_url(url):
        return invalid("url", "Payment URL must use HTTP or HTTPS protocol")
    if len(url) > URL_MAX_LENGTH:
        return invalid("url", f"Payment URL is too long (maximum {URL_MAX_LENGTH} characters)")
    # Zusatzprüfung, kein vollständiger Sanitizer
    if contains_suspicious_patterns(url):
        return invalid("url", "Payment URL contains suspicious patterns")
    return None


def _encode_url(payment: UrlPayment) -> str:
    return payment.url.strip()


def _decode_url(text: str) -> DecodeResult:
    if not is_http_url(text):
        return _unparseable("Invalid URL format")
    return UrlPayment(url=text)


# ─────────────────────────────────────────────
# 🧭 Dispatch-Tabelle
# ─────────────────────────────────────────────
@dataclass(frozen=True)
class PaymentCodec:
    model: Type[Any]
    prefix: str
    validate: Callable[[Any], Optional[Failure]]
    encode: Callable[[Any], str]
    decode: Callable[[str], DecodeResult]


# Reihenfolge = Erkennungsreihenfolge in decode_payment() (URL zuletzt)
PAYMENT_CODECS: Dict[PaymentKind, PaymentCodec] = {
    PaymentKind.PAYPAL: PaymentCodec(PayPalPayment, "https://paypal.me/", _validate_paypal, _encode_paypal, _decode_paypal),
    PaymentKind.BITCOIN: PaymentCodec(BitcoinPayment, "bitcoin:", _validate_bitcoin, _encode_bitcoin, _decode_bitcoin),
    PaymentKind.ETHEREUM: PaymentCodec(EthereumPayment, "ethereum:", _validate_ethereum, _encode_ethereum, _decode_ethereum),
    PaymentKind.UPI: PaymentCodec(UpiPayment, "upi://", _validate_upi, _encode_upi, _decode_upi),
    PaymentKind.IBAN: PaymentCodec(IbanPayment, "iban:", _validate_iban, _encode_iban, _decode_iban),
    PaymentKind.URL: PaymentCodec(UrlPayment, "http", _validate_url, _encode_url, _decode_url),
}

_unhandled = set(PaymentKind) - set(PAYMENT_CODECS)
if _unhandled:
    raise RuntimeError(f"Payment kinds without codec: {sorted(k.value for k in _unhandled)}")


def _codec_for(payment: PaymentInstruction) -> PaymentCodec:
    codec = PAYMENT_CODECS[payment.kind]
    if not isinstance(payment, codec.model):
        raise TypeError(f"{type(payment).__name__} does not match payment kind {payment.kind.value}")
    return codec


def validate(payment: PaymentInstruction) -> Optional[Failure]:
    return _codec_for(payment).validate(payment)


def encode(payment: PaymentInstruction) -> str:
    payload = _codec_for(payment).encode(payment)
    logger.debug("Payment payload erstellt (kind=%s)", payment.kind.value)
    return payload


def decode(kind: Union[PaymentKind, str], text: str) -> DecodeResult:
    """Payload einer bekannten Zahlungsart zurück in Felder zerlegen."""
    try:
        payment_kind = PaymentKind(kind)
    except ValueError:
        return _unparseable("Unsupported payment type")
    return PAYMENT_CODECS[payment_kind].decode((text or "").strip())


def detect_kind(text: str) -> Optional[PaymentKind]:
    for kind, codec in PAYMENT_CODECS.items():
        if text.startswith(codec.prefix):
            return kind
    return None


def decode_payment(text: str) -> DecodeResult:
    """Zahlungsart am Präfix erkennen und dekodieren."""
    text = (text or "").strip()
    kind = detect_kind(text)
    if kind is None:
        return _unparseable("Unsupported payment type")
    return PAYMENT_CODECS[kind].decode(text)
