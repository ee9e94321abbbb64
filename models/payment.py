# =============================================================================
# 💳 models/payment.py
# -----------------------------------------------------------------------------
# Zahlungs-Payloads als geschlossene Variantenmenge (eine Klasse pro Art).
# Jede Klasse trägt ihre Art als Klassenattribut `kind`.
# =============================================================================

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import ClassVar, Optional, Union

# Beträge kommen als Formularstring oder Zahl herein
Amount = Union[Decimal, int, float, str]


class PaymentKind(str, Enum):
    PAYPAL = "paypal"
    BITCOIN = "bitcoin"
    ETHEREUM = "ethereum"
    UPI = "upi"
    IBAN = "iban"
    URL = "url"


@dataclass(frozen=True)
class PayPalPayment:
    kind: ClassVar[PaymentKind] = PaymentKind.PAYPAL

    username: str
    amount: Optional[Amount] = None


@dataclass(frozen=True)
class BitcoinPayment:
    kind: ClassVar[PaymentKind] = PaymentKind.BITCOIN

    address: str
    amount: Optional[Amount] = None
    label: Optional[str] = None
    message: Optional[str] = None


@dataclass(frozen=True)
class EthereumPayment:
    kind: ClassVar[PaymentKind] = PaymentKind.ETHEREUM

    address: str
    amount: Optional[Amount] = None


@dataclass(frozen=True)
class UpiPayment:
    kind: ClassVar[PaymentKind] = PaymentKind.UPI

    upi_id: str
    name: str
    amount: Optional[Amount] = None
    note: Optional[str] = None


@dataclass(frozen=True)
class IbanPayment:
    kind: ClassVar[PaymentKind] = PaymentKind.IBAN

    iban: str
    beneficiary: str
    amount: Optional[Amount] = None
    reference: Optional[str] = None


@dataclass(frozen=True)
class UrlPayment:
    kind: ClassVar[PaymentKind] = PaymentKind.URL

    url: str


PaymentInstruction = Union[
    PayPalPayment,
    BitcoinPayment,
    EthereumPayment,
    UpiPayment,
    IbanPayment,
    UrlPayment,
]
