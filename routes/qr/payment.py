# routes/qr/payment.py
# =============================================================================
# 🚀 Payment QR-Code Routes (PayPal, Bitcoin, Ethereum, UPI, IBAN, URL)
# =============================================================================

from __future__ import annotations
from dataclasses import asdict
from decimal import Decimal
from typing import Optional

from fastapi import APIRouter, Depends, Form

from models.payment import (
    BitcoinPayment,
    EthereumPayment,
    IbanPayment,
    PaymentInstruction,
    PaymentKind,
    PayPalPayment,
    UpiPayment,
    UrlPayment,
)
from payloads import payment
from payloads.errors import Failure, invalid, missing
from routes.qr.base import FAILURE_RESPONSES, RenderOptions, clean, fail, payload_response, request_png

router = APIRouter(prefix="/qr/payment", tags=["Payment QR"], responses=FAILURE_RESPONSES)


def payment_form(
    payment_type: str = Form(""),
    amount: Optional[str] = Form(None),
    paypal_username: Optional[str] = Form(None),
    wallet_address: Optional[str] = Form(None),
    crypto_label: Optional[str] = Form(None),
    crypto_message: Optional[str] = Form(None),
    upi_id: Optional[str] = Form(None),
    payee_name: Optional[str] = Form(None),
    upi_note: Optional[str] = Form(None),
    iban_code: Optional[str] = Form(None),
    beneficiary_name: Optional[str] = Form(None),
    reference: Optional[str] = Form(None),
    payment_url: Optional[str] = Form(None),
) -> PaymentInstruction:
    kind_name = payment_type.strip().lower()
    if not kind_name:
        raise fail(missing("payment_type", "Please select a payment type"))
    try:
        kind = PaymentKind(kind_name)
    except ValueError:
        raise fail(invalid("payment_type", "Please select a valid payment type")) from None

    amount = clean(amount)
    if kind is PaymentKind.PAYPAL:
        return PayPalPayment(username=paypal_username or "", amount=amount)
    if kind is PaymentKind.BITCOIN:
        return BitcoinPayment(
            address=wallet_address or "",
            amount=amount,
            label=clean(crypto_label),
            message=clean(crypto_message),
        )
    if kind is PaymentKind.ETHEREUM:
        return EthereumPayment(address=wallet_address or "", amount=amount)
    if kind is PaymentKind.UPI:
        return UpiPayment(upi_id=upi_id or "", name=payee_name or "", amount=amount, note=clean(upi_note))
    if kind is PaymentKind.IBAN:
        return IbanPayment(
            iban=iban_code or "",
            beneficiary=beneficiary_name or "",
            amount=amount,
            reference=clean(reference),
        )
    return UrlPayment(url=payment_url or "")


def _serialize(instruction: PaymentInstruction) -> dict:
    fields = {
        key: (str(value) if isinstance(value, Decimal) else value)
        for key, value in asdict(instruction).items()
    }
    return {"kind": instruction.kind.value, **fields}


@router.post("/payload")
def payment_payload(instruction: PaymentInstruction = Depends(payment_form)) -> dict:
    return payload_response(instruction, kind=instruction.kind.value)


@router.post("/png")
def payment_png(instruction: PaymentInstruction = Depends(payment_form), options: RenderOptions = Depends()):
    return request_png(instruction, options)


@router.post("/decode")
def payment_decode(payload: str = Form(""), payment_type: Optional[str] = Form(None)) -> dict:
    """Zahlungs-String → Felder. Ohne payment_type wird die Art am Präfix erkannt."""
    kind = clean(payment_type)
    result = payment.decode(kind.lower(), payload) if kind else payment.decode_payment(payload)
    if isinstance(result, Failure):
        raise fail(result)
    return _serialize(result)
