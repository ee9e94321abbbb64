# routes/qr/email.py
# =============================================================================
# 🚀 E-Mail QR-Code Routes
# =============================================================================

from __future__ import annotations
from typing import Optional

from fastapi import APIRouter, Depends, Form

from models.email import EmailIntent
from payloads import email
from payloads.errors import Failure
from routes.qr.base import FAILURE_RESPONSES, RenderOptions, clean, fail, payload_response, request_png

router = APIRouter(prefix="/qr/email", tags=["Email QR"], responses=FAILURE_RESPONSES)


def email_form(
    email_address: str = Form(""),
    subject: Optional[str] = Form(None),
    body: Optional[str] = Form(None),
) -> EmailIntent:
    return EmailIntent(recipient=email_address, subject=clean(subject), body=clean(body))


@router.post("/payload")
def email_payload(intent: EmailIntent = Depends(email_form)) -> dict:
    return payload_response(intent)


@router.post("/png")
def email_png(intent: EmailIntent = Depends(email_form), options: RenderOptions = Depends()):
    return request_png(intent, options)


@router.post("/decode")
def email_decode(payload: str = Form("")) -> dict:
    """mailto:-URL zurück in Empfänger / Betreff / Text."""
    result = email.decode(payload)
    if isinstance(result, Failure):
        raise fail(result)
    return {"recipient": result.recipient, "subject": result.subject, "body": result.body}
