# routes/qr/messaging.py
# =============================================================================
# 🚀 SMS / WhatsApp / Telefon QR-Code Routes
# =============================================================================

from __future__ import annotations
from typing import Optional

from fastapi import APIRouter, Depends, Form

from models.messaging import MessagingIntent
from payloads.normalizers import format_phone_display
from routes.qr.base import FAILURE_RESPONSES, RenderOptions, clean, payload_response, request_png

router = APIRouter(prefix="/qr/messaging", tags=["Messaging QR"], responses=FAILURE_RESPONSES)


def messaging_form(
    platform: str = Form(""),
    phone: str = Form(""),
    message: Optional[str] = Form(None),
) -> MessagingIntent:
    return MessagingIntent(platform=platform.strip().lower(), phone=phone, message=clean(message))


@router.post("/payload")
def messaging_payload(intent: MessagingIntent = Depends(messaging_form)) -> dict:
    response = payload_response(intent)
    response["display_phone"] = format_phone_display(intent.phone)
    return response


@router.post("/png")
def messaging_png(intent: MessagingIntent = Depends(messaging_form), options: RenderOptions = Depends()):
    return request_png(intent, options)
