# routes/qr/vcard.py
# =============================================================================
# 🚀 vCard QR-Code Routes
# =============================================================================

from __future__ import annotations
from typing import Optional

from fastapi import APIRouter, Depends, Form

from models.contact import ContactCard
from routes.qr.base import FAILURE_RESPONSES, RenderOptions, clean, payload_response, request_png

router = APIRouter(prefix="/qr/vcard", tags=["vCard QR"], responses=FAILURE_RESPONSES)


def vcard_form(
    first_name: Optional[str] = Form(None),
    last_name: Optional[str] = Form(None),
    organization: Optional[str] = Form(None),
    job_title: Optional[str] = Form(None),
    phone: Optional[str] = Form(None),
    email: Optional[str] = Form(None),
    website: Optional[str] = Form(None),
    street: Optional[str] = Form(None),
    city: Optional[str] = Form(None),
    state: Optional[str] = Form(None),
    zip_code: Optional[str] = Form(None),
    country: Optional[str] = Form(None),
) -> ContactCard:
    return ContactCard(
        first_name=clean(first_name),
        last_name=clean(last_name),
        org=clean(organization),
        title=clean(job_title),
        phone=clean(phone),
        email=clean(email),
        url=clean(website),
        street=clean(street),
        city=clean(city),
        state=clean(state),
        zip_code=clean(zip_code),
        country=clean(country),
    )


@router.post("/payload")
def vcard_payload(card: ContactCard = Depends(vcard_form)) -> dict:
    return payload_response(card)


@router.post("/png")
def vcard_png(card: ContactCard = Depends(vcard_form), options: RenderOptions = Depends()):
    return request_png(card, options)
