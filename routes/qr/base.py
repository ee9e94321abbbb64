# routes/qr/base.py
# =============================================================================
# 🧩 Gemeinsame Helfer für alle QR-Routen
# -----------------------------------------------------------------------------
# Failure → HTTP 422, Payload → JSON, Payload → PNG
# =============================================================================

import logging
from typing import Any, Dict, Optional, Union

from fastapi import Form, HTTPException
from fastapi.responses import Response
from pydantic import BaseModel, Field

from models import EncodingRequest
from payloads.errors import Failure, invalid
from payloads.registry import build_payload, qr_type_of
from utils import settings
from utils.qr_config import get_qr_style
from utils.qr_generator import QRCapacityError, generate_qr_png

logger = logging.getLogger(__name__)


class FailureDetail(BaseModel):
    kind: str = Field(..., description="MissingRequiredField, FormatInvalid, OutOfRange, ...")
    message: str
    field: Optional[str] = None
    reason: Optional[str] = None


class FailureOut(BaseModel):
    detail: FailureDetail


# OpenAPI-Doku für alle QR-Router
FAILURE_RESPONSES: Dict[Union[int, str], Dict[str, Any]] = {
    422: {"model": FailureOut, "description": "Input rejected by the codec"},
}


def fail(failure: Failure) -> HTTPException:
    """Failure als 422-Antwort: {"detail": {"kind", "message", "field", "reason"}}."""
    return HTTPException(status_code=422, detail=failure.to_dict())


def clean(value: Optional[str]) -> Optional[str]:
    """Leere Formularfelder → None."""
    if value is None:
        return None
    value = value.strip()
    return value or None


def payload_or_422(request: EncodingRequest) -> str:
    result: Union[str, Failure] = build_payload(request)
    if isinstance(result, Failure):
        raise fail(result)
    return result


def payload_response(request: EncodingRequest, **extra: Any) -> Dict[str, Any]:
    payload = payload_or_422(request)
    return {"type": qr_type_of(request), "payload": payload, **extra}


class RenderOptions:
    """Render-Parameter aus dem Formular (Stil + optionale Overrides)."""

    def __init__(
        self,
        style: str = Form(settings.QR_DEFAULT_STYLE_NAME),
        size: Optional[int] = Form(None),
        error_correction: Optional[str] = Form(None),
        fg_color: Optional[str] = Form(None),
        bg_color: Optional[str] = Form(None),
    ):
        self.style = style
        self.size = size
        self.error_correction = error_correction
        self.fg_color = clean(fg_color)
        self.bg_color = clean(bg_color)


def png_response(payload: str, options: RenderOptions) -> Response:
    conf = get_qr_style(options.style)
    size = options.size or conf["size"]
    if not 64 <= size <= settings.QR_MAX_SIZE:
        raise fail(invalid("size", f"Size must be between 64 and {settings.QR_MAX_SIZE} pixels"))

    try:
        png = generate_qr_png(
            payload=payload,
            size=size,
            fg=options.fg_color or conf["fg"],
            bg=options.bg_color or conf["bg"],
            error_correction=options.error_correction or conf["error_correction"],
            border=conf["border"],
            module_style=conf["module_style"],
            gradient=conf.get("gradient"),
        )
    except QRCapacityError as exc:
        raise fail(invalid("payload", str(exc))) from exc
    except ValueError as exc:
        # unbekannte Farbe / Fehlerkorrektur-Stufe
        raise fail(invalid("style", str(exc))) from exc

    return Response(content=png, media_type="image/png")


def request_png(request: EncodingRequest, options: RenderOptions) -> Response:
    return png_response(payload_or_422(request), options)
