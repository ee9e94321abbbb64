# routes/qr/text.py
# =============================================================================
# 🚀 Text QR-Code Routes
# =============================================================================

from __future__ import annotations

from fastapi import APIRouter, Depends, Form

from models.text import PlainText
from payloads import text
from routes.qr.base import FAILURE_RESPONSES, RenderOptions, payload_response, request_png

router = APIRouter(prefix="/qr/text", tags=["Text QR"], responses=FAILURE_RESPONSES)


def text_form(content: str = Form("")) -> PlainText:
    return PlainText(content=content)


@router.post("/payload")
def text_payload(plain: PlainText = Depends(text_form)) -> dict:
    return payload_response(plain, warnings=text.scan_warnings(plain.content))


@router.post("/png")
def text_png(plain: PlainText = Depends(text_form), options: RenderOptions = Depends()):
    return request_png(plain, options)


@router.post("/analyze")
def text_analyze(plain: PlainText = Depends(text_form)) -> dict:
    """Komplexität, Statistik, Hinweise und Render-Empfehlung. Blockiert nie."""
    return {
        "complexity": text.analyze_complexity(plain.content).to_dict(),
        "stats": text.text_stats(plain.content).to_dict(),
        "warnings": text.scan_warnings(plain.content),
        "recommended": text.recommended_settings(plain.content),
    }
