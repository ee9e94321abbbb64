# =============================================================================
# 📝 models/text.py
# -----------------------------------------------------------------------------
# Eingabemodell für reine Text-QR-Codes
# =============================================================================

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PlainText:
    content: str
