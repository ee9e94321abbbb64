# =============================================================================
# 📝 payloads/text.py
# -----------------------------------------------------------------------------
# Freitext-Payload + Hinweise zur Scanbarkeit (Komplexität, Statistik, Warnungen)
# =============================================================================

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from models.text import PlainText
from payloads.errors import Failure, invalid, missing
from payloads.normalizers import normalize_text
from payloads.patterns import (
    TEXT_MAX_LENGTH,
    TEXT_NON_ASCII_RE,
    TEXT_SPECIAL_CHAR_RE,
    TEXT_WARNING_THRESHOLD,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TextComplexity:
    level: str
    score: int
    factors: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, object]:
        return {"level": self.level, "score": self.score, "factors": list(self.factors)}


@dataclass(frozen=True)
class TextStats:
    characters: int
    lines: int
    words: int
    estimated_size: str

    def to_dict(self) -> Dict[str, object]:
        return {
            "characters": self.characters,
            "lines": self.lines,
            "words": self.words,
            "estimated_size": self.estimated_size,
        }


# (Mindestpunktzahl, Stufe), absteigend
_COMPLEXITY_LEVELS = (
    (6, "very-high"),
    (4, "high"),
    (2, "medium"),
    (1, "low"),
)


def validate(text: PlainText) -> Optional[Failure]:
    content = (text.content or "").strip()
    if not content:
        return missing("content", "Text content is required")
    if len(content) > TEXT_MAX_LENGTH:
        return invalid("content", f"Text is too long (maximum {TEXT_MAX_LENGTH} characters)")
    return None


def encode(text: PlainText) -> str:
    payload = normalize_text(text.content)
    logger.debug("Text payload erstellt (%d Zeichen)", len(payload))
    return payload


def _special_char_count(text: str) -> int:
    return len(TEXT_SPECIAL_CHAR_RE.findall(text))


def analyze_complexity(raw: str) -> TextComplexity:
    """
    Grobe Einschätzung, wie dicht der QR-Code wird.
    Punkte für Länge, Zeilenzahl, Sonderzeichen-Anteil und Nicht-ASCII.
    """
    text = (raw or "").strip()
    if not text:
        return TextComplexity(level="minimal", score=0)

    score = 0
    factors: List[str] = []
    length = len(text)

    if length > 500:
        score += 3
        factors.append("Very long text")
    elif length > 200:
        score += 2
        factors.append("Long text")
    elif length > 50:
        score += 1
        factors.append("Medium length text")

    lines = len(text.split("\n"))
    if lines > 10:
        score += 2
        factors.append("Many line breaks")
    elif lines > 5:
        score += 1
        factors.append("Multiple lines")

    special = _special_char_count(text)
    if special > length * 0.15:
        score += 2
        factors.append("Many special characters")
    elif special > length * 0.05:
        score += 1
        factors.append("Some special characters")

    if TEXT_NON_ASCII_RE.search(text):
        score += 1
        factors.append("Unicode characters")

    level = next((name for threshold, name in _COMPLEXITY_LEVELS if score >= threshold), "minimal")
    return TextComplexity(level=level, score=score, factors=factors)


def estimate_size(text: str) -> str:
    length = len(text)
    if length <= 50:
        return "small"
    if length <= 150:
        return "medium"
    if length <= 300:
        return "large"
    return "very-large"


def text_stats(raw: str) -> TextStats:
    text = (raw or "").strip()
    return TextStats(
        characters=len(text),
        lines=len(text.split("\n")) if text else 0,
        words=len(text.split()),
        estimated_size=estimate_size(text),
    )


def scan_warnings(raw: str) -> List[str]:
    """Hinweise für bessere Scanbarkeit; blockieren die Kodierung nie."""
    text = (raw or "").strip()
    if not text:
        return []

    warnings: List[str] = []
    length = len(text)
    lines = text.split("\n")

    if length > TEXT_WARNING_THRESHOLD:
        warnings.append(
            f"Long text ({length} characters) may create complex QR codes that are harder to scan"
        )
    if len(lines) > 15:
        warnings.append("Consider reducing the number of line breaks for better readability")
    if _special_char_count(text) > length * 0.2:
        warnings.append("High number of special characters may affect QR code complexity")
    if any(len(line) > 100 for line in lines):
        warnings.append("Consider breaking very long lines for better formatting")
    return warnings


def recommended_settings(raw: str) -> Dict[str, object]:
    """Render-Empfehlung je nach geschätzter Größe."""
    size = estimate_size((raw or "").strip())
    settings: Dict[str, object] = {"error_correction": "M", "size": 300, "margin": 2}
    if size == "very-large":
        # dichte Codes: weniger Redundanz, größeres Bild
        settings.update(error_correction="L", size=400)
    elif size == "small":
        settings["error_correction"] = "H"
    return settings
