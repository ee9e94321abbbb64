"""
utils/qr_config.py
────────────────────────────────────────────
Render-Stile für die PNG-Ausgabe.

Definiert Farben, Modulformen, Rand und Fehlerkorrektur
für alle QR-Codes, die über /qr/<typ>/png erzeugt werden.
────────────────────────────────────────────
"""

from typing import Any, Dict

from qrcode.constants import ERROR_CORRECT_H, ERROR_CORRECT_L, ERROR_CORRECT_M, ERROR_CORRECT_Q

# ─────────────────────────────────────────────
# 🛡️ Fehlerkorrektur (L ≈ 7 %, M ≈ 15 %, Q ≈ 25 %, H ≈ 30 %)
# ─────────────────────────────────────────────
ERROR_CORRECTION_LEVELS: Dict[str, int] = {
    "L": ERROR_CORRECT_L,
    "M": ERROR_CORRECT_M,
    "Q": ERROR_CORRECT_Q,
    "H": ERROR_CORRECT_H,
}

MODULE_STYLES = ("square", "rounded", "dots", "soft")

# ─────────────────────────────────────────────
# 🎨 STANDARDDESIGN (Basis)
# ─────────────────────────────────────────────
QR_DEFAULT_STYLE: Dict[str, Any] = {
    "size": 300,
    "fg": "#000000",
    "bg": "#FFFFFF",
    "gradient": None,
    "module_style": "square",
    "border": 2,
    "error_correction": "M",
}

# ─────────────────────────────────────────────
# 🪄 THEMES
# ─────────────────────────────────────────────
QR_THEMES: Dict[str, Dict[str, Any]] = {
    "classic": {},
    "dark": {
        "fg": "#FFFFFF",
        "bg": "#0D0D0D",
    },
    "rounded": {
        "fg": "#0D2A78",
        "bg": "#F8FAFC",
        "module_style": "rounded",
    },
    "dots": {
        "fg": "#2563EB",
        "bg": "#E0E7FF",
        "module_style": "dots",
    },
    "soft": {
        "fg": "#4F46E5",
        "bg": "#EEF2FF",
        "module_style": "soft",
    },
    "gradient": {
        "fg": "#7C3AED",
        "bg": "#FFFFFF",
        "gradient": ("#7C3AED", "#C084FC"),
        "module_style": "rounded",
    },
    # Druck: hohe Redundanz, breiter Rand
    "print": {
        "size": 600,
        "border": 4,
        "error_correction": "H",
    },
}


# ─────────────────────────────────────────────
# 🧠 FUNKTION: Design abrufen
# ─────────────────────────────────────────────
def get_qr_style(style_name: str = "classic") -> Dict[str, Any]:
    """
    Gibt das gewünschte Render-Design als Dictionary zurück.
    Unbekannte Namen fallen auf das Standard-Design zurück.
    """
    style = QR_THEMES.get(style_name, {})
    return {**QR_DEFAULT_STYLE, **style}
