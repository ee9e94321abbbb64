# =============================================================================
# 🧠 QR-Code Generator
# -----------------------------------------------------------------------------
# Rendert einen fertigen Payload-String als PNG (qrcode + Pillow).
# Schreibt keine Dateien, liefert nur Bytes.
# =============================================================================

from __future__ import annotations
from typing import Optional, Tuple
from io import BytesIO
import logging
import qrcode
import qrcode.image.styledpil
import qrcode.image.styles.moduledrawers as mod
import qrcode.image.styles.colormasks as mask
from qrcode.exceptions import DataOverflowError
from PIL import Image, ImageColor

from utils.qr_config import ERROR_CORRECTION_LEVELS

logger = logging.getLogger(__name__)


class QRCapacityError(ValueError):
    """Payload passt bei der gewählten Fehlerkorrektur in keine QR-Version (1-40)."""


def _module_drawer(module_style: str):
    return {
        "square": mod.SquareModuleDrawer(),
        "rounded": mod.RoundedModuleDrawer(),
        "dots": mod.CircleModuleDrawer(),
        "soft": mod.GappedSquareModuleDrawer(),
    }.get(module_style, mod.SquareModuleDrawer())


# ---------------------------------------------------------------------------
# 🧩 Hauptfunktion: generate_qr_png
# ---------------------------------------------------------------------------
def generate_qr_png(
    payload: str,
    size: int = 300,
    fg: str = "#000000",
    bg: str = "#FFFFFF",
    error_correction: str = "M",
    border: int = 2,
    module_style: str = "square",
    gradient: Optional[Tuple[str, str]] = None,
) -> bytes:
    """
    Generiert einen QR-Code als PNG und gibt die Bytes zurück.
    Unbekannte Fehlerkorrektur-Stufen lösen ValueError aus,
    zu große Payloads QRCapacityError.
    """
    if not payload:
        raise ValueError("Payload must not be empty")
    level = ERROR_CORRECTION_LEVELS.get(error_correction.upper())
    if level is None:
        raise ValueError(f"Unknown error correction level: {error_correction}")

    # === 1️⃣ QR-Code Basis ===
    qr = qrcode.QRCode(
        version=None,
        error_correction=level,
        box_size=10,
        border=border,
    )
    qr.add_data(payload)
    try:
        qr.make(fit=True)
    except (DataOverflowError, ValueError) as exc:
        # fit=True landet bei Version 41, je nach qrcode-Version als ValueError
        raise QRCapacityError(
            "Content is too large for a QR code at this error-correction level"
        ) from exc

    # === 2️⃣ Farbmaske (Gradient oder statisch) ===
    if gradient and len(gradient) == 2:
        color_mask = mask.RadialGradiantColorMask(
            back_color=ImageColor.getrgb(bg),
            center_color=ImageColor.getrgb(gradient[0]),
            edge_color=ImageColor.getrgb(gradient[1]),
        )
    else:
        color_mask = mask.SolidFillColorMask(
            front_color=ImageColor.getrgb(fg),
            back_color=ImageColor.getrgb(bg),
        )

    # === 3️⃣ Bild erzeugen ===
    img = qr.make_image(
        image_factory=qrcode.image.styledpil.StyledPilImage,
        module_drawer=_module_drawer(module_style),
        color_mask=color_mask,
    ).convert("RGB")

    # === 4️⃣ Finale Skalierung ===
    img = img.resize((size, size), Image.Resampling.LANCZOS)

    buffer = BytesIO()
    img.save(buffer, format="PNG")

    logger.info(f"✅ QR-Code gerendert: version={qr.version}, ec={error_correction.upper()}, {size}px")
    return buffer.getvalue()
