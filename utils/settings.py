# =============================================================================
# ⚙️ utils/settings.py
# -----------------------------------------------------------------------------
# Zentrale Konfiguration aus .env / Umgebungsvariablen
# =============================================================================

import os
from pathlib import Path

from dotenv import load_dotenv

# 🔹 .env im Projektverzeichnis (oder darüber) suchen und laden
base_dir = Path(__file__).resolve().parent
while not (base_dir / ".env").exists() and base_dir != base_dir.parent:
    base_dir = base_dir.parent
load_dotenv(base_dir / ".env")

# 🔹 Anwendung
APP_NAME = os.getenv("APP_NAME", "QR Payload Studio")
APP_VERSION = os.getenv("APP_VERSION", "1.0")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# 🔹 iCalendar
ICS_PRODID = os.getenv("ICS_PRODID", "-//QR Payload Studio//Event QR Generator//EN")
ICS_UID_DOMAIN = os.getenv("ICS_UID_DOMAIN", "qr-payload.local")
ICS_ORGANIZER_FALLBACK = os.getenv("ICS_ORGANIZER_FALLBACK", "noreply@qr-payload.local")

# 🔹 QR-Rendering
QR_DEFAULT_STYLE_NAME = os.getenv("QR_DEFAULT_STYLE", "classic")
QR_MAX_SIZE = int(os.getenv("QR_MAX_SIZE", "2000"))
