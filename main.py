# =============================================================================
# 🚀 QR Payload Studio – Hauptapplikation (main.py)
# =============================================================================

from __future__ import annotations
import logging
from typing import Dict, List

from fastapi import FastAPI

# -------------------------------------------------------------------------
# 1️⃣ Konfiguration (.env wird in utils.settings geladen)
# -------------------------------------------------------------------------
from utils import settings

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL, logging.INFO),
    format="[%(asctime)s] [%(levelname)s] %(message)s",
)
logger = logging.getLogger(__name__)

# -------------------------------------------------------------------------
# 2️⃣ FastAPI App
# -------------------------------------------------------------------------
app = FastAPI(title=settings.APP_NAME, version=settings.APP_VERSION)

# -------------------------------------------------------------------------
# 3️⃣ QR-Routen
# -------------------------------------------------------------------------
from routes.qr import (
    wifi_router,
    vcard_router,
    event_router,
    geo_router,
    messaging_router,
    email_router,
    payment_router,
    text_router,
)

app.include_router(wifi_router)
app.include_router(vcard_router)
app.include_router(event_router)
app.include_router(geo_router)
app.include_router(messaging_router)
app.include_router(email_router)
app.include_router(payment_router)
app.include_router(text_router)

logger.info("✅ %s %s gestartet", settings.APP_NAME, settings.APP_VERSION)


# -------------------------------------------------------------------------
# 4️⃣ Health Check
# -------------------------------------------------------------------------
@app.get("/health")
def health() -> Dict[str, str]:
    return {"status": "ok"}


# -------------------------------------------------------------------------
# 5️⃣ Debug Route
# -------------------------------------------------------------------------
@app.get("/debug/routes")
def debug_routes() -> List[Dict[str, str]]:
    return [{"path": r.path, "name": r.name} for r in app.routes]
