# routes/qr/__init__.py
# =============================================================================
# 🚀 QR Routes Package
# =============================================================================

from routes.qr.wifi import router as wifi_router
from routes.qr.vcard import router as vcard_router
from routes.qr.event import router as event_router
from routes.qr.geo import router as geo_router
from routes.qr.messaging import router as messaging_router
from routes.qr.email import router as email_router
from routes.qr.payment import router as payment_router
from routes.qr.text import router as text_router

__all__ = [
    "wifi_router",
    "vcard_router",
    "event_router",
    "geo_router",
    "messaging_router",
    "email_router",
    "payment_router",
    "text_router",
]
