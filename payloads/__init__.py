# =============================================================================
# 📦 payloads/
# -----------------------------------------------------------------------------
# Codec-Schicht: strukturierte Eingaben → QR-Payload-Strings (und zurück)
# =============================================================================
