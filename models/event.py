# =============================================================================
# 📅 models/event.py
# -----------------------------------------------------------------------------
# Eingabemodell für Kalender-QR-Codes (iCalendar VEVENT)
# =============================================================================

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, time, tzinfo
from typing import Optional


@dataclass(frozen=True)
class CalendarEvent:
    title: str
    start_date: Optional[date]
    end_date: Optional[date]
    start_time: Optional[time] = None
    end_time: Optional[time] = None
    all_day: bool = False
    location: Optional[str] = None
    description: Optional[str] = None
    organizer: Optional[str] = None  # freier Text, z. B. "Max <max@example.com>"
    url: Optional[str] = None
    # Zeitzone der eingegebenen Uhrzeiten; None = lokale Systemzeitzone
    tz: Optional[tzinfo] = None
