# =============================================================================
# 📅 payloads/event.py
# -----------------------------------------------------------------------------
# iCalendar-Payload (VCALENDAR mit genau einem VEVENT)
# =============================================================================

from __future__ import annotations

import logging
import re
import uuid
from datetime import date, datetime, time, timezone, tzinfo
from typing import List, Optional

from models.event import CalendarEvent
from payloads.uri import is_valid_url
from payloads.errors import Failure, invalid, missing, out_of_range
from utils import settings

logger = logging.getLogger(__name__)

_ORGANIZER_EMAIL_RE = re.compile(r"([^<>\s]+@[^<>\s]+)")
_ORGANIZER_BRACKETS_RE = re.compile(r"[<>()]")


def escape_ical_text(text: Optional[str]) -> str:
    """Reihenfolge beachten: Backslash muss zuerst maskiert werden."""
    if not text:
        return ""
    return (
        text.replace("\\", "\\\\")
        .replace(";", "\\;")
        .replace(",", "\\,")
        .replace("\n", "\\n")
        .replace("\r", "")
    )


def format_utc_timestamp(moment: datetime) -> str:
    return moment.astimezone(timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def format_ical_date(day: date) -> str:
    return day.strftime("%Y%m%d")


def format_ical_datetime(day: date, at: Optional[time], tz: Optional[tzinfo] = None) -> str:
    """
    Kombiniert Datum + lokale Uhrzeit und rechnet nach UTC um.
    Ohne Zeitzone gilt die lokale Systemzeitzone.
    """
    local = datetime.combine(day, at or time(0, 0))
    if tz is not None:
        local = local.replace(tzinfo=tz)
    return format_utc_timestamp(local)


def build_organizer(text: str, fallback_mailbox: Optional[str] = None) -> str:
    """
    Liest "Name <mail@domain>" aus einem Freitextfeld.
    Ohne E-Mail-Adresse wird ein Platzhalter-Postfach eingesetzt.
    """
    match = _ORGANIZER_EMAIL_RE.search(text)
    if match:
        email = match.group(1)
        name = _ORGANIZER_BRACKETS_RE.sub("", text).replace(email, "").strip()
        if name:
            return f'ORGANIZER;CN="{escape_ical_text(name)}":MAILTO:{email}'
        return f"ORGANIZER:MAILTO:{email}"

    mailbox = fallback_mailbox or settings.ICS_ORGANIZER_FALLBACK
    return f'ORGANIZER;CN="{escape_ical_text(text)}":MAILTO:{mailbox}'


def validate(event: CalendarEvent) -> Optional[Failure]:
    if not (event.title or "").strip():
        return missing("title", "Event title is required")
    if not event.start_date:
        return missing("start_date", "Start date is required")
    if not event.end_date:
        return missing("end_date", "End date is required")

    # Datumslogik vor den Uhrzeiten prüfen
    if event.end_date < event.start_date:
        return out_of_range("end_date", "End date cannot be before start date")

    if not event.all_day:
        if event.start_time is None:
            return missing("start_time", "Start time is required for timed events")
        if event.end_time is None:
            return missing("end_time", "End time is required for timed events")
        if event.start_date == event.end_date and event.end_time <= event.start_time:
            return out_of_range("end_time", "End time must be after start time")

    if event.url and not is_valid_url(event.url):
        return invalid("url", "Please enter a valid event URL")
    return None


def encode(event: CalendarEvent, now: Optional[datetime] = None) -> str:
    stamp = format_utc_timestamp(now or datetime.now(timezone.utc))
    uid = f"{uuid.uuid1()}@{settings.ICS_UID_DOMAIN}"

    lines: List[str] = [
        "BEGIN:VCALENDAR",
        "VERSION:2.0",
        f"PRODID:{settings.ICS_PRODID}",
        "CALSCALE:GREGORIAN",
        "METHOD:PUBLISH",
        "BEGIN:VEVENT",
        f"UID:{uid}",
        f"DTSTAMP:{stamp}",
    ]
    if event.title:
        lines.append(f"SUMMARY:{escape_ical_text(event.title)}")

    if event.all_day:
        if event.start_date:
            lines.append(f"DTSTART;VALUE=DATE:{format_ical_date(event.start_date)}")
        if event.end_date:
            lines.append(f"DTEND;VALUE=DATE:{format_ical_date(event.end_date)}")
    else:
        if event.start_date:
            lines.append(f"DTSTART:{format_ical_datetime(event.start_date, event.start_time, event.tz)}")
        if event.end_date:
            lines.append(f"DTEND:{format_ical_datetime(event.end_date, event.end_time, event.tz)}")

    if event.description:
        lines.append(f"DESCRIPTION:{escape_ical_text(event.description)}")
    if event.location:
        lines.append(f"LOCATION:{escape_ical_text(event.location)}")
    if event.organizer:
        lines.append(build_organizer(event.organizer))
    if event.url:
        lines.append(f"URL:{event.url}")

    lines += [
        "STATUS:CONFIRMED",
        "TRANSP:OPAQUE",
        "SEQUENCE:0",
        f"CREATED:{stamp}",
        f"LAST-MODIFIED:{stamp}",
        "END:VEVENT",
        "END:VCALENDAR",
    ]
    logger.debug("iCal payload erstellt (uid=%s)", uid)
    return "\n".join(lines)
