# routes/qr/event.py
# =============================================================================
# 🚀 Event QR-Code Routes (iCalendar)
# =============================================================================

from __future__ import annotations
from datetime import date, time
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from fastapi import APIRouter, Depends, Form

from models.event import CalendarEvent
from payloads.errors import invalid
from routes.qr.base import FAILURE_RESPONSES, RenderOptions, clean, fail, payload_response, request_png

router = APIRouter(prefix="/qr/event", tags=["Event QR"], responses=FAILURE_RESPONSES)


def _parse_date(field: str, raw: Optional[str]) -> Optional[date]:
    raw = clean(raw)
    if raw is None:
        return None
    try:
        return date.fromisoformat(raw)
    except ValueError:
        raise fail(invalid(field, "Date must be in YYYY-MM-DD format")) from None


def _parse_time(field: str, raw: Optional[str]) -> Optional[time]:
    raw = clean(raw)
    if raw is None:
        return None
    try:
        return time.fromisoformat(raw)
    except ValueError:
        raise fail(invalid(field, "Time must be in HH:MM format")) from None


def _parse_timezone(raw: Optional[str]) -> Optional[ZoneInfo]:
    raw = clean(raw)
    if raw is None:
        return None
    try:
        return ZoneInfo(raw)
    except (ZoneInfoNotFoundError, ValueError):
        raise fail(invalid("timezone", f"Unknown time zone: {raw}")) from None


def event_form(
    title: str = Form(""),
    start_date: Optional[str] = Form(None),
    end_date: Optional[str] = Form(None),
    start_time: Optional[str] = Form(None),
    end_time: Optional[str] = Form(None),
    all_day: bool = Form(False),
    location: Optional[str] = Form(None),
    description: Optional[str] = Form(None),
    organizer: Optional[str] = Form(None),
    url: Optional[str] = Form(None),
    timezone: Optional[str] = Form(None),
) -> CalendarEvent:
    return CalendarEvent(
        title=title.strip(),
        start_date=_parse_date("start_date", start_date),
        end_date=_parse_date("end_date", end_date),
        start_time=_parse_time("start_time", start_time),
        end_time=_parse_time("end_time", end_time),
        all_day=all_day,
        location=clean(location),
        description=clean(description),
        organizer=clean(organizer),
        url=clean(url),
        tz=_parse_timezone(timezone),
    )


@router.post("/payload")
def event_payload(event: CalendarEvent = Depends(event_form)) -> dict:
    return payload_response(event)


@router.post("/png")
def event_png(event: CalendarEvent = Depends(event_form), options: RenderOptions = Depends()):
    return request_png(event, options)
