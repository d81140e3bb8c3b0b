from __future__ import annotations

from datetime import date, datetime, time
from typing import Optional
from zoneinfo import ZoneInfo

from ..core.constants import DEFAULT_TIMEZONE

_timezone = ZoneInfo(DEFAULT_TIMEZONE)


def configure_timezone(name: str) -> None:
    """Set the single operational timezone used by the clock helpers."""
    global _timezone
    _timezone = ZoneInfo(name)


def operational_timezone() -> ZoneInfo:
    return _timezone


def now_local() -> datetime:
    """Current time in the operational timezone.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now(_timezone)


def to_local_date(value: datetime) -> date:
    """Calendar day of an instant as seen in the operational timezone."""
    if value.tzinfo is None:
        return value.date()
    return value.astimezone(_timezone).date()


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def parse_event_time(value: str) -> time:
    """Parse HH:MM or HH:MM:SS into time."""
    parts = value.strip().split(":")
    seconds = int(parts[2]) if len(parts) >= 3 and parts[2] else 0
    return time(hour=int(parts[0]), minute=int(parts[1]), second=seconds)


def minutes_since_midnight(value: time) -> int:
    return value.hour * 60 + value.minute


def format_time_12h(value: Optional[time]) -> str:
    """08:05 -> '8:05 AM', 13:30 -> '1:30 PM'."""
    if value is None:
        return "-"
    ampm = "PM" if value.hour >= 12 else "AM"
    hour = value.hour % 12 or 12
    return f"{hour}:{value.minute:02d} {ampm}"


def format_date_dmy(value: date) -> str:
    return value.strftime("%d/%m/%Y")


def format_date_short(value: date) -> str:
    """Day/month/year without zero padding, e.g. '5/1/2026'."""
    return f"{value.day}/{value.month}/{value.year}"
