from __future__ import annotations

from datetime import date, datetime, time
from typing import Optional


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def parse_calendar_date(value: Optional[str]) -> Optional[date]:
    """Lenient date parsing for form input.

    Accepts ``YYYY-MM-DD`` (what <input type="date"> submits) and full ISO
    datetimes, in which case only the date part is kept. Returns None when the
    value is blank or cannot be read as a calendar date.
    """
    if value is None:
        return None
    v = value.strip()
    if not v:
        return None
    try:
        return parse_iso_date(v)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(v).date()
    except ValueError:
        return None


def parse_hhmm(value: str) -> time:
    """Parse HH:MM (seconds optional) into time."""
    v = value.strip()
    fmt = "%H:%M:%S" if v.count(":") == 2 else "%H:%M"
    return datetime.strptime(v, fmt).time()


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def today_local() -> date:
    return now_local().date()
