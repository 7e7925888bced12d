from __future__ import annotations

from datetime import date, datetime, timedelta

WEEKDAYS = ("monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday")


def now_local() -> datetime:
    """Current server-local time."""
    return datetime.now()


def parse_weekday(value: str | int) -> int:
    """Accept a weekday name ("saturday") or number (Monday=0) and return the number."""
    if isinstance(value, int):
        if not 0 <= value <= 6:
            raise ValueError(f"Invalid weekday number: {value!r}")
        return value

    name = str(value).strip().lower()
    if name.isdigit():
        return parse_weekday(int(name))
    if name not in WEEKDAYS:
        raise ValueError(f"Invalid weekday name: {value!r}")
    return WEEKDAYS.index(name)


def week_start(today: date, anchor_weekday: int) -> date:
    """Most recent ``anchor_weekday`` on or before ``today``."""
    if isinstance(today, datetime):
        today = today.date()
    return today - timedelta(days=(today.weekday() - anchor_weekday) % 7)
