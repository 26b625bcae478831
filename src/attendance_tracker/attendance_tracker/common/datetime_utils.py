from __future__ import annotations

import math
from datetime import date, datetime, time
from typing import Optional


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def format_iso_date(value: date) -> str:
    return value.strftime("%Y-%m-%d")


def parse_hhmm(value: str) -> time:
    """Parse a 24-hour HH:MM string into time."""
    return datetime.strptime(value, "%H:%M").time()


def format_hhmm(value: time) -> str:
    return value.strftime("%H:%M")


def parse_timestamp(value: Optional[str]) -> Optional[datetime]:
    if not value:
        return None
    return datetime.fromisoformat(value)


def format_timestamp(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value else None


def now_local() -> datetime:
    """Current local time.

    Default ``clock`` of the services; tests pass a fixed one instead.
    """
    return datetime.now()


def round_half_up(value: float) -> int:
    """Round .5 upwards (the way the web client rounds), not to the even neighbour."""
    return int(math.floor(value + 0.5))
