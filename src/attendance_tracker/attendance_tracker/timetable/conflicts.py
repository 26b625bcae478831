from __future__ import annotations

from datetime import time
from typing import Iterable, Optional

from ..core.enums import DayOfWeek
from .model import TimetableEntry


def overlaps(start_a: time, end_a: time, start_b: time, end_b: time) -> bool:
    """Half-open interval test: [09:00, 10:00) and [10:00, 11:00) do not overlap."""
    return start_a < end_b and start_b < end_a


def find_conflict(
    entries: Iterable[TimetableEntry],
    *,
    day: DayOfWeek,
    start_time: time,
    end_time: time,
    exclude_entry_id: Optional[str] = None,
) -> Optional[TimetableEntry]:
    for entry in entries:
        if entry.day != day or entry.entry_id == exclude_entry_id:
            continue
        if overlaps(start_time, end_time, entry.start_time, entry.end_time):
            return entry
    return None
