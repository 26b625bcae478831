from __future__ import annotations

from typing import Iterable

from ..common.datetime_utils import round_half_up
from ..core.enums import AttendanceStatus
from .model import AttendanceEntry, AttendanceStats


def summarize_entries(entries: Iterable[AttendanceEntry]) -> AttendanceStats:
    """Counts over logged entries only; off days leave the denominator."""

    entries = list(entries)
    present = sum(1 for e in entries if e.status == AttendanceStatus.PRESENT)
    absent = sum(1 for e in entries if e.status == AttendanceStatus.ABSENT)
    off = sum(1 for e in entries if e.status == AttendanceStatus.OFF)

    attendable = len(entries) - off
    percentage = round_half_up(present / attendable * 100) if attendable > 0 else 0
    return AttendanceStats(total=len(entries), present=present, absent=absent, off=off, percentage=percentage)
