from __future__ import annotations

from datetime import date
from enum import Enum


class AttendanceStatus(str, Enum):
    """Status of one attendance entry. OFF days are excluded from percentages."""

    PRESENT = "present"
    ABSENT = "absent"
    OFF = "off"


class SubjectStatus(str, Enum):
    EXCELLENT = "excellent"
    GOOD = "good"
    WARNING = "warning"
    CRITICAL = "critical"


class Trend(str, Enum):
    IMPROVING = "improving"
    DECLINING = "declining"
    STABLE = "stable"


class RiskLevel(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class DayOfWeek(str, Enum):
    MONDAY = "Monday"
    TUESDAY = "Tuesday"
    WEDNESDAY = "Wednesday"
    THURSDAY = "Thursday"
    FRIDAY = "Friday"
    SATURDAY = "Saturday"
    SUNDAY = "Sunday"

    @classmethod
    def from_date(cls, value: date) -> "DayOfWeek":
        # date.weekday(): Monday == 0, same order as the members above.
        return list(cls)[value.weekday()]


class StorageBackend(str, Enum):
    REMOTE = "remote"
    LOCAL = "local"
