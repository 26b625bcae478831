from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..common.datetime_utils import format_iso_date, format_timestamp, parse_iso_date, parse_timestamp
from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceEntry:
    """Domain entity: attendance of one subject on one date."""

    entry_id: str
    owner_id: str
    subject_id: str
    entry_date: date
    status: AttendanceStatus
    subject_name: str = ""
    subject_code: str = ""
    notes: Optional[str] = None
    timetable_entry_id: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def to_dict(self) -> dict:
        return {
            "entry_id": self.entry_id,
            "owner_id": self.owner_id,
            "subject_id": self.subject_id,
            "subject_name": self.subject_name,
            "subject_code": self.subject_code,
            "date": format_iso_date(self.entry_date),
            "status": self.status.value,
            "notes": self.notes,
            "timetable_entry_id": self.timetable_entry_id,
            "created_at": format_timestamp(self.created_at),
            "updated_at": format_timestamp(self.updated_at),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "AttendanceEntry":
        return cls(
            entry_id=str(data["entry_id"]),
            owner_id=str(data["owner_id"]),
            subject_id=str(data["subject_id"]),
            subject_name=data.get("subject_name") or "",
            subject_code=data.get("subject_code") or "",
            entry_date=parse_iso_date(data["date"]),
            status=AttendanceStatus(data["status"]),
            notes=data.get("notes"),
            timetable_entry_id=data.get("timetable_entry_id"),
            created_at=parse_timestamp(data.get("created_at")),
            updated_at=parse_timestamp(data.get("updated_at")),
        )


@dataclass(frozen=True)
class AttendanceStats:
    total: int
    present: int
    absent: int
    off: int
    percentage: int
