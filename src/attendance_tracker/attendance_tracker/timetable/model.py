from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, time
from typing import Optional

from ..common.datetime_utils import format_hhmm, format_timestamp, parse_hhmm, parse_timestamp
from ..core.enums import DayOfWeek


@dataclass(frozen=True)
class TimetableEntry:
    """Domain entity: one weekly recurring class slot.

    ``subject_name``/``subject_code``/``instructor`` are copied from the subject
    when the slot is created.
    """

    entry_id: str
    owner_id: str
    subject_id: str
    day: DayOfWeek
    start_time: time
    end_time: time
    subject_name: str = ""
    subject_code: str = ""
    room: Optional[str] = None
    instructor: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def to_dict(self) -> dict:
        return {
            "entry_id": self.entry_id,
            "owner_id": self.owner_id,
            "subject_id": self.subject_id,
            "subject_name": self.subject_name,
            "subject_code": self.subject_code,
            "day": self.day.value,
            "start_time": format_hhmm(self.start_time),
            "end_time": format_hhmm(self.end_time),
            "room": self.room,
            "instructor": self.instructor,
            "created_at": format_timestamp(self.created_at),
            "updated_at": format_timestamp(self.updated_at),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "TimetableEntry":
        return cls(
            entry_id=str(data["entry_id"]),
            owner_id=str(data["owner_id"]),
            subject_id=str(data["subject_id"]),
            subject_name=data.get("subject_name") or "",
            subject_code=data.get("subject_code") or "",
            day=DayOfWeek(data["day"]),
            start_time=parse_hhmm(data["start_time"]),
            end_time=parse_hhmm(data["end_time"]),
            room=data.get("room"),
            instructor=data.get("instructor"),
            created_at=parse_timestamp(data.get("created_at")),
            updated_at=parse_timestamp(data.get("updated_at")),
        )
