from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..common.datetime_utils import format_iso_date, format_timestamp, parse_iso_date, parse_timestamp
from ..core.enums import SubjectStatus


@dataclass(frozen=True)
class Subject:
    """Domain entity: a course the student tracks attendance for.

    ``total_classes``/``attended_classes``/``percentage`` are the persisted
    baseline; the aggregation engine overrides them with live values.
    """

    subject_id: str
    owner_id: str
    name: str
    code: str
    credit: int = 0
    instructor: Optional[str] = None
    total_classes: int = 0
    attended_classes: int = 0
    percentage: int = 0
    status: SubjectStatus = SubjectStatus.GOOD
    color: str = "bg-blue-500"
    last_class: Optional[date] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def to_dict(self) -> dict:
        return {
            "subject_id": self.subject_id,
            "owner_id": self.owner_id,
            "name": self.name,
            "code": self.code,
            "credit": self.credit,
            "instructor": self.instructor,
            "total_classes": self.total_classes,
            "attended_classes": self.attended_classes,
            "percentage": self.percentage,
            "status": self.status.value,
            "color": self.color,
            "last_class": format_iso_date(self.last_class) if self.last_class else None,
            "created_at": format_timestamp(self.created_at),
            "updated_at": format_timestamp(self.updated_at),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Subject":
        return cls(
            subject_id=str(data["subject_id"]),
            owner_id=str(data["owner_id"]),
            name=data["name"],
            code=data["code"],
            credit=int(data.get("credit") or 0),
            instructor=data.get("instructor"),
            total_classes=int(data.get("total_classes") or 0),
            attended_classes=int(data.get("attended_classes") or 0),
            percentage=int(data.get("percentage") or 0),
            status=SubjectStatus(data.get("status") or SubjectStatus.GOOD.value),
            color=data.get("color") or "bg-blue-500",
            last_class=parse_iso_date(data["last_class"]) if data.get("last_class") else None,
            created_at=parse_timestamp(data.get("created_at")),
            updated_at=parse_timestamp(data.get("updated_at")),
        )
