from __future__ import annotations

import logging
import random
from dataclasses import replace
from datetime import datetime
from typing import Callable, Optional, Sequence

from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import now_local
from ..common.ids import new_id
from ..common.validators import optional_text, require_date, require_non_empty, require_non_negative_int
from ..core.constants import SUBJECT_COLORS
from ..core.enums import SubjectStatus
from ..core.exceptions import NotFoundError
from ..timetable.repository import TimetableRepository
from .model import Subject
from .repository import SubjectRepository
from .status import RECORD_PROFILE, classify_status, compute_percentage

logger = logging.getLogger(__name__)


def random_color(palette: Sequence[str] = SUBJECT_COLORS) -> str:
    return random.choice(palette)


class SubjectService:
    """Use cases for subjects.

    Deleting a subject also deletes its timetable slots and attendance entries.
    """

    def __init__(
        self,
        subjects: SubjectRepository,
        timetable: TimetableRepository,
        attendance: AttendanceRepository,
        *,
        color_picker: Callable[[], str] = random_color,
        clock: Callable[[], datetime] = now_local,
    ):
        self._subjects = subjects
        self._timetable = timetable
        self._attendance = attendance
        self._color_picker = color_picker
        self._clock = clock

    def list_subjects(self, owner_id: str) -> list[Subject]:
        return list(self._subjects.list_for_owner(owner_id))

    def get_subject(self, owner_id: str, subject_id: str) -> Subject:
        subject = self._subjects.get(owner_id, subject_id)
        if not subject:
            raise NotFoundError("Subject not found")
        return subject

    def add_subject(
        self,
        owner_id: str,
        *,
        name: str,
        code: str,
        credit=0,
        instructor: Optional[str] = None,
    ) -> Subject:
        now = self._clock()
        subject = Subject(
            subject_id=new_id(),
            owner_id=owner_id,
            name=require_non_empty(name, "Subject name"),
            code=require_non_empty(code, "Subject code"),
            credit=require_non_negative_int(credit or 0, "Credit"),
            instructor=optional_text(instructor),
            total_classes=0,
            attended_classes=0,
            percentage=0,
            status=SubjectStatus.GOOD,
            color=self._color_picker(),
            created_at=now,
            updated_at=now,
        )
        return self._subjects.add(subject)

    def update_subject(self, owner_id: str, subject_id: str, updates: dict) -> Subject:
        """Apply a partial update.

        Changing ``total_classes`` or ``attended_classes`` recomputes the stored
        percentage and status with the record thresholds.
        """

        current = self.get_subject(owner_id, subject_id)

        changes: dict = {}
        if "name" in updates:
            changes["name"] = require_non_empty(updates["name"], "Subject name")
        if "code" in updates:
            changes["code"] = require_non_empty(updates["code"], "Subject code")
        if "instructor" in updates:
            changes["instructor"] = optional_text(updates["instructor"])
        if "credit" in updates:
            changes["credit"] = require_non_negative_int(updates["credit"], "Credit")
        if "color" in updates:
            changes["color"] = require_non_empty(updates["color"], "Color")
        if "last_class" in updates:
            changes["last_class"] = require_date(updates["last_class"], "Last class") if updates["last_class"] else None
        if "total_classes" in updates:
            changes["total_classes"] = require_non_negative_int(updates["total_classes"], "Total classes")
        if "attended_classes" in updates:
            changes["attended_classes"] = require_non_negative_int(updates["attended_classes"], "Attended classes")

        if "total_classes" in changes or "attended_classes" in changes:
            total = changes.get("total_classes", current.total_classes)
            attended = changes.get("attended_classes", current.attended_classes)
            percentage = compute_percentage(attended, total)
            changes["percentage"] = percentage
            changes["status"] = classify_status(percentage, RECORD_PROFILE)

        updated = replace(current, **changes, updated_at=self._clock())
        if not self._subjects.update(updated):
            raise NotFoundError("Subject not found")
        return updated

    def delete_subject(self, owner_id: str, subject_id: str) -> None:
        self.get_subject(owner_id, subject_id)

        slots = self._timetable.delete_for_subject(owner_id, subject_id)
        entries = self._attendance.delete_for_subject(owner_id, subject_id)
        self._subjects.delete(owner_id, subject_id)
        logger.info(f"Deleted subject {subject_id} with {slots} timetable slots and {entries} attendance entries")
