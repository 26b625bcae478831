from __future__ import annotations

import logging
from dataclasses import replace
from datetime import datetime
from typing import Callable, Optional

from ..common.datetime_utils import now_local
from ..common.ids import new_id
from ..common.validators import optional_text, require_choice, require_non_empty, require_time
from ..core.enums import DayOfWeek
from ..core.exceptions import NotFoundError, TimeConflictError, ValidationError
from ..subjects.repository import SubjectRepository
from .conflicts import find_conflict
from .formatting import format_hhmm_range
from .model import TimetableEntry
from .repository import TimetableRepository

logger = logging.getLogger(__name__)

_DAY_ORDER = {day: i for i, day in enumerate(DayOfWeek)}


def _sort_key(entry: TimetableEntry):
    return _DAY_ORDER[entry.day], entry.start_time


class TimetableService:
    def __init__(
        self,
        timetable: TimetableRepository,
        subjects: SubjectRepository,
        *,
        clock: Callable[[], datetime] = now_local,
    ):
        self._timetable = timetable
        self._subjects = subjects
        self._clock = clock

    def list_entries(self, owner_id: str) -> list[TimetableEntry]:
        return sorted(self._timetable.list_for_owner(owner_id), key=_sort_key)

    def entries_for_day(self, owner_id: str, day: DayOfWeek) -> list[TimetableEntry]:
        return [e for e in self.list_entries(owner_id) if e.day == day]

    def add_entry(
        self,
        owner_id: str,
        *,
        subject_id: str,
        day,
        start_time,
        end_time,
        room: Optional[str] = None,
    ) -> TimetableEntry:
        subject_id = require_non_empty(subject_id, "Subject")
        day = require_choice(day, DayOfWeek, "Day")
        start = require_time(start_time, "Start time")
        end = require_time(end_time, "End time")
        if start >= end:
            raise ValidationError("End time must be after start time")

        subject = self._subjects.get(owner_id, subject_id)
        if not subject:
            raise NotFoundError("Subject not found")

        self._ensure_no_conflict(owner_id, day=day, start=start, end=end)

        now = self._clock()
        entry = TimetableEntry(
            entry_id=new_id(),
            owner_id=owner_id,
            subject_id=subject.subject_id,
            subject_name=subject.name,
            subject_code=subject.code,
            day=day,
            start_time=start,
            end_time=end,
            room=optional_text(room),
            instructor=subject.instructor,
            created_at=now,
            updated_at=now,
        )
        return self._timetable.add(entry)

    def update_entry(self, owner_id: str, entry_id: str, updates: dict) -> TimetableEntry:
        current = self._timetable.get(owner_id, entry_id)
        if not current:
            raise NotFoundError("Timetable entry not found")

        changes: dict = {}
        if "day" in updates:
            changes["day"] = require_choice(updates["day"], DayOfWeek, "Day")
        if "start_time" in updates:
            changes["start_time"] = require_time(updates["start_time"], "Start time")
        if "end_time" in updates:
            changes["end_time"] = require_time(updates["end_time"], "End time")
        if "room" in updates:
            changes["room"] = optional_text(updates["room"])
        if "subject_id" in updates and updates["subject_id"] != current.subject_id:
            subject = self._subjects.get(owner_id, require_non_empty(updates["subject_id"], "Subject"))
            if not subject:
                raise NotFoundError("Subject not found")
            changes.update(
                subject_id=subject.subject_id,
                subject_name=subject.name,
                subject_code=subject.code,
                instructor=subject.instructor,
            )

        updated = replace(current, **changes, updated_at=self._clock())
        if updated.start_time >= updated.end_time:
            raise ValidationError("End time must be after start time")

        self._ensure_no_conflict(
            owner_id,
            day=updated.day,
            start=updated.start_time,
            end=updated.end_time,
            exclude_entry_id=entry_id,
        )

        if not self._timetable.update(updated):
            raise NotFoundError("Timetable entry not found")
        return updated

    def delete_entry(self, owner_id: str, entry_id: str) -> None:
        if not self._timetable.delete(owner_id, entry_id):
            raise NotFoundError("Timetable entry not found")

    def find_current_class(self, owner_id: str, *, now: Optional[datetime] = None) -> Optional[TimetableEntry]:
        """Slot of today's weekday whose [start, end] range contains the current minute."""

        now = now or self._clock()
        current = now.time().replace(second=0, microsecond=0)
        for entry in self.entries_for_day(owner_id, DayOfWeek.from_date(now.date())):
            if entry.start_time <= current <= entry.end_time:
                return entry
        return None

    def _ensure_no_conflict(self, owner_id: str, *, day, start, end, exclude_entry_id: Optional[str] = None) -> None:
        clash = find_conflict(
            self._timetable.list_for_owner(owner_id),
            day=day,
            start_time=start,
            end_time=end,
            exclude_entry_id=exclude_entry_id,
        )
        if clash:
            logger.info(f"Rejected {day.value} {format_hhmm_range(start, end)} for owner={owner_id}: overlaps {clash.entry_id}")
            raise TimeConflictError(
                f"Time conflict with {clash.subject_name or clash.subject_id} on {day.value} "
                f"({format_hhmm_range(clash.start_time, clash.end_time)})"
            )
