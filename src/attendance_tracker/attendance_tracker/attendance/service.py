from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date, datetime
from typing import Callable, Iterable, Optional

from ..common.datetime_utils import now_local
from ..common.ids import new_id
from ..common.validators import optional_text, require_choice, require_date, require_non_empty
from ..core.enums import AttendanceStatus, DayOfWeek
from ..core.exceptions import BulkAttendanceError, DuplicateAttendanceError, NotFoundError
from ..subjects.repository import SubjectRepository
from ..timetable.repository import TimetableRepository
from .model import AttendanceEntry, AttendanceStats
from .repository import AttendanceRepository
from .stats import summarize_entries

logger = logging.getLogger(__name__)


class AttendanceService:
    """Use cases around attendance entries.

    A subject has at most one entry per date: ``add_attendance`` rejects a
    second one and ``mark_attendance`` updates the existing entry instead.
    """

    def __init__(
        self,
        attendance: AttendanceRepository,
        subjects: SubjectRepository,
        timetable: TimetableRepository | None = None,
        *,
        clock: Callable[[], datetime] = now_local,
    ):
        self._attendance = attendance
        self._subjects = subjects
        self._timetable = timetable
        self._clock = clock

    def get_attendance(self, owner_id: str, entry_date: Optional[date] = None) -> list[AttendanceEntry]:
        return list(self._attendance.list_for_owner(owner_id, entry_date))

    def find_entry(self, owner_id: str, *, subject_id: str, entry_date: date) -> Optional[AttendanceEntry]:
        for entry in self._attendance.list_for_owner(owner_id, entry_date):
            if entry.subject_id == subject_id:
                return entry
        return None

    def add_attendance(
        self,
        owner_id: str,
        *,
        subject_id: str,
        entry_date,
        status,
        notes: Optional[str] = None,
        timetable_entry_id: Optional[str] = None,
    ) -> AttendanceEntry:
        subject_id = require_non_empty(subject_id, "Subject")
        entry_date = require_date(entry_date, "Date")
        status = require_choice(status, AttendanceStatus, "Status")

        subject = self._subjects.get(owner_id, subject_id)
        if not subject:
            raise NotFoundError("Subject not found")

        if self.find_entry(owner_id, subject_id=subject_id, entry_date=entry_date):
            raise DuplicateAttendanceError(
                f"Attendance for {subject.name} on {entry_date.isoformat()} is already recorded"
            )

        now = self._clock()
        entry = AttendanceEntry(
            entry_id=new_id(),
            owner_id=owner_id,
            subject_id=subject.subject_id,
            subject_name=subject.name,
            subject_code=subject.code,
            entry_date=entry_date,
            status=status,
            notes=optional_text(notes),
            timetable_entry_id=timetable_entry_id,
            created_at=now,
            updated_at=now,
        )
        return self._attendance.add(entry)

    def update_attendance(self, owner_id: str, entry_id: str, updates: dict) -> AttendanceEntry:
        current = self._attendance.get(owner_id, entry_id)
        if not current:
            raise NotFoundError("Attendance entry not found")

        # Keys with a None value are ignored, like missing keys.
        updates = {k: v for k, v in updates.items() if v is not None}

        changes: dict = {}
        if "status" in updates:
            changes["status"] = require_choice(updates["status"], AttendanceStatus, "Status")
        if "notes" in updates:
            changes["notes"] = optional_text(updates["notes"])
        if "date" in updates:
            new_date = require_date(updates["date"], "Date")
            if new_date != current.entry_date:
                clash = self.find_entry(owner_id, subject_id=current.subject_id, entry_date=new_date)
                if clash:
                    raise DuplicateAttendanceError(
                        f"Attendance for {current.subject_name or current.subject_id} on "
                        f"{new_date.isoformat()} is already recorded"
                    )
            changes["entry_date"] = new_date

        updated = replace(current, **changes, updated_at=self._clock())
        if not self._attendance.update(updated):
            raise NotFoundError("Attendance entry not found")
        return updated

    def delete_attendance(self, owner_id: str, entry_id: str) -> None:
        if not self._attendance.delete(owner_id, entry_id):
            raise NotFoundError("Attendance entry not found")

    def mark_attendance(
        self,
        owner_id: str,
        *,
        subject_id: str,
        entry_date,
        status,
        notes: Optional[str] = None,
    ) -> AttendanceEntry:
        """Record ``status`` for a subject on a date, updating the existing entry if any."""

        subject_id = require_non_empty(subject_id, "Subject")
        entry_date = require_date(entry_date, "Date")
        status = require_choice(status, AttendanceStatus, "Status")
        existing = self.find_entry(owner_id, subject_id=subject_id, entry_date=entry_date)
        if existing:
            updates = {"status": status}
            if notes is not None:
                updates["notes"] = notes
            return self.update_attendance(owner_id, existing.entry_id, updates)
        return self.add_attendance(owner_id, subject_id=subject_id, entry_date=entry_date, status=status, notes=notes)

    def add_bulk_attendance(self, owner_id: str, *, entry_date, status, subject_ids: Iterable[str]) -> list[AttendanceEntry]:
        entry_date = require_date(entry_date, "Date")
        status = require_choice(status, AttendanceStatus, "Status")

        written: list[AttendanceEntry] = []
        try:
            for subject_id in subject_ids:
                written.append(
                    self.mark_attendance(owner_id, subject_id=subject_id, entry_date=entry_date, status=status)
                )
        except Exception as e:
            logger.exception(f"Bulk attendance stopped after {len(written)} entries for owner={owner_id}")
            raise BulkAttendanceError("Failed to update attendance") from e
        return written

    def mark_day(self, owner_id: str, *, entry_date, status) -> list[AttendanceEntry]:
        """Set every class of a date to ``status``.

        Existing entries of the date are updated; timetable subjects of that
        weekday without an entry get a new one. The result is re-read from the
        store.
        """

        entry_date = require_date(entry_date, "Date")
        status = require_choice(status, AttendanceStatus, "Status")

        existing = self.get_attendance(owner_id, entry_date)
        marked = {e.subject_id for e in existing}

        slots = []
        if self._timetable is not None:
            day = DayOfWeek.from_date(entry_date)
            slots = [t for t in self._timetable.list_for_owner(owner_id) if t.day == day]

        try:
            for entry in existing:
                self.update_attendance(owner_id, entry.entry_id, {"status": status})
            for slot in slots:
                if slot.subject_id in marked or not self._subjects.get(owner_id, slot.subject_id):
                    continue
                self.add_attendance(
                    owner_id,
                    subject_id=slot.subject_id,
                    entry_date=entry_date,
                    status=status,
                    timetable_entry_id=slot.entry_id,
                )
                marked.add(slot.subject_id)
        except Exception as e:
            logger.exception(f"Marking {entry_date.isoformat()} as {status.value} failed for owner={owner_id}")
            raise BulkAttendanceError("Failed to update attendance") from e

        return self.get_attendance(owner_id, entry_date)

    def stats(self, owner_id: str, *, subject_id: Optional[str] = None) -> AttendanceStats:
        entries = self.get_attendance(owner_id)
        if subject_id:
            entries = [e for e in entries if e.subject_id == subject_id]
        return summarize_entries(entries)
