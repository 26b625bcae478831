from __future__ import annotations

from datetime import date, time
from typing import Optional

from src.attendance_tracker.attendance_tracker.attendance.model import AttendanceEntry
from src.attendance_tracker.attendance_tracker.core.enums import AttendanceStatus, DayOfWeek
from src.attendance_tracker.attendance_tracker.subjects.model import Subject
from src.attendance_tracker.attendance_tracker.timetable.model import TimetableEntry

OWNER = "student-1"


class InMemorySubjects:
    def __init__(self):
        self.by_id: dict[str, Subject] = {}

    def list_for_owner(self, owner_id):
        return [s for s in self.by_id.values() if s.owner_id == owner_id]

    def get(self, owner_id, subject_id):
        s = self.by_id.get(subject_id)
        return s if s and s.owner_id == owner_id else None

    def add(self, subject):
        self.by_id[subject.subject_id] = subject
        return subject

    def update(self, subject):
        if subject.subject_id not in self.by_id:
            return False
        self.by_id[subject.subject_id] = subject
        return True

    def delete(self, owner_id, subject_id):
        return self.by_id.pop(subject_id, None) is not None


class InMemoryTimetable:
    def __init__(self):
        self.by_id: dict[str, TimetableEntry] = {}

    def list_for_owner(self, owner_id):
        return [t for t in self.by_id.values() if t.owner_id == owner_id]

    def get(self, owner_id, entry_id):
        t = self.by_id.get(entry_id)
        return t if t and t.owner_id == owner_id else None

    def add(self, entry):
        self.by_id[entry.entry_id] = entry
        return entry

    def update(self, entry):
        if entry.entry_id not in self.by_id:
            return False
        self.by_id[entry.entry_id] = entry
        return True

    def delete(self, owner_id, entry_id):
        return self.by_id.pop(entry_id, None) is not None

    def delete_for_subject(self, owner_id, subject_id):
        doomed = [k for k, t in self.by_id.items() if t.owner_id == owner_id and t.subject_id == subject_id]
        for k in doomed:
            del self.by_id[k]
        return len(doomed)


class InMemoryAttendance:
    def __init__(self):
        self.by_id: dict[str, AttendanceEntry] = {}
        self.fail_on_add_for: set[str] = set()

    def list_for_owner(self, owner_id, entry_date: Optional[date] = None):
        return [
            e
            for e in self.by_id.values()
            if e.owner_id == owner_id and (entry_date is None or e.entry_date == entry_date)
        ]

    def get(self, owner_id, entry_id):
        e = self.by_id.get(entry_id)
        return e if e and e.owner_id == owner_id else None

    def add(self, entry):
        if entry.subject_id in self.fail_on_add_for:
            raise RuntimeError("write failed")
        self.by_id[entry.entry_id] = entry
        return entry

    def update(self, entry):
        if entry.entry_id not in self.by_id:
            return False
        self.by_id[entry.entry_id] = entry
        return True

    def delete(self, owner_id, entry_id):
        return self.by_id.pop(entry_id, None) is not None

    def delete_for_subject(self, owner_id, subject_id):
        doomed = [k for k, e in self.by_id.items() if e.owner_id == owner_id and e.subject_id == subject_id]
        for k in doomed:
            del self.by_id[k]
        return len(doomed)


def make_subject(subject_id="math", *, owner_id=OWNER, name="Mathematics", code="MA101", **kwargs) -> Subject:
    return Subject(subject_id=subject_id, owner_id=owner_id, name=name, code=code, **kwargs)


def make_slot(
    entry_id,
    subject_id="math",
    *,
    day=DayOfWeek.MONDAY,
    start=time(9, 0),
    end=time(10, 0),
    owner_id=OWNER,
) -> TimetableEntry:
    return TimetableEntry(
        entry_id=entry_id,
        owner_id=owner_id,
        subject_id=subject_id,
        subject_name=subject_id.title(),
        day=day,
        start_time=start,
        end_time=end,
    )


def make_entry(entry_id, subject_id="math", *, on: date, status=AttendanceStatus.PRESENT, owner_id=OWNER):
    return AttendanceEntry(
        entry_id=entry_id,
        owner_id=owner_id,
        subject_id=subject_id,
        entry_date=on,
        status=status,
    )


