"""Join subjects with their timetable and attendance into live statistics.

Scheduled classes are estimated, not counted from a calendar: every weekly slot
is assumed to have happened once per full week elapsed since January 1st of the
current year. Holidays and semester boundaries are not modelled; days marked
``off`` are removed from the denominator instead.
"""
from __future__ import annotations

from datetime import date
from typing import Iterable, Optional, Sequence

from ..attendance.model import AttendanceEntry
from ..common.datetime_utils import round_half_up
from ..core.enums import AttendanceStatus
from ..subjects.model import Subject
from ..subjects.status import DISPLAY_PROFILE, classify_status
from ..timetable.model import TimetableEntry
from .model import SubjectWithAttendance


def weeks_elapsed(today: date) -> int:
    days = (today - date(today.year, 1, 1)).days
    return days // 7


def aggregate_subject(
    subject: Subject,
    timetable: Sequence[TimetableEntry],
    attendance: Sequence[AttendanceEntry],
    *,
    today: date,
) -> SubjectWithAttendance:
    entries = tuple(e for e in attendance if e.subject_id == subject.subject_id)
    slots = [t for t in timetable if t.subject_id == subject.subject_id]

    total_scheduled = len(slots) * weeks_elapsed(today)

    present = sum(1 for e in entries if e.status == AttendanceStatus.PRESENT)
    absent = sum(1 for e in entries if e.status == AttendanceStatus.ABSENT)
    off = sum(1 for e in entries if e.status == AttendanceStatus.OFF)

    # Can go negative when more days are logged off than the estimate schedules.
    attendable = total_scheduled - off
    percentage = round_half_up(present / attendable * 100) if attendable > 0 else 0

    base = {name: getattr(subject, name) for name in Subject.__dataclass_fields__}
    base.update(
        total_classes=total_scheduled,
        attended_classes=present,
        percentage=percentage,
        status=classify_status(percentage, DISPLAY_PROFILE),
    )
    return SubjectWithAttendance(
        **base,
        attendance_entries=entries,
        total_scheduled_classes=total_scheduled,
        present_classes=present,
        absent_classes=absent,
        off_classes=off,
        actual_attendance_percentage=percentage,
    )


def aggregate_subjects(
    subjects: Iterable[Subject],
    timetable: Iterable[TimetableEntry],
    attendance: Iterable[AttendanceEntry],
    *,
    today: Optional[date] = None,
) -> list[SubjectWithAttendance]:
    """One SubjectWithAttendance per subject, in input order. Never raises on empty input."""

    today = today or date.today()
    timetable = list(timetable)
    attendance = list(attendance)
    return [aggregate_subject(s, timetable, attendance, today=today) for s in subjects]
