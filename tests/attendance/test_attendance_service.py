from __future__ import annotations

from datetime import date, time

import pytest

from src.attendance_tracker.attendance_tracker.attendance.service import AttendanceService
from src.attendance_tracker.attendance_tracker.core.enums import AttendanceStatus, DayOfWeek
from src.attendance_tracker.attendance_tracker.core.exceptions import (
    BulkAttendanceError,
    DuplicateAttendanceError,
    NotFoundError,
    ValidationError,
)
from tests.fakes import OWNER, make_slot, make_subject

MONDAY = date(2026, 5, 18)


@pytest.fixture
def service(subjects_repo, timetable_repo, attendance_repo, clock):
    subjects_repo.add(make_subject("math"))
    subjects_repo.add(make_subject("phys", name="Physics", code="PH101"))
    subjects_repo.add(make_subject("chem", name="Chemistry", code="CH101"))
    return AttendanceService(attendance_repo, subjects_repo, timetable_repo, clock=clock)


def test_add_attendance_denormalises_subject(service, fixed_now):
    entry = service.add_attendance(OWNER, subject_id="math", entry_date="2026-05-18", status="present", notes=" quiz ")

    assert entry.entry_date == MONDAY
    assert entry.status == AttendanceStatus.PRESENT
    assert entry.subject_name == "Mathematics"
    assert entry.subject_code == "MA101"
    assert entry.notes == "quiz"
    assert entry.created_at == fixed_now
    assert service.get_attendance(OWNER) == [entry]
    assert service.get_attendance(OWNER, MONDAY) == [entry]
    assert service.get_attendance(OWNER, date(2026, 5, 19)) == []


def test_second_entry_for_same_subject_and_date_is_rejected(service):
    service.add_attendance(OWNER, subject_id="math", entry_date=MONDAY, status="present")

    with pytest.raises(DuplicateAttendanceError):
        service.add_attendance(OWNER, subject_id="math", entry_date=MONDAY, status="absent")

    # Other subject, same day is fine.
    service.add_attendance(OWNER, subject_id="phys", entry_date=MONDAY, status="absent")
    assert len(service.get_attendance(OWNER, MONDAY)) == 2


@pytest.mark.parametrize(
    "kwargs,error",
    [
        ({"subject_id": "math", "entry_date": "18/05/2026", "status": "present"}, ValidationError),
        ({"subject_id": "math", "entry_date": "2026-05-18", "status": "late"}, ValidationError),
        ({"subject_id": "", "entry_date": "2026-05-18", "status": "present"}, ValidationError),
        ({"subject_id": "missing", "entry_date": "2026-05-18", "status": "present"}, NotFoundError),
    ],
)
def test_add_attendance_validation(service, kwargs, error):
    with pytest.raises(error):
        service.add_attendance(OWNER, **kwargs)


def test_update_attendance_ignores_none_and_keeps_unmentioned_fields(service):
    entry = service.add_attendance(OWNER, subject_id="math", entry_date=MONDAY, status="present", notes="quiz")

    updated = service.update_attendance(OWNER, entry.entry_id, {"status": "off", "notes": None})

    assert updated.status == AttendanceStatus.OFF
    assert updated.notes == "quiz"
    assert updated.entry_date == MONDAY


def test_update_attendance_date_change_respects_uniqueness(service):
    service.add_attendance(OWNER, subject_id="math", entry_date="2026-05-19", status="present")
    entry = service.add_attendance(OWNER, subject_id="math", entry_date=MONDAY, status="present")

    with pytest.raises(DuplicateAttendanceError):
        service.update_attendance(OWNER, entry.entry_id, {"date": "2026-05-19"})

    moved = service.update_attendance(OWNER, entry.entry_id, {"date": "2026-05-20"})
    assert moved.entry_date == date(2026, 5, 20)


def test_update_and_delete_unknown_entry(service):
    with pytest.raises(NotFoundError):
        service.update_attendance(OWNER, "missing", {"status": "present"})
    with pytest.raises(NotFoundError):
        service.delete_attendance(OWNER, "missing")


def test_mark_attendance_upserts(service):
    first = service.mark_attendance(OWNER, subject_id="math", entry_date=MONDAY, status="present")
    second = service.mark_attendance(OWNER, subject_id="math", entry_date=MONDAY, status="absent")

    assert second.entry_id == first.entry_id
    assert [e.status for e in service.get_attendance(OWNER)] == [AttendanceStatus.ABSENT]


def test_add_bulk_attendance(service):
    service.mark_attendance(OWNER, subject_id="math", entry_date=MONDAY, status="absent")

    written = service.add_bulk_attendance(OWNER, entry_date=MONDAY, status="off", subject_ids=["math", "phys"])

    assert [e.subject_id for e in written] == ["math", "phys"]
    assert {e.status for e in service.get_attendance(OWNER, MONDAY)} == {AttendanceStatus.OFF}
    assert len(service.get_attendance(OWNER, MONDAY)) == 2


def test_bulk_failure_keeps_earlier_writes_and_raises_one_error(service, attendance_repo):
    attendance_repo.fail_on_add_for.add("phys")

    with pytest.raises(BulkAttendanceError):
        service.add_bulk_attendance(OWNER, entry_date=MONDAY, status="present", subject_ids=["math", "phys", "chem"])

    assert [e.subject_id for e in service.get_attendance(OWNER, MONDAY)] == ["math"]


def test_mark_day_updates_existing_and_adds_timetable_subjects(service, timetable_repo):
    timetable_repo.add(make_slot("t-math", "math", day=DayOfWeek.MONDAY, start=time(9, 0), end=time(10, 0)))
    timetable_repo.add(make_slot("t-phys", "phys", day=DayOfWeek.MONDAY, start=time(10, 0), end=time(11, 0)))
    timetable_repo.add(make_slot("t-chem", "chem", day=DayOfWeek.TUESDAY, start=time(9, 0), end=time(10, 0)))
    service.mark_attendance(OWNER, subject_id="math", entry_date=MONDAY, status="present")

    entries = service.mark_day(OWNER, entry_date=MONDAY, status="off")

    assert sorted(e.subject_id for e in entries) == ["math", "phys"]
    assert {e.status for e in entries} == {AttendanceStatus.OFF}
    phys = next(e for e in entries if e.subject_id == "phys")
    assert phys.timetable_entry_id == "t-phys"


def test_mark_day_skips_slots_of_deleted_subjects(service, subjects_repo, timetable_repo):
    timetable_repo.add(make_slot("t-gone", "gone", day=DayOfWeek.MONDAY))

    assert service.mark_day(OWNER, entry_date=MONDAY, status="present") == []


def test_stats_excludes_off_days_from_percentage(service):
    service.add_attendance(OWNER, subject_id="math", entry_date="2026-05-18", status="present")
    service.add_attendance(OWNER, subject_id="math", entry_date="2026-05-19", status="present")
    service.add_attendance(OWNER, subject_id="math", entry_date="2026-05-20", status="absent")
    service.add_attendance(OWNER, subject_id="math", entry_date="2026-05-21", status="off")
    service.add_attendance(OWNER, subject_id="phys", entry_date="2026-05-21", status="absent")

    stats = service.stats(OWNER, subject_id="math")

    assert (stats.total, stats.present, stats.absent, stats.off) == (4, 2, 1, 1)
    assert stats.percentage == 67
    assert service.stats(OWNER).total == 5


def test_mark_attendance_validates_status_before_touching_an_existing_entry(service, attendance_repo):
    entry = service.add_attendance(OWNER, subject_id="math", entry_date=MONDAY, status="present")

    with pytest.raises(ValidationError):
        service.mark_attendance(OWNER, subject_id="math", entry_date=MONDAY, status=None)
    with pytest.raises(ValidationError):
        service.mark_attendance(OWNER, subject_id="math", entry_date=MONDAY, status="late")
    with pytest.raises(ValidationError):
        service.mark_attendance(OWNER, subject_id="  ", entry_date=MONDAY, status="absent")

    assert attendance_repo.by_id[entry.entry_id].status == AttendanceStatus.PRESENT


def test_update_attendance_raises_when_the_store_reports_no_row(service, attendance_repo, monkeypatch):
    entry = service.add_attendance(OWNER, subject_id="math", entry_date=MONDAY, status="present")
    monkeypatch.setattr(attendance_repo, "update", lambda updated: False)

    with pytest.raises(NotFoundError):
        service.update_attendance(OWNER, entry.entry_id, {"status": "absent"})
