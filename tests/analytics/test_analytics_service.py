from __future__ import annotations

from datetime import date, time, timedelta

from src.attendance_tracker.attendance_tracker.analytics.service import AnalyticsService
from src.attendance_tracker.attendance_tracker.core.enums import AttendanceStatus, DayOfWeek, RiskLevel
from tests.fakes import OWNER, make_entry, make_slot, make_subject


def _seed(subjects_repo, timetable_repo, attendance_repo):
    subjects_repo.add(make_subject("math"))
    subjects_repo.add(make_subject("phys", name="Physics", code="PH101"))
    timetable_repo.add(make_slot("t-math", "math", day=DayOfWeek.THURSDAY, start=time(9, 0), end=time(10, 0)))
    timetable_repo.add(make_slot("t-phys", "phys", day=DayOfWeek.MONDAY, start=time(9, 0), end=time(10, 0)))
    start = date(2026, 1, 8)
    for i in range(20):
        status = AttendanceStatus.PRESENT if i < 15 else AttendanceStatus.ABSENT
        attendance_repo.add(make_entry(f"a{i}", "math", on=start + timedelta(days=7 * i), status=status))
    # Another owner's data never leaks in.
    subjects_repo.add(make_subject("other", owner_id="someone-else"))


def _service(subjects_repo, timetable_repo, attendance_repo, clock):
    return AnalyticsService(subjects_repo, timetable_repo, attendance_repo, clock=clock)


def test_subjects_with_attendance_uses_clock_date(subjects_repo, timetable_repo, attendance_repo, clock):
    _seed(subjects_repo, timetable_repo, attendance_repo)
    service = _service(subjects_repo, timetable_repo, attendance_repo, clock)

    subjects = {s.subject_id: s for s in service.subjects_with_attendance(OWNER)}

    assert set(subjects) == {"math", "phys"}
    assert subjects["math"].actual_attendance_percentage == 75
    assert subjects["phys"].actual_attendance_percentage == 0
    assert subjects["phys"].total_scheduled_classes == 20


def test_predictions_and_study_schedule(subjects_repo, timetable_repo, attendance_repo, clock):
    _seed(subjects_repo, timetable_repo, attendance_repo)
    service = _service(subjects_repo, timetable_repo, attendance_repo, clock)

    report = service.predictions(OWNER)
    by_id = {p.subject_id: p for p in report.predictions}

    assert by_id["phys"].risk == RiskLevel.HIGH
    assert by_id["phys"].classes_to_attend == 23
    assert report.overall.at_risk_subjects >= 1
    assert service.study_schedule(OWNER)[:2] == ["Morning: Focus on high-risk subjects", "- Physics: Catch up on missed topics"]


def test_dashboard_summary(subjects_repo, timetable_repo, attendance_repo, clock):
    _seed(subjects_repo, timetable_repo, attendance_repo)
    service = _service(subjects_repo, timetable_repo, attendance_repo, clock)

    summary = service.dashboard(OWNER)

    assert summary.total_subjects == 2
    # (75 + 0) / 2 = 37.5
    assert summary.average_attendance == 38
    assert summary.classes_this_week == 2
    assert summary.at_risk_subjects == 1
    assert summary.best_subject == "Mathematics"
    assert [t.entry_id for t in summary.todays_classes] == ["t-math"]
    assert summary.current_class is not None and summary.current_class.entry_id == "t-math"


def test_dashboard_for_new_owner_is_empty(subjects_repo, timetable_repo, attendance_repo, clock):
    service = _service(subjects_repo, timetable_repo, attendance_repo, clock)

    summary = service.dashboard(OWNER)

    assert summary.total_subjects == 0
    assert summary.average_attendance == 0
    assert summary.best_subject is None
    assert summary.current_class is None
