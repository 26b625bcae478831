from __future__ import annotations

from datetime import datetime

import pytest

from tests.fakes import InMemoryAttendance, InMemorySubjects, InMemoryTimetable


@pytest.fixture
def fixed_now() -> datetime:
    # Thursday, exactly 20 full weeks after January 1st.
    return datetime(2026, 5, 21, 9, 30, 0)


@pytest.fixture
def clock(fixed_now):
    return lambda: fixed_now


@pytest.fixture
def subjects_repo() -> InMemorySubjects:
    return InMemorySubjects()


@pytest.fixture
def timetable_repo() -> InMemoryTimetable:
    return InMemoryTimetable()


@pytest.fixture
def attendance_repo() -> InMemoryAttendance:
    return InMemoryAttendance()


@pytest.fixture
def app(tmp_path, monkeypatch):
    from src.attendance_tracker.attendance_tracker.main import create_app

    monkeypatch.setenv("APP_ENV", "testing")
    return create_app(
        {
            "STORAGE_BACKEND": "local",
            "LOCAL_STORAGE_PATH": str(tmp_path / "storage.json"),
            "SUBJECT_LIST_CSV": None,
            "AUTO_INIT_DB": False,
        }
    )


@pytest.fixture
def client(app):
    return app.test_client()
