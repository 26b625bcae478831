from __future__ import annotations

from datetime import date, datetime, time, timedelta
from pathlib import Path

import pytest

from src.attendance_tracker.attendance_tracker.core.enums import AttendanceStatus, DayOfWeek
from src.attendance_tracker.attendance_tracker.database.bootstrap import iter_sql_statements
from src.attendance_tracker.attendance_tracker.database.mysql_base import db_cursor, to_date, to_time
from src.attendance_tracker.attendance_tracker.timetable.mysql_timetable_repository import MySQLTimetableRepository
from src.attendance_tracker.attendance_tracker.attendance.mysql_attendance_repository import MySQLAttendanceRepository

SCHEMA = Path(__file__).resolve().parents[2] / "database" / "schema.sql"


class FakeCursor:
    def __init__(self, rows):
        self.rows = rows
        self.executed: list[tuple] = []
        self.rowcount = len(rows)
        self.closed = False

    def execute(self, sql, params=None):
        self.executed.append((" ".join(sql.split()), params))

    def fetchone(self):
        return self.rows[0] if self.rows else None

    def fetchall(self):
        return self.rows

    def close(self):
        self.closed = True


class FakeConnection:
    def __init__(self, rows):
        self.cursor_obj = FakeCursor(rows)
        self.committed = False
        self.rolled_back = False
        self.closed = False

    def cursor(self, dictionary=True):
        return self.cursor_obj

    def commit(self):
        self.committed = True

    def rollback(self):
        self.rolled_back = True

    def close(self):
        self.closed = True


class FakeConnectionFactory:
    def __init__(self, rows=()):
        self.rows = list(rows)
        self.connections: list[FakeConnection] = []

    def connect(self):
        conn = FakeConnection(self.rows)
        self.connections.append(conn)
        return conn


@pytest.mark.parametrize(
    "value,expected",
    [
        (timedelta(hours=9, minutes=30), time(9, 30)),
        (time(13, 5), time(13, 5)),
        ("08:15:00", time(8, 15)),
        (None, None),
    ],
)
def test_to_time_accepts_connector_variants(value, expected):
    assert to_time(value) == expected


def test_to_date():
    assert to_date(date(2026, 5, 18)) == date(2026, 5, 18)
    assert to_date(datetime(2026, 5, 18, 10, 0)) == date(2026, 5, 18)
    assert to_date("2026-05-18") == date(2026, 5, 18)
    assert to_date(None) is None


def test_db_cursor_commits_and_closes():
    factory = FakeConnectionFactory()

    with db_cursor(factory) as (_, cur):
        cur.execute("SELECT 1")

    conn = factory.connections[0]
    assert conn.committed and conn.closed and not conn.rolled_back
    assert conn.cursor_obj.closed


def test_db_cursor_rolls_back_on_error():
    factory = FakeConnectionFactory()

    with pytest.raises(RuntimeError):
        with db_cursor(factory):
            raise RuntimeError("boom")

    conn = factory.connections[0]
    assert conn.rolled_back and conn.closed and not conn.committed


def test_schema_splits_into_create_statements():
    statements = list(iter_sql_statements(SCHEMA.read_text(encoding="utf-8")))

    creates = [s for s in statements if s.upper().startswith("CREATE TABLE")]
    assert len(creates) == 3
    assert any("uq_attendance_subject_date" in s for s in creates)


def test_splitter_keeps_semicolons_inside_quotes():
    sql = "-- comment; ignored\nINSERT INTO t VALUES ('a;b');\nSELECT \"x;y\";"

    assert list(iter_sql_statements(sql)) == ["INSERT INTO t VALUES ('a;b')", 'SELECT "x;y"']


def test_mysql_timetable_rows_are_mapped():
    factory = FakeConnectionFactory(
        [
            {
                "entry_id": "t1",
                "owner_id": "student-1",
                "subject_id": "math",
                "subject_name": "Mathematics",
                "subject_code": "MA101",
                "day_of_week": "Monday",
                "start_time": timedelta(hours=9),
                "end_time": timedelta(hours=10),
                "room": None,
                "instructor": None,
                "created_at": None,
                "updated_at": None,
            }
        ]
    )

    [entry] = MySQLTimetableRepository(factory).list_for_owner("student-1")

    assert entry.day == DayOfWeek.MONDAY
    assert (entry.start_time, entry.end_time) == (time(9, 0), time(10, 0))


def test_mysql_attendance_date_filter_is_parameterised():
    factory = FakeConnectionFactory(
        [
            {
                "entry_id": "a1",
                "owner_id": "student-1",
                "subject_id": "math",
                "subject_name": "Mathematics",
                "subject_code": "MA101",
                "entry_date": date(2026, 5, 18),
                "status": "present",
                "notes": None,
                "timetable_entry_id": None,
                "created_at": None,
                "updated_at": None,
            }
        ]
    )

    [entry] = MySQLAttendanceRepository(factory).list_for_owner("student-1", date(2026, 5, 18))

    assert entry.status == AttendanceStatus.PRESENT
    sql, params = factory.connections[0].cursor_obj.executed[0]
    assert "entry_date=%s" in sql
    assert params == ("student-1", date(2026, 5, 18))
