from __future__ import annotations

from typing import Optional, Sequence

from ..core.enums import DayOfWeek
from ..database.connection import DatabaseConnection
from ..database.mysql_base import all_rows, db_cursor, first_row, to_time
from .model import TimetableEntry
from .repository import TimetableRepository

_COLUMNS = """
    entry_id, owner_id, subject_id, subject_name, subject_code, day_of_week, start_time, end_time,
    room, instructor, created_at, updated_at
"""


def _row_to_entry(r: dict) -> TimetableEntry:
    return TimetableEntry(
        entry_id=str(r["entry_id"]),
        owner_id=str(r["owner_id"]),
        subject_id=str(r["subject_id"]),
        subject_name=r.get("subject_name") or "",
        subject_code=r.get("subject_code") or "",
        day=DayOfWeek(r["day_of_week"]),
        start_time=to_time(r["start_time"]),
        end_time=to_time(r["end_time"]),
        room=r.get("room"),
        instructor=r.get("instructor"),
        created_at=r.get("created_at"),
        updated_at=r.get("updated_at"),
    )


class MySQLTimetableRepository(TimetableRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_for_owner(self, owner_id: str) -> Sequence[TimetableEntry]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM timetable_entries
                WHERE owner_id=%s
                ORDER BY created_at ASC
                """,
                (owner_id,),
            )
            return [_row_to_entry(r) for r in all_rows(cur)]

    def get(self, owner_id: str, entry_id: str) -> Optional[TimetableEntry]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM timetable_entries WHERE owner_id=%s AND entry_id=%s",
                (owner_id, entry_id),
            )
            r = first_row(cur)
            return _row_to_entry(r) if r else None

    def add(self, entry: TimetableEntry) -> TimetableEntry:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO timetable_entries(
                    entry_id, owner_id, subject_id, subject_name, subject_code, day_of_week,
                    start_time, end_time, room, instructor, created_at, updated_at
                )
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s)
                """,
                (
                    entry.entry_id,
                    entry.owner_id,
                    entry.subject_id,
                    entry.subject_name,
                    entry.subject_code,
                    entry.day.value,
                    entry.start_time,
                    entry.end_time,
                    entry.room,
                    entry.instructor,
                    entry.created_at,
                    entry.updated_at,
                ),
            )
        return entry

    def update(self, entry: TimetableEntry) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE timetable_entries
                SET subject_id=%s, subject_name=%s, subject_code=%s, day_of_week=%s, start_time=%s,
                    end_time=%s, room=%s, instructor=%s, updated_at=%s
                WHERE owner_id=%s AND entry_id=%s
                """,
                (
                    entry.subject_id,
                    entry.subject_name,
                    entry.subject_code,
                    entry.day.value,
                    entry.start_time,
                    entry.end_time,
                    entry.room,
                    entry.instructor,
                    entry.updated_at,
                    entry.owner_id,
                    entry.entry_id,
                ),
            )
            return cur.rowcount > 0

    def delete(self, owner_id: str, entry_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM timetable_entries WHERE owner_id=%s AND entry_id=%s", (owner_id, entry_id))
            return cur.rowcount > 0

    def delete_for_subject(self, owner_id: str, subject_id: str) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM timetable_entries WHERE owner_id=%s AND subject_id=%s", (owner_id, subject_id))
            return int(cur.rowcount)
