from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..core.enums import AttendanceStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import all_rows, db_cursor, first_row, to_date
from .model import AttendanceEntry
from .repository import AttendanceRepository

_COLUMNS = """
    entry_id, owner_id, subject_id, subject_name, subject_code, entry_date, status, notes,
    timetable_entry_id, created_at, updated_at
"""


def _row_to_entry(r: dict) -> AttendanceEntry:
    return AttendanceEntry(
        entry_id=str(r["entry_id"]),
        owner_id=str(r["owner_id"]),
        subject_id=str(r["subject_id"]),
        subject_name=r.get("subject_name") or "",
        subject_code=r.get("subject_code") or "",
        entry_date=to_date(r["entry_date"]),
        status=AttendanceStatus(r["status"]),
        notes=r.get("notes"),
        timetable_entry_id=r.get("timetable_entry_id"),
        created_at=r.get("created_at"),
        updated_at=r.get("updated_at"),
    )


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_for_owner(self, owner_id: str, entry_date: Optional[date] = None) -> Sequence[AttendanceEntry]:
        clauses = ["owner_id=%s"]
        params: list[object] = [owner_id]
        if entry_date is not None:
            clauses.append("entry_date=%s")
            params.append(entry_date)

        where = " AND ".join(clauses)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM attendance_entries
                WHERE {where}
                ORDER BY entry_date ASC, created_at ASC
                """,
                tuple(params),
            )
            return [_row_to_entry(r) for r in all_rows(cur)]

    def get(self, owner_id: str, entry_id: str) -> Optional[AttendanceEntry]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM attendance_entries WHERE owner_id=%s AND entry_id=%s",
                (owner_id, entry_id),
            )
            r = first_row(cur)
            return _row_to_entry(r) if r else None

    def add(self, entry: AttendanceEntry) -> AttendanceEntry:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO attendance_entries(
                    entry_id, owner_id, subject_id, subject_name, subject_code, entry_date, status,
                    notes, timetable_entry_id, created_at, updated_at
                )
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s)
                """,
                (
                    entry.entry_id,
                    entry.owner_id,
                    entry.subject_id,
                    entry.subject_name,
                    entry.subject_code,
                    entry.entry_date,
                    entry.status.value,
                    entry.notes,
                    entry.timetable_entry_id,
                    entry.created_at,
                    entry.updated_at,
                ),
            )
        return entry

    def update(self, entry: AttendanceEntry) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE attendance_entries
                SET entry_date=%s, status=%s, notes=%s, subject_name=%s, subject_code=%s, updated_at=%s
                WHERE owner_id=%s AND entry_id=%s
                """,
                (
                    entry.entry_date,
                    entry.status.value,
                    entry.notes,
                    entry.subject_name,
                    entry.subject_code,
                    entry.updated_at,
                    entry.owner_id,
                    entry.entry_id,
                ),
            )
            return cur.rowcount > 0

    def delete(self, owner_id: str, entry_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM attendance_entries WHERE owner_id=%s AND entry_id=%s", (owner_id, entry_id))
            return cur.rowcount > 0

    def delete_for_subject(self, owner_id: str, subject_id: str) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM attendance_entries WHERE owner_id=%s AND subject_id=%s", (owner_id, subject_id))
            return int(cur.rowcount)
