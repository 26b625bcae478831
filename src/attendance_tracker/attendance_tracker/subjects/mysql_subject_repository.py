from __future__ import annotations

from typing import Optional, Sequence

from ..core.enums import SubjectStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import all_rows, db_cursor, first_row, to_date
from .model import Subject
from .repository import SubjectRepository

_COLUMNS = """
    subject_id, owner_id, name, code, credit, instructor, total_classes, attended_classes,
    percentage, status, color, last_class, created_at, updated_at
"""


def _row_to_subject(r: dict) -> Subject:
    return Subject(
        subject_id=str(r["subject_id"]),
        owner_id=str(r["owner_id"]),
        name=r["name"],
        code=r["code"],
        credit=int(r.get("credit") or 0),
        instructor=r.get("instructor"),
        total_classes=int(r.get("total_classes") or 0),
        attended_classes=int(r.get("attended_classes") or 0),
        percentage=int(r.get("percentage") or 0),
        status=SubjectStatus(r["status"]),
        color=r["color"],
        last_class=to_date(r.get("last_class")),
        created_at=r.get("created_at"),
        updated_at=r.get("updated_at"),
    )


class MySQLSubjectRepository(SubjectRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_for_owner(self, owner_id: str) -> Sequence[Subject]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM subjects
                WHERE owner_id=%s
                ORDER BY created_at ASC
                """,
                (owner_id,),
            )
            return [_row_to_subject(r) for r in all_rows(cur)]

    def get(self, owner_id: str, subject_id: str) -> Optional[Subject]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM subjects WHERE owner_id=%s AND subject_id=%s",
                (owner_id, subject_id),
            )
            r = first_row(cur)
            return _row_to_subject(r) if r else None

    def add(self, subject: Subject) -> Subject:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO subjects(
                    subject_id, owner_id, name, code, credit, instructor, total_classes,
                    attended_classes, percentage, status, color, last_class, created_at, updated_at
                )
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s)
                """,
                (
                    subject.subject_id,
                    subject.owner_id,
                    subject.name,
                    subject.code,
                    subject.credit,
                    subject.instructor,
                    subject.total_classes,
                    subject.attended_classes,
                    subject.percentage,
                    subject.status.value,
                    subject.color,
                    subject.last_class,
                    subject.created_at,
                    subject.updated_at,
                ),
            )
        return subject

    def update(self, subject: Subject) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE subjects
                SET name=%s, code=%s, credit=%s, instructor=%s, total_classes=%s, attended_classes=%s,
                    percentage=%s, status=%s, color=%s, last_class=%s, updated_at=%s
                WHERE owner_id=%s AND subject_id=%s
                """,
                (
                    subject.name,
                    subject.code,
                    subject.credit,
                    subject.instructor,
                    subject.total_classes,
                    subject.attended_classes,
                    subject.percentage,
                    subject.status.value,
                    subject.color,
                    subject.last_class,
                    subject.updated_at,
                    subject.owner_id,
                    subject.subject_id,
                ),
            )
            return cur.rowcount > 0

    def delete(self, owner_id: str, subject_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM subjects WHERE owner_id=%s AND subject_id=%s", (owner_id, subject_id))
            return cur.rowcount > 0
