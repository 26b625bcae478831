from __future__ import annotations

from contextlib import contextmanager
from datetime import date, datetime, time, timedelta
from typing import Any, Iterator, Optional

from .connection import DatabaseConnection


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True) -> Iterator[tuple]:
    """Cursor on a fresh connection; commits on success and rolls back on error."""

    conn = conn_factory.connect()
    cur = conn.cursor(dictionary=dictionary)
    try:
        yield conn, cur
        conn.commit()
    except Exception:
        conn.rollback()
        raise
    finally:
        cur.close()
        conn.close()


def first_row(cur) -> Optional[dict]:
    return cur.fetchone() or None


def all_rows(cur) -> list[dict]:
    return list(cur.fetchall() or [])


def to_time(value: Any) -> Optional[time]:
    """TIME column value as ``datetime.time``.

    The pure-Python connector hands TIME back as ``timedelta``; the C extension
    and some drivers use ``time`` or 'HH:MM:SS' strings.
    """

    if value is None or isinstance(value, time):
        return value
    if isinstance(value, timedelta):
        minutes = int(value.total_seconds()) % 86400 // 60
        return time(hour=minutes // 60, minute=minutes % 60)
    if isinstance(value, str):
        hh, mm, *_ = value.strip().split(":")
        return time(hour=int(hh), minute=int(mm))
    raise TypeError(f"Unsupported MySQL TIME value: {value!r}")


def to_date(value: Any) -> Optional[date]:
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return datetime.strptime(str(value), "%Y-%m-%d").date()
