from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..database.fallback import FallbackRepository
from .model import AttendanceEntry
from .repository import AttendanceRepository


class FallbackAttendanceRepository(FallbackRepository, AttendanceRepository):
    def __init__(self, remote: AttendanceRepository, local: AttendanceRepository):
        super().__init__(remote, local, name="attendance")

    def list_for_owner(self, owner_id: str, entry_date: Optional[date] = None) -> Sequence[AttendanceEntry]:
        return self._call("list_for_owner", owner_id, entry_date)

    def get(self, owner_id: str, entry_id: str) -> Optional[AttendanceEntry]:
        return self._call("get", owner_id, entry_id)

    def add(self, entry: AttendanceEntry) -> AttendanceEntry:
        return self._call("add", entry)

    def update(self, entry: AttendanceEntry) -> bool:
        return self._call("update", entry)

    def delete(self, owner_id: str, entry_id: str) -> bool:
        return self._call("delete", owner_id, entry_id)

    def delete_for_subject(self, owner_id: str, subject_id: str) -> int:
        return self._call("delete_for_subject", owner_id, subject_id)
