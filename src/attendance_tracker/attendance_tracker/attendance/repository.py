from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import AttendanceEntry


class AttendanceRepository(Protocol):
    def list_for_owner(self, owner_id: str, entry_date: Optional[date] = None) -> Sequence[AttendanceEntry]:
        raise NotImplementedError

    def get(self, owner_id: str, entry_id: str) -> Optional[AttendanceEntry]:
        raise NotImplementedError

    def add(self, entry: AttendanceEntry) -> AttendanceEntry:
        raise NotImplementedError

    def update(self, entry: AttendanceEntry) -> bool:
        raise NotImplementedError

    def delete(self, owner_id: str, entry_id: str) -> bool:
        raise NotImplementedError

    def delete_for_subject(self, owner_id: str, subject_id: str) -> int:
        raise NotImplementedError
