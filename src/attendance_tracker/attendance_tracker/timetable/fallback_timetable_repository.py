from __future__ import annotations

from typing import Optional, Sequence

from ..database.fallback import FallbackRepository
from .model import TimetableEntry
from .repository import TimetableRepository


class FallbackTimetableRepository(FallbackRepository, TimetableRepository):
    def __init__(self, remote: TimetableRepository, local: TimetableRepository):
        super().__init__(remote, local, name="timetable")

    def list_for_owner(self, owner_id: str) -> Sequence[TimetableEntry]:
        return self._call("list_for_owner", owner_id)

    def get(self, owner_id: str, entry_id: str) -> Optional[TimetableEntry]:
        return self._call("get", owner_id, entry_id)

    def add(self, entry: TimetableEntry) -> TimetableEntry:
        return self._call("add", entry)

    def update(self, entry: TimetableEntry) -> bool:
        return self._call("update", entry)

    def delete(self, owner_id: str, entry_id: str) -> bool:
        return self._call("delete", owner_id, entry_id)

    def delete_for_subject(self, owner_id: str, subject_id: str) -> int:
        return self._call("delete_for_subject", owner_id, subject_id)
