from __future__ import annotations

from typing import Optional, Sequence

from ..core.constants import TIMETABLE_KEY
from ..database.local_storage import LocalStorage
from .model import TimetableEntry
from .repository import TimetableRepository


class LocalTimetableRepository(TimetableRepository):
    def __init__(self, storage: LocalStorage):
        self._storage = storage

    def list_for_owner(self, owner_id: str) -> Sequence[TimetableEntry]:
        return [
            TimetableEntry.from_dict(r) for r in self._storage.get_item(TIMETABLE_KEY) if r.get("owner_id") == owner_id
        ]

    def get(self, owner_id: str, entry_id: str) -> Optional[TimetableEntry]:
        for entry in self.list_for_owner(owner_id):
            if entry.entry_id == entry_id:
                return entry
        return None

    def add(self, entry: TimetableEntry) -> TimetableEntry:
        records = self._storage.get_item(TIMETABLE_KEY)
        records.append(entry.to_dict())
        self._storage.set_item(TIMETABLE_KEY, records)
        return entry

    def update(self, entry: TimetableEntry) -> bool:
        records = self._storage.get_item(TIMETABLE_KEY)
        for i, r in enumerate(records):
            if r.get("owner_id") == entry.owner_id and r.get("entry_id") == entry.entry_id:
                records[i] = entry.to_dict()
                self._storage.set_item(TIMETABLE_KEY, records)
                return True
        return False

    def delete(self, owner_id: str, entry_id: str) -> bool:
        records = self._storage.get_item(TIMETABLE_KEY)
        kept = [r for r in records if not (r.get("owner_id") == owner_id and r.get("entry_id") == entry_id)]
        if len(kept) == len(records):
            return False
        self._storage.set_item(TIMETABLE_KEY, kept)
        return True

    def delete_for_subject(self, owner_id: str, subject_id: str) -> int:
        records = self._storage.get_item(TIMETABLE_KEY)
        kept = [r for r in records if not (r.get("owner_id") == owner_id and r.get("subject_id") == subject_id)]
        removed = len(records) - len(kept)
        if removed:
            self._storage.set_item(TIMETABLE_KEY, kept)
        return removed
