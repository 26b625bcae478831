from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..common.datetime_utils import format_iso_date
from ..core.constants import ATTENDANCE_KEY
from ..database.local_storage import LocalStorage
from .model import AttendanceEntry
from .repository import AttendanceRepository


class LocalAttendanceRepository(AttendanceRepository):
    def __init__(self, storage: LocalStorage):
        self._storage = storage

    def list_for_owner(self, owner_id: str, entry_date: Optional[date] = None) -> Sequence[AttendanceEntry]:
        wanted = format_iso_date(entry_date) if entry_date else None
        return [
            AttendanceEntry.from_dict(r)
            for r in self._storage.get_item(ATTENDANCE_KEY)
            if r.get("owner_id") == owner_id and (wanted is None or r.get("date") == wanted)
        ]

    def get(self, owner_id: str, entry_id: str) -> Optional[AttendanceEntry]:
        for entry in self.list_for_owner(owner_id):
            if entry.entry_id == entry_id:
                return entry
        return None

    def add(self, entry: AttendanceEntry) -> AttendanceEntry:
        records = self._storage.get_item(ATTENDANCE_KEY)
        records.append(entry.to_dict())
        self._storage.set_item(ATTENDANCE_KEY, records)
        return entry

    def update(self, entry: AttendanceEntry) -> bool:
        records = self._storage.get_item(ATTENDANCE_KEY)
        for i, r in enumerate(records):
            if r.get("owner_id") == entry.owner_id and r.get("entry_id") == entry.entry_id:
                records[i] = entry.to_dict()
                self._storage.set_item(ATTENDANCE_KEY, records)
                return True
        return False

    def delete(self, owner_id: str, entry_id: str) -> bool:
        records = self._storage.get_item(ATTENDANCE_KEY)
        kept = [r for r in records if not (r.get("owner_id") == owner_id and r.get("entry_id") == entry_id)]
        if len(kept) == len(records):
            return False
        self._storage.set_item(ATTENDANCE_KEY, kept)
        return True

    def delete_for_subject(self, owner_id: str, subject_id: str) -> int:
        records = self._storage.get_item(ATTENDANCE_KEY)
        kept = [r for r in records if not (r.get("owner_id") == owner_id and r.get("subject_id") == subject_id)]
        removed = len(records) - len(kept)
        if removed:
            self._storage.set_item(ATTENDANCE_KEY, kept)
        return removed
