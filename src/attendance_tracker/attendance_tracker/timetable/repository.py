from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import TimetableEntry


class TimetableRepository(Protocol):
    def list_for_owner(self, owner_id: str) -> Sequence[TimetableEntry]:
        raise NotImplementedError

    def get(self, owner_id: str, entry_id: str) -> Optional[TimetableEntry]:
        raise NotImplementedError

    def add(self, entry: TimetableEntry) -> TimetableEntry:
        raise NotImplementedError

    def update(self, entry: TimetableEntry) -> bool:
        raise NotImplementedError

    def delete(self, owner_id: str, entry_id: str) -> bool:
        raise NotImplementedError

    def delete_for_subject(self, owner_id: str, subject_id: str) -> int:
        """Remove every slot of a subject. Returns the number of removed slots."""

        raise NotImplementedError
