from __future__ import annotations

from typing import Optional, Sequence

from ..core.constants import SUBJECTS_KEY
from ..database.local_storage import LocalStorage
from .model import Subject
from .repository import SubjectRepository


class LocalSubjectRepository(SubjectRepository):
    def __init__(self, storage: LocalStorage):
        self._storage = storage

    def list_for_owner(self, owner_id: str) -> Sequence[Subject]:
        return [Subject.from_dict(r) for r in self._storage.get_item(SUBJECTS_KEY) if r.get("owner_id") == owner_id]

    def get(self, owner_id: str, subject_id: str) -> Optional[Subject]:
        for subject in self.list_for_owner(owner_id):
            if subject.subject_id == subject_id:
                return subject
        return None

    def add(self, subject: Subject) -> Subject:
        records = self._storage.get_item(SUBJECTS_KEY)
        records.append(subject.to_dict())
        self._storage.set_item(SUBJECTS_KEY, records)
        return subject

    def update(self, subject: Subject) -> bool:
        records = self._storage.get_item(SUBJECTS_KEY)
        for i, r in enumerate(records):
            if r.get("owner_id") == subject.owner_id and r.get("subject_id") == subject.subject_id:
                records[i] = subject.to_dict()
                self._storage.set_item(SUBJECTS_KEY, records)
                return True
        return False

    def delete(self, owner_id: str, subject_id: str) -> bool:
        records = self._storage.get_item(SUBJECTS_KEY)
        kept = [r for r in records if not (r.get("owner_id") == owner_id and r.get("subject_id") == subject_id)]
        if len(kept) == len(records):
            return False
        self._storage.set_item(SUBJECTS_KEY, kept)
        return True
