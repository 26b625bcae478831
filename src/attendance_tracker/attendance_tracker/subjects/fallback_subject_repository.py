from __future__ import annotations

from typing import Optional, Sequence

from ..database.fallback import FallbackRepository
from .model import Subject
from .repository import SubjectRepository


class FallbackSubjectRepository(FallbackRepository, SubjectRepository):
    def __init__(self, remote: SubjectRepository, local: SubjectRepository):
        super().__init__(remote, local, name="subjects")

    def list_for_owner(self, owner_id: str) -> Sequence[Subject]:
        return self._call("list_for_owner", owner_id)

    def get(self, owner_id: str, subject_id: str) -> Optional[Subject]:
        return self._call("get", owner_id, subject_id)

    def add(self, subject: Subject) -> Subject:
        return self._call("add", subject)

    def update(self, subject: Subject) -> bool:
        return self._call("update", subject)

    def delete(self, owner_id: str, subject_id: str) -> bool:
        return self._call("delete", owner_id, subject_id)
