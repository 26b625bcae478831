from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Subject


class SubjectRepository(Protocol):
    def list_for_owner(self, owner_id: str) -> Sequence[Subject]:
        raise NotImplementedError

    def get(self, owner_id: str, subject_id: str) -> Optional[Subject]:
        raise NotImplementedError

    def add(self, subject: Subject) -> Subject:
        raise NotImplementedError

    def update(self, subject: Subject) -> bool:
        """Replace the stored record with ``subject`` (matched by owner and id)."""

        raise NotImplementedError

    def delete(self, owner_id: str, subject_id: str) -> bool:
        raise NotImplementedError
