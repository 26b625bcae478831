from __future__ import annotations

import logging
from datetime import date

import mysql.connector
import pytest

from src.attendance_tracker.attendance_tracker.attendance.fallback_attendance_repository import (
    FallbackAttendanceRepository,
)
from src.attendance_tracker.attendance_tracker.container import build_container
from src.attendance_tracker.attendance_tracker.core.enums import StorageBackend
from src.attendance_tracker.attendance_tracker.core.exceptions import ValidationError
from src.attendance_tracker.attendance_tracker.subjects.fallback_subject_repository import FallbackSubjectRepository
from src.attendance_tracker.attendance_tracker.subjects.local_subject_repository import LocalSubjectRepository
from tests.fakes import OWNER, InMemoryAttendance, InMemorySubjects, make_entry, make_subject


class UnreachableRemote:
    def __getattr__(self, name):
        def _fail(*args, **kwargs):
            raise mysql.connector.errors.InterfaceError("Can't connect to MySQL server")

        return _fail


def test_remote_failure_falls_back_to_local_and_logs_warning(caplog):
    local = InMemorySubjects()
    repo = FallbackSubjectRepository(UnreachableRemote(), local)
    subject = make_subject()

    with caplog.at_level(logging.WARNING):
        repo.add(subject)
        assert repo.list_for_owner(OWNER) == [subject]

    assert local.get(OWNER, subject.subject_id) == subject
    assert "falling back to local storage" in caplog.text


def test_healthy_remote_is_used_and_local_untouched():
    remote = InMemoryAttendance()
    local = InMemoryAttendance()
    repo = FallbackAttendanceRepository(remote, local)

    repo.add(make_entry("a1", on=date(2026, 5, 18)))

    assert [e.entry_id for e in repo.list_for_owner(OWNER, date(2026, 5, 18))] == ["a1"]
    assert local.list_for_owner(OWNER) == []


def test_domain_errors_are_not_swallowed():
    class BrokenRemote:
        def get(self, owner_id, subject_id):
            raise ValueError("bad row")

    repo = FallbackSubjectRepository(BrokenRemote(), InMemorySubjects())

    with pytest.raises(ValueError):
        repo.get(OWNER, "math")


def test_container_local_backend(tmp_path):
    container = build_container(storage_backend="local", local_storage_path=tmp_path / "s.json")

    assert container.backend == StorageBackend.LOCAL
    assert isinstance(container.subjects_repo, LocalSubjectRepository)


def test_container_remote_backend_wraps_mysql_with_fallback(tmp_path):
    db_config = {"host": "127.0.0.1", "port": 3306, "user": "root", "password": "", "database": "attendance_tracker"}

    container = build_container(storage_backend="REMOTE", local_storage_path=tmp_path / "s.json", db_config=db_config)

    assert container.backend == StorageBackend.REMOTE
    assert isinstance(container.subjects_repo, FallbackSubjectRepository)
    assert isinstance(container.attendance_repo, FallbackAttendanceRepository)


def test_container_rejects_unknown_backend(tmp_path):
    with pytest.raises(ValidationError):
        build_container(storage_backend="firebase", local_storage_path=tmp_path / "s.json")
    with pytest.raises(ValidationError):
        build_container(storage_backend="remote", local_storage_path=tmp_path / "s.json", db_config=None)
