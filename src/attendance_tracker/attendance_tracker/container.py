from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Callable, Optional

from .analytics.service import AnalyticsService
from .attendance.fallback_attendance_repository import FallbackAttendanceRepository
from .attendance.local_attendance_repository import LocalAttendanceRepository
from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .common.datetime_utils import now_local
from .core.enums import StorageBackend
from .core.exceptions import ValidationError
from .database.connection import DBConfig, DatabaseConnection
from .database.local_storage import LocalStorage
from .subjects.fallback_subject_repository import FallbackSubjectRepository
from .subjects.local_subject_repository import LocalSubjectRepository
from .subjects.mysql_subject_repository import MySQLSubjectRepository
from .subjects.repository import SubjectRepository
from .subjects.service import SubjectService
from .timetable.fallback_timetable_repository import FallbackTimetableRepository
from .timetable.local_timetable_repository import LocalTimetableRepository
from .timetable.mysql_timetable_repository import MySQLTimetableRepository
from .timetable.repository import TimetableRepository
from .timetable.service import TimetableService

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Container:
    backend: StorageBackend
    local_storage: LocalStorage
    subject_list_csv: Optional[str]

    subjects_repo: SubjectRepository
    timetable_repo: TimetableRepository
    attendance_repo: AttendanceRepository

    subject_service: SubjectService
    timetable_service: TimetableService
    attendance_service: AttendanceService
    analytics_service: AnalyticsService


def build_container(
    *,
    storage_backend: str,
    local_storage_path: str | Path,
    db_config: Optional[dict] = None,
    subject_list_csv: Optional[str] = None,
    clock: Callable[[], datetime] = now_local,
) -> Container:
    """Wire repositories and services once; the backend does not change afterwards."""

    try:
        backend = StorageBackend(str(storage_backend).lower())
    except ValueError:
        raise ValidationError(f"Unknown storage backend: {storage_backend!r}")

    local_storage = LocalStorage(local_storage_path)
    local_subjects = LocalSubjectRepository(local_storage)
    local_timetable = LocalTimetableRepository(local_storage)
    local_attendance = LocalAttendanceRepository(local_storage)

    if backend == StorageBackend.REMOTE:
        if not db_config:
            raise ValidationError("DB_CONFIG is required for the remote storage backend")
        conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))
        subjects_repo = FallbackSubjectRepository(MySQLSubjectRepository(conn), local_subjects)
        timetable_repo = FallbackTimetableRepository(MySQLTimetableRepository(conn), local_timetable)
        attendance_repo = FallbackAttendanceRepository(MySQLAttendanceRepository(conn), local_attendance)
    else:
        subjects_repo = local_subjects
        timetable_repo = local_timetable
        attendance_repo = local_attendance

    logger.info(f"Storage backend: {backend.value} (local storage: {local_storage.path})")

    subject_service = SubjectService(subjects_repo, timetable_repo, attendance_repo, clock=clock)
    timetable_service = TimetableService(timetable_repo, subjects_repo, clock=clock)
    attendance_service = AttendanceService(attendance_repo, subjects_repo, timetable_repo, clock=clock)
    analytics_service = AnalyticsService(subjects_repo, timetable_repo, attendance_repo, clock=clock)

    return Container(
        backend=backend,
        local_storage=local_storage,
        subject_list_csv=subject_list_csv,
        subjects_repo=subjects_repo,
        timetable_repo=timetable_repo,
        attendance_repo=attendance_repo,
        subject_service=subject_service,
        timetable_service=timetable_service,
        attendance_service=attendance_service,
        analytics_service=analytics_service,
    )
