from __future__ import annotations

from datetime import date, datetime
from typing import Callable, Optional

from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import now_local, round_half_up
from ..core.constants import TARGET_ATTENDANCE_PERCENTAGE
from ..core.enums import DayOfWeek
from ..subjects.repository import SubjectRepository
from ..timetable.repository import TimetableRepository
from .aggregation import aggregate_subjects
from .model import DashboardSummary, PredictionReport, SubjectWithAttendance
from .predictor.base import AttendancePredictor
from .predictor.rule_based_predictor import RuleBasedPredictor
from .study_schedule import generate_study_schedule


class AnalyticsService:
    """Loads an owner's records and runs the aggregation and prediction engines.

    Every call re-reads the stores; nothing is cached between requests.
    """

    def __init__(
        self,
        subjects: SubjectRepository,
        timetable: TimetableRepository,
        attendance: AttendanceRepository,
        *,
        predictor: Optional[AttendancePredictor] = None,
        clock: Callable[[], datetime] = now_local,
    ):
        self._subjects = subjects
        self._timetable = timetable
        self._attendance = attendance
        self._predictor = predictor or RuleBasedPredictor()
        self._clock = clock

    def subjects_with_attendance(self, owner_id: str, *, today: Optional[date] = None) -> list[SubjectWithAttendance]:
        subjects = self._subjects.list_for_owner(owner_id)
        timetable = self._timetable.list_for_owner(owner_id)
        attendance = self._attendance.list_for_owner(owner_id)
        return aggregate_subjects(subjects, timetable, attendance, today=today or self._clock().date())

    def predictions(self, owner_id: str, *, today: Optional[date] = None) -> PredictionReport:
        return self._predictor.predict(self.subjects_with_attendance(owner_id, today=today))

    def study_schedule(self, owner_id: str, *, today: Optional[date] = None) -> list[str]:
        return generate_study_schedule(self.predictions(owner_id, today=today).predictions)

    def dashboard(self, owner_id: str, *, now: Optional[datetime] = None) -> DashboardSummary:
        now = now or self._clock()
        subjects = self.subjects_with_attendance(owner_id, today=now.date())
        timetable = list(self._timetable.list_for_owner(owner_id))

        average = (
            round_half_up(sum(s.actual_attendance_percentage for s in subjects) / len(subjects)) if subjects else 0
        )
        best = max(subjects, key=lambda s: s.actual_attendance_percentage, default=None)

        today = DayOfWeek.from_date(now.date())
        todays = sorted((t for t in timetable if t.day == today), key=lambda t: t.start_time)
        minute = now.time().replace(second=0, microsecond=0)
        current = next((t for t in todays if t.start_time <= minute <= t.end_time), None)

        return DashboardSummary(
            total_subjects=len(subjects),
            average_attendance=average,
            classes_this_week=len(timetable),
            at_risk_subjects=sum(1 for s in subjects if s.actual_attendance_percentage < TARGET_ATTENDANCE_PERCENTAGE),
            best_subject=best.name if best else None,
            todays_classes=tuple(todays),
            current_class=current,
        )
