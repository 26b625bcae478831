from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from ..attendance.model import AttendanceEntry
from ..core.enums import RiskLevel, Trend
from ..subjects.model import Subject
from ..timetable.model import TimetableEntry


@dataclass(frozen=True)
class SubjectWithAttendance(Subject):
    """Read-model: a subject joined with its attendance, recomputed on every load.

    ``total_classes``, ``attended_classes``, ``percentage`` and ``status`` hold the
    live values here, not the persisted baseline.
    """

    attendance_entries: tuple[AttendanceEntry, ...] = ()
    total_scheduled_classes: int = 0
    present_classes: int = 0
    absent_classes: int = 0
    off_classes: int = 0
    actual_attendance_percentage: int = 0

    def to_dict(self) -> dict:
        data = super().to_dict()
        data.update(
            {
                "attendance_entries": [e.to_dict() for e in self.attendance_entries],
                "total_scheduled_classes": self.total_scheduled_classes,
                "present_classes": self.present_classes,
                "absent_classes": self.absent_classes,
                "off_classes": self.off_classes,
                "actual_attendance_percentage": self.actual_attendance_percentage,
            }
        )
        return data


@dataclass(frozen=True)
class AttendancePrediction:
    subject_id: str
    subject_name: str
    current_percentage: int
    predicted_percentage: int
    trend: Trend
    risk: RiskLevel
    recommendation: str
    classes_to_attend: int = 0
    classes_to_miss: int = 0

    def to_dict(self) -> dict:
        return {
            "subject_id": self.subject_id,
            "subject_name": self.subject_name,
            "current_percentage": self.current_percentage,
            "predicted_percentage": self.predicted_percentage,
            "trend": self.trend.value,
            "risk": self.risk.value,
            "recommendation": self.recommendation,
            "classes_to_attend": self.classes_to_attend,
            "classes_to_miss": self.classes_to_miss,
        }


@dataclass(frozen=True)
class OverallPrediction:
    average_attendance: float = 0.0
    predicted_average: float = 0.0
    at_risk_subjects: int = 0
    recommendations: tuple[str, ...] = ()
    insights: tuple[str, ...] = ()

    def to_dict(self) -> dict:
        return {
            "average_attendance": self.average_attendance,
            "predicted_average": self.predicted_average,
            "at_risk_subjects": self.at_risk_subjects,
            "recommendations": list(self.recommendations),
            "insights": list(self.insights),
        }


@dataclass(frozen=True)
class PredictionReport:
    predictions: tuple[AttendancePrediction, ...] = ()
    overall: OverallPrediction = field(default_factory=OverallPrediction)

    def to_dict(self) -> dict:
        return {
            "predictions": [p.to_dict() for p in self.predictions],
            "overall": self.overall.to_dict(),
        }


@dataclass(frozen=True)
class DashboardSummary:
    total_subjects: int
    average_attendance: int
    classes_this_week: int
    at_risk_subjects: int
    best_subject: Optional[str]
    todays_classes: tuple[TimetableEntry, ...] = ()
    current_class: Optional[TimetableEntry] = None

    def to_dict(self) -> dict:
        return {
            "total_subjects": self.total_subjects,
            "average_attendance": self.average_attendance,
            "classes_this_week": self.classes_this_week,
            "at_risk_subjects": self.at_risk_subjects,
            "best_subject": self.best_subject,
            "todays_classes": [e.to_dict() for e in self.todays_classes],
            "current_class": self.current_class.to_dict() if self.current_class else None,
        }
