from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence

from ...core.constants import TARGET_ATTENDANCE_PERCENTAGE
from ...core.enums import RiskLevel, Trend
from ..model import AttendancePrediction, OverallPrediction, PredictionReport, SubjectWithAttendance


class AttendancePredictor(ABC):
    """Predictor interface (Strategy Pattern for forward-looking attendance)."""

    @abstractmethod
    def predict_subject(self, subject: SubjectWithAttendance) -> AttendancePrediction:
        raise NotImplementedError

    def predict(self, subjects: Sequence[SubjectWithAttendance]) -> PredictionReport:
        predictions = tuple(self.predict_subject(s) for s in subjects)
        return PredictionReport(predictions=predictions, overall=summarize(subjects, predictions))


def summarize(
    subjects: Sequence[SubjectWithAttendance],
    predictions: Sequence[AttendancePrediction],
) -> OverallPrediction:
    average = sum(s.actual_attendance_percentage for s in subjects) / len(subjects) if subjects else 0.0
    predicted_average = sum(p.predicted_percentage for p in predictions) / len(predictions) if predictions else 0.0
    at_risk = sum(1 for p in predictions if p.risk in (RiskLevel.MEDIUM, RiskLevel.HIGH))

    recommendations: list[str] = []
    if average < TARGET_ATTENDANCE_PERCENTAGE:
        recommendations.append("Focus on improving attendance in critical subjects")
        recommendations.append("Set daily reminders for classes")
    if at_risk > 0:
        recommendations.append(f"Prioritize {at_risk} at-risk subjects")

    if predicted_average > average:
        direction = "Improving"
    elif predicted_average < average:
        direction = "Declining"
    else:
        direction = "Stable"

    insights = [
        f"Your average attendance is {average:.1f}%",
        f"Predicted trend: {direction}",
    ]

    improving = sum(1 for p in predictions if p.trend == Trend.IMPROVING)
    declining = sum(1 for p in predictions if p.trend == Trend.DECLINING)
    if improving > declining:
        insights.append("Overall trend is positive across subjects")
    elif declining > improving:
        insights.append("Attendance is declining in multiple subjects")

    return OverallPrediction(
        average_attendance=average,
        predicted_average=predicted_average,
        at_risk_subjects=at_risk,
        recommendations=tuple(recommendations),
        insights=tuple(insights),
    )
