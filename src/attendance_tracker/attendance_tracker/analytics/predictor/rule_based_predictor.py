from __future__ import annotations

import math

from ...core import constants as c
from ...core.enums import AttendanceStatus, RiskLevel, Trend
from ..model import AttendancePrediction, SubjectWithAttendance
from .base import AttendancePredictor


def recent_percentage(subject: SubjectWithAttendance, window: int = c.RECENT_ENTRY_WINDOW) -> float:
    recent = sorted(
        (e for e in subject.attendance_entries if e.status != AttendanceStatus.OFF),
        key=lambda e: e.entry_date,
        reverse=True,
    )[:window]
    if not recent:
        return 0.0
    present = sum(1 for e in recent if e.status == AttendanceStatus.PRESENT)
    return present / len(recent) * 100


def classify_trend(recent: float, current: float, band: int = c.TREND_BAND_POINTS) -> Trend:
    # Boundaries are exclusive: exactly +band is still stable.
    if recent > current + band:
        return Trend.IMPROVING
    if recent < current - band:
        return Trend.DECLINING
    return Trend.STABLE


def project_percentage(current: int, trend: Trend) -> int:
    if trend == Trend.IMPROVING:
        return min(c.PREDICTED_CEILING, current + c.IMPROVING_DELTA)
    if trend == Trend.DECLINING:
        return max(0, current - c.DECLINING_DELTA)
    return current


def classify_risk(predicted: float) -> RiskLevel:
    if predicted < c.HIGH_RISK_BELOW:
        return RiskLevel.HIGH
    if predicted < c.MEDIUM_RISK_BELOW:
        return RiskLevel.MEDIUM
    return RiskLevel.LOW


def remaining_classes(total_scheduled: int) -> int:
    """Classes left in the semester: 10 more weeks at the rate of a 20-week term."""
    classes_per_week = total_scheduled / c.SEMESTER_WEEKS
    return math.ceil(c.REMAINING_WEEKS * classes_per_week)


class RuleBasedPredictor(AttendancePredictor):
    """Fixed heuristics; no model is fitted to the data."""

    def __init__(self, *, target_percentage: int = c.TARGET_ATTENDANCE_PERCENTAGE):
        self._target = int(target_percentage)

    def predict_subject(self, subject: SubjectWithAttendance) -> AttendancePrediction:
        current = subject.actual_attendance_percentage
        trend = classify_trend(recent_percentage(subject), current)
        predicted = project_percentage(current, trend)

        total = subject.total_scheduled_classes
        present = subject.present_classes
        future_total = total + remaining_classes(total)

        classes_to_attend = 0
        classes_to_miss = 0
        if current < self._target:
            required = math.ceil(self._target / 100 * future_total)
            classes_to_attend = max(0, required - present)
            recommendation = f"Attend {classes_to_attend} more classes to reach {self._target}% attendance."
        elif current > c.COMFORTABLE_ABOVE:
            max_absent = math.floor(future_total * (1 - self._target / 100))
            classes_to_miss = max(0, max_absent - (total - present))
            recommendation = (
                f"You can miss up to {classes_to_miss} more classes while maintaining {self._target}% attendance."
            )
        else:
            recommendation = f"Maintain current attendance pattern to stay above {self._target}%."

        return AttendancePrediction(
            subject_id=subject.subject_id,
            subject_name=subject.name,
            current_percentage=current,
            predicted_percentage=predicted,
            trend=trend,
            risk=classify_risk(predicted),
            recommendation=recommendation,
            classes_to_attend=classes_to_attend,
            classes_to_miss=classes_to_miss,
        )
