from __future__ import annotations

from typing import Sequence

from ..core.enums import RiskLevel
from .model import AttendancePrediction


def generate_study_schedule(predictions: Sequence[AttendancePrediction]) -> list[str]:
    schedule: list[str] = []

    high = [p for p in predictions if p.risk == RiskLevel.HIGH]
    medium = [p for p in predictions if p.risk == RiskLevel.MEDIUM]

    if high:
        schedule.append("Morning: Focus on high-risk subjects")
        schedule.extend(f"- {p.subject_name}: Catch up on missed topics" for p in high)

    if medium:
        schedule.append("Afternoon: Review medium-risk subjects")
        schedule.extend(f"- {p.subject_name}: Regular revision" for p in medium)

    schedule.append("Evening: Prepare for tomorrow's classes")
    return schedule
