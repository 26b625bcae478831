"""Percentage and status tier rules for subjects.

Two threshold profiles exist on purpose. The persisted subject record has always
been classified with an 80% good/warning boundary (and 75% warning floor),
while the live, aggregated view uses 75%/60%. Both are kept as-is so that stored
records and the dashboard keep their historical meaning.
"""
from __future__ import annotations

from dataclasses import dataclass

from ..common.datetime_utils import round_half_up
from ..core.enums import SubjectStatus


@dataclass(frozen=True)
class StatusProfile:
    excellent_from: int
    good_from: int
    warning_from: int


# Aggregated (live) view.
DISPLAY_PROFILE = StatusProfile(excellent_from=90, good_from=75, warning_from=60)
# Subject record update path.
RECORD_PROFILE = StatusProfile(excellent_from=90, good_from=80, warning_from=75)


def classify_status(percentage: float, profile: StatusProfile = DISPLAY_PROFILE) -> SubjectStatus:
    if percentage >= profile.excellent_from:
        return SubjectStatus.EXCELLENT
    if percentage >= profile.good_from:
        return SubjectStatus.GOOD
    if percentage >= profile.warning_from:
        return SubjectStatus.WARNING
    return SubjectStatus.CRITICAL


def compute_percentage(attended: int, total: int) -> int:
    if total <= 0:
        return 0
    return round_half_up(attended / total * 100)
