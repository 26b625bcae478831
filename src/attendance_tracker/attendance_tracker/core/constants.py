"""Constants and defaults.

Prediction heuristics are fixed rules, not values fitted to data.
"""

# Attendance target used by recommendations and the at-risk dashboard counter.
TARGET_ATTENDANCE_PERCENTAGE = 75

# Prediction heuristics (rule based, not fitted).
RECENT_ENTRY_WINDOW = 10
TREND_BAND_POINTS = 5
IMPROVING_DELTA = 5
DECLINING_DELTA = 10
PREDICTED_CEILING = 95
HIGH_RISK_BELOW = 60
MEDIUM_RISK_BELOW = 75
COMFORTABLE_ABOVE = 85
SEMESTER_WEEKS = 20
REMAINING_WEEKS = 10

LOCAL_OWNER_ID = "local"

SUBJECT_COLORS = (
    "bg-blue-500",
    "bg-green-500",
    "bg-purple-500",
    "bg-pink-500",
    "bg-indigo-500",
    "bg-yellow-500",
    "bg-red-500",
    "bg-teal-500",
)

# Local storage keys (one JSON list per entity type).
SUBJECTS_KEY = "attendify_subjects"
TIMETABLE_KEY = "attendify_timetable"
ATTENDANCE_KEY = "attendify_attendance"

FALLBACK_SUBJECT_NAMES = (
    "Mathematics",
    "Physics",
    "Chemistry",
    "Biology",
    "Computer Science",
    "English",
    "History",
    "Geography",
    "Economics",
    "Psychology",
)
