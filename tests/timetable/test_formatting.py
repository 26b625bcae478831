from datetime import time

import pytest

from src.attendance_tracker.attendance_tracker.timetable.formatting import calculate_duration, format_time


@pytest.mark.parametrize(
    "value,expected",
    [
        (time(0, 5), "12:05 AM"),
        (time(9, 0), "9:00 AM"),
        (time(12, 0), "12:00 PM"),
        (time(13, 30), "1:30 PM"),
        (time(23, 59), "11:59 PM"),
    ],
)
def test_format_time_twelve_hour_clock(value, expected):
    assert format_time(value) == expected


@pytest.mark.parametrize(
    "start,end,expected",
    [
        (time(9, 0), time(9, 45), "45 min"),
        (time(9, 0), time(10, 0), "1 hour"),
        (time(9, 0), time(11, 0), "2 hours"),
        (time(9, 0), time(10, 30), "1.5 hours"),
    ],
)
def test_calculate_duration(start, end, expected):
    assert calculate_duration(start, end) == expected
