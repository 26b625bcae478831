from __future__ import annotations

from datetime import datetime, time


def format_time(value: time) -> str:
    """24-hour time to 12-hour display, e.g. 13:05 -> '1:05 PM'."""
    suffix = "PM" if value.hour >= 12 else "AM"
    hour = value.hour % 12 or 12
    return f"{hour}:{value.minute:02d} {suffix}"


def calculate_duration(start_time: time, end_time: time) -> str:
    start = datetime.combine(datetime.min, start_time)
    end = datetime.combine(datetime.min, end_time)
    hours = (end - start).total_seconds() / 3600

    if hours < 1:
        return f"{round(hours * 60)} min"
    if hours == 1:
        return "1 hour"
    return f"{hours:g} hours"


def format_hhmm_range(start_time: time, end_time: time) -> str:
    return f"{start_time.strftime('%H:%M')}-{end_time.strftime('%H:%M')}"
