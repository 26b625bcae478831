from __future__ import annotations

from flask import Flask

from ..common.http import api_view, current_owner_id, json_body, ok
from ..container import Container
from .formatting import calculate_duration, format_time
from .model import TimetableEntry


def _entry_view(entry: TimetableEntry) -> dict:
    data = entry.to_dict()
    data["display_time"] = f"{format_time(entry.start_time)} - {format_time(entry.end_time)}"
    data["duration"] = calculate_duration(entry.start_time, entry.end_time)
    return data


def register(app: Flask, container: Container) -> None:
    @app.route("/api/timetable", methods=["GET"], endpoint="timetable_list")
    @api_view
    def timetable_list():
        entries = container.timetable_service.list_entries(current_owner_id())
        return ok([_entry_view(e) for e in entries])

    @app.route("/api/timetable", methods=["POST"], endpoint="timetable_create")
    @api_view
    def timetable_create():
        data = json_body()
        entry = container.timetable_service.add_entry(
            current_owner_id(),
            subject_id=data.get("subject_id"),
            day=data.get("day"),
            start_time=data.get("start_time"),
            end_time=data.get("end_time"),
            room=data.get("room"),
        )
        return ok(_entry_view(entry), 201)

    @app.route("/api/timetable/<entry_id>", methods=["PUT", "PATCH"], endpoint="timetable_update")
    @api_view
    def timetable_update(entry_id: str):
        entry = container.timetable_service.update_entry(current_owner_id(), entry_id, json_body())
        return ok(_entry_view(entry))

    @app.route("/api/timetable/<entry_id>", methods=["DELETE"], endpoint="timetable_delete")
    @api_view
    def timetable_delete(entry_id: str):
        container.timetable_service.delete_entry(current_owner_id(), entry_id)
        return ok()

    @app.route("/api/timetable/current", methods=["GET"], endpoint="timetable_current")
    @api_view
    def timetable_current():
        # Polled by the client once a minute to prompt for attendance.
        entry = container.timetable_service.find_current_class(current_owner_id())
        return ok(_entry_view(entry) if entry else None)
