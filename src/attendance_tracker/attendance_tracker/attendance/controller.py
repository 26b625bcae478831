from __future__ import annotations

from flask import Flask, request

from ..common.http import api_view, current_owner_id, fail, json_body, ok
from ..common.validators import require_date
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/attendance", methods=["GET"], endpoint="attendance_list")
    @api_view
    def attendance_list():
        date_s = request.args.get("date")
        entry_date = require_date(date_s, "Date") if date_s else None
        entries = container.attendance_service.get_attendance(current_owner_id(), entry_date)
        return ok([e.to_dict() for e in entries])

    @app.route("/api/attendance", methods=["POST"], endpoint="attendance_create")
    @api_view
    def attendance_create():
        data = json_body()
        entry = container.attendance_service.add_attendance(
            current_owner_id(),
            subject_id=data.get("subject_id"),
            entry_date=data.get("date"),
            status=data.get("status"),
            notes=data.get("notes"),
        )
        return ok(entry.to_dict(), 201)

    @app.route("/api/attendance/<entry_id>", methods=["PUT", "PATCH"], endpoint="attendance_update")
    @api_view
    def attendance_update(entry_id: str):
        entry = container.attendance_service.update_attendance(current_owner_id(), entry_id, json_body())
        return ok(entry.to_dict())

    @app.route("/api/attendance/<entry_id>", methods=["DELETE"], endpoint="attendance_delete")
    @api_view
    def attendance_delete(entry_id: str):
        container.attendance_service.delete_attendance(current_owner_id(), entry_id)
        return ok()

    @app.route("/api/attendance/mark", methods=["POST"], endpoint="attendance_mark")
    @api_view
    def attendance_mark():
        data = json_body()
        entry = container.attendance_service.mark_attendance(
            current_owner_id(),
            subject_id=data.get("subject_id"),
            entry_date=data.get("date"),
            status=data.get("status"),
            notes=data.get("notes"),
        )
        return ok(entry.to_dict())

    @app.route("/api/attendance/bulk", methods=["POST"], endpoint="attendance_bulk")
    @api_view
    def attendance_bulk():
        data = json_body()
        owner_id = current_owner_id()
        subject_ids = data.get("subject_ids")

        if subject_ids is None:
            entries = container.attendance_service.mark_day(owner_id, entry_date=data.get("date"), status=data.get("status"))
        elif isinstance(subject_ids, list):
            entries = container.attendance_service.add_bulk_attendance(
                owner_id,
                entry_date=data.get("date"),
                status=data.get("status"),
                subject_ids=[str(s) for s in subject_ids],
            )
        else:
            return fail("subject_ids must be a list", 400)

        return ok([e.to_dict() for e in entries])

    @app.route("/api/attendance/stats", methods=["GET"], endpoint="attendance_stats")
    @api_view
    def attendance_stats():
        stats = container.attendance_service.stats(current_owner_id(), subject_id=request.args.get("subject_id"))
        return ok(
            {
                "total": stats.total,
                "present": stats.present,
                "absent": stats.absent,
                "off": stats.off,
                "percentage": stats.percentage,
            }
        )
