from __future__ import annotations

from flask import Flask

from ..common.http import api_view, current_owner_id, ok
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/analytics/subjects", methods=["GET"], endpoint="analytics_subjects")
    @api_view
    def analytics_subjects():
        subjects = container.analytics_service.subjects_with_attendance(current_owner_id())
        return ok([s.to_dict() for s in subjects])

    @app.route("/api/analytics/predictions", methods=["GET"], endpoint="analytics_predictions")
    @api_view
    def analytics_predictions():
        return ok(container.analytics_service.predictions(current_owner_id()).to_dict())

    @app.route("/api/analytics/study-schedule", methods=["GET"], endpoint="analytics_study_schedule")
    @api_view
    def analytics_study_schedule():
        return ok(container.analytics_service.study_schedule(current_owner_id()))

    @app.route("/api/analytics/dashboard", methods=["GET"], endpoint="analytics_dashboard")
    @api_view
    def analytics_dashboard():
        return ok(container.analytics_service.dashboard(current_owner_id()).to_dict())
