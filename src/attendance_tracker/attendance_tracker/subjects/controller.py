from __future__ import annotations

from flask import Flask

from ..common.http import api_view, current_owner_id, json_body, ok
from ..container import Container
from ..suggestions.csv_parser import load_subject_names


def register(app: Flask, container: Container) -> None:
    @app.route("/api/subjects", methods=["GET"], endpoint="subjects_list")
    @api_view
    def subjects_list():
        subjects = container.subject_service.list_subjects(current_owner_id())
        return ok([s.to_dict() for s in subjects])

    @app.route("/api/subjects", methods=["POST"], endpoint="subjects_create")
    @api_view
    def subjects_create():
        data = json_body()
        subject = container.subject_service.add_subject(
            current_owner_id(),
            name=data.get("name"),
            code=data.get("code"),
            credit=data.get("credit", 0),
            instructor=data.get("instructor"),
        )
        return ok(subject.to_dict(), 201)

    @app.route("/api/subjects/<subject_id>", methods=["PUT", "PATCH"], endpoint="subjects_update")
    @api_view
    def subjects_update(subject_id: str):
        subject = container.subject_service.update_subject(current_owner_id(), subject_id, json_body())
        return ok(subject.to_dict())

    @app.route("/api/subjects/<subject_id>", methods=["DELETE"], endpoint="subjects_delete")
    @api_view
    def subjects_delete(subject_id: str):
        container.subject_service.delete_subject(current_owner_id(), subject_id)
        return ok()

    @app.route("/api/subjects/suggestions", methods=["GET"], endpoint="subjects_suggestions")
    @api_view
    def subjects_suggestions():
        return ok(load_subject_names(container.subject_list_csv))
