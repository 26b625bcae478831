from __future__ import annotations

import importlib
import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .analytics.controller import register as register_analytics
from .attendance.controller import register as register_attendance
from .container import build_container
from .core.enums import StorageBackend
from .database.bootstrap import apply_schema, list_tables
from .subjects.controller import register as register_subjects
from .timetable.controller import register as register_timetable

logger = logging.getLogger(__name__)

REPO_ROOT = Path(__file__).resolve().parents[3]

_SETTING_NAMES = (
    "SECRET_KEY",
    "DEBUG",
    "DB_CONFIG",
    "STORAGE_BACKEND",
    "LOCAL_STORAGE_PATH",
    "LOCAL_OWNER_ID",
    "SUBJECT_LIST_CSV",
    "AUTO_INIT_DB",
    "LOG_LEVEL",
)


def create_app(config_overrides: Optional[dict] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    for name in _SETTING_NAMES:
        app.config[name] = getattr(settings, name, None)
    app.config.update(config_overrides or {})

    app.secret_key = app.config["SECRET_KEY"]
    app.config["DEBUG"] = bool(app.config["DEBUG"])

    logging.basicConfig(
        level=str(app.config["LOG_LEVEL"] or "INFO").upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    logger.info(f"Starting attendance tracker with settings={settings_module}")

    db_config = app.config["DB_CONFIG"]
    if app.config["AUTO_INIT_DB"] and str(app.config["STORAGE_BACKEND"]).lower() == StorageBackend.REMOTE.value:
        apply_schema(db_config, schema_path=REPO_ROOT / "database" / "schema.sql")
        logger.info(f"Schema ready (tables={len(list_tables(db_config))})")

    container = build_container(
        storage_backend=app.config["STORAGE_BACKEND"],
        local_storage_path=app.config["LOCAL_STORAGE_PATH"],
        db_config=db_config,
        subject_list_csv=app.config["SUBJECT_LIST_CSV"],
    )
    app.extensions["attendance_tracker"] = container

    register_subjects(app, container)
    register_timetable(app, container)
    register_attendance(app, container)
    register_analytics(app, container)

    return app
