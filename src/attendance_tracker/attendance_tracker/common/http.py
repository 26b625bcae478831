from __future__ import annotations

import logging
from functools import wraps

from flask import current_app, jsonify, request, session

from ..core.constants import LOCAL_OWNER_ID
from ..core.exceptions import BulkAttendanceError, NotFoundError, StorageError, ValidationError

logger = logging.getLogger(__name__)


def current_owner_id() -> str:
    """Signed-in user id from the session, else the shared local owner."""
    user_id = session.get("user_id")
    if user_id:
        return str(user_id)
    return str(current_app.config.get("LOCAL_OWNER_ID") or LOCAL_OWNER_ID)


def json_body() -> dict:
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def ok(data=None, status: int = 200):
    return jsonify({"success": True, "data": data}), status


def fail(message: str, status: int):
    return jsonify({"success": False, "message": message}), status


def api_view(view):
    """Map domain exceptions to JSON error responses."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        try:
            return view(*args, **kwargs)
        except ValidationError as e:
            return fail(str(e), 400)
        except NotFoundError as e:
            return fail(str(e), 404)
        except (BulkAttendanceError, StorageError) as e:
            return fail(str(e), 500)
        except Exception:
            logger.exception(f"Unhandled error in {request.method} {request.path}")
            return fail("Internal server error", 500)

    return wrapper
