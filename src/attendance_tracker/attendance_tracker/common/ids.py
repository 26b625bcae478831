from __future__ import annotations

import uuid


def new_id() -> str:
    """Opaque record id, identical format for the remote and the local store."""
    return uuid.uuid4().hex
