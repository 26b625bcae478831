from __future__ import annotations

import logging
from typing import Any

import mysql.connector

logger = logging.getLogger(__name__)

# Failures of the remote backend that trigger the local fallback.
REMOTE_ERRORS = (mysql.connector.Error, ConnectionError)


class FallbackRepository:
    """Runs each call on the remote repository, then on local storage if the remote fails.

    Once a call has fallen back the two stores diverge; nothing reconciles them.
    """

    def __init__(self, remote: Any, local: Any, *, name: str):
        self._remote = remote
        self._local = local
        self._name = name

    def _call(self, method: str, *args, **kwargs):
        try:
            return getattr(self._remote, method)(*args, **kwargs)
        except REMOTE_ERRORS as e:
            logger.warning(f"{self._name}.{method}: remote store failed, falling back to local storage: {e}")
            return getattr(self._local, method)(*args, **kwargs)
