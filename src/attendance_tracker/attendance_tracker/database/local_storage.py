from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

from ..core.exceptions import StorageError


class LocalStorage:
    """Key/value store persisted as one JSON document on disk.

    Each key holds a list of plain record dicts. The file is created lazily on
    the first write and lives for the whole process; there is no teardown.
    """

    def __init__(self, path: str | Path):
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def _read_all(self) -> dict:
        if not self._path.exists():
            return {}
        try:
            data = json.loads(self._path.read_text(encoding="utf-8") or "{}")
        except (OSError, json.JSONDecodeError) as e:
            raise StorageError(f"Cannot read local storage {self._path}: {e}") from e
        if not isinstance(data, dict):
            raise StorageError(f"Local storage {self._path} is not a JSON object")
        return data

    def get_item(self, key: str) -> list[dict]:
        value: Optional[list] = self._read_all().get(key)
        return list(value or [])

    def set_item(self, key: str, records: list[dict]) -> None:
        data = self._read_all()
        data[key] = records
        self._path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self._path.with_suffix(self._path.suffix + ".tmp")
        tmp.write_text(json.dumps(data, ensure_ascii=False, indent=2), encoding="utf-8")
        tmp.replace(self._path)
