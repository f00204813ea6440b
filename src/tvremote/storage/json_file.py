"""JSON-file key-value store.

Persists the device identifier and auth key between CLI invocations.
Each write rewrites the whole (tiny) file through a temporary file and
an atomic replace, so a reader never sees a partial document.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path

from tvremote.storage.base import KeyValueStore, StorageError

logger = logging.getLogger(__name__)


class JsonFileStore(KeyValueStore):
    """Stores string values in a flat JSON object on disk."""

    def __init__(self, path: Path | str) -> None:
        self._path = Path(path).expanduser()

    @property
    def path(self) -> Path:
        return self._path

    def get(self, key: str) -> str | None:
        value = self._read().get(key)
        return value if isinstance(value, str) else None

    def set(self, key: str, value: str) -> None:
        data = self._read()
        data[key] = value
        tmp_path = self._path.with_suffix(self._path.suffix + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(json.dumps(data, indent=2), encoding="utf-8")
            os.replace(tmp_path, self._path)
        except OSError as e:
            raise StorageError(f"Cannot write {self._path}: {e}", path=str(self._path)) from e

    def _read(self) -> dict:
        if not self._path.exists():
            return {}
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            logger.warning("Ignoring unreadable store %s: %s", self._path, e)
            return {}
        return data if isinstance(data, dict) else {}
