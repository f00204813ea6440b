"""In-memory key-value store, used by tests and one-off sessions."""

from __future__ import annotations

from tvremote.storage.base import KeyValueStore


class MemoryStore(KeyValueStore):
    """Keeps values in a dict for the lifetime of the object."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value
