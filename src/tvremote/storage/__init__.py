"""Persisted client settings for tvremote.

Public API:
    KeyValueStore -- Abstract base class
    MemoryStore -- In-memory store
    JsonFileStore -- JSON file on disk
"""

from tvremote.storage.base import (
    AUTH_KEY_KEY,
    DEVICE_ID_KEY,
    KeyValueStore,
    StorageError,
)
from tvremote.storage.json_file import JsonFileStore
from tvremote.storage.memory import MemoryStore

__all__ = [
    "AUTH_KEY_KEY",
    "DEVICE_ID_KEY",
    "JsonFileStore",
    "KeyValueStore",
    "MemoryStore",
    "StorageError",
]
