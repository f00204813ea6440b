"""Abstract base class for the client's persisted settings.

The remote persists exactly two scalar values (the device identifier and
the auth key). Every write replaces a single value, so implementations
need no cross-key transactions.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Callable

logger = logging.getLogger(__name__)

DEVICE_ID_KEY = "device_id"
AUTH_KEY_KEY = "auth_key"


class KeyValueStore(ABC):
    """Minimal string key-value store.

    Example usage::

        store = MemoryStore()
        device_id = store.get_or_create(DEVICE_ID_KEY, new_device_id)
        store.set(AUTH_KEY_KEY, "abc123")
    """

    @abstractmethod
    def get(self, key: str) -> str | None:
        """Return the stored value, or None when the key was never set."""
        ...

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Replace the value stored under ``key``.

        Raises:
            StorageError: If the value cannot be persisted.
        """
        ...

    def get_or_create(self, key: str, factory: Callable[[], str]) -> str:
        """Return the value under ``key``, creating it once if absent.

        The factory is only called when nothing is stored yet; later calls
        return the same value unchanged.
        """
        value = self.get(key)
        if value:
            return value
        value = factory()
        self.set(key, value)
        logger.debug("Created persisted value for %s", key)
        return value


class StorageError(Exception):
    """Raised when the store cannot be read or written."""

    def __init__(self, message: str, path: str = "") -> None:
        super().__init__(message)
        self.path = path
