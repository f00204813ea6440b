"""Tests for device identity generation and persistence."""

from __future__ import annotations

import uuid
from unittest.mock import patch

from tvremote.remote.identity import load_device_identity, new_device_id
from tvremote.storage.base import DEVICE_ID_KEY
from tvremote.storage.memory import MemoryStore


class TestNewDeviceId:
    def test_is_uuid(self) -> None:
        assert uuid.UUID(new_device_id()).version == 4

    def test_unique(self) -> None:
        assert new_device_id() != new_device_id()

    def test_fallback_when_os_random_unavailable(self) -> None:
        with patch("tvremote.remote.identity.uuid.uuid4", side_effect=NotImplementedError):
            device_id = new_device_id()
        assert uuid.UUID(device_id).version == 4


class TestLoadDeviceIdentity:
    def test_created_lazily_and_persisted(self, memory_store: MemoryStore) -> None:
        assert memory_store.get(DEVICE_ID_KEY) is None
        identity = load_device_identity(memory_store)
        assert memory_store.get(DEVICE_ID_KEY) == identity.device_id

    def test_stable_across_calls(self, memory_store: MemoryStore) -> None:
        first = load_device_identity(memory_store)
        second = load_device_identity(memory_store)
        assert first.device_id == second.device_id
        assert first.model_dump_json(by_alias=True) == second.model_dump_json(by_alias=True)

    def test_reuses_existing_id(self) -> None:
        store = MemoryStore({DEVICE_ID_KEY: "existing-id"})
        assert load_device_identity(store).device_id == "existing-id"

    def test_wire_format_uses_id(self, memory_store: MemoryStore) -> None:
        data = load_device_identity(memory_store, device_name="Living room").model_dump(by_alias=True)
        assert data["id"] == memory_store.get(DEVICE_ID_KEY)
        assert data["device_name"] == "Living room"
        assert {"device_os", "device_os_version", "app_name", "app_id", "type"} <= set(data)
        assert "device_id" not in data
