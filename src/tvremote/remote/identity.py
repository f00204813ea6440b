"""Device identity for pairing.

The identifier is generated once and persisted; every later call reads
the same value back, so the TV keeps recognizing this remote.
"""

from __future__ import annotations

import logging
import platform
import random
import uuid

from tvremote.domain.models import DeviceIdentity
from tvremote.storage.base import DEVICE_ID_KEY, KeyValueStore

logger = logging.getLogger(__name__)


def new_device_id() -> str:
    """Generate a random device identifier.

    Falls back to a pseudo-random UUID when the OS random source is
    unavailable.
    """
    try:
        return str(uuid.uuid4())
    except NotImplementedError:
        logger.warning("OS random source unavailable, using pseudo-random device id")
        return _pseudo_random_id()


def _pseudo_random_id() -> str:
    return str(uuid.UUID(int=random.getrandbits(128), version=4))


def load_device_identity(
    store: KeyValueStore,
    device_name: str = "tvremote",
    app_name: str = "tvremote",
) -> DeviceIdentity:
    """Return this remote's identity, creating and persisting its id if needed."""
    device_id = store.get_or_create(DEVICE_ID_KEY, new_device_id)
    return DeviceIdentity(
        device_id=device_id,
        device_name=device_name,
        device_os=platform.system() or "Python",
        device_os_version=platform.release(),
        app_name=app_name,
    )
