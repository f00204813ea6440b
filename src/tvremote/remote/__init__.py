"""Remote control client for tvremote.

Public API:
    TvRemote -- Commands, pairing and status reporting for one TV
    PairingSession -- The two-step pairing state machine
    StatusBoard -- Connection status and operator event log
"""

from tvremote.remote.client import TvRemote
from tvremote.remote.identity import load_device_identity, new_device_id
from tvremote.remote.pairing import PairingSession
from tvremote.remote.status import StatusBoard

__all__ = [
    "PairingSession",
    "StatusBoard",
    "TvRemote",
    "load_device_identity",
    "new_device_id",
]
