"""Domain models for tvremote.

This package contains the core data structures, enumerations, and value
objects used throughout the system. All models use Pydantic v2 for
validation and serialization.
"""

from tvremote.domain.models import (
    Confirmed,
    ConnectionStatus,
    DeviceIdentity,
    Failed,
    FetchMode,
    LocalError,
    LogEntry,
    Outcome,
    PairingState,
    RequestTarget,
    TransportConfig,
    TransportResponse,
    Unconfirmed,
)

__all__ = [
    "Confirmed",
    "ConnectionStatus",
    "DeviceIdentity",
    "Failed",
    "FetchMode",
    "LocalError",
    "LogEntry",
    "Outcome",
    "PairingState",
    "RequestTarget",
    "TransportConfig",
    "TransportResponse",
    "Unconfirmed",
]
