"""Core domain models for the tvremote system.

These models represent the data flowing through the client: the device
identity sent during pairing, the transport configuration that decides
how each request is routed, the resolved request target, and the
outcome of every operation as reported to the operator.
"""

from __future__ import annotations

import enum
from datetime import datetime
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_TV_PORT = "1925"


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------


class FetchMode(str, enum.Enum):
    """How a request is issued and how much of its response is readable."""

    CORS = "cors"  # Direct request, status and body readable
    NO_CORS = "no-cors"  # Direct request, response is opaque
    SAME_ORIGIN = "same-origin"  # Through the relay, status and body readable


class PairingState(str, enum.Enum):
    """Progress of the two-step pairing handshake."""

    UNPAIRED = "unpaired"
    REQUESTED = "requested"
    PAIRED = "paired"
    FAILED = "failed"


# ---------------------------------------------------------------------------
# Device / Transport Models
# ---------------------------------------------------------------------------


class DeviceIdentity(BaseModel):
    """Self-generated descriptor identifying this remote to the TV.

    Serialized with ``by_alias=True`` for the wire, where the identifier
    is sent as ``id``.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    device_id: str = Field(serialization_alias="id", description="Stable opaque identifier")
    device_name: str = Field(default="tvremote")
    device_os: str = Field(default="Python")
    device_os_version: str = Field(default="")
    app_name: str = Field(default="tvremote")
    app_id: str = Field(default="app.id")
    type: str = Field(default="native")


class TransportConfig(BaseModel):
    """Operator-entered routing settings, captured per request.

    ``cors_mode`` enables the CORS bypass, i.e. opaque ``no-cors``
    requests. ``proxy_mode`` routes through the relay and always wins.
    """

    model_config = ConfigDict(frozen=True)

    host: str = Field(default="", description="TV IP address or hostname")
    port: str = Field(default=DEFAULT_TV_PORT)
    cors_mode: bool = Field(default=False)
    proxy_mode: bool = Field(default=False)
    relay_base_url: str = Field(default="http://localhost:8000")

    @property
    def effective_port(self) -> str:
        return self.port.strip() or DEFAULT_TV_PORT


class RequestTarget(BaseModel):
    """A concrete destination resolved from a TransportConfig and API path."""

    model_config = ConfigDict(frozen=True)

    url: str
    mode: FetchMode
    headers: dict[str, str] = Field(
        default_factory=dict, description="Out-of-band routing headers for the relay"
    )

    @property
    def is_opaque(self) -> bool:
        """Whether the response to this request cannot be read."""
        return self.mode is FetchMode.NO_CORS


class TransportResponse(BaseModel):
    """What the caller is allowed to see of a response.

    Opaque responses carry no status and no body.
    """

    model_config = ConfigDict(frozen=True)

    opaque: bool = False
    status_code: int | None = None
    body: dict | list | None = None

    @property
    def ok(self) -> bool:
        return self.status_code is not None and 200 <= self.status_code < 400

    @classmethod
    def opaque_response(cls) -> TransportResponse:
        return cls(opaque=True)


# ---------------------------------------------------------------------------
# Outcome Models (discriminated union)
# ---------------------------------------------------------------------------


class Confirmed(BaseModel):
    """The TV answered with a success status."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["confirmed"] = "confirmed"
    status_code: int
    message: str = ""

    @property
    def ok(self) -> bool:
        return True


class Unconfirmed(BaseModel):
    """The request was sent but its response could not be read."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["unconfirmed"] = "unconfirmed"
    message: str = ""

    @property
    def ok(self) -> bool:
        return True


class LocalError(BaseModel):
    """Rejected before any network call was made."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["local_error"] = "local_error"
    message: str

    @property
    def ok(self) -> bool:
        return False


class Failed(BaseModel):
    """The request failed, either with an HTTP status or at the network level."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["failed"] = "failed"
    message: str
    status_code: int | None = Field(default=None, description="Set for HTTP status errors")

    @property
    def ok(self) -> bool:
        return False


Outcome = Annotated[
    Union[Confirmed, Unconfirmed, LocalError, Failed],
    Field(discriminator="kind"),
]


# ---------------------------------------------------------------------------
# Operator-facing Models
# ---------------------------------------------------------------------------


class ConnectionStatus(BaseModel):
    """The most recent connection state shown to the operator."""

    model_config = ConfigDict(frozen=True)

    ok: bool = True
    label: str = "Idle"


class LogEntry(BaseModel):
    """A single operator-visible event."""

    model_config = ConfigDict(frozen=True)

    message: str
    timestamp: datetime = Field(default_factory=datetime.now)

    @property
    def time_label(self) -> str:
        """Hour and minute of the event, e.g. ``"14:05"``."""
        return self.timestamp.strftime("%H:%M")
