"""Two-step pairing handshake with the TV.

    UNPAIRED --request()--> REQUESTED --confirm(pin)--> PAIRED

Confirming before any request is refused locally: there is no auth key
to send with the code.

A failed step reports a Failed outcome (state FAILED) but keeps the
progress reached so far and the persisted auth key unchanged.

Over an opaque transport the TV's answer cannot be read: the step still
advances, reporting Unconfirmed, and no auth key is learned.
"""

from __future__ import annotations

import logging

from tvremote.domain.models import (
    Confirmed,
    DeviceIdentity,
    Failed,
    LocalError,
    Outcome,
    PairingState,
    TransportConfig,
    Unconfirmed,
)
from tvremote.remote.identity import load_device_identity
from tvremote.storage.base import AUTH_KEY_KEY, KeyValueStore
from tvremote.transport.base import HttpStatusError, Transport, TransportError

logger = logging.getLogger(__name__)

PAIR_REQUEST_PATH = "/1/pair/request"
PAIR_GRANT_PATH = "/1/pair/grant"

REMEDIATION_HINT = "Try no-cors mode or a local proxy."


class PairingSession:
    """Drives the pairing state machine for one remote."""

    def __init__(
        self,
        store: KeyValueStore,
        transport: Transport,
        identity: DeviceIdentity | None = None,
    ) -> None:
        self._store = store
        self._transport = transport
        self._identity = identity
        self._progress = PairingState.REQUESTED if self.auth_key else PairingState.UNPAIRED
        self._last_outcome: Outcome | None = None

    @property
    def state(self) -> PairingState:
        """Current state; FAILED right after a failed step."""
        if isinstance(self._last_outcome, Failed):
            return PairingState.FAILED
        return self._progress

    @property
    def progress(self) -> PairingState:
        """Furthest step reached, unaffected by failed attempts."""
        return self._progress

    @property
    def last_outcome(self) -> Outcome | None:
        return self._last_outcome

    @property
    def auth_key(self) -> str:
        """The persisted auth key, or ``""`` when none was issued."""
        return self._store.get(AUTH_KEY_KEY) or ""

    @property
    def identity(self) -> DeviceIdentity:
        """Device identity, created on first use."""
        if self._identity is None:
            self._identity = load_device_identity(self._store)
        return self._identity

    async def request(self, config: TransportConfig) -> Outcome:
        """Ask the TV to start pairing and store the auth key it issues."""
        payload = {"device": self.identity.model_dump(by_alias=True)}
        try:
            response = await self._transport.post(config, PAIR_REQUEST_PATH, payload)
        except TransportError as e:
            return self._fail(e)

        if response.opaque:
            outcome: Outcome = Unconfirmed(message="Pairing request sent, response unreadable")
        else:
            body = response.body if isinstance(response.body, dict) else {}
            auth_key = body.get("auth_key") or ""
            self._store.set(AUTH_KEY_KEY, str(auth_key))
            logger.debug("Stored auth key (%d chars)", len(str(auth_key)))
            outcome = Confirmed(status_code=response.status_code or 200)

        self._progress = PairingState.REQUESTED
        self._last_outcome = outcome
        return outcome

    async def confirm(self, config: TransportConfig, pin: str) -> Outcome:
        """Send the pairing code shown on the TV together with the auth key."""
        pin = (pin or "").strip()
        if not pin:
            outcome: Outcome = LocalError(message="Pairing code is required")
            self._last_outcome = outcome
            return outcome
        if self._progress is PairingState.UNPAIRED:
            outcome = LocalError(message="Request pairing before sending the code")
            self._last_outcome = outcome
            return outcome

        payload = {
            "auth": self.auth_key,
            "device": self.identity.model_dump(by_alias=True),
            "pin": pin,
        }
        try:
            response = await self._transport.post(config, PAIR_GRANT_PATH, payload)
        except TransportError as e:
            return self._fail(e)

        if response.opaque:
            outcome = Unconfirmed(message="Pairing code sent, response unreadable")
        else:
            outcome = Confirmed(status_code=response.status_code or 200)

        self._progress = PairingState.PAIRED
        self._last_outcome = outcome
        return outcome

    def _fail(self, error: TransportError) -> Outcome:
        status_code = error.status_code if isinstance(error, HttpStatusError) else None
        outcome = Failed(message=f"{error}. {REMEDIATION_HINT}", status_code=status_code)
        logger.debug("Pairing step failed in state %s: %s", self._progress.value, error)
        self._last_outcome = outcome
        return outcome
