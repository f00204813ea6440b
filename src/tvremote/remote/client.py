"""High-level remote control for a single TV.

TvRemote ties together the transport configuration, the pairing session
and the operator-facing status board. Every public operation returns an
Outcome and never raises: failures become a status update plus a log
entry with remediation guidance.
"""

from __future__ import annotations

import logging
from typing import Any

from tvremote.domain.models import (
    Confirmed,
    Failed,
    LocalError,
    Outcome,
    PairingState,
    TransportConfig,
    Unconfirmed,
)
from tvremote.remote.pairing import REMEDIATION_HINT, PairingSession
from tvremote.remote.status import StatusBoard
from tvremote.storage.base import KeyValueStore, StorageError
from tvremote.transport.base import HttpStatusError, Transport, TransportError

logger = logging.getLogger(__name__)

INPUT_KEY_PATH = "/1/input/key"
LAUNCH_PATH = "/1/activities/launch"

READY_MESSAGE = "Remote ready. Connect to your Philips TV."


class TvRemote:
    """Sends commands to the TV and drives pairing.

    Example usage::

        async with HttpTransport() as transport:
            remote = TvRemote(transport, JsonFileStore("store.json"),
                              TransportConfig(host="192.168.1.20"))
            await remote.request_pairing()
            await remote.confirm_pairing("1234")
            await remote.send_key("VolumeUp")

    Calls are independent: overlapping calls run concurrently, each one
    reading the transport configuration current at the time it starts.
    """

    def __init__(
        self,
        transport: Transport,
        store: KeyValueStore,
        config: TransportConfig | None = None,
        board: StatusBoard | None = None,
    ) -> None:
        self._transport = transport
        self._config = config or TransportConfig()
        self._board = board or StatusBoard()
        self._pairing = PairingSession(store, transport)
        self._board.log(READY_MESSAGE)

    @property
    def config(self) -> TransportConfig:
        return self._config

    @property
    def board(self) -> StatusBoard:
        return self._board

    @property
    def pairing_state(self) -> PairingState:
        return self._pairing.state

    @property
    def pairing(self) -> PairingSession:
        return self._pairing

    # -------------------------------------------------------------------
    # Configuration
    # -------------------------------------------------------------------

    def configure(self, **changes: Any) -> TransportConfig:
        """Replace fields of the transport configuration (host, port, modes)."""
        self._config = self._config.model_copy(update=changes)
        return self._config

    def update_target(self, host: str, port: str | None = None) -> TransportConfig:
        """Point the remote at a new TV address."""
        changes: dict[str, str] = {"host": host.strip()}
        if port is not None:
            changes["port"] = port.strip()
        config = self.configure(**changes)
        self._board.set_status("Ready", ok=True)
        self._board.log("IP address updated")
        return config

    def clear_log(self) -> None:
        self._board.clear()

    # -------------------------------------------------------------------
    # Commands
    # -------------------------------------------------------------------

    async def send_key(self, key: str) -> Outcome:
        """Press a remote-control key, e.g. ``"VolumeUp"``."""
        self._board.log(f"Sending key: {key}")
        return await self._dispatch(
            INPUT_KEY_PATH,
            {"key": key},
            ok_label="Command sent",
            fail_label="Failed to reach TV",
        )

    async def launch_app(self, action: str) -> Outcome:
        """Launch an application through an activity intent."""
        self._board.log(f"Launching: {action}")
        return await self._dispatch(
            LAUNCH_PATH,
            {"intent": {"action": action}},
            ok_label="App launched",
            fail_label="Launch failed",
        )

    async def _dispatch(
        self, path: str, payload: dict[str, Any], ok_label: str, fail_label: str
    ) -> Outcome:
        config = self._config
        try:
            response = await self._transport.post(config, path, payload)
        except HttpStatusError as e:
            failed = Failed(message=f"{e}. {REMEDIATION_HINT}", status_code=e.status_code)
            return self._report_failure(failed, fail_label)
        except TransportError as e:
            return self._report_failure(Failed(message=f"{e}. {REMEDIATION_HINT}"), fail_label)

        outcome: Outcome
        if response.opaque:
            outcome = Unconfirmed(message=f"{ok_label} (no-cors)")
        else:
            outcome = Confirmed(status_code=response.status_code or 200, message=ok_label)
        self._board.set_status(outcome.message, ok=True)
        return outcome

    def _report_failure(self, outcome: Failed, fail_label: str) -> Outcome:
        self._board.set_status(fail_label, ok=False)
        self._board.log(f"Error: {outcome.message}")
        return outcome

    # -------------------------------------------------------------------
    # Pairing
    # -------------------------------------------------------------------

    async def request_pairing(self) -> Outcome:
        """Start pairing; the TV shows a code on screen."""
        self._board.log("Requesting pairing")
        try:
            outcome = await self._pairing.request(self._config)
        except StorageError as e:
            outcome = Failed(message=str(e))
        return self._report_pairing(
            outcome,
            ok_label="Pairing requested, enter the code shown on the TV",
            unconfirmed_label="Pairing request sent (unconfirmed)",
            fail_label="Pairing request failed",
        )

    async def confirm_pairing(self, pin: str) -> Outcome:
        """Finish pairing with the code shown on the TV."""
        if pin and pin.strip():
            self._board.log("Confirming pairing code")
        try:
            outcome = await self._pairing.confirm(self._config, pin)
        except StorageError as e:
            outcome = Failed(message=str(e))
        return self._report_pairing(
            outcome,
            ok_label="Paired",
            unconfirmed_label="Pairing code sent (unconfirmed)",
            fail_label="Pairing failed",
        )

    def _report_pairing(
        self, outcome: Outcome, ok_label: str, unconfirmed_label: str, fail_label: str
    ) -> Outcome:
        if isinstance(outcome, Confirmed):
            self._board.set_status(ok_label, ok=True)
        elif isinstance(outcome, Unconfirmed):
            self._board.set_status(unconfirmed_label, ok=True)
            self._board.log(f"{outcome.message}; enable proxy mode to confirm")
        elif isinstance(outcome, LocalError):
            self._board.set_status(outcome.message, ok=False)
            self._board.log(f"Error: {outcome.message}")
        else:
            self._board.set_status(fail_label, ok=False)
            self._board.log(f"Error: {outcome.message}")
        return outcome
