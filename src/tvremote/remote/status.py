"""Connection status and operator event log."""

from __future__ import annotations

import logging

from tvremote.domain.models import ConnectionStatus, LogEntry

logger = logging.getLogger(__name__)


class StatusBoard:
    """Holds the latest connection status and a newest-first event log.

    The status is overwritten by every outcome. Log entries accumulate
    until clear() is called.
    """

    def __init__(self) -> None:
        self._status = ConnectionStatus()
        self._entries: list[LogEntry] = []

    @property
    def status(self) -> ConnectionStatus:
        return self._status

    @property
    def entries(self) -> list[LogEntry]:
        """Log entries, most recent first."""
        return list(self._entries)

    def set_status(self, label: str, ok: bool = True) -> None:
        self._status = ConnectionStatus(ok=ok, label=label)

    def log(self, message: str) -> LogEntry:
        entry = LogEntry(message=message)
        self._entries.insert(0, entry)
        logger.debug(message)
        return entry

    def clear(self) -> None:
        self._entries.clear()
