"""Session state shared by all callers of one directory client.

SessionState owns the mutable part of a client session: the server pool,
the committed server, its health score and the client status. Every read and
update goes through one lock, so concurrent callers never see a server in
the middle of a re-selection or lose a score update.

Changes are announced via Qt signals, emitted after the lock is released.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Sequence

from PySide6.QtCore import QObject, Signal

from radiodir.core.selection import HealthTracker, ServerSelector
from radiodir.models.status import Status

logger = logging.getLogger(__name__)


class SessionState(QObject):
    """Lock-guarded session record with change signals.

    Example:
        session = SessionState(ServerSelector(transport))
        session.server_changed.connect(lambda s: print(f"Now using {s}"))
        session.select_server(pool)
        session.record_outcome(failed=True)
    """

    server_changed = Signal(str)
    # Note: Using object for enum payloads (PySide6 limitation)
    status_changed = Signal(object)

    def __init__(self, selector: ServerSelector, parent: QObject | None = None) -> None:
        """Initialize an empty session.

        Args:
            selector: Selector used for the initial and later selections.
            parent: Optional parent QObject.
        """
        super().__init__(parent)
        self._selector = selector
        self._tracker = HealthTracker()
        self._lock = threading.RLock()
        self._pool: tuple[str, ...] = ()
        self._server = ""
        self._status = Status.NOT_AVAILABLE

    @property
    def current_server(self) -> str:
        """Return the committed server, or empty string before selection."""
        with self._lock:
            return self._server

    @property
    def health(self) -> int:
        """Return the committed server's health score."""
        with self._lock:
            return self._tracker.score

    @property
    def status(self) -> Status:
        """Return the client status."""
        with self._lock:
            return self._status

    @property
    def pool(self) -> tuple[str, ...]:
        """Return the server pool for this session."""
        with self._lock:
            return self._pool

    def set_status(self, status: Status) -> None:
        """Move the session to a new status.

        Raises:
            ValueError: On an attempt to go back to NOT_AVAILABLE.
        """
        with self._lock:
            if status is Status.NOT_AVAILABLE and self._status is not Status.NOT_AVAILABLE:
                raise ValueError("session cannot return to NOT_AVAILABLE")
            changed = status is not self._status
            self._status = status

        if changed:
            self.status_changed.emit(status)

    def select_server(self, pool: Sequence[str]) -> str:
        """Adopt a server pool and commit to a server from it.

        Args:
            pool: Non-empty candidate pool.

        Returns:
            The committed server.
        """
        with self._lock:
            self._pool = tuple(pool)
            server = self._selector.select(self._pool)
            changed = server != self._server
            self._server = server
            self._tracker.reset()

        if changed:
            self.server_changed.emit(server)
        return server

    def record_outcome(self, failed: bool, server: str | None = None) -> None:
        """Feed a call outcome into the health score.

        An exhausted server triggers re-selection from the session pool.

        Args:
            failed: True if the call failed.
            server: Server the call went to. Outcomes for a server that is
                no longer committed are ignored.
        """
        new_server = ""
        with self._lock:
            if server is not None and server != self._server:
                logger.debug("Ignoring outcome for replaced server %s", server)
                return
            if failed:
                logger.warning(
                    "Degrading directory server %s (health %d)",
                    self._server,
                    self._tracker.score,
                )
            if self._tracker.record(failed) and self._pool:
                logger.warning("Directory server %s exhausted, re-selecting", self._server)
                new_server = self._selector.select(self._pool)
                if new_server == self._server:
                    new_server = ""
                else:
                    self._server = new_server

        if new_server:
            self.server_changed.emit(new_server)
