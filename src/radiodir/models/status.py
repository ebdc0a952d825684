"""Client status and initialization result."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from radiodir.api.protocol import DataError


class Status(Enum):
    """Lifecycle status of a directory client."""

    NOT_AVAILABLE = "not_available"
    NO_SERVER_LIST = "no_server_list"
    NO_SERVERS_PRESENTED = "no_servers_presented"
    OK = "ok"

    @property
    def is_ready(self) -> bool:
        """Return True if the client has a committed server."""
        return self is Status.OK


@dataclass(frozen=True)
class InitResult:
    """Outcome of a client initialization.

    Truthy when initialization succeeded.

    Attributes:
        ok: Whether a server was committed.
        status: Client status after the attempt.
        server: Committed server hostname (empty on failure).
        error: Cause of failure, if any.
    """

    ok: bool
    status: Status
    server: str = ""
    error: DataError | None = None

    def __bool__(self) -> bool:
        return self.ok
