"""Server selection and health tracking.

ServerSelector probes a pool of directory servers and commits to the first
one that answers. HealthTracker keeps a bounded trust score for the
committed server; sustained failures exhaust it and force a new selection.

Neither class is thread-safe on its own; SessionState serializes access.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Sequence

from radiodir.api.protocol import HTTP_OK, STATS_PATH
from radiodir.api.query import build_url
from radiodir.api.transport import Transport

logger = logging.getLogger(__name__)


def probe_server(transport: Transport, server: str) -> bool:
    """Check whether a server answers the stats endpoint with HTTP 200.

    Args:
        transport: Transport used for the request.
        server: Server hostname.

    Returns:
        True if the server answered 200, False otherwise.
    """
    # The directory servers do not support HEAD, so this is a full GET
    url = build_url(server, STATS_PATH)
    try:
        status = transport.get(url).status
    except Exception as e:  # noqa: BLE001
        logger.debug("Probe of %s raised: %s", server, e)
        return False
    logger.debug("Probe of %s: HTTP %d", server, status)
    return status == HTTP_OK


class ServerSelector:
    """Pick a working server from a pool.

    Probing starts at a random index and walks the pool in order, wrapping
    around. The first server answering HTTP 200 wins; if none does, the last
    one probed is returned so the caller still has a server to degrade.

    Example:
        selector = ServerSelector(UrllibTransport(), rng=random.Random(42))
        server = selector.select(["de1.api.radio-browser.info", "fi1.api.radio-browser.info"])
    """

    def __init__(self, transport: Transport, rng: random.Random | None = None) -> None:
        """Initialize the selector.

        Args:
            transport: Transport used for probing.
            rng: Random source for the start index (injectable for tests).
        """
        self._transport = transport
        self._rng = rng or random.Random()

    def select(self, pool: Sequence[str]) -> str:
        """Probe the pool and return the committed server.

        Args:
            pool: Candidate server hostnames.

        Returns:
            The first server that answered, or the last probed one.

        Raises:
            ValueError: If the pool is empty.
        """
        if not pool:
            raise ValueError("cannot select from an empty server pool")

        start = self._rng.randrange(len(pool))
        server = pool[start]
        for offset in range(len(pool)):
            server = pool[(start + offset) % len(pool)]
            if probe_server(self._transport, server):
                logger.info("Chosen directory server: %s", server)
                return server

        logger.warning("No directory server answered; falling back to %s", server)
        return server


class HealthTracker:
    """Bounded trust score for the committed server.

    Success adds one point up to CAPITAL. Failure costs COST points; a score
    below zero means the server is exhausted, and the score resets to
    CAPITAL for the replacement. From full health the 15th consecutive
    failure exhausts the server.
    """

    CAPITAL = 100
    COST = 7

    def __init__(self) -> None:
        """Initialize with full health."""
        self._score = self.CAPITAL

    @property
    def score(self) -> int:
        """Return the current score, always within [0, CAPITAL]."""
        return self._score

    def reset(self) -> None:
        """Restore full health (on every selection)."""
        self._score = self.CAPITAL

    def record(self, failed: bool) -> bool:
        """Record a call outcome.

        Args:
            failed: True if the call failed.

        Returns:
            True if the server is exhausted and must be re-selected. The
            score has already been reset to CAPITAL in that case.
        """
        if not failed:
            self._score = min(self.CAPITAL, self._score + 1)
            return False

        self._score -= self.COST
        if self._score < 0:
            self._score = self.CAPITAL
            return True
        return False
