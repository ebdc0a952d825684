"""Blocking HTTP GET transport over urllib."""

from __future__ import annotations

import http.client
import logging
import urllib.error
import urllib.request
from typing import Protocol

from radiodir.api.protocol import HttpResponse

logger = logging.getLogger(__name__)

# Sent on every request; the directory operators ask clients to identify themselves
USER_AGENT = "radiodir/0.1.0"

# Request timeout in seconds
REQUEST_TIMEOUT = 10.0


class Transport(Protocol):
    """A blocking GET primitive."""

    def get(self, url: str) -> HttpResponse:
        """Fetch ``url`` and return its status and body.

        Must not raise for network failures: those return status 0.
        """
        ...


class UrllibTransport:
    """Transport backed by ``urllib.request``.

    Example:
        transport = UrllibTransport(timeout=5.0)
        response = transport.get("http://de1.api.radio-browser.info/json/stats")
        if response.is_ok:
            print(response.body)
    """

    def __init__(self, timeout: float = REQUEST_TIMEOUT, user_agent: str = USER_AGENT) -> None:
        """Initialize the transport.

        Args:
            timeout: Per-request timeout in seconds.
            user_agent: User-Agent header value.
        """
        self._timeout = timeout
        self._user_agent = user_agent

    @property
    def timeout(self) -> float:
        """Return the request timeout in seconds."""
        return self._timeout

    def get(self, url: str) -> HttpResponse:
        """Fetch a URL (blocking).

        Args:
            url: URL to fetch.

        Returns:
            HttpResponse; status 0 and no body when the request failed
            before a response arrived.
        """
        req = urllib.request.Request(url, headers={"User-Agent": self._user_agent})
        try:
            with urllib.request.urlopen(req, timeout=self._timeout) as response:
                return HttpResponse(status=response.status, body=response.read())
        except urllib.error.HTTPError as e:
            # Non-2xx statuses arrive as exceptions; keep the status code
            logger.debug("HTTP %d for %s", e.code, url)
            return HttpResponse(status=e.code)
        except (urllib.error.URLError, http.client.HTTPException, TimeoutError, OSError) as e:
            logger.debug("Request to %s failed: %s", url, e)
            return HttpResponse(status=0)
        except ValueError as e:
            # Malformed URL (e.g. a bogus host from a static server list)
            logger.debug("Invalid URL %s: %s", url, e)
            return HttpResponse(status=0)
