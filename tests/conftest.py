"""Test fixtures for radiodir tests."""

import json
import os
import random
from collections.abc import Callable
from typing import Any

import pytest

# Qt must not look for a display in CI
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from radiodir.api.protocol import HttpResponse  # noqa: E402

Handler = Callable[[str], HttpResponse]


class FakeTransport:
    """Transport returning canned responses keyed by URL prefix.

    Routes are matched longest-prefix first. Unrouted URLs answer status 0.
    Every requested URL is recorded in ``requests``.
    """

    def __init__(self) -> None:
        self.requests: list[str] = []
        self._routes: dict[str, Handler] = {}

    def route(
        self,
        prefix: str,
        status: int = 200,
        body: Any = None,
        raw: bytes | None = None,
    ) -> None:
        """Answer URLs starting with prefix.

        Args:
            prefix: URL prefix, e.g. "http://a/json/stats".
            status: HTTP status to return.
            body: JSON-serializable body.
            raw: Raw body bytes (overrides body).
        """
        payload = raw if raw is not None else (None if body is None else json.dumps(body).encode())
        self._routes[prefix] = lambda _url: HttpResponse(status=status, body=payload)

    def route_handler(self, prefix: str, handler: Handler) -> None:
        """Answer URLs starting with prefix via a callable."""
        self._routes[prefix] = handler

    def get(self, url: str) -> HttpResponse:
        self.requests.append(url)
        for prefix in sorted(self._routes, key=len, reverse=True):
            if url.startswith(prefix):
                return self._routes[prefix](url)
        return HttpResponse(status=0)

    def requested(self, prefix: str) -> list[str]:
        """Return recorded URLs starting with prefix."""
        return [u for u in self.requests if u.startswith(prefix)]


def station_json(uuid: str, name: str = "", **extra: Any) -> dict[str, Any]:
    """Return a station object as the directory serves it."""
    data: dict[str, Any] = {
        "stationuuid": uuid,
        "name": name or f"Station {uuid}",
        "url": f"http://stream.example/{uuid}",
        "url_resolved": f"http://stream.example/{uuid}.mp3",
        "tags": "jazz,blues",
        "countrycode": "DE",
        "votes": 10,
    }
    data.update(extra)
    return data


@pytest.fixture
def transport() -> FakeTransport:
    """Return an empty fake transport."""
    return FakeTransport()


@pytest.fixture
def rng() -> random.Random:
    """Return a seeded random source."""
    return random.Random(1234)


@pytest.fixture
def mock_stats_response() -> dict[str, Any]:
    """Return a /json/stats response body."""
    return {
        "supported_version": 1,
        "software_version": "0.7.31",
        "status": "OK",
        "stations": 51234,
        "stations_broken": 812,
        "tags": 9876,
        "clicks_last_hour": 4000,
        "clicks_last_day": 90000,
        "languages": 450,
        "countries": 220,
    }
