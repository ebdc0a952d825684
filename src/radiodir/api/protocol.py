"""HTTP protocol types and error taxonomy for the directory API."""

from dataclasses import dataclass

# Endpoints, relative to a directory server
STATS_PATH = "/json/stats"
SERVERS_PATH = "/json/servers"
SEARCH_PATH = "/json/stations/search"
BYUUID_PATH = "/json/stations/byuuid"
TAGS_PATH = "/json/tags"
TRACK_PATH = "/json/url/"
VOTE_PATH = "/json/vote/"

HTTP_OK = 200


@dataclass(frozen=True)
class HttpResponse:
    """Result of a blocking GET.

    Attributes:
        status: HTTP status code, or 0 if no response was received.
        body: Response body, or None if there was none.
    """

    status: int
    body: bytes | None = None

    @property
    def is_ok(self) -> bool:
        """Return True for an HTTP 200 with a body."""
        return self.status == HTTP_OK and self.body is not None


class DataError(Exception):
    """Base class for directory data errors.

    Attributes:
        message: Human-readable cause.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NoConnectionError(DataError):
    """No directory server could be reached or resolved."""


class ParseDataError(DataError):
    """A server response could not be parsed into the expected shape."""
