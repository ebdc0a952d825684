"""HTTP/JSON client for the radio-browser.info directory."""

from radiodir.api.client import RadioBrowserClient
from radiodir.api.protocol import (
    DataError,
    HttpResponse,
    NoConnectionError,
    ParseDataError,
)
from radiodir.api.transport import Transport, UrllibTransport

__all__ = [
    "RadioBrowserClient",
    "DataError",
    "NoConnectionError",
    "ParseDataError",
    "HttpResponse",
    "Transport",
    "UrllibTransport",
]
