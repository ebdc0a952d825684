"""Resilient client for the radio-browser.info station directory."""

from radiodir.api.client import RadioBrowserClient
from radiodir.api.protocol import DataError, NoConnectionError, ParseDataError
from radiodir.core.config import ClientConfig
from radiodir.models import InitResult, SearchParams, SortOrder, Station, Status, Tag

__version__ = "0.1.0"

__all__ = [
    "ClientConfig",
    "DataError",
    "InitResult",
    "NoConnectionError",
    "ParseDataError",
    "RadioBrowserClient",
    "SearchParams",
    "SortOrder",
    "Station",
    "Status",
    "Tag",
]
