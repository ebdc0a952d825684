"""Data models for directory stations, tags, search parameters and status."""

from radiodir.models.search import SearchParams, SortOrder
from radiodir.models.station import Station
from radiodir.models.stats import ServerStats
from radiodir.models.status import InitResult, Status
from radiodir.models.tag import Tag

__all__ = [
    "InitResult",
    "SearchParams",
    "ServerStats",
    "SortOrder",
    "Station",
    "Status",
    "Tag",
]
