"""Search parameter types."""

from dataclasses import dataclass, field
from enum import Enum


class SortOrder(Enum):
    """Sort keys accepted by the station search endpoint.

    The value is the token sent as the ``order`` query parameter.
    """

    NAME = "name"
    URL = "url"
    HOMEPAGE = "homepage"
    FAVICON = "favicon"
    TAGS = "tags"
    COUNTRY = "country"
    STATE = "state"
    LANGUAGE = "language"
    VOTES = "votes"
    CODEC = "codec"
    BITRATE = "bitrate"
    LASTCHECKOK = "lastcheckok"
    LASTCHECKTIME = "lastchecktime"
    CLICKTIMESTAMP = "clicktimestamp"
    CLICKCOUNT = "clickcount"
    CLICKTREND = "clicktrend"
    CHANGETIMESTAMP = "changetimestamp"
    RANDOM = "random"

    @classmethod
    def from_string(cls, value: str) -> "SortOrder":
        """Parse an order token, defaulting to NAME for unknown values."""
        try:
            return cls(value.lower())
        except ValueError:
            return cls.NAME


@dataclass(frozen=True)
class SearchParams:
    """Parameters for a station search.

    When ``uuids`` is non-empty it takes precedence over every other field
    and the search becomes one lookup per uuid.

    Attributes:
        text: Free-text name filter.
        tags: Tags to match (partial matching).
        countrycode: Country code filter.
        order: Sort key.
        reverse: Reverse the sort (ignored for random order).
        uuids: Station uuids to fetch directly.
    """

    text: str = ""
    tags: frozenset[str] = field(default_factory=frozenset)
    countrycode: str = ""
    order: SortOrder = SortOrder.NAME
    reverse: bool = False
    uuids: tuple[str, ...] | None = None

    @property
    def is_uuid_lookup(self) -> bool:
        """Return True if this search is a direct uuid lookup."""
        return bool(self.uuids)
