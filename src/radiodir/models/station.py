"""Station model representing a radio-browser.info directory entry."""

from dataclasses import dataclass, field
from typing import Any


def _split_tags(raw: object) -> frozenset[str]:
    """Split the server's comma-separated tag string into a set."""
    if not isinstance(raw, str):
        return frozenset()
    return frozenset(t.strip() for t in raw.split(",") if t.strip())


def _to_int(raw: object, default: int = 0) -> int:
    """Coerce a JSON scalar to int, falling back to default."""
    if isinstance(raw, bool):
        return int(raw)
    if isinstance(raw, int):
        return raw
    if isinstance(raw, str | float):
        try:
            return int(raw)
        except (ValueError, OverflowError):
            return default
    return default


def _to_float(raw: object) -> float | None:
    """Coerce a JSON scalar to float, or None if absent/invalid."""
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, int | float):
        return float(raw)
    if isinstance(raw, str):
        try:
            return float(raw)
        except ValueError:
            return None
    return None


def _to_str(raw: object) -> str:
    return raw if isinstance(raw, str) else ""


@dataclass(frozen=True, slots=True, eq=False)
class Station:
    """A station as reported by a directory server.

    Identity is the station UUID: two Station objects with the same uuid
    compare equal and hash alike, whatever server they came from.

    Attributes:
        uuid: Station UUID (``stationuuid`` on the wire).
        name: Station name.
        url: Stream URL as submitted.
        url_resolved: Stream URL after server-side playlist resolution.
        homepage: Station homepage.
        favicon: Favicon URL.
        tags: Set of tags.
        country: Country name.
        countrycode: ISO 3166-1 alpha-2 country code.
        state: State/region.
        language: Comma-separated language names.
        codec: Audio codec (MP3, AAC, ...).
        bitrate: Bitrate in kbps.
        votes: Vote count.
        clickcount: Clicks in the last 24 hours.
        clicktrend: Click difference against the previous day.
        lastcheckok: Whether the last server-side stream check succeeded.
        hls: Whether the stream is HLS.
        geo_lat: Latitude, if known.
        geo_long: Longitude, if known.
    """

    uuid: str
    name: str = ""
    url: str = ""
    url_resolved: str = ""
    homepage: str = ""
    favicon: str = ""
    tags: frozenset[str] = field(default_factory=frozenset)
    country: str = ""
    countrycode: str = ""
    state: str = ""
    language: str = ""
    codec: str = ""
    bitrate: int = 0
    votes: int = 0
    clickcount: int = 0
    clicktrend: int = 0
    lastcheckok: bool = True
    hls: bool = False
    geo_lat: float | None = None
    geo_long: float | None = None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Station):
            return NotImplemented
        return self.uuid == other.uuid

    def __hash__(self) -> int:
        return hash(self.uuid)

    @property
    def stream_url(self) -> str:
        """Return the resolved stream URL, falling back to the submitted one."""
        return self.url_resolved or self.url

    @property
    def display_name(self) -> str:
        """Return name or uuid as fallback for display."""
        return self.name.strip() or self.uuid

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Station":
        """Create a Station from a server JSON object.

        Missing or mistyped fields fall back to defaults.

        Raises:
            ValueError: If the object carries no station uuid.
        """
        uuid = _to_str(data.get("stationuuid"))
        if not uuid:
            raise ValueError("station object has no stationuuid")
        return cls(
            uuid=uuid,
            name=_to_str(data.get("name")),
            url=_to_str(data.get("url")),
            url_resolved=_to_str(data.get("url_resolved")),
            homepage=_to_str(data.get("homepage")),
            favicon=_to_str(data.get("favicon")),
            tags=_split_tags(data.get("tags")),
            country=_to_str(data.get("country")),
            countrycode=_to_str(data.get("countrycode")),
            state=_to_str(data.get("state")),
            language=_to_str(data.get("language")),
            codec=_to_str(data.get("codec")),
            bitrate=_to_int(data.get("bitrate")),
            votes=_to_int(data.get("votes")),
            clickcount=_to_int(data.get("clickcount")),
            clicktrend=_to_int(data.get("clicktrend")),
            lastcheckok=bool(_to_int(data.get("lastcheckok"), 1)),
            hls=bool(_to_int(data.get("hls"))),
            geo_lat=_to_float(data.get("geo_lat")),
            geo_long=_to_float(data.get("geo_long")),
        )
