"""ServerStats model for the /json/stats endpoint."""

from dataclasses import dataclass
from typing import Any


def _count(data: dict[str, Any], key: str) -> int:
    value = data.get(key, 0)
    return value if isinstance(value, int) and not isinstance(value, bool) else 0


@dataclass(frozen=True, slots=True)
class ServerStats:
    """Directory statistics reported by one server.

    Attributes:
        stations: Total station count.
        tags: Total tag count.
        countries: Country count.
        languages: Language count.
        software_version: Server software version.
        status: Server-reported status string ("OK" when healthy).
    """

    stations: int = 0
    tags: int = 0
    countries: int = 0
    languages: int = 0
    software_version: str = ""
    status: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ServerStats":
        """Create ServerStats from the stats JSON object.

        Raises:
            ValueError: If the object has no integer ``tags`` field.
        """
        tags = data.get("tags")
        if not isinstance(tags, int) or isinstance(tags, bool):
            raise ValueError("stats object has no integer 'tags' field")
        version = data.get("software_version", "")
        status = data.get("status", "")
        return cls(
            stations=_count(data, "stations"),
            tags=tags,
            countries=_count(data, "countries"),
            languages=_count(data, "languages"),
            software_version=version if isinstance(version, str) else "",
            status=status if isinstance(status, str) else "",
        )
