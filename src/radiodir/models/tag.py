"""Tag model."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class Tag:
    """A station tag and how many stations carry it.

    Attributes:
        name: Tag label.
        station_count: Number of stations tagged with it.
    """

    name: str
    station_count: int = 0

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Tag":
        """Create a Tag from a server JSON object.

        Raises:
            ValueError: If the object has no usable name.
        """
        name = data.get("name")
        if not isinstance(name, str) or not name:
            raise ValueError("tag object has no name")
        count = data.get("stationcount", 0)
        return cls(
            name=name,
            station_count=count if isinstance(count, int) and not isinstance(count, bool) else 0,
        )
