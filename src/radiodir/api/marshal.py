"""Tolerant JSON decoding of directory responses.

Servers vary in freshness and sometimes return partial data. The rules are:

- A body that is not valid JSON raises ParseDataError.
- A null/missing top-level array decodes to an empty result.
- Elements that are not objects, or objects that cannot be turned into an
  entity, are skipped and logged instead of failing the whole response.
"""

from __future__ import annotations

import json
import logging
from typing import Any, cast

from radiodir.api.protocol import ParseDataError
from radiodir.models.station import Station
from radiodir.models.stats import ServerStats
from radiodir.models.tag import Tag

logger = logging.getLogger(__name__)


def parse_json(body: bytes | None) -> Any:
    """Parse a response body into a JSON tree.

    Args:
        body: Raw response bytes; None is treated as JSON null.

    Returns:
        The decoded tree (dict, list, scalar or None).

    Raises:
        ParseDataError: If the body is not valid UTF-8 JSON.
    """
    if body is None:
        return None
    try:
        return json.loads(body.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise ParseDataError(f"unable to parse JSON response: {e}") from e


def _objects(tree: Any, what: str) -> list[dict[str, Any]]:
    """Return the object elements of a top-level array.

    Null decodes to an empty list. Any other non-array root is a shape error.
    """
    if tree is None:
        return []
    if not isinstance(tree, list):
        raise ParseDataError(f"expected a JSON array of {what}, got {type(tree).__name__}")
    objects: list[dict[str, Any]] = []
    for element in cast(list[object], tree):
        if isinstance(element, dict):
            objects.append(cast(dict[str, Any], element))
        else:
            logger.debug("Skipping non-object %s element: %r", what, element)
    return objects


def to_stations(body: bytes | None) -> set[Station]:
    """Decode a station array into a set of stations (deduplicated by uuid)."""
    stations: set[Station] = set()
    for obj in _objects(parse_json(body), "stations"):
        try:
            stations.add(Station.from_dict(obj))
        except ValueError as e:
            logger.debug("Skipping station entry: %s", e)
    return stations


def to_tags(body: bytes | None) -> set[Tag]:
    """Decode a tag array into a set of tags."""
    tags: set[Tag] = set()
    for obj in _objects(parse_json(body), "tags"):
        try:
            tags.add(Tag.from_dict(obj))
        except ValueError as e:
            logger.debug("Skipping tag entry: %s", e)
    return tags


def to_server_names(body: bytes | None) -> list[str]:
    """Decode a server array into unique server names, in response order.

    Objects without a string ``name`` are skipped.
    """
    names: list[str] = []
    for obj in _objects(parse_json(body), "servers"):
        name = obj.get("name")
        if isinstance(name, str) and name and name not in names:
            names.append(name)
    return names


def to_stats(body: bytes | None) -> ServerStats:
    """Decode the stats object.

    Raises:
        ParseDataError: If the body is not an object with an integer
            ``tags`` field.
    """
    tree = parse_json(body)
    if not isinstance(tree, dict):
        raise ParseDataError("expected a JSON object for server stats")
    try:
        return ServerStats.from_dict(cast(dict[str, Any], tree))
    except ValueError as e:
        raise ParseDataError(str(e)) from e
