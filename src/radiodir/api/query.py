"""Query-string construction for directory requests.

All functions here are pure: they build paths and query strings and never
touch the network.
"""

from radiodir.api.protocol import TRACK_PATH, VOTE_PATH
from radiodir.models.search import SearchParams, SortOrder

# Applied in order: "%" must come first so later escapes are not re-escaped.
# ":" maps to "%3B", which is what the directory servers expect.
_TEXT_ESCAPES: tuple[tuple[str, str], ...] = (
    ("%", "%25"),
    (":", "%3B"),
    ("/", "%2F"),
    ("#", "%23"),
    ("?", "%3F"),
    ("&", "%26"),
    ("@", "%40"),
    ("+", "%2B"),
    (" ", "%20"),
)


def encode_text(text: str) -> str:
    """Escape a free-text value for use inside a query string.

    Only free-text fields (search text, tag lists) go through here, never
    structural query syntax.

    Args:
        text: Raw text.

    Returns:
        Escaped text.
    """
    output = text
    for char, escaped in _TEXT_ESCAPES:
        output = output.replace(char, escaped)
    return output


def search_query(params: SearchParams, rowcount: int, offset: int = 0) -> str:
    """Build the query string for a station search.

    Parameter order is fixed: limit, order, offset, then the optional
    name, countrycode and reverse, and tag filtering last.

    Args:
        params: Search parameters (``uuids`` is ignored here).
        rowcount: Maximum rows to return.
        offset: Row offset for paging.

    Returns:
        Query string without the leading "?".
    """
    query = f"limit={rowcount}&order={params.order.value}&offset={offset}"

    if params.text:
        query += f"&name={encode_text(params.text)}"
    if params.countrycode:
        query += f"&countrycode={params.countrycode}"
    if params.order is not SortOrder.RANDOM:
        # reverse has no meaning for random order, so it is omitted
        query += f"&reverse={'true' if params.reverse else 'false'}"
    if params.tags:
        tag_list = ",".join(sorted(params.tags))
        query += f"&tagExact=false&tagList={encode_text(tag_list)}"

    return query


def tags_query(offset: int = 0, limit: int = 0) -> str:
    """Build the query string for the tag listing.

    Zero or negative values are left out.
    """
    parts: list[str] = []
    if offset > 0:
        parts.append(f"offset={offset}")
    if limit > 0:
        parts.append(f"limit={limit}")
    return "&".join(parts)


def byuuid_query(uuid: str) -> str:
    """Build the query string for a single station lookup."""
    return f"uuids={encode_text(uuid)}"


def track_path(stationuuid: str) -> str:
    """Return the listen-tracking path for a station."""
    return f"{TRACK_PATH}{encode_text(stationuuid)}"


def vote_path(stationuuid: str) -> str:
    """Return the vote path for a station."""
    return f"{VOTE_PATH}{encode_text(stationuuid)}"


def build_url(server: str, path: str, query: str = "") -> str:
    """Join server, path and query into a request URL.

    Args:
        server: Server hostname (optionally with port).
        path: Absolute path, e.g. "/json/stats".
        query: Query string without "?", may be empty.

    Returns:
        The http URL.
    """
    url = f"http://{server}{path}"
    if query:
        url += f"?{query}"
    return url

