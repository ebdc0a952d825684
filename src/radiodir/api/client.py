"""radio-browser.info directory client.

The directory is served by many interchangeable servers. The client
discovers them, commits to one that answers, and quietly moves to another
when the committed server keeps failing. Read calls report failure as an
empty result; the cause is kept in ``last_error``.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Callable

from radiodir.api import marshal
from radiodir.api.protocol import (
    BYUUID_PATH,
    SEARCH_PATH,
    STATS_PATH,
    TAGS_PATH,
    DataError,
    HttpResponse,
    NoConnectionError,
    ParseDataError,
)
from radiodir.api.query import (
    build_url,
    byuuid_query,
    search_query,
    tags_query,
    track_path,
    vote_path,
)
from radiodir.api.transport import Transport, UrllibTransport
from radiodir.core.config import ClientConfig
from radiodir.core.discovery import ServerDirectory, SrvLookup, lookup_srv_hosts
from radiodir.core.selection import ServerSelector
from radiodir.core.session import SessionState
from radiodir.models.search import SearchParams
from radiodir.models.station import Station
from radiodir.models.stats import ServerStats
from radiodir.models.status import InitResult, Status
from radiodir.models.tag import Tag

logger = logging.getLogger(__name__)

OfflineCheck = Callable[[], bool]


def _never_offline() -> bool:
    return False


class RadioBrowserClient:
    """Client for the radio-browser.info directory.

    Safe to share between threads: the committed server and its health live
    in a lock-guarded SessionState.

    Example:
        client = RadioBrowserClient()
        if client.initialize():
            stations = client.search(SearchParams(text="jazz"), rowcount=10)
            for station in stations:
                print(station.display_name, station.stream_url)
    """

    # Tag count guess until the server reports the real one
    DEFAULT_AVAILABLE_TAGS = 1000

    def __init__(
        self,
        servers: str | None = None,
        *,
        config: ClientConfig | None = None,
        transport: Transport | None = None,
        srv_lookup: SrvLookup = lookup_srv_hosts,
        rng: random.Random | None = None,
        is_offline: OfflineCheck = _never_offline,
    ) -> None:
        """Initialize the client. No network I/O happens until initialize().

        Args:
            servers: Colon-separated static server list; overrides
                ``config.servers`` and skips discovery.
            config: Client options.
            transport: HTTP transport (defaults to urllib with the
                configured timeout and user agent).
            srv_lookup: DNS SRV lookup function.
            rng: Random source for server selection.
            is_offline: Returns True when the application is offline.
        """
        self._config = config or ClientConfig()
        self._transport = transport or UrllibTransport(
            timeout=self._config.timeout,
            user_agent=self._config.user_agent,
        )
        self._directory = ServerDirectory(
            self._transport,
            static_servers=servers if servers is not None else self._config.servers,
            srv_lookup=srv_lookup,
        )
        self._session = SessionState(ServerSelector(self._transport, rng=rng))
        self._is_offline = is_offline
        self._available_tags = self.DEFAULT_AVAILABLE_TAGS
        self._last_error: DataError | None = None

    # -- State ----------------------------------------------------------------

    @property
    def session(self) -> SessionState:
        """Return the session state (connect to its signals for changes)."""
        return self._session

    @property
    def status(self) -> Status:
        """Return the client status."""
        return self._session.status

    @property
    def current_server(self) -> str:
        """Return the committed server hostname, or empty string."""
        return self._session.current_server

    @property
    def health(self) -> int:
        """Return the committed server's health score."""
        return self._session.health

    @property
    def available_tags(self) -> int:
        """Return the server-reported tag count (or the default guess)."""
        return self._available_tags

    @property
    def last_error(self) -> DataError | None:
        """Return the most recent data error, if any."""
        return self._last_error

    def clear_last_error(self) -> None:
        """Forget the most recent data error."""
        self._last_error = None

    # -- Lifecycle ------------------------------------------------------------

    def initialize(self) -> InitResult:
        """Discover servers and commit to one.

        Returns:
            InitResult, truthy on success. Offline: not ok, status unchanged.
        """
        if self._is_offline():
            logger.debug("Offline, skipping directory initialization")
            return InitResult(ok=False, status=self.status)

        try:
            pool = self._directory.resolve()
        except DataError as e:
            return self._fail(
                Status.NO_SERVER_LIST,
                NoConnectionError(f"Failed to retrieve API servers: {e.message}"),
            )

        if not pool:
            return self._fail(
                Status.NO_SERVERS_PRESENTED,
                NoConnectionError("Unable to resolve API servers for radio-browser.info"),
            )

        server = self._session.select_server(pool)
        self._session.set_status(Status.OK)
        self.clear_last_error()
        self.stats()
        return InitResult(ok=True, status=Status.OK, server=server)

    def _fail(self, status: Status, error: DataError) -> InitResult:
        logger.warning("Directory initialization failed: %s", error.message)
        self._last_error = error
        self._session.set_status(status)
        return InitResult(ok=False, status=status, error=error)

    # -- Queries --------------------------------------------------------------

    def search(self, params: SearchParams, rowcount: int, offset: int = 0) -> set[Station]:
        """Search for stations.

        With ``params.uuids`` set this is one by_uuid() lookup per uuid and
        every other field is ignored.

        Args:
            params: Search parameters.
            rowcount: Maximum number of stations.
            offset: Row offset for paging.

        Returns:
            Matching stations; empty if the server failed.

        Raises:
            NoConnectionError: If the client has not been initialized.
        """
        if params.is_uuid_lookup:
            stations: set[Station] = set()
            for uuid in params.uuids:
                station = self.by_uuid(uuid)
                if station is not None:
                    stations.add(station)
            return stations

        query = search_query(params, rowcount, offset)
        logger.debug("Search: %s", query)
        return self.station_query(SEARCH_PATH, query)

    def by_uuid(self, uuid: str) -> Station | None:
        """Fetch a station by uuid.

        Returns:
            The station, or None if offline, unknown, or the server failed.

        Raises:
            NoConnectionError: If the client has not been initialized.
        """
        if self._is_offline():
            return None
        stations = self.station_query(BYUUID_PATH, byuuid_query(uuid))
        return next(iter(stations), None)

    def station_query(self, path: str, query: str) -> set[Station]:
        """Run a station query against the committed server.

        Success feeds the health score; a non-200 answer, a transport
        failure or an undecodable body degrades it and yields an empty set.

        Args:
            path: Endpoint path.
            query: Query string without "?".

        Returns:
            Decoded stations.

        Raises:
            NoConnectionError: If the client has not been initialized.
        """
        server = self._require_server()
        url = build_url(server, path, query)
        logger.debug("Requesting url: %s", url)
        response = self._get(url)

        if not response.is_ok:
            logger.debug("Response from directory: %d for url: %s", response.status, url)
            self._last_error = NoConnectionError(f"HTTP {response.status} from {server}")
            self._session.record_outcome(failed=True, server=server)
            return set()

        try:
            stations = marshal.to_stations(response.body)
        except ParseDataError as e:
            logger.debug('JSON error "%s" for url %s', e.message, url)
            self._last_error = e
            self._session.record_outcome(failed=True, server=server)
            return set()

        self._session.record_outcome(failed=False, server=server)
        return stations

    def get_tags(self, offset: int = 0, limit: int = 0) -> set[Tag]:
        """List tags. Never raises.

        Args:
            offset: Row offset (0 to omit).
            limit: Maximum rows (0 to omit).

        Returns:
            Tags, or an empty set on any failure.
        """
        server = self._session.current_server
        if not server:
            logger.debug("get_tags() before initialization")
            return set()

        url = build_url(server, TAGS_PATH, tags_query(offset, limit))
        response = self._get(url)
        if not response.is_ok:
            logger.debug("Cannot get tags: HTTP %d", response.status)
            return set()

        try:
            return marshal.to_tags(response.body)
        except ParseDataError as e:
            logger.debug("Cannot get tags: %s", e.message)
            return set()

    def stats(self) -> ServerStats | None:
        """Fetch the committed server's stats and refresh available_tags.

        Failure is logged and returns None.
        """
        server = self._session.current_server
        if not server:
            return None

        response = self._get(build_url(server, STATS_PATH))
        logger.debug("Stats response: %d", response.status)
        if not response.is_ok:
            logger.warning("Could not get server stats from %s: HTTP %d", server, response.status)
            return None

        try:
            stats = marshal.to_stats(response.body)
        except ParseDataError as e:
            logger.warning("Could not get server stats: %s", e.message)
            return None

        self._available_tags = stats.tags
        return stats

    # -- Reports --------------------------------------------------------------

    def track(self, stationuuid: str) -> None:
        """Report a listen event for a station (fire-and-forget)."""
        logger.debug("Sending listening event for station %s", stationuuid)
        self._report(track_path(stationuuid))

    def vote(self, stationuuid: str) -> None:
        """Vote for a station (fire-and-forget)."""
        logger.debug("Sending vote event for station %s", stationuuid)
        self._report(vote_path(stationuuid))

    def _report(self, path: str) -> None:
        server = self._session.current_server
        if not server:
            logger.debug("Not initialized, dropping report %s", path)
            return
        response = self._get(build_url(server, path))
        logger.debug("Response: %d", response.status)

    # -- Helpers --------------------------------------------------------------

    def _require_server(self) -> str:
        server = self._session.current_server
        if not self._session.status.is_ready or not server:
            raise NoConnectionError("directory client is not initialized")
        return server

    def _get(self, url: str) -> HttpResponse:
        """GET through the transport; a raising transport counts as no response."""
        try:
            return self._transport.get(url)
        except Exception as e:  # noqa: BLE001
            logger.warning("Transport error for %s: %s", url, e)
            return HttpResponse(status=0)
