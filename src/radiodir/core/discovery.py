"""Directory server discovery.

Candidate servers come from, in order of preference:

1. A static colon-separated host list supplied by the caller.
2. DNS SRV records for ``_api._tcp.radio-browser.info``.
3. The ``/json/servers`` endpoint of the round-robin bootstrap host.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

import dns.exception
import dns.resolver

from radiodir.api.marshal import to_server_names
from radiodir.api.protocol import SERVERS_PATH, NoConnectionError, ParseDataError
from radiodir.api.query import build_url
from radiodir.api.transport import Transport

logger = logging.getLogger(__name__)

# DNS SRV record advertising the API servers
SRV_SERVICE = "api"
SRV_PROTOCOL = "tcp"
SRV_DOMAIN = "radio-browser.info"

# Round-robin name used only to fetch the server list when SRV lookup fails
BOOTSTRAP_HOST = "all.api.radio-browser.info"

# Separator for static server lists
STATIC_SEPARATOR = ":"

SrvLookup = Callable[[str, str, str], list[str]]


def lookup_srv_hosts(service: str, protocol: str, domain: str) -> list[str]:
    """Resolve SRV record targets to hostnames.

    Args:
        service: Service name without underscore (e.g. "api").
        protocol: Protocol name without underscore (e.g. "tcp").
        domain: Domain to query.

    Returns:
        Target hostnames with the trailing dot stripped.

    Raises:
        dns.exception.DNSException: If the lookup fails.
    """
    answer = dns.resolver.resolve(f"_{service}._{protocol}.{domain}", "SRV")
    return [str(record.target).rstrip(".") for record in answer]


def parse_static_servers(servers: str) -> list[str]:
    """Split a colon-separated server list, dropping blanks."""
    return [s.strip() for s in servers.split(STATIC_SEPARATOR) if s.strip()]


class ServerDirectory:
    """Resolve the pool of candidate directory servers.

    No result is cached: every call to resolve() goes back to its source.

    Example:
        directory = ServerDirectory(UrllibTransport())
        pool = directory.resolve()

        # Skip discovery entirely
        pool = ServerDirectory(transport, static_servers="de1.api.radio-browser.info").resolve()
    """

    def __init__(
        self,
        transport: Transport,
        static_servers: str | None = None,
        srv_lookup: SrvLookup = lookup_srv_hosts,
    ) -> None:
        """Initialize the directory.

        Args:
            transport: Transport for the bootstrap request.
            static_servers: Colon-separated server override, used verbatim.
            srv_lookup: SRV lookup function (injectable for tests).
        """
        self._transport = transport
        self._static_servers = static_servers
        self._srv_lookup = srv_lookup

    def resolve(self) -> tuple[str, ...]:
        """Resolve the current server pool.

        Returns:
            Server hostnames; may be empty if a source answered with none.

        Raises:
            NoConnectionError: If DNS gave nothing and the bootstrap host
                could not be queried or answered with unusable data.
        """
        if self._static_servers is not None:
            servers = parse_static_servers(self._static_servers)
            logger.debug("Using %d static directory servers", len(servers))
            return tuple(servers)

        servers = self._from_dns()
        if not servers:
            servers = self._from_bootstrap()

        logger.debug("Resolved %d directory servers", len(servers))
        return tuple(servers)

    def _from_dns(self) -> list[str]:
        """Look up servers via DNS SRV; empty on failure."""
        try:
            hosts = self._srv_lookup(SRV_SERVICE, SRV_PROTOCOL, SRV_DOMAIN)
        except (dns.exception.DNSException, OSError) as e:
            logger.warning("Unable to resolve directory SRV records: %s", e)
            return []
        return [h for h in hosts if h]

    def _from_bootstrap(self) -> list[str]:
        """Fetch the server list from the bootstrap host.

        Raises:
            NoConnectionError: On transport failure, non-200 or bad JSON.
        """
        url = build_url(BOOTSTRAP_HOST, SERVERS_PATH)
        response = self._transport.get(url)
        logger.debug("Response from %s: %d", url, response.status)

        if not response.is_ok:
            raise NoConnectionError(f"{url} answered HTTP {response.status}")

        try:
            return to_server_names(response.body)
        except ParseDataError as e:
            raise NoConnectionError(f"unusable server list from {url}: {e.message}") from e
