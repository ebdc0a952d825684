"""Client configuration, persisted with QSettings."""

import logging
from dataclasses import dataclass

from PySide6.QtCore import QSettings

from radiodir.api.transport import REQUEST_TIMEOUT, USER_AGENT

logger = logging.getLogger(__name__)

# Settings keys
_KEY_SERVERS = "directory/servers"
_KEY_TIMEOUT = "directory/timeout"
_KEY_USER_AGENT = "directory/user_agent"

_MIN_TIMEOUT = 1
_MAX_TIMEOUT = 60


@dataclass(frozen=True)
class ClientConfig:
    """Options for a directory client.

    Attributes:
        servers: Colon-separated static server list, or None for discovery.
        timeout: Request timeout in seconds.
        user_agent: User-Agent header value.
    """

    servers: str | None = None
    timeout: float = REQUEST_TIMEOUT
    user_agent: str = USER_AGENT


class ConfigManager:
    """Wrapper around QSettings for type-safe client options.

    Example:
        config = ConfigManager()
        config.set_servers("de1.api.radio-browser.info:fi1.api.radio-browser.info")
        client = RadioBrowserClient(config=config.client_config())
    """

    def __init__(self, organization: str = "radiodir", application: str = "radiodir") -> None:
        """Initialize the config manager.

        Args:
            organization: Organization name for QSettings.
            application: Application name for QSettings.
        """
        self._settings = QSettings(organization, application)

    @property
    def settings(self) -> QSettings:
        """Return the underlying QSettings instance."""
        return self._settings

    def get_servers(self) -> str | None:
        """Return the static server override.

        Returns:
            Colon-separated host list, or None to use discovery.
        """
        value = self._settings.value(_KEY_SERVERS, "", str)
        return str(value) if value else None

    def set_servers(self, servers: str | None) -> None:
        """Set or clear the static server override.

        Args:
            servers: Colon-separated host list, or None/empty to clear.
        """
        if servers:
            self._settings.setValue(_KEY_SERVERS, servers)
        else:
            self._settings.remove(_KEY_SERVERS)

    def get_timeout(self) -> int:
        """Return the request timeout in seconds (default 10)."""
        value = self._settings.value(_KEY_TIMEOUT, int(REQUEST_TIMEOUT), int)
        try:
            seconds = int(value)  # type: ignore[arg-type]
        except (TypeError, ValueError):
            logger.warning("Invalid timeout setting %r, using default", value)
            seconds = int(REQUEST_TIMEOUT)
        return max(_MIN_TIMEOUT, min(_MAX_TIMEOUT, seconds))

    def set_timeout(self, seconds: int) -> None:
        """Set the request timeout.

        Args:
            seconds: Timeout in seconds (1-60).
        """
        self._settings.setValue(_KEY_TIMEOUT, max(_MIN_TIMEOUT, min(_MAX_TIMEOUT, seconds)))

    def get_user_agent(self) -> str:
        """Return the User-Agent header value."""
        value = self._settings.value(_KEY_USER_AGENT, USER_AGENT, str)
        return str(value) if value else USER_AGENT

    def set_user_agent(self, user_agent: str) -> None:
        """Set the User-Agent header value."""
        self._settings.setValue(_KEY_USER_AGENT, user_agent)

    def client_config(self) -> ClientConfig:
        """Build a ClientConfig from the stored settings."""
        return ClientConfig(
            servers=self.get_servers(),
            timeout=float(self.get_timeout()),
            user_agent=self.get_user_agent(),
        )

    def clear(self) -> None:
        """Clear all settings (useful for testing or reset)."""
        self._settings.clear()

    def sync(self) -> None:
        """Force settings to be written to disk."""
        self._settings.sync()
