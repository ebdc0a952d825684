"""Tests for ConfigManager using QSettings."""

import pytest

from radiodir.api.transport import REQUEST_TIMEOUT, USER_AGENT
from radiodir.core.config import ClientConfig, ConfigManager


@pytest.fixture
def config() -> ConfigManager:
    """Return a fresh ConfigManager for each test."""
    # Use unique organization/app to avoid test interference
    config = ConfigManager("RadiodirTest", "TestConfig")
    config.clear()
    return config


class TestConfigManager:
    """Test ConfigManager getters and setters."""

    def test_defaults(self, config: ConfigManager) -> None:
        """Test defaults when nothing is stored."""
        assert config.get_servers() is None
        assert config.get_timeout() == int(REQUEST_TIMEOUT)
        assert config.get_user_agent() == USER_AGENT

    def test_servers_roundtrip(self, config: ConfigManager) -> None:
        """Test setting and clearing the static server list."""
        config.set_servers("a.example:b.example")
        assert config.get_servers() == "a.example:b.example"
        config.set_servers(None)
        assert config.get_servers() is None

    def test_timeout_clamped(self, config: ConfigManager) -> None:
        """Test timeout is clamped to 1-60 seconds."""
        config.set_timeout(0)
        assert config.get_timeout() == 1
        config.set_timeout(500)
        assert config.get_timeout() == 60
        config.set_timeout(15)
        assert config.get_timeout() == 15

    def test_user_agent(self, config: ConfigManager) -> None:
        """Test the user agent setting."""
        config.set_user_agent("tuner/2.0")
        assert config.get_user_agent() == "tuner/2.0"

    def test_client_config(self, config: ConfigManager) -> None:
        """Test building a ClientConfig from stored settings."""
        config.set_servers("a.example")
        config.set_timeout(5)
        assert config.client_config() == ClientConfig(
            servers="a.example",
            timeout=5.0,
            user_agent=USER_AGENT,
        )


class TestClientConfig:
    """Test ClientConfig defaults."""

    def test_defaults(self) -> None:
        """Test the default options."""
        cfg = ClientConfig()
        assert cfg.servers is None
        assert cfg.timeout == REQUEST_TIMEOUT
        assert cfg.user_agent == USER_AGENT
