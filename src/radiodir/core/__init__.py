"""Server discovery, selection and session state.

Classes:
    ServerDirectory: Resolves the candidate server pool.
    ServerSelector: Probes the pool and commits to a server.
    HealthTracker: Bounded trust score for the committed server.
    SessionState: Lock-guarded session record with Qt signals.
    ConfigManager: QSettings wrapper for client options.
"""

from radiodir.core.config import ClientConfig, ConfigManager
from radiodir.core.discovery import ServerDirectory
from radiodir.core.selection import HealthTracker, ServerSelector
from radiodir.core.session import SessionState

__all__ = [
    "ClientConfig",
    "ConfigManager",
    "HealthTracker",
    "ServerDirectory",
    "ServerSelector",
    "SessionState",
]
