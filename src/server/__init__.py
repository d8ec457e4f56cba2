"""HTTP server module exposing static assets over websockets' HTTP layer."""

from .config import ServerConfigurationError, StaticServerConfig
from .service import StaticAssetServer

__all__ = [
    "ServerConfigurationError",
    "StaticServerConfig",
    "StaticAssetServer",
]
