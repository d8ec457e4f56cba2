"""Dataclass schema objects used by runtime configuration loading."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_CONFIG_FILE = "config.toml"


class AppConfigurationError(Exception):
    """Raised when application configuration fails."""


@dataclass(frozen=True)
class StaticServerSettings:
    """Static asset server settings from `[static_server]`."""
    enabled: bool = True
    host: str = "127.0.0.1"
    port: int = 8080
    root_dir: str = ""
    url_prefix: str = "/static"
    cache_max_age_seconds: int = 31536000


@dataclass(frozen=True)
class LoggingSettings:
    """Process logging settings from `[logging]`."""
    level: str = "INFO"


@dataclass(frozen=True)
class AppConfig:
    """Complete typed runtime configuration loaded from `config.toml`."""
    static_server: StaticServerSettings
    logging: LoggingSettings
    source_file: str
