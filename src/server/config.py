"""Configuration model for the static asset HTTP server runtime."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from static_assets import DEFAULT_MAX_AGE_SECONDS


class ServerConfigurationError(Exception):
    """Raised when static server configuration is invalid."""


HEALTHZ_PATH = "/healthz"
DEFAULT_URL_PREFIX = "/static"


@dataclass(frozen=True)
class StaticServerConfig:
    """Validated static server configuration derived from app settings."""
    enabled: bool = True
    host: str = "127.0.0.1"
    port: int = 8080
    root_dir: str = ""
    url_prefix: str = DEFAULT_URL_PREFIX
    cache_max_age_seconds: int = DEFAULT_MAX_AGE_SECONDS

    def __post_init__(self) -> None:
        if not self.host.strip():
            raise ServerConfigurationError("static_server.host cannot be empty")

        if not 1 <= self.port <= 65535:
            raise ServerConfigurationError(
                f"static_server.port must be in [1, 65535], got: {self.port}"
            )

        if not self.url_prefix.startswith("/"):
            raise ServerConfigurationError(
                f"static_server.url_prefix must start with '/', got: {self.url_prefix!r}"
            )
        # Frozen dataclass: normalize through object.__setattr__.
        object.__setattr__(self, "url_prefix", self.url_prefix.rstrip("/"))

        if self.cache_max_age_seconds < 0:
            raise ServerConfigurationError(
                "static_server.cache_max_age_seconds cannot be negative"
            )

        if self.enabled:
            if not self.root_dir:
                raise ServerConfigurationError("static_server.root_dir cannot be empty")

            root = Path(self.root_dir)
            if not root.exists():
                raise ServerConfigurationError(f"Static root not found: {root}")
            if not root.is_dir():
                raise ServerConfigurationError(
                    f"Static root is not a directory: {root}"
                )

    @property
    def healthz_path(self) -> str:
        return HEALTHZ_PATH

    @classmethod
    def from_settings(cls, settings) -> "StaticServerConfig":
        url_prefix = settings.url_prefix.strip() if settings.url_prefix else ""
        return cls(
            enabled=bool(settings.enabled),
            host=settings.host,
            port=settings.port,
            root_dir=settings.root_dir.strip() if settings.root_dir else "",
            url_prefix=url_prefix or DEFAULT_URL_PREFIX,
            cache_max_age_seconds=settings.cache_max_age_seconds,
        )
