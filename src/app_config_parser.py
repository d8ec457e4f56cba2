"""Typed parser for config.toml sections into immutable app settings."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping

from app_config_schema import (
    AppConfig,
    AppConfigurationError,
    LoggingSettings,
    StaticServerSettings,
)

_ALLOWED_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


def parse_app_config(
    raw: Mapping[str, Any],
    *,
    base_dir: Path,
    source_file: str,
) -> AppConfig:
    """Parse raw TOML mappings into strongly typed application settings."""
    static_server = _parse_static_server_settings(
        _section(raw, "static_server"),
        base_dir=base_dir,
    )
    logging_settings = _parse_logging_settings(_section(raw, "logging"))

    return AppConfig(
        static_server=static_server,
        logging=logging_settings,
        source_file=source_file,
    )


def _parse_static_server_settings(
    section: Mapping[str, Any],
    *,
    base_dir: Path,
) -> StaticServerSettings:
    root_dir = _as_str(section.get("root_dir", ""), "static_server.root_dir")
    return StaticServerSettings(
        enabled=_as_bool(section.get("enabled", True), "static_server.enabled"),
        host=_as_str(section.get("host", "127.0.0.1"), "static_server.host"),
        port=_as_int(section.get("port", 8080), "static_server.port"),
        root_dir=_resolve_path(base_dir, root_dir),
        url_prefix=_as_str(
            section.get("url_prefix", "/static"),
            "static_server.url_prefix",
        ),
        cache_max_age_seconds=_as_int(
            section.get("cache_max_age_seconds", 31536000),
            "static_server.cache_max_age_seconds",
        ),
    )


def _parse_logging_settings(section: Mapping[str, Any]) -> LoggingSettings:
    level = _as_str(section.get("level", "INFO"), "logging.level").upper() or "INFO"
    if level not in _ALLOWED_LOG_LEVELS:
        allowed = ", ".join(sorted(_ALLOWED_LOG_LEVELS))
        raise AppConfigurationError(f"logging.level must be one of: {allowed}")
    return LoggingSettings(level=level)


def _section(root: Mapping[str, Any], name: str) -> Mapping[str, Any]:
    raw = root.get(name, {})
    if raw is None:
        return {}
    if not isinstance(raw, Mapping):
        raise AppConfigurationError(f"[{name}] must be a table.")
    return raw


def _as_str(value: Any, field: str) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value.strip()
    raise AppConfigurationError(f"{field} must be a string.")


def _as_bool(value: Any, field: str) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in ("true", "1", "yes", "on"):
            return True
        if lowered in ("false", "0", "no", "off"):
            return False
    raise AppConfigurationError(f"{field} must be a boolean.")


def _as_int(value: Any, field: str) -> int:
    if isinstance(value, bool):
        raise AppConfigurationError(f"{field} must be an integer.")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError as error:
            raise AppConfigurationError(f"{field} must be an integer.") from error
    raise AppConfigurationError(f"{field} must be an integer.")


def _resolve_path(base_dir: Path, raw: str) -> str:
    if not raw:
        return ""
    path = Path(raw).expanduser()
    if not path.is_absolute():
        path = (base_dir / path).resolve()
    return str(path)
