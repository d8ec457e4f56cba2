"""Standalone launcher for the static asset server."""

import logging
import signal
import sys
import time
from pathlib import Path
from typing import Optional, Sequence

if __package__ is None or __package__ == "":
    sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from app_config import AppConfigurationError, load_app_config, resolve_config_path
from server import ServerConfigurationError, StaticAssetServer, StaticServerConfig


def setup_logging(level: str = "INFO") -> logging.Logger:
    """Configure logging for the server process."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    return logging.getLogger("static_server")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the static asset server process until interrupted."""
    args = list(sys.argv[1:] if argv is None else argv)
    config_path = args[0] if args else None

    try:
        app_config = load_app_config(str(resolve_config_path(config_path)))
        logger = setup_logging(app_config.logging.level)
        config = StaticServerConfig.from_settings(app_config.static_server)
    except (AppConfigurationError, ServerConfigurationError) as error:
        setup_logging().error("Static server configuration error: %s", error)
        return 1

    if not config.enabled:
        logger.info("Static server disabled via static_server.enabled=false")
        return 0

    server = StaticAssetServer(config=config, logger=logger)

    try:
        server.start()
        logger.info("Press Ctrl+C to stop.")

        shutdown = False

        def handle_signal(signum, frame) -> None:
            del frame
            nonlocal shutdown
            logger.info("Signal %s received, stopping.", signal.Signals(signum).name)
            shutdown = True

        signal.signal(signal.SIGINT, handle_signal)
        signal.signal(signal.SIGTERM, handle_signal)

        while not shutdown:
            time.sleep(0.2)

    except KeyboardInterrupt:
        logger.info("Stopping by user request.")
    finally:
        server.stop()

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
