from __future__ import annotations

import asyncio
import contextlib
import logging
import threading
from typing import Optional
from urllib.parse import unquote, urlsplit

import websockets
from websockets.asyncio.server import ServerConnection
from websockets.datastructures import Headers
from websockets.http11 import Request, Response

from static_assets import AssetResponder

from .config import StaticServerConfig
from .responses import RequestHeaderReader, text_response, to_http_response


class StaticAssetServer:
    """Threaded asyncio HTTP server answering static asset requests."""

    def __init__(
        self,
        config: StaticServerConfig,
        logger: Optional[logging.Logger] = None,
        responder: Optional[AssetResponder] = None,
    ):
        self._config = config
        self._logger = logger or logging.getLogger("static_server")
        self._responder = responder or AssetResponder(
            config.root_dir,
            max_age_seconds=config.cache_max_age_seconds,
            logger=self._logger.getChild("assets"),
        )
        self._thread: Optional[threading.Thread] = None
        self._loop: Optional[asyncio.AbstractEventLoop] = None
        self._stop_async: Optional[asyncio.Event] = None
        self._started = threading.Event()
        self._startup_error: Optional[Exception] = None

    @property
    def host(self) -> str:
        return self._config.host

    @property
    def port(self) -> int:
        return self._config.port

    @property
    def url_prefix(self) -> str:
        return self._config.url_prefix

    @property
    def is_running(self) -> bool:
        return (
            self._thread is not None
            and self._thread.is_alive()
            and self._startup_error is None
        )

    def start(self, timeout_seconds: float = 5.0) -> None:
        if self.is_running:
            self._logger.warning("Static server is already running")
            return

        self._startup_error = None
        self._started.clear()
        self._thread = threading.Thread(
            target=self._run_loop,
            daemon=True,
            name="static-server",
        )
        self._thread.start()

        if not self._started.wait(timeout_seconds):
            raise RuntimeError(
                f"Static server did not start within {timeout_seconds:.1f}s"
            )

        if self._startup_error is not None:
            raise RuntimeError(f"Static server startup failed: {self._startup_error}")

    def stop(self, timeout_seconds: float = 5.0) -> None:
        if self._thread is None:
            return

        if self._loop and self._stop_async:
            self._loop.call_soon_threadsafe(self._stop_async.set)

        self._thread.join(timeout=timeout_seconds)
        if self._thread.is_alive():
            self._logger.error(
                "Static server thread did not stop within %.1fs",
                timeout_seconds,
            )

        self._thread = None
        self._loop = None
        self._stop_async = None

    async def handle_request(self, request_path: str, headers: Headers) -> Response:
        """Route one GET request to the health check or the asset responder."""
        path = unquote(urlsplit(request_path).path)

        if path == self._config.healthz_path:
            return text_response(200, b"ok\n")

        relative_path = self._relative_asset_path(path)
        if relative_path is None:
            return text_response(404, b"not found\n")

        try:
            decision = await asyncio.to_thread(
                self._responder.serve,
                relative_path,
                RequestHeaderReader(headers),
            )
        except OSError:
            self._logger.error(
                "Failed to read static asset: %s", relative_path, exc_info=True
            )
            return text_response(500, b"Internal Server Error")

        self._logger.debug("%s -> %d", path, decision.status_code)
        return to_http_response(decision)

    def _relative_asset_path(self, path: str) -> Optional[str]:
        prefix = self._config.url_prefix
        if not prefix:
            return path
        if path == prefix:
            return ""
        if path.startswith(prefix + "/"):
            return path[len(prefix) + 1:]
        return None

    def _run_loop(self) -> None:
        self._loop = asyncio.new_event_loop()
        asyncio.set_event_loop(self._loop)
        self._stop_async = asyncio.Event()

        try:
            self._loop.run_until_complete(self._serve())
        except Exception as error:  # pragma: no cover - bind failures surface via start()
            self._startup_error = error
            self._logger.error("Static server failed: %s", error, exc_info=True)
            self._started.set()
        finally:
            if self._loop is not None:
                pending = asyncio.all_tasks(self._loop)
                for task in pending:
                    task.cancel()
                with contextlib.suppress(Exception):
                    self._loop.run_until_complete(
                        asyncio.gather(*pending, return_exceptions=True)
                    )
                self._loop.close()

    async def _serve(self) -> None:
        async with websockets.serve(
            self._handler,
            host=self._config.host,
            port=self._config.port,
            process_request=self._process_request,
            logger=self._logger,
        ):
            self._logger.info(
                "Static server running at http://%s:%d%s/ (root: %s)",
                self._config.host,
                self._config.port,
                self._config.url_prefix,
                self._responder.root,
            )
            self._started.set()
            await self._stop_async.wait()

    async def _handler(self, websocket: ServerConnection) -> None:
        await websocket.close(code=1008, reason="WebSocket connections are not served")

    async def _process_request(
        self,
        connection: ServerConnection,
        request: Request,
    ) -> Response | None:
        del connection  # Unused in static routing.
        return await self.handle_request(request.path, request.headers)
