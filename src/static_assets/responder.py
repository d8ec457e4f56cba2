"""Resolve, validate and answer a single static asset request."""

from __future__ import annotations

import hashlib
import logging
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Callable, Optional

from .content_types import content_type_for
from .contracts import (
    AssetDecision,
    AssetRequest,
    Content,
    Forbidden,
    HeaderReader,
    NotFound,
    NotModified,
    ResolvedAsset,
)
from .negotiation import CacheDecision, format_http_date, negotiate
from .paths import ForbiddenPathError, PathResolver

DEFAULT_MAX_AGE_SECONDS = 31536000
_HASH_CHUNK_SIZE = 64 * 1024


class AssetResponder:
    """Stateless responder serving files beneath one static root."""

    def __init__(
        self,
        root: str | Path,
        *,
        max_age_seconds: int = DEFAULT_MAX_AGE_SECONDS,
        now_fn: Callable[[], datetime] | None = None,
        logger: Optional[logging.Logger] = None,
    ):
        self._resolver = PathResolver(root)
        self._max_age_seconds = max_age_seconds
        self._now_fn = now_fn or (lambda: datetime.now(timezone.utc))
        self._logger = logger or logging.getLogger("static_assets")

    @property
    def root(self) -> Path:
        return self._resolver.root

    def serve(self, relative_path: str, headers: HeaderReader) -> AssetDecision:
        """Answer a request for `relative_path` given its request headers."""
        return self.serve_request(AssetRequest.from_headers(relative_path, headers))

    def serve_request(self, request: AssetRequest) -> AssetDecision:
        try:
            path = self._resolver.resolve(request.relative_path)
        except ForbiddenPathError as error:
            self._logger.warning("Rejected static asset request: %s", error)
            return Forbidden()

        if not _is_regular_file(path):
            self._logger.debug("Static asset not found: %s", request.relative_path)
            return NotFound()

        asset = stat_asset(path)
        decision = negotiate(
            asset.modified_at,
            asset.content_hash,
            if_modified_since=request.if_modified_since,
            if_none_match=request.if_none_match,
        )
        if decision is CacheDecision.NOT_MODIFIED:
            return NotModified()

        # Read failures past this point propagate to the HTTP layer.
        body = asset.absolute_path.read_bytes()
        content_type = content_type_for(asset.absolute_path)
        return Content(
            body=body,
            content_type=content_type,
            headers=self._cache_headers(asset, content_type, len(body)),
        )

    def _cache_headers(
        self,
        asset: ResolvedAsset,
        content_type: str,
        content_length: int,
    ) -> dict[str, str]:
        expires = self._now_fn() + timedelta(seconds=self._max_age_seconds)
        return {
            "Content-Type": content_type,
            "Content-Length": str(content_length),
            "Last-Modified": format_http_date(asset.modified_at),
            "ETag": asset.content_hash,
            "Cache-Control": f"public, max-age={self._max_age_seconds}",
            "Expires": format_http_date(expires),
        }


def _is_regular_file(path: Path) -> bool:
    # Overlong names raise ENAMETOOLONG instead of returning False.
    try:
        return path.is_file()
    except (OSError, ValueError):
        return False


def stat_asset(path: Path) -> ResolvedAsset:
    """Collect size, modification time and MD5 digest for a regular file."""
    canonical = path.resolve(strict=True)
    stat = canonical.stat()
    return ResolvedAsset(
        absolute_path=canonical,
        size_bytes=stat.st_size,
        modified_at=datetime.fromtimestamp(stat.st_mtime, tz=timezone.utc),
        content_hash=file_digest(canonical),
    )


def file_digest(path: Path) -> str:
    digest = hashlib.md5()
    with open(path, "rb") as fh:
        for chunk in iter(lambda: fh.read(_HASH_CHUNK_SIZE), b""):
            digest.update(chunk)
    return digest.hexdigest()
