"""Request, resolved-asset and decision types shared by the asset responder."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Optional, Protocol, Union

IF_MODIFIED_SINCE = "If-Modified-Since"
IF_NONE_MATCH = "If-None-Match"


class HeaderReader(Protocol):
    """Read-only access to inbound request headers."""

    def header(self, name: str) -> Optional[str]:
        ...


@dataclass(frozen=True)
class AssetRequest:
    """Relative asset path plus the conditional headers sent with it."""
    relative_path: str
    if_modified_since: Optional[str] = None
    if_none_match: Optional[str] = None

    @classmethod
    def from_headers(cls, relative_path: str, headers: HeaderReader) -> "AssetRequest":
        return cls(
            relative_path=relative_path,
            if_modified_since=_non_empty(headers.header(IF_MODIFIED_SINCE)),
            if_none_match=_non_empty(headers.header(IF_NONE_MATCH)),
        )


@dataclass(frozen=True)
class ResolvedAsset:
    """Stat and digest of a regular file found beneath the static root."""
    absolute_path: Path
    size_bytes: int
    modified_at: datetime
    content_hash: str


@dataclass(frozen=True)
class NotModified:
    status_code: int = 304


@dataclass(frozen=True)
class Forbidden:
    status_code: int = 403


@dataclass(frozen=True)
class NotFound:
    status_code: int = 404


@dataclass(frozen=True)
class Content:
    """Full asset body with its content type and cache headers."""
    body: bytes
    content_type: str
    headers: dict[str, str] = field(default_factory=dict)
    status_code: int = 200


AssetDecision = Union[NotModified, Forbidden, NotFound, Content]


def _non_empty(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    text = value.strip()
    return text or None
