"""Sandboxed static asset resolution with HTTP cache validation."""

from .content_types import DEFAULT_CONTENT_TYPE, content_type_for
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
from .negotiation import CacheDecision, format_http_date, negotiate, parse_http_date
from .paths import ForbiddenPathError, PathResolver
from .responder import DEFAULT_MAX_AGE_SECONDS, AssetResponder

__all__ = [
    "AssetDecision",
    "AssetRequest",
    "AssetResponder",
    "CacheDecision",
    "Content",
    "DEFAULT_CONTENT_TYPE",
    "DEFAULT_MAX_AGE_SECONDS",
    "Forbidden",
    "ForbiddenPathError",
    "HeaderReader",
    "NotFound",
    "NotModified",
    "PathResolver",
    "ResolvedAsset",
    "content_type_for",
    "format_http_date",
    "negotiate",
    "parse_http_date",
]
