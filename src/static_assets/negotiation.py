"""Conditional-request evaluation for `If-Modified-Since` / `If-None-Match`."""

from __future__ import annotations

from datetime import datetime, timezone
from email.utils import format_datetime, parsedate_to_datetime
from enum import Enum
from typing import Optional


class CacheDecision(Enum):
    NOT_MODIFIED = "not_modified"
    PROCEED = "proceed"


def negotiate(
    modified_at: datetime,
    content_hash: str,
    *,
    if_modified_since: Optional[str] = None,
    if_none_match: Optional[str] = None,
) -> CacheDecision:
    """Decide whether a cached copy is still valid.

    `If-Modified-Since` is evaluated first, at whole-second granularity; an
    unparsable date is ignored. `If-None-Match` is a strong, exact comparison
    against the content hash. Either one alone is enough to short-circuit.
    """
    if if_modified_since:
        since = parse_http_date(if_modified_since)
        if since is not None and _whole_seconds(since) >= _whole_seconds(modified_at):
            return CacheDecision.NOT_MODIFIED

    if if_none_match and if_none_match == content_hash:
        return CacheDecision.NOT_MODIFIED

    return CacheDecision.PROCEED


def parse_http_date(value: str) -> Optional[datetime]:
    """Parse an HTTP-date header value; naive results are taken as UTC."""
    try:
        parsed = parsedate_to_datetime(value.strip())
    except (TypeError, ValueError, IndexError):
        return None
    if parsed is None:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def format_http_date(moment: datetime) -> str:
    """Format an instant as an RFC 1123 HTTP-date in GMT."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return format_datetime(moment.astimezone(timezone.utc), usegmt=True)


def _whole_seconds(moment: datetime) -> int:
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return int(moment.timestamp())
