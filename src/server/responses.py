"""Adapters between websockets HTTP objects and asset decisions."""

from __future__ import annotations

from http import HTTPStatus
from typing import Any, Mapping, Optional

from websockets.datastructures import Headers
from websockets.http11 import Response

from static_assets import AssetDecision, Content, Forbidden, NotFound, NotModified

FORBIDDEN_BODY = b"Forbidden"
NOT_FOUND_BODY = b"File not found"
TEXT_CONTENT_TYPE = "text/plain; charset=utf-8"


class RequestHeaderReader:
    """`HeaderReader` over case-insensitive websockets request headers."""

    def __init__(self, headers: Headers | Mapping[str, Any]):
        self._headers = headers

    def header(self, name: str) -> Optional[str]:
        get_all = getattr(self._headers, "get_all", None)
        if get_all is not None:
            # Repeated header lines fold into one comma-separated value.
            values = get_all(name)
            return ", ".join(values) if values else None
        value = self._headers.get(name)
        if value is None:
            return None
        return str(value)


def to_http_response(decision: AssetDecision) -> Response:
    """Convert an asset decision into a complete HTTP response."""
    if isinstance(decision, Content):
        headers = Headers()
        for name, value in decision.headers.items():
            headers[name] = value
        return Response(decision.status_code, _reason(decision.status_code), headers, decision.body)

    if isinstance(decision, NotModified):
        return Response(decision.status_code, _reason(decision.status_code), Headers(), b"")

    if isinstance(decision, Forbidden):
        return text_response(decision.status_code, FORBIDDEN_BODY)

    if isinstance(decision, NotFound):
        return text_response(decision.status_code, NOT_FOUND_BODY)

    raise TypeError(f"Unsupported asset decision: {decision!r}")


def text_response(status_code: int, body: bytes) -> Response:
    headers = Headers()
    headers["Content-Type"] = TEXT_CONTENT_TYPE
    headers["Content-Length"] = str(len(body))
    headers["Cache-Control"] = "no-store"
    return Response(status_code, _reason(status_code), headers, body)


def _reason(status_code: int) -> str:
    return HTTPStatus(status_code).phrase
