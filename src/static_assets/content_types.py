"""Fixed extension to MIME type table for served assets."""

from __future__ import annotations

from pathlib import PurePath

DEFAULT_CONTENT_TYPE = "application/octet-stream"

CONTENT_TYPES: dict[str, str] = {
    "css": "text/css",
    "js": "application/javascript",
    "json": "application/json",
    "png": "image/png",
    "jpg": "image/jpeg",
    "jpeg": "image/jpeg",
    "gif": "image/gif",
    "svg": "image/svg+xml",
    "ico": "image/x-icon",
    "webp": "image/webp",
    "woff": "font/woff",
    "woff2": "font/woff2",
    "ttf": "font/ttf",
    "eot": "application/vnd.ms-fontobject",
    "pdf": "application/pdf",
    "txt": "text/plain",
    "html": "text/html",
    "htm": "text/html",
    "xml": "application/xml",
    "zip": "application/zip",
}


def content_type_for(path: str | PurePath) -> str:
    """Look up the content type by (case-insensitive) file extension."""
    extension = PurePath(path).suffix.lstrip(".").lower()
    return CONTENT_TYPES.get(extension, DEFAULT_CONTENT_TYPE)
