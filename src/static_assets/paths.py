"""Sandboxed resolution of request paths beneath a static root."""

from __future__ import annotations

import re
from pathlib import Path

_DRIVE_PREFIX = re.compile(r"^[A-Za-z]:")


class ForbiddenPathError(Exception):
    """Raised when a request path resolves outside the static root."""


class PathResolver:
    """Join request paths to a fixed root and reject anything escaping it."""

    def __init__(self, root: str | Path):
        self._root = Path(root).resolve()

    @property
    def root(self) -> Path:
        return self._root

    def resolve(self, relative_path: str) -> Path:
        """Return the joined candidate path, or raise `ForbiddenPathError`.

        The candidate itself is returned (not its canonical form) so callers
        can run their own existence checks. Containment is checked on the
        canonical candidate, or on its canonical parent when the candidate
        does not exist.
        """
        if "\x00" in relative_path:
            raise ForbiddenPathError(f"Request path contains a NUL byte: {relative_path!r}")

        candidate = self._root / normalize_relative_path(relative_path)

        try:
            canonical = candidate.resolve(strict=True)
        except (OSError, RuntimeError, ValueError):
            try:
                canonical = candidate.parent.resolve(strict=True)
            except (OSError, RuntimeError, ValueError) as error:
                raise ForbiddenPathError(
                    f"Cannot resolve request path: {relative_path!r}"
                ) from error

        if not self.contains(canonical):
            raise ForbiddenPathError(f"Request path escapes static root: {relative_path!r}")

        return candidate

    def contains(self, path: Path) -> bool:
        """Segment-aware containment: equal to the root or below it."""
        return path == self._root or self._root in path.parents


def normalize_relative_path(relative_path: str) -> str:
    """Strip separators and drive designators that would escape a join."""
    text = relative_path.replace("\\", "/")
    while True:
        stripped = _DRIVE_PREFIX.sub("", text.lstrip("/"), count=1)
        if stripped == text:
            return stripped
        text = stripped
