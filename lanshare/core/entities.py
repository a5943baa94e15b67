"""
Domain entities for lanshare.

- StoredItem: one uploaded text blob or file, persisted under a generated id
- ResolvedItem: a stored item located on disk for download
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

# URL and directory segment under which stored items are served
UPLOADS_SEGMENT = "uploads"


@dataclass(frozen=True)
class StoredItem:
    """
    A stored upload.

    Immutable after creation; the file name is ``<id><extension>``.
    """

    id: str
    extension: str
    size_bytes: int

    @property
    def filename(self) -> str:
        return f"{self.id}{self.extension}"

    @property
    def relative_path(self) -> str:
        """Download path relative to the server root, e.g. ``uploads/<id>.txt``."""
        return f"{UPLOADS_SEGMENT}/{self.filename}"

    @property
    def url_path(self) -> str:
        """Absolute-path form returned to HTTP clients."""
        return f"/{self.relative_path}"


@dataclass(frozen=True)
class ResolvedItem:
    """A stored item located on disk, ready to be streamed."""

    name: str
    path: Path
    size_bytes: int
