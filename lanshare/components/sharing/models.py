"""
Sharing component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import BinaryIO

from lanshare.core.entities import ResolvedItem, StoredItem

# --- Validation Error ---


@dataclass(frozen=True)
class ShareValidationError:
    """Sharing validation error with actionable message."""

    code: str
    message: str
    field: str = "raw"


# --- Input Models ---


@dataclass(frozen=True)
class UploadTextInput:
    """Input for sharing a text blob."""

    raw: str


@dataclass(frozen=True)
class UploadFileInput:
    """Input for sharing a file."""

    filename: str | None
    data: bytes | BinaryIO
    size_bytes: int | None = None  # None when unknown (streamed data)


@dataclass(frozen=True)
class ResolveInput:
    """Input for resolving a download name."""

    name: str


@dataclass(frozen=True)
class ComposeLinksInput:
    """Input for building share links for every LAN address."""

    relative_path: str
    port: int


@dataclass(frozen=True)
class EncodeQrInput:
    """Input for QR code rendering."""

    content: str


# --- Output Models ---


@dataclass(frozen=True)
class UploadOutput:
    """Output from text or file upload."""

    item: StoredItem | None = None
    url: str = ""
    errors: list[ShareValidationError] = field(default_factory=list)
    success: bool = True


@dataclass(frozen=True)
class ResolveOutput:
    """Output containing a resolved stored item."""

    item: ResolvedItem | None = None
    errors: list[ShareValidationError] = field(default_factory=list)
    success: bool = True


@dataclass(frozen=True)
class AddressListOutput:
    """Output containing the host's LAN addresses."""

    addresses: list[str]
    errors: list[ShareValidationError] = field(default_factory=list)
    success: bool = True


@dataclass(frozen=True)
class LinkListOutput:
    """Output containing one share link per LAN address."""

    links: list[str]
    errors: list[ShareValidationError] = field(default_factory=list)
    success: bool = True


@dataclass(frozen=True)
class QrOutput:
    """Output from QR code rendering."""

    png: bytes = b""
    errors: list[ShareValidationError] = field(default_factory=list)
    success: bool = True
