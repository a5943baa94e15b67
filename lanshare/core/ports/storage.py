"""
Content storage port.

Protocol-based interface for persisting shared items and resolving them
back for download. Implementations: local uploads directory.

Invariants:
- Every id maps to at most one stored file
- Stored items are immutable once written
- Download names are validated before any filesystem access
"""

from __future__ import annotations

from typing import BinaryIO, Protocol

from lanshare.core.entities import ResolvedItem, StoredItem


class ContentStorePort(Protocol):
    """
    Content store port interface.

    Stores uploaded text and files under generated identifiers and resolves
    download names back to readable files.
    """

    def put_text(self, raw: str) -> StoredItem:
        """
        Store a text blob.

        Args:
            raw: Text to store (written as UTF-8)

        Returns:
            StoredItem for the new file

        Raises:
            StorageError: If the directory or file cannot be written
        """
        ...

    def put_file(self, name: str, content: bytes | BinaryIO) -> StoredItem:
        """
        Store an uploaded file, keeping only the extension of ``name``.

        Raises:
            StorageError: If the directory or file cannot be written
        """
        ...

    def resolve(self, name: str) -> ResolvedItem:
        """
        Resolve a single-segment download name to a file in the store.

        Raises:
            InvalidNameError: If ``name`` is not a safe single path segment
            ItemNotFoundError: If no stored item has that name
        """
        ...

    def read(self, name: str) -> bytes:
        """Read the full contents of a stored item."""
        ...


class StorageError(Exception):
    """Raised when the filesystem fails underneath the store."""


class ItemNotFoundError(Exception):
    """Raised when a requested stored item doesn't exist."""

    def __init__(self, name: str, message: str | None = None) -> None:
        self.name = name
        super().__init__(message or f"Stored item not found: {name}")


class InvalidNameError(ItemNotFoundError):
    """Raised when a download name fails path-safety validation."""

    def __init__(self, name: str, reason: str) -> None:
        self.reason = reason
        super().__init__(name, f"Invalid item name {name!r}: {reason}")
