"""
QR encoder port.

Renders a string as a scannable QR symbol in PNG format.
"""

from __future__ import annotations

from typing import Protocol


class QrEncoderPort(Protocol):
    """Port for QR code rendering."""

    def encode(self, content: str) -> bytes:
        """
        Encode content as a PNG image.

        Raises:
            QrEncodingError: If content is empty or exceeds QR capacity
        """
        ...


class QrEncodingError(Exception):
    """Raised when content cannot be encoded as a QR symbol."""

    def __init__(self, message: str, *, content_length: int = 0) -> None:
        self.content_length = content_length
        super().__init__(message)
