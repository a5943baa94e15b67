"""
Sharing component port definitions.
"""

from __future__ import annotations

from typing import Protocol

from lanshare.core.ports import AddressSourcePort, ContentStorePort, QrEncoderPort


class RulesPort(Protocol):
    """Port for accessing upload limits."""

    def get_max_upload_bytes(self) -> int:
        """Get max upload size in bytes."""
        ...


__all__ = [
    "AddressSourcePort",
    "ContentStorePort",
    "QrEncoderPort",
    "RulesPort",
]
