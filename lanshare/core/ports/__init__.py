"""Port interfaces for the sharing core."""

from .network import AddressSourcePort
from .qrcode import QrEncoderPort, QrEncodingError
from .storage import (
    ContentStorePort,
    InvalidNameError,
    ItemNotFoundError,
    StorageError,
)

__all__ = [
    "AddressSourcePort",
    "ContentStorePort",
    "InvalidNameError",
    "ItemNotFoundError",
    "QrEncoderPort",
    "QrEncodingError",
    "StorageError",
]
