"""
QR PNG Encoder.

Implements the QrEncoderPort with the qrcode library and Pillow.

The symbol is rendered at the largest whole module size that fits and
centred on a square white canvas of ``size_px`` pixels, so the output size
is fixed regardless of how much data the code carries.
"""

from __future__ import annotations

import io

import qrcode
from PIL import Image
from qrcode.constants import ERROR_CORRECT_H, ERROR_CORRECT_L, ERROR_CORRECT_M, ERROR_CORRECT_Q
from qrcode.exceptions import DataOverflowError
from qrcode.image.pil import PilImage

from lanshare.core.ports.qrcode import QrEncodingError

DEFAULT_SIZE_PX = 256
DEFAULT_BORDER = 4

_ECC_MAP = {"L": ERROR_CORRECT_L, "M": ERROR_CORRECT_M, "Q": ERROR_CORRECT_Q, "H": ERROR_CORRECT_H}


class QrPngEncoder:
    def __init__(
        self,
        size_px: int = DEFAULT_SIZE_PX,
        error_correction: str = "M",
        border: int = DEFAULT_BORDER,
    ) -> None:
        if error_correction not in _ECC_MAP:
            raise ValueError(f"Unknown error correction level: {error_correction!r}")
        self.size_px = size_px
        self.error_correction = error_correction
        self.border = border

    def encode(self, content: str) -> bytes:
        """Render ``content`` as a ``size_px`` x ``size_px`` PNG."""
        if not content:
            raise QrEncodingError("Cannot encode empty content")

        qr = qrcode.QRCode(
            version=None,
            error_correction=_ECC_MAP[self.error_correction],
            box_size=1,
            border=self.border,
        )
        qr.add_data(content)
        try:
            qr.make(fit=True)
        except DataOverflowError as e:
            raise QrEncodingError(
                f"Content too long for a QR code at level {self.error_correction}",
                content_length=len(content),
            ) from e

        modules = qr.modules_count + 2 * self.border
        if modules > self.size_px:
            # Less than one pixel per module would not scan
            raise QrEncodingError(
                f"QR code needs {modules}px but the image is {self.size_px}px",
                content_length=len(content),
            )
        qr.box_size = self.size_px // modules

        img = qr.make_image(image_factory=PilImage, fill_color="black", back_color="white")
        symbol = img.get_image()
        canvas = Image.new("1", (self.size_px, self.size_px), 1)
        offset = (self.size_px - symbol.size[0]) // 2
        canvas.paste(symbol, (offset, offset))

        buf = io.BytesIO()
        canvas.save(buf, format="PNG")
        return buf.getvalue()
