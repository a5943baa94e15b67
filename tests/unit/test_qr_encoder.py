"""
QR PNG encoder tests.
"""

from __future__ import annotations

import io

import pytest
from PIL import Image

from lanshare.adapters.qr.png import QrPngEncoder
from lanshare.core.ports.qrcode import QrEncodingError

PNG_MAGIC = b"\x89PNG\r\n\x1a\n"


@pytest.fixture
def encoder() -> QrPngEncoder:
    return QrPngEncoder()


class TestEncode:
    """Rendering valid content."""

    def test_png_magic(self, encoder: QrPngEncoder) -> None:
        """Output is a non-empty PNG."""
        png = encoder.encode("http://192.168.1.5:27149/uploads/x.txt")
        assert len(png) > len(PNG_MAGIC)
        assert png.startswith(PNG_MAGIC)

    def test_fixed_size(self, encoder: QrPngEncoder) -> None:
        """Short and long content both render at 256x256."""
        for content in ("x", "http://10.0.0.2:27149/uploads/" + "a" * 500):
            img = Image.open(io.BytesIO(encoder.encode(content)))
            assert img.size == (256, 256)

    def test_configurable_size(self) -> None:
        """size_px controls the canvas."""
        png = QrPngEncoder(size_px=512).encode("hello")
        assert Image.open(io.BytesIO(png)).size == (512, 512)

    def test_quiet_zone_is_white(self, encoder: QrPngEncoder) -> None:
        """Corners of the image are background."""
        img = Image.open(io.BytesIO(encoder.encode("hello"))).convert("L")
        assert img.getpixel((0, 0)) == 255
        assert img.getpixel((255, 255)) == 255

    def test_has_dark_modules(self, encoder: QrPngEncoder) -> None:
        """The symbol itself is drawn."""
        img = Image.open(io.BytesIO(encoder.encode("hello"))).convert("L")
        assert img.getextrema()[0] == 0

    def test_near_capacity(self, encoder: QrPngEncoder) -> None:
        """Content just under the level-M byte capacity still encodes."""
        png = encoder.encode("x" * 2300)
        assert png.startswith(PNG_MAGIC)


class TestErrors:
    """Reported failures."""

    def test_over_capacity(self, encoder: QrPngEncoder) -> None:
        """Too much data is a QrEncodingError, not a crash."""
        with pytest.raises(QrEncodingError) as exc_info:
            encoder.encode("x" * 3000)
        assert exc_info.value.content_length == 3000

    def test_empty_content(self, encoder: QrPngEncoder) -> None:
        """Empty content is refused."""
        with pytest.raises(QrEncodingError):
            encoder.encode("")

    def test_unknown_level(self) -> None:
        """Only L, M, Q and H are accepted."""
        with pytest.raises(ValueError):
            QrPngEncoder(error_correction="Z")

    def test_higher_level_has_less_capacity(self) -> None:
        """Level H overflows where level M would not."""
        with pytest.raises(QrEncodingError):
            QrPngEncoder(error_correction="H").encode("x" * 2000)

    def test_symbol_wider_than_canvas(self) -> None:
        """A symbol that cannot get one pixel per module is refused, not squashed."""
        with pytest.raises(QrEncodingError) as exc_info:
            QrPngEncoder(size_px=64).encode("x" * 500)
        assert exc_info.value.content_length == 500

    def test_small_canvas_fits_small_symbol(self) -> None:
        """Version 1 plus the quiet zone needs 29px."""
        png = QrPngEncoder(size_px=29).encode("hi")
        img = Image.open(io.BytesIO(png))
        assert img.size == (29, 29)
        assert img.convert("L").getextrema()[0] == 0
