"""A 4-bit indexed frame buffer that can be exported as a PNG image."""

from __future__ import annotations

import struct
import zlib

from zxtestkit.palette import png_palette

_PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"
_PNG_BIT_DEPTH = 4
_PNG_COLOR_TYPE_INDEXED = 3


def _png_chunk(kind: bytes, payload: bytes) -> bytes:
    crc = zlib.crc32(kind + payload) & 0xFFFFFFFF
    return struct.pack(">I", len(payload)) + kind + payload + struct.pack(">I", crc)


class FrameContent:
    """Frame pixels packed two per byte; the even pixel takes the high nibble.

    Each nibble holds a palette index: the colour (0-7) plus 8 when bright.
    """

    def __init__(self, width: int, height: int) -> None:
        if width < 0 or height < 0:
            raise ValueError("Frame dimensions must not be negative")
        self.width = width
        self.height = height
        self._buffer = bytearray((width * height) // 2)

    @property
    def buffer(self) -> bytes:
        """The packed pixel data."""
        return bytes(self._buffer)

    def _locate(self, x: int, y: int) -> tuple[int, int]:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"Pixel ({x}, {y}) is outside the frame")
        pixel_index = x + y * self.width
        return pixel_index // 2, pixel_index % 2

    def set_color(self, x: int, y: int, color: int, bright: int | bool) -> None:
        """Set the pixel at (x, y) to ``color`` (0-7), bright or not."""
        if not 0 <= int(color) <= 7:
            raise ValueError(f"Colour {color} is not in the range 0-7")
        brightness = int(bright)
        if brightness not in (0, 1):
            raise ValueError(f"Brightness {bright} must be 0 or 1")
        buffer_index, odd = self._locate(x, y)
        # 0xF0 mask for even pixels, 0x0F mask for odd pixels
        mask = 0xF0 >> (odd * 4)
        indexed = int(color) + brightness * 8
        overlay = (indexed | (indexed << 4)) & 0xFF
        self._buffer[buffer_index] = (self._buffer[buffer_index] & ~mask & 0xFF) | (
            overlay & mask
        )

    def pixel(self, x: int, y: int) -> int:
        """Return the palette index of the pixel at (x, y)."""
        buffer_index, odd = self._locate(x, y)
        return (self._buffer[buffer_index] >> (0 if odd else 4)) & 0x0F

    def to_png(self) -> bytes:
        """Encode the frame as a 4-bit indexed PNG with the standard palette."""
        if self.width % 2:
            raise ValueError("PNG export needs an even frame width")
        row_bytes = self.width // 2
        raw = b"".join(
            b"\x00" + bytes(self._buffer[row * row_bytes : (row + 1) * row_bytes])
            for row in range(self.height)
        )
        header = struct.pack(
            ">IIBBBBB",
            self.width,
            self.height,
            _PNG_BIT_DEPTH,
            _PNG_COLOR_TYPE_INDEXED,
            0,
            0,
            0,
        )
        return b"".join(
            (
                _PNG_SIGNATURE,
                _png_chunk(b"IHDR", header),
                _png_chunk(b"PLTE", png_palette()),
                _png_chunk(b"IDAT", zlib.compress(raw)),
                _png_chunk(b"IEND", b""),
            )
        )