"""In-memory pixel images."""

from __future__ import annotations

from typing import NamedTuple


class ImageData(NamedTuple):
    """The raw buffer of an image and how to address it."""

    data: bytearray
    bits_per_pixel: int
    size_line: int
    endian: int


class Image:
    """A width x height image stored as packed pixels in a byte buffer.

    endian is 0 for little-endian pixels, 1 for big-endian.
    """

    def __init__(self, width, height, bits_per_pixel=32, endian=0):
        if width <= 0 or height <= 0:
            raise ValueError(f"image size must be positive, got {width}x{height}")
        if bits_per_pixel <= 0 or bits_per_pixel % 8:
            raise ValueError(f"bits per pixel must be a positive multiple of 8, got {bits_per_pixel}")
        if endian not in (0, 1):
            raise ValueError(f"endian must be 0 or 1, got {endian}")
        self.width = width
        self.height = height
        self.bits_per_pixel = bits_per_pixel
        self.endian = endian
        # Rows are padded to 32 bits.
        self.size_line = ((width * bits_per_pixel + 31) // 32) * 4
        self.data = bytearray(max((width + 32) * height * 4, self.size_line * height))

    @property
    def bytes_per_pixel(self) -> int:
        return self.bits_per_pixel // 8

    def data_address(self):
        """Return the buffer with its bits per pixel, row stride and endianness."""
        return ImageData(self.data, self.bits_per_pixel, self.size_line, self.endian)

    def _offset(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} image")
        return y * self.size_line + x * self.bytes_per_pixel

    def _byteorder(self) -> str:
        return "big" if self.endian else "little"

    def put_pixel(self, x, y, color):
        """Store the low bytes of color at (x, y)."""
        opp = self.bytes_per_pixel
        start = self._offset(x, y)
        value = color & ((1 << (8 * opp)) - 1)
        self.data[start : start + opp] = value.to_bytes(opp, self._byteorder())

    def get_pixel(self, x, y):
        """Return the pixel value stored at (x, y)."""
        opp = self.bytes_per_pixel
        start = self._offset(x, y)
        return int.from_bytes(self.data[start : start + opp], self._byteorder())