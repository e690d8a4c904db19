"""In-memory 32-bit pixel image."""

from __future__ import annotations


class Image:
    """A zero-filled image of 32-bit pixels stored row by row.

    Each row takes ``size_line`` bytes; pixels are stored in big- or
    little-endian byte order as chosen at creation.
    """

    bits_per_pixel = 32

    def __init__(self, width: int, height: int, big_endian: bool = False) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"image size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.big_endian = big_endian
        self.size_line = width * self.bytes_per_pixel
        self.data = bytearray(self.size_line * height)

    @property
    def bytes_per_pixel(self) -> int:
        return self.bits_per_pixel // 8

    @property
    def endian(self) -> int:
        """1 for big-endian pixel storage, 0 for little-endian."""
        return int(self.big_endian)

    @property
    def _byteorder(self) -> str:
        return "big" if self.big_endian else "little"

    def _offset(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height}")
        return y * self.size_line + x * self.bytes_per_pixel

    def set_pixel(self, x: int, y: int, color: int) -> None:
        """Store a colour; bits beyond the pixel width are dropped."""
        start = self._offset(x, y)
        opp = self.bytes_per_pixel
        value = color & ((1 << (8 * opp)) - 1)
        self.data[start : start + opp] = value.to_bytes(opp, self._byteorder)

    def get_pixel(self, x: int, y: int) -> int:
        """Return the stored pixel value."""
        start = self._offset(x, y)
        return int.from_bytes(
            self.data[start : start + self.bytes_per_pixel], self._byteorder
        )