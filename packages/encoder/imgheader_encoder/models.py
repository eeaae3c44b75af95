"""Typed encoder models."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ChannelLayout(str, Enum):
    RGB8 = "rgb8"
    RGB16 = "rgb16"
    LUMA8 = "luma8"

    @property
    def pixel_size(self) -> int:
        return _PIXEL_SIZES[self]


_PIXEL_SIZES = {
    ChannelLayout.RGB8: 3,
    ChannelLayout.RGB16: 6,
    ChannelLayout.LUMA8: 1,
}


class ColorMode(str, Enum):
    RGB8 = "rgb8"
    RGB16 = "rgb16"
    GRAY8 = "gray8"
    RLE_MONO = "wbzip"
    BIT_PACKED_MONO = "wb1"
    PAGED_MONO = "ssd1306"
    UNSUPPORTED = "gcode"

    @property
    def layout(self) -> ChannelLayout:
        if self is ColorMode.RGB8:
            return ChannelLayout.RGB8
        if self is ColorMode.RGB16:
            return ChannelLayout.RGB16
        return ChannelLayout.LUMA8


@dataclass(frozen=True)
class PixelBuffer:
    """Row-major pixel bytes in a single channel layout."""

    width: int
    height: int
    layout: ChannelLayout
    data: bytes

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError("Image dimensions must be non-negative")
        expected = self.width * self.height * self.layout.pixel_size
        if len(self.data) != expected:
            raise ValueError(
                f"{self.layout.value} buffer of {self.width}x{self.height} needs {expected} bytes, got {len(self.data)}"
            )

    @property
    def pixel_count(self) -> int:
        return self.width * self.height

    def pixel(self, x: int, y: int) -> bytes:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"Pixel ({x}, {y}) outside {self.width}x{self.height}")
        size = self.layout.pixel_size
        start = (y * self.width + x) * size
        return self.data[start : start + size]


@dataclass(frozen=True)
class EncodedStream:
    mode: ColorMode
    width: int
    height: int
    data: bytes
    unit_size: int
    width_delimiter: int

    @property
    def row_structured(self) -> bool:
        """Run-length output is one flat stream with no row framing."""
        return self.mode is not ColorMode.RLE_MONO

    @property
    def units_per_row(self) -> int:
        return self.width // self.width_delimiter
