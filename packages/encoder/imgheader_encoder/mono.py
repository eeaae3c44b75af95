"""Monochrome encoders: flat bit packing, display pages, and run-length."""

from __future__ import annotations

import logging

import numpy as np

from .errors import EncodingError
from .models import ColorMode, EncodedStream, PixelBuffer
from .raw import require_luma

logger = logging.getLogger(__name__)

PAGE_ROWS = 8
RLE_MAX_COUNT = 0x7F
RLE_SET_BIT = 0x80


def check_black_level(black_level: int) -> int:
    if not 0 <= int(black_level) <= 255:
        raise ValueError(f"Black level must be within 0..255, got {black_level}")
    return int(black_level)


def threshold(luma: int, black_level: int) -> bool:
    """A pixel is set when its luma is strictly above the black level."""
    return luma > black_level


def encode_bit_packed(buffer: PixelBuffer, black_level: int) -> EncodedStream:
    require_luma(buffer, ColorMode.BIT_PACKED_MONO)
    black_level = check_black_level(black_level)

    # Groups of 8 run over the flat pixel sequence, ignoring row ends; the tail is zero padded.
    luma = np.frombuffer(buffer.data, dtype=np.uint8)
    packed = np.packbits(luma > black_level, bitorder="big")
    return EncodedStream(
        mode=ColorMode.BIT_PACKED_MONO,
        width=buffer.width,
        height=buffer.height,
        data=packed.tobytes(),
        unit_size=1,
        width_delimiter=8,
    )


def page_count(height: int) -> int:
    return -(-height // PAGE_ROWS)


def background_fill(inverse_color: bool, full_byte: bool = False) -> int:
    """Initial value of every page byte.

    The stock fill is the numeric value 1 (or 0 when colors are inverted),
    which only covers bit 0. ``full_byte`` selects 0xFF / 0x00 instead.
    """
    if full_byte:
        return 0x00 if inverse_color else 0xFF
    return 0 if inverse_color else 1


def encode_paged(
    buffer: PixelBuffer,
    black_level: int,
    inverse_color: bool = False,
    full_background: bool = False,
) -> EncodedStream:
    require_luma(buffer, ColorMode.PAGED_MONO)
    black_level = check_black_level(black_level)

    width, height = buffer.width, buffer.height
    pages = page_count(height)
    out = bytearray([background_fill(inverse_color, full_background)] * (width * pages))
    luma = buffer.data

    for page in range(pages):
        for column in range(width):
            index = page * width + column
            for cc in range(PAGE_ROWS):
                row = page * PAGE_ROWS + cc
                if row >= height:
                    continue
                if index >= len(out):
                    logger.warning("Outside image set pixel: %d, %d", column, row)
                    continue
                bit = 1 if threshold(luma[row * width + column], black_level) else 0
                out[index] = (out[index] & ~(1 << cc) & 0xFF) | (bit << cc)

    return EncodedStream(
        mode=ColorMode.PAGED_MONO,
        width=width,
        height=height,
        data=bytes(out),
        unit_size=1,
        width_delimiter=8,
    )


def run_length_runs(buffer: PixelBuffer, black_level: int) -> bytearray:
    """Run bytes for the flat pixel scan, without the count prefix.

    Bit 7 carries the run color and bits 0-6 the run length minus one. The
    run still open when the scan ends is never written out.
    """
    require_luma(buffer, ColorMode.RLE_MONO)
    black_level = check_black_level(black_level)

    runs = bytearray()
    if buffer.pixel_count == 0:
        return runs

    luma = buffer.data
    color = threshold(luma[0], black_level)
    count = 0
    first = True
    for value in luma:
        current = threshold(value, black_level)
        if current != color or count == RLE_MAX_COUNT:
            runs.append((RLE_SET_BIT | count) if color else count)
            color = current
            count = 0
        elif first:
            first = False
        else:
            count += 1
    return runs


def encode_run_length(buffer: PixelBuffer, black_level: int) -> EncodedStream:
    runs = run_length_runs(buffer, black_level)
    if len(runs) > 0xFFFF:
        raise EncodingError(f"Run-length stream of {len(runs)} bytes does not fit the 16-bit count prefix")
    data = len(runs).to_bytes(2, "little") + bytes(runs)
    return EncodedStream(
        mode=ColorMode.RLE_MONO,
        width=buffer.width,
        height=buffer.height,
        data=data,
        unit_size=1,
        width_delimiter=1,
    )
