"""Verbatim channel encoders for RGB8, RGB16 and Gray8 output."""

from __future__ import annotations

from .models import ChannelLayout, ColorMode, EncodedStream, PixelBuffer


def _encode_raw(buffer: PixelBuffer, mode: ColorMode) -> EncodedStream:
    if buffer.layout is not mode.layout:
        raise ValueError(f"{mode.value} output needs a {mode.layout.value} buffer, got {buffer.layout.value}")
    return EncodedStream(
        mode=mode,
        width=buffer.width,
        height=buffer.height,
        data=bytes(buffer.data),
        unit_size=buffer.layout.pixel_size,
        width_delimiter=1,
    )


def encode_rgb8(buffer: PixelBuffer) -> EncodedStream:
    return _encode_raw(buffer, ColorMode.RGB8)


def encode_rgb16(buffer: PixelBuffer) -> EncodedStream:
    # Channels are already little-endian words; the render byte order does not touch them.
    return _encode_raw(buffer, ColorMode.RGB16)


def encode_gray8(buffer: PixelBuffer) -> EncodedStream:
    return _encode_raw(buffer, ColorMode.GRAY8)


def require_luma(buffer: PixelBuffer, mode: ColorMode) -> None:
    if buffer.layout is not ChannelLayout.LUMA8:
        raise ValueError(f"{mode.value} output needs a luma8 buffer, got {buffer.layout.value}")
