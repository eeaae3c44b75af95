"""Select the encoder for a color mode once per run."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from .errors import UnsupportedColorModeError
from .models import ColorMode, EncodedStream, PixelBuffer
from .mono import encode_bit_packed, encode_paged, encode_run_length
from .raw import encode_gray8, encode_rgb8, encode_rgb16


@dataclass(frozen=True)
class EncodeOptions:
    black_level: int = 128
    inverse_color: bool = False
    full_background: bool = False


def _unsupported(buffer: PixelBuffer, options: EncodeOptions) -> EncodedStream:
    raise UnsupportedColorModeError(ColorMode.UNSUPPORTED.value)


_ENCODERS: dict[ColorMode, Callable[[PixelBuffer, EncodeOptions], EncodedStream]] = {
    ColorMode.RGB8: lambda buf, _opts: encode_rgb8(buf),
    ColorMode.RGB16: lambda buf, _opts: encode_rgb16(buf),
    ColorMode.GRAY8: lambda buf, _opts: encode_gray8(buf),
    ColorMode.RLE_MONO: lambda buf, opts: encode_run_length(buf, opts.black_level),
    ColorMode.BIT_PACKED_MONO: lambda buf, opts: encode_bit_packed(buf, opts.black_level),
    ColorMode.PAGED_MONO: lambda buf, opts: encode_paged(
        buf, opts.black_level, opts.inverse_color, opts.full_background
    ),
    ColorMode.UNSUPPORTED: _unsupported,
}


def encode(buffer: PixelBuffer, mode: ColorMode, options: EncodeOptions | None = None) -> EncodedStream:
    return _ENCODERS[ColorMode(mode)](buffer, options or EncodeOptions())
