"""Pixel encoders that turn a normalized image into output bytes."""

from .dispatch import EncodeOptions, encode
from .errors import ConversionError, EncodingError, ImageLoadError, UnsupportedColorModeError
from .models import ChannelLayout, ColorMode, EncodedStream, PixelBuffer
from .mono import (
    background_fill,
    encode_bit_packed,
    encode_paged,
    encode_run_length,
    page_count,
    run_length_runs,
)
from .normalize import (
    ResizeFilter,
    ResizeKind,
    ResizeRequest,
    load_image,
    prepare_image,
    to_pixel_buffer,
)
from .raw import encode_gray8, encode_rgb8, encode_rgb16

__all__ = [
    "ChannelLayout",
    "ColorMode",
    "ConversionError",
    "EncodeOptions",
    "EncodedStream",
    "EncodingError",
    "ImageLoadError",
    "PixelBuffer",
    "ResizeFilter",
    "ResizeKind",
    "ResizeRequest",
    "UnsupportedColorModeError",
    "background_fill",
    "encode",
    "encode_bit_packed",
    "encode_gray8",
    "encode_paged",
    "encode_rgb16",
    "encode_rgb8",
    "encode_run_length",
    "load_image",
    "page_count",
    "prepare_image",
    "run_length_runs",
    "to_pixel_buffer",
]
