"""Error types for a conversion run."""

from __future__ import annotations

from imgheader_encoder.errors import ConversionError, EncodingError, ImageLoadError, UnsupportedColorModeError


class OutputWriteError(ConversionError):
    pass


class ConfigError(ConversionError, ValueError):
    pass


__all__ = [
    "ConfigError",
    "ConversionError",
    "EncodingError",
    "ImageLoadError",
    "OutputWriteError",
    "UnsupportedColorModeError",
]
