"""Core services for settings, logging, and running a conversion."""

from .config import AppConfig, ImageConfig, OutputConfig, config_path, load_config, save_config
from .errors import (
    ConfigError,
    ConversionError,
    EncodingError,
    ImageLoadError,
    OutputWriteError,
    UnsupportedColorModeError,
)
from .pipeline import ConversionRequest, ConversionResult, convert, encode_image, render_image

__all__ = [
    "AppConfig",
    "ConfigError",
    "ConversionError",
    "ConversionRequest",
    "ConversionResult",
    "EncodingError",
    "ImageConfig",
    "ImageLoadError",
    "OutputConfig",
    "OutputWriteError",
    "UnsupportedColorModeError",
    "config_path",
    "convert",
    "encode_image",
    "load_config",
    "render_image",
    "save_config",
]
