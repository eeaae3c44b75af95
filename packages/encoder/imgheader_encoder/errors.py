"""Exception types raised while converting an image."""

from __future__ import annotations


class ConversionError(Exception):
    """Base class for failures that abort a conversion run."""


class ImageLoadError(ConversionError):
    pass


class UnsupportedColorModeError(ConversionError, NotImplementedError):
    def __init__(self, mode: str) -> None:
        super().__init__(f"Color mode '{mode}' is not implemented")
        self.mode = mode


class EncodingError(ConversionError, ValueError):
    """The image cannot be represented in the requested output format."""
