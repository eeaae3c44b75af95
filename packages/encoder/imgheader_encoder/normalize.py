"""Pillow adapter: decode, pre-process, and flatten images into pixel buffers."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

import numpy as np
from PIL import Image, ImageFilter, ImageOps, UnidentifiedImageError

from .errors import ImageLoadError
from .models import ChannelLayout, PixelBuffer

logger = logging.getLogger(__name__)

_SIXTEEN_BIT_GRAY = ("I;16", "I;16L", "I;16B", "I")


class ResizeKind(str, Enum):
    FIT = "resize"
    EXACT = "resize-exact"
    FILL = "resize-fill"


class ResizeFilter(str, Enum):
    NEAREST = "nearest"
    TRIANGLE = "triangle"
    CATMULL_ROM = "catmull-rom"
    GAUSSIAN = "gaussian"
    LANCZOS3 = "lanczos3"

    @property
    def resample(self) -> Image.Resampling:
        return _RESAMPLE[self]


# No Gaussian resampling kernel in Pillow; Hamming stands in.
_RESAMPLE = {
    ResizeFilter.NEAREST: Image.Resampling.NEAREST,
    ResizeFilter.TRIANGLE: Image.Resampling.BILINEAR,
    ResizeFilter.CATMULL_ROM: Image.Resampling.BICUBIC,
    ResizeFilter.GAUSSIAN: Image.Resampling.HAMMING,
    ResizeFilter.LANCZOS3: Image.Resampling.LANCZOS,
}


@dataclass(frozen=True)
class ResizeRequest:
    kind: ResizeKind
    width: int
    height: int
    filter: ResizeFilter = ResizeFilter.TRIANGLE

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("Resize width and height must be positive")


def load_image(path: Path) -> Image.Image:
    path = Path(path)
    if not path.is_file():
        raise ImageLoadError(f"Input image does not exist: {path}")
    try:
        image = Image.open(path)
        image.load()
    except (UnidentifiedImageError, OSError) as exc:
        raise ImageLoadError(f"Cannot decode image {path}: {exc}") from exc
    return image


def _gray16_values(image: Image.Image) -> np.ndarray:
    return np.asarray(image.convert("I"), dtype=np.int64).clip(0, 0xFFFF)


def _gray16_to_l(image: Image.Image) -> Image.Image:
    # Pillow clips I;16 to 0..255 on convert("L"); keep the high byte instead.
    return Image.fromarray((_gray16_values(image) >> 8).astype(np.uint8))


def _editable(image: Image.Image) -> Image.Image:
    if image.mode == "1":
        return image.convert("L")
    if image.mode == "P":
        return image.convert("RGBA" if "transparency" in image.info else "RGB")
    if image.mode in _SIXTEEN_BIT_GRAY:
        return _gray16_to_l(image)
    if image.mode in ("LA", "CMYK", "YCbCr", "F"):
        return image.convert("RGBA" if image.mode == "LA" else "RGB")
    return image


def invert(image: Image.Image) -> Image.Image:
    """Invert color channels; alpha is kept as is."""
    image = _editable(image)
    if image.mode == "RGBA":
        alpha = image.getchannel("A")
        inverted = ImageOps.invert(image.convert("RGB"))
        inverted.putalpha(alpha)
        return inverted
    return ImageOps.invert(image)


def resize(image: Image.Image, request: ResizeRequest) -> Image.Image:
    size = (request.width, request.height)
    resample = request.filter.resample
    if request.kind is ResizeKind.FIT:
        return ImageOps.contain(image, size, method=resample)
    if request.kind is ResizeKind.EXACT:
        return image.resize(size, resample=resample)
    return ImageOps.fit(image, size, method=resample)


def prepare_image(
    image: Image.Image,
    inverse_color: bool = False,
    blur: float | None = None,
    resize_request: ResizeRequest | None = None,
) -> Image.Image:
    if inverse_color:
        image = invert(image)

    if blur is not None:
        logger.info("Blur by %.2f", blur)
        image = _editable(image).filter(ImageFilter.GaussianBlur(radius=blur))

    if resize_request is not None:
        image = resize(_editable(image), resize_request)
        logger.debug("Resized to %dx%d", image.width, image.height)
    return image


def _rgb16_bytes(image: Image.Image) -> bytes:
    if image.mode in _SIXTEEN_BIT_GRAY:
        gray = _gray16_values(image).astype("<u2")
        return np.repeat(gray.reshape(-1), 3).tobytes()
    rgb = np.frombuffer(image.convert("RGB").tobytes(), dtype=np.uint8).astype(np.uint16)
    # Widen 8-bit channels to the full 16-bit range, v -> v * 257.
    return (rgb * 257).astype("<u2").tobytes()


def _luma8_bytes(image: Image.Image) -> bytes:
    if image.mode in _SIXTEEN_BIT_GRAY:
        return _gray16_to_l(image).tobytes()
    return image.convert("L").tobytes()


def to_pixel_buffer(image: Image.Image, layout: ChannelLayout) -> PixelBuffer:
    if layout is ChannelLayout.RGB8:
        if image.mode in _SIXTEEN_BIT_GRAY:
            image = _gray16_to_l(image)
        data = image.convert("RGB").tobytes()
    elif layout is ChannelLayout.RGB16:
        data = _rgb16_bytes(image)
    else:
        data = _luma8_bytes(image)
    return PixelBuffer(width=image.width, height=image.height, layout=layout, data=data)
