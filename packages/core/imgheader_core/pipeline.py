"""Conversion run: load, prepare, encode, and write one generated source file."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

from PIL import Image

from imgheader_emitter import (
    DEFAULT_INCLUDES,
    ByteOrder,
    Dialect,
    NumericBase,
    RenderConfig,
    default_symbol_name,
    emit_header,
    evaluate_length,
    render_header,
)
from imgheader_encoder import (
    ColorMode,
    EncodedStream,
    EncodeOptions,
    ResizeRequest,
    encode,
    load_image,
    prepare_image,
    to_pixel_buffer,
)

from .errors import OutputWriteError

logger = logging.getLogger(__name__)


@dataclass
class ConversionRequest:
    input_path: Path
    output_path: Path
    color_mode: ColorMode = ColorMode.GRAY8
    numeric_base: NumericBase = NumericBase.HEX
    byte_order: ByteOrder = ByteOrder.LE
    dialect: Dialect = Dialect.C
    symbol_name: str | None = None
    guard_name: str | None = None
    includes: tuple[str, ...] = field(default=DEFAULT_INCLUDES)
    black_level: int = 128
    inverse_color: bool = False
    full_background: bool = False
    blur: float | None = None
    resize: ResizeRequest | None = None

    def render_config(self) -> RenderConfig:
        return RenderConfig(
            symbol_name=self.symbol_name or default_symbol_name(self.input_path),
            numeric_base=NumericBase(self.numeric_base),
            byte_order=ByteOrder(self.byte_order),
            dialect=Dialect(self.dialect),
            black_level=self.black_level,
            guard_name=self.guard_name,
            includes=tuple(self.includes),
        )

    def encode_options(self) -> EncodeOptions:
        return EncodeOptions(
            black_level=self.black_level,
            inverse_color=self.inverse_color,
            full_background=self.full_background,
        )


@dataclass(frozen=True)
class ConversionResult:
    output_path: Path
    symbol_name: str
    color_mode: ColorMode
    width: int
    height: int
    byte_count: int
    declared_length: int


def encode_image(image: Image.Image, request: ConversionRequest) -> EncodedStream:
    """Prepare ``image`` and run the encoder for the requested mode."""
    mode = ColorMode(request.color_mode)
    image = prepare_image(image, request.inverse_color, request.blur, request.resize)
    buffer = to_pixel_buffer(image, mode.layout)
    logger.debug("Normalized %dx%d %s buffer", buffer.width, buffer.height, buffer.layout.value)
    return encode(buffer, mode, request.encode_options())


def _check_length(stream: EncodedStream, config: RenderConfig) -> int:
    declared = evaluate_length(stream)
    if declared != len(stream.data):
        logger.warning(
            "%s declares %d bytes but the encoded data has %d",
            config.symbol_name,
            declared,
            len(stream.data),
        )
    return declared


def render_image(image: Image.Image, request: ConversionRequest) -> str:
    """Generated source text for ``image`` without touching the filesystem."""
    stream = encode_image(image, request)
    return render_header(stream, request.render_config())


def convert(request: ConversionRequest) -> ConversionResult:
    config = request.render_config()
    logger.info(
        "Converting %s as %s",
        request.input_path,
        ColorMode(request.color_mode).value,
        extra={"event": "convert_start"},
    )

    image = load_image(request.input_path)
    stream = encode_image(image, request)
    declared = _check_length(stream, config)

    output_path = Path(request.output_path)
    try:
        with output_path.open("w", encoding="utf-8", newline="\n") as fout:
            emit_header(fout, stream, config)
            fout.flush()
            os.fsync(fout.fileno())
    except OSError as exc:
        raise OutputWriteError(f"Cannot write {output_path}: {exc}") from exc

    logger.info(
        "Wrote %d bytes of %s to %s",
        len(stream.data),
        config.symbol_name,
        output_path,
        extra={"event": "convert_done"},
    )
    return ConversionResult(
        output_path=output_path,
        symbol_name=config.symbol_name,
        color_mode=stream.mode,
        width=stream.width,
        height=stream.height,
        byte_count=len(stream.data),
        declared_length=declared,
    )
