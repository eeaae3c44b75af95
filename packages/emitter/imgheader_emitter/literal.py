"""Render encoded bytes as numeric literal tokens, wrapped per source row."""

from __future__ import annotations

import io
import logging
import re
from typing import Iterator, TextIO

from imgheader_encoder.models import EncodedStream

from .models import ByteOrder, NumericBase
from .numeric import RENDER_WORD_SIZE, format_token, order_word, parse_token

logger = logging.getLogger(__name__)

_TOKEN = re.compile(r"-?(?:0x[0-9a-fA-F]+|0b[01]+|\d+)\s*,")


def iter_units(data: bytes, unit_size: int) -> Iterator[bytes]:
    for start in range(0, len(data), unit_size):
        yield data[start : start + unit_size]


def line_break_after(index: int, row_width: int) -> bool:
    """Row break rule: never after unit 0, then after every full row."""
    if row_width <= 0:
        return False
    return index > 0 and (index + 1) % row_width == 0


def write_body(
    out: TextIO,
    stream: EncodedStream,
    base: NumericBase = NumericBase.HEX,
    order: ByteOrder = ByteOrder.LE,
) -> int:
    """Write every byte of ``stream`` as a token; returns the token count."""
    tokens = 0
    if not stream.row_structured:
        for value in stream.data:
            out.write(format_token(order_word(bytes([value]), order)[0], base))
            tokens += 1
        return tokens

    row_width = stream.units_per_row
    for index, unit in enumerate(iter_units(stream.data, stream.unit_size)):
        for start in range(0, len(unit), RENDER_WORD_SIZE):
            for value in order_word(unit[start : start + RENDER_WORD_SIZE], order):
                out.write(format_token(value, base))
                tokens += 1
        if line_break_after(index, row_width):
            logger.debug("New line on index: %d", index)
            out.write("\n")
    return tokens


def render_body(
    stream: EncodedStream,
    base: NumericBase = NumericBase.HEX,
    order: ByteOrder = ByteOrder.LE,
) -> str:
    buf = io.StringIO()
    write_body(buf, stream, base, order)
    return buf.getvalue()


def parse_literals(text: str) -> bytes:
    """Collect the byte values of every literal token in ``text``."""
    return bytes(parse_token(match.group(0)) for match in _TOKEN.finditer(text))
