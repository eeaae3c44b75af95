"""Byte-order and numeric token helpers shared by the literal renderer."""

from __future__ import annotations

from .models import ByteOrder, NumericBase

# Every render word is currently one byte, so the byte order never changes a token.
RENDER_WORD_SIZE = 1


def to_signed8(value: int) -> int:
    value &= 0xFF
    return value - 0x100 if value & 0x80 else value


def order_word(word: bytes, order: ByteOrder) -> bytes:
    """Reorder a little-endian word for output; single bytes pass through."""
    if order is ByteOrder.BE:
        return word[::-1]
    return bytes(word)


def format_token(value: int, base: NumericBase) -> str:
    if base is NumericBase.HEX:
        return "0x%02x, " % value
    if base is NumericBase.DEC:
        return "%3d, " % value
    if base is NumericBase.SIGNED_DEC:
        return "%3d, " % to_signed8(value)
    return "0b{:08b}, ".format(value)


def parse_token(token: str) -> int:
    """Inverse of :func:`format_token` for a single token (trailing comma allowed)."""
    text = token.strip().rstrip(",").strip()
    if text.startswith("0x"):
        return int(text, 16)
    if text.startswith("0b"):
        return int(text, 2)
    return int(text) & 0xFF
