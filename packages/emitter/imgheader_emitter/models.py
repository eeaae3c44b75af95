"""Typed render settings for literal emission."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class NumericBase(str, Enum):
    HEX = "hex"
    DEC = "dec"
    SIGNED_DEC = "sdec"
    BIN = "bin"


class ByteOrder(str, Enum):
    LE = "le"
    BE = "be"


class Dialect(str, Enum):
    C = "c"
    RUST = "rust"


DEFAULT_INCLUDES = ("<stdint.h>",)


@dataclass(frozen=True)
class RenderConfig:
    symbol_name: str = "IMAGE"
    numeric_base: NumericBase = NumericBase.HEX
    byte_order: ByteOrder = ByteOrder.LE
    dialect: Dialect = Dialect.C
    black_level: int = 128
    guard_name: str | None = None
    includes: tuple[str, ...] = field(default=DEFAULT_INCLUDES)

    def __post_init__(self) -> None:
        if not self.symbol_name:
            raise ValueError("Symbol name must not be empty")
        if not 0 <= self.black_level <= 255:
            raise ValueError(f"Black level must be within 0..255, got {self.black_level}")

    @property
    def guard(self) -> str:
        return self.guard_name or self.symbol_name
