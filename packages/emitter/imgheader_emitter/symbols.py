"""Derived symbolic constants and the array length rule."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from imgheader_encoder.models import EncodedStream

DEFAULT_SYMBOL_NAME = "IMAGE"
CONST_TYPE = "usize"


@dataclass(frozen=True)
class Symbol:
    name: str
    value: str
    type_name: str = CONST_TYPE


@dataclass(frozen=True)
class SymbolSet:
    """Constants for one image plus the expression sizing its array."""

    name: str
    constants: tuple[Symbol, ...]
    array_length: str


def default_symbol_name(path: Path | str | None) -> str:
    """Upper-cased file name up to the first dot, with dashes as underscores."""
    file_name = Path(path).name if path else ""
    stem = file_name.upper().replace("-", "_").split(".")[0]
    return stem or DEFAULT_SYMBOL_NAME


def has_fractional_length(width: int, height: int, unit_size: int, width_delimiter: int) -> bool:
    # Checked once for the whole image, not per row.
    return (width * height * unit_size) % width_delimiter != 0


def length_expression(name: str, padded: bool) -> str:
    expr = f"{name}_HEIGHT * {name}_PIXEL_SIZE * {name}_WIDTH_BYTES"
    return f"{expr} + 1" if padded else expr


def compute_symbols(stream: EncodedStream, name: str) -> SymbolSet:
    if not stream.row_structured:
        # Run-length data carries its own size; the array is sized to the measured bytes.
        return SymbolSet(
            name=name,
            constants=(
                Symbol(f"{name}_HEIGHT", str(stream.height)),
                Symbol(f"{name}_WIDTH", str(stream.width)),
            ),
            array_length=str(len(stream.data)),
        )

    padded = has_fractional_length(stream.width, stream.height, stream.unit_size, stream.width_delimiter)
    return SymbolSet(
        name=name,
        constants=(
            Symbol(f"{name}_HEIGHT", str(stream.height)),
            Symbol(f"{name}_WIDTH", str(stream.width)),
            Symbol(f"{name}_WIDTH_DELIMITER", str(stream.width_delimiter)),
            Symbol(f"{name}_WIDTH_BYTES", f"{name}_WIDTH / {name}_WIDTH_DELIMITER"),
            Symbol(f"{name}_PIXEL_SIZE", str(stream.unit_size)),
            Symbol(f"{name}_LENGTH", length_expression(name, padded)),
        ),
        array_length=f"{name}_LENGTH",
    )


def evaluate_length(stream: EncodedStream) -> int:
    """Numeric value of the declared array length."""
    if not stream.row_structured:
        return len(stream.data)
    width_bytes = stream.width // stream.width_delimiter
    padded = has_fractional_length(stream.width, stream.height, stream.unit_size, stream.width_delimiter)
    return stream.height * stream.unit_size * width_bytes + (1 if padded else 0)
