"""Literal and symbol emission for generated C and Rust sources."""

from .literal import line_break_after, parse_literals, render_body, write_body
from .models import DEFAULT_INCLUDES, ByteOrder, Dialect, NumericBase, RenderConfig
from .numeric import format_token, order_word, parse_token, to_signed8
from .symbols import (
    Symbol,
    SymbolSet,
    compute_symbols,
    default_symbol_name,
    evaluate_length,
    has_fractional_length,
)
from .writers import CWriter, HeaderWriter, RustWriter, emit_header, render_header, writer_for

__all__ = [
    "DEFAULT_INCLUDES",
    "ByteOrder",
    "CWriter",
    "Dialect",
    "HeaderWriter",
    "NumericBase",
    "RenderConfig",
    "RustWriter",
    "Symbol",
    "SymbolSet",
    "compute_symbols",
    "default_symbol_name",
    "emit_header",
    "evaluate_length",
    "format_token",
    "has_fractional_length",
    "line_break_after",
    "order_word",
    "parse_literals",
    "parse_token",
    "render_body",
    "render_header",
    "to_signed8",
    "write_body",
    "writer_for",
]
