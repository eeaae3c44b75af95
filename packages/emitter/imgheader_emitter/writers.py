"""Header writers for the C and Rust surface syntaxes."""

from __future__ import annotations

import io
from typing import Sequence, TextIO

from imgheader_encoder.models import EncodedStream

from .literal import render_body
from .models import Dialect, RenderConfig
from .symbols import Symbol, SymbolSet, compute_symbols


class HeaderWriter:
    """Writes framing, constants, and the array declaration for one dialect."""

    dialect: Dialect

    def __init__(self, out: TextIO) -> None:
        self.out = out

    def begin(self, guard: str, includes: Sequence[str]) -> None:
        pass

    def constant(self, symbol: Symbol) -> None:
        raise NotImplementedError

    def array_open(self, name: str, length: str) -> None:
        raise NotImplementedError

    def array_close(self) -> None:
        raise NotImplementedError

    def end(self, guard: str) -> None:
        pass


class CWriter(HeaderWriter):
    dialect = Dialect.C

    def begin(self, guard: str, includes: Sequence[str]) -> None:
        self.out.write(f"#ifndef __{guard}\n")
        self.out.write(f"#define __{guard}\n\n")
        for include in includes:
            self.out.write(f"#include {include}\n")

    def constant(self, symbol: Symbol) -> None:
        self.out.write(f"#define {symbol.name} {symbol.value}\n")

    def array_open(self, name: str, length: str) -> None:
        self.out.write(f"uint8_t {name}[{length}] = {{\n")

    def array_close(self) -> None:
        self.out.write("};\n")

    def end(self, guard: str) -> None:
        self.out.write(f"#endif //__{guard}\n")


class RustWriter(HeaderWriter):
    dialect = Dialect.RUST

    def constant(self, symbol: Symbol) -> None:
        self.out.write(f"pub const {symbol.name}: {symbol.type_name} = {symbol.value};\n")

    def array_open(self, name: str, length: str) -> None:
        self.out.write(f"pub const {name}: [u8; {length}] = [\n")

    def array_close(self) -> None:
        self.out.write("];\n")


WRITERS: dict[Dialect, type[HeaderWriter]] = {
    Dialect.C: CWriter,
    Dialect.RUST: RustWriter,
}


def writer_for(dialect: Dialect, out: TextIO) -> HeaderWriter:
    return WRITERS[Dialect(dialect)](out)


def emit_header(out: TextIO, stream: EncodedStream, config: RenderConfig) -> SymbolSet:
    symbols = compute_symbols(stream, config.symbol_name)
    writer = writer_for(config.dialect, out)

    writer.begin(config.guard, config.includes)
    for symbol in symbols.constants:
        writer.constant(symbol)
    writer.array_open(config.symbol_name, symbols.array_length)

    body = render_body(stream, config.numeric_base, config.byte_order)
    out.write(body)
    if body and not body.endswith("\n"):
        out.write("\n")

    writer.array_close()
    writer.end(config.guard)
    return symbols


def render_header(stream: EncodedStream, config: RenderConfig) -> str:
    buf = io.StringIO()
    emit_header(buf, stream, config)
    return buf.getvalue()
