import random
import sys
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "encoder"))
sys.path.insert(0, str(ROOT / "packages" / "emitter"))

from imgheader_emitter import (
    ByteOrder,
    NumericBase,
    format_token,
    line_break_after,
    order_word,
    parse_literals,
    render_body,
    to_signed8,
)
from imgheader_encoder import ColorMode, EncodedStream


def stream(data, width, height, unit_size=1, width_delimiter=1, mode=ColorMode.GRAY8):
    return EncodedStream(
        mode=mode,
        width=width,
        height=height,
        data=bytes(data),
        unit_size=unit_size,
        width_delimiter=width_delimiter,
    )


class TokenTests(unittest.TestCase):
    def test_formats(self):
        self.assertEqual(format_token(0x0A, NumericBase.HEX), "0x0a, ")
        self.assertEqual(format_token(7, NumericBase.DEC), "  7, ")
        self.assertEqual(format_token(255, NumericBase.DEC), "255, ")
        self.assertEqual(format_token(255, NumericBase.SIGNED_DEC), " -1, ")
        self.assertEqual(format_token(0x80, NumericBase.SIGNED_DEC), "-128, ")
        self.assertEqual(format_token(5, NumericBase.BIN), "0b00000101, ")

    def test_signed_reinterpretation(self):
        self.assertEqual(to_signed8(0x7F), 127)
        self.assertEqual(to_signed8(0x80), -128)
        self.assertEqual(to_signed8(0xFE), -2)

    def test_byte_order_is_noop_for_single_bytes(self):
        self.assertEqual(order_word(b"\x12", ByteOrder.LE), b"\x12")
        self.assertEqual(order_word(b"\x12", ByteOrder.BE), b"\x12")
        self.assertEqual(order_word(b"\x12\x34", ByteOrder.BE), b"\x34\x12")

    def test_repeated_formatting_is_stable(self):
        for base in NumericBase:
            first = format_token(0x9C, base)
            self.assertEqual([format_token(0x9C, base) for _ in range(3)], [first] * 3)

    def test_every_base_round_trips(self):
        data = bytes(range(256))
        body_stream = stream(data, 16, 16)
        for base in NumericBase:
            for order in ByteOrder:
                self.assertEqual(parse_literals(render_body(body_stream, base, order)), data)


class LineBreakTests(unittest.TestCase):
    def test_rule(self):
        self.assertFalse(line_break_after(0, 1))
        self.assertTrue(line_break_after(1, 1))
        self.assertFalse(line_break_after(0, 4))
        self.assertTrue(line_break_after(3, 4))
        self.assertFalse(line_break_after(3, 0))

    def test_rows_wrap_by_width(self):
        body = render_body(stream([1, 2, 3, 4, 5, 6], 3, 2))
        self.assertEqual(body, "0x01, 0x02, 0x03, \n0x04, 0x05, 0x06, \n")

    def test_single_column_first_row_is_joined(self):
        body = render_body(stream([1, 2, 3], 1, 3))
        self.assertEqual(body, "0x01, 0x02, \n0x03, \n")

    def test_multi_byte_units_count_as_one_column(self):
        body = render_body(stream(range(12), 2, 2, unit_size=3, mode=ColorMode.RGB8), NumericBase.DEC)
        lines = body.splitlines()
        self.assertEqual(len(lines), 2)
        self.assertEqual(lines[0], "  0,   1,   2,   3,   4,   5, ")

    def test_packed_rows_use_width_delimiter(self):
        body = render_body(stream([0xFF] * 4, 16, 2, width_delimiter=8, mode=ColorMode.BIT_PACKED_MONO))
        self.assertEqual(body, "0xff, 0xff, \n0xff, 0xff, \n")

    def test_narrow_packed_image_has_no_breaks(self):
        body = render_body(stream([0xFF, 0xFF], 4, 4, width_delimiter=8, mode=ColorMode.BIT_PACKED_MONO))
        self.assertEqual(body, "0xff, 0xff, ")

    def test_run_length_is_one_stream(self):
        body = render_body(stream([0x01, 0x00, 0x84], 2, 3, mode=ColorMode.RLE_MONO))
        self.assertEqual(body, "0x01, 0x00, 0x84, ")

    def test_random_bytes_round_trip(self):
        rng = random.Random(3)
        data = bytes(rng.randrange(256) for _ in range(5 * 7 * 3))
        rgb = stream(data, 5, 7, unit_size=3, mode=ColorMode.RGB8)
        self.assertEqual(parse_literals(render_body(rgb, NumericBase.SIGNED_DEC)), data)


if __name__ == "__main__":
    unittest.main()
