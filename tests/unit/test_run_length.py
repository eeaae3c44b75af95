import sys
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "encoder"))

from imgheader_encoder import ChannelLayout, ColorMode, EncodingError, PixelBuffer, encode_run_length, run_length_runs


def luma(values, width=None):
    width = width or len(values)
    return PixelBuffer(width, len(values) // width, ChannelLayout.LUMA8, bytes(values))


class RunLengthTests(unittest.TestCase):
    def test_closed_run_is_written(self):
        # 5 white pixels then one black: the white run closes, the black run stays open.
        stream = encode_run_length(luma([255] * 5 + [0]), black_level=128)
        self.assertEqual(stream.data, bytes([0x01, 0x00, 0x80 | 4]))
        self.assertEqual(stream.mode, ColorMode.RLE_MONO)
        self.assertFalse(stream.row_structured)

    def test_black_run_has_clear_top_bit(self):
        stream = encode_run_length(luma([0] * 3 + [255]), black_level=128)
        self.assertEqual(stream.data, bytes([0x01, 0x00, 0x02]))

    def test_last_run_is_dropped(self):
        # A uniform image is one run, and the final run is never flushed.
        for n in (1, 2, 64, 128):
            stream = encode_run_length(luma([255] * n), black_level=128)
            self.assertEqual(stream.data, bytes([0x00, 0x00]))

    def test_long_run_splits_at_128(self):
        runs = run_length_runs(luma([255] * 129), black_level=128)
        self.assertEqual(runs, bytearray([0xFF]))
        runs = run_length_runs(luma([0] * 300), black_level=128)
        self.assertEqual(runs, bytearray([0x7F, 0x7F]))

    def test_rows_do_not_reset_runs(self):
        values = [255, 255, 255, 255, 0, 0]
        runs = run_length_runs(luma(values, width=2), black_level=128)
        self.assertEqual(runs, bytearray([0x80 | 3]))

    def test_alternating_pixels(self):
        runs = run_length_runs(luma([255, 0, 255, 0]), black_level=128)
        self.assertEqual(runs, bytearray([0x80, 0x00, 0x80]))

    def test_count_prefix_is_little_endian(self):
        values = [255, 0] * 200
        stream = encode_run_length(luma(values), black_level=128)
        count = len(values) - 1
        self.assertEqual(stream.data[:2], count.to_bytes(2, "little"))
        self.assertEqual(len(stream.data), 2 + count)

    def test_run_count_overflow(self):
        # 65538 alternating pixels close 65537 runs, past the 16-bit count prefix.
        with self.assertRaises(EncodingError):
            encode_run_length(luma([255, 0] * 32769), black_level=128)

    def test_empty_image(self):
        stream = encode_run_length(PixelBuffer(0, 0, ChannelLayout.LUMA8, b""), black_level=128)
        self.assertEqual(stream.data, b"\x00\x00")


if __name__ == "__main__":
    unittest.main()
