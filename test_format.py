import struct
import unittest

from bit_reader import GroupReader
from bit_writer import GroupWriter
from byte_swap import dword_swap, word_swap
from container import MAGIC, declared_size, is_compressed, pack_header
from errors import TruncatedStreamError
from LZ_Pair import MAX_DISTANCE, MAX_MATCH, Literal, Match
from lz_window import WindowIndex


class TestContainer(unittest.TestCase):
    def test_is_compressed(self):
        self.assertTrue(is_compressed(b"\x4c\x5a\x53\x53\x00\x00\x00\x00"))
        self.assertFalse(is_compressed(b"\x00\x00\x00\x00"))
        self.assertFalse(is_compressed(b"LZS"))
        self.assertFalse(is_compressed(b""))

    def test_declared_size(self):
        self.assertEqual(declared_size(b"\x4c\x5a\x53\x53\x10\x00\x00\x00"), 16)
        self.assertEqual(declared_size(b"\x00\x00\x00\x00"), 0)
        self.assertEqual(declared_size(b"LZSS\x10"), 0)

    def test_pack_header(self):
        self.assertEqual(pack_header(0x01020304), MAGIC + b"\x04\x03\x02\x01")
        with self.assertRaises(ValueError):
            pack_header(1 << 32)
        with self.assertRaises(ValueError):
            pack_header(-1)


class TestTokens(unittest.TestCase):
    def test_match_encoding(self):
        self.assertEqual(Match(3, 4).encode(), b"\x00\x31")
        self.assertEqual(Match(0, 18).encode(), b"\x00\x0f")
        self.assertEqual(Match(MAX_DISTANCE, MAX_MATCH).encode(), b"\xff\xff")
        self.assertEqual(Match(0x123, 5).encode(), b"\x12\x32")

    def test_match_decoding(self):
        self.assertEqual(Match.decode(0xFF, 0xFF), Match(4095, 18))
        self.assertEqual(Match.decode(0x12, 0x32), Match(0x123, 5))

    def test_match_limits(self):
        with self.assertRaises(ValueError):
            Match(0, 2)
        with self.assertRaises(ValueError):
            Match(0, 19)
        with self.assertRaises(ValueError):
            Match(4096, 3)
        with self.assertRaises(ValueError):
            Match(-1, 3)

    def test_literal_encoding(self):
        self.assertEqual(Literal(0x41).encode(), b"A")


class TestControlBytes(unittest.TestCase):
    def test_first_token_in_lowest_bit(self):
        writer = GroupWriter()
        writer.add(Literal(0x41))
        writer.add(Match(1, 6))
        writer.add(Literal(0x42))
        self.assertEqual(writer.getvalue(), b"\x02\x41\x00\x13\x42")
        self.assertEqual((writer.literals, writer.matches), (2, 1))

    def test_full_group_then_partial(self):
        writer = GroupWriter()
        for _ in range(7):
            writer.add(Literal(0x61))
        writer.add(Match(0, 3))
        writer.add(Match(0, 3))
        self.assertEqual(
            writer.getvalue(),
            b"\x80" + b"a" * 7 + b"\x00\x00" + b"\x01" + b"\x00\x00",
        )

    def test_empty_writer(self):
        self.assertEqual(GroupWriter().getvalue(), b"")

    def test_reader(self):
        reader = GroupReader(b"\x05A\x00\x13")
        self.assertEqual(list(reader.read_flags()), [1, 0, 1, 0, 0, 0, 0, 0])
        self.assertEqual(reader.read_match(), Match.decode(0x41, 0x00))
        self.assertEqual(reader.read_literal(), 0x13)
        with self.assertRaises(TruncatedStreamError):
            reader.read_flags()

    def test_reader_truncated_match(self):
        reader = GroupReader(b"\x01\x00")
        reader.read_flags()
        with self.assertRaises(TruncatedStreamError):
            reader.read_match()


class TestWindowIndex(unittest.TestCase):
    def test_candidates_newest_first(self):
        index = WindowIndex(8)
        index.insert_range(b"abacab", 0, 6)
        self.assertEqual(list(index.candidates(ord("a"))), [4, 2, 0])
        self.assertEqual(list(index.candidates(ord("b"))), [5, 1])
        self.assertEqual(list(index.candidates(ord("z"))), [])
        self.assertEqual(len(index), 6)

    def test_eviction_on_wrap(self):
        data = b"abacad"
        index = WindowIndex(4)
        index.insert_range(data, 0, 4)
        self.assertEqual(list(index.candidates(ord("a"))), [2, 0])

        index.insert(4, data[4])  # overwrites position 0
        self.assertEqual(list(index.candidates(ord("a"))), [4, 2])

        index.insert(5, data[5])  # overwrites position 1, the only "b"
        self.assertEqual(list(index.candidates(ord("b"))), [])
        self.assertEqual(list(index.candidates(ord("d"))), [5])
        self.assertEqual(len(index), 4)

    def test_chain_survives_long_runs(self):
        index = WindowIndex(16)
        index.insert_range(b"x" * 100, 0, 100)
        self.assertEqual(list(index.candidates(ord("x"))), list(range(99, 83, -1)))

    def test_size_must_be_power_of_two(self):
        with self.assertRaises(ValueError):
            WindowIndex(12)
        with self.assertRaises(ValueError):
            WindowIndex(0)


class TestByteSwap(unittest.TestCase):
    def test_word_swap(self):
        self.assertEqual(word_swap(0x1234), 0x3412)
        self.assertEqual(word_swap(0x00FF), 0xFF00)

    def test_dword_swap(self):
        self.assertEqual(dword_swap(0x12345678), 0x78563412)
        self.assertEqual(dword_swap(dword_swap(0xDEADBEEF)), 0xDEADBEEF)

    def test_big_endian_header_read(self):
        header = pack_header(1000)
        (raw,) = struct.unpack(">I", header[4:8])
        self.assertEqual(dword_swap(raw), declared_size(header))


if __name__ == "__main__":
    unittest.main()
