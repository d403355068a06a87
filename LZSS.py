"""
This module implements the LZSS compression algorithm.
Repeated byte sequences inside a sliding window are replaced by
(distance, length) pairs; everything else is stored as literal bytes.
Tokens are grouped by eight behind a control byte, and the whole stream
is prefixed with an 8-byte header ("LZSS" + original length).
"""

from typing import Optional

from bit_reader import GroupReader
from bit_writer import GroupWriter
from compressor_ABC import Compressor
from container import HEADER_SIZE, declared_size, is_compressed, pack_header
from errors import (
    DecodeResult,
    DecodeStatus,
    InvalidBackReferenceError,
    LengthMismatchError,
    LZSSError,
    NotAContainerError,
    TruncatedStreamError,
)
from LZ_Pair import MAX_DISTANCE, MIN_MATCH, Literal, Match
from lz_window import WindowIndex


class LZSS(Compressor):
    """
    LZSS compression algorithm implementation.
    Every call to compress/decode keeps its own state, so one instance
    may serve any number of buffers.
    """

    MAX_WINDOW_SIZE = MAX_DISTANCE + 1  # 12-bit distance field
    LOOKAHEAD_SIZE = 16

    def __init__(self, window_size=None, use_index: bool = True, verbose: bool = False):
        if window_size is None:
            window_size = self.MAX_WINDOW_SIZE
        if window_size <= 0 or window_size & (window_size - 1) != 0:
            raise ValueError("Window size must be a power of two")
        self.window_size = min(window_size, self.MAX_WINDOW_SIZE)
        self.use_index = use_index
        self.verbose = verbose

    def find_match(
        self, data: bytes, current_position: int, index: Optional[WindowIndex] = None
    ) -> tuple[int, int] | None:
        """
        Find the longest match for data[current_position:] inside the window.
        Candidates are visited newest first, so on equal length the closest
        position wins. Returns (distance, length) or None.
        """
        lookahead = min(len(data) - current_position, self.LOOKAHEAD_SIZE)
        if lookahead < MIN_MATCH:
            return None

        window_start = max(0, current_position - self.window_size)
        if index is not None:
            candidates = index.candidates(data[current_position])
        else:
            candidates = range(current_position - 1, window_start - 1, -1)

        best_match_position = -1
        best_match_length = 0

        for candidate_position in candidates:
            if candidate_position < window_start:
                break

            # the source may run into the lookahead itself (overlapping copy)
            match_length = 0
            while (
                match_length < lookahead
                and data[candidate_position + match_length]
                == data[current_position + match_length]
            ):
                match_length += 1

            if match_length > best_match_length:
                best_match_length = match_length
                best_match_position = candidate_position
                if best_match_length == lookahead:
                    break

        if best_match_length >= MIN_MATCH:
            return (current_position - best_match_position - 1, best_match_length)
        return None

    def compress(self, data: bytes) -> bytes | None:
        """
        Compresses data into an LZSS container.
        Returns None for inputs of 3 bytes or less: no match is possible
        there and the header alone would outgrow them.
        """
        n = len(data)
        if n <= MIN_MATCH:
            if self.verbose:
                print(f"Input of {n} bytes is too small to compress")
            return None

        header = pack_header(n)
        index = WindowIndex(self.window_size) if self.use_index else None
        writer = GroupWriter()

        if self.verbose:
            print(f"Compressing {n} bytes (window={self.window_size})")

        i = 0
        while i < n:
            match = self.find_match(data, i, index)

            if match:
                distance, length = match
                if self.verbose:
                    print(f"Match at position {i}: distance={distance}, length={length}")
                writer.add(Match(distance, length))
                step = length
            else:
                if self.verbose:
                    print(f"Literal at position {i}: {data[i]}")
                writer.add(Literal(data[i]))
                step = 1

            if index is not None:
                index.insert_range(data, i, i + step)
            i += step

        output = header + writer.getvalue()

        if self.verbose:
            print(
                f"{writer.literals} literals, {writer.matches} matches, "
                f"{len(output)} bytes written"
            )
        return output

    def decode(self, data: bytes) -> DecodeResult:
        """
        Decompresses an LZSS container.
        Never returns partial output: either all declared bytes or a failure.
        """
        try:
            output = self._decode(data)
        except LZSSError as e:
            if self.verbose:
                print(f"Decoding failed: {e}")
            return DecodeResult(e.status, None, str(e))
        return DecodeResult(DecodeStatus.OK, output)

    def _decode(self, data: bytes) -> bytes:
        if not is_compressed(data):
            raise NotAContainerError("Missing LZSS magic")
        if len(data) < HEADER_SIZE:
            raise TruncatedStreamError("Container header is incomplete")

        expected = declared_size(data)
        reader = GroupReader(data, HEADER_SIZE)
        output = bytearray()

        while len(output) < expected:
            for flag in reader.read_flags():
                # the last group may be short; its spare bits carry nothing
                if len(output) == expected:
                    break

                if not flag:
                    output.append(reader.read_literal())
                    continue

                match = reader.read_match()
                source = len(output) - match.distance - 1
                if source < 0:
                    raise InvalidBackReferenceError(
                        f"Match distance {match.distance} reaches before the "
                        f"start of output (position {len(output)})"
                    )
                if len(output) + match.length > expected:
                    raise LengthMismatchError(
                        f"Match of length {match.length} at position {len(output)} "
                        f"overruns declared size {expected}"
                    )
                # byte by byte: the source may overlap bytes written by this copy
                for _ in range(match.length):
                    output.append(output[source])
                    source += 1

        if len(output) != expected:
            raise LengthMismatchError(
                f"Decoded {len(output)} bytes, header declares {expected}"
            )

        if self.verbose:
            print(f"Decompressed {len(output)} bytes from {reader.pos} input bytes")
        return bytes(output)


def compress(data: bytes, window_size: int = LZSS.MAX_WINDOW_SIZE) -> bytes | None:
    return LZSS(window_size=window_size).compress(data)


def decompress(data: bytes) -> bytes | None:
    return LZSS().decompress(data)


__all__ = ["LZSS", "compress", "decompress", "is_compressed", "declared_size"]
