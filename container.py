"""
LZSS container header: 4 magic bytes followed by the plaintext length.
"""

import struct

MAGIC = b"LZSS"
HEADER_FORMAT = "<4sI"  # magic, uint32 little-endian original length
HEADER_SIZE = struct.calcsize(HEADER_FORMAT)
MAX_PLAINTEXT_SIZE = 0xFFFFFFFF


def is_compressed(buffer: bytes) -> bool:
    """True iff the buffer starts with the LZSS magic."""
    return len(buffer) >= len(MAGIC) and bytes(buffer[: len(MAGIC)]) == MAGIC


def declared_size(buffer: bytes) -> int:
    """
    Returns the plaintext length stored in the header.
    0 means the buffer is not a (complete) container.
    """
    if not is_compressed(buffer) or len(buffer) < HEADER_SIZE:
        return 0
    _, length = struct.unpack_from(HEADER_FORMAT, buffer, 0)
    return length


def pack_header(length: int) -> bytes:
    if not 0 <= length <= MAX_PLAINTEXT_SIZE:
        raise ValueError(f"Plaintext length {length} does not fit in 32 bits")
    return struct.pack(HEADER_FORMAT, MAGIC, length)
