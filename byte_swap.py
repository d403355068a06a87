"""
Byte order helpers for hosts that keep header fields in the other endianness.
"""


def word_swap(value: int) -> int:
    """Swaps the two bytes of a 16-bit value."""
    return ((value & 0xFF00) >> 8) | ((value & 0x00FF) << 8)


def dword_swap(value: int) -> int:
    """Reverses the four bytes of a 32-bit value."""
    return (
        ((value >> 24) & 0xFF)
        | ((value >> 8) & 0xFF00)
        | ((value & 0xFF00) << 8)
        | ((value & 0xFF) << 24)
    )
