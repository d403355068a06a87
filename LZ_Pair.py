# LZ_Pair.py

from dataclasses import dataclass
from typing import Union

MIN_MATCH = 3
LENGTH_BIAS = MIN_MATCH
MAX_MATCH = 0xF + LENGTH_BIAS  # 4-bit length field
MAX_DISTANCE = 0xFFF  # 12-bit distance field


@dataclass(frozen=True)
class Literal:
    """A single byte copied verbatim to the output."""

    value: int

    def encode(self) -> bytes:
        return bytes([self.value])


@dataclass(frozen=True)
class Match:
    """
    Back-reference: copy `length` bytes starting `distance + 1` bytes
    before the current output position.

    On the wire the pair occupies two bytes:
      byte0 = distance >> 4
      byte1 = (distance << 4) | (length - 3)
    """

    distance: int
    length: int

    def __post_init__(self):
        if not MIN_MATCH <= self.length <= MAX_MATCH:
            raise ValueError(
                f"Cannot encode match length {self.length} "
                f"(allowed {MIN_MATCH}..{MAX_MATCH})"
            )
        if not 0 <= self.distance <= MAX_DISTANCE:
            raise ValueError(
                f"Cannot encode match distance {self.distance} "
                f"(allowed 0..{MAX_DISTANCE})"
            )

    def encode(self) -> bytes:
        return bytes(
            [
                (self.distance >> 4) & 0xFF,
                ((self.distance & 0xF) << 4) | (self.length - LENGTH_BIAS),
            ]
        )

    @classmethod
    def decode(cls, byte0: int, byte1: int) -> "Match":
        distance = (byte0 << 4) | (byte1 >> 4)
        length = (byte1 & 0xF) + LENGTH_BIAS
        return cls(distance, length)


Token = Union[Literal, Match]


if __name__ == "__main__":
    # Друк кількох прикладів кодування пар
    print("Distance\tLength\tBytes")
    for dist, length in [(0, 3), (0, 18), (1, 4), (255, 10), (MAX_DISTANCE, MAX_MATCH)]:
        encoded = Match(dist, length).encode()
        print(f"{dist}\t\t{length}\t{encoded.hex(' ')}")
