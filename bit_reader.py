from bitarray import bitarray

from errors import TruncatedStreamError
from LZ_Pair import Match


class GroupReader:
    """
    Курсор по потоку токенів: керуючі байти, літерали та пари.
    """

    def __init__(self, data: bytes, pos: int = 0):
        """
        :param data: стиснений буфер
        :param pos: позиція першого керуючого байта
        """
        self.data = data
        self.pos = pos

    def _need(self, n: int):
        if self.pos + n > len(self.data):
            raise TruncatedStreamError(
                f"Input exhausted at offset {self.pos} (need {n} more byte(s))"
            )

    def read_flags(self) -> bitarray:
        """
        Зчитує керуючий байт і повертає 8 прапорців,
        біт 0 першим (порядок появи токенів).
        """
        self._need(1)
        flags = bitarray(endian="little")
        flags.frombytes(bytes(self.data[self.pos : self.pos + 1]))
        self.pos += 1
        return flags

    def read_literal(self) -> int:
        self._need(1)
        value = self.data[self.pos]
        self.pos += 1
        return value

    def read_match(self) -> Match:
        self._need(2)
        match = Match.decode(self.data[self.pos], self.data[self.pos + 1])
        self.pos += 2
        return match
