from bitarray import bitarray

from LZ_Pair import Match, Token

GROUP_SIZE = 8


class GroupWriter:
    """
    Пише токени групами по 8: керуючий байт, потім самі токени.
    Біт i керуючого байта = 1, якщо токен i групи є Match.
    """

    def __init__(self):
        self.output = bytearray()
        # little endian: the first flag ends up in the least significant bit
        self.flags = bitarray(endian="little")
        self.payload = bytearray()
        self.literals = 0
        self.matches = 0

    def add(self, token: Token):
        is_match = isinstance(token, Match)
        self.flags.append(is_match)
        self.payload += token.encode()
        if is_match:
            self.matches += 1
        else:
            self.literals += 1

        if len(self.flags) == GROUP_SIZE:
            self.flush()

    def flush(self):
        """
        Writes the pending group. A short group keeps its unused
        high bits clear (tobytes pads with zeros).
        """
        if not self.flags:
            return
        self.output += self.flags.tobytes()
        self.output += self.payload
        self.flags = bitarray(endian="little")
        self.payload = bytearray()

    def getvalue(self) -> bytes:
        self.flush()
        return bytes(self.output)
