# lz_window.py

from typing import Iterator

NIL = -1


class WindowIndex:
    """
    Index over the trailing window of already encoded bytes.

    For every byte value keeps a chain of the positions holding it,
    newest first. Slots live in a fixed arena addressed by
    position & mask; links between slots are slot indices.
    A slot overwritten by a newer position drops the old one from its
    chain, so nothing older than window_size is ever offered.
    """

    def __init__(self, size: int):
        """
        :param size: розмір вікна (повинен бути ступенем двійки)
        """
        if size <= 0 or size & (size - 1) != 0:
            raise ValueError("Window size must be a power of two")
        self.size = size
        self.mask = size - 1

        self.value = [NIL] * size
        self.position = [NIL] * size
        self.prev = [NIL] * size  # towards newer slots
        self.next = [NIL] * size  # towards older slots

        self.head = [NIL] * 256
        self.tail = [NIL] * 256

    def _evict(self, slot: int):
        old = self.value[slot]
        # positions arrive in increasing order, so the evicted slot is the
        # oldest entry of its chain
        newer = self.prev[slot]
        self.tail[old] = newer
        if newer == NIL:
            self.head[old] = NIL
        else:
            self.next[newer] = NIL

    def insert(self, position: int, value: int):
        """Records that data[position] == value."""
        slot = position & self.mask
        if self.value[slot] != NIL:
            self._evict(slot)

        first = self.head[value]
        self.value[slot] = value
        self.position[slot] = position
        self.prev[slot] = NIL
        self.next[slot] = first

        if first == NIL:
            self.tail[value] = slot
        else:
            self.prev[first] = slot
        self.head[value] = slot

    def insert_range(self, data: bytes, start: int, stop: int):
        for position in range(start, stop):
            self.insert(position, data[position])

    def candidates(self, value: int) -> Iterator[int]:
        """Yields positions holding `value`, most recent first."""
        slot = self.head[value]
        while slot != NIL:
            yield self.position[slot]
            slot = self.next[slot]

    def __len__(self):
        return sum(1 for v in self.value if v != NIL)
