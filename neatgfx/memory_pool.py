"""A pool of object slots allocated in fixed-size blocks."""

from __future__ import annotations


class MemoryPool:
    """Indexable slots that grow in blocks of ``block_size`` and never shrink."""

    def __init__(self, block_size=8192):
        if block_size <= 0:
            raise ValueError("block size must be positive")
        self._block_size = block_size
        self._blocks = []
        self._size = 0

    @property
    def block_size(self):
        return self._block_size

    @property
    def capacity(self):
        return len(self._blocks) * self._block_size

    @property
    def chunks(self):
        """Number of blocks allocated so far."""
        return len(self._blocks)

    def resize(self, count):
        """Grow the number of usable slots to ``count``; smaller values do nothing."""
        if count > self._size:
            if count > self.capacity:
                self.reserve(count)
            self._size = count

    def reserve(self, count):
        """Allocate blocks until at least ``count`` slots exist."""
        while self.capacity < count:
            self._blocks.append([None] * self._block_size)

    def _locate(self, n):
        if not 0 <= n < self._size:
            raise IndexError("memory pool index out of range")
        return self._blocks[n // self._block_size], n % self._block_size

    def destroy(self, n):
        """Release the object held in slot ``n``."""
        block, offset = self._locate(n)
        block[offset] = None

    def __getitem__(self, n):
        block, offset = self._locate(n)
        return block[offset]

    def __setitem__(self, n, value):
        block, offset = self._locate(n)
        block[offset] = value

    def __len__(self):
        return self._size