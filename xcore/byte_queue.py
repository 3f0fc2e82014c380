"""Fixed-capacity FIFO queue of bytes."""

from collections import deque

from xcore.array import _BoundedContainer


class ByteQueue(_BoundedContainer):
    """A first-in first-out queue of byte values with a fixed capacity."""

    _kind = "byte queue"
    _factory = deque

    def __init__(self, capacity):
        super().__init__(capacity)

    def __len__(self):
        return len(self._items)

    def __getitem__(self, offset):
        return self._items[self._position(offset)]

    def __iter__(self):
        return iter(self._items)

    def capacity(self):
        """Return the maximum number of bytes."""
        return self._capacity

    def clear(self):
        """Remove all bytes."""
        self._items.clear()

    def empty(self):
        """Return whether the queue holds no bytes."""
        return not self._items

    def full(self):
        """Return whether the queue holds as many bytes as it can."""
        return len(self._items) == self._capacity

    def front(self):
        """Return the oldest byte without removing it."""
        self._require_items("front")
        return self._items[0]

    def pop_front(self):
        """Remove and return the oldest byte."""
        self._require_items("pop_front")
        return self._items.popleft()

    def push_back(self, value):
        """Append a byte value in the range 0..255."""
        if not 0 <= value <= 0xFF:
            raise ValueError(f"not a byte value: {value}")
        self._require_room()
        self._items.append(value)