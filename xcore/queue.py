"""Fixed-capacity double-ended queue."""

from collections import deque

from xcore.array import _BoundedContainer


class Queue(_BoundedContainer):
    """A double-ended queue with a fixed maximum capacity."""

    _kind = "queue"
    _factory = deque

    def __init__(self, capacity):
        super().__init__(capacity)

    def __len__(self):
        return len(self._items)

    def __getitem__(self, index):
        return self._items[self._position(index)]

    def __setitem__(self, index, element):
        self._items[self._position(index)] = element

    def __iter__(self):
        return iter(self._items)

    def capacity(self):
        """Return the maximum number of elements."""
        return self._capacity

    def back(self):
        """Return the last element."""
        self._require_items("back")
        return self._items[-1]

    def front(self):
        """Return the first element."""
        self._require_items("front")
        return self._items[0]

    def clear(self):
        """Remove all elements."""
        self._items.clear()

    def empty(self):
        """Return whether the queue holds no elements."""
        return not self._items

    def full(self):
        """Return whether the queue holds as many elements as it can."""
        return len(self._items) == self._capacity

    def pop_back(self):
        """Remove and return the last element."""
        self._require_items("pop_back")
        return self._items.pop()

    def pop_front(self):
        """Remove and return the first element."""
        self._require_items("pop_front")
        return self._items.popleft()

    def push_back(self, element):
        """Append ``element`` at the back."""
        self._require_room()
        self._items.append(element)

    def push_front(self, element):
        """Prepend ``element`` at the front."""
        self._require_room()
        self._items.appendleft(element)