"""Fixed-capacity array of elements."""


class _BoundedContainer:
    """Shared state and checks for containers with a fixed maximum capacity."""

    _kind = "container"
    _factory = list

    def __init__(self, capacity):
        if capacity < 0:
            raise ValueError(f"negative capacity: {capacity}")
        self._capacity = capacity
        self._items = self._factory()

    def __repr__(self):
        return (
            f"{type(self).__name__}(capacity={self._capacity}, "
            f"items={list(self._items)!r})"
        )

    def _position(self, index):
        size = len(self._items)
        if index < 0:
            index += size
        if not 0 <= index < size:
            raise IndexError(f"{self._kind} index out of range: {index}")
        return index

    def _require_items(self, action):
        if not self._items:
            raise IndexError(f"{action}: {self._kind} is empty")

    def _require_room(self):
        if len(self._items) == self._capacity:
            raise OverflowError(f"{self._kind} is full")


class Array(_BoundedContainer):
    """A sequence with a fixed maximum capacity.

    Elements are kept in order; insertion and erasure shift the elements
    that follow.
    """

    _kind = "array"

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

    def clear(self):
        """Remove all elements."""
        self._items.clear()

    def empty(self):
        """Return whether the array holds no elements."""
        return not self._items

    def full(self):
        """Return whether the array holds as many elements as it can."""
        return len(self._items) == self._capacity

    def erase(self, index):
        """Remove the element at ``index``, shifting the following ones."""
        self._items.pop(self._position(index))

    def insert(self, index, element):
        """Insert ``element`` before position ``index``."""
        if not 0 <= index <= len(self._items):
            raise IndexError(f"insert position out of range: {index}")
        self._require_room()
        self._items.insert(index, element)

    def pop_back(self):
        """Remove and return the last element."""
        self._require_items("pop_back")
        return self._items.pop()

    def push_back(self, element):
        """Append ``element`` at the end."""
        self._require_room()
        self._items.append(element)