"""Atomic integers and references guarded by a lock."""

import threading


class AtomicInteger:
    """An unsigned integer of fixed bit width with atomic operations."""

    def __init__(self, bits, value=0):
        if bits <= 0:
            raise ValueError(f"bit width must be positive: {bits}")
        self._modulus = 1 << bits
        if not 0 <= value < self._modulus:
            raise ValueError(f"value does not fit in {bits} bits: {value}")
        self.bits = bits
        self._value = value
        self._lock = threading.Lock()

    def __repr__(self):
        return f"AtomicInteger(bits={self.bits}, value={self.load()})"

    def load(self):
        """Return the current value."""
        with self._lock:
            return self._value

    def compare_exchange(self, expected, desired):
        """Store ``desired`` if the value equals ``expected``.

        Returns a pair of the success flag and the value observed before
        the operation.
        """
        desired %= self._modulus
        with self._lock:
            observed = self._value
            if observed == expected:
                self._value = desired
                return True, observed
            return False, observed

    def _update(self, operation):
        with self._lock:
            previous = self._value
            self._value = operation(previous) % self._modulus
            return previous

    def fetch_add(self, value):
        """Add ``value`` with wraparound and return the previous value."""
        return self._update(lambda current: current + value)

    def fetch_sub(self, value):
        """Subtract ``value`` with wraparound and return the previous value."""
        return self._update(lambda current: current - value)

    def fetch_and(self, value):
        """Apply bitwise AND with ``value`` and return the previous value."""
        return self._update(lambda current: current & value)

    def fetch_or(self, value):
        """Apply bitwise OR with ``value`` and return the previous value."""
        return self._update(lambda current: current | value)


class AtomicReference:
    """A reference to an object with an atomic compare-and-exchange."""

    def __init__(self, value=None):
        self._value = value
        self._lock = threading.Lock()

    def __repr__(self):
        return f"AtomicReference({self.load()!r})"

    def load(self):
        """Return the referenced object."""
        with self._lock:
            return self._value

    def compare_exchange(self, expected, desired):
        """Replace the reference if it is the very object ``expected``.

        Returns a pair of the success flag and the object referenced before
        the operation.
        """
        with self._lock:
            observed = self._value
            if observed is expected:
                self._value = desired
                return True, observed
            return False, observed