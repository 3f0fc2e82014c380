"""Abstract interface for peripherals with packet-oriented input or output."""

import enum
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Callable, Optional


class StreamRequestStatus(enum.Enum):
    """Outcome reported to the callback of a stream request."""

    COMPLETED = enum.auto()
    CANCELLED = enum.auto()
    FAILED = enum.auto()


@dataclass
class StreamRequest:
    """A packet buffer handed to a stream together with a completion callback."""

    capacity: int
    callback: Optional[Callable[["StreamRequest", StreamRequestStatus], None]] = None
    length: int = 0
    buffer: bytearray = field(default=None)

    def __post_init__(self):
        if self.capacity < 0:
            raise ValueError(f"negative capacity: {self.capacity}")
        if self.buffer is None:
            self.buffer = bytearray(self.capacity)
        elif len(self.buffer) < self.capacity:
            raise ValueError("buffer is smaller than the capacity")
        if not 0 <= self.length <= self.capacity:
            raise ValueError(f"length {self.length} exceeds capacity")

    @property
    def data(self):
        """The valid part of the buffer."""
        return bytes(self.buffer[:self.length])

    def complete(self, status):
        """Report ``status`` to the callback, if one is set."""
        if self.callback is not None:
            self.callback(self, status)


class Stream(ABC):
    """A peripheral that processes queued requests."""

    @abstractmethod
    def clear(self):
        """Remove all pending requests from the queue."""

    @abstractmethod
    def enqueue(self, request):
        """Add a request to the queue; raise on failure."""