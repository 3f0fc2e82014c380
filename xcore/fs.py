"""Abstract file system interface built from handles and nodes."""

import enum
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any


class Access(enum.IntFlag):
    """Access rights of a node."""

    NONE = 0
    READ = 0x01
    WRITE = 0x02


class FieldType(enum.Enum):
    """Fields that a node may expose."""

    ACCESS = enum.auto()
    CAPACITY = enum.auto()
    DATA = enum.auto()
    DEVICE = enum.auto()
    ID = enum.auto()
    NAME = enum.auto()
    OWNER = enum.auto()
    TIME = enum.auto()


@dataclass(frozen=True)
class FieldDescriptor:
    """A field value supplied when a node is created."""

    type: FieldType
    data: Any


class FsError(Exception):
    """Base error of file system operations."""


class FsAccessError(FsError):
    """The node does not allow the requested access."""


class FsValueError(FsError, ValueError):
    """An argument of the operation is not acceptable."""


class FsUnsupportedError(FsError):
    """The field or operation is not supported by the node."""


class FsNode(ABC):
    """A node of a file system tree.

    A node may be used as a context manager that frees it on exit.
    """

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, traceback):
        self.free()
        return False

    @abstractmethod
    def create(self, descriptors):
        """Create a child node described by a sequence of field descriptors."""

    @abstractmethod
    def head(self):
        """Return the first descendant node, or None when there is none."""

    def free(self):
        """Release resources held by this node object."""

    @abstractmethod
    def length(self, field):
        """Return the length of ``field``; raise FsUnsupportedError if absent."""

    @abstractmethod
    def next(self):
        """Move to the next node in the chain; return False at its end."""

    @abstractmethod
    def read(self, field, position, length):
        """Read up to ``length`` bytes of ``field`` starting at ``position``."""

    @abstractmethod
    def remove(self, node):
        """Remove the child ``node`` and free the space it occupied."""

    @abstractmethod
    def write(self, field, position, data):
        """Write ``data`` to ``field`` at ``position``; return the count written."""


class FsHandle(ABC):
    """A mounted file system."""

    @abstractmethod
    def root(self):
        """Return a new node object for the root of the tree."""

    @abstractmethod
    def sync(self):
        """Write modified entries to the underlying storage."""