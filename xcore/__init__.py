"""Bit helpers, atomics, bounded containers, a stream interface and file system utilities."""

__version__ = "0.1.0"

__all__ = [
    "array",
    "atomic",
    "bits",
    "byte_queue",
    "fs",
    "fsutils",
    "linked_list",
    "queue",
    "stream",
]