# xcore

xcore is a set of small building blocks for Python. It has no dependencies outside the standard library.

## Modules

- `xcore.bits` provides bit helpers: `bit`, `bit_field`, `field_value` and `mask`. It also has `count_leading_zeros32` and `reverse_bits32` for 32-bit values. For byte order it has `to_big_endian`, `from_big_endian`, `to_little_endian` and `from_little_endian`, which take widths of 16, 32 or 64 bits. These functions raise `ValueError` for negative shifts or widths, for values out of range, and for a leading-zero count of zero.
- `xcore.atomic` provides two lock-protected types:
  - `AtomicInteger(bits, value=0)` is an unsigned integer that wraps around at its width. It has `load`, `compare_exchange`, `fetch_add`, `fetch_sub`, `fetch_and` and `fetch_or`.
  - `AtomicReference(value=None)` has `load` and an identity-based `compare_exchange`.

  `compare_exchange` returns a pair: the success flag and the value observed before the call.
- `xcore.stream` defines the abstract base class `Stream`, with the methods `clear` and `enqueue`. It also provides the `StreamRequest` dataclass and the `StreamRequestStatus` enum (`COMPLETED`, `CANCELLED`, `FAILED`). A request owns a `buffer`; its `data` property returns the valid part of that buffer, and `complete(status)` calls its callback.
- `xcore.array` provides `Array(capacity)`, an ordered sequence with a fixed maximum size. It has `push_back`, `pop_back`, `insert`, `erase`, `back`, `clear`, `empty`, `full` and `capacity`, and supports indexing and iteration.
- `xcore.queue` provides `Queue(capacity)`, a double-ended queue with a fixed maximum size. It has `push_back`, `push_front`, `pop_back`, `pop_front`, `front`, `back`, `clear`, `empty`, `full` and `capacity`, and supports indexing and iteration.
- `xcore.byte_queue` provides `ByteQueue(capacity)`, a first-in first-out queue of byte values (0 to 255) with a fixed maximum size. It has `push_back`, `pop_front`, `front`, `clear`, `empty`, `full` and `capacity`, and supports indexing and iteration.
- `xcore.linked_list` provides `LinkedList`, a singly linked list whose operations hand out `ListNode` objects as positions. It has `push_back`, `push_front`, `insert`, `find`, `find_if`, `erase`, `erase_if`, `erase_node`, `front`, `clear` and `empty`.
- `xcore.fs` defines the abstract file system interface:
  - the abstract base classes `FsHandle` (`root`, `sync`) and `FsNode` (`create`, `head`, `free`, `length`, `next`, `read`, `remove`, `write`);
  - the types `FieldType`, `Access` and `FieldDescriptor`;
  - the errors `FsError`, `FsAccessError`, `FsValueError` and `FsUnsupportedError`.

  An `FsNode` can be used as a context manager; it frees itself on exit.
- `xcore.fsutils` provides path helpers and tree walking over the `xcore.fs` interface:
  - path helpers: `join_paths`, `get_chunk`, `extract_name`, `extract_base_name` and `strip_name`;
  - tree walking: `follow_next_part`, `follow_path`, `open_node`, `open_base_node` and `find_used_space`.

  Names are limited by `NAME_LENGTH`, which is 64 bytes including the terminator.

Containers raise `IndexError` when an element is read from an empty container or an index is out of range. They raise `OverflowError` when an element is added to a full container.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

### Bit helpers

```python
from xcore.bits import mask, reverse_bits32, to_big_endian

mask(4)                          # 15
reverse_bits32(1)                # 0x80000000
to_big_endian(0x1234, 16)        # 0x3412
```

### Queue

```python
from xcore.queue import Queue

queue = Queue(4)
queue.push_back("a")
queue.push_front("b")
queue.front()       # "b"
queue.pop_back()    # "a"
len(queue)          # 1
```

### Atomic counter

```python
from xcore.atomic import AtomicInteger

counter = AtomicInteger(8, 255)
counter.fetch_add(1)              # 255
counter.load()                    # 0
counter.compare_exchange(0, 7)    # (True, 0)
```

### Path utilities

```python
from xcore.fsutils import join_paths, extract_name, strip_name, get_chunk

join_paths("//home//user//", "pictures//file.txt")  # "/home/user/pictures/file.txt"
join_paths("/home", "/user")                         # "/user"
extract_name("/home/user/file.txt")                  # "file.txt"
extract_name("/home/user/")                          # None
strip_name("/home/user/file.txt")                    # "/home/user"
get_chunk("/home/user")                              # ("/", "home/user")
```

### Navigating a file system

To use the tree functions, subclass `FsHandle` and `FsNode`. Your node's `next` should return `False` at the end of a chain, and `length` should raise `FsUnsupportedError` for a field the node lacks.

With those in place:

- `open_node(handle, "/a/b")` returns the node at that path, or `None` if the path cannot be followed.
- `open_base_node(handle, "/a/b")` stops at the directory that holds `b`.
- `find_used_space(handle)` adds up the `CAPACITY` field of every node under the root. It skips entries named `.` and `..`, and returns 0 if the walk fails.

## What the package does not do

xcore defines interfaces but contains no concrete file system and no concrete stream. `FsHandle`, `FsNode` and `Stream` are abstract. Nothing in the package reads or writes storage, or talks to a device, on its own. Storage and I/O come only from the subclasses you supply.