"""Path helpers and tree traversal for the abstract file system interface."""

from .fs import FieldType, FsError

NAME_LENGTH = 64
"""Maximum length of an entry name in bytes, terminator included."""

_CAPACITY_SIZE = 8
_RESERVED_NAMES = frozenset({".", ".."})


def _is_reserved(name):
    return name in _RESERVED_NAMES


def _as_int(value):
    if isinstance(value, int):
        return value
    return int.from_bytes(bytes(value), "little")


def _decode_name(value):
    if isinstance(value, str):
        return value.split("\0", 1)[0]
    return bytes(value).split(b"\0", 1)[0].decode("utf-8", "surrogateescape")


def _normalize_part(part):
    """Return ``part`` with a leading slash, single separators and no trailing slash."""
    return "".join("/" + name for name in part.split("/") if name)


def _is_reserved_child(child):
    try:
        length = child.length(FieldType.NAME)
    except FsError:
        return False
    if 2 <= length <= 3:
        return _is_reserved(_decode_name(child.read(FieldType.NAME, 0, NAME_LENGTH)))
    return False


def _node_usage(node):
    total = 0
    try:
        total += _as_int(node.read(FieldType.CAPACITY, 0, _CAPACITY_SIZE))
    except FsError:
        pass

    child = node.head()
    if child is None:
        return total
    try:
        while True:
            if not _is_reserved_child(child):
                total += _node_usage(child)
            if not child.next():
                break
    finally:
        child.free()
    return total


def extract_base_name(path):
    """Return ``path`` without its last component, or None when nothing is left."""
    position = path.rfind("/")
    return path[:position] if position > 0 else None


def extract_name(path):
    """Return the last component of ``path``, or None when it is empty."""
    return path.rsplit("/", 1)[-1] or None


def strip_name(path):
    """Return ``path`` with its last component removed, or None if there is none."""
    name = extract_name(path)
    if name is None:
        return None
    offset = len(path) - len(name)
    if offset > 1:
        offset -= 1
    return path[:offset]


def get_chunk(path):
    """Split the first chunk off ``path``.

    Returns a pair of the chunk and the remaining path. A leading slash forms
    a chunk of its own; names are cut to ``NAME_LENGTH - 1`` characters.
    """
    if not path:
        return "", ""
    if path.startswith("/"):
        return "/", path.lstrip("/")

    end = path.find("/")
    if end == -1:
        end = len(path)
    limit = NAME_LENGTH - 1
    if end > limit - 1:
        return path[:limit], path[limit:]
    return path[:end], path[end:].lstrip("/")


def join_paths(prefix, suffix):
    """Join two paths into a normalized absolute path.

    An absolute ``suffix`` replaces the prefix entirely.
    """
    result = ""
    if not suffix.startswith("/") and prefix:
        result += _normalize_part(prefix)
    if suffix:
        result += _normalize_part(suffix)
    return result or "/"


def find_used_space(handle, node=None):
    """Return the capacity used by ``node`` and its descendants.

    The root of ``handle`` is used when ``node`` is None. Zero is returned
    when the tree cannot be walked.
    """
    parent = node if node is not None else handle.root()
    if parent is None:
        return 0
    try:
        return _node_usage(parent)
    except FsError:
        return 0
    finally:
        if node is None:
            parent.free()


def follow_next_part(handle, node, path, leaf):
    """Follow one chunk of ``path`` starting from ``node``.

    Returns a pair of the new current node and the remaining path. When the
    chunk cannot be followed the remaining path is None, the node passed in
    has been freed and None is returned in its place.
    """
    chunk, rest = get_chunk(path)

    if not chunk or _is_reserved(chunk):
        if node is not None:
            node.free()
        return None, None

    if node is None:
        if chunk == "/":
            return handle.root(), rest
        return None, None

    if not leaf and not rest:
        return node, rest

    child = node.head()
    node.free()

    while child is not None:
        try:
            name = _decode_name(child.read(FieldType.NAME, 0, NAME_LENGTH))
        except FsError:
            name = None
        if name == chunk:
            return child, rest

        try:
            advanced = child.next()
        except FsError:
            advanced = False
        if not advanced:
            child.free()
            child = None

    return None, None


def follow_path(handle, path, leaf):
    """Follow an absolute ``path`` and return the node reached, or None."""
    node = None
    while path:
        node, path = follow_next_part(handle, node, path, leaf)
        if path is None:
            return None
    return node


def open_base_node(handle, path):
    """Open the directory that holds the last component of ``path``."""
    return follow_path(handle, path, False)


def open_node(handle, path):
    """Open the node at ``path``, or return None when it does not exist."""
    return follow_path(handle, path, True)