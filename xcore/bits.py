"""Bit manipulation helpers and byte order conversions."""

_BYTE_COUNTS = {16: 2, 32: 4, 64: 8}
_WORD_LIMIT = 1 << 32


def bit(shift):
    """Return an integer with only the bit at ``shift`` set."""
    if shift < 0:
        raise ValueError(f"negative shift: {shift}")
    return 1 << shift


def bit_field(value, shift):
    """Return ``value`` moved to a field starting at bit ``shift``."""
    if shift < 0:
        raise ValueError(f"negative shift: {shift}")
    return value << shift


def field_value(reg, mask, shift):
    """Extract the field selected by ``mask`` from ``reg`` and shift it down."""
    if shift < 0:
        raise ValueError(f"negative shift: {shift}")
    return (reg & mask) >> shift


def mask(width):
    """Return a mask with the ``width`` lowest bits set."""
    if width < 0:
        raise ValueError(f"negative width: {width}")
    return (1 << width) - 1


def _check_word(value):
    if not 0 <= value < _WORD_LIMIT:
        raise ValueError(f"value does not fit in 32 bits: {value}")


def count_leading_zeros32(value):
    """Count zero bits above the highest set bit of a 32-bit value."""
    _check_word(value)
    if value == 0:
        raise ValueError("leading zero count of zero is undefined")
    return 32 - value.bit_length()


def reverse_bits32(value):
    """Reverse the order of bits in a 32-bit value."""
    _check_word(value)
    return int(format(value, "032b")[::-1], 2)


def _byte_count(value, width):
    try:
        count = _BYTE_COUNTS[width]
    except KeyError:
        raise ValueError(f"unsupported width: {width}") from None
    if not 0 <= value < 1 << width:
        raise ValueError(f"value does not fit in {width} bits: {value}")
    return count


def to_big_endian(value, width):
    """Convert a host (little-endian) value of ``width`` bits to big-endian."""
    count = _byte_count(value, width)
    return int.from_bytes(value.to_bytes(count, "little"), "big")


def from_big_endian(value, width):
    """Convert a big-endian value of ``width`` bits to host order."""
    return to_big_endian(value, width)


def to_little_endian(value, width):
    """Convert a host value of ``width`` bits to little-endian."""
    _byte_count(value, width)
    return value


def from_little_endian(value, width):
    """Convert a little-endian value of ``width`` bits to host order."""
    _byte_count(value, width)
    return value