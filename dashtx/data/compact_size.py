"""
Methods for writing and reading compact size data
"""
from typing import Sequence

from dashtx.core import get_stream, read_little_int, check_declared_length, SERIALIZED, WriteError, \
    NonCanonicalError, DATA, Serializable

__all__ = ["read_compact_size", "write_compact_size", "decode_compact_size", "compact_size_len", "read_vector",
           "write_vector"]

# Smallest value each prefix is allowed to carry
_MIN_VALUES = {
    0xfd: 0xfd,
    0xfe: 0x10000,
    0xff: 0x100000000,
}


def _check_canonical(prefix: int, value: int) -> int:
    if value < _MIN_VALUES[prefix]:
        raise NonCanonicalError(f"Non-canonical CompactSize: {value} encoded with prefix {hex(prefix)}")
    return value


def read_compact_size(byte_stream: SERIALIZED, data_type: str = "compact size") -> int:
    """
    Returns the integer value associated with the compact-size encoding at the head of the data stream.
    Values encoded wider than necessary are rejected.
    """
    stream = get_stream(byte_stream)

    # Prefix
    prefix = read_little_int(stream, 1, f"{data_type} prefix")

    # One byte compact size number
    if prefix <= 0xfc:
        return prefix

    # Match prefix otherwise
    match prefix:
        case 0xfd:
            return _check_canonical(prefix, read_little_int(stream, 2, f"{data_type}: 0xfd"))
        case 0xfe:
            return _check_canonical(prefix, read_little_int(stream, 4, f"{data_type}: 0xfe"))
        case 0xff:
            return _check_canonical(prefix, read_little_int(stream, 8, f"{data_type}: 0xff"))


def decode_compact_size(byte_stream: SERIALIZED) -> tuple[int, int]:
    """
    Return (value, consumed) for the CompactSize at the head of the stream
    """
    stream = get_stream(byte_stream)
    start = stream.tell()
    value = read_compact_size(stream)
    return value, stream.tell() - start


def write_compact_size(num: int) -> bytes:
    """
    Given an integer we return its CompactSize encoding
    """
    # --- Validation --- #
    if num < 0 or num > DATA.MAX_COMPACTSIZE:
        raise WriteError("Given number out of bounds for CompactSize encoding")

    if num <= 0xfc:  # One byte
        return num.to_bytes(1, "little")
    elif num <= 0xffff:  # Two bytes
        return b'\xfd' + num.to_bytes(2, "little")
    elif num <= 0xffffffff:  # Four bytes
        return b'\xfe' + num.to_bytes(4, "little")
    else:  # Eight bytes
        return b'\xff' + num.to_bytes(8, "little")


def compact_size_len(num: int) -> int:
    """
    Number of bytes write_compact_size(num) produces
    """
    if num < 0 or num > DATA.MAX_COMPACTSIZE:
        raise WriteError("Given number out of bounds for CompactSize encoding")
    if num <= 0xfc:
        return 1
    elif num <= 0xffff:
        return 3
    elif num <= 0xffffffff:
        return 5
    return 9


# --- Vectors --- #

def read_vector(byte_stream: SERIALIZED, item_cls: type[Serializable], min_item_size: int = 1,
                max_size: int = DATA.MAX_VEC_SIZE) -> list:
    """
    Read a CompactSize count followed by that many item_cls records.

    The count is checked against max_size using min_item_size before any item is read, so a hostile
    count cannot drive the loop.
    """
    stream = get_stream(byte_stream)
    count = read_compact_size(stream, f"{item_cls.__name__} count")
    check_declared_length(count, min_item_size, max_size, f"{item_cls.__name__} list")
    return [item_cls.from_bytes(stream) for _ in range(count)]


def write_vector(items: Sequence[Serializable]) -> bytes:
    return write_compact_size(len(items)) + b''.join(item.to_bytes() for item in items)
