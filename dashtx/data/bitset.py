"""
Methods for packing boolean vectors into fixed-size bitsets

Bit p of the vector is stored in byte p // 8 at bit position p % 8 (least significant bit first), the same
layout Dash Core uses for the signers and valid_members fields of a quorum commitment.
Set padding bits are rejected on read.
"""
from io import BytesIO
from typing import Sequence

from dashtx.core import read_stream, check_declared_length, DATA, WriteError, NonCanonicalError
from dashtx.data.compact_size import read_compact_size, write_compact_size, compact_size_len

__all__ = ["fixed_bitset_len", "write_fixed_bitset", "read_fixed_bitset", "write_bitset_with_count",
           "read_bitset_with_count", "bitset_with_count_len"]


def fixed_bitset_len(size: int) -> int:
    """
    Number of bytes needed to hold size bits
    """
    return (size + 7) // 8


def write_fixed_bitset(bits: Sequence[bool], size: int | None = None) -> bytes:
    """
    Pack the first size booleans into ceil(size/8) bytes. Unused bits in the last byte are zero.
    """
    size = len(bits) if size is None else size
    if size > len(bits):
        raise WriteError(f"Bitset size {size} exceeds the {len(bits)} bits given")

    packed = bytearray(fixed_bitset_len(size))
    for p in range(size):
        if bits[p]:
            packed[p // 8] |= 1 << (p % 8)
    return bytes(packed)


def read_fixed_bitset(stream: BytesIO, size: int, max_size: int = DATA.MAX_VEC_SIZE) -> list[bool]:
    """
    Read ceil(size/8) bytes and unpack them into exactly size booleans.
    Padding bits in the last byte must be zero, so that the bitset re-encodes to the bytes read.
    """
    byte_len = fixed_bitset_len(size)
    check_declared_length(byte_len, max_size=max_size, data_type="bitset")
    packed = read_stream(stream, byte_len, "fixed bitset")
    if size % 8 and packed[-1] & ~((1 << (size % 8)) - 1):
        raise NonCanonicalError(f"Out-of-range bits set in {size} bit bitset")
    return [bool(packed[p // 8] >> (p % 8) & 1) for p in range(size)]


# --- Count-prefixed bitsets --- #

def write_bitset_with_count(bits: Sequence[bool]) -> bytes:
    """
    CompactSize element count followed by the packed bits
    """
    return write_compact_size(len(bits)) + write_fixed_bitset(bits)


def read_bitset_with_count(stream: BytesIO, max_size: int = DATA.MAX_VEC_SIZE) -> list[bool]:
    count = read_compact_size(stream, "bitset count")
    return read_fixed_bitset(stream, count, max_size)


def bitset_with_count_len(size: int) -> int:
    return compact_size_len(size) + fixed_bitset_len(size)
