"""
A generic fixed-width byte value

FixedBytes is specialised by setting the class attribute SIZE. Each subclass is its own nominal type:
a 32-byte quorum hash never equals a 32-byte txid with the same bytes. Nothing about the width is written
to the wire, the N raw bytes are the whole encoding.
"""
from functools import total_ordering

from dashtx.core import Serializable, SERIALIZED, get_stream, read_stream

__all__ = ["FixedBytes"]


@total_ordering
class FixedBytes(Serializable):
    """
    =============================================================
    |   name    |   data type   |   format          |   size    |
    =============================================================
    |   data    |   bytes       |   raw, no prefix  |   SIZE    |
    =============================================================
    """
    __slots__ = ("_data",)
    SIZE: int = 0
    DISPLAY_REVERSED: bool = False

    def __init__(self, data: bytes | bytearray):
        if not isinstance(data, (bytes, bytearray)):
            raise TypeError(f"{type(self).__name__} expects bytes, received {type(data)}")
        if len(data) != self.SIZE:
            raise ValueError(f"{type(self).__name__} must be {self.SIZE} bytes, received {len(data)}")
        self._data = bytes(data)

    @classmethod
    def zero(cls):
        return cls(b'\x00' * cls.SIZE)

    @classmethod
    def from_hex(cls, hex_string: str):
        """
        Parse display hex. Types with DISPLAY_REVERSED show their bytes back to front.
        """
        data = bytes.fromhex(hex_string)
        return cls(data[::-1] if cls.DISPLAY_REVERSED else data)

    def to_hex(self) -> str:
        return (self._data[::-1] if self.DISPLAY_REVERSED else self._data).hex()

    @classmethod
    def from_bytes(cls, byte_stream: SERIALIZED):
        stream = get_stream(byte_stream)
        return cls(read_stream(stream, cls.SIZE, cls.__name__))

    def to_bytes(self) -> bytes:
        return self._data

    def to_dict(self) -> dict:
        return {"hex": self.to_hex()}

    def __bytes__(self) -> bytes:
        return self._data

    def __len__(self) -> int:
        return self.SIZE

    def __eq__(self, other) -> bool:
        if not isinstance(other, FixedBytes):
            return NotImplemented
        return type(self) is type(other) and self._data == other._data

    def __lt__(self, other) -> bool:
        if not isinstance(other, FixedBytes) or type(self) is not type(other):
            return NotImplemented
        return self._data < other._data

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._data))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.to_hex()})"
