"""
Methods for deserializing byte streams
"""
from io import BytesIO
from typing import Union, Optional, Literal

from .exceptions import ReadError, OversizedLengthError
from .formats import DATA
from .logging import get_logger

__all__ = ["SERIALIZED", "BYTEORDER", "get_stream", "read_stream", "read_little_int", "read_big_int",
           "read_signed_little_int", "check_declared_length", "check_int_width"]

logger = get_logger(__name__)

SERIALIZED = Union[bytes, BytesIO]
BYTEORDER = Literal['big', 'little']


def get_stream(byte_stream: SERIALIZED):
    """Convert bytes or BytesIO to BytesIO stream"""
    if isinstance(byte_stream, (bytes, bytearray)):
        return BytesIO(bytes(byte_stream))
    elif isinstance(byte_stream, BytesIO):
        return byte_stream
    else:
        raise TypeError(f"Expected bytes or BytesIO but received: {type(byte_stream)}")


def read_stream(stream: BytesIO, length: int, data_type: Optional[str] = None) -> bytes:
    """Read exact number of bytes from stream with error checking"""
    data = stream.read(length)

    # Verify data integrity
    if len(data) != length:
        if data_type:
            raise ReadError(f"Error reading stream. Insufficient data. Data type: {data_type}")
        else:
            raise ReadError("Error reading stream. Insufficient data.")

    return data


def _read_int(stream: BytesIO, length: int, byteorder: BYTEORDER, data_type: Optional[str] = None,
              signed: bool = False) -> int:
    """Internal method to read integer from stream"""
    data = read_stream(stream, length, data_type)
    return int.from_bytes(data, byteorder, signed=signed)


def read_little_int(stream: BytesIO, length: int, data_type: Optional[str] = None) -> int:
    """Read little-endian integer from stream"""
    return _read_int(stream, length, "little", data_type)


def read_big_int(stream: BytesIO, length: int, data_type: Optional[str] = None) -> int:
    """Read big-endian integer from stream"""
    return _read_int(stream, length, "big", data_type)


def read_signed_little_int(stream: BytesIO, length: int, data_type: Optional[str] = None) -> int:
    """Read two's complement little-endian integer from stream"""
    return _read_int(stream, length, "little", data_type, signed=True)


def check_declared_length(count: int, item_size: int = 1, max_size: int = DATA.MAX_VEC_SIZE,
                          data_type: Optional[str] = None):
    """
    Reject a wire-declared element count whose payload would exceed max_size bytes.

    Called before anything proportional to the count is read or allocated.
    """
    if count * item_size > max_size:
        label = data_type or "vector"
        logger.error(f"Rejecting declared length {count} for {label}")
        raise OversizedLengthError(f"Declared length {count} for {label} exceeds maximum of {max_size} bytes")


def check_int_width(value: int, length: int, data_type: str, signed: bool = False) -> int:
    """
    Return value if it fits in length bytes, otherwise raise ValueError.
    Used by constructors so that every value they accept can be written.
    """
    if signed:
        low, high = -(1 << (8 * length - 1)), (1 << (8 * length - 1)) - 1
    else:
        low, high = 0, (1 << (8 * length)) - 1
    if not isinstance(value, int) or not low <= value <= high:
        raise ValueError(f"{data_type} must be an integer in [{low}, {high}], received {value!r}")
    return value
