"""
The custom exceptions used throughout dashtx
"""
__all__ = ["StreamError", "ReadError", "WriteError", "OversizedLengthError", "NonCanonicalError",
           "DataEncodingError", "UnsupportedVersionError", "SizeMismatchError", "PayloadError"]


class StreamError(Exception):
    """
    Catchall for stream errors
    """
    pass


class ReadError(StreamError):
    """
    For when trying to read data of length n from the stream and receiving data of length < n
    """
    pass


class WriteError(StreamError):
    """
    For when writing data that would be otherwise out of bounds
    """
    pass


class OversizedLengthError(StreamError):
    """
    For when a length prefix declares more data than the configured maximum
    """
    pass


class NonCanonicalError(StreamError):
    """
    For encodings with more than one byte form of the same value:
    CompactSize values not written in their minimal width, or bitsets with padding bits set
    """
    pass


class DataEncodingError(Exception):
    """
    For use in encoding/decoding algorithms
    """
    pass


class UnsupportedVersionError(DataEncodingError):
    """
    For a special transaction type or version with no known decoder
    """
    pass


class SizeMismatchError(DataEncodingError):
    """
    For when a payload's size() disagrees with the number of bytes it encodes to
    """
    pass


class PayloadError(DataEncodingError):
    """
    For special payload framing errors inside a transaction
    """
    pass
