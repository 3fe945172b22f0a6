"""
The Dash consensus formats
"""
from typing import Final

__all__ = ["DATA", "TX", "BLS", "LLMQ", "PROTX", "ISLOCK"]


class DATA:
    """
    Constants used in data manipulation
    """
    MAX_COMPACTSIZE: Final[int] = 0xffffffffffffffff
    MAX_VEC_SIZE: Final[int] = 4_000_000  # Upper bound on any wire-declared length, in bytes
    HASH: Final[int] = 32


class TX:
    """
    Transaction byte sizes
    """
    TXID: Final[int] = 32
    VOUT: Final[int] = 4
    OUTPOINT: Final[int] = 36
    SEQUENCE: Final[int] = 4
    AMOUNT: Final[int] = 8
    VERSION: Final[int] = 2
    TYPE: Final[int] = 2
    LOCKTIME: Final[int] = 4
    MIN_OUTPUT: Final[int] = 9  # amount + empty script
    MIN_INPUT: Final[int] = 41  # outpoint + empty script + sequence
    SPECIAL_VERSION: Final[int] = 3  # First tx version that carries a special payload
    DEFAULT_VERSION: Final[int] = 3


class BLS:
    """
    Byte sizes of the BLS elements used by Dash Core
    """
    PUBKEY: Final[int] = 48
    SIGNATURE: Final[int] = 96


class LLMQ:
    """
    Constants for quorum finalization commitments
    """
    VERSION: Final[int] = 2
    TYPE: Final[int] = 1
    INDEX: Final[int] = 2
    INDEXED_VERSIONS: Final[tuple] = (2, 4)  # Versions that carry a quorum_index
    PAYLOAD_VERSION: Final[int] = 2
    HEIGHT: Final[int] = 4


class PROTX:
    """
    Provider transaction field sizes
    """
    VERSION: Final[int] = 2
    IP_ADDRESS: Final[int] = 16
    PORT: Final[int] = 2


class ISLOCK:
    """
    InstantLock field sizes
    """
    VERSION: Final[int] = 1
    CYCLEHASH: Final[int] = 32
