"""
Nominal 32-byte hash types

All of them display reversed, the way Dash Core prints txids.
"""
from dashtx.core import DATA
from dashtx.crypto.hash_functions import hash256
from dashtx.data.fixed_bytes import FixedBytes

__all__ = ["Hash256", "Txid", "QuorumHash", "QuorumVVecHash", "InputsHash", "CycleHash", "SpecialTxPayloadHash"]


class Hash256(FixedBytes):
    __slots__ = ()
    SIZE = DATA.HASH
    DISPLAY_REVERSED = True

    @classmethod
    def hash(cls, data: bytes):
        """Double SHA256 of data as an instance of cls"""
        return cls(hash256(data))


class Txid(Hash256):
    __slots__ = ()


class QuorumHash(Hash256):
    __slots__ = ()


class QuorumVVecHash(Hash256):
    """Hash of a quorum's verification vector"""
    __slots__ = ()


class InputsHash(Hash256):
    """Hash over the outpoints of a transaction's inputs"""
    __slots__ = ()


class CycleHash(Hash256):
    """Block hash of the DKG cycle an InstantLock was signed in"""
    __slots__ = ()


class SpecialTxPayloadHash(Hash256):
    """Digest of a special payload without its signature"""
    __slots__ = ()
