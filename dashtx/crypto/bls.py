"""
BLS elements

Fixed size wrappers around the 48 byte public keys and 96 byte signatures of the BLS scheme used by Dash Core.
No curve arithmetic happens here; the bytes are carried as-is.
"""
from dashtx.core import BLS
from dashtx.data.fixed_bytes import FixedBytes

__all__ = ["BLSPublicKey", "BLSSignature"]


class BLSPublicKey(FixedBytes):
    __slots__ = ()
    SIZE = BLS.PUBKEY


class BLSSignature(FixedBytes):
    __slots__ = ()
    SIZE = BLS.SIGNATURE
