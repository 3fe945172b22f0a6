"""
InstantLock (islock) messages

An InstantLock is the LLMQ-signed lock on a set of outpoints, relayed on its own rather than in a block.
"""
from typing import Sequence

from dashtx.core import Serializable, SERIALIZED, get_stream, read_little_int, check_int_width, ReadError, ISLOCK, \
    TX, DATA
from dashtx.crypto.bls import BLSSignature
from dashtx.crypto.hash_types import Txid, CycleHash
from dashtx.data.compact_size import read_vector, write_vector
from dashtx.tx.tx import OutPoint

__all__ = ["InstantLock"]


class InstantLock(Serializable):
    """
    =============================================================================
    |   name            |   data type       |   format          |   byte size   |
    =============================================================================
    |   version         |   int             |   little-endian   |   1           |
    |   input_count     |                   |   CompactSize     |   var         |
    |   inputs          |   OutPoint        |   txid || vout    |   36 each     |
    |   txid            |   Txid            |   raw             |   32          |
    |   cyclehash       |   CycleHash       |   raw             |   32          |
    |   signature       |   BLSSignature    |   raw             |   96          |
    =============================================================================
    """
    __slots__ = ("version", "inputs", "txid", "cyclehash", "signature")

    def __init__(self, version: int = ISLOCK.VERSION, inputs: Sequence[OutPoint] = (), txid: Txid = None,
                 cyclehash: CycleHash = None, signature: BLSSignature = None):
        self.version = check_int_width(version, ISLOCK.VERSION, "islock version")
        self.inputs = tuple(inputs)
        self.txid = txid or Txid.zero()
        self.cyclehash = cyclehash or CycleHash.zero()
        self.signature = signature or BLSSignature.zero()

    @classmethod
    def from_bytes(cls, byte_stream: SERIALIZED, max_size: int = DATA.MAX_VEC_SIZE):
        """
        The whole message is bounded by max_size, not just the outpoint list
        """
        stream = get_stream(byte_stream)
        start = stream.tell()

        version = read_little_int(stream, ISLOCK.VERSION, "islock version")
        inputs = read_vector(stream, OutPoint, TX.OUTPOINT, max_size)
        txid = Txid.from_bytes(stream)
        cyclehash = CycleHash.from_bytes(stream)
        signature = BLSSignature.from_bytes(stream)

        if stream.tell() - start > max_size:
            raise ReadError(f"InstantLock exceeds {max_size} bytes")

        return cls(version, inputs, txid, cyclehash, signature)

    def to_bytes(self) -> bytes:
        parts = [
            self.version.to_bytes(ISLOCK.VERSION, "little"),
            write_vector(self.inputs),
            self.txid.to_bytes(),
            self.cyclehash.to_bytes(),
            self.signature.to_bytes()
        ]
        return b''.join(parts)

    def to_dict(self) -> dict:
        return {
            "version": self.version,
            "inputs": [i.to_dict() for i in self.inputs],
            "txid": self.txid.to_hex(),
            "cyclehash": self.cyclehash.to_hex(),
            "signature": self.signature.to_hex()
        }
