"""
Quorum commitment special transaction (DIP6)

A QuorumFinalizationCommitment is the result of one LLMQ DKG session. Miners take the best final
commitment for a session and embed it in a block inside a QuorumCommitmentPayload (special tx type 6).
"""
from typing import Sequence

from dashtx.core import SERIALIZED, get_stream, read_little_int, read_signed_little_int, check_int_width, LLMQ, \
    BLS, DATA
from dashtx.crypto.bls import BLSPublicKey, BLSSignature
from dashtx.crypto.hash_types import QuorumHash, QuorumVVecHash
from dashtx.data.bitset import write_bitset_with_count, read_bitset_with_count, bitset_with_count_len
from dashtx.special.base import SpecialPayload
from dashtx.tx.tx_types import TransactionType

__all__ = ["QuorumFinalizationCommitment", "QuorumCommitmentPayload", "has_quorum_index"]


def has_quorum_index(version: int) -> bool:
    """
    Only rotation-enabled commitment versions carry quorum_index
    """
    return version in LLMQ.INDEXED_VERSIONS


class QuorumFinalizationCommitment(SpecialPayload):
    """
    =====================================================================
    |   name                |   format                  |   byte size   |
    =====================================================================
    |   version             |   little-endian           |   2           |
    |   llmq_type           |   little-endian           |   1           |
    |   quorum_hash         |   QuorumHash              |   32          |
    |   quorum_index*       |   signed little-endian    |   2           |
    |   signers_count       |   CompactSize             |   var         |
    |   signers             |   fixed bitset            |   var         |
    |   valid_members_count |   CompactSize             |   var         |
    |   valid_members       |   fixed bitset            |   var         |
    |   quorum_public_key   |   BLSPublicKey            |   48          |
    |   quorum_vvec_hash    |   QuorumVVecHash          |   32          |
    |   quorum_sig          |   BLSSignature            |   96          |
    |   sig                 |   BLSSignature            |   96          |
    =====================================================================
    * only present when version is 2 or 4
    """
    __slots__ = ("version", "llmq_type", "quorum_hash", "quorum_index", "signers", "valid_members",
                 "quorum_public_key", "quorum_vvec_hash", "quorum_sig", "sig")
    FIXED_SIZE = LLMQ.VERSION + LLMQ.TYPE + DATA.HASH + BLS.PUBKEY + DATA.HASH + 2 * BLS.SIGNATURE

    def __init__(self, version: int, llmq_type: int, quorum_hash: QuorumHash, quorum_index: int | None,
                 signers: Sequence[bool], valid_members: Sequence[bool], quorum_public_key: BLSPublicKey,
                 quorum_vvec_hash: QuorumVVecHash, quorum_sig: BLSSignature, sig: BLSSignature):
        if has_quorum_index(version) and quorum_index is None:
            raise ValueError(f"Commitment version {version} requires a quorum_index")
        if not has_quorum_index(version) and quorum_index is not None:
            raise ValueError(f"Commitment version {version} does not carry a quorum_index")

        self.version = check_int_width(version, LLMQ.VERSION, "commitment version")
        self.llmq_type = check_int_width(llmq_type, LLMQ.TYPE, "llmq_type")
        self.quorum_hash = quorum_hash
        self.quorum_index = None if quorum_index is None else \
            check_int_width(quorum_index, LLMQ.INDEX, "quorum_index", signed=True)
        self.signers = tuple(bool(b) for b in signers)
        self.valid_members = tuple(bool(b) for b in valid_members)
        self.quorum_public_key = quorum_public_key
        self.quorum_vvec_hash = quorum_vvec_hash
        self.quorum_sig = quorum_sig
        self.sig = sig

    def size(self) -> int:
        size = self.FIXED_SIZE
        size += bitset_with_count_len(len(self.signers))
        size += bitset_with_count_len(len(self.valid_members))
        if has_quorum_index(self.version):
            size += LLMQ.INDEX
        return size

    @classmethod
    def from_bytes(cls, byte_stream: SERIALIZED):
        stream = get_stream(byte_stream)

        version = read_little_int(stream, LLMQ.VERSION, "commitment version")
        llmq_type = read_little_int(stream, LLMQ.TYPE, "llmq_type")
        quorum_hash = QuorumHash.from_bytes(stream)
        quorum_index = read_signed_little_int(stream, LLMQ.INDEX, "quorum_index") \
            if has_quorum_index(version) else None
        signers = read_bitset_with_count(stream)
        valid_members = read_bitset_with_count(stream)
        quorum_public_key = BLSPublicKey.from_bytes(stream)
        quorum_vvec_hash = QuorumVVecHash.from_bytes(stream)
        quorum_sig = BLSSignature.from_bytes(stream)
        sig = BLSSignature.from_bytes(stream)

        return cls(version, llmq_type, quorum_hash, quorum_index, signers, valid_members, quorum_public_key,
                   quorum_vvec_hash, quorum_sig, sig)

    def _encode(self) -> bytes:
        parts = [
            self.version.to_bytes(LLMQ.VERSION, "little"),
            self.llmq_type.to_bytes(LLMQ.TYPE, "little"),
            self.quorum_hash.to_bytes()
        ]
        if has_quorum_index(self.version):
            parts.append(self.quorum_index.to_bytes(LLMQ.INDEX, "little", signed=True))
        parts.extend([
            write_bitset_with_count(self.signers),
            write_bitset_with_count(self.valid_members),
            self.quorum_public_key.to_bytes(),
            self.quorum_vvec_hash.to_bytes(),
            self.quorum_sig.to_bytes(),
            self.sig.to_bytes()
        ])
        return b''.join(parts)

    def to_dict(self) -> dict:
        commitment_dict = {
            "version": self.version,
            "llmq_type": self.llmq_type,
            "quorum_hash": self.quorum_hash.to_hex(),
        }
        if has_quorum_index(self.version):
            commitment_dict["quorum_index"] = self.quorum_index
        commitment_dict.update({
            "signers_count": len(self.signers),
            "signers": "".join("1" if b else "0" for b in self.signers),
            "valid_members_count": len(self.valid_members),
            "valid_members": "".join("1" if b else "0" for b in self.valid_members),
            "quorum_public_key": self.quorum_public_key.to_hex(),
            "quorum_vvec_hash": self.quorum_vvec_hash.to_hex(),
            "quorum_sig": self.quorum_sig.to_hex(),
            "sig": self.sig.to_hex()
        })
        return commitment_dict


class QuorumCommitmentPayload(SpecialPayload):
    """
    =====================================================================================
    |   name                    |   format                              |   byte size   |
    =====================================================================================
    |   version                 |   little-endian                       |   2           |
    |   height                  |   little-endian                       |   4           |
    |   finalization_commitment |   QuorumFinalizationCommitment        |   var         |
    =====================================================================================
    """
    __slots__ = ("version", "height", "finalization_commitment")
    TX_TYPE = TransactionType.QUORUM_COMMITMENT

    def __init__(self, version: int, height: int, finalization_commitment: QuorumFinalizationCommitment):
        self.version = check_int_width(version, LLMQ.PAYLOAD_VERSION, "payload version")
        self.height = check_int_width(height, LLMQ.HEIGHT, "height")
        self.finalization_commitment = finalization_commitment

    def size(self) -> int:
        return LLMQ.PAYLOAD_VERSION + LLMQ.HEIGHT + self.finalization_commitment.size()

    @classmethod
    def from_bytes(cls, byte_stream: SERIALIZED):
        stream = get_stream(byte_stream)

        version = read_little_int(stream, LLMQ.PAYLOAD_VERSION, "payload version")
        height = read_little_int(stream, LLMQ.HEIGHT, "height")
        finalization_commitment = QuorumFinalizationCommitment.from_bytes(stream)

        return cls(version, height, finalization_commitment)

    def _encode(self) -> bytes:
        parts = [
            self.version.to_bytes(LLMQ.PAYLOAD_VERSION, "little"),
            self.height.to_bytes(LLMQ.HEIGHT, "little"),
            self.finalization_commitment.to_bytes()
        ]
        return b''.join(parts)

    def to_dict(self) -> dict:
        return {
            "version": self.version,
            "height": self.height,
            "commitment": self.finalization_commitment.to_dict()
        }
