"""
Base classes for Dash special transaction payloads

SpecialPayload:
    -Ties a payload class to the TransactionType that selects it
    -Checks on every encode that size() matches the bytes written

SignedPayload:
    -For payloads ending in a signature over the rest of the payload
    -base_payload_hash() is the message the signer commits to
"""
from abc import abstractmethod

from dashtx.core import Serializable, SizeMismatchError, get_logger
from dashtx.crypto.bls import BLSSignature
from dashtx.crypto.hash_types import SpecialTxPayloadHash
from dashtx.tx.tx_types import TransactionType

__all__ = ["SpecialPayload", "SignedPayload"]

logger = get_logger(__name__)


class SpecialPayload(Serializable):
    __slots__ = ()
    TX_TYPE: TransactionType

    @abstractmethod
    def size(self) -> int:
        """Exact number of bytes to_bytes() returns, computed from the fields alone"""
        raise NotImplementedError(f"{self.__class__.__name__} must implement size()")

    @abstractmethod
    def _encode(self) -> bytes:
        raise NotImplementedError(f"{self.__class__.__name__} must implement _encode()")

    def to_bytes(self) -> bytes:
        data = self._encode()
        expected = self.size()
        if len(data) != expected:
            logger.error(f"{self.__class__.__name__} size() returned {expected} but encoded {len(data)} bytes")
            raise SizeMismatchError(f"{self.__class__.__name__}: size() = {expected}, encoded {len(data)} bytes")
        return data


class SignedPayload(SpecialPayload):
    """
    Full encoding = base payload bytes || signature
    """
    __slots__ = ()

    @property
    @abstractmethod
    def signature(self) -> BLSSignature:
        raise NotImplementedError(f"{self.__class__.__name__} must implement signature")

    @abstractmethod
    def base_payload_bytes(self) -> bytes:
        """Every field except the trailing signature, in wire order"""
        raise NotImplementedError(f"{self.__class__.__name__} must implement base_payload_bytes()")

    def base_payload_hash(self) -> SpecialTxPayloadHash:
        return SpecialTxPayloadHash.hash(self.base_payload_bytes())

    def _encode(self) -> bytes:
        return self.base_payload_bytes() + self.signature.to_bytes()
