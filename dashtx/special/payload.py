"""
The TransactionPayload tagged union

The payload bytes of a special transaction do not say what they are. The enclosing transaction's type field
does, so decoding always takes the tag as an argument.
"""
from types import MappingProxyType

from dashtx.core import Serializable, SERIALIZED, get_stream, UnsupportedVersionError, get_logger
from dashtx.special.asset_lock import AssetLockPayload
from dashtx.special.base import SpecialPayload
from dashtx.special.provider_update_service import ProviderUpdateServicePayload
from dashtx.special.quorum_commitment import QuorumCommitmentPayload
from dashtx.tx.tx_types import TransactionType

__all__ = ["TransactionPayload", "PAYLOAD_TYPES", "payload_class"]

logger = get_logger(__name__)

PAYLOAD_TYPES = MappingProxyType({
    cls.TX_TYPE: cls for cls in (ProviderUpdateServicePayload, QuorumCommitmentPayload, AssetLockPayload)
})


def payload_class(tx_type: int | TransactionType) -> type[SpecialPayload]:
    """
    Return the payload class registered for tx_type
    """
    try:
        tag = TransactionType(tx_type)
    except ValueError:
        logger.error(f"Unknown special transaction type {tx_type}")
        raise UnsupportedVersionError(f"Unknown special transaction type {tx_type}") from None

    cls = PAYLOAD_TYPES.get(tag)
    if cls is None:
        logger.error(f"No payload decoder for special transaction type {tag.name}")
        raise UnsupportedVersionError(f"Special transaction type {tag.name} is not supported")
    return cls


class TransactionPayload(Serializable):
    """
    One of the supported special payloads, together with the type that selects it
    """
    __slots__ = ("payload",)

    def __init__(self, payload: SpecialPayload):
        if type(payload) not in PAYLOAD_TYPES.values():
            raise TypeError(f"{type(payload).__name__} is not a transaction payload")
        self.payload = payload

    @property
    def tx_type(self) -> TransactionType:
        return self.payload.TX_TYPE

    @classmethod
    def from_bytes(cls, byte_stream: SERIALIZED, tx_type: int | TransactionType):
        stream = get_stream(byte_stream)
        payload_cls = payload_class(tx_type)
        logger.debug(f"Decoding {payload_cls.__name__} for special transaction type {tx_type}")
        return cls(payload_cls.from_bytes(stream))

    def size(self) -> int:
        return self.payload.size()

    def to_bytes(self) -> bytes:
        return self.payload.to_bytes()

    def to_dict(self) -> dict:
        return {
            "type": self.tx_type.name,
            "payload": self.payload.to_dict()
        }

    def __eq__(self, other) -> bool:
        if not isinstance(other, TransactionPayload):
            return NotImplemented
        return self.payload == other.payload

    def __hash__(self) -> int:
        return hash(self.payload)

    # --- Typed accessors --- #

    def _expect(self, cls):
        if not isinstance(self.payload, cls):
            raise UnsupportedVersionError(f"Payload is {type(self.payload).__name__}, not {cls.__name__}")
        return self.payload

    def to_update_service_payload(self) -> ProviderUpdateServicePayload:
        return self._expect(ProviderUpdateServicePayload)

    def to_quorum_commitment_payload(self) -> QuorumCommitmentPayload:
        return self._expect(QuorumCommitmentPayload)

    def to_asset_lock_payload(self) -> AssetLockPayload:
        return self._expect(AssetLockPayload)
