"""
Asset lock special transaction (type 8)

Moves funds into the asset lock credit pool. The credit outputs describe where the locked amount is credited.
"""
from typing import Sequence

from dashtx.core import SERIALIZED, get_stream, read_little_int, check_int_width, TX
from dashtx.data.compact_size import read_vector, write_vector, compact_size_len
from dashtx.special.base import SpecialPayload
from dashtx.tx.tx import TxOutput
from dashtx.tx.tx_types import TransactionType

__all__ = ["AssetLockPayload"]


class AssetLockPayload(SpecialPayload):
    """
    -----------------------------------------------------------------
    |   Field               |   Byte Size   |   Format              |
    -----------------------------------------------------------------
    |   version             |   1           |   little-endian       |
    |   count               |   1           |   little-endian       |
    |   output_num          |   var         |   CompactSize         |
    |   credit_outputs      |   var         |   TxOutput            |
    -----------------------------------------------------------------
    """
    __slots__ = ("version", "count", "credit_outputs")
    TX_TYPE = TransactionType.ASSET_LOCK
    VERSION_BYTES = 1
    COUNT_BYTES = 1

    def __init__(self, version: int, credit_outputs: Sequence[TxOutput], count: int | None = None):
        self.version = check_int_width(version, self.VERSION_BYTES, "version")
        self.credit_outputs = tuple(credit_outputs)
        # The wire carries count independently of the list prefix; it is kept as read
        count = len(self.credit_outputs) if count is None else count
        self.count = check_int_width(count, self.COUNT_BYTES, "count")

    def size(self) -> int:
        outputs_len = sum(o.length for o in self.credit_outputs)
        return self.VERSION_BYTES + self.COUNT_BYTES + compact_size_len(len(self.credit_outputs)) + outputs_len

    @classmethod
    def from_bytes(cls, byte_stream: SERIALIZED):
        stream = get_stream(byte_stream)

        version = read_little_int(stream, cls.VERSION_BYTES, "asset lock version")
        count = read_little_int(stream, cls.COUNT_BYTES, "asset lock count")
        credit_outputs = read_vector(stream, TxOutput, TX.MIN_OUTPUT)

        return cls(version, credit_outputs, count)

    def _encode(self) -> bytes:
        parts = [
            self.version.to_bytes(self.VERSION_BYTES, "little"),
            self.count.to_bytes(self.COUNT_BYTES, "little"),
            write_vector(self.credit_outputs)
        ]
        return b''.join(parts)

    def to_dict(self) -> dict:
        return {
            "version": self.version,
            "count": self.count,
            "credit_outputs": [o.to_dict() for o in self.credit_outputs]
        }
