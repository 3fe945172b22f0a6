"""
The Dash transaction envelope

Only as much of the envelope as special payloads need: legacy inputs and outputs, the version/type split of
the 4-byte version field, lock time and the extra payload.
"""
from dashtx.core import Serializable, SERIALIZED, get_stream, read_little_int, read_stream, check_declared_length, \
    check_int_width, PayloadError, get_logger, TX
from dashtx.crypto.hash_types import Txid, InputsHash
from dashtx.data.compact_size import read_compact_size, write_compact_size, read_vector, write_vector
from dashtx.special.payload import TransactionPayload
from dashtx.tx.tx import TxInput, TxOutput
from dashtx.tx.tx_types import TransactionType

__all__ = ["Transaction", "carries_payload"]

logger = get_logger(__name__)

# --- CACHE KEYS --- #
TXID_KEY = "txid"
INPUTS_HASH_KEY = "inputs_hash"


def carries_payload(version: int, tx_type: int) -> bool:
    """
    A transaction has an extra payload iff it is version 3+ and not a classic transaction
    """
    return version >= TX.SPECIAL_VERSION and tx_type != TransactionType.CLASSIC


class Transaction(Serializable):
    """
    Transaction
    -------------------------------------------------------------
    |   Field           |   Byte Size   |   Format              |
    -------------------------------------------------------------
    |   Version         |   2           |   little-endian       |
    |   Type            |   2           |   little-endian       |
    |   input_count     |   var         |   CompactSize         |
    |   inputs          |   var         |   TxInput             |
    |   output_count    |   var         |   CompactSize         |
    |   outputs         |   var         |   TxOutput            |
    |   locktime        |   4           |   little-endian       |
    |   payload_size*   |   var         |   CompactSize         |
    |   payload*        |   var         |   TransactionPayload  |
    -------------------------------------------------------------
    * only when version >= 3 and type != 0

    The fields are read-only since txid and hash_inputs() are cached. The inputs, outputs and payload it
    holds are treated as values and must not be modified once the transaction is built.
    """
    __slots__ = ("_version", "_inputs", "_outputs", "_lock_time", "_special_transaction_payload", "_cache")

    def __init__(self, inputs: list[TxInput] = None, outputs: list[TxOutput] = None, lock_time: int = 0,
                 version: int = TX.DEFAULT_VERSION, special_transaction_payload: TransactionPayload = None):
        check_int_width(version, TX.VERSION, "version")
        if special_transaction_payload is not None and version < TX.SPECIAL_VERSION:
            raise ValueError(f"Version {version} transactions cannot carry a special payload")
        self._inputs = tuple(inputs or ())
        self._outputs = tuple(outputs or ())
        self._lock_time = check_int_width(lock_time, TX.LOCKTIME, "locktime")
        self._version = version
        self._special_transaction_payload = special_transaction_payload
        self._cache = {}

    # --- Read-only fields --- #

    @property
    def version(self) -> int:
        return self._version

    @property
    def inputs(self) -> tuple[TxInput, ...]:
        return self._inputs

    @property
    def outputs(self) -> tuple[TxOutput, ...]:
        return self._outputs

    @property
    def lock_time(self) -> int:
        return self._lock_time

    @property
    def special_transaction_payload(self) -> TransactionPayload | None:
        return self._special_transaction_payload

    @property
    def tx_type(self) -> TransactionType:
        if self.special_transaction_payload is None:
            return TransactionType.CLASSIC
        return self.special_transaction_payload.tx_type

    @property
    def txid(self) -> Txid:
        """
        Return cached txid if it exists. Otherwise, return new txid
        """
        if TXID_KEY not in self._cache:
            self._cache[TXID_KEY] = Txid.hash(self.to_bytes())
        return self._cache[TXID_KEY]

    def hash_inputs(self) -> InputsHash:
        """
        Double SHA256 over the concatenated input outpoints.
        Provider payloads commit to this value so they cannot be replayed in another transaction.
        """
        if INPUTS_HASH_KEY not in self._cache:
            preimage = b''.join(i.outpoint.to_bytes() for i in self.inputs)
            self._cache[INPUTS_HASH_KEY] = InputsHash.hash(preimage)
        return self._cache[INPUTS_HASH_KEY]

    @classmethod
    def from_bytes(cls, byte_stream: SERIALIZED):
        stream = get_stream(byte_stream)

        # Version and type share the 4-byte version field
        version = read_little_int(stream, TX.VERSION, "version")
        tx_type = read_little_int(stream, TX.TYPE, "type")

        inputs = read_vector(stream, TxInput, TX.MIN_INPUT)
        outputs = read_vector(stream, TxOutput, TX.MIN_OUTPUT)
        lock_time = read_little_int(stream, TX.LOCKTIME, "locktime")

        payload = None
        if carries_payload(version, tx_type):
            payload_size = read_compact_size(stream, "payload size")
            check_declared_length(payload_size, data_type="special payload")
            payload_bytes = read_stream(stream, payload_size, "special payload")
            logger.debug(f"Transaction type {tx_type} carries a {payload_size} byte payload")
            payload = cls._decode_payload(payload_bytes, tx_type)
        elif tx_type != TransactionType.CLASSIC:
            raise PayloadError(f"Version {version} transaction declares special type {tx_type}")

        return cls(inputs, outputs, lock_time, version, payload)

    @staticmethod
    def _decode_payload(payload_bytes: bytes, tx_type: int) -> TransactionPayload:
        payload_stream = get_stream(payload_bytes)
        payload = TransactionPayload.from_bytes(payload_stream, tx_type)
        trailing = len(payload_bytes) - payload_stream.tell()
        if trailing:
            raise PayloadError(f"{trailing} trailing bytes after {type(payload.payload).__name__}")
        return payload

    def to_bytes(self) -> bytes:
        """
        Serialize the tx
        """
        parts = [
            self.version.to_bytes(TX.VERSION, "little"),
            self.tx_type.to_bytes(TX.TYPE, "little"),
            write_vector(self.inputs),
            write_vector(self.outputs),
            self.lock_time.to_bytes(TX.LOCKTIME, "little")
        ]
        if self.special_transaction_payload is not None:
            parts.append(write_compact_size(self.special_transaction_payload.size()))
            parts.append(self.special_transaction_payload.to_bytes())
        return b''.join(parts)

    def to_dict(self) -> dict:
        tx_dict = {
            "txid": self.txid.to_hex(),
            "version": self.version,
            "type": self.tx_type.name,
            "inputs": [i.to_dict() for i in self.inputs],
            "outputs": [o.to_dict() for o in self.outputs],
            "locktime": self.lock_time
        }
        if self.special_transaction_payload is not None:
            tx_dict["payload"] = self.special_transaction_payload.to_dict()
        return tx_dict
