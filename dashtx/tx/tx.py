"""
The input and output records of a Dash transaction
"""
from dashtx.core import Serializable, SERIALIZED, get_stream, read_little_int, read_stream, check_declared_length, \
    check_int_width, TX, DATA
from dashtx.crypto.hash_types import Txid
from dashtx.data.compact_size import read_compact_size, write_compact_size

__all__ = ["OutPoint", "TxInput", "TxOutput", "read_script", "write_script"]


def read_script(stream, data_type: str = "script", max_size: int = DATA.MAX_VEC_SIZE) -> bytes:
    """
    CompactSize length followed by that many script bytes
    """
    script_size = read_compact_size(stream, f"{data_type} size")
    check_declared_length(script_size, max_size=max_size, data_type=data_type)
    return read_stream(stream, script_size, data_type)


def write_script(script: bytes) -> bytes:
    return write_compact_size(len(script)) + script


class OutPoint(Serializable):
    """
    =============================================================================
    |   name            |   data type   |   format              |   byte size   |
    =============================================================================
    |   txid            |   Txid        |   natural byte order  |   32          |
    |   vout            |   int         |   little-endian       |   4           |
    =============================================================================
    """
    __slots__ = ("txid", "vout")

    def __init__(self, txid: Txid | bytes, vout: int):
        self.txid = txid if isinstance(txid, Txid) else Txid(txid)
        self.vout = check_int_width(vout, TX.VOUT, "vout")

    @classmethod
    def from_bytes(cls, byte_stream: SERIALIZED):
        stream = get_stream(byte_stream)
        txid = Txid.from_bytes(stream)
        vout = read_little_int(stream, TX.VOUT, "vout")
        return cls(txid, vout)

    def to_bytes(self) -> bytes:
        return self.txid.to_bytes() + self.vout.to_bytes(TX.VOUT, "little")

    def to_dict(self) -> dict:
        return {
            "txid": self.txid.to_hex(),
            "vout": self.vout
        }


class TxInput(Serializable):
    """
    =============================================================================
    |   name            |   data type   |   format              |   byte size   |
    =============================================================================
    |   outpoint        |   OutPoint    |   txid || vout        |   36          |
    |   scriptsig_size  |               |   compactSize         |   var         |
    |   scriptsig       |   bytes       |   script bytes        |   var         |
    |   sequence        |   int         |   little-endian       |   4           |
    =============================================================================
    """
    __slots__ = ("outpoint", "scriptsig", "sequence")

    def __init__(self, outpoint: OutPoint, scriptsig: bytes = b'', sequence: int = 0xffffffff):
        self.outpoint = outpoint
        self.scriptsig = scriptsig
        self.sequence = check_int_width(sequence, TX.SEQUENCE, "sequence")

    @classmethod
    def from_bytes(cls, byte_stream: SERIALIZED):
        stream = get_stream(byte_stream)

        outpoint = OutPoint.from_bytes(stream)
        scriptsig = read_script(stream, "scriptsig")
        sequence = read_little_int(stream, TX.SEQUENCE, "sequence")

        return cls(outpoint, scriptsig, sequence)

    def to_bytes(self) -> bytes:
        """
        Serialize input
        outpoint || scriptsig_size || scriptsig || sequence
        """
        parts = [
            self.outpoint.to_bytes(),
            write_script(self.scriptsig),
            self.sequence.to_bytes(TX.SEQUENCE, "little")
        ]
        return b''.join(parts)

    def to_dict(self) -> dict:
        return {
            "outpoint": self.outpoint.to_dict(),
            "scriptsig": self.scriptsig.hex(),
            "sequence": self.sequence
        }


class TxOutput(Serializable):
    """
    -----------------------------------------------------------------
    |   Field               |   Byte Size   |   Format              |
    -----------------------------------------------------------------
    |   Amount              |   8           |   little-endian       |
    |   scriptpubkey_size   |   var         |   CompactSize         |
    |   scriptpubkey        |   var         |   Script              |
    -----------------------------------------------------------------
    """
    __slots__ = ("amount", "scriptpubkey")

    def __init__(self, amount: int, scriptpubkey: bytes):
        self.amount = check_int_width(amount, TX.AMOUNT, "amount")
        self.scriptpubkey = scriptpubkey

    @classmethod
    def from_bytes(cls, byte_stream: SERIALIZED):
        stream = get_stream(byte_stream)

        amount = read_little_int(stream, TX.AMOUNT, "amount")
        scriptpubkey = read_script(stream, "scriptpubkey")

        return cls(amount, scriptpubkey)

    def to_bytes(self) -> bytes:
        """
        amount || scriptpubkey_size || scriptpubkey
        """
        return self.amount.to_bytes(TX.AMOUNT, "little") + write_script(self.scriptpubkey)

    def to_dict(self) -> dict:
        return {
            "amount": self.amount,
            "scriptpubkey": self.scriptpubkey.hex()
        }
