"""
Provider update service special transaction (DIP3, type 2)

Sent by a masternode operator to update the IP address and port of a registered masternode, and optionally
the operator payout script. The payload is signed with the operator's BLS key; the signed message is the
hash of every field before payload_sig.
"""
import ipaddress as _ip

from dashtx.core import SERIALIZED, get_stream, read_little_int, check_int_width, PROTX, DATA, BLS
from dashtx.crypto.bls import BLSSignature
from dashtx.crypto.hash_types import Txid, InputsHash
from dashtx.data.compact_size import compact_size_len
from dashtx.data.ip_utils import IPLike, normalize, to_display, read_ip16, write_ip16, read_port, write_port
from dashtx.special.base import SignedPayload
from dashtx.tx.tx import read_script, write_script
from dashtx.tx.tx_types import TransactionType

__all__ = ["ProviderUpdateServicePayload"]


class ProviderUpdateServicePayload(SignedPayload):
    """
    =====================================================================================
    |   name            |   data type       |   format                  |   byte size   |
    =====================================================================================
    |   version         |   int             |   little-endian           |   2           |
    |   pro_tx_hash     |   Txid            |   natural byte order      |   32          |
    |   ip_address      |   IPv6Address     |   network byte order      |   16          |
    |   port            |   int             |   big-endian              |   2           |
    |   script_size     |                   |   CompactSize             |   var         |
    |   script_payout   |   bytes           |   script bytes            |   var         |
    |   inputs_hash     |   InputsHash      |   natural byte order      |   32          |
    |   payload_sig     |   BLSSignature    |   raw                     |   96          |
    =====================================================================================
    """
    __slots__ = ("version", "pro_tx_hash", "ip_address", "port", "script_payout", "inputs_hash", "payload_sig")
    TX_TYPE = TransactionType.PROVIDER_UPDATE_SERVICE

    def __init__(self, version: int, pro_tx_hash: Txid, ip_address: IPLike, port: int, script_payout: bytes,
                 inputs_hash: InputsHash, payload_sig: BLSSignature):
        self.version = check_int_width(version, PROTX.VERSION, "version")
        self.pro_tx_hash = pro_tx_hash
        self.ip_address: _ip.IPv6Address = normalize(ip_address)
        self.port = check_int_width(port, PROTX.PORT, "port")
        self.script_payout = script_payout
        self.inputs_hash = inputs_hash
        self.payload_sig = payload_sig

    @property
    def signature(self) -> BLSSignature:
        return self.payload_sig

    def size(self) -> int:
        return (PROTX.VERSION + DATA.HASH + PROTX.IP_ADDRESS + PROTX.PORT +
                compact_size_len(len(self.script_payout)) + len(self.script_payout) + DATA.HASH + BLS.SIGNATURE)

    def base_payload_bytes(self) -> bytes:
        parts = [
            self.version.to_bytes(PROTX.VERSION, "little"),
            self.pro_tx_hash.to_bytes(),
            write_ip16(self.ip_address),
            write_port(self.port),
            write_script(self.script_payout),
            self.inputs_hash.to_bytes()
        ]
        return b''.join(parts)

    @classmethod
    def from_bytes(cls, byte_stream: SERIALIZED):
        stream = get_stream(byte_stream)

        version = read_little_int(stream, PROTX.VERSION, "provider payload version")
        pro_tx_hash = Txid.from_bytes(stream)
        ip_address = read_ip16(stream)
        port = read_port(stream)
        script_payout = read_script(stream, "script_payout")
        inputs_hash = InputsHash.from_bytes(stream)
        payload_sig = BLSSignature.from_bytes(stream)

        return cls(version, pro_tx_hash, ip_address, port, script_payout, inputs_hash, payload_sig)

    def to_dict(self) -> dict:
        return {
            "version": self.version,
            "pro_tx_hash": self.pro_tx_hash.to_hex(),
            "ip_address": to_display(self.ip_address),
            "port": self.port,
            "script_payout": self.script_payout.hex(),
            "inputs_hash": self.inputs_hash.to_hex(),
            "payload_sig": self.payload_sig.to_hex()
        }
