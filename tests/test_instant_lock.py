"""
Tests for InstantLock messages
"""
import pytest

from dashtx.core import ReadError, OversizedLengthError
from dashtx.crypto import Txid, CycleHash, BLSSignature
from dashtx.data import write_compact_size
from dashtx.ephemeral import InstantLock
from dashtx.tx import OutPoint
from tests.randdash_generators import get_random_instant_lock

ISLOCK_TXID = "e17f490ba5856baaf554903e4b08299fd64a9f64650a2c40672c590ae06d444b"
ISLOCK_INPUT_TXID = "1bf428fa3e8be00779c7eb7fe1e1f87a30ae07b5a4ab75662e123da462281001"
ISLOCK_CYCLEHASH = "7c30826123d0f29fe4c4a8895d7ba4eb469b1fafa6ad7b23896a1a591766a536"
ISLOCK_SIGNATURE = (
    "85e12d70ca7118c5034004f93e45384079f46c6c2928b45cfc5d3ad640e70dfd87a9a3069899adfb3b1622daeeead198"
    "09b74354272ccf95290678f55c13728e3c5ee8f8417fcce3dfdca2a7c9c33ec981abdff1ec35a2e4b558c3698f01c1b8"
)


def test_known_islock(islock_bytes):
    islock = InstantLock.from_bytes(islock_bytes)

    assert islock.version == 1
    assert islock.inputs == (OutPoint(Txid.from_hex(ISLOCK_INPUT_TXID), 0),)
    assert islock.txid.to_hex() == ISLOCK_TXID
    assert islock.cyclehash.to_hex() == ISLOCK_CYCLEHASH
    # Signatures are shown in wire order
    assert islock.signature.to_hex() == ISLOCK_SIGNATURE
    assert islock.to_bytes() == islock_bytes


def test_build_islock(islock_bytes):
    islock = InstantLock(
        version=1,
        inputs=[OutPoint(Txid.from_hex(ISLOCK_INPUT_TXID), 0)],
        txid=Txid.from_hex(ISLOCK_TXID),
        cyclehash=CycleHash.from_hex(ISLOCK_CYCLEHASH),
        signature=BLSSignature.from_hex(ISLOCK_SIGNATURE)
    )
    assert islock.to_bytes() == islock_bytes
    assert islock.length == 198


def test_random_round_trip():
    for _ in range(5):
        islock = get_random_instant_lock()
        assert InstantLock.from_bytes(islock.to_bytes()) == islock, "Failed to reconstruct InstantLock"


def test_defaults():
    islock = InstantLock()
    assert islock.to_bytes() == b'\x01' + b'\x00' + b'\x00' * (32 + 32 + 96)


def test_size_limit(islock_bytes):
    with pytest.raises(ReadError):
        InstantLock.from_bytes(islock_bytes, max_size=197)
    assert InstantLock.from_bytes(islock_bytes, max_size=198).to_bytes() == islock_bytes


def test_hostile_input_count():
    data = b'\x01' + write_compact_size(0xffffffff) + b'\x00' * 200
    with pytest.raises(OversizedLengthError):
        InstantLock.from_bytes(data)


def test_version_range():
    with pytest.raises(ValueError):
        InstantLock(version=256)
