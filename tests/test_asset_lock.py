"""
Tests for the asset lock payload
"""
from secrets import token_bytes

import pytest

from dashtx.core import OversizedLengthError, ReadError
from dashtx.data import write_compact_size
from dashtx.special import AssetLockPayload
from dashtx.tx import TxOutput, TransactionType
from tests.randdash_generators import get_random_asset_lock


def test_round_trip():
    for _ in range(10):
        payload = get_random_asset_lock()
        encoded = payload.to_bytes()
        assert len(encoded) == payload.size()
        assert AssetLockPayload.from_bytes(encoded) == payload, "Failed to reconstruct AssetLockPayload"
    assert AssetLockPayload.TX_TYPE == TransactionType.ASSET_LOCK


def test_layout():
    output = TxOutput(100000, token_bytes(25))
    payload = AssetLockPayload(1, [output])
    assert payload.count == 1
    assert payload.to_bytes() == b'\x01' + b'\x01' + b'\x01' + output.to_bytes()
    assert payload.size() == 3 + 8 + 1 + 25


def test_empty():
    payload = AssetLockPayload(1, [])
    assert payload.to_bytes() == b'\x01\x00\x00'
    assert payload.size() == 3


def test_count_kept_as_read():
    """
    The count byte is independent of the output list and is carried through unchanged
    """
    output = TxOutput(5, b'\x51')
    data = b'\x01' + b'\x07' + b'\x01' + output.to_bytes()
    payload = AssetLockPayload.from_bytes(data)
    assert payload.count == 7
    assert payload.credit_outputs == (output,)
    assert payload.to_bytes() == data


def test_hostile_output_count():
    data = b'\x01\x01' + write_compact_size(0xffffffff) + b'\x00' * 9
    with pytest.raises(OversizedLengthError):
        AssetLockPayload.from_bytes(data)


def test_truncated():
    data = AssetLockPayload(1, [TxOutput(1, b'\x00' * 3)]).to_bytes()
    with pytest.raises(ReadError):
        AssetLockPayload.from_bytes(data[:-1])


def test_count_must_fit_one_byte():
    outputs = [TxOutput(1, b'')] * 256
    with pytest.raises(ValueError):
        AssetLockPayload(1, outputs)
    with pytest.raises(ValueError):
        AssetLockPayload(1, [], count=256)
    with pytest.raises(ValueError):
        AssetLockPayload(256, [])

    payload = AssetLockPayload(1, outputs[:255])
    assert payload.count == 255
    assert len(payload.to_bytes()) == payload.size()
