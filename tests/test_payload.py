"""
Tests for TransactionPayload dispatch
"""
import pytest

from dashtx.core import UnsupportedVersionError, ReadError
from dashtx.special import TransactionPayload, PAYLOAD_TYPES, payload_class, ProviderUpdateServicePayload, \
    QuorumCommitmentPayload, AssetLockPayload
from dashtx.tx import TransactionType
from tests.randdash_generators import get_random_update_service, get_random_commitment_payload, \
    get_random_asset_lock


@pytest.mark.parametrize("generator, tx_type", [
    (get_random_update_service, TransactionType.PROVIDER_UPDATE_SERVICE),
    (get_random_commitment_payload, TransactionType.QUORUM_COMMITMENT),
    (get_random_asset_lock, TransactionType.ASSET_LOCK),
])
def test_dispatch_round_trip(generator, tx_type):
    inner = generator()
    payload = TransactionPayload(inner)
    assert payload.tx_type == tx_type
    assert payload.size() == len(payload.to_bytes())

    recovered = TransactionPayload.from_bytes(payload.to_bytes(), int(tx_type))
    assert recovered == payload
    assert type(recovered.payload) is type(inner)


def test_registry():
    assert set(PAYLOAD_TYPES) == {2, 6, 8}
    assert payload_class(2) is ProviderUpdateServicePayload
    assert payload_class(TransactionType.QUORUM_COMMITMENT) is QuorumCommitmentPayload
    assert payload_class(8) is AssetLockPayload


@pytest.mark.parametrize("tx_type", [99, 0x10000, -1])
def test_unknown_type(tx_type):
    with pytest.raises(UnsupportedVersionError):
        TransactionPayload.from_bytes(b'\x00' * 200, tx_type)


@pytest.mark.parametrize("tx_type", [
    TransactionType.CLASSIC, TransactionType.PROVIDER_REGISTRATION, TransactionType.COINBASE,
    TransactionType.ASSET_UNLOCK
])
def test_known_but_unsupported_type(tx_type):
    with pytest.raises(UnsupportedVersionError):
        TransactionPayload.from_bytes(b'\x00' * 200, tx_type)


def test_tag_selects_decoder():
    """
    The same bytes decode differently depending on the tag supplied
    """
    data = get_random_asset_lock().to_bytes()
    assert isinstance(TransactionPayload.from_bytes(data, 8).payload, AssetLockPayload)
    with pytest.raises(ReadError):
        TransactionPayload.from_bytes(data[:20], 2)


def test_accessors():
    service = TransactionPayload(get_random_update_service())
    assert service.to_update_service_payload() is service.payload
    with pytest.raises(UnsupportedVersionError):
        service.to_quorum_commitment_payload()
    with pytest.raises(UnsupportedVersionError):
        service.to_asset_lock_payload()

    lock = TransactionPayload(get_random_asset_lock())
    assert lock.to_asset_lock_payload() is lock.payload
    with pytest.raises(UnsupportedVersionError):
        lock.to_update_service_payload()

    commitment = TransactionPayload(get_random_commitment_payload())
    assert commitment.to_quorum_commitment_payload() is commitment.payload


def test_rejects_other_objects():
    with pytest.raises(TypeError):
        TransactionPayload(b'\x00')
