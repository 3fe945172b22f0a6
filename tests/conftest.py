"""
Fixtures used in the tests
"""
import pytest

from dashtx.crypto import BLSPublicKey, BLSSignature, QuorumHash, QuorumVVecHash
from dashtx.special import QuorumFinalizationCommitment

# Testnet ProUpServTx (type 2) carrying a ProviderUpdateServicePayload
PRO_UP_SERV_TX_HEX = (
    "03000200018f3fe6683e36326669b6e34876fb2a2264e8327e822f6fec304b66f47d61b3e1010000006b483045022100"
    "82af6727408f0f2ec16c7da1c42ccf0a026abea6a3a422776272b03c8f4e262a022033b406e556f6de980b2d728e6812b3"
    "ae18ee1c863ae573ece1cbdf777ca3e56101210351036c1192eaf763cd8345b44137482ad24b12003f23e9022ce46752ed"
    "f47e6effffffff0180220e43000000001976a914123cbc06289e768ca7d743c8174b1e6eeb610f1488ac00000000b50100"
    "3a72099db84b1c1158568eec863bea1b64f90eccee3304209cebe1df5e7539fd00000000000000000000ffff342440944e"
    "1f00e6725f799ea20480f06fb105ebe27e7c4845ab84155e4c2adf2d6e5b73a998b1174f9621bbeda5009c5a6487bdf75e"
    "dcf602b67fe0da15c275cc91777cb25f5fd4bb94e84fd42cb2bb547c83792e57c80d196acd47020e4054895a0640b7861b"
    "3729c41dd681d4996090d5750f65c4b649a5cd5b2bdf55c880459821e53d91c9"
)

# islock locking a single outpoint
ISLOCK_HEX = (
    "010101102862a43d122e6675aba4b507ae307af8e1e17febc77907e08b3efa28f41b000000004b446de00a592c67402c0a"
    "65649f4ad69f29084b3e9054f5aa6b85a50b497fe136a56617591a6a89237bada6af1f9b46eba47b5d89a8c4e49ff2d023"
    "6182307c85e12d70ca7118c5034004f93e45384079f46c6c2928b45cfc5d3ad640e70dfd87a9a3069899adfb3b1622daee"
    "ead19809b74354272ccf95290678f55c13728e3c5ee8f8417fcce3dfdca2a7c9c33ec981abdff1ec35a2e4b558c3698f01"
    "c1b8"
)


@pytest.fixture()
def pro_up_serv_tx_bytes():
    return bytes.fromhex(PRO_UP_SERV_TX_HEX)


@pytest.fixture()
def islock_bytes():
    return bytes.fromhex(ISLOCK_HEX)


@pytest.fixture()
def zeroed_commitment():
    """
    Returns a factory for commitments whose fixed-width fields are all zero
    """

    def _make(version: int, quorum_index: int | None, signers: list[bool], valid_members: list[bool]):
        return QuorumFinalizationCommitment(
            version=version,
            llmq_type=0,
            quorum_hash=QuorumHash.zero(),
            quorum_index=quorum_index,
            signers=signers,
            valid_members=valid_members,
            quorum_public_key=BLSPublicKey.zero(),
            quorum_vvec_hash=QuorumVVecHash.zero(),
            quorum_sig=BLSSignature.zero(),
            sig=BLSSignature.zero()
        )

    return _make
