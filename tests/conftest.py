import pytest

from dhcrypt.crypto.blowfish import BlockCipher
from dhcrypt.crypto.dh import KeyAgreement

SAMPLE_KEY = bytes([0x01, 0x23, 0x45, 0x67, 0x89, 0xAB, 0xCD, 0xEF])


@pytest.fixture
def key() -> bytes:
    return SAMPLE_KEY


@pytest.fixture
def cipher(key) -> BlockCipher:
    return BlockCipher(key)


@pytest.fixture
def initiator() -> KeyAgreement:
    ka = KeyAgreement(seed=1234)
    ka.generate()
    return ka


@pytest.fixture
def responder(initiator) -> KeyAgreement:
    ka = KeyAgreement(seed=5678)
    ka.adopt(*initiator.parameters())
    return ka
