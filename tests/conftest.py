"""
Shared fixtures:
- EIP-55 reference vectors
- A 32-byte identifier kind for exercising the generic base
- A seeded random source for property-style tests
"""
import random

import pytest

from ethereum_ids import FixedLengthIdentifier


# Reference checksummed addresses from the EIP-55 specification.
EIP55_VECTORS = [
    # All caps
    "0x52908400098527886E0F7030069857D2E4169EE7",
    "0x8617E340B3D01FA5F11F306F4090FD50E238070D",
    # All lower
    "0xde709f2102306220921060314715629080e2fb77",
    "0x27b1fdb04752bbc536007a920d24acb045561c26",
    # Normal
    "0x5aAeb6053F3E94C9b9A09f33669435E7Ef1BeAed",
    "0xfB6916095ca1df60bB79Ce92cE3Ea74c37c5d359",
    "0xdbF03B407c01E7cD3CBea99509d93f8DDDC8C6FB",
    "0xD1220A0cf47c7B9Be7A2E6BA89F429762e7b9aDb",
]

CANONICAL = "0x5aAeb6053F3E94C9b9A09f33669435E7Ef1BeAed"


class Hash32(FixedLengthIdentifier):
    """32-byte identifier kind used only by the tests."""
    LENGTH = 32


@pytest.fixture
def canonical_text():
    """The canonical EIP-55 example address."""
    return CANONICAL


@pytest.fixture
def hash32_cls():
    """A second identifier kind declared purely by subclassing."""
    return Hash32


@pytest.fixture
def rng():
    """Deterministic random source."""
    return random.Random(0x5AAEB605)
