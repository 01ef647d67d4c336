import random

import pytest

from tests.test_utils import FakeIonService


@pytest.fixture
def ion_service():
    """Fake anchoring service on the default endpoints."""
    return FakeIonService()


@pytest.fixture
def seeded_rng():
    """Deterministic randomness source for nonce generation."""
    return random.Random(1234)
