import random

import pytest
from fastapi.testclient import TestClient

from smarttransit.main import create_app
from smarttransit.services.simulation import RouteSimulator

T0 = 1_700_000_000.0


class FixedRandom(random.Random):
    """random() always returns ``value``, which also pins the integer and choice draws."""

    def __init__(self, value, seed=7):
        super().__init__(seed)
        self.value = value

    def random(self):
        return self.value


@pytest.fixture
def t0():
    return T0


@pytest.fixture
def sim():
    return RouteSimulator(rng=random.Random(42), start=T0)


@pytest.fixture
def fixed_sim():
    """Build a simulator started at ``t0`` whose draws all come from ``FixedRandom(value)``."""

    def build(value):
        return RouteSimulator(rng=FixedRandom(value), start=T0)

    return build


@pytest.fixture
def client(sim):
    return TestClient(create_app(sim))
