"""Pytest configuration and shared fixtures."""

import matplotlib

matplotlib.use("Agg")

import numpy as np
import pytest

from double_slit import PhysicsParams, Simulation


class FakeClock:
    """Manually advanced stand-in for time.perf_counter."""

    def __init__(self, start=100.0):
        self.now = start

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


@pytest.fixture
def default_params():
    """Session-start parameters: λ=0.5, d=2.0, w=0.3, D=10."""
    return PhysicsParams()


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def simulation(rng):
    return Simulation(rng=rng)


@pytest.fixture
def particle_simulation(rng):
    return Simulation(params=PhysicsParams(particle_mode=True), rng=rng)


@pytest.fixture
def fake_clock():
    return FakeClock()
