"""Pytest fixtures for Kramers-Moyal tests."""
import numpy as np
import pytest


@pytest.fixture
def alternating():
    """Series flipping between two states every step."""
    return [0.0, 1.0, 0.0, 1.0, 0.0, 1.0]


@pytest.fixture
def ou_series():
    """Ornstein-Uhlenbeck path (theta=1, sigma=1, dt=0.1) of 50k steps.

    Returns:
        tuple: (x, dt)
    """
    rng = np.random.default_rng(7)
    dt = 0.1
    n = 50_000
    noise = rng.standard_normal(n) * np.sqrt(dt)
    x = np.empty(n)
    x[0] = 0.0
    for t in range(1, n):
        x[t] = x[t - 1] - x[t - 1] * dt + noise[t]
    return x, dt
