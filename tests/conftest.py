"""Shared test fixtures for kmhist tests."""
import numpy as np
import pandas as pd
import pytest


@pytest.fixture
def xs():
    """Short series with a known 4-bin histogram [3, 3, 2, 1]."""
    return [0.0, 1.0, 2.0, 3.0, 0.0, 1.0, 2.0, 0.0, 1.0]


@pytest.fixture
def random_walk():
    """Seeded Gaussian random walk as a pandas Series."""
    rng = np.random.default_rng(42)
    dates = pd.date_range('2020-01-01', periods=500, freq='D')
    return pd.Series(np.cumsum(rng.standard_normal(500)), index=dates, name='x')
