"""Coercion of user input into the arrays the binning code works on."""
from typing import Any

import numpy as np
import pandas as pd

from kmhist.errors import IndexOutOfRangeError


def as_samples(samples: Any) -> np.ndarray:
    """Convert a scalar time series into a contiguous float64 array.

    Args:
        samples: List, tuple, numpy array or pandas Series ordered in time

    Returns:
        1-D float64 array (Series index labels are dropped, order is kept)

    Raises:
        ValueError: If the input is not one-dimensional or holds NaN/inf
    """
    if isinstance(samples, pd.Series):
        samples = samples.to_numpy()

    xs = np.ascontiguousarray(samples, dtype=np.float64)

    if xs.ndim != 1:
        raise ValueError(f"samples must be one-dimensional, got shape {xs.shape}")
    if not np.isfinite(xs).all():
        n_bad = int((~np.isfinite(xs)).sum())
        raise ValueError(f"samples must be finite ({n_bad} NaN/inf values found)")

    return xs


def as_indices(indices: Any, n_samples: int) -> np.ndarray:
    """Convert candidate positions into an int64 array and bounds-check them.

    Args:
        indices: Positions into a sample array of length `n_samples`
        n_samples: Length of the sample array

    Returns:
        1-D int64 array in the given order

    Raises:
        IndexOutOfRangeError: If any position is outside [0, n_samples)
    """
    idx = np.asarray(indices)
    if idx.size == 0:
        return np.empty(0, dtype=np.int64)
    if idx.ndim != 1:
        raise ValueError(f"indices must be one-dimensional, got shape {idx.shape}")
    if not np.issubdtype(idx.dtype, np.integer):
        raise ValueError(f"indices must be integers, got dtype {idx.dtype}")

    idx = idx.astype(np.int64, copy=False)
    bad = (idx < 0) | (idx >= n_samples)
    if bad.any():
        first = int(idx[bad][0])
        raise IndexOutOfRangeError(
            f"index ({first}) out of range for {n_samples} samples"
        )

    return idx
