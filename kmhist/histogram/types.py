"""Type definitions for 1D histograms."""
import numbers
from typing import NamedTuple

import numpy as np

from kmhist.errors import DegenerateHistogramError, InvalidBinCountError


class HistogramView(NamedTuple):
    """Read-only snapshot of a histogram.

    Attributes:
        bins: Counts per bin, shape (n,), uint64, not writeable
        intervals: Bin boundaries, shape (n + 1,), float64, not writeable
    """
    bins: np.ndarray
    intervals: np.ndarray

    @property
    def n_bins(self) -> int:
        """Number of bins."""
        return len(self.bins)

    @property
    def total(self) -> int:
        """Number of samples placed in the histogram."""
        return int(self.bins.sum())


def check_n_bins(n) -> int:
    """Validate a bin count and return it as a plain int."""
    if isinstance(n, bool) or not isinstance(n, numbers.Integral):
        raise InvalidBinCountError(f"n ({n!r}) must be a positive integer")
    if n <= 0:
        raise InvalidBinCountError(f"n ({n}) must be positive")
    return int(n)


def check_step(value, name: str, minimum: int) -> int:
    """Validate an integer time step (lag or offset) and return it as a plain int."""
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise ValueError(f"{name} ({value!r}) must be an integer")
    if value < minimum:
        raise ValueError(f"{name} ({value}) must be >= {minimum}")
    return int(value)


def check_intervals(intervals: np.ndarray) -> None:
    """Validate a boundary sequence: at least two values, non-decreasing."""
    if intervals.ndim != 1:
        raise ValueError(f"intervals must be one-dimensional, got shape {intervals.shape}")
    if len(intervals) < 2:
        raise DegenerateHistogramError(
            f"histogram needs at least 2 interval boundaries, got {len(intervals)}"
        )
    if not np.isfinite(intervals).all():
        raise ValueError("interval boundaries must be finite")
    if np.any(np.diff(intervals) < 0):
        raise ValueError("interval boundaries must be non-decreasing")


def readonly(array: np.ndarray) -> np.ndarray:
    """Return a non-writeable view of `array`."""
    view = array.view()
    view.flags.writeable = False
    return view
