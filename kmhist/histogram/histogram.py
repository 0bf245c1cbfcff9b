"""1D histogram with equally spaced bins."""
import warnings
from typing import List, Optional, Sequence

import numpy as np
import pandas as pd

from kmhist.errors import EmptyInputError
from kmhist.histogram.filler import HistogramFiller
from kmhist.histogram.types import (
    HistogramView,
    check_intervals,
    check_n_bins,
    readonly,
)
from kmhist.utils.data import as_samples


class Histogram:
    """A 1D histogram of `n` bins defined by `n + 1` interval boundaries.

    A value x belongs to bin i with boundaries [y_i, y_{i+1}) when

        y_i <= x < y_{i+1}

    except that the first bin extends to -inf and the last to +inf while
    filling, so no sample is ever dropped.
    """

    def __init__(self, bins: Sequence[int], intervals: Sequence[float]):
        """Initialize histogram from counts and boundaries.

        Args:
            bins: Counts per bin, length n
            intervals: Bin boundaries, length n + 1
        """
        self._intervals = np.array(intervals, dtype=np.float64)
        check_intervals(self._intervals)

        self._bins = np.array(bins, dtype=np.uint64)
        if self._bins.shape != (len(self._intervals) - 1,):
            raise ValueError(
                f"bins length ({len(self._bins)}) must be intervals length - 1 "
                f"({len(self._intervals) - 1})"
            )

    @classmethod
    def from_bounds(cls, min: float, max: float, n: int) -> "Histogram":
        """Create an empty histogram of `n` bins evenly partitioning [min, max]."""
        n = check_n_bins(n)
        if not (np.isfinite(min) and np.isfinite(max)):
            raise ValueError(f"bounds ({min}, {max}) must be finite")
        if min > max:
            raise ValueError(f"min ({min}) must be <= max ({max})")
        if min == max:
            warnings.warn(
                f"Histogram range is empty (min == max == {min}); "
                "all samples will be placed in the last bin",
                RuntimeWarning,
                stacklevel=2,
            )

        # Interpolate instead of stepping by (max - min), which overflows near the float64 limit.
        t = np.linspace(0.0, 1.0, n + 1)
        intervals = min * (1.0 - t) + max * t
        intervals[0], intervals[-1] = min, max
        bins = np.zeros(n, dtype=np.uint64)
        return cls(bins, intervals)

    @classmethod
    def from_data_empty(cls, samples: Sequence[float], n: int) -> "Histogram":
        """Create an empty histogram of `n` bins spanning the range of `samples`."""
        xs = as_samples(samples)
        if len(xs) == 0:
            raise EmptyInputError("cannot derive histogram bounds from empty samples")
        return cls.from_bounds(float(xs.min()), float(xs.max()), n)

    @classmethod
    def from_data(cls, samples: Sequence[float], n: int) -> "Histogram":
        """Create a histogram of `n` bins spanning `samples` and fill it with them."""
        histogram = cls.from_data_empty(samples, n)
        histogram.fill(samples)
        return histogram

    @property
    def bins(self) -> np.ndarray:
        """Counts per bin (read-only view)."""
        return readonly(self._bins)

    @property
    def intervals(self) -> np.ndarray:
        """Bin boundaries (read-only view)."""
        return readonly(self._intervals)

    @property
    def n_bins(self) -> int:
        return len(self._bins)

    def __len__(self) -> int:
        return len(self._bins)

    def __repr__(self) -> str:
        return (f"Histogram(n_bins={self.n_bins}, range=[{self._intervals[0]:g}, "
                f"{self._intervals[-1]:g}], total={self.total})")

    @property
    def total(self) -> int:
        """Number of samples placed so far."""
        return int(self._bins.sum())

    @property
    def bin_centers(self) -> np.ndarray:
        """Midpoint of each bin."""
        return (self._intervals[:-1] + self._intervals[1:]) / 2.0

    @property
    def bin_widths(self) -> np.ndarray:
        return np.diff(self._intervals)

    def clear(self) -> "Histogram":
        """Reset all counts to zero, keeping the boundaries."""
        self._bins.fill(0)
        return self

    def filler(self, samples: Sequence[float], indices: Optional[Sequence[int]] = None,
               offset: int = 0) -> HistogramFiller:
        """Return a one-shot filler placing `samples` into this histogram bin by bin."""
        return HistogramFiller(samples, self._intervals, self._bins,
                               indices=indices, offset=offset)

    def fill(self, samples: Sequence[float]) -> List[np.ndarray]:
        """Place every sample into a bin.

        Counts accumulate on top of existing ones.

        Returns:
            One array per bin (ascending) with the positions of the samples
            placed into it, in scan order
        """
        return self.filler(samples).fill()

    def fill_with_indices(self, samples: Sequence[float], indices: Sequence[int],
                          offset: int) -> List[np.ndarray]:
        """Place the lagged samples `samples[i + offset]` for each `i` in `indices`.

        Candidates whose lagged position lies past the end of `samples` are
        not counted.

        Returns:
            One array per bin with the candidate positions `i` placed into it
        """
        return self.filler(samples, indices=indices, offset=offset).fill()

    def copy(self) -> "Histogram":
        """Return an independent copy of this histogram."""
        return Histogram(self._bins.copy(), self._intervals.copy())

    def view(self) -> HistogramView:
        """Return a read-only snapshot sharing this histogram's memory."""
        return HistogramView(bins=self.bins, intervals=self.intervals)

    def probabilities(self) -> np.ndarray:
        """Fraction of samples per bin (all zeros when empty)."""
        total = self.total
        if total == 0:
            return np.zeros(self.n_bins, dtype=np.float64)
        return self._bins.astype(np.float64) / total

    def density(self) -> np.ndarray:
        """Probability density per bin: probabilities divided by bin width.

        Bins of zero width (all samples equal) get a density of zero.
        """
        widths = self.bin_widths
        probs = self.probabilities()
        out = np.zeros_like(probs)
        np.divide(probs, widths, out=out, where=widths > 0)
        return out

    def to_series(self) -> pd.Series:
        """Counts as a pandas Series indexed by left-closed intervals."""
        index = pd.IntervalIndex.from_breaks(self._intervals, closed="left")
        return pd.Series(self._bins.copy(), index=index, name="count")


def histogram_from_bounds(min: float, max: float, n: int) -> Histogram:
    """Create an empty histogram of `n` equal-width bins over [min, max]."""
    return Histogram.from_bounds(min, max, n)


def histogram_from_data(samples: Sequence[float], n: int) -> Histogram:
    """Create and fill a histogram of `n` bins spanning `samples`."""
    return Histogram.from_data(samples, n)
