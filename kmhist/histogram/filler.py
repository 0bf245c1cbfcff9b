"""Bin-major assignment of samples to histogram bins."""
import logging
from typing import List, Optional, Sequence

import numpy as np

from kmhist.histogram.types import check_intervals, check_step
from kmhist.utils.data import as_indices, as_samples

logger = logging.getLogger(__name__)


class HistogramFiller:
    """Fill histogram bins one at a time, yielding the indices placed in each.

    Bins are visited in ascending order. For bin [a, b) the whole candidate
    set is scanned once and every candidate not yet assigned with
    a <= x < b is marked, counted into the bin and reported by its index
    into `data`. A marked candidate is never considered again, so each
    candidate lands in at most one bin.

    The lower bound of the first bin is taken as -inf and the upper bound of
    the last bin as +inf, so the minimum and maximum of the data (and
    anything outside the boundaries) are always placed.

    With `indices` given, only those positions are candidates and each is
    judged by the lagged value `data[i + offset]`; the index reported is
    still `i`. Candidates whose lagged position falls past the end of `data`
    have no value and are not counted.

    The filler is a one-shot iterator producing exactly `n_bins` index
    arrays. It writes into `bins` in place; create a new filler per fill.
    """

    def __init__(self, data: Sequence[float], intervals: np.ndarray, bins: np.ndarray,
                 indices: Optional[Sequence[int]] = None, offset: int = 0):
        """Initialize filler.

        Args:
            data: Time series to bin
            intervals: Bin boundaries, shape (n + 1,)
            bins: Writeable uint64 counts, shape (n,), updated in place
            indices: Optional candidate positions into `data` (default: all)
            offset: Lag applied to each candidate position before lookup
        """
        offset = check_step(offset, "offset", 0)

        self.data = as_samples(data)
        self.intervals = np.asarray(intervals, dtype=np.float64)
        check_intervals(self.intervals)

        if bins.shape != (len(self.intervals) - 1,):
            raise ValueError(
                f"bins shape {bins.shape} does not match {len(self.intervals)} interval boundaries"
            )
        if not bins.flags.writeable:
            raise ValueError("bins must be writeable")
        self.bins = bins
        self.offset = offset

        n = len(self.data)
        if indices is None:
            self._candidates = np.arange(n, dtype=np.int64)
        else:
            self._candidates = as_indices(indices, n)

        lagged = self._candidates + self.offset
        in_range = lagged < n
        if not in_range.all():
            logger.debug("Skipping %d candidates lagged past the end of %d samples",
                         int((~in_range).sum()), n)

        self._values = np.zeros(len(self._candidates), dtype=np.float64)
        self._values[in_range] = self.data[lagged[in_range]]
        # Lagged positions past the end start out as assigned and are never counted.
        self._binned = ~in_range
        self._bin = 0

    @property
    def n_bins(self) -> int:
        """Number of bins being filled."""
        return len(self.bins)

    @property
    def remaining(self) -> int:
        """Number of candidates not yet assigned to a bin."""
        return int(np.count_nonzero(~self._binned))

    def __iter__(self) -> "HistogramFiller":
        return self

    def __next__(self) -> np.ndarray:
        """Fill the next bin and return the indices placed into it."""
        i = self._bin
        if i >= self.n_bins:
            raise StopIteration

        a = -np.inf if i == 0 else self.intervals[i]
        b = np.inf if i == self.n_bins - 1 else self.intervals[i + 1]

        hit = ~self._binned & (self._values >= a) & (self._values < b)
        self._binned |= hit

        count = np.count_nonzero(hit)
        self.bins[i] += np.uint64(count)
        self._bin += 1

        logger.debug("Bin %d [%g, %g): %d samples", i, a, b, count)
        return self._candidates[hit]

    def fill(self) -> List[np.ndarray]:
        """Fill all remaining bins, returning one index array per bin."""
        return list(self)
