"""Conditional (transition) probabilities between histogram bins."""
import logging
from typing import List, Optional, Sequence

import numpy as np
import pandas as pd
from joblib import Parallel, delayed

from kmhist.histogram.filler import HistogramFiller
from kmhist.histogram.histogram import Histogram
from kmhist.histogram.types import check_step, readonly
from kmhist.utils.data import as_samples

logger = logging.getLogger(__name__)


def _row_counts(samples: np.ndarray, intervals: np.ndarray, indices: np.ndarray,
                lag: int) -> np.ndarray:
    """Histogram of the values `lag` steps after the given positions."""
    counts = np.zeros(len(intervals) - 1, dtype=np.uint64)
    HistogramFiller(samples, intervals, counts, indices=indices, offset=lag).fill()
    return counts


class ConditionalProbability:
    """Marginal histogram P(x_i) plus conditional histograms P(x_j | x_i).

    Row i of `conditional` holds the counts of values observed `lag` steps
    after a sample in bin i of the marginal histogram. The marginal and every
    row share a single set of interval boundaries.

    Counts are raw joint counts. Use `transition_matrix()` for
    row-normalized probabilities.
    """

    def __init__(self, histogram: Histogram, conditional: np.ndarray, lag: int = 1):
        """Initialize from a marginal histogram and an n x n count matrix.

        Args:
            histogram: Marginal histogram defining the discretization
            conditional: Transition counts, shape (n, n)
            lag: Steps between current and next state (>= 1)
        """
        lag = check_step(lag, "lag", 1)

        n = histogram.n_bins
        conditional = np.array(conditional, dtype=np.uint64)
        if conditional.shape != (n, n):
            raise ValueError(
                f"conditional shape {conditional.shape} does not match {n} bins"
            )

        self._histogram = histogram
        self._conditional = conditional
        self._intervals = histogram.intervals.copy()
        self.lag = lag

    @classmethod
    def from_histogram(cls, histogram: Histogram, lag: int = 1) -> "ConditionalProbability":
        """Create empty conditional probabilities using `histogram` as binning template.

        The template is copied and cleared; it is not modified.
        """
        marginal = histogram.copy().clear()
        n = marginal.n_bins
        return cls(marginal, np.zeros((n, n), dtype=np.uint64), lag=lag)

    @classmethod
    def from_data_empty(cls, samples: Sequence[float], n: int,
                        lag: int = 1) -> "ConditionalProbability":
        """Create empty conditional probabilities with `n` bins spanning `samples`."""
        return cls.from_histogram(Histogram.from_data_empty(samples, n), lag=lag)

    @classmethod
    def from_data(cls, samples: Sequence[float], n: int, lag: int = 1,
                  n_jobs: Optional[int] = None) -> "ConditionalProbability":
        """Create conditional probabilities with `n` bins and fill them from `samples`."""
        cond_probability = cls.from_data_empty(samples, n, lag=lag)
        cond_probability.fill(samples, n_jobs=n_jobs)
        return cond_probability

    @property
    def histogram(self) -> Histogram:
        """Marginal histogram."""
        return self._histogram

    @property
    def conditional(self) -> np.ndarray:
        """Transition counts, shape (n, n), row = current bin (read-only view)."""
        return readonly(self._conditional)

    @property
    def intervals(self) -> np.ndarray:
        """Interval boundaries shared by the marginal and all rows (read-only view)."""
        return readonly(self._intervals)

    @property
    def n_bins(self) -> int:
        return self._histogram.n_bins

    def __len__(self) -> int:
        return self.n_bins

    def __repr__(self) -> str:
        return (f"ConditionalProbability(n_bins={self.n_bins}, lag={self.lag}, "
                f"total={self._histogram.total})")

    def clear(self) -> "ConditionalProbability":
        """Reset marginal and conditional counts to zero."""
        self._histogram.clear()
        self._conditional.fill(0)
        return self

    def fill(self, samples: Sequence[float], n_jobs: Optional[int] = None) -> List[np.ndarray]:
        """Fill the marginal histogram and the conditional rows from `samples`.

        The marginal fill yields, for each bin i, the positions of samples
        currently in bin i. Row i is then filled from the values `lag` steps
        after exactly those positions. Samples within `lag` of the end have
        no successor and contribute to the marginal only.

        Args:
            samples: Time series ordered oldest -> newest
            n_jobs: Fill rows in parallel with joblib using this many workers
                (None fills sequentially)

        Returns:
            Marginal index arrays, one per bin
        """
        xs = as_samples(samples)
        intervals = self._intervals

        marginal_indices = self._histogram.fill(xs)

        if n_jobs is None:
            rows = [_row_counts(xs, intervals, indices, self.lag)
                    for indices in marginal_indices]
        else:
            logger.debug("Filling %d conditional rows with n_jobs=%s", self.n_bins, n_jobs)
            rows = Parallel(n_jobs=n_jobs, prefer="threads")(
                delayed(_row_counts)(xs, intervals, indices, self.lag)
                for indices in marginal_indices
            )

        for i, counts in enumerate(rows):
            self._conditional[i] += counts

        return marginal_indices

    def row_histogram(self, i: int) -> Histogram:
        """Conditional histogram of the next state given current bin `i` (a copy)."""
        if not -self.n_bins <= i < self.n_bins:
            raise IndexError(f"row ({i}) out of range for {self.n_bins} bins")
        return Histogram(self._conditional[i].copy(), self._intervals.copy())

    def transition_matrix(self) -> np.ndarray:
        """Row-normalized transition probabilities P(x_j | x_i).

        Rows without any observed transition are left as zeros.
        """
        counts = self._conditional.astype(np.float64)
        row_sums = counts.sum(axis=1, keepdims=True)
        out = np.zeros_like(counts)
        np.divide(counts, row_sums, out=out, where=row_sums > 0)
        return out

    def to_frame(self) -> pd.DataFrame:
        """Transition counts as a DataFrame labelled by left-closed intervals."""
        index = pd.IntervalIndex.from_breaks(self._intervals, closed="left")
        frame = pd.DataFrame(self._conditional.copy(), index=index, columns=index.copy())
        return frame.rename_axis(index="current", columns="next")


def conditional_probability_from_data(samples: Sequence[float], n: int,
                                      lag: int = 1) -> ConditionalProbability:
    """Create and fill conditional probabilities of `n` bins from `samples`."""
    return ConditionalProbability.from_data(samples, n, lag=lag)
