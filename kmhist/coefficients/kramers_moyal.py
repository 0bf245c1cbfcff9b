"""Kramers-Moyal coefficients from conditional transition probabilities.

The n-th Kramers-Moyal coefficient at bin center x_i is estimated as

    D_n(x_i) = 1 / (n! tau) * sum_j (x_j - x_i)^n P(x_j | x_i)

where P(x_j | x_i) is the transition probability over a lag of `tau`
time units. `kramers_moyal_coefficient` returns the weights
(x_j - x_i)^n; `kramers_moyal_moments` performs the full reduction.
"""
import math
import numbers
import warnings
from typing import Literal, Sequence

import numpy as np

from kmhist.conditional.probability import ConditionalProbability
from kmhist.errors import DegenerateHistogramError
from kmhist.utils.integrate import trapezoid

MomentMethod = Literal["sum", "trapezoid"]


def _check_order(n) -> int:
    if isinstance(n, bool) or not isinstance(n, numbers.Integral):
        raise ValueError(f"order ({n!r}) must be a non-negative integer")
    if n < 0:
        raise ValueError(f"order ({n}) must be non-negative")
    return int(n)


def bin_centers(intervals: Sequence[float]) -> np.ndarray:
    """Midpoints of adjacent interval boundaries.

    Raises:
        DegenerateHistogramError: If there are fewer than two boundaries
    """
    intervals = np.asarray(intervals, dtype=np.float64)
    if intervals.ndim != 1 or len(intervals) < 2:
        raise DegenerateHistogramError(
            f"need at least 2 interval boundaries, got {intervals.size}"
        )
    return (intervals[:-1] + intervals[1:]) / 2.0


def kramers_moyal_coefficient(n: int, conditional_probability: ConditionalProbability) -> np.ndarray:
    """Weight matrix for the n-th Kramers-Moyal coefficient.

    Args:
        n: Moment order
        conditional_probability: Source of the binning (only the intervals are used)

    Returns:
        Array of shape (N, N) with entry [i, j] = (x_j - x_i)^n, x being bin centers
    """
    n = _check_order(n)
    centers = bin_centers(conditional_probability.intervals)
    distances = centers[np.newaxis, :] - centers[:, np.newaxis]
    return distances ** n


def kramers_moyal_moments(n: int, conditional_probability: ConditionalProbability,
                          tau: float = 1.0, method: MomentMethod = "sum") -> np.ndarray:
    """Estimate the n-th Kramers-Moyal coefficient at every bin center.

    Args:
        n: Moment order (1 = drift, 2 = diffusion)
        conditional_probability: Filled transition counts
        tau: Time between samples `lag` steps apart
        method: "sum" contracts weights with transition probabilities directly;
            "trapezoid" integrates the conditional density over bin centers

    Returns:
        Array of shape (N,). Bins without any observed transition are NaN.
    """
    if not tau > 0:
        raise ValueError(f"tau ({tau}) must be positive")

    weights = kramers_moyal_coefficient(n, conditional_probability)
    probs = conditional_probability.transition_matrix()

    if method == "sum":
        moments = (weights * probs).sum(axis=1)
    elif method == "trapezoid":
        intervals = np.asarray(conditional_probability.intervals)
        centers = bin_centers(intervals)
        widths = np.diff(intervals)
        density = np.zeros_like(probs)
        np.divide(probs, widths[np.newaxis, :], out=density, where=widths[np.newaxis, :] > 0)
        moments = np.array([
            trapezoid(weights[i] * density[i], centers) for i in range(len(centers))
        ])
    else:
        raise ValueError(f"method ({method!r}) must be 'sum' or 'trapezoid'")

    moments = moments / (math.factorial(n) * tau)

    observed = np.asarray(conditional_probability.conditional).sum(axis=1) > 0
    if not observed.all():
        warnings.warn(
            f"{int((~observed).sum())} of {len(observed)} bins have no observed "
            "transitions; their coefficients are NaN",
            RuntimeWarning,
            stacklevel=2,
        )
        moments[~observed] = np.nan

    return moments


def drift(conditional_probability: ConditionalProbability, tau: float = 1.0,
          method: MomentMethod = "sum") -> np.ndarray:
    """First Kramers-Moyal coefficient D_1 per bin center."""
    return kramers_moyal_moments(1, conditional_probability, tau=tau, method=method)


def diffusion(conditional_probability: ConditionalProbability, tau: float = 1.0,
              method: MomentMethod = "sum") -> np.ndarray:
    """Second Kramers-Moyal coefficient D_2 per bin center."""
    return kramers_moyal_moments(2, conditional_probability, tau=tau, method=method)
