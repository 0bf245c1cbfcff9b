"""kmhist: Markov transition histograms and Kramers-Moyal coefficients."""

from kmhist.coefficients import (
    EstimatorConfig,
    KramersMoyalEstimate,
    KramersMoyalEstimator,
    bin_centers,
    diffusion,
    drift,
    kramers_moyal_coefficient,
    kramers_moyal_moments,
)
from kmhist.conditional import ConditionalProbability, conditional_probability_from_data
from kmhist.errors import (
    DegenerateHistogramError,
    EmptyInputError,
    IndexOutOfRangeError,
    InvalidBinCountError,
)
from kmhist.histogram import (
    Histogram,
    HistogramFiller,
    HistogramView,
    histogram_from_bounds,
    histogram_from_data,
)

__version__ = "0.1.0"

__all__ = [
    "ConditionalProbability",
    "DegenerateHistogramError",
    "EmptyInputError",
    "EstimatorConfig",
    "Histogram",
    "HistogramFiller",
    "HistogramView",
    "IndexOutOfRangeError",
    "InvalidBinCountError",
    "KramersMoyalEstimate",
    "KramersMoyalEstimator",
    "bin_centers",
    "conditional_probability_from_data",
    "diffusion",
    "drift",
    "histogram_from_bounds",
    "histogram_from_data",
    "kramers_moyal_coefficient",
    "kramers_moyal_moments",
]
