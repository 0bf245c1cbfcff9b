"""Equal-width 1D histograms and the bin-by-bin filling algorithm."""

from kmhist.histogram.filler import HistogramFiller
from kmhist.histogram.histogram import (
    Histogram,
    histogram_from_bounds,
    histogram_from_data,
)
from kmhist.histogram.types import HistogramView

__all__ = [
    "Histogram",
    "HistogramFiller",
    "HistogramView",
    "histogram_from_bounds",
    "histogram_from_data",
]
