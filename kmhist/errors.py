"""Exceptions raised by histogram and transition estimation."""


class EmptyInputError(ValueError):
    """Bounds were requested from an empty sample set."""


class InvalidBinCountError(ValueError):
    """A histogram was requested with a non-positive number of bins."""


class DegenerateHistogramError(ValueError):
    """A histogram has fewer than two interval boundaries."""


class IndexOutOfRangeError(IndexError):
    """A candidate index does not address a sample in the data array."""
