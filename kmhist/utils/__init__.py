"""Input coercion and numerical helpers."""

from kmhist.utils.data import as_indices, as_samples
from kmhist.utils.integrate import trapezoid

__all__ = [
    "as_indices",
    "as_samples",
    "trapezoid",
]
