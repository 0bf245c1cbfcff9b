"""Numerical integration over sampled functions."""
from typing import Sequence

import numpy as np


def trapezoid(y: Sequence[float], x: Sequence[float]) -> float:
    """Integrate samples y_i = f(x_i) with the trapezoidal rule.

    Only the common prefix of `y` and `x` is used. Spacing enters as
    |x_i - x_{i+1}|, so the abscissae may run in either direction.

    Returns:
        Integral estimate (0.0 for fewer than two points)
    """
    n = min(len(y), len(x))
    if n < 2:
        return 0.0

    y = np.asarray(y[:n], dtype=np.float64)
    x = np.asarray(x[:n], dtype=np.float64)

    dy = (y[:-1] + y[1:]) / 2.0
    dx = np.abs(np.diff(x))
    return float(np.sum(dy * dx))
