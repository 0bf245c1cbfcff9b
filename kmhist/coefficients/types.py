"""Type definitions for Kramers-Moyal estimation."""
import numbers
from dataclasses import dataclass, field
from typing import Dict, Literal, Optional

import numpy as np
import pandas as pd

from kmhist.conditional.probability import ConditionalProbability
from kmhist.errors import InvalidBinCountError


@dataclass
class EstimatorConfig:
    """Configuration for Kramers-Moyal estimation.

    Attributes:
        n_bins: Number of equal-width bins over the observed range
        lag: Steps between current and next state
        tau: Time elapsed over `lag` steps (sampling interval * lag)
        max_order: Highest coefficient order to compute (1 = drift, 2 = diffusion)
        method: Moment reduction, "sum" or "trapezoid"
        n_jobs: joblib workers for the conditional row fills (None = sequential)
    """
    n_bins: int = 50
    lag: int = 1
    tau: float = 1.0
    max_order: int = 2
    method: Literal["sum", "trapezoid"] = "sum"
    n_jobs: Optional[int] = None

    def __post_init__(self):
        """Validate configuration parameters."""
        if isinstance(self.n_bins, bool) or not isinstance(self.n_bins, numbers.Integral):
            raise InvalidBinCountError(f"n_bins ({self.n_bins!r}) must be a positive integer")
        if self.n_bins <= 0:
            raise InvalidBinCountError(f"n_bins ({self.n_bins}) must be positive")
        if isinstance(self.lag, bool) or not isinstance(self.lag, numbers.Integral):
            raise ValueError(f"lag ({self.lag!r}) must be an integer")
        if self.lag <= 0:
            raise ValueError(f"lag ({self.lag}) must be positive")
        if not self.tau > 0:
            raise ValueError(f"tau ({self.tau}) must be positive")
        if self.max_order < 1:
            raise ValueError(f"max_order ({self.max_order}) must be >= 1")
        if self.method not in ("sum", "trapezoid"):
            raise ValueError(f"method ({self.method!r}) must be 'sum' or 'trapezoid'")


@dataclass
class KramersMoyalEstimate:
    """Result of a Kramers-Moyal estimation.

    Attributes:
        conditional_probability: Filled marginal and transition counts
        bin_centers: Midpoints of the shared bins
        coefficients: Order -> coefficient per bin center
        config: Configuration used for estimation
    """
    conditional_probability: ConditionalProbability
    bin_centers: np.ndarray
    coefficients: Dict[int, np.ndarray] = field(default_factory=dict)
    config: EstimatorConfig = field(default_factory=EstimatorConfig)

    @property
    def drift(self) -> np.ndarray:
        """First-order coefficient D_1."""
        if 1 not in self.coefficients:
            raise KeyError(f"drift not computed (max_order={self.config.max_order})")
        return self.coefficients[1]

    @property
    def diffusion(self) -> np.ndarray:
        """Second-order coefficient D_2."""
        if 2 not in self.coefficients:
            raise KeyError(f"diffusion not computed (max_order={self.config.max_order})")
        return self.coefficients[2]

    def to_frame(self) -> pd.DataFrame:
        """Coefficients per bin with the marginal counts, one row per bin."""
        frame = pd.DataFrame(
            {f"D{order}": values for order, values in sorted(self.coefficients.items())},
            index=pd.Index(self.bin_centers, name="x"),
        )
        frame.insert(0, "count", self.conditional_probability.histogram.bins.copy())
        return frame
