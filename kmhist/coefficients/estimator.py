"""End-to-end Kramers-Moyal estimation from a scalar time series."""
import logging
from typing import Optional, Sequence

from kmhist.coefficients.kramers_moyal import bin_centers, kramers_moyal_moments
from kmhist.coefficients.types import EstimatorConfig, KramersMoyalEstimate
from kmhist.conditional.probability import ConditionalProbability
from kmhist.utils.data import as_samples

logger = logging.getLogger(__name__)


class KramersMoyalEstimator:
    """Estimate Kramers-Moyal coefficients via histogram transition counts.

    Bins the series into `n_bins` equal-width bins, counts transitions over
    `lag` steps and reduces them into coefficients of order 1..max_order.
    """

    def __init__(self, config: Optional[EstimatorConfig] = None):
        """Initialize estimator.

        Args:
            config: Estimation configuration (defaults to EstimatorConfig())
        """
        self.config = config or EstimatorConfig()

    def fit(self, samples: Sequence[float]) -> KramersMoyalEstimate:
        """Estimate coefficients from `samples`.

        Args:
            samples: Time series ordered oldest -> newest

        Returns:
            KramersMoyalEstimate with the filled conditional probabilities
        """
        config = self.config
        xs = as_samples(samples)

        cond_probability = ConditionalProbability.from_data(
            xs, config.n_bins, lag=config.lag, n_jobs=config.n_jobs
        )
        logger.debug("Binned %d samples into %d bins", len(xs), config.n_bins)

        coefficients = {
            order: kramers_moyal_moments(order, cond_probability,
                                         tau=config.tau, method=config.method)
            for order in range(1, config.max_order + 1)
        }

        return KramersMoyalEstimate(
            conditional_probability=cond_probability,
            bin_centers=bin_centers(cond_probability.intervals),
            coefficients=coefficients,
            config=config,
        )
