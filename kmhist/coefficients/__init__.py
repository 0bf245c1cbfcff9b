"""Kramers-Moyal coefficients from histogram transition counts."""

from kmhist.coefficients.estimator import KramersMoyalEstimator
from kmhist.coefficients.kramers_moyal import (
    bin_centers,
    diffusion,
    drift,
    kramers_moyal_coefficient,
    kramers_moyal_moments,
)
from kmhist.coefficients.types import EstimatorConfig, KramersMoyalEstimate

__all__ = [
    "EstimatorConfig",
    "KramersMoyalEstimate",
    "KramersMoyalEstimator",
    "bin_centers",
    "diffusion",
    "drift",
    "kramers_moyal_coefficient",
    "kramers_moyal_moments",
]
