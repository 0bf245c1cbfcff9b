"""Lagged transition counts over a shared histogram discretization."""

from kmhist.conditional.probability import (
    ConditionalProbability,
    conditional_probability_from_data,
)

__all__ = [
    "ConditionalProbability",
    "conditional_probability_from_data",
]
