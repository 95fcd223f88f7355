"""Monte Carlo engine for the Central Limit Theorem demo."""

from __future__ import annotations

import logging
import math

import numpy as np

from ..core import SimulationResult
from ..distributions import get_distribution

__all__ = [
    "sample_means",
    "standardize",
    "simulate",
]

logger = logging.getLogger(__name__)


def _validate_sizes(sample_size: int, num_simulations: int) -> None:
    if sample_size < 0:
        raise ValueError("sample_size must be a non-negative integer.")
    if num_simulations < 1:
        raise ValueError("num_simulations must be a positive integer.")


def sample_means(
    distribution: str,
    sample_size: int,
    num_simulations: int,
    *,
    random_state: np.random.Generator | None = None,
) -> np.ndarray:
    """Return the raw mean of ``sample_size`` draws for each repetition."""
    _validate_sizes(sample_size, num_simulations)
    if sample_size == 0:
        return np.empty(0, dtype=float)
    rng = random_state or np.random.default_rng()
    dist = get_distribution(distribution)
    draws = dist.sample(num_simulations * sample_size, random_state=rng)
    return draws.reshape(num_simulations, sample_size).mean(axis=1)


def standardize(means: np.ndarray, mean: float, std: float, sample_size: int) -> np.ndarray:
    """Scale sample means to z-scores using the standard error ``std / sqrt(n)``."""
    values = np.asarray(means, dtype=float)
    if sample_size <= 0 or std <= 0:
        return np.empty(0, dtype=float)
    standard_error = std / math.sqrt(sample_size)
    return (values - mean) / standard_error


def simulate(
    distribution: str,
    sample_size: int,
    num_simulations: int,
    *,
    random_state: np.random.Generator | None = None,
) -> SimulationResult:
    """Draw repeated samples and return their standardized means.

    Produces one value per repetition, or none at all when ``sample_size`` is 0
    or the distribution has zero standard deviation.
    """
    dist = get_distribution(distribution)
    _validate_sizes(sample_size, num_simulations)
    if sample_size == 0 or dist.std <= 0:
        logger.debug(
            "Skipping standardization for %s (n=%d, std=%g)", dist.name, sample_size, dist.std
        )
        z = np.empty(0, dtype=float)
    else:
        means = sample_means(dist.name, sample_size, num_simulations, random_state=random_state)
        z = standardize(means, dist.mean, dist.std, sample_size)
    logger.debug(
        "Simulated %s: n=%d m=%d -> %d standardized means",
        dist.name,
        sample_size,
        num_simulations,
        z.size,
    )
    return SimulationResult(
        distribution=dist.name,
        sample_size=sample_size,
        num_simulations=num_simulations,
        standardized_means=z,
        metadata={"population_mean": dist.mean, "population_std": dist.std},
    )
