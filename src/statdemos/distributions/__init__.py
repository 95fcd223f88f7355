"""Distribution registry and the built-in sampling laws used by the CLT demo."""

from __future__ import annotations

import math

import numpy as np

from .base import (
    DiscreteLaw,
    Distribution,
    Sampler,
    clear_registry,
    get_distribution,
    list_distributions,
    register_distribution,
)

__all__ = [
    "Distribution",
    "DiscreteLaw",
    "Sampler",
    "get_distribution",
    "list_distributions",
    "register_distribution",
    "clear_registry",
    "draw",
    "BERNOULLI_LAW",
    "SKEWED_DISCRETE_LAW",
    "STANDARD_DISTRIBUTIONS",
]


def uniform_sampler(rng: np.random.Generator, size: int) -> np.ndarray:
    return rng.random(size)


def exponential_sampler(rng: np.random.Generator, size: int) -> np.ndarray:
    """Exp(1) via inverse transform, ``-ln(1 - u)``."""
    return -np.log1p(-rng.random(size))


BERNOULLI_LAW = DiscreteLaw.from_pairs([(1.0, 0.5), (0.0, 0.5)])

# P(X=10) takes the remaining 0.1
SKEWED_DISCRETE_LAW = DiscreteLaw.from_pairs([(0.0, 0.7), (1.0, 0.2), (10.0, 0.1)])


STANDARD_DISTRIBUTIONS = [
    Distribution(
        name="Uniform",
        mean=0.5,
        std=1.0 / math.sqrt(12.0),
        sampler=uniform_sampler,
        notes="Continuous uniform on [0, 1).",
    ),
    Distribution(
        name="Exponential",
        mean=1.0,
        std=1.0,
        sampler=exponential_sampler,
        notes="Exponential with rate 1 (inverse-transform sampling).",
    ),
    BERNOULLI_LAW.to_distribution(
        "Bernoulli",
        notes="Fair coin returning 1 or 0.",
    ),
    SKEWED_DISCRETE_LAW.to_distribution(
        "Skewed Discrete",
        notes="Outcomes 0, 1, 10 with probabilities 0.7, 0.2, 0.1.",
    ),
]


def draw(
    name: str,
    size: int,
    *,
    random_state: np.random.Generator | None = None,
) -> np.ndarray:
    """Draw ``size`` independent values from a registered distribution."""
    return get_distribution(name).sample(size, random_state=random_state)


def _register_builtin() -> None:
    for dist in STANDARD_DISTRIBUTIONS:
        register_distribution(dist, overwrite=True)


_register_builtin()
