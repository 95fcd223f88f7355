"""Core distribution registry infrastructure."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass, field

import numpy as np

Sampler = Callable[[np.random.Generator, int], np.ndarray]

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class Distribution:
    """Describe a sampling law together with its population moments."""

    name: str
    mean: float
    std: float
    sampler: Sampler
    notes: str | None = None

    def sample(self, size: int, *, random_state: np.random.Generator | None = None) -> np.ndarray:
        rng = random_state or np.random.default_rng()
        return np.asarray(self.sampler(rng, size), dtype=float)


@dataclass(slots=True)
class DiscreteLaw:
    """Finite probability mass function over real outcomes.

    Moments and the sampler both derive from ``outcomes``/``probabilities`` so the
    declared mean and standard deviation always agree with what gets drawn.
    Sampling splits the unit interval into consecutive pieces of width ``p_k`` and
    returns ``x_k`` for the piece a uniform draw lands in.
    """

    outcomes: tuple[float, ...]
    probabilities: tuple[float, ...]
    _cumulative: np.ndarray = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if len(self.outcomes) != len(self.probabilities):
            raise ValueError("Outcomes and probabilities must be the same length.")
        probs = np.asarray(self.probabilities, dtype=float)
        if np.any(probs < 0):
            raise ValueError("Probabilities must be non-negative.")
        if not np.isclose(probs.sum(), 1.0):
            raise ValueError(f"Probabilities must sum to 1 (got {probs.sum():.6g}).")
        self._cumulative = np.cumsum(probs)

    @classmethod
    def from_pairs(cls, pairs: Sequence[tuple[float, float]]) -> DiscreteLaw:
        outcomes, probabilities = zip(*pairs, strict=True)
        return cls(tuple(float(x) for x in outcomes), tuple(float(p) for p in probabilities))

    @property
    def mean(self) -> float:
        return float(sum(p * x for x, p in zip(self.outcomes, self.probabilities, strict=True)))

    @property
    def variance(self) -> float:
        second = sum(p * x * x for x, p in zip(self.outcomes, self.probabilities, strict=True))
        return float(max(second - self.mean**2, 0.0))

    @property
    def std(self) -> float:
        return float(np.sqrt(self.variance))

    def sample(self, rng: np.random.Generator, size: int) -> np.ndarray:
        u = rng.random(size)
        # side="right" keeps each piece closed on the left: u < p1 -> first outcome
        index = np.searchsorted(self._cumulative, u, side="right")
        index = np.minimum(index, len(self.outcomes) - 1)
        return np.asarray(self.outcomes, dtype=float)[index]

    def to_distribution(self, name: str, *, notes: str | None = None) -> Distribution:
        return Distribution(
            name=name,
            mean=self.mean,
            std=self.std,
            sampler=self.sample,
            notes=notes,
        )


_REGISTRY: dict[str, Distribution] = {}


def list_distributions() -> Iterable[str]:
    """Return registered distribution names."""
    return sorted(_REGISTRY.keys())


def get_distribution(name: str) -> Distribution:
    """Retrieve a distribution by name (case-insensitive)."""
    key = name.lower()
    if key not in _REGISTRY:
        raise KeyError(f"Unknown distribution '{name}'.")
    return _REGISTRY[key]


def register_distribution(distribution: Distribution, *, overwrite: bool = False) -> None:
    """Register a distribution in the global registry."""
    key = distribution.name.lower()
    if key in _REGISTRY and not overwrite:
        raise ValueError(f"Distribution '{distribution.name}' already registered.")
    if distribution.std < 0:
        raise ValueError(f"Distribution '{distribution.name}' has negative std.")
    _REGISTRY[key] = distribution
    logger.debug("Registered distribution %s", distribution.name)


def clear_registry() -> None:
    """Reset the registry (primarily for testing)."""
    _REGISTRY.clear()


__all__ = [
    "Distribution",
    "DiscreteLaw",
    "Sampler",
    "list_distributions",
    "get_distribution",
    "register_distribution",
    "clear_registry",
]
