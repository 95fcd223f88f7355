"""Core dataclasses and shared type aliases for statdemos modules."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any, TypeAlias

import numpy as np
import pandas as pd

ArrayLike: TypeAlias = np.ndarray | Sequence[float]


@dataclass(slots=True)
class SimulationResult:
    """Standardized sample means produced by one CLT simulation run."""

    distribution: str
    sample_size: int
    num_simulations: int
    standardized_means: np.ndarray
    metadata: dict[str, Any] = field(default_factory=dict)

    @property
    def count(self) -> int:
        return int(self.standardized_means.size)

    def mean(self) -> float:
        if self.count == 0:
            return float("nan")
        return float(np.mean(self.standardized_means))

    def std(self) -> float:
        if self.count == 0:
            return float("nan")
        return float(np.std(self.standardized_means))

    def to_frame(self) -> pd.DataFrame:
        """Return one row per repetition with its standardized mean."""
        return pd.DataFrame(
            {
                "repetition": np.arange(self.count),
                "z": self.standardized_means,
            }
        )


@dataclass(slots=True)
class Histogram:
    """Equal-width bins with raw counts and density estimates."""

    edges: np.ndarray
    counts: np.ndarray
    densities: np.ndarray

    @property
    def lower(self) -> np.ndarray:
        return self.edges[:-1]

    @property
    def upper(self) -> np.ndarray:
        return self.edges[1:]

    @property
    def widths(self) -> np.ndarray:
        return np.diff(self.edges)

    def to_frame(self) -> pd.DataFrame:
        return pd.DataFrame(
            {
                "lower": self.lower,
                "upper": self.upper,
                "count": self.counts,
                "density": self.densities,
            }
        )


@dataclass(slots=True)
class EcdfSteps:
    """Vertices of an empirical CDF drawn as a step path."""

    x: np.ndarray
    y: np.ndarray

    def to_frame(self) -> pd.DataFrame:
        return pd.DataFrame({"x": self.x, "y": self.y})


@dataclass(slots=True)
class DensityGrid:
    """Unnormalized joint density on a rectangular grid.

    ``values[j, i]`` holds the density at ``(x[i], y[j])``. Rows are always
    stored in ascending-``y`` order; renderers flip at draw time if needed.
    """

    x: np.ndarray
    y: np.ndarray
    dx: float
    dy: float
    values: np.ndarray

    @property
    def shape(self) -> tuple[int, int]:
        return (int(self.y.size), int(self.x.size))

    @property
    def total_mass(self) -> float:
        """Double Riemann sum over every cell."""
        return float(np.sum(self.values) * self.dx * self.dy)

    @property
    def marginal_x(self) -> np.ndarray:
        return np.sum(self.values, axis=0) * self.dy

    @property
    def marginal_y(self) -> np.ndarray:
        return np.sum(self.values, axis=1) * self.dx

    def bounds(self) -> tuple[float, float, float, float]:
        return (float(self.x[0]), float(self.x[-1]), float(self.y[0]), float(self.y[-1]))

    def to_frame(self) -> pd.DataFrame:
        """Return a long-form table with one row per grid node."""
        xx, yy = np.meshgrid(self.x, self.y)
        return pd.DataFrame(
            {
                "x": xx.ravel(),
                "y": yy.ravel(),
                "density": self.values.ravel(),
            }
        )


@dataclass(slots=True)
class Conditionals:
    """Normalized conditional slices through a :class:`DensityGrid`."""

    x0: float
    y0: float
    x_given_y: np.ndarray
    y_given_x: np.ndarray
    clamped: bool = False


__all__ = [
    "ArrayLike",
    "SimulationResult",
    "Histogram",
    "EcdfSteps",
    "DensityGrid",
    "Conditionals",
]
