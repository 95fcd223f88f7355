"""Joint density grid for the banana-shaped bivariate demo."""

from __future__ import annotations

import logging

import numpy as np

from ..core import ArrayLike, DensityGrid

logger = logging.getLogger(__name__)

X_RANGE: tuple[float, float] = (-2.0, 2.0)
Y_RANGE: tuple[float, float] = (-2.0, 4.0)
GRID_STEP = 0.05
HDR_MASS = 0.99


def log_density(x: ArrayLike | float, y: ArrayLike | float) -> np.ndarray:
    """Unnormalized log-density ``-10 (y - x^2)^2 - y^2`` (broadcasts)."""
    xs = np.asarray(x, dtype=float)
    ys = np.asarray(y, dtype=float)
    return -10.0 * np.square(ys - np.square(xs)) - np.square(ys)


def density(x: ArrayLike | float, y: ArrayLike | float) -> np.ndarray:
    return np.exp(log_density(x, y))


def axis_grid(lower: float, upper: float, step: float) -> np.ndarray:
    """Evenly spaced axis from ``lower`` to ``upper`` inclusive.

    The stop value carries half a step of slack so floating point drift never
    drops the upper bound.
    """
    if step <= 0:
        raise ValueError("step must be positive.")
    if upper < lower:
        raise ValueError("upper bound must not be below the lower bound.")
    return np.arange(lower, upper + step / 2.0, step)


def build_grid(
    *,
    x_range: tuple[float, float] = X_RANGE,
    y_range: tuple[float, float] = Y_RANGE,
    step: float = GRID_STEP,
) -> DensityGrid:
    """Evaluate the joint density at every grid node, rows in ascending ``y``."""
    xs = axis_grid(*x_range, step)
    ys = axis_grid(*y_range, step)
    if xs.size < 2 or ys.size < 2:
        raise ValueError("Grid needs at least two nodes along each axis.")
    dx = float(xs[1] - xs[0])
    dy = float(ys[1] - ys[0])
    values = density(xs[np.newaxis, :], ys[:, np.newaxis])
    logger.debug("Built %dx%d density grid (dx=%g, dy=%g)", ys.size, xs.size, dx, dy)
    return DensityGrid(x=xs, y=ys, dx=dx, dy=dy, values=values)


def marginal_x(grid: DensityGrid) -> np.ndarray:
    """Integrate out ``y``: column sums scaled by ``dy``."""
    return grid.marginal_x


def marginal_y(grid: DensityGrid) -> np.ndarray:
    """Integrate out ``x``: row sums scaled by ``dx``, aligned with ``grid.y``."""
    return grid.marginal_y


def hdr_threshold(grid: DensityGrid, mass: float = HDR_MASS) -> float:
    """Smallest cell density whose superlevel set holds ``mass`` of the total.

    Cells are sorted in descending order and accumulated until the running
    fraction of total mass first reaches ``mass``.
    """
    if not 0.0 < mass <= 1.0:
        raise ValueError("mass must lie in (0, 1].")
    cells = np.sort(grid.values.ravel())[::-1]
    total = float(np.sum(cells))
    if total <= 0:
        raise ValueError("Density grid has no mass.")
    fraction = np.cumsum(cells) / total
    # guard against the last cumulative value landing just under 1.0
    index = min(int(np.searchsorted(fraction, mass, side="left")), cells.size - 1)
    return float(cells[index])


__all__ = [
    "X_RANGE",
    "Y_RANGE",
    "GRID_STEP",
    "HDR_MASS",
    "log_density",
    "density",
    "axis_grid",
    "build_grid",
    "marginal_x",
    "marginal_y",
    "hdr_threshold",
]
