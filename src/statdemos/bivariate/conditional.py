"""Conditional slices through the bivariate density."""

from __future__ import annotations

import logging

import numpy as np

from ..core import Conditionals, DensityGrid
from .grid import build_grid, density

logger = logging.getLogger(__name__)


def _normalize(values: np.ndarray, step: float) -> np.ndarray:
    integral = float(np.sum(values) * step)
    if integral <= 0:
        raise ValueError("Conditional slice has no mass; cannot normalize.")
    return values / integral


def clamp_point(grid: DensityGrid, x0: float, y0: float) -> tuple[float, float, bool]:
    """Clamp ``(x0, y0)`` into the grid bounds, reporting whether it moved."""
    x_lo, x_hi, y_lo, y_hi = grid.bounds()
    cx = float(np.clip(x0, x_lo, x_hi))
    cy = float(np.clip(y0, y_lo, y_hi))
    return cx, cy, (cx != x0 or cy != y0)


def conditional_x_given_y(grid: DensityGrid, y0: float) -> np.ndarray:
    """``p(x | y=y0)`` on ``grid.x``, normalized so ``sum * dx == 1``."""
    return _normalize(density(grid.x, y0), grid.dx)


def conditional_y_given_x(grid: DensityGrid, x0: float) -> np.ndarray:
    """``p(y | x=x0)`` on ``grid.y``, normalized so ``sum * dy == 1``."""
    return _normalize(density(x0, grid.y), grid.dy)


def conditionals(x0: float, y0: float, *, grid: DensityGrid | None = None) -> Conditionals:
    """Evaluate both conditional densities through the query point ``(x0, y0)``.

    Query coordinates outside the grid are clamped to its edges.
    """
    grid = grid or build_grid()
    qx, qy, clamped = clamp_point(grid, float(x0), float(y0))
    if clamped:
        logger.warning(
            "Query point (%g, %g) lies outside the grid; clamped to (%g, %g).", x0, y0, qx, qy
        )
    return Conditionals(
        x0=qx,
        y0=qy,
        x_given_y=conditional_x_given_y(grid, qy),
        y_given_x=conditional_y_given_x(grid, qx),
        clamped=clamped,
    )


__all__ = [
    "clamp_point",
    "conditional_x_given_y",
    "conditional_y_given_x",
    "conditionals",
]
