"""Bivariate joint, marginal and conditional density demo."""

from __future__ import annotations

from .conditional import (
    clamp_point,
    conditional_x_given_y,
    conditional_y_given_x,
    conditionals,
)
from .grid import (
    GRID_STEP,
    HDR_MASS,
    X_RANGE,
    Y_RANGE,
    axis_grid,
    build_grid,
    density,
    hdr_threshold,
    log_density,
    marginal_x,
    marginal_y,
)

__all__ = [
    "GRID_STEP",
    "HDR_MASS",
    "X_RANGE",
    "Y_RANGE",
    "axis_grid",
    "build_grid",
    "density",
    "log_density",
    "marginal_x",
    "marginal_y",
    "hdr_threshold",
    "clamp_point",
    "conditional_x_given_y",
    "conditional_y_given_x",
    "conditionals",
]
