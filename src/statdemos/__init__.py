"""Top-level package exports for statdemos."""

from __future__ import annotations

from importlib import metadata

__version__ = "0.1.0"

try:
    __version__ = metadata.version("statdemos")
except metadata.PackageNotFoundError:  # pragma: no cover - local dev fallback
    pass

from . import bivariate as bivariate  # noqa: F401
from . import core as core  # noqa: F401
from . import distributions as distributions  # noqa: F401
from .bivariate import build_grid, conditionals  # noqa: F401
from .core import Conditionals, DensityGrid, SimulationResult  # noqa: F401
from .sampling import simulate  # noqa: F401

__all__ = [
    "__version__",
    "bivariate",
    "core",
    "distributions",
    "Conditionals",
    "DensityGrid",
    "SimulationResult",
    "build_grid",
    "conditionals",
    "simulate",
]
