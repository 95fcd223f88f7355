"""Empirical and analytic summaries of standardized sample means."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Literal

import numpy as np

from .core import ArrayLike, EcdfSteps, Histogram, SimulationResult

__all__ = [
    "DEFAULT_DOMAIN",
    "DEFAULT_BINS",
    "CurveSummary",
    "erf",
    "normal_pdf",
    "normal_cdf",
    "normal_curve",
    "histogram_density",
    "ecdf_steps",
    "max_cdf_deviation",
    "summarize",
]

DEFAULT_DOMAIN: tuple[float, float] = (-4.0, 4.0)
DEFAULT_BINS = 40

# Abramowitz & Stegun 7.1.26, |error| <= 1.5e-7
_A1 = 0.254829592
_A2 = -0.284496736
_A3 = 1.421413741
_A4 = -1.453152027
_A5 = 1.061405429
_P = 0.3275911


def erf(x: ArrayLike | float) -> np.ndarray | float:
    """Rational approximation of the error function."""
    arr = np.asarray(x, dtype=float)
    sign = np.where(arr >= 0, 1.0, -1.0)
    ax = np.abs(arr)
    t = 1.0 / (1.0 + _P * ax)
    poly = ((((_A5 * t + _A4) * t + _A3) * t + _A2) * t + _A1) * t
    y = sign * (1.0 - poly * np.exp(-ax * ax))
    if y.ndim == 0:
        return float(y)
    return y


def normal_pdf(x: ArrayLike | float) -> np.ndarray | float:
    arr = np.asarray(x, dtype=float)
    y = np.exp(-0.5 * arr * arr) / math.sqrt(2.0 * math.pi)
    if y.ndim == 0:
        return float(y)
    return y


def normal_cdf(x: ArrayLike | float) -> np.ndarray | float:
    arr = np.asarray(x, dtype=float)
    y = 0.5 * (1.0 + np.asarray(erf(arr / math.sqrt(2.0))))
    if y.ndim == 0:
        return float(y)
    return y


def normal_curve(
    kind: Literal["pdf", "cdf"],
    *,
    domain: tuple[float, float] = DEFAULT_DOMAIN,
    points: int = 101,
) -> tuple[np.ndarray, np.ndarray]:
    """Sample the standard normal PDF or CDF on an even grid for overlays."""
    if kind not in {"pdf", "cdf"}:
        raise ValueError("kind must be 'pdf' or 'cdf'.")
    xs = np.linspace(domain[0], domain[1], points)
    func = normal_pdf if kind == "pdf" else normal_cdf
    return xs, np.asarray(func(xs), dtype=float)


def histogram_density(
    values: ArrayLike,
    *,
    total: int | None = None,
    domain: tuple[float, float] = DEFAULT_DOMAIN,
    bins: int = DEFAULT_BINS,
) -> Histogram:
    """Bin ``values`` over ``domain`` and convert counts to densities.

    Values outside the domain are dropped; the last bin is closed on the right.
    Each density is ``count / total / width`` where ``total`` defaults to the
    number of values supplied. Pass the repetition count to keep the scale of a
    simulation whose output was filtered.
    """
    if bins < 1:
        raise ValueError("bins must be a positive integer.")
    lower, upper = domain
    if not upper > lower:
        raise ValueError("domain upper bound must exceed the lower bound.")
    data = np.asarray(values, dtype=float)
    edges = np.linspace(lower, upper, bins + 1)
    counts, _ = np.histogram(data, bins=edges)
    denominator = data.size if total is None else total
    if denominator <= 0:
        densities = np.zeros(bins, dtype=float)
    else:
        densities = counts / float(denominator) / np.diff(edges)
    return Histogram(edges=edges, counts=counts.astype(int), densities=densities)


def ecdf_steps(values: ArrayLike) -> EcdfSteps:
    """Return the vertices of the empirical CDF as a drawable step path.

    The path starts at ``(x_(1), 0)`` and, for each sorted observation, visits
    ``(x_(i), i/m)`` then ``(x_(i), (i+1)/m)``, so every observation contributes a
    vertical rise of ``1/m``.
    """
    data = np.sort(np.asarray(values, dtype=float).ravel())
    m = data.size
    if m == 0:
        return EcdfSteps(x=np.empty(0, dtype=float), y=np.empty(0, dtype=float))
    levels = np.arange(m + 1, dtype=float) / m
    xs = np.empty(2 * m + 1, dtype=float)
    ys = np.empty(2 * m + 1, dtype=float)
    xs[0] = data[0]
    ys[0] = 0.0
    xs[1::2] = data
    xs[2::2] = data
    ys[1::2] = levels[:-1]
    ys[2::2] = levels[1:]
    return EcdfSteps(x=xs, y=ys)


def max_cdf_deviation(values: ArrayLike) -> float:
    """Largest vertical gap between the ECDF and the standard normal CDF."""
    data = np.sort(np.asarray(values, dtype=float).ravel())
    m = data.size
    if m == 0:
        return float("nan")
    cdf = np.asarray(normal_cdf(data), dtype=float)
    upper = np.arange(1, m + 1) / m - cdf
    lower = cdf - np.arange(0, m) / m
    return float(max(upper.max(), lower.max()))


@dataclass(slots=True)
class CurveSummary:
    """Everything the CLT panels draw for one simulation."""

    histogram: Histogram
    ecdf: EcdfSteps
    pdf_curve: tuple[np.ndarray, np.ndarray]
    cdf_curve: tuple[np.ndarray, np.ndarray]


def summarize(
    result: SimulationResult,
    *,
    domain: tuple[float, float] = DEFAULT_DOMAIN,
    bins: int = DEFAULT_BINS,
) -> CurveSummary:
    return CurveSummary(
        histogram=histogram_density(
            result.standardized_means,
            total=result.num_simulations,
            domain=domain,
            bins=bins,
        ),
        ecdf=ecdf_steps(result.standardized_means),
        pdf_curve=normal_curve("pdf", domain=domain),
        cdf_curve=normal_curve("cdf", domain=domain),
    )
