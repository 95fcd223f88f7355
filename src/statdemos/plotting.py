"""matplotlib panels for the CLT and bivariate demos."""

from __future__ import annotations

import numpy as np
from matplotlib.figure import Figure

from .bivariate import conditionals, hdr_threshold
from .core import DensityGrid, SimulationResult
from .summary import summarize

CONTOUR_LEVELS = 20


def plot_clt(result: SimulationResult, *, bins: int = 40) -> Figure:
    """Density histogram and ECDF panels with standard normal overlays."""
    summary = summarize(result, bins=bins)
    fig = Figure(figsize=(10, 4))
    ax_pdf, ax_cdf = fig.subplots(1, 2)

    hist = summary.histogram
    ax_pdf.bar(
        hist.lower,
        hist.densities,
        width=hist.widths,
        align="edge",
        color="skyblue",
        edgecolor="white",
    )
    ax_pdf.plot(*summary.pdf_curve, color="red", linewidth=2)
    peak = float(hist.densities.max()) if hist.densities.size else 0.0
    ax_pdf.set_ylim(0.0, max(0.45, peak * 1.15))
    ax_pdf.set_xlim(hist.edges[0], hist.edges[-1])
    ax_pdf.set_title("Distribution of Standardized Sample Mean (PDF)")

    ax_cdf.plot(summary.ecdf.x, summary.ecdf.y, color="skyblue", linewidth=3)
    ax_cdf.plot(*summary.cdf_curve, color="red", linewidth=2)
    ax_cdf.set_ylim(0.0, 1.0)
    ax_cdf.set_xlim(hist.edges[0], hist.edges[-1])
    ax_cdf.set_title("CDF of Standardized Sample Mean")

    fig.suptitle(f"{result.distribution}, n={result.sample_size}, m={result.num_simulations}")
    return fig


def plot_bivariate(
    grid: DensityGrid,
    x0: float = 0.0,
    y0: float = 0.0,
    *,
    show_conditional_x: bool = False,
    show_conditional_y: bool = False,
    show_hdr: bool = False,
) -> Figure:
    """Joint contour panel plus marginal or conditional curves for each axis."""
    cond = conditionals(x0, y0, grid=grid)
    fig = Figure(figsize=(8, 7.5))
    axes = fig.subplots(2, 2)
    ax_joint, ax_y = axes[0]
    ax_x = axes[1][0]
    axes[1][1].set_visible(False)

    x_lo, x_hi, y_lo, y_hi = grid.bounds()
    vmin, vmax = float(grid.values.min()), float(grid.values.max())
    levels = np.linspace(vmin, vmax, CONTOUR_LEVELS)
    # grid rows ascend in y, which matches contourf's lower-left origin
    ax_joint.contourf(grid.x, grid.y, grid.values, levels=levels, cmap="Blues")
    if show_hdr:
        ax_joint.contour(
            grid.x, grid.y, grid.values, levels=[hdr_threshold(grid)], colors="black"
        )
    if show_conditional_x:
        ax_joint.hlines(cond.y0, x_lo, x_hi, colors="red", linestyles="dashed", linewidth=2)
    if show_conditional_y:
        ax_joint.vlines(cond.x0, y_lo, y_hi, colors="red", linestyles="dashed", linewidth=2)
    ax_joint.set_xlim(x_lo, x_hi)
    ax_joint.set_ylim(y_lo, y_hi)
    ax_joint.set_title("Joint Distribution p(x,y)")

    x_data = cond.x_given_y if show_conditional_x else grid.marginal_x
    x_colour = "red" if show_conditional_x else "steelblue"
    ax_x.plot(grid.x, x_data, color=x_colour, linewidth=2)
    ax_x.fill_between(grid.x, 0.0, x_data, color=x_colour, alpha=0.1)
    ax_x.set_ylim(0.0, float(np.max(x_data)) * 1.1)
    ax_x.set_xlim(x_lo, x_hi)
    ax_x.set_xlabel("x")
    ax_x.set_ylabel("Density")
    ax_x.set_title(f"p(x | y={cond.y0:.1f})" if show_conditional_x else "Marginal p(x)")

    y_data = cond.y_given_x if show_conditional_y else grid.marginal_y
    y_colour = "red" if show_conditional_y else "steelblue"
    ax_y.plot(y_data, grid.y, color=y_colour, linewidth=2)
    ax_y.fill_betweenx(grid.y, 0.0, y_data, color=y_colour, alpha=0.1)
    ax_y.set_xlim(0.0, float(np.max(y_data)) * 1.1)
    ax_y.set_ylim(y_lo, y_hi)
    ax_y.set_xlabel("Density")
    ax_y.set_ylabel("y")
    ax_y.set_title(f"p(y | x={cond.x0:.1f})" if show_conditional_y else "Marginal p(y)")

    fig.tight_layout()
    return fig


__all__ = ["plot_clt", "plot_bivariate"]
