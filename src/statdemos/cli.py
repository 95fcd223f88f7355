"""Typer-based CLI entry point."""

from __future__ import annotations

import logging
import math
import numbers
from pathlib import Path
from typing import Any

import numpy as np
import typer
from rich.console import Console
from rich.table import Table

from . import __version__
from .bivariate import build_grid, conditionals, hdr_threshold
from .config import DemoConfig, load_config
from .distributions import get_distribution, list_distributions
from .sampling import simulate
from .summary import max_cdf_deviation

app = typer.Typer(help="Statistical visualization demos (CLT and bivariate densities).")
console = Console()

VERBOSE_OPTION = typer.Option(False, "--verbose", "-v", help="Enable verbose output.")
VERSION_OPTION = typer.Option(False, "--version", help="Show version and exit.")

CONFIG_OPTION = typer.Option(
    None,
    "--config",
    "-c",
    help="YAML file with demo defaults (falls back to $STATDEMOS_CONFIG).",
    show_default=False,
)

DISTRIBUTION_OPTION = typer.Option(
    None,
    "--distribution",
    "-d",
    help="Registered distribution to sample from (see `statdemos registry`).",
    show_default=False,
)

SAMPLE_SIZE_OPTION = typer.Option(
    None,
    "--sample-size",
    "-n",
    min=0,
    help="Number of draws averaged per repetition.",
    show_default=False,
)

SIMULATIONS_OPTION = typer.Option(
    None,
    "--simulations",
    "-m",
    min=1,
    help="Number of repetitions.",
    show_default=False,
)

SEED_OPTION = typer.Option(None, "--seed", help="Seed for the random generator.")

PLOT_OPTION = typer.Option(
    None,
    "--plot",
    help="Write the rendered panels to this image path (png, svg, pdf).",
    show_default=False,
)

CSV_OPTION = typer.Option(
    None,
    "--csv",
    help="Write the computed values to this CSV path.",
    show_default=False,
)

X0_OPTION = typer.Option(None, "--x0", help="Conditioning x coordinate.", show_default=False)
Y0_OPTION = typer.Option(None, "--y0", help="Conditioning y coordinate.", show_default=False)

CONDITIONAL_X_OPTION = typer.Option(
    False,
    "--conditional-x/--marginal-x",
    help="Show p(x | y=y0) instead of the marginal p(x).",
    show_default=True,
)

CONDITIONAL_Y_OPTION = typer.Option(
    False,
    "--conditional-y/--marginal-y",
    help="Show p(y | x=x0) instead of the marginal p(y).",
    show_default=True,
)

HDR_OPTION = typer.Option(
    False,
    "--hdr/--no-hdr",
    help="Draw the 99% highest-density-region contour on the joint panel.",
    show_default=True,
)


@app.callback(invoke_without_command=True)
def cli_callback(  # noqa: B008
    ctx: typer.Context,
    verbose: bool = VERBOSE_OPTION,
    version: bool = VERSION_OPTION,
) -> None:
    if verbose:
        logging.basicConfig(level=logging.DEBUG)
    if verbose or version:
        console.print(f"[bold green]statdemos {__version__}[/bold green]")
    if ctx.invoked_subcommand is None and not ctx.resilient_parsing:
        raise typer.Exit()


def _load_config(path: Path | None) -> DemoConfig:
    try:
        return load_config(path)
    except ValueError as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(code=1) from exc


def _save_figure(fig: Any, path: Path) -> None:
    fig.savefig(path)
    console.print(f"[green]Figure written[/green] {path}")


@app.command()
def registry() -> None:
    """List registered distributions."""
    table = Table(title="Registered Distributions")
    table.add_column("Name")
    table.add_column("Mean", justify="right")
    table.add_column("Std", justify="right")
    table.add_column("Description", overflow="fold")
    for name in list_distributions():
        dist = get_distribution(name)
        table.add_row(
            dist.name,
            _format_metric(dist.mean),
            _format_metric(dist.std),
            dist.notes or "",
        )
    console.print(table)


@app.command()
def clt(  # noqa: B008
    distribution: str | None = DISTRIBUTION_OPTION,
    sample_size: int | None = SAMPLE_SIZE_OPTION,
    simulations: int | None = SIMULATIONS_OPTION,
    seed: int | None = SEED_OPTION,
    config: Path | None = CONFIG_OPTION,
    plot: Path | None = PLOT_OPTION,
    csv: Path | None = CSV_OPTION,
) -> None:
    """Simulate standardized sample means and compare them with N(0, 1)."""
    settings = _load_config(config).merged(
        distribution=distribution,
        sample_size=sample_size,
        num_simulations=simulations,
        seed=seed,
    )
    try:
        rng = np.random.default_rng(settings.seed)
        result = simulate(
            settings.distribution,
            settings.sample_size,
            settings.num_simulations,
            random_state=rng,
        )
    except (KeyError, ValueError) as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(code=1) from exc

    table = Table(title="Standardized Sample Means")
    table.add_column("Distribution", no_wrap=True)
    table.add_column("n", justify="right")
    table.add_column("m", justify="right")
    table.add_column("Count", justify="right")
    table.add_column("Mean", justify="right")
    table.add_column("Std", justify="right")
    table.add_column("Max |ECDF-Phi|", justify="right")
    table.add_row(
        result.distribution,
        str(result.sample_size),
        str(result.num_simulations),
        str(result.count),
        _format_metric(result.mean()),
        _format_metric(result.std()),
        _format_metric(max_cdf_deviation(result.standardized_means)),
    )
    console.print(table)

    if csv is not None:
        result.to_frame().to_csv(csv, index=False)
        console.print(f"[green]Standardized means written[/green] {csv} (rows={result.count})")
    if plot is not None:
        from .plotting import plot_clt

        _save_figure(plot_clt(result, bins=settings.bins), plot)


@app.command()
def bivariate(  # noqa: B008
    x0: float | None = X0_OPTION,
    y0: float | None = Y0_OPTION,
    conditional_x: bool = CONDITIONAL_X_OPTION,
    conditional_y: bool = CONDITIONAL_Y_OPTION,
    hdr: bool = HDR_OPTION,
    config: Path | None = CONFIG_OPTION,
    plot: Path | None = PLOT_OPTION,
    csv: Path | None = CSV_OPTION,
) -> None:
    """Summarize the joint density, its marginals, and conditionals at (x0, y0)."""
    settings = _load_config(config).merged(x0=x0, y0=y0)
    try:
        grid = build_grid(step=settings.step)
    except ValueError as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(code=1) from exc
    cond = conditionals(settings.x0, settings.y0, grid=grid)
    if cond.clamped:
        console.print(
            f"[yellow]Query point clamped to grid bounds: ({cond.x0:.2f}, {cond.y0:.2f})[/yellow]"
        )

    table = Table(title="Bivariate Density Grid")
    table.add_column("Quantity")
    table.add_column("Value", justify="right")
    rows, cols = grid.shape
    table.add_row("Grid (rows x cols)", f"{rows} x {cols}")
    table.add_row("Joint mass", _format_metric(grid.total_mass))
    table.add_row("Marginal x mass", _format_metric(float(np.sum(grid.marginal_x) * grid.dx)))
    table.add_row("Marginal y mass", _format_metric(float(np.sum(grid.marginal_y) * grid.dy)))
    table.add_row("99% HDR threshold", _format_metric(hdr_threshold(grid)))
    table.add_row(
        f"argmax p(x | y={cond.y0:.2f})",
        _format_metric(grid.x[int(np.argmax(cond.x_given_y))]),
    )
    table.add_row(
        f"argmax p(y | x={cond.x0:.2f})",
        _format_metric(grid.y[int(np.argmax(cond.y_given_x))]),
    )
    console.print(table)

    if csv is not None:
        frame = grid.to_frame()
        frame.to_csv(csv, index=False)
        console.print(f"[green]Density grid written[/green] {csv} (rows={len(frame)})")
    if plot is not None:
        from .plotting import plot_bivariate

        _save_figure(
            plot_bivariate(
                grid,
                cond.x0,
                cond.y0,
                show_conditional_x=conditional_x,
                show_conditional_y=conditional_y,
                show_hdr=hdr,
            ),
            plot,
        )


def main_entry() -> None:
    app()


def main() -> None:  # pragma: no cover - console entry
    main_entry()


def _format_metric(value: Any) -> str:
    if value is None:
        return "-"
    if isinstance(value, numbers.Real):
        val = float(value)
        if math.isnan(val) or math.isinf(val):
            return "-"
        return f"{val:.4f}"
    return str(value)
