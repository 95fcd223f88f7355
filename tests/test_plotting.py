import matplotlib
import numpy as np
import pytest

from statdemos.bivariate import build_grid
from statdemos.core import SimulationResult
from statdemos.plotting import plot_bivariate, plot_clt
from statdemos.sampling import simulate

matplotlib.use("Agg")


@pytest.fixture(scope="module")
def grid():
    return build_grid()


def test_plot_clt_has_two_panels() -> None:
    result = simulate("Skewed Discrete", 10, 300, random_state=np.random.default_rng(8))
    fig = plot_clt(result)
    ax_pdf, ax_cdf = fig.axes
    assert len(ax_pdf.patches) == 40
    assert ax_pdf.get_ylim()[1] >= 0.45
    assert ax_cdf.get_ylim() == (0.0, 1.0)
    assert "PDF" in ax_pdf.get_title()


def test_plot_clt_handles_empty_result() -> None:
    result = SimulationResult(
        distribution="Uniform",
        sample_size=0,
        num_simulations=10,
        standardized_means=np.empty(0),
    )
    fig = plot_clt(result)
    assert len(fig.axes) == 2


def test_plot_bivariate_uses_marginals_by_default(grid) -> None:
    fig = plot_bivariate(grid)
    titles = [ax.get_title() for ax in fig.axes if ax.get_visible()]
    assert "Marginal p(x)" in titles
    assert "Marginal p(y)" in titles
    line = next(ax for ax in fig.axes if ax.get_title() == "Marginal p(x)").lines[0]
    assert np.allclose(line.get_ydata(), grid.marginal_x)


def test_plot_bivariate_conditionals_and_guides(grid) -> None:
    fig = plot_bivariate(
        grid,
        0.5,
        1.0,
        show_conditional_x=True,
        show_conditional_y=True,
        show_hdr=True,
    )
    titles = [ax.get_title() for ax in fig.axes]
    assert "p(x | y=1.0)" in titles
    assert "p(y | x=0.5)" in titles
    joint = fig.axes[0]
    assert joint.get_title() == "Joint Distribution p(x,y)"
    assert len(joint.collections) >= 3
