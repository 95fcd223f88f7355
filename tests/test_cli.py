from pathlib import Path

import matplotlib
import pandas as pd
from typer.testing import CliRunner

from statdemos import __version__
from statdemos.cli import app

matplotlib.use("Agg")

runner = CliRunner()


def test_registry_command_lists_distributions() -> None:
    result = runner.invoke(app, ["registry"])
    assert result.exit_code == 0
    assert "Uniform" in result.stdout
    assert "Exponential" in result.stdout
    assert "Bernoulli" in result.stdout


def test_version_option() -> None:
    result = runner.invoke(app, ["--verbose"])
    assert result.exit_code == 0
    assert __version__ in result.stdout


def test_clt_command_writes_csv(tmp_path: Path) -> None:
    output = tmp_path / "means.csv"
    result = runner.invoke(
        app,
        ["clt", "-d", "Exponential", "-n", "30", "-m", "400", "--seed", "5", "--csv", str(output)],
    )
    assert result.exit_code == 0
    assert "Exponential" in result.stdout
    frame = pd.read_csv(output)
    assert len(frame) == 400
    assert abs(frame["z"].mean()) < 0.2


def test_clt_command_unknown_distribution() -> None:
    result = runner.invoke(app, ["clt", "-d", "Cauchy"])
    assert result.exit_code == 1
    assert "Unknown distribution" in result.stdout


def test_clt_command_uses_config_defaults(tmp_path: Path) -> None:
    config = tmp_path / "demo.yaml"
    config.write_text("distribution: Bernoulli\nnum_simulations: 64\nseed: 1\n", encoding="utf-8")
    output = tmp_path / "means.csv"
    result = runner.invoke(app, ["clt", "--config", str(config), "--csv", str(output)])
    assert result.exit_code == 0
    assert "Bernoulli" in result.stdout
    assert len(pd.read_csv(output)) == 64


def test_clt_command_renders_plot(tmp_path: Path) -> None:
    output = tmp_path / "clt.png"
    result = runner.invoke(app, ["clt", "-n", "5", "-m", "200", "--plot", str(output)])
    assert result.exit_code == 0
    assert output.exists() and output.stat().st_size > 0


def test_bivariate_command_outputs_summary(tmp_path: Path) -> None:
    output = tmp_path / "grid.csv"
    plot = tmp_path / "joint.png"
    result = runner.invoke(
        app,
        [
            "bivariate",
            "--x0",
            "0.5",
            "--y0",
            "1.0",
            "--conditional-x",
            "--conditional-y",
            "--hdr",
            "--csv",
            str(output),
            "--plot",
            str(plot),
        ],
    )
    assert result.exit_code == 0
    assert "HDR" in result.stdout
    assert len(pd.read_csv(output)) == 81 * 121
    assert plot.exists()


def test_bivariate_command_reports_clamping() -> None:
    result = runner.invoke(app, ["bivariate", "--x0", "9", "--y0", "0"])
    assert result.exit_code == 0
    assert "clamped" in result.stdout


def test_clt_command_rejects_negative_seed() -> None:
    result = runner.invoke(app, ["clt", "--seed", "-1", "-m", "10"])
    assert result.exit_code == 1
    assert isinstance(result.exception, SystemExit)


def test_clt_command_rejects_non_string_distribution(tmp_path: Path) -> None:
    config = tmp_path / "bad.yaml"
    config.write_text("distribution: 5\n", encoding="utf-8")
    result = runner.invoke(app, ["clt", "--config", str(config)])
    assert result.exit_code == 1
    assert isinstance(result.exception, SystemExit)
    assert "distribution" in result.stdout
