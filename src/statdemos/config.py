"""YAML-backed defaults for the demo entry points."""

from __future__ import annotations

import logging
import numbers
import os
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "STATDEMOS_CONFIG"


@dataclass(slots=True)
class DemoConfig:
    """Parameters shared by the CLT and bivariate demos."""

    distribution: str = "Uniform"
    sample_size: int = 10
    num_simulations: int = 2000
    seed: int | None = None
    bins: int = 40
    x0: float = 0.0
    y0: float = 0.0
    step: float = 0.05

    def merged(self, **overrides: Any) -> DemoConfig:
        """Return a copy with every non-``None`` override applied."""
        updates = {key: value for key, value in overrides.items() if value is not None}
        return replace(self, **updates)


def _as_int(key: str, value: Any) -> int:
    # bool is an int subclass; YAML "true" is never a count
    if isinstance(value, bool):
        raise ValueError(f"'{key}' must be an integer, got {value!r}.")
    if isinstance(value, str):
        value = value.strip()
        try:
            return int(value)
        except ValueError as exc:
            raise ValueError(f"'{key}' must be an integer, got {value!r}.") from exc
    if isinstance(value, numbers.Integral):
        return int(value)
    if isinstance(value, numbers.Real) and float(value).is_integer():
        return int(value)
    raise ValueError(f"'{key}' must be an integer, got {value!r}.")


def _as_float(key: str, value: Any) -> float:
    if isinstance(value, bool):
        raise ValueError(f"'{key}' must be a number, got {value!r}.")
    try:
        return float(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"'{key}' must be a number, got {value!r}.") from exc


def _coerce(data: dict[str, Any], path: Path) -> DemoConfig:
    known = {f.name for f in fields(DemoConfig)}
    kwargs: dict[str, Any] = {}
    for key, value in data.items():
        if key not in known:
            logger.warning("Ignoring unknown config key '%s' in %s", key, path)
            continue
        kwargs[key] = value
    try:
        config = DemoConfig(**kwargs)
        if not isinstance(config.distribution, str):
            raise ValueError(f"'distribution' must be a name, got {config.distribution!r}.")
        config.sample_size = _as_int("sample_size", config.sample_size)
        config.num_simulations = _as_int("num_simulations", config.num_simulations)
        config.bins = _as_int("bins", config.bins)
        config.x0 = _as_float("x0", config.x0)
        config.y0 = _as_float("y0", config.y0)
        config.step = _as_float("step", config.step)
        if config.seed is not None:
            config.seed = _as_int("seed", config.seed)
            if config.seed < 0:
                raise ValueError(f"'seed' must be non-negative, got {config.seed}.")
    except (TypeError, ValueError) as exc:
        raise ValueError(f"Invalid value in config {path}: {exc}") from exc
    return config


def load_config(path: str | os.PathLike[str] | None = None) -> DemoConfig:
    """Load demo defaults from YAML, falling back to ``$STATDEMOS_CONFIG``."""
    if path is None:
        env_path = os.environ.get(CONFIG_ENV_VAR)
        if not env_path:
            return DemoConfig()
        path = env_path
    path = Path(path)
    if not path.exists():
        logger.debug("Skipping demo config %s (file not found)", path)
        return DemoConfig()

    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ValueError(f"Failed to parse config {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ValueError(f"Config {path} must contain a mapping at the top level.")
    return _coerce(data, path)


__all__ = ["CONFIG_ENV_VAR", "DemoConfig", "load_config"]
