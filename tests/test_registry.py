import importlib
import math

import numpy as np
import pytest
from scipy import stats

from statdemos.distributions import (
    SKEWED_DISCRETE_LAW,
    DiscreteLaw,
    Distribution,
    clear_registry,
    draw,
    get_distribution,
    list_distributions,
    register_distribution,
)


def _reload_registry() -> None:
    """Reload the distributions module to restore built-ins after tests."""
    import statdemos.distributions as dist_module

    dist_module.clear_registry()
    importlib.reload(dist_module)


def test_default_registry_contains_four_distributions() -> None:
    names = list(list_distributions())
    assert names == ["bernoulli", "exponential", "skewed discrete", "uniform"]
    assert get_distribution("Skewed Discrete").name == "Skewed Discrete"


def test_unknown_distribution_fails_fast() -> None:
    with pytest.raises(KeyError, match="Unknown distribution"):
        get_distribution("cauchy")


@pytest.mark.parametrize(
    "name,law",
    [
        ("Uniform", stats.uniform(loc=0.0, scale=1.0)),
        ("Exponential", stats.expon(scale=1.0)),
        ("Bernoulli", stats.bernoulli(0.5)),
        ("Skewed Discrete", stats.rv_discrete(values=([0, 1, 10], [0.7, 0.2, 0.1]))),
    ],
)
def test_declared_moments_match_sampling_law(name: str, law) -> None:
    dist = get_distribution(name)
    assert dist.mean == pytest.approx(law.mean(), abs=1e-12)
    assert dist.std == pytest.approx(law.std(), abs=1e-12)


def test_skewed_discrete_moments_are_exact() -> None:
    assert SKEWED_DISCRETE_LAW.mean == pytest.approx(1.2)
    assert SKEWED_DISCRETE_LAW.variance == pytest.approx(8.76)
    assert get_distribution("Skewed Discrete").std == pytest.approx(math.sqrt(8.76))


def test_skewed_discrete_partitions_unit_interval() -> None:
    class _FixedUniforms:
        def __init__(self, values: list[float]) -> None:
            self._values = np.asarray(values)

        def random(self, size: int) -> np.ndarray:
            return self._values[:size]

    uniforms = [0.0, 0.69, 0.7, 0.85, 0.9, 0.999]
    rng = _FixedUniforms(uniforms)
    result = SKEWED_DISCRETE_LAW.sample(rng, len(uniforms))  # type: ignore[arg-type]
    assert result.tolist() == [0.0, 0.0, 1.0, 1.0, 10.0, 10.0]


@pytest.mark.parametrize("name", ["Uniform", "Exponential", "Bernoulli", "Skewed Discrete"])
def test_sampler_moments_converge(name: str) -> None:
    rng = np.random.default_rng(2024)
    dist = get_distribution(name)
    values = draw(name, 200_000, random_state=rng)
    assert values.shape == (200_000,)
    assert values.mean() == pytest.approx(dist.mean, abs=0.05 * max(dist.std, 1.0))
    assert values.std() == pytest.approx(dist.std, rel=0.03)


def test_sampler_supports() -> None:
    rng = np.random.default_rng(7)
    assert set(np.unique(draw("Bernoulli", 1000, random_state=rng))) == {0.0, 1.0}
    assert set(np.unique(draw("Skewed Discrete", 5000, random_state=rng))) == {0.0, 1.0, 10.0}
    uniform = draw("Uniform", 1000, random_state=rng)
    assert np.all((uniform >= 0.0) & (uniform < 1.0))
    assert np.all(draw("Exponential", 1000, random_state=rng) >= 0.0)


def test_discrete_law_rejects_unnormalized_probabilities() -> None:
    with pytest.raises(ValueError, match="sum to 1"):
        DiscreteLaw.from_pairs([(0.0, 0.5), (1.0, 0.4)])


def test_register_rejects_duplicates() -> None:
    with pytest.raises(ValueError, match="already registered"):
        register_distribution(get_distribution("Uniform"))


def test_custom_registration_round_trip() -> None:
    clear_registry()
    try:
        register_distribution(
            Distribution(
                name="Constant",
                mean=3.0,
                std=0.0,
                sampler=lambda rng, size: np.full(size, 3.0),
            )
        )
        assert list(list_distributions()) == ["constant"]
        assert np.allclose(draw("constant", 4), 3.0)
    finally:
        _reload_registry()
    assert "uniform" in list_distributions()
