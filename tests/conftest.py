import numpy as np
import pytest

from quattro import SampleSet, simulate_linear

THETA_TRUE = (2.0, 3.0)


@pytest.fixture
def exact_line() -> SampleSet:
    """x = 0, 0.01, ..., 1.0 and y = 3x + 2, no noise."""
    x = np.linspace(0.0, 1.0, 101)
    return SampleSet(x, 3.0 * x + 2.0)


@pytest.fixture
def noisy_line() -> SampleSet:
    return simulate_linear(*THETA_TRUE, n=101, noise=0.05, seed=11)


@pytest.fixture
def scattered() -> SampleSet:
    """Irregular x with a non-trivial offset, so the two OLS routes take different paths."""
    rng = np.random.default_rng(2024)
    x = rng.uniform(-3.0, 5.0, size=60)
    y = -1.25 + 0.8 * x + rng.normal(0.0, 0.7, size=60)
    return SampleSet(x, y)
