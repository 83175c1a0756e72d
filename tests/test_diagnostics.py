import numpy as np
import pytest

from quattro import ClosedFormEstimator, FittedLine, NormalEquationsEstimator, SampleSet, ThetaVector
from quattro.diagnostics import (
    compare_estimators,
    design_condition_number,
    mse,
    r2_score,
    reference_fit_sklearn,
    reference_fit_statsmodels,
    residual_stats,
)


@pytest.mark.parametrize("reference", [reference_fit_sklearn, reference_fit_statsmodels])
def test_reference_fits_agree_with_closed_form(scattered, reference):
    ref = reference(scattered)
    cf = ClosedFormEstimator().fit(scattered)
    np.testing.assert_allclose(ref.theta.as_array(), cf.theta.as_array(), rtol=1e-8)


def test_r2_and_mse(exact_line):
    y = exact_line.y
    assert r2_score(y, y) == 1.0
    assert mse(y, y) == 0.0
    assert r2_score(y, np.full_like(y, y.mean())) == pytest.approx(0.0, abs=1e-12)


def test_r2_constant_target():
    y = np.ones(5)
    assert r2_score(y, y) == 1.0
    assert r2_score(y, y + 1.0) == float("-inf")


def test_residual_stats():
    stats = residual_stats(np.array([1.0, 2.0, 3.0]), np.array([1.0, 1.0, 5.0]))
    assert stats["mean"] == pytest.approx(-1.0 / 3.0)
    assert stats["max_abs"] == 2.0
    assert set(stats) == {"mean", "std", "max_abs"}


def test_condition_number(exact_line):
    cond = design_condition_number(exact_line)
    assert 1.0 < cond < 10.0
    shifted = SampleSet(exact_line.x + 1e6, exact_line.y)
    assert design_condition_number(shifted) > 1e6


def test_compare_estimators(noisy_line):
    lines = {
        "closed_form": ClosedFormEstimator().fit(noisy_line),
        "normal_equations": NormalEquationsEstimator().fit(noisy_line),
        "flat": FittedLine(ThetaVector(float(noisy_line.y.mean()), 0.0)),
    }
    table = compare_estimators(noisy_line, lines)
    assert list(table.index) == ["closed_form", "normal_equations", "flat"]
    assert list(table.columns) == ["theta0", "theta1", "r2", "mse"]
    assert table.loc["closed_form", "r2"] > 0.99
    assert table.loc["flat", "r2"] == pytest.approx(0.0, abs=1e-12)
    assert table.loc["closed_form", "mse"] == pytest.approx(table.loc["normal_equations", "mse"])
