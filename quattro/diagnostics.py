"""
Fit-quality metrics, reference fits and a side-by-side comparison table.

scikit-learn and statsmodels are only used here, as independent reference
points for the from-scratch estimators.
"""

from __future__ import annotations

from typing import Dict

import numpy as np
import pandas as pd
from sklearn.linear_model import LinearRegression
from statsmodels.api import OLS, add_constant

from .models import FittedLine, ThetaVector
from .samples import SampleSet


# ---------- metrics ----------
def r2_score(y_true: np.ndarray, y_pred: np.ndarray) -> float:
    ss_res = np.sum((y_true - y_pred) ** 2)
    ss_tot = np.sum((y_true - np.mean(y_true)) ** 2)
    if ss_tot == 0:
        return 1.0 if ss_res == 0 else float("-inf")
    return float(1.0 - ss_res / ss_tot)


def mse(y_true: np.ndarray, y_pred: np.ndarray) -> float:
    return float(np.mean((y_true - y_pred) ** 2))


def residual_stats(y_true: np.ndarray, y_pred: np.ndarray) -> dict:
    res = y_true - y_pred
    return {
        "mean": float(res.mean()),
        "std": float(res.std(ddof=1)),
        "max_abs": float(np.max(np.abs(res))),
    }


def design_condition_number(samples: SampleSet) -> float:
    """SVD condition number of [1, x]; large values mean the normal equations get sketchy."""
    svals = np.linalg.svd(samples.design_matrix(), compute_uv=False)
    if svals[-1] == 0:
        return float("inf")
    return float(svals[0] / svals[-1])


# ---------- reference fits ----------
def reference_fit_sklearn(samples: SampleSet) -> FittedLine:
    lr = LinearRegression(fit_intercept=True).fit(samples.x.reshape(-1, 1), samples.y)
    return FittedLine(ThetaVector(float(lr.intercept_), float(lr.coef_[0])), method="sklearn")


def reference_fit_statsmodels(samples: SampleSet) -> FittedLine:
    res = OLS(samples.y, add_constant(samples.x, has_constant="add")).fit()
    params = np.asarray(res.params, dtype=float)
    return FittedLine(ThetaVector.from_array(params), method="statsmodels")


# ---------- comparison ----------
def compare_estimators(samples: SampleSet, lines: Dict[str, FittedLine]) -> pd.DataFrame:
    """One row per method: theta0, theta1, R^2 and MSE on `samples`."""
    rows = []
    for label, line in lines.items():
        y_hat = line.predict(samples.x)
        rows.append({
            "method": label,
            "theta0": line.intercept,
            "theta1": line.slope,
            "r2": r2_score(samples.y, y_hat),
            "mse": mse(samples.y, y_hat),
        })
    return pd.DataFrame(rows).set_index("method")
