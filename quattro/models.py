"""
Fitted-parameter values returned by the estimators, and the common
estimator capability.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, Union, runtime_checkable

import numpy as np

from .samples import SampleSet

ArrayLike = Union[float, np.ndarray]


@dataclass(frozen=True)
class ThetaVector:
    """Intercept and slope of y = theta0 + theta1 * x."""
    theta0: float
    theta1: float

    def as_array(self) -> np.ndarray:
        return np.array([self.theta0, self.theta1], dtype=float)

    @classmethod
    def from_array(cls, beta: np.ndarray) -> "ThetaVector":
        beta = np.asarray(beta, dtype=float).ravel()
        return cls(float(beta[0]), float(beta[1]))


@dataclass(frozen=True)
class FittedLine:
    theta: ThetaVector
    method: str = ""

    @property
    def intercept(self) -> float:
        return self.theta.theta0

    @property
    def slope(self) -> float:
        return self.theta.theta1

    def predict(self, x: ArrayLike) -> ArrayLike:
        """y_hat = theta0 + theta1 * x, for a scalar or an array."""
        if np.ndim(x) == 0:
            return self.theta.theta0 + self.theta.theta1 * float(x)
        return self.theta.theta0 + self.theta.theta1 * np.asarray(x, dtype=float)

    def residuals(self, samples: SampleSet) -> np.ndarray:
        return samples.y - self.predict(samples.x)


@runtime_checkable
class Estimator(Protocol):
    """Anything that turns a SampleSet into a FittedLine."""

    name: str

    def fit(self, samples: SampleSet) -> FittedLine:
        ...
