"""
Full-batch gradient descent on the sum of squared residuals.

    L(theta)    = ||y - X theta||^2
    grad L      = -2 X^T (y - X theta)
    theta      <- theta - lr * grad L

There is no convergence check: `iterations` is a hard stop, and a learning
rate that is too large simply diverges. The loss trajectory is returned so
the caller can see that happen.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

import numpy as np
import pandas as pd

from .errors import InvalidConfig
from .models import FittedLine, ThetaVector
from .samples import SampleSet


# ---------- config ----------
@dataclass(frozen=True)
class GradientDescentConfig:
    learning_rate: float = 0.005
    iterations: int = 2000
    initial_theta: Optional[ThetaVector] = None  # None -> N(0, 1) draws from `seed`
    seed: int = 0

    def __post_init__(self):
        if not (np.isfinite(self.learning_rate) and self.learning_rate > 0):
            raise InvalidConfig(f"learning_rate must be > 0, got {self.learning_rate}")
        if isinstance(self.iterations, bool) or int(self.iterations) != self.iterations or self.iterations <= 0:
            raise InvalidConfig(f"iterations must be a positive integer, got {self.iterations}")
        # 1000.0 is accepted above; range() needs the int
        object.__setattr__(self, "iterations", int(self.iterations))
        # None would make default_rng pull OS entropy
        if isinstance(self.seed, bool) or not isinstance(self.seed, (int, np.integer)):
            raise InvalidConfig(f"seed must be an integer, got {self.seed!r}")


# ---------- math helpers ----------
def squared_loss(Xb: np.ndarray, y: np.ndarray, theta: np.ndarray) -> float:
    r = y - Xb @ theta
    return float(r @ r)


def squared_loss_grad(Xb: np.ndarray, y: np.ndarray, theta: np.ndarray) -> np.ndarray:
    return -2.0 * (Xb.T @ (y - Xb @ theta))


def gradient_step(Xb: np.ndarray, y: np.ndarray, theta: np.ndarray, lr: float) -> np.ndarray:
    """
    One update on whichever rows are passed in. The estimator passes all of
    them (full batch); a mini-batch variant would pass a row subset.
    """
    return theta - lr * squared_loss_grad(Xb, y, theta)


# ---------- trajectory ----------
@dataclass(frozen=True)
class Trajectory:
    """Per-iteration (theta0, theta1, loss); loss is taken before that iteration's update."""
    theta0: np.ndarray
    theta1: np.ndarray
    loss: np.ndarray

    def __len__(self) -> int:
        return int(self.loss.shape[0])

    def to_frame(self) -> pd.DataFrame:
        df = pd.DataFrame({"theta0": self.theta0, "theta1": self.theta1, "loss": self.loss})
        df.index.name = "iteration"
        return df

    def diverged(self) -> bool:
        last = self.loss[-1]
        return bool(not np.isfinite(last) or last > self.loss[0])


# ---------- estimator ----------
class GradientDescentEstimator:
    name = "gradient_descent"

    def __init__(self, config: Optional[GradientDescentConfig] = None, verbose_every: int = 0):
        self.config = config if config is not None else GradientDescentConfig()
        self.verbose_every = verbose_every

    @staticmethod
    def initial_theta(config: GradientDescentConfig) -> np.ndarray:
        if config.initial_theta is not None:
            return config.initial_theta.as_array()
        rng = np.random.default_rng(config.seed)
        return rng.normal(size=2)

    def fit(self, samples: SampleSet, config: Optional[GradientDescentConfig] = None) -> FittedLine:
        line, _ = self.fit_with_trajectory(samples, config)
        return line

    def fit_with_trajectory(
        self, samples: SampleSet, config: Optional[GradientDescentConfig] = None
    ) -> Tuple[FittedLine, Trajectory]:
        cfg = config if config is not None else self.config
        Xb = samples.design_matrix()
        y = samples.y
        theta = self.initial_theta(cfg)

        history: List[Tuple[float, float, float]] = []
        with np.errstate(over="ignore", invalid="ignore"):
            for t in range(cfg.iterations):
                loss = squared_loss(Xb, y, theta)
                history.append((float(theta[0]), float(theta[1]), loss))

                if self.verbose_every and (t % self.verbose_every == 0):
                    print(f"[gd] iter {t:6d}  loss={loss:.6f}  theta=({theta[0]:.4f}, {theta[1]:.4f})")

                theta = gradient_step(Xb, y, theta, cfg.learning_rate)

        hist = np.asarray(history, dtype=float)
        traj = Trajectory(theta0=hist[:, 0], theta1=hist[:, 1], loss=hist[:, 2])
        return FittedLine(ThetaVector.from_array(theta), method=self.name), traj
