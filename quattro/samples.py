"""
Paired (x, y) observations shared by every estimator.

SampleSet is the only thing the estimators need from the outside world.
Loaders, cleaners and synthetic-data generators produce one; nothing
downstream mutates it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Tuple

import numpy as np
import pandas as pd

from .errors import DimensionMismatch, InvalidValue


# ---------- helpers ----------
def add_bias(x: np.ndarray) -> np.ndarray:
    """Design matrix with an intercept column of 1s: rows are (1, x_i)."""
    x = np.asarray(x, dtype=float).reshape(-1, 1)
    return np.c_[np.ones((x.shape[0], 1)), x]


def _as_readonly(values, name: str) -> np.ndarray:
    arr = np.array(values, dtype=float)  # always a private copy
    if arr.ndim != 1:
        raise DimensionMismatch(f"{name} must be 1-D, got shape {arr.shape}")
    if not np.all(np.isfinite(arr)):
        bad = int(np.count_nonzero(~np.isfinite(arr)))
        raise InvalidValue(f"{name} contains {bad} non-finite value(s)")
    arr.setflags(write=False)
    return arr


# ---------- data model ----------
@dataclass(frozen=True, eq=False)
class SampleSet:
    """
    Immutable, index-aligned x/y observations (n >= 2, all finite).

    x and y are stored as read-only float64 arrays, so a SampleSet can be
    handed to several estimators (or threads) at once.
    """
    x: np.ndarray
    y: np.ndarray

    def __init__(self, x: Sequence[float], y: Sequence[float]):
        try:
            nx, ny = len(x), len(y)
        except TypeError as e:
            raise DimensionMismatch(f"x and y must be sequences: {e}") from e
        if nx != ny:
            raise DimensionMismatch(f"len(x)={nx} != len(y)={ny}")
        if nx < 2:
            raise DimensionMismatch(f"need at least 2 samples, got {nx}")
        object.__setattr__(self, "x", _as_readonly(x, "x"))
        object.__setattr__(self, "y", _as_readonly(y, "y"))

    @property
    def n(self) -> int:
        return int(self.x.shape[0])

    def __len__(self) -> int:
        return self.n

    def pair(self, i: int) -> Tuple[float, float]:
        return float(self.x[i]), float(self.y[i])

    def design_matrix(self) -> np.ndarray:
        """Fresh n x 2 matrix [1, x]; callers may not write back into the sample."""
        return add_bias(self.x)

    # ----- tabular boundary -----
    @classmethod
    def from_frame(cls, df: pd.DataFrame, x: str = "x", y: str = "y") -> "SampleSet":
        missing = [c for c in (x, y) if c not in df.columns]
        if missing:
            raise DimensionMismatch(f"columns not found: {missing}")
        return cls(df[x].to_numpy(dtype=float), df[y].to_numpy(dtype=float))

    def to_frame(self) -> pd.DataFrame:
        return pd.DataFrame({"x": self.x, "y": self.y})

    def __repr__(self) -> str:
        return f"SampleSet(n={self.n})"


def simulate_linear(
    theta0: float = 2.0,
    theta1: float = 3.0,
    n: int = 101,
    noise: float = 0.0,
    x_range: Tuple[float, float] = (0.0, 1.0),
    seed: int = 0,
) -> SampleSet:
    """
    y = theta0 + theta1 * x + N(0, noise^2) on an evenly spaced x grid.
    With noise=0 the generator is never consulted.
    """
    x = np.linspace(x_range[0], x_range[1], n)
    y = theta0 + theta1 * x
    if noise > 0:
        rng = np.random.default_rng(seed)
        y = y + rng.normal(0.0, noise, size=n)
    return SampleSet(x, y)
