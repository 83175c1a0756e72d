"""
Random-walk Metropolis-Hastings over (theta0, theta1, sigma).

Target: the Gaussian likelihood of the data,

    log L = -n * log(sqrt(2 pi sigma^2)) - sum((y - theta0 - theta1 x)^2) / (2 sigma^2)

with a flat (improper) prior, so the acceptance ratio is the likelihood
ratio alone. Proposals add independent N(0, 1) steps to every coordinate;
the step size is fixed and not tuned.

Each iteration appends exactly one state to the chain: the proposal if it
was accepted, otherwise the current state again. Repeats are what make the
post-burn-in average reflect how long the chain stayed at each point.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Tuple

import numpy as np
import pandas as pd

from .errors import InvalidConfig
from .models import ThetaVector
from .samples import SampleSet

PROPOSAL_SCALE = 1.0
LOG_SQRT_2PI = 0.5 * np.log(2.0 * np.pi)


# ---------- state & chain ----------
@dataclass(frozen=True)
class MCMCState:
    theta0: float
    theta1: float
    sigma: float

    @property
    def theta(self) -> ThetaVector:
        return ThetaVector(self.theta0, self.theta1)

    def as_array(self) -> np.ndarray:
        return np.array([self.theta0, self.theta1, self.sigma], dtype=float)

    def shifted(self, delta: np.ndarray) -> "MCMCState":
        return MCMCState(
            self.theta0 + float(delta[0]),
            self.theta1 + float(delta[1]),
            self.sigma + float(delta[2]),
        )


class Chain:
    """
    Append-only record of visited states, one per iteration.

    `accepted[i]` says whether state i came from an accepted proposal or is
    a repeat of state i-1 after a rejection.
    """

    COLUMNS = ["theta0", "theta1", "sigma"]

    def __init__(self):
        self._states: List[MCMCState] = []
        self._accepted: List[bool] = []

    def append(self, state: MCMCState, accepted: bool) -> None:
        self._states.append(state)
        self._accepted.append(bool(accepted))

    def __len__(self) -> int:
        return len(self._states)

    def __getitem__(self, i):
        return self._states[i]

    def __iter__(self) -> Iterator[MCMCState]:
        return iter(self._states)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Chain):
            return NotImplemented
        return self._states == other._states and self._accepted == other._accepted

    @property
    def accepted(self) -> np.ndarray:
        return np.asarray(self._accepted, dtype=bool)

    @property
    def acceptance_rate(self) -> float:
        if not self._accepted:
            return float("nan")
        return float(np.mean(self._accepted))

    def as_array(self) -> np.ndarray:
        """(len, 3) array of [theta0, theta1, sigma] rows."""
        if not self._states:
            return np.empty((0, 3))
        return np.array([[s.theta0, s.theta1, s.sigma] for s in self._states], dtype=float)

    def to_frame(self) -> pd.DataFrame:
        df = pd.DataFrame(self.as_array(), columns=self.COLUMNS)
        df["accepted"] = self.accepted
        df.index.name = "iteration"
        return df

    def __repr__(self) -> str:
        return f"Chain(len={len(self)}, acceptance_rate={self.acceptance_rate:.3f})"


# ---------- likelihood ----------
def log_likelihood(samples: SampleSet, state: MCMCState) -> float:
    """Gaussian log-likelihood; -inf for sigma <= 0 (outside the support)."""
    sigma = state.sigma
    if not sigma > 0:
        return -np.inf
    r = samples.y - (state.theta0 + state.theta1 * samples.x)
    ssr = float(r @ r)
    return float(-samples.n * (LOG_SQRT_2PI + np.log(sigma)) - ssr / (2.0 * sigma * sigma))


def log_acceptance_ratio(logl_proposed: float, logl_current: float) -> float:
    if logl_proposed == -np.inf:
        return -np.inf
    if logl_current == -np.inf:
        return np.inf
    return logl_proposed - logl_current


# ---------- config ----------
@dataclass(frozen=True)
class SamplerConfig:
    initial_state: MCMCState
    iterations: int
    seed: int = 0

    def __post_init__(self):
        _validate_run_args(self.initial_state, self.iterations, self.seed)
        object.__setattr__(self, "iterations", int(self.iterations))


def _validate_run_args(initial: MCMCState, iterations: int, seed: int) -> None:
    # None would make default_rng pull OS entropy
    if isinstance(seed, bool) or not isinstance(seed, (int, np.integer)):
        raise InvalidConfig(f"seed must be an integer, got {seed!r}")
    if isinstance(iterations, bool) or int(iterations) != iterations or iterations <= 0:
        raise InvalidConfig(f"iterations must be a positive integer, got {iterations}")
    if not (np.isfinite(initial.sigma) and initial.sigma > 0):
        raise InvalidConfig(f"initial sigma must be > 0, got {initial.sigma}")
    if not (np.isfinite(initial.theta0) and np.isfinite(initial.theta1)):
        raise InvalidConfig(f"initial theta must be finite, got ({initial.theta0}, {initial.theta1})")


# ---------- sampler ----------
class MetropolisHastingsSampler:
    name = "metropolis_hastings"

    def __init__(self, verbose_every: int = 0):
        self.verbose_every = verbose_every

    def step(
        self,
        samples: SampleSet,
        current: MCMCState,
        logl_current: float,
        rng: np.random.Generator,
    ) -> Tuple[MCMCState, float, bool]:
        """
        One propose / score / accept-or-reject transition.
        Returns (next_state, its log-likelihood, accepted).
        """
        proposed = current.shifted(rng.normal(0.0, PROPOSAL_SCALE, size=3))
        logl_proposed = log_likelihood(samples, proposed)
        log_ratio = log_acceptance_ratio(logl_proposed, logl_current)

        if log_ratio >= 0:
            return proposed, logl_proposed, True
        if log_ratio == -np.inf:
            return current, logl_current, False

        u = rng.random()
        if np.log(u) < log_ratio:
            return proposed, logl_proposed, True
        return current, logl_current, False

    def run(self, samples: SampleSet, initial: MCMCState, iterations: int, seed: int) -> Chain:
        _validate_run_args(initial, iterations, seed)
        rng = np.random.default_rng(seed)

        chain = Chain()
        state = initial
        logl = log_likelihood(samples, state)

        with np.errstate(divide="ignore", over="ignore"):
            for t in range(int(iterations)):
                state, logl, accepted = self.step(samples, state, logl, rng)
                chain.append(state, accepted)

                if self.verbose_every and ((t + 1) % self.verbose_every == 0):
                    print(
                        f"[mh] iter {t + 1:7d}  logL={logl:.3f}  "
                        f"state=({state.theta0:.4f}, {state.theta1:.4f}, {state.sigma:.4f})  "
                        f"acc={chain.acceptance_rate:.3f}"
                    )

        return chain

    def run_config(self, samples: SampleSet, config: SamplerConfig) -> Chain:
        return self.run(samples, config.initial_state, config.iterations, config.seed)
