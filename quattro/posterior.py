"""
Reduce a Metropolis-Hastings chain to point estimates.

Burn-in is a fixed cutoff: the first `burn_in` states are dropped and the
rest are averaged.
"""

from __future__ import annotations

import numpy as np
import pandas as pd

from .errors import InvalidConfig
from .metropolis import Chain
from .models import ThetaVector


def post_burn_in(chain: Chain, burn_in: int) -> np.ndarray:
    """(len(chain) - burn_in, 3) array of the kept [theta0, theta1, sigma] rows."""
    if isinstance(burn_in, bool) or int(burn_in) != burn_in or burn_in < 0:
        raise InvalidConfig(f"burn_in must be a non-negative integer, got {burn_in}")
    if burn_in >= len(chain):
        raise InvalidConfig(
            f"burn_in={burn_in} leaves no samples in a chain of length {len(chain)}"
        )
    return chain.as_array()[int(burn_in):]


def summarize(chain: Chain, burn_in: int) -> ThetaVector:
    kept = post_burn_in(chain, burn_in)
    return ThetaVector(float(kept[:, 0].mean()), float(kept[:, 1].mean()))


def summarize_sigma(chain: Chain, burn_in: int) -> float:
    return float(post_burn_in(chain, burn_in)[:, 2].mean())


def describe(chain: Chain, burn_in: int) -> pd.DataFrame:
    """Mean, std and central 95% interval of each parameter after burn-in."""
    kept = pd.DataFrame(post_burn_in(chain, burn_in), columns=Chain.COLUMNS)
    out = pd.DataFrame({
        "mean": kept.mean(),
        "std": kept.std(ddof=1) if len(kept) > 1 else 0.0,
        "q2.5": kept.quantile(0.025),
        "q97.5": kept.quantile(0.975),
    })
    out.index.name = "param"
    return out


class PosteriorSummarizer:
    """Holds a burn-in cutoff so it can be configured once and reused."""

    def __init__(self, burn_in: int = 0):
        if isinstance(burn_in, bool) or int(burn_in) != burn_in or burn_in < 0:
            raise InvalidConfig(f"burn_in must be a non-negative integer, got {burn_in}")
        self.burn_in = int(burn_in)

    def summarize(self, chain: Chain) -> ThetaVector:
        return summarize(chain, self.burn_in)

    def describe(self, chain: Chain) -> pd.DataFrame:
        return describe(chain, self.burn_in)
