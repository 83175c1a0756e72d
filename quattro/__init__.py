"""
Regression Quattro Stagioni: four ways to fit y = theta0 + theta1 * x.

- ClosedFormEstimator        analytic OLS / Gaussian MLE
- NormalEquationsEstimator   (X^T X) beta = X^T y on the design matrix
- GradientDescentEstimator   full-batch descent on squared loss
- MetropolisHastingsSampler  random-walk MCMC, reduced by PosteriorSummarizer
"""

from .closed_form import ClosedFormEstimator
from .errors import (
    DegenerateInput,
    DimensionMismatch,
    InvalidConfig,
    InvalidValue,
    QuattroError,
)
from .gradient_descent import GradientDescentConfig, GradientDescentEstimator, Trajectory
from .metropolis import (
    Chain,
    MCMCState,
    MetropolisHastingsSampler,
    SamplerConfig,
    log_likelihood,
)
from .models import Estimator, FittedLine, ThetaVector
from .normal_equations import NormalEquationsEstimator
from .posterior import PosteriorSummarizer, describe, summarize, summarize_sigma
from .samples import SampleSet, add_bias, simulate_linear

__all__ = [
    "Chain",
    "ClosedFormEstimator",
    "DegenerateInput",
    "DimensionMismatch",
    "Estimator",
    "FittedLine",
    "GradientDescentConfig",
    "GradientDescentEstimator",
    "InvalidConfig",
    "InvalidValue",
    "MCMCState",
    "MetropolisHastingsSampler",
    "NormalEquationsEstimator",
    "PosteriorSummarizer",
    "QuattroError",
    "SampleSet",
    "SamplerConfig",
    "ThetaVector",
    "Trajectory",
    "add_bias",
    "describe",
    "log_likelihood",
    "simulate_linear",
    "summarize",
    "summarize_sigma",
]
