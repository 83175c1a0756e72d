"""
Error kinds raised by the estimators.

All of them are ValueErrors: they signal a bad argument, raised at the
point of detection and never retried.
"""

from __future__ import annotations


class QuattroError(ValueError):
    """Base class for every error this package raises."""


class DimensionMismatch(QuattroError):
    """x and y have different lengths, wrong shape, or too few points."""


class InvalidValue(QuattroError):
    """Input contains NaN or +/-Inf."""


class DegenerateInput(QuattroError):
    """Zero-variance x: the least-squares problem has no unique solution."""


class InvalidConfig(QuattroError):
    """Out-of-range hyperparameter (learning rate, iterations, sigma, burn-in)."""
