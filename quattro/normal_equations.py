"""
OLS via the normal equations on the n x 2 design matrix X = [1, x]:

    (X^T X) beta = X^T y

X^T X is only 2 x 2, so it is built in O(n) and solved with
np.linalg.solve (LU with partial pivoting) rather than an explicit inverse.
"""

from __future__ import annotations

import numpy as np

from .errors import DegenerateInput
from .models import FittedLine, ThetaVector
from .samples import SampleSet

# det(X^T X) relative to the product of its diagonal; equals S_xx / sum(x^2).
# Below this the 2x2 system is numerically singular.
SINGULAR_RTOL = 1e-12


def normal_matrix(Xb: np.ndarray, y: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
    """Return (X^T X, X^T y)."""
    return Xb.T @ Xb, Xb.T @ y


def relative_determinant(XtX: np.ndarray) -> float:
    diag = float(XtX[0, 0] * XtX[1, 1])
    if diag == 0.0:
        return 0.0
    det = float(XtX[0, 0] * XtX[1, 1] - XtX[0, 1] * XtX[1, 0])
    return det / diag


class NormalEquationsEstimator:
    name = "normal_equations"

    def __init__(self, singular_rtol: float = SINGULAR_RTOL):
        self.singular_rtol = singular_rtol

    def fit(self, samples: SampleSet) -> FittedLine:
        Xb = samples.design_matrix()
        XtX, Xty = normal_matrix(Xb, samples.y)

        if relative_determinant(XtX) <= self.singular_rtol:
            raise DegenerateInput(
                f"X^T X is numerically singular (relative determinant <= {self.singular_rtol:g}); "
                "x is constant or too ill-conditioned for the normal equations"
            )

        beta = np.linalg.solve(XtX, Xty)
        return FittedLine(ThetaVector.from_array(beta), method=self.name)
