"""
Closed-form simple linear regression (method of moments / Gaussian MLE).

    theta1 = sum((x - x_bar) * (y - y_bar)) / sum((x - x_bar)^2)
    theta0 = y_bar - theta1 * x_bar
"""

from __future__ import annotations

import numpy as np

from .errors import DegenerateInput
from .models import FittedLine, ThetaVector
from .samples import SampleSet


class ClosedFormEstimator:
    name = "closed_form"

    def fit(self, samples: SampleSet) -> FittedLine:
        x, y = samples.x, samples.y
        # mean of identical floats can round away from the value itself
        if np.all(x == x[0]):
            raise DegenerateInput("all x values are identical; slope is undefined")
        x_bar = float(np.mean(x))
        y_bar = float(np.mean(y))
        dx = x - x_bar

        sxx = float(dx @ dx)
        if sxx == 0.0:
            raise DegenerateInput("all x values are identical; slope is undefined")
        sxy = float(dx @ (y - y_bar))

        theta1 = sxy / sxx
        theta0 = y_bar - theta1 * x_bar
        return FittedLine(ThetaVector(theta0, theta1), method=self.name)
