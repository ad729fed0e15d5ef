"""
Interpolation methods for yield curves.

Provides:
- LinearInterpolator: Linear on zero rates
- LogLinearInterpolator: Linear on log discount factors
- CubicSplineInterpolator: Natural cubic spline on zero rates

All interpolators take year fractions as x-coordinates and continuously
compounded zero rates as y-coordinates, and return zero rates. Outside
the node range values are extrapolated flat.
"""

from abc import ABC, abstractmethod
from typing import Optional

import numpy as np
from scipy.interpolate import CubicSpline

from ..errors import InvalidArgumentError, PricingError


class Interpolator(ABC):
    """Abstract base class for curve interpolation."""

    def __init__(self):
        self.times: Optional[np.ndarray] = None
        self.values: Optional[np.ndarray] = None

    def fit(self, times: np.ndarray, values: np.ndarray) -> None:
        """
        Fit the interpolator to data points.

        Args:
            times: Array of year fractions
            values: Array of zero rates
        """
        times = np.asarray(times, dtype=np.float64)
        values = np.asarray(values, dtype=np.float64)
        if len(times) != len(values):
            raise InvalidArgumentError("Times and values must have same length")
        if len(times) < 2:
            raise InvalidArgumentError("Need at least 2 points for interpolation")

        idx = np.argsort(times)
        self.times = times[idx]
        self.values = values[idx]
        self._fit()

    def _fit(self) -> None:
        pass

    def _check_fitted(self) -> None:
        if self.times is None:
            raise PricingError("Interpolator not fitted")

    def interpolate(self, t: float) -> float:
        """Interpolated zero rate at t (flat outside the node range)."""
        self._check_fitted()
        if t <= self.times[0]:
            return float(self.values[0])
        if t >= self.times[-1]:
            return float(self.values[-1])
        return self._interpolate(t)

    @abstractmethod
    def _interpolate(self, t: float) -> float:
        """Value strictly inside the node range."""

    def __call__(self, t: float) -> float:
        return self.interpolate(t)


class LinearInterpolator(Interpolator):
    """Linear interpolation on zero rates."""

    def _interpolate(self, t: float) -> float:
        return float(np.interp(t, self.times, self.values))


class LogLinearInterpolator(Interpolator):
    """
    Log-linear interpolation on discount factors.

    Equivalent to piecewise-constant instantaneous forward rates.
    """

    def _fit(self) -> None:
        self._log_dfs = -self.values * self.times

    def _interpolate(self, t: float) -> float:
        log_df = float(np.interp(t, self.times, self._log_dfs))
        return -log_df / t


class CubicSplineInterpolator(Interpolator):
    """
    Natural cubic spline on zero rates.

    Second derivative is zero at both ends.
    """

    def _fit(self) -> None:
        self._spline = CubicSpline(self.times, self.values, bc_type="natural")

    def _interpolate(self, t: float) -> float:
        return float(self._spline(t))


def create_interpolator(method: str) -> Interpolator:
    """
    Factory function for interpolators.

    Args:
        method: One of "linear", "log_linear", "cubic_spline"
    """
    methods = {
        "linear": LinearInterpolator,
        "log_linear": LogLinearInterpolator,
        "cubic_spline": CubicSplineInterpolator,
    }
    if method not in methods:
        raise InvalidArgumentError(f"Unknown interpolation method: {method}")
    return methods[method]()


__all__ = [
    "Interpolator",
    "LinearInterpolator",
    "LogLinearInterpolator",
    "CubicSplineInterpolator",
    "create_interpolator",
]
