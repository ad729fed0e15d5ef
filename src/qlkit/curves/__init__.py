"""
Curves package - discounting curves.

Provides:
- Curve: Node-based curve with discount factors and interpolation
- FlatCurve: Lazy flat curve driven by a rate quote
- Interpolators: linear, log-linear and natural cubic spline
"""

from .curve import Curve, CurveNode, FlatCurve, create_flat_curve
from .interpolation import (
    Interpolator,
    LinearInterpolator,
    LogLinearInterpolator,
    CubicSplineInterpolator,
    create_interpolator,
)

__all__ = [
    "Curve",
    "CurveNode",
    "FlatCurve",
    "create_flat_curve",
    "Interpolator",
    "LinearInterpolator",
    "LogLinearInterpolator",
    "CubicSplineInterpolator",
    "create_interpolator",
]
