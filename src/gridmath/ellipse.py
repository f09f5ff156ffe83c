"""Whole-number sampling of an origin-centered ellipse.

The ellipse is given in standard form ::

    x^2   y^2
    --- + --- = 1
    a^2   b^2

and sampled at every whole-number step along its major axis.  Samples run
clockwise starting from the left end of the ellipse, ``(-a, 0)``, and each
pole is visited exactly once, so a plotting layer can connect consecutive
samples without back-tracking.
"""

from __future__ import annotations

import logging
import math
from typing import List, Optional

from gridmath.compare import equal_to, greater_or_equal
from gridmath.config import GridmathConfig, get_config
from gridmath.errors import Failure, report_failure
from gridmath.points import CartesianPoint, EllipsePoints
from gridmath.precision import PrecisionContext
from gridmath.rounding import RoundDirection, round_double

logger = logging.getLogger(__name__)

_COMPONENT = "ellipse"


def _branch(along: float, across: float, coord: float, operation: str) -> Optional[float]:
    """|(across/along) * sqrt(along^2 - coord^2)|, or None out of domain"""
    if not (math.isfinite(along) and math.isfinite(across) and math.isfinite(coord)):
        report_failure(_COMPONENT, operation,
                       f"non-finite input ({along}, {across}, {coord})")
        return None
    if along == 0:
        report_failure(_COMPONENT, operation, "semi-axis along the walk is zero")
        return None
    if across == 0:
        report_failure(_COMPONENT, operation, "semi-axis across the walk is zero")
        return None
    if abs(coord) > abs(along):
        report_failure(_COMPONENT, operation,
                       f"coordinate {coord} lies outside semi-axis {along}")
        return None
    value = along * along - coord * coord
    value = math.sqrt(value)
    value *= across
    value /= along
    return abs(value)


def ellipse_x(a: float, b: float, y: float) -> float:
    """Positive x on the ellipse for ``y``, or 0 if ``y`` is out of domain."""
    value = _branch(b, a, y, "ellipse_x")
    return 0.0 if value is None else value


def ellipse_y(a: float, b: float, x: float) -> float:
    """Positive y on the ellipse for ``x``, or 0 if ``x`` is out of domain."""
    value = _branch(a, b, x, "ellipse_y")
    return 0.0 if value is None else value


def _clamp(value: float, limit: float) -> float:
    return max(-limit, min(limit, value))


def _walk_x_major(major: int, num_points: int):
    """yield ``(x, sign)``: upper branch left to right, lower branch back"""
    half = num_points // 2
    for idx in range(num_points):
        if idx <= half:
            yield -major + idx, 1.0
        else:
            yield major - (idx - half), -1.0


def _walk_y_major(major: int, num_points: int):
    """yield ``(y, sign)`` for the quadrants II, I, IV, III in turn"""
    quarter = num_points // 4
    for idx in range(num_points):
        if idx < quarter:
            # quadrant II, climbing from the y=0 crossing at (-a, 0)
            yield idx, -1.0
        elif idx < 2 * quarter:
            # quadrant I, descending from the top pole
            yield major - (idx - quarter), 1.0
        elif idx < 3 * quarter:
            # quadrant IV, descending from the y=0 crossing at (+a, 0)
            yield -(idx - 2 * quarter), 1.0
        else:
            # quadrant III, climbing from the bottom pole
            yield -major + (idx - 3 * quarter), -1.0


def _allocate(num_points: int, max_tries: int) -> Optional[List[Optional[CartesianPoint]]]:
    tries = 0
    while tries < max_tries:
        tries += 1
        try:
            return [None] * num_points
        except MemoryError:
            logger.debug("point storage allocation attempt %d of %d failed", tries, max_tries)
    return None


def plot_ellipse_points(a: float, b: float,
                        context: Optional[PrecisionContext] = None,
                        config: Optional[GridmathConfig] = None) -> EllipsePoints | Failure:
    """Sample the ellipse with semi-axes ``a`` and ``b`` at whole-number steps.

    The walk follows the major axis (x when ``|a| >= |b|``).  With
    ``m = round(|major semi-axis|)`` the result holds exactly ``4*m``
    points, i.e. ``8*m`` coordinate values.  Returns a :class:`Failure`
    for a zero or non-finite semi-axis, a miscalculated point count,
    exhausted storage allocation or a sample that falls off the ellipse.
    """
    if config is None:
        config = get_config()
    precision = config.default_precision

    if not (math.isfinite(a) and math.isfinite(b)):
        return report_failure(_COMPONENT, "plot_ellipse_points",
                              f"semi-axes must be finite, got ({a}, {b})")
    if equal_to(a, 0.0, precision, context):
        return report_failure(_COMPONENT, "plot_ellipse_points", "a is zero")
    if equal_to(b, 0.0, precision, context):
        return report_failure(_COMPONENT, "plot_ellipse_points", "b is zero")

    a_abs = abs(a)
    b_abs = abs(b)
    choose_x = greater_or_equal(a_abs, b_abs, precision, context)
    major = round_double(a_abs if choose_x else b_abs, RoundDirection.NEAREST)

    # half the major axis, four quadrants, two values per coordinate pair
    num_values = major * 4 * 2
    if num_values < 8 or num_values % 4:
        return report_failure(_COMPONENT, "plot_ellipse_points",
                              "number of points miscalculated")
    num_points = num_values // 2

    points = _allocate(num_points, config.max_alloc_tries)
    if points is None:
        return report_failure(_COMPONENT, "plot_ellipse_points",
                              f"allocation failed after {config.max_alloc_tries} attempts")

    if choose_x:
        for idx, (step, sign) in enumerate(_walk_x_major(major, num_points)):
            x = _clamp(float(step), a_abs)
            y = _branch(a_abs, b_abs, x, "plot_ellipse_points")
            if y is None:
                points.clear()
                return report_failure(_COMPONENT, "plot_ellipse_points",
                                      f"y coordinate failed at x={x}")
            points[idx] = CartesianPoint(x + 0.0, sign * y + 0.0)
    else:
        for idx, (step, sign) in enumerate(_walk_y_major(major, num_points)):
            y = _clamp(float(step), b_abs)
            x = _branch(b_abs, a_abs, y, "plot_ellipse_points")
            if x is None:
                points.clear()
                return report_failure(_COMPONENT, "plot_ellipse_points",
                                      f"x coordinate failed at y={y}")
            points[idx] = CartesianPoint(sign * x + 0.0, y + 0.0)

    logger.debug("sampled %d points for ellipse a=%s b=%s", num_points, a, b)
    return EllipsePoints(points)


__all__ = [
    "ellipse_x",
    "ellipse_y",
    "plot_ellipse_points",
]
