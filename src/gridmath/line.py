"""Line measurements and point-slope solving on the integer grid.

Points are anything with ``x`` and ``y`` attributes, normally
:class:`~gridmath.points.LineLengthPoint`.  Solved coordinates are
rounded with a :class:`~gridmath.rounding.RoundDirection`.
"""

from __future__ import annotations

import logging
import math
from typing import Optional

from gridmath.compare import equal_to, not_equal
from gridmath.config import get_config
from gridmath.errors import Failure, report_failure
from gridmath.points import LineLengthPoint
from gridmath.precision import PrecisionContext
from gridmath.rounding import RoundDirection, round_double

logger = logging.getLogger(__name__)

_COMPONENT = "line"


def _same_coords(p1, p2) -> bool:
    return p1.x == p2.x and p1.y == p2.y


def distance(p1, p2) -> float:
    """Euclidean distance between two points; 0 when they coincide."""
    if _same_coords(p1, p2):
        return 0.0
    return math.sqrt((p2.x - p1.x) ** 2 + (p2.y - p1.y) ** 2)


def slope(p1, p2) -> float:
    """Slope of the line through two points.

    Vertical lines and coincident points also give 0; check ``p1.x ==
    p2.x`` to tell them apart from a horizontal line.
    """
    if _same_coords(p1, p2) or p2.x == p1.x:
        return 0.0
    return (p2.y - p1.y) / (p2.x - p1.x)


def verify_slope(p1, p2, expected: float, precision: int,
                 context: Optional[PrecisionContext] = None) -> bool:
    """Do ``p1`` and ``p2`` form a line of slope ``expected``?"""
    computed = slope(p1, p2)
    if equal_to(0.0, computed, get_config().default_precision, context):
        report_failure(_COMPONENT, "verify_slope", "computed slope is zero or undefined")
    return equal_to(computed, expected, precision, context)


def midpoint(p1, p2, direction=RoundDirection.NEAREST) -> LineLengthPoint | Failure:
    """Midpoint of the segment ``p1``-``p2``, with ``dist`` = half its length.

    Half of each coordinate span is rounded and then offset from the
    smaller coordinate, so the rounded operand is never negative.
    """
    if p1 is None:
        return report_failure(_COMPONENT, "midpoint", "missing first point")
    if p2 is None:
        return report_failure(_COMPONENT, "midpoint", "missing second point")
    if p1 is p2:
        return report_failure(_COMPONENT, "midpoint", "duplicate points do not have a midpoint")
    if _same_coords(p1, p2):
        return report_failure(_COMPONENT, "midpoint",
                              "duplicate coordinates do not have a midpoint")

    length = distance(p1, p2)
    raw_x = 0.5 * abs(p2.x - p1.x)
    raw_y = 0.5 * abs(p2.y - p1.y)
    mid_x = round_double(raw_x, direction) + min(p1.x, p2.x)
    mid_y = round_double(raw_y, direction) + min(p1.y, p2.y)
    return LineLengthPoint(mid_x, mid_y, length / 2)


def centroid(p1, p2, p3, direction=RoundDirection.NEAREST) -> LineLengthPoint | Failure:
    """Rounded arithmetic-mean center of a triangle's vertices."""
    if p1 is None or p2 is None or p3 is None:
        return report_failure(_COMPONENT, "centroid", "missing vertex")
    if p1 is p2 or p1 is p3 or p2 is p3:
        return report_failure(_COMPONENT, "centroid", "duplicate points can not form a triangle")
    if _same_coords(p1, p2) or _same_coords(p1, p3) or _same_coords(p2, p3):
        return report_failure(_COMPONENT, "centroid",
                              "duplicate coordinates are not a triangle")

    raw_x = (p1.x + p2.x + p3.x) / 3
    raw_y = (p1.y + p2.y + p3.y) / 3
    center = LineLengthPoint(round_double(raw_x, direction), round_double(raw_y, direction))
    logger.debug("triangle centroid (%d, %d)", center.x, center.y)
    return center


def solve_point_slope_x(known_x1: int, known_y1: int, target_y0: int, slope: float,
                        direction=RoundDirection.NEAREST,
                        context: Optional[PrecisionContext] = None) -> int:
    """x on the line through ``(known_x1, known_y1)`` at height ``target_y0``.

    A horizontal line has no single answer, so a slope of 0 gives 0.
    """
    if not not_equal(slope, 0.0, get_config().default_precision, context):
        logger.debug("solve_point_slope_x: slope %r is zero", slope)
        return 0
    return round_double((target_y0 - known_y1) / slope + known_x1, direction)


def solve_point_slope_y(known_x1: int, known_y1: int, target_x0: int, slope: float,
                        direction=RoundDirection.NEAREST) -> int:
    """y on the line through ``(known_x1, known_y1)`` at ``target_x0``."""
    return round_double(slope * (target_x0 - known_x1) + known_y1, direction)


__all__ = [
    "distance",
    "slope",
    "verify_slope",
    "midpoint",
    "centroid",
    "solve_point_slope_x",
    "solve_point_slope_y",
]
