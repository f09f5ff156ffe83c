"""Triangle area and point containment on the integer grid."""

from __future__ import annotations

import logging
import math
from typing import Optional

from gridmath.compare import equal_to, less_than
from gridmath.config import get_config
from gridmath.errors import report_failure
from gridmath.line import distance
from gridmath.precision import PrecisionContext

logger = logging.getLogger(__name__)

_COMPONENT = "triangle"

# returned by triangle_area() for vertices that do not form a triangle
NOT_A_TRIANGLE = -1.0


def triangle_area(a, b, c, context: Optional[PrecisionContext] = None) -> float:
    """Area of triangle ``abc`` by Heron's formula.

    Returns ``-1.0`` when two vertices coincide or all three share an x or
    a y value.
    """
    if (a.x == b.x and a.y == b.y) or (a.x == c.x and a.y == c.y) or (b.x == c.x and b.y == c.y):
        report_failure(_COMPONENT, "triangle_area", "duplicate coordinates are not a triangle")
        return NOT_A_TRIANGLE
    if (a.x == b.x and a.x == c.x) or (a.y == b.y and a.y == c.y):
        report_failure(_COMPONENT, "triangle_area", "line coordinates are not a triangle")
        return NOT_A_TRIANGLE

    len_ab = distance(a, b)
    len_bc = distance(b, c)
    len_ca = distance(c, a)
    semi = (len_ab + len_bc + len_ca) / 2

    precision = get_config().default_precision
    if (equal_to(semi, len_ab, precision, context)
            or equal_to(semi, len_bc, precision, context)
            or equal_to(semi, len_ca, precision, context)):
        logger.debug("points (%s, %s), (%s, %s), (%s, %s) form a line",
                     a.x, a.y, b.x, b.y, c.x, c.y)

    # rounding can push a flat triangle's product slightly negative
    product = semi * ((semi - len_ab) * (semi - len_bc) * (semi - len_ca))
    return math.sqrt(max(product, 0.0))


def point_in_triangle(a, b, c, pnt, precision: int,
                      context: Optional[PrecisionContext] = None) -> bool:
    """Does ``pnt`` lie inside triangle ``abc``?

    The three triangles formed by ``pnt`` and each edge must add up to the
    whole triangle, to within ``precision`` digits.

    Heron's formula leaves a few ulps of error in each of the four areas,
    so for coordinates of modest size only about 12 digits are reliable.
    At 15 digits (the configured default) points well inside the triangle
    can be rejected; pass a smaller ``precision`` for containment tests.
    """
    areas = (
        ("A B point", triangle_area(a, b, pnt, context)),
        ("B C point", triangle_area(b, c, pnt, context)),
        ("C A point", triangle_area(c, a, pnt, context)),
        ("A B C", triangle_area(a, b, c, context)),
    )
    for name, area in areas:
        if less_than(area, 0.0, precision, context):
            report_failure(_COMPONENT, "point_in_triangle",
                           f"triangle_area failed on triangle {name}")
            return False

    sub_total = areas[0][1] + areas[1][1] + areas[2][1]
    return equal_to(areas[3][1], sub_total, precision, context)


__all__ = [
    "NOT_A_TRIANGLE",
    "triangle_area",
    "point_in_triangle",
]
