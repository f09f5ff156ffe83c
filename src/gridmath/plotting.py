"""Window centering and translation of relative samples onto the grid.

Grid coordinates follow the terminal convention: ``(0, 0)`` is the upper
left corner, x grows to the right and y grows downward.  Samples produced
by :mod:`gridmath.ellipse` are relative to a center with y growing upward,
so translation flips the y axis.
"""

from __future__ import annotations

import logging
import math
from enum import Enum
from typing import Any, Iterable, List, Optional, Protocol, Tuple

from gridmath.config import get_config
from gridmath.errors import Failure, is_failure, report_failure
from gridmath.points import CartesianPoint, PlotCoordinate
from gridmath.rounding import INT_MAX, INT_MIN, RoundDirection, round_double

logger = logging.getLogger(__name__)

_COMPONENT = "plotting"

# smallest window that still has an interior cell
MIN_DIMENSION = 3


class Orientation(Enum):
    """Which way an even dimension's center leans."""

    UPPER_LEFT = 1
    UPPER_RIGHT = 2
    LOWER_LEFT = 3
    LOWER_RIGHT = 4


def determine_center(width: int, height: int,
                     orientation=Orientation.UPPER_LEFT) -> Tuple[int, int] | Failure:
    """Return the 1-based center cell of a ``width`` x ``height`` window.

    Odd dimensions have an exact center.  Even dimensions lean toward the
    side named by ``orientation``; anything that is not an
    :class:`Orientation` is treated as ``UPPER_LEFT``.
    """
    if width < MIN_DIMENSION:
        return report_failure(_COMPONENT, "determine_center", f"invalid width {width}")
    if height < MIN_DIMENSION:
        return report_failure(_COMPONENT, "determine_center", f"invalid height {height}")

    if not isinstance(orientation, Orientation):
        try:
            orientation = Orientation(orientation)
        except ValueError:
            orientation = Orientation.UPPER_LEFT

    real_width = width
    if not width & 1:
        if orientation in (Orientation.UPPER_RIGHT, Orientation.LOWER_RIGHT):
            real_width = width + 1
        else:
            real_width = width - 1

    real_height = height
    if not height & 1:
        if orientation in (Orientation.LOWER_LEFT, Orientation.LOWER_RIGHT):
            real_height = height + 1
        else:
            real_height = height - 1

    return (real_width - 1) // 2 + 1, (real_height - 1) // 2 + 1


def translate_plot_point(rel_x: int, rel_y: int,
                         center_x: int, center_y: int) -> Tuple[int, int] | Failure:
    """Map a center-relative point to absolute grid coordinates."""
    if center_x < 1 or center_y < 1:
        return report_failure(_COMPONENT, "translate_plot_point", "invalid center coordinates")
    abs_x = center_x + rel_x
    abs_y = center_y - rel_y
    if abs_x < 0 or abs_y < 0:
        return report_failure(_COMPONENT, "translate_plot_point",
                              f"relative point ({rel_x}, {rel_y}) falls off the grid")
    return abs_x, abs_y


def build_geometric_list(points: Iterable[CartesianPoint], center_x: int, center_y: int,
                         marker: Optional[str] = None) -> List[PlotCoordinate] | Failure:
    """Round and translate relative samples into absolute plot coordinates.

    Each coordinate is rounded up before translation.  Either every point
    is translated or a :class:`Failure` comes back; partial lists are
    never returned.
    """
    if center_x < 0:
        return report_failure(_COMPONENT, "build_geometric_list", f"invalid center x {center_x}")
    if center_y < 0:
        return report_failure(_COMPONENT, "build_geometric_list", f"invalid center y {center_y}")
    if marker is None:
        marker = get_config().plot_marker

    coords: List[PlotCoordinate] = []
    for pnt in points:
        if not (math.isfinite(pnt.x) and math.isfinite(pnt.y)):
            return report_failure(_COMPONENT, "build_geometric_list",
                                  f"non-finite sample ({pnt.x}, {pnt.y})")
        if not (INT_MIN <= pnt.x <= INT_MAX and INT_MIN <= pnt.y <= INT_MAX):
            return report_failure(_COMPONENT, "build_geometric_list",
                                  f"sample ({pnt.x}, {pnt.y}) out of grid range")
        rel_x = round_double(pnt.x, RoundDirection.UP)
        rel_y = round_double(pnt.y, RoundDirection.UP)
        translated = translate_plot_point(rel_x, rel_y, center_x, center_y)
        if is_failure(translated):
            return report_failure(_COMPONENT, "build_geometric_list",
                                  "translate_plot_point failed")
        coords.append(PlotCoordinate(translated[0], translated[1], marker, 0))

    if not coords:
        return report_failure(_COMPONENT, "build_geometric_list", "no points to plot")
    logger.debug("built %d plot coordinates about (%d, %d)", len(coords), center_x, center_y)
    return coords


class CoordinateSink(Protocol):
    """Linked-list container that receives plotted coordinates.

    Every method signals failure by returning ``None`` (``free_*`` return a
    truthy value on success).
    """

    def new_node(self, x: int, y: int, marker: str, extra: int) -> Any:
        ...

    def append(self, head: Any, node: Any) -> Any:
        ...

    def free_node(self, node: Any) -> Any:
        ...

    def free_list(self, head: Any) -> Any:
        ...


def hand_off(coords: Iterable[PlotCoordinate], sink: CoordinateSink) -> Any:
    """Feed ``coords`` into ``sink`` and return the list head, or ``None``.

    If the sink refuses a node, the pending node and the partial list are
    released through the sink before returning.  An empty ``coords`` is
    reported as a failure and yields ``None``.
    """
    coords = list(coords)
    if not coords:
        report_failure(_COMPONENT, "hand_off", "no coordinates to hand off")
        return None

    head = None
    node = None
    for coord in coords:
        node = sink.new_node(coord.x, coord.y, coord.marker, coord.extra)
        if node is None:
            report_failure(_COMPONENT, "hand_off", "new_node failed")
            break
        if head is None:
            head = node
            node = None
            continue
        new_head = sink.append(head, node)
        if new_head is None:
            report_failure(_COMPONENT, "hand_off", "append failed")
            break
        head = new_head
        node = None
    else:
        return head

    if node is not None and not sink.free_node(node):
        report_failure(_COMPONENT, "hand_off", "free_node failed")
    if head is not None and not sink.free_list(head):
        report_failure(_COMPONENT, "hand_off", "free_list failed")
    return None


__all__ = [
    "MIN_DIMENSION",
    "Orientation",
    "determine_center",
    "translate_plot_point",
    "build_geometric_list",
    "CoordinateSink",
    "hand_off",
]
