"""Point value types shared by the geometry modules."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Sequence, Tuple


@dataclass(frozen=True)
class CartesianPoint:
    """Raw geometric coordinate."""

    x: float
    y: float


@dataclass(frozen=True)
class LineLengthPoint:
    """Grid-snapped point carrying an associated distance.

    Used both as an input vertex (``dist`` is ignored) and as the result of
    the midpoint and centroid solvers, where ``dist`` holds the derived
    length.
    """

    x: int
    y: int
    dist: float = 0.0


@dataclass(frozen=True)
class PlotCoordinate:
    """Absolute grid coordinate, origin at the upper left corner."""

    x: int
    y: int
    marker: str = "*"
    extra: int = 0


class EllipsePoints(Sequence[CartesianPoint]):
    """Ordered samples along an ellipse boundary.

    Points are relative to the ellipse center.  ``value_count`` reports the
    number of coordinate values (two per point), which is what plotting
    code sizes its buffers with.
    """

    __slots__ = ("_points",)

    def __init__(self, points: Sequence[CartesianPoint]):
        self._points: Tuple[CartesianPoint, ...] = tuple(points)

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[CartesianPoint]:
        return iter(self._points)

    def __getitem__(self, index):
        return self._points[index]

    def __eq__(self, other) -> bool:
        if isinstance(other, EllipsePoints):
            return self._points == other._points
        return NotImplemented

    def __repr__(self) -> str:
        return f"EllipsePoints({len(self._points)} points)"

    @property
    def value_count(self) -> int:
        return 2 * len(self._points)

    def flatten(self) -> List[float]:
        """Return the interleaved ``[x0, y0, x1, y1, ...]`` form."""

        flat: List[float] = []
        for pnt in self._points:
            flat.append(pnt.x)
            flat.append(pnt.y)
        return flat


__all__ = [
    "CartesianPoint",
    "LineLengthPoint",
    "PlotCoordinate",
    "EllipsePoints",
]
