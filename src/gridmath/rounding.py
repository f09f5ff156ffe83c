"""Directional rounding of floats onto the integer grid."""

from __future__ import annotations

import logging
import math
from contextlib import contextmanager
from decimal import ROUND_DOWN, ROUND_HALF_UP, Decimal, getcontext, localcontext
from enum import Enum
from typing import Iterator

from gridmath.errors import report_failure

logger = logging.getLogger(__name__)

_COMPONENT = "rounding"

# results must fit a 32 bit signed grid coordinate
INT_MAX = 2 ** 31 - 1
INT_MIN = -(2 ** 31)


class RoundDirection(Enum):
    NEAREST = "nearest"
    UP = "up"
    DOWN = "down"
    TOWARD_ZERO = "toward_zero"


# nearest rounds ties away from zero, matching C round()
_DECIMAL_MODES = {
    RoundDirection.NEAREST: ROUND_HALF_UP,
    RoundDirection.TOWARD_ZERO: ROUND_DOWN,
}


def _coerce_direction(direction):
    if isinstance(direction, RoundDirection):
        return direction
    try:
        return RoundDirection(direction)
    except ValueError:
        return None


@contextmanager
def rounding_mode(mode: str) -> Iterator:
    """Switch the decimal rounding mode for the duration of the block.

    Decimal contexts are thread-local and the previous mode is restored on
    every exit path, exceptions included.
    """
    with localcontext() as ctx:
        ctx.rounding = mode
        yield ctx


def round_double(value: float, direction=RoundDirection.NEAREST) -> int:
    """Round ``value`` to an int in the requested direction.

    Returns 0 (after reporting) for NaN or values outside the 32 bit signed
    range.  An unrecognised ``direction`` rounds with whatever mode the
    current decimal context holds.
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        report_failure(_COMPONENT, "round_double", f"not a number: {value!r}")
        return 0
    if isinstance(value, float) and math.isnan(value):
        report_failure(_COMPONENT, "round_double", f"not a number: {value!r}")
        return 0
    if value > INT_MAX:
        report_failure(_COMPONENT, "round_double", "int overflow")
        return 0
    if value < INT_MIN:
        report_failure(_COMPONENT, "round_double", "int underflow")
        return 0

    rnd = _coerce_direction(direction)
    if rnd is RoundDirection.UP:
        return int(round(math.ceil(value)))
    if rnd is RoundDirection.DOWN:
        return int(round(math.floor(value)))
    if rnd is None:
        logger.debug("unrecognised direction %r, using %s", direction, getcontext().rounding)
        return int(Decimal(value).to_integral_value())

    mode = _DECIMAL_MODES[rnd]
    with rounding_mode(mode):
        # to_integral_value reads the thread's active context, not the yielded one
        if getcontext().rounding != mode:
            report_failure(_COMPONENT, "round_double", "rounding mode switch failed")
            return int(round(value))
        return int(Decimal(value).to_integral_value())


__all__ = [
    "INT_MAX",
    "INT_MIN",
    "RoundDirection",
    "rounding_mode",
    "round_double",
]
